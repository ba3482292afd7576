"""
LibraryProvider -- locates the optional dictionary sources and wires
them into the did-you-mean cache, autotagging and geolocation.

Sources are staged (already downloaded) in <root>/source. Nothing
here is fatal: a missing or broken source just leaves the
corresponding facility without that data.
"""

import logging
import os

from rdflib.exceptions import ParserError

from dictionaries import compressedfiles, derewo, dictconfig, pnd
from dictionaries.autotagging import Autotagging
from dictionaries.dictionary import DRW0, GEODB0, GEODB1, GEON0, PND0
from dictionaries.geolocation.geonames import GeonamesLocation
from dictionaries.geolocation.opengeodb import OpenGeoDBLocation
from dictionaries.geolocation.overarchinglocation import OverarchingLocation
from dictionaries.triplestore import TripleStore
from dictionaries.wordcache import WordCache

logger = logging.getLogger(__name__)

# Process-wide provider, set by initialize()
library = None


def _mkdirs(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        logger.warning('cannot create directory %s', path)


class LibraryProvider(object):

    """
    Paths and collaborators for one dictionary root.

    Attributes:
        root: dictionary root directory
        source_dir: staged source files
        dym_dir: derived did-you-mean word lists
        autotagging_dir: vocabulary definitions
        dym_lib (WordCache), autotagging (Autotagging),
        geo_loc (OverarchingLocation), triplestore (TripleStore)
    """

    def __init__(self, root):
        self.root = root
        self.source_dir = os.path.join(root, dictconfig.SOURCE_DIR_NAME)
        self.dym_dir = os.path.join(root, dictconfig.DID_YOU_MEAN_DIR_NAME)
        self.autotagging_dir = os.path.join(root,
                                            dictconfig.AUTOTAGGING_DIR_NAME)
        self.dym_lib = WordCache(None)
        self.autotagging = None
        self.geo_loc = OverarchingLocation()
        self.triplestore = TripleStore()

    def initialize(self):
        """
        Run all initialization steps, in order.
        """
        _mkdirs(self.source_dir)
        self.init_autotagging(dictconfig.TAG_PREFIX)
        self.activate_derewo()
        self.init_did_you_mean()
        self.integrate_opengeodb()
        self.integrate_geonames()
        self.activate_pnd()

        # Copy the tags before the places are attached, otherwise every
        # place name would end up in the did-you-mean cache
        all_tags = set(self.autotagging.all_tags())
        self.autotagging.add_places(self.geo_loc)
        self.dym_lib.learn(all_tags)
        return self

    #======================================================
    # Did-you-mean
    #======================================================

    def init_did_you_mean(self):
        _mkdirs(self.dym_dir)
        self.dym_lib = WordCache(self.dym_dir)

    def derewo_output(self):
        """
        Path of the word list derived from the DeReWo source.
        """
        return os.path.join(self.dym_dir,
                            DRW0.filename + dictconfig.WORDS_EXTENSION)

    def activate_derewo(self):
        """
        Translate the DeReWo archive into a word list, unless that
        has been done already.
        """
        _mkdirs(self.dym_dir)
        return derewo.translate(DRW0.file(self.source_dir),
                                self.derewo_output())

    def deactivate_derewo(self):
        """
        Delete the derived word list; the source archive is kept.
        """
        try:
            os.remove(self.derewo_output())
        except FileNotFoundError:
            pass
        except OSError:
            logger.exception('cannot delete %s', self.derewo_output())

    #======================================================
    # Autotagging
    #======================================================

    def init_autotagging(self, prefix):
        _mkdirs(self.autotagging_dir)
        self.autotagging = Autotagging(self.autotagging_dir, prefix)

    def activate_pnd(self):
        """
        Load the PND triples (if present) and install the Persons
        vocabulary built from the triple store.
        """
        _mkdirs(self.dym_dir)
        source = PND0.file(self.source_dir)
        if os.path.isfile(source):
            try:
                self.triplestore.load_ntriples(compressedfiles.read(source))
            except compressedfiles.ERRORS + (ValueError, ParserError):
                logger.exception('cannot load PND triples from %s', source)
                return
        try:
            vocabulary = pnd.build_vocabulary(self.triplestore)
            logger.info('adding vocabulary to autotagging')
            self.autotagging.add_vocabulary(vocabulary)
        except (OSError, ValueError):
            logger.exception('cannot create PND vocabulary')
            return
        logger.info('added pnd vocabulary to autotagging (%d terms)',
                    vocabulary.size())

    def deactivate_pnd(self):
        self.triplestore.delete_objects(None, dictconfig.PND_PREDICATE)
        if self.autotagging is not None:
            self.autotagging.delete_vocabulary(dictconfig.PND_VOCABULARY)

    #======================================================
    # Geolocation
    #======================================================

    def integrate_opengeodb(self):
        """
        Activate one OpenGeoDB dump: geo1 if present (disabling geo0),
        else geo0.
        """
        geo1 = GEODB1.file(self.source_dir)
        geo0 = GEODB0.file(self.source_dir)
        if os.path.exists(geo1):
            if os.path.exists(geo0):
                try:
                    os.rename(geo0, GEODB0.file_disabled(self.source_dir))
                except OSError:
                    logger.exception('cannot disable %s', geo0)
            self.geo_loc.activate_localization(GEODB1.nickname,
                                               OpenGeoDBLocation(geo1))
        elif os.path.exists(geo0):
            self.geo_loc.activate_localization(GEODB0.nickname,
                                               OpenGeoDBLocation(geo0))

    def integrate_geonames(self):
        geon = GEON0.file(self.source_dir)
        if os.path.exists(geon):
            self.geo_loc.activate_localization(GEON0.nickname,
                                               GeonamesLocation(geon))


def initialize(root_path):
    """
    Initialize the process-wide LibraryProvider for a dictionary root.
    """
    global library
    library = LibraryProvider(root_path).initialize()
    return library


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    provider = initialize(os.path.join(os.getcwd(), 'DATA', 'DICTIONARIES'))
    print('dymDict-size = %d' % provider.dym_lib.size())
    recommendations = provider.dym_lib.recommend('da')
    for word in recommendations:
        print('$ %s' % word)
    print('recommendations: %d' % len(recommendations))
