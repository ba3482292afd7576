"""
Autotagging -- controlled vocabularies used to tag documents

A vocabulary (Tagging) maps each term to its synonyms and to the URI of
the object it stands for. Vocabularies are read from '.vocabulary'
files in the autotagging directory, or built in memory from other
sources (e.g. the PND person names).
"""

import logging
import os
from collections import namedtuple

from dictionaries import dictconfig

logger = logging.getLogger(__name__)

SOTuple = namedtuple('SOTuple', ['synonyms', 'objectlink'])

OBJECTSPACE_HEADER = '#objectspace:'


class Tagging(object):

    """
    A named vocabulary.

    Arguments:
        name (str): vocabulary name
        objectspace (str): URI prefix under which terms are rooted
        entries (dict): term -> SOTuple(synonyms, objectlink)
    """

    def __init__(self, name, objectspace=None, entries=None):
        if not name:
            raise ValueError('a vocabulary needs a name')
        self.name = name
        self.objectspace = objectspace or ''
        self.entries = {}
        for term, tup in (entries or {}).items():
            term = term.strip()
            if term:
                self.entries[term] = SOTuple(tup.synonyms or '',
                                             tup.objectlink or '')

    @classmethod
    def from_file(cls, path):
        """
        Read a vocabulary file.

        One entry per line: 'term[:synonym,synonym][<TAB>objectlink]'.
        Lines starting with '#' are comments, except for the
        '#objectspace:<uri>' header.
        """
        name = os.path.basename(path)
        if name.endswith(dictconfig.VOCABULARY_EXTENSION):
            name = name[:-len(dictconfig.VOCABULARY_EXTENSION)]
        objectspace = ''
        entries = {}
        with open(path, encoding='utf-8') as filehandle:
            for line in filehandle:
                line = line.strip()
                if not line:
                    continue
                if line.startswith(OBJECTSPACE_HEADER):
                    objectspace = line[len(OBJECTSPACE_HEADER):].strip()
                    continue
                if line.startswith('#'):
                    continue
                line, _, objectlink = line.partition('\t')
                term, _, synonyms = line.partition(':')
                synonyms = ','.join(s.strip() for s in synonyms.split(',')
                                    if s.strip())
                entries[term.strip()] = SOTuple(synonyms, objectlink.strip())
        return cls(name, objectspace, entries)

    def terms(self):
        return set(self.entries.keys())

    def synonyms(self, term):
        try:
            synonyms = self.entries[term].synonyms
        except KeyError:
            return set()
        return {s for s in synonyms.split(',') if s}

    def object_link(self, term):
        """
        Return the URI for a term: its explicit link if it has one,
        otherwise the term appended to the object space.
        """
        try:
            objectlink = self.entries[term].objectlink
        except KeyError:
            return None
        if objectlink:
            return objectlink
        return self.objectspace + term.replace(' ', '_')

    def size(self):
        return len(self.entries)

    def __len__(self):
        return self.size()


class Autotagging(object):

    """
    Registry of vocabularies, plus any place-name sources.
    """

    def __init__(self, directory, prefix=dictconfig.TAG_PREFIX):
        self.directory = directory
        self.prefix = prefix
        self.vocabularies = {}
        self.places = None
        if directory and os.path.isdir(directory):
            self._load_directory()

    def _load_directory(self):
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(dictconfig.VOCABULARY_EXTENSION):
                continue
            path = os.path.join(self.directory, filename)
            try:
                vocabulary = Tagging.from_file(path)
            except (OSError, UnicodeDecodeError, ValueError):
                logger.exception('cannot read vocabulary %s', path)
                continue
            self.vocabularies[vocabulary.name] = vocabulary

    def add_vocabulary(self, vocabulary):
        """
        Register a vocabulary, replacing any with the same name.
        """
        self.vocabularies[vocabulary.name] = vocabulary

    def delete_vocabulary(self, name):
        self.vocabularies.pop(name, None)

    def get_vocabulary(self, name):
        return self.vocabularies.get(name)

    def vocabulary_names(self):
        return sorted(self.vocabularies.keys())

    def add_places(self, locations):
        """
        Attach a place-name source; its names become tags too.
        """
        self.places = locations

    def all_tags(self):
        """
        Return the set of all terms and synonyms of all vocabularies,
        plus all place names.
        """
        tags = set()
        for vocabulary in self.vocabularies.values():
            for term in vocabulary.terms():
                tags.add(term)
                tags.update(vocabulary.synonyms(term))
        if self.places is not None:
            tags.update(self.places.names())
        return tags

    def find(self, term):
        """
        Return a list of (vocabulary name, object link) pairs for
        each vocabulary that knows the term (or has it as a synonym).
        """
        matches = []
        for name in self.vocabulary_names():
            vocabulary = self.vocabularies[name]
            if term in vocabulary.entries:
                matches.append((name, vocabulary.object_link(term)))
                continue
            for main_term in vocabulary.terms():
                if term in vocabulary.synonyms(main_term):
                    matches.append((name, vocabulary.object_link(main_term)))
                    break
        return matches

    def metatag(self, vocabulary, term):
        """
        Render a tag as used in queries, e.g. '$Persons:Albert_Einstein'.
        """
        return '%s%s:%s' % (self.prefix, vocabulary, term.replace(' ', '_'))

    def size(self):
        return len(self.vocabularies)
