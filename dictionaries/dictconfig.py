"""
dictconfig -- Configuration for dictionary and vocabulary sources
"""

#======================================================
# Working directories (relative to the dictionary root)
#======================================================

SOURCE_DIR_NAME = 'source'
DID_YOU_MEAN_DIR_NAME = 'didyoumean'
AUTOTAGGING_DIR_NAME = 'autotagging'

DISABLED_EXTENSION = '.disabled'
WORDS_EXTENSION = '.words'
VOCABULARY_EXTENSION = '.vocabulary'


#======================================================
# Autotagging
#======================================================

TAG_PREFIX = '$'


#======================================================
# Source dictionaries (nickname, download URL)
#======================================================

GEODB0_URL = ('http://downloads.sourceforge.net/project/opengeodb/Data/'
              '0.2.5a/opengeodb-0.2.5a-UTF8-sql.gz')
GEODB1_URL = ('http://fa-technik.adfc.de/code/opengeodb/dump/'
              'opengeodb-02624_2011-10-17.sql.gz')
GEON0_URL = 'http://download.geonames.org/export/dump/cities1000.zip'
DRW0_URL = ('http://www.ids-mannheim.de/kl/derewo/'
            'derewo-v-100000t-2009-04-30-0.1.zip')
PND0_URL = 'http://downloads.dbpedia.org/3.7-i18n/de/pnd_de.nt.bz2'


#======================================================
# DeReWo word list
#======================================================

DEREWO_ENTRY = 'derewo-v-100000t-2009-04-30-0.1'
DEREWO_HEADER_END = '# -----'
MIN_WORD_LENGTH = 4


#======================================================
# PND (DBpedia Personennamendatei)
#======================================================

PND_PREDICATE = 'http://dbpedia.org/ontology/individualisedPnd'
PND_VOCABULARY = 'Persons'


#======================================================
# OpenGeoDB / Geonames
#======================================================

OPENGEODB_NAME_TYPE = '500100000'
GEONAMES_ENCODING = 'utf-8'
