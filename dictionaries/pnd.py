"""
pnd -- build the 'Persons' vocabulary from DBpedia PND triples

Every subject carrying the individualisedPnd predicate is a person;
its DBpedia resource name, minus any parenthesised qualifier and with
underscores as spaces, becomes the vocabulary term.
"""

import logging

from dictionaries import dictconfig
from dictionaries.autotagging import SOTuple, Tagging

logger = logging.getLogger(__name__)


def term_from_uri(uri):
    """
    Split a subject URI into (term, objectspace).

    Returns (None, None) if the URI has no '/'. The term is '' when
    nothing remains after normalization.

    >>> term_from_uri('http://dbpedia.org/resource/Albert_Einstein_(physicist)')
    ('Albert Einstein', 'http://dbpedia.org/resource/')
    """
    p = uri.rfind('/')
    if p < 0:
        return None, None
    term = uri[p + 1:]
    objectspace = uri[:p + 1]
    p = term.find('(')
    if p >= 0:
        term = term[:p]
    term = term.replace('_', ' ').strip()
    return term, objectspace


def vocabulary_map(subjects):
    """
    Return (objectspace, entries) for an iterable of subject URIs.

    entries maps each term to SOTuple('', uri); on duplicate terms the
    last subject wins. objectspace is the prefix of the last subject
    that produced a term.
    """
    entries = {}
    objectspace = ''
    for subject in subjects:
        term, prefix = term_from_uri(subject)
        if not term:
            continue
        objectspace = prefix
        entries[term] = SOTuple('', subject)
    return objectspace, entries


def build_vocabulary(triplestore):
    """
    Return the Persons vocabulary built from the PND triples in the store.
    """
    logger.info('retrieving PND data from triplestore')
    subjects = triplestore.subjects_of(dictconfig.PND_PREDICATE)
    logger.info('creating vocabulary map from PND triplestore')
    objectspace, entries = vocabulary_map(subjects)
    return Tagging(dictconfig.PND_VOCABULARY, objectspace, entries)
