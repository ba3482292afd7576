"""
WordCache -- word store behind the did-you-mean query suggestions
"""

import logging
import os

from dictionaries import dictconfig

logger = logging.getLogger(__name__)


class WordCache(object):

    """
    Holds every known word, lowercased.

    Word lists are read from all the '.words' files in the directory
    (if a directory is given); more words can be added with learn().
    """

    def __init__(self, directory=None):
        self.directory = directory
        self.words = set()
        if directory and os.path.isdir(directory):
            self._load_directory()

    def _load_directory(self):
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(dictconfig.WORDS_EXTENSION):
                continue
            path = os.path.join(self.directory, filename)
            try:
                with open(path, encoding='utf-8') as filehandle:
                    self.learn(filehandle)
            except (OSError, UnicodeDecodeError):
                logger.exception('cannot read word list %s', path)

    def learn(self, words):
        """
        Add words to the cache.
        """
        for word in words:
            word = word.strip().lower()
            if word:
                self.words.add(word)

    def contains(self, word):
        return word.strip().lower() in self.words

    def recommend(self, prefix):
        """
        Return the sorted list of words that extend the prefix.
        """
        prefix = prefix.strip().lower()
        return sorted(w for w in self.words
                      if len(w) > len(prefix) and w.startswith(prefix))

    def size(self):
        return len(self.words)

    def __len__(self):
        return self.size()
