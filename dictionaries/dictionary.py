"""
Dictionary -- descriptors for the optional source dictionaries.

Each source is identified by a nickname and the URL it is published
under; the name of the staged file in the source directory is the last
path segment of that URL.
"""

import os
from collections import namedtuple
from urllib.parse import urlsplit

from dictionaries import dictconfig


def filename_from_url(url):
    """
    Return the last path segment of a URL.
    """
    path = urlsplit(url).path
    filename = path.rsplit('/', 1)[-1]
    assert filename, 'cannot derive a filename from %s' % url
    return filename


class Dictionary(namedtuple('Dictionary', ['nickname', 'url', 'filename'])):

    """
    Immutable descriptor of one source dictionary.
    """

    __slots__ = ()

    def __new__(cls, nickname, url):
        return super().__new__(cls, nickname, url, filename_from_url(url))

    def file(self, source_dir):
        """
        Path of the active source file.
        """
        return os.path.join(source_dir, self.filename)

    def file_disabled(self, source_dir):
        """
        Path the source file is renamed to when it is deactivated.
        """
        return self.file(source_dir) + dictconfig.DISABLED_EXTENSION


GEODB0 = Dictionary('geo0', dictconfig.GEODB0_URL)
GEODB1 = Dictionary('geo1', dictconfig.GEODB1_URL)
GEON0 = Dictionary('geon0', dictconfig.GEON0_URL)
DRW0 = Dictionary('drw0', dictconfig.DRW0_URL)
PND0 = Dictionary('pnd0', dictconfig.PND0_URL)

DICTIONARIES = (GEODB0, GEODB1, GEON0, DRW0, PND0)


def by_nickname(nickname):
    """
    Return the descriptor with the given nickname, or None.
    """
    for dictionary in DICTIONARIES:
        if dictionary.nickname == nickname:
            return dictionary
    return None
