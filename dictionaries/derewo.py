"""
derewo -- translate the DeReWo frequency list into a did-you-mean word list

The DeReWo archive holds a single text entry: a header block closed by
a line starting with '# -----', one blank line, then one record per
line of the form 'word frequency'.
"""

import io
import logging
import os
import zipfile

from dictionaries import compressedfiles, dictconfig

logger = logging.getLogger(__name__)


def load_derewo(path, lowercase=True):
    """
    Return the list of words read from a DeReWo zip archive.

    Words shorter than MIN_WORD_LENGTH are dropped. If the archive
    cannot be read, the error is logged and an empty list is returned.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            with archive.open(dictconfig.DEREWO_ENTRY) as entry:
                reader = io.TextIOWrapper(entry, encoding='utf-8')
                return _parse(reader, lowercase)
    except compressedfiles.ERRORS + (KeyError,):
        logger.exception('cannot read DeReWo list from %s', path)
        return []


def _parse(lines, lowercase):
    lines = iter(lines)

    # Skip the header, then the blank line that follows it
    for line in lines:
        if line.startswith(dictconfig.DEREWO_HEADER_END):
            break
    next(lines, None)

    words = []
    for line in lines:
        line = line.strip()
        p = line.find(' ')
        if p <= 0:
            continue
        word = line[:p].strip()
        if lowercase:
            word = word.lower()
        if len(word) < dictconfig.MIN_WORD_LENGTH:
            continue
        words.append(word)
    return words


def sort_unique(words):
    """
    Return the words deduplicated and in ascending order.
    """
    return sorted(set(words))


def write_words(path, words):
    """
    Write the words, sorted and unique, one per line. Any existing
    file is replaced.
    """
    with open(path, 'w', encoding='utf-8', newline='\n') as filehandle:
        for word in sort_unique(words):
            filehandle.write(word)
            filehandle.write('\n')


def translate(source, target, lowercase=True):
    """
    Create the word list `target` from the DeReWo archive `source`.

    Nothing happens if the target already exists or the source is
    missing. An unreadable archive still produces an empty word list,
    so it is not read again until the list is deleted. If writing
    fails, no list is left behind and the next call retries.
    Returns True if a word list was written.
    """
    if os.path.exists(target) or not os.path.isfile(source):
        return False
    words = load_derewo(source, lowercase=lowercase)
    try:
        write_words(target, words)
    except OSError:
        logger.exception('cannot write word list %s', target)
        # A partial file would block the next attempt
        if os.path.exists(target):
            try:
                os.remove(target)
            except OSError:
                logger.warning('cannot remove partial word list %s', target)
        return False
    logger.info('wrote %d words from %s to %s', len(set(words)),
                source, target)
    return True
