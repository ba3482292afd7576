"""
compressedfiles -- read source files that may be bzip2- or gzip-compressed
"""

import bz2
import gzip
import os
import zipfile
import zlib

# Raised when a source file is missing, truncated or corrupt; zlib.error
# is not an OSError
ERRORS = (OSError, EOFError, zlib.error, zipfile.BadZipFile,
          UnicodeDecodeError)


def opener(path):
    """
    Return the function that opens the file in binary mode,
    chosen by its extension.
    """
    extension = os.path.splitext(path)[1].lower()
    if extension == '.bz2':
        return bz2.open
    elif extension in ('.gz', '.gzip'):
        return gzip.open
    else:
        return open


def read(path):
    """
    Return the (decompressed) content of the file as bytes.
    """
    with opener(path)(path, 'rb') as filehandle:
        return filehandle.read()


def open_text(path, encoding='utf-8'):
    """
    Open the (decompressed) file for reading text line by line.
    """
    return opener(path)(path, 'rt', encoding=encoding)
