import os
import tempfile
import unittest
import zipfile
from unittest import mock

from dictionaries import derewo, dictconfig

HEADER = ('# DeReWo Grundformenliste\n'
          '# (c) Institut fuer Deutsche Sprache\n'
          '# -----------------------------\n'
          '\n')


def make_archive(path, body, entry=dictconfig.DEREWO_ENTRY,
                 compression=zipfile.ZIP_STORED):
    with zipfile.ZipFile(path, 'w', compression=compression) as archive:
        archive.writestr(entry, body.encode('utf-8'))


def damage(path, count=20):
    """
    Flip bytes in the middle of a file (inside the compressed data).
    """
    with open(path, 'rb') as filehandle:
        data = bytearray(filehandle.read())
    middle = len(data) // 2
    for i in range(middle, middle + count):
        data[i] ^= 0xFF
    with open(path, 'wb') as filehandle:
        filehandle.write(bytes(data))


def long_body():
    return HEADER + ''.join('wort%05d %d\n' % (i, i * 7) for i in range(3000))


class TestDerewo(unittest.TestCase):

    """
    Unit tests for the DeReWo word-list extractor
    """

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.source = os.path.join(self.tmp.name, 'derewo.zip')
        self.target = os.path.join(self.tmp.name, 'derewo.zip.words')

    def tearDown(self):
        self.tmp.cleanup()

    def test_translation(self):
        """
        Test the minimal archive: filtered, sorted, lowercased
        """
        make_archive(self.source,
                     '# -----\n\nhaus 1234\nauto 900\nei 50\nbaum 700\n')
        self.assertTrue(derewo.translate(self.source, self.target))
        with open(self.target, encoding='utf-8') as filehandle:
            self.assertEqual(filehandle.read(), 'auto\nbaum\nhaus\n')

    def test_header_and_case(self):
        """
        Test header skipping, lowercasing and deduplication
        """
        make_archive(self.source, HEADER +
                     'Haus 1234\nHAUS 12\n  Straße 80  \nohneZahl\nZug 3\n')
        self.assertEqual(derewo.load_derewo(self.source),
                         ['haus', 'haus', 'straße'])
        self.assertEqual(derewo.load_derewo(self.source, lowercase=False),
                         ['Haus', 'HAUS', 'Straße'])

    def test_first_line_after_header_skipped(self):
        """
        Test that the line following the header marker is consumed
        """
        make_archive(self.source, '# -----\nverloren 1\nbleibt 2\n')
        self.assertEqual(derewo.load_derewo(self.source), ['bleibt'])

    def test_no_header(self):
        """
        Test that a list without header marker yields no words
        """
        make_archive(self.source, 'haus 1234\nauto 900\n')
        self.assertEqual(derewo.load_derewo(self.source), [])

    def test_bad_archive(self):
        """
        Test that a broken archive yields an empty list
        """
        with open(self.source, 'wb') as filehandle:
            filehandle.write(b'this is not a zip file')
        with self.assertLogs('dictionaries.derewo', level='ERROR'):
            self.assertEqual(derewo.load_derewo(self.source), [])

    def test_missing_entry(self):
        """
        Test that an archive without the DeReWo entry yields an empty list
        """
        make_archive(self.source, '# -----\n\nhaus 1\n', entry='other.txt')
        with self.assertLogs('dictionaries.derewo', level='ERROR'):
            self.assertEqual(derewo.load_derewo(self.source), [])

    def test_translate_once(self):
        """
        Test that an existing word list is not rewritten
        """
        make_archive(self.source, '# -----\n\nhaus 1234\n')
        self.assertTrue(derewo.translate(self.source, self.target))
        make_archive(self.source, '# -----\n\nbaum 1234\n')
        self.assertFalse(derewo.translate(self.source, self.target))
        with open(self.target, encoding='utf-8') as filehandle:
            self.assertEqual(filehandle.read(), 'haus\n')

    def test_translate_missing_source(self):
        """
        Test that nothing is written without a source archive
        """
        self.assertFalse(derewo.translate(self.source, self.target))
        self.assertFalse(os.path.exists(self.target))

    def test_damaged_archive(self):
        """
        Test that corrupt compressed data yields an empty list
        """
        make_archive(self.source, long_body(),
                     compression=zipfile.ZIP_DEFLATED)
        self.assertEqual(len(derewo.load_derewo(self.source)), 3000)
        damage(self.source)
        with self.assertLogs('dictionaries.derewo', level='ERROR'):
            self.assertEqual(derewo.load_derewo(self.source), [])

    def test_write_error(self):
        """
        Test that a failed write leaves no word list, so the next
        call retries
        """
        make_archive(self.source, '# -----\n\nhaus 1234\nauto 900\n')

        def failing_write(path, words):
            with open(path, 'w') as filehandle:
                filehandle.write('hau')
            raise OSError('disk full')

        with mock.patch('dictionaries.derewo.write_words',
                        side_effect=failing_write):
            with self.assertLogs('dictionaries.derewo', level='ERROR'):
                self.assertFalse(derewo.translate(self.source, self.target))
        self.assertFalse(os.path.exists(self.target))

        self.assertTrue(derewo.translate(self.source, self.target))
        with open(self.target, encoding='utf-8') as filehandle:
            self.assertEqual(filehandle.read(), 'auto\nhaus\n')

    def test_write_words(self):
        """
        Test derewo.write_words() ordering and replacement
        """
        with open(self.target, 'w') as filehandle:
            filehandle.write('stale\n')
        derewo.write_words(self.target, ['zebra', 'apfel', 'zebra', 'Zange'])
        with open(self.target, encoding='utf-8') as filehandle:
            lines = filehandle.read().splitlines()
        self.assertEqual(lines, ['Zange', 'apfel', 'zebra'])
        self.assertEqual(lines, sorted(set(lines)))


if __name__ == "__main__":
    unittest.main()
