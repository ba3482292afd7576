import os
import unittest

from dictionaries import dictionary


class TestDictionary(unittest.TestCase):

    """
    Unit tests for the source dictionary descriptors
    """

    filenames = (
        ('geo0', 'opengeodb-0.2.5a-UTF8-sql.gz'),
        ('geo1', 'opengeodb-02624_2011-10-17.sql.gz'),
        ('geon0', 'cities1000.zip'),
        ('drw0', 'derewo-v-100000t-2009-04-30-0.1.zip'),
        ('pnd0', 'pnd_de.nt.bz2'),
    )

    def test_filenames(self):
        """
        Test that filenames are the last segment of the URL
        """
        for nickname, filename in self.filenames:
            self.assertEqual(dictionary.by_nickname(nickname).filename,
                             filename)

    def test_table(self):
        """
        Test the descriptor table
        """
        self.assertEqual(len(dictionary.DICTIONARIES), 5)
        self.assertEqual([d.nickname for d in dictionary.DICTIONARIES],
                         ['geo0', 'geo1', 'geon0', 'drw0', 'pnd0'])
        self.assertIsNone(dictionary.by_nickname('geo9'))

    def test_paths(self):
        """
        Test Dictionary.file() and Dictionary.file_disabled()
        """
        source_dir = os.path.join('root', 'source')
        self.assertEqual(dictionary.PND0.file(source_dir),
                         os.path.join(source_dir, 'pnd_de.nt.bz2'))
        self.assertEqual(dictionary.PND0.file_disabled(source_dir),
                         os.path.join(source_dir, 'pnd_de.nt.bz2.disabled'))

    def test_bad_url(self):
        """
        Test that a URL without a filename is rejected
        """
        with self.assertRaises(AssertionError):
            dictionary.Dictionary('bad', 'http://example.org/')


if __name__ == "__main__":
    unittest.main()
