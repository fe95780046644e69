import unittest

from hfspaths import preconds
from hfspaths.errors import ConversionError, ErrorKind
from hfspaths.segments import escape_segment, split_path


class SegmentsTest(unittest.TestCase):

    def test_split_path(self):
        for path, expect in (
            ('', ['']),
            ('Macintosh SSD', ['Macintosh SSD']),
            ('Macintosh SSD:folder1:file', ['Macintosh SSD', 'folder1', 'file']),
            ('a::b', ['a', '', 'b']),
            (':', ['', '']),
            ('a:', ['a', '']),
            ('a/b:c/d', ['a/b', 'c/d']),
        ):
            with self.subTest(path):
                self.assertEqual(expect, split_path(path))

    def test_split_path_not_str(self):
        for path in (None, b'a:b', 1):
            with self.subTest(path):
                with self.assertRaises(ConversionError) as cm:
                    split_path(path)
                self.assertIs(cm.exception.kind, ErrorKind.INVALID_PATH)

    def test_escape_segment(self):
        for segment, expect in (
            ('', ''),
            ('file.txt', 'file.txt'),
            ('folder/with/slashes', 'folder:with:slashes'),
            ('/', ':'),
            ('//x/', '::x:'),
        ):
            with self.subTest(segment):
                actual = escape_segment(segment)
                self.assertEqual(expect, actual)
                self.assertNotIn('/', actual)
                self.assertEqual(
                    [i for i, c in enumerate(segment) if c == '/'],
                    [i for i, c in enumerate(actual) if c == ':'],
                )


class PrecondsTest(unittest.TestCase):

    def test_check_path(self):
        preconds.check_path(True)
        preconds.check_path(True, 'Message: %s', 'Hello world')
        with self.assertRaises(ConversionError) as cm:
            preconds.check_path(False)
        self.assertIs(cm.exception.kind, ErrorKind.INVALID_PATH)
        with self.assertLogs(preconds.__name__, 'DEBUG') as cm:
            with self.assertRaises(ConversionError):
                preconds.check_path(False, 'X %s', 'Y')
        self.assertEqual(
            ['DEBUG:%s:reject HFS path: X Y' % preconds.__name__],
            cm.output,
        )


if __name__ == '__main__':
    unittest.main()
