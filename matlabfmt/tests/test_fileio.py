import os
import stat
import unittest

from io import StringIO
from textwrap import dedent
from tempfile import NamedTemporaryFile

from matlabfmt import split_lines, read_lines, write_lines, format_file


def _save_as_temp_file(content, suffix='.m'):
    with NamedTemporaryFile(
        prefix='matlabfmt_', suffix=suffix, mode='w', delete=False,
        newline=''
    ) as f:
        f.write(content)
        file_name = f.name
    return file_name


class FileIOTest(unittest.TestCase):

    source = dedent('''\
        if x>0
        y=1;
        end
    ''')

    formatted = dedent('''\
        if x > 0
            y = 1;
        end
    ''')

    def setUp(self):
        self.file_name = _save_as_temp_file(self.source)

    def tearDown(self):
        os.remove(self.file_name)

    def test_split_lines(self):
        self.assertEqual(split_lines(''), [''])
        self.assertEqual(split_lines('a\n'), ['a'])
        self.assertEqual(split_lines('a\r\nb\rc\n'), ['a', 'b', 'c'])
        self.assertEqual(split_lines('a\n\n'), ['a', ''])

    def test_read_lines(self):
        self.assertEqual(read_lines(self.file_name), ['if x>0', 'y=1;', 'end'])

    def test_write_lines(self):
        fout = StringIO()
        write_lines(['a', '', 'b'], fout)
        self.assertEqual(fout.getvalue(), 'a\n\nb\n')

    def test_format_to_stream(self):
        fout = StringIO()
        lines = format_file(self.file_name, fout=fout)
        self.assertEqual(lines, ['if x > 0', '    y = 1;', 'end'])
        self.assertEqual(fout.getvalue(), self.formatted)
        with open(self.file_name) as f:
            self.assertEqual(f.read(), self.source)

    def test_format_in_place(self):
        os.chmod(self.file_name, 0o640)
        format_file(self.file_name, write=True)
        with open(self.file_name) as f:
            self.assertEqual(f.read(), self.formatted)
        mode = stat.S_IMODE(os.stat(self.file_name).st_mode)
        self.assertEqual(mode, 0o640)

    def test_format_with_options(self):
        fout = StringIO()
        format_file(self.file_name, fout=fout, indent_width=2)
        self.assertEqual(fout.getvalue(), 'if x > 0\n  y = 1;\nend\n')

    def test_missing_file(self):
        with self.assertRaises(OSError):
            format_file(self.file_name + '.missing', fout=StringIO())


if __name__ == '__main__':
    unittest.main()
