import unittest

from matlabfmt.engine import Options, IndentMode, MatrixIndent
from matlabfmt.engine.tokens import Extractor
from matlabfmt.engine.tracker import BlockTracker


class BlockTrackerTest(unittest.TestCase):

    def tracker(self, level=0, **kwargs):
        return BlockTracker(Options(**kwargs), Extractor(), level=level)

    def test_indent(self):
        state = self.tracker(level=2)
        self.assertEqual(state.indent(), ' ' * 8)
        self.assertEqual(state.indent(-4), ' ' * 4)
        self.assertEqual(state.indent(-20), '')

        state.continue_line = 1
        self.assertEqual(state.indent(), ' ' * 12)

    def test_shift(self):
        state = self.tracker(level=1)
        state.shift(2)
        self.assertEqual(state.level, 3)
        state.shift(-5)
        self.assertEqual(state.level, 0)

    def test_line_comment(self):
        state = self.tracker()
        state.update_comments('  % comment')
        self.assertTrue(state.in_line_comment)
        state.update_comments('x = 1;')
        self.assertFalse(state.in_line_comment)
        self.assertEqual(state.line_comment, 1)
        state.update_comments('y = 2;')
        self.assertEqual(state.line_comment, 0)

    def test_block_comment(self):
        state = self.tracker()
        state.update_comments('%{')
        self.assertTrue(state.in_block_comment)
        state.update_comments('  x = 1;')
        self.assertTrue(state.in_block_comment)
        state.update_comments('%}')
        self.assertTrue(state.in_block_comment)
        state.update_comments('y = 2;')
        self.assertFalse(state.in_block_comment)

    def test_continuation(self):
        state = self.tracker()
        state.update_continuation('x = 1 + ...')
        self.assertEqual(state.long_line, 1)
        self.assertEqual(state.continue_line, 0)

        state.update_continuation('2;')
        self.assertEqual(state.long_line, 0)
        self.assertEqual(state.continue_line, 1)

        state.update_continuation('y = 3;')
        self.assertEqual(state.continue_line, 0)

    def test_continuation_closing_bracket(self):
        state = self.tracker()
        state.update_continuation('x = f(1, ...')
        state.update_continuation(')')
        self.assertEqual(state.continue_line, 0)

    def test_ellipsis_in_string(self):
        state = self.tracker()
        state.update_continuation("disp('...')")
        self.assertEqual(state.long_line, 0)

    def test_read_directive(self):
        state = self.tracker()
        state.read_directive('% formatter ignore 3')
        self.assertEqual(state.ignore_lines, 3)
        self.assertTrue(state.take_ignored())
        self.assertEqual(state.ignore_lines, 2)

        state = self.tracker()
        state.read_directive('% formatter ignore')
        self.assertEqual(state.ignore_lines, 1)

        state = self.tracker()
        state.read_directive('% formatter ignore 0')
        self.assertEqual(state.ignore_lines, 1)

        state = self.tracker()
        state.read_directive('% just a comment')
        self.assertEqual(state.ignore_lines, 0)
        self.assertFalse(state.take_ignored())

    def test_matrix_aligned(self):
        state = self.tracker()
        self.assertEqual(state.update_matrix('A = [1, 2;'), (1, 0))
        self.assertEqual(state.matrix, 5)
        self.assertEqual(state.update_matrix('3, 4;'), (0, 5))
        self.assertEqual(state.matrix, 5)
        self.assertEqual(state.update_matrix('5, 6];'), (-1, 5))
        self.assertEqual(state.matrix, 0)
        self.assertEqual(state.update_matrix('x = 1;'), (0, 0))

    def test_matrix_simple(self):
        state = self.tracker(matrix_indent=MatrixIndent.SIMPLE)
        self.assertEqual(state.update_matrix('A = [1, 2;'), (1, 0))
        self.assertEqual(state.matrix, 4)

    def test_matrix_closed_on_same_line(self):
        state = self.tracker()
        self.assertEqual(state.update_matrix('A = [1, 2];'), (0, 0))
        self.assertEqual(state.matrix, 0)

    def test_bracket_in_string(self):
        state = self.tracker()
        self.assertEqual(state.update_matrix("s = '[';"), (0, 0))

    def test_cell(self):
        state = self.tracker()
        self.assertEqual(state.update_cell("c = {'a', ..."), (1, 0))
        self.assertEqual(state.cell, 5)
        self.assertEqual(state.update_cell("'b'};"), (-1, 5))
        self.assertEqual(state.cell, 0)

    def test_open_function(self):
        state = self.tracker()
        self.assertEqual(state.open_function(), 1)
        self.assertEqual(state.open_function(), 1)

        state = self.tracker(indent_mode=IndentMode.ONLY_NESTED_FUNCTIONS)
        self.assertEqual(state.open_function(), 0)
        self.assertEqual(state.open_function(), 1)

        state = self.tracker(indent_mode=IndentMode.CLASSIC)
        self.assertEqual(state.open_function(), 0)
        self.assertEqual(state.open_function(), 0)

    def test_close(self):
        state = self.tracker()
        state.open_function()
        state.open_control(2)
        self.assertEqual(state.close(), (2, -8))
        self.assertEqual(state.close(), (1, -4))
        self.assertEqual(state.close(), (0, 0))

    def test_close_outside_range(self):
        state = self.tracker(level=2)
        self.assertEqual(state.close(), (1, 0))


if __name__ == '__main__':
    unittest.main()
