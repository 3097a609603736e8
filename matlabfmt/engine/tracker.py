# -*- coding: utf-8 -*-
"""State of a formatting run.

A ``BlockTracker`` is created at the start of every formatting run and
discarded at its end. It keeps track of the open blocks, of multi-line matrix
and cell literals, of comments and line continuations, and computes the
indentation of the current line from them.
"""

import re

from ..log import logger
from .options import IndentMode, MatrixIndent


__all__ = ['BlockTracker']


# comment line
_line_comment_p = re.compile(r'^(\s*)%.*$')

# block comment delimiters, alone on their line
_block_comment_open_p = re.compile(r'^(\s*)%\{\s*$')
_block_comment_close_p = re.compile(r'^(\s*)%\}\s*$')

# line continuation
_ellipsis_p = re.compile(r'^.*\.\.\..*$')

# line starting with a closing delimiter
_block_close_p = re.compile(r'^\s*[\)\]\}].*$')

# formatter ignore [N]
_ignore_command_p = re.compile(r'^.*formatter\s+ignore\s*(\d*).*$')

# text preceding the last opening bracket
_open_bracket_p = {
    '[': re.compile(r'(\s*)((\S.*)?)(\[.*$)'),
    '{': re.compile(r'(\s*)((\S.*)?)(\{.*$)'),
}

# value of the block comment counter within a block comment
_BLOCK_COMMENT = 1 << 30


class BlockTracker:
    """Mutable state of a formatting run.

    Parameters
    ----------
    options : Options
        The formatting options.
    extractor : Extractor
        Used to strip strings and comments before counting brackets.
    level : int
        The initial indentation level.

    Attributes
    ----------
    level : int
        The running indentation level, never negative.
    control : list of int
        Indentation steps of the open control blocks.
    functions : list of int
        Indentation steps of the open function and classdef blocks.
    matrix : int
        Indentation of the open multi-line matrix, 0 if none is open.
    cell : int
        Indentation of the open multi-line cell array, 0 if none is open.
    block_comment : int
        Positive within a block comment.
    line_comment : int
        2 on a comment line, 1 on the line after, 0 otherwise.
    long_line : int
        1 if the current line ends with a line continuation.
    continue_line : int
        1 if the current line continues the previous one.
    ignore_lines : int
        Number of following lines to leave untouched.
    """

    def __init__(self, options, extractor, level=0):
        self.options = options
        self.extractor = extractor
        self.width = options.indent_width
        self.level = level
        self.control = []
        self.functions = []
        self.matrix = 0
        self.cell = 0
        self.block_comment = 0
        self.line_comment = 0
        self.long_line = 0
        self.continue_line = 0
        self.ignore_lines = 0

    @property
    def in_block_comment(self):
        return self.block_comment > 0

    @property
    def in_line_comment(self):
        """Whether the current line is a comment line."""
        return self.line_comment == 2

    def indent(self, extra=0):
        """Returns the indentation string of the current line.

        Parameters
        ----------
        extra : int
            Number of spaces to add to (or, if negative, remove from) the
            indentation of the current block.
        """
        width = (self.level + self.continue_line) * self.width + extra
        return ' ' * max(width, 0)

    def shift(self, offset):
        """Applies an indentation delta to the running level."""
        self.level = max(self.level + offset, 0)

    def take_ignored(self):
        """Consumes one ignored line, returns False if none is left."""
        if self.ignore_lines > 0:
            self.ignore_lines -= 1
            return True
        return False

    def update_comments(self, line):
        """Updates the comment state with the current line."""
        if _line_comment_p.match(line):
            self.line_comment = 2
        elif self.line_comment > 0:
            self.line_comment -= 1

        if _block_comment_open_p.match(line):
            self.block_comment = _BLOCK_COMMENT
        elif _block_comment_close_p.match(line):
            self.block_comment = 1
        elif self.block_comment > 0:
            self.block_comment -= 1

    def update_continuation(self, line):
        """Updates the line continuation flags with the current line.

        The continuation flag of the current line is the long line flag of the
        previous one, unless the current line starts by closing a bracket.
        """
        code = self.extractor.clean_line(line)
        in_comment = self.in_line_comment or self.in_block_comment

        if in_comment or _block_close_p.match(code):
            self.continue_line = 0
        else:
            self.continue_line = self.long_line

        if not in_comment and _ellipsis_p.match(code):
            self.long_line = 1
        else:
            self.long_line = 0

    def read_directive(self, line):
        """Reads a ``formatter ignore N`` directive from a comment line."""
        m = _ignore_command_p.match(line)
        if not m:
            return
        count = int(m.group(1)) if m.group(1) else 1
        self.ignore_lines = max(count, 1)
        logger.debug('Ignoring the next {} line(s).'.format(self.ignore_lines))

    def _bracket_indent(self, code, open_, close, indent):
        cleaned = self.extractor.clean_line(code)
        diff = cleaned.count(open_) - cleaned.count(close)
        if diff > 0:
            m = _open_bracket_p[open_].search(cleaned)
            if m:
                if self.options.matrix_indent is MatrixIndent.ALIGNED:
                    indent = len(m.group(2)) + 1
                else:
                    indent = self.width
        elif diff < 0:
            indent = 0
        return diff, indent

    def update_matrix(self, code):
        """Updates the state of multi-line matrices with a normalized line.

        Returns the net number of opened brackets and the indentation of the
        matrix before this line.
        """
        previous = self.matrix
        diff, self.matrix = self._bracket_indent(code, '[', ']', self.matrix)
        return diff, previous

    def update_cell(self, code):
        """Updates the state of multi-line cell arrays with a normalized line.

        Returns the net number of opened braces and the indentation of the
        cell array before this line.
        """
        previous = self.cell
        diff, self.cell = self._bracket_indent(code, '{', '}', self.cell)
        return diff, previous

    def open_function(self):
        """Opens a function block, returns its indentation step."""
        mode = self.options.indent_mode
        if mode is IndentMode.ONLY_NESTED_FUNCTIONS:
            step = 1 if self.functions else 0
        else:
            step = self.options.function_step
        self.functions.append(step)
        return step

    def open_control(self, step=1):
        """Opens a control block, returns its indentation step."""
        self.control.append(step)
        return step

    def close(self):
        """Closes the innermost block.

        Returns
        -------
        (int, int)
            The indentation step of the closed block and the number of spaces
            to add to the indentation of the closing line.
        """
        if self.control:
            step = self.control.pop()
            return step, -step * self.width
        if self.functions:
            step = self.functions.pop()
            return step, -step * self.width
        if self.level > 0:
            # closer of a block opened before the formatted range: keep this
            # line where it is, dedent the following ones
            logger.debug('Closing a block opened outside the formatted range.')
            return 1, 0
        return 0, 0
