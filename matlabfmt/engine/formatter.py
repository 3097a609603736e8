# -*- coding: utf-8 -*-
"""The formatting engine.

The engine re-emits a range of source lines one at a time. For every line, the
block tracker updates the comment and continuation state, the line is
classified by its role in the block structure, its code is passed through the
spacing normalizer and it is prefixed with the indentation computed by the
tracker. The indentation delta of the line (positive for openers, negative for
closers) is then applied to the running indentation level.

A ``Formatter`` holds only its options and can be used to format any number
of inputs, also concurrently: the state of a run is created anew by every call
to ``format_lines``.
"""

import re

from ..log import logger
from .options import Options
from .tokens import Extractor
from .spacing import Normalizer
from .tracker import BlockTracker
from .classify import Category, classify


__all__ = ['Formatter', 'format_lines', 'format_text']


# leading whitespace
_initial_indent_p = re.compile(r'^(\s*)(.*)$')


class Formatter:
    """Formatter of MATLAB source code.

    Parameters
    ----------
    options : Options
        The formatting options, the default ones if None.
    **kwargs
        Options to use instead of ``options`` (see ``Options``).

    Raises
    ------
    ConfigurationError
        If the indentation width is not a positive integer.
    """

    def __init__(self, options=None, **kwargs):
        if options is None:
            options = Options(**kwargs)
        elif kwargs:
            options = Options(**{**options._asdict(), **kwargs})
        self.options = options
        self.extractor = Extractor()
        self.normalizer = Normalizer(options, self.extractor)

    def _range(self, n_lines):
        start = max(self.options.start_line, 1)
        start_idx = min(start - 1, n_lines)
        end = self.options.end_line
        end_idx = end if 0 < end <= n_lines else n_lines
        return start_idx, max(end_idx, start_idx)

    def format_lines(self, lines):
        """Formats the configured range of the given lines.

        Parameters
        ----------
        lines : list of str
            The lines of the source, without line terminators.

        Returns
        -------
        list of str
            The formatted lines. The lines outside the range given by the
            ``start_line`` and ``end_line`` options are returned unchanged.
        """
        lines = list(lines)
        start_idx, end_idx = self._range(len(lines))
        if start_idx == end_idx:
            logger.debug('Empty line range, nothing to format.')
            return lines

        logger.debug(
            'Formatting lines {} to {} with options: {}'.format(
                start_idx + 1, end_idx, self.options
            )
        )

        segment = lines[start_idx:end_idx]
        m = _initial_indent_p.match(segment[0])
        level = len(m.group(1)) // self.options.indent_width
        segment[0] = m.group(2)

        state = BlockTracker(self.options, self.extractor, level=level)
        separate = self.options.separate_blocks
        output = []
        blank = True

        for raw_line in segment:
            if not raw_line.strip():
                if not blank:
                    output.append('')
                    blank = True
                continue

            offset, line = self._format_line(state, raw_line)
            state.shift(offset)

            if separate and offset > 0 and not blank and not state.line_comment:
                output.append('')

            output.append(line.rstrip())

            if separate and offset < 0:
                output.append('')
                blank = True
            else:
                blank = False

        if end_idx == len(lines):
            while output and output[-1] == '':
                output.pop()

        if not output:
            output = ['']

        return lines[:start_idx] + output + lines[end_idx:]

    def format_text(self, text):
        """Formats source text, returns the formatted text.

        Line terminators are normalized and every output line is followed by
        a newline.
        """
        from ..fileio import split_lines
        return ''.join(
            '{}\n'.format(line) for line in self.format_lines(split_lines(text))
        )

    def _normalize(self, code):
        return self.normalizer.normalize(code).strip()

    def _format_line(self, state, line):
        if state.take_ignored():
            return 0, state.indent() + line.strip()

        state.update_comments(line)
        state.update_continuation(line)

        if state.in_block_comment:
            return 0, line.rstrip()

        if state.in_line_comment:
            state.read_directive(line)
            return 0, state.indent() + line.strip()

        cl = classify(line)
        if cl.category is Category.IGNORE:
            return 0, state.indent() + cl.body

        # brackets are aligned on the normalized code
        code = self._normalize(line)
        diff, previous = state.update_matrix(code)
        if diff or previous:
            return 0, state.indent(previous) + code

        diff, previous = state.update_cell(code)
        if diff or previous:
            return 0, state.indent(previous) + code

        if cl.category is Category.ONE_LINE:
            return 0, '{}{} {} {} {}'.format(
                state.indent(), cl.keyword, self._normalize(cl.body),
                cl.closer, self._normalize(cl.trailing)
            )

        if cl.category is Category.FUNCTION:
            step = state.open_function()
            return step, self._keyword_line(state.indent(), cl)

        if cl.category is Category.CONTROL:
            step = state.open_control(1)
            return step, self._keyword_line(state.indent(), cl)

        if cl.category is Category.SWITCH:
            step = state.open_control(2)
            return step, self._keyword_line(state.indent(), cl)

        if cl.category is Category.CONTINUATION:
            indent = state.indent(-self.options.indent_width)
            return 0, self._keyword_line(indent, cl)

        if cl.category is Category.CLOSER:
            step, extra = state.close()
            return -step, self._keyword_line(state.indent(extra), cl)

        return 0, state.indent() + self._normalize(line)

    def _keyword_line(self, indent, cl):
        return '{}{} {}'.format(indent, cl.keyword, self._normalize(cl.body))


def format_lines(lines, options=None, **kwargs):
    """Formats a list of lines, see ``Formatter.format_lines``."""
    return Formatter(options, **kwargs).format_lines(lines)


def format_text(text, options=None, **kwargs):
    """Formats source text, see ``Formatter.format_text``."""
    return Formatter(options, **kwargs).format_text(text)
