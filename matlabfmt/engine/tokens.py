# -*- coding: utf-8 -*-
"""Extraction of structurally significant tokens from a line of code.

A line is never fully tokenized. Instead, the extractor looks for the first
token matched by an ordered list of pattern rules and splits the line into the
text on its left, the token itself and the text on its right. The rules are
tried in order and the first one that matches wins, so that e.g. a quote that
belongs to a string literal is never mistaken for a transpose and the sign of
an exponent is never mistaken for an arithmetic operator. Callers (the
spacing normalizer, the bracket counter) then recurse into the remainders.
"""

import re

from collections import namedtuple


__all__ = ['Token', 'Extractor']


#: A token matched within a piece of text, with the remainders around it
Token = namedtuple('Token', ['left', 'token', 'right', 'kind'])


# single-quoted string, a doubled quote is an escaped quote
_string_p = re.compile(
    r"^(.*?[\(\[\{,;=\+\-\*\/\|\&\s]|^)\s*('([^']|'')+')"
    r"([\)\}\]\+\-\*\/=\|\&,;].*|\s+.*|$)"
)

# double-quoted string
_string_dq_p = re.compile(
    r'^(.*?[\(\[\{,;=\+\-\*\/\|\&\s]|^)\s*("([^"])*")'
    r'([\)\}\]\+\-\*\/=\|\&,;].*|\s+.*|$)'
)

# comment, from the first percent sign to the end of the line
_comment_p = re.compile(r'^(|.*?\S)\s*(%.*)')

# whitespace only
_blank_p = re.compile(r'^\s+$')

# number in scientific notation
_num_sci_p = re.compile(r'^(.*?\W|^)\s*(\d+\.?\d*)([eE][+-]?)(\d+)(.*)')

# rational number
_num_rational_p = re.compile(r'^(.*?\W|^)\s*(\d+)\s*(\/)\s*(\d+)(.*)')

# double sign before a closing delimiter, e.g. x(end+-)
_increment_p = re.compile(
    r'^(.*?\S|^)\s*(\+|\-)\s*(\+|\-)\s*([\)\]\},;].*|$)'
)

# unary sign
_sign_p = re.compile(r'^(.*?[\(\[\{,;:=\*/\s]|^)\s*(\+|\-)(\w.*)')

# range colon
_colon_p = re.compile(r'^(.*?\S|^)\s*(:)\s*(\S.*|$)')

# line continuation
_ellipsis_p = re.compile(r'^(.*?\S|^)\s*(\.\.\.)\s*(\S.*|$)')

# dotted compound assignment, e.g. .+=
_op_dot_p = re.compile(
    r'^(.*?\S|^)\s*(\.)\s*(\+|\-|\*|/|\^)\s*(=)\s*(\S.*|$)'
)

# element-wise power
_pow_dot_p = re.compile(r'^(.*?\S|^)\s*(\.)\s*(\^)\s*(\S.*|$)')

# power
_pow_p = re.compile(r'^(.*?\S|^)\s*(\^)\s*(\S.*|$)')

# two-character operator, e.g. == <= ~= &&
_op_comb_p = re.compile(
    r'^(.*?\S|^)\s*(\.|\+|\-|\*|\\|/|=|<|>|\||\&|!|~|\^)\s*'
    r'(<|>|=|\+|\-|\*|/|\&|\|)\s*(\S.*|$)'
)

# logical negation
_not_p = re.compile(r'^(.*?\S|^)\s*(!|~)\s*(\S.*|$)')

# single operator
_op_p = re.compile(r'^(.*?\S|^)\s*(\+|\-|\*|\\|/|=|!|~|<|>|\||\&)\s*(\S.*|$)')

# function call or array indexing
_func_p = re.compile(r'^(.*?\w)(\()\s*(\S.*|$)')

# opening delimiter
_open_p = re.compile(r'^(.*?)(\(|\[|\{)\s*(\S.*|$)')

# closing delimiter
_close_p = re.compile(r'^(.*?\S|^)\s*(\)|\]|\})(.*|$)')

# separator
_comma_p = re.compile(r'^(.*?\S|^)\s*(,|;)\s*(\S.*|$)')

# multiple whitespace
_multi_ws_p = re.compile(r'^(.*?\S|^)(\s{2,})(\S.*|$)')


class Extractor:
    """Finds the next structurally significant token of a piece of text.

    The extractor is stateless and can be shared among formatters.
    """

    def extract_string_or_comment(self, text):
        """Returns the first string literal or comment of text, or None."""
        m = _string_p.match(text)
        m_dq = _string_dq_p.match(text)
        if m_dq and (m is None or len(m.group(2)) < len(m_dq.group(2))):
            m = m_dq
        if m:
            return Token(m.group(1), m.group(2), m.group(4), 'string')

        m = _comment_p.match(text)
        if m:
            return Token(m.group(1) + ' ', m.group(2), '', 'comment')

        return None

    def clean_line(self, text):
        """Replaces string literals and comments of text with whitespace."""
        tok = self.extract_string_or_comment(text)
        if tok is None:
            return text
        return '{} {}'.format(
            self.clean_line(tok.left), self.clean_line(tok.right)
        )

    def extract(self, text):
        """Splits text around its first significant token.

        Returns
        -------
        Token or None
            The token with its left and right remainders and its kind, None
            if text contains no significant token.
        """
        if _blank_p.match(text):
            return Token('', ' ', '', 'blank')

        tok = self.extract_string_or_comment(text)
        if tok is not None:
            return tok

        m = _num_sci_p.match(text)
        if m:
            return Token(
                m.group(1) + m.group(2), m.group(3), m.group(4) + m.group(5),
                'number'
            )

        m = _num_rational_p.match(text)
        if m:
            return Token(
                m.group(1) + m.group(2), m.group(3), m.group(4) + m.group(5),
                'number'
            )

        m = _increment_p.match(text)
        if m:
            return Token(
                m.group(1), m.group(2) + m.group(3), m.group(4), 'increment'
            )

        m = _sign_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'sign')

        m = _colon_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'colon')

        m = _op_dot_p.match(text)
        if m:
            return Token(
                m.group(1), m.group(2) + m.group(3) + m.group(4), m.group(5),
                'operator'
            )

        m = _pow_dot_p.match(text)
        if m:
            return Token(
                m.group(1), m.group(2) + m.group(3), m.group(4), 'power'
            )

        m = _pow_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'power')

        m = _op_comb_p.match(text)
        if m:
            return Token(
                m.group(1), m.group(2) + m.group(3), m.group(4), 'operator'
            )

        m = _not_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'negation')

        m = _op_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'operator')

        m = _func_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'call')

        m = _open_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'open')

        m = _close_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'close')

        m = _comma_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'separator')

        m = _ellipsis_p.match(text)
        if m:
            return Token(m.group(1), m.group(2), m.group(3), 'ellipsis')

        m = _multi_ws_p.match(text)
        if m:
            return Token(m.group(1), ' ', m.group(3), 'whitespace')

        return None
