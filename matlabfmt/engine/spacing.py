# -*- coding: utf-8 -*-
"""Normalization of the spacing between the tokens of a line."""

from .tokens import Extractor


__all__ = ['Normalizer']


class Normalizer:
    """Rewrites the spacing around the tokens of a piece of code.

    The text is split around its first significant token (see
    ``Extractor.extract``), the required spacing is attached to the two
    remainders and both are normalized in turn. String literals and comments
    are passed through untouched.

    Parameters
    ----------
    options : Options
        The formatting options; only ``add_spaces`` is used.
    extractor : Extractor
        The token extractor to use, a new one by default.
    """

    def __init__(self, options, extractor=None):
        self.extractor = extractor or Extractor()
        op = ' ' if options.operator_spacing else ''
        power = ' ' if options.power_spacing else ''
        # spacing added (before, after) each kind of token
        self._spacing = {
            'operator': (op, op),
            'power': (power, power),
            'separator': ('', ' '),
            'ellipsis': (' ', ' '),
            'negation': (' ', ''),
        }

    def _split(self, text):
        tok = self.extractor.extract(text)
        if tok is None:
            return None
        before, after = self._spacing.get(tok.kind, ('', ''))
        return tok.left + before, tok.token, after + tok.right

    def normalize(self, text):
        """Returns text with normalized spacing between its tokens."""
        parts = []
        while True:
            split = self._split(text)
            if split is None:
                parts.append(text)
                break
            left, token, text = split
            parts.append(self.normalize(left))
            parts.append(token)
        return ''.join(parts)

    __call__ = normalize
