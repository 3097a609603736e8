# -*- coding: utf-8 -*-
"""Formatting options.

The options accepted by the formatter mirror the ones of the ``matlabfmt``
command line. Enumerated options can be given either as members of the
corresponding enum class or by name; unknown names silently fall back to the
default value, validation of user input is left to the caller.
"""

from enum import Enum
from collections import namedtuple

from ..log import logger
from ..config import config
from ..exceptions import ConfigurationError


__all__ = ['IndentMode', 'OperatorSpacing', 'MatrixIndent', 'Options']


class IndentMode(Enum):
    """How the body of function-like blocks is indented."""

    #: Every function and classdef body is indented
    ALL_FUNCTIONS = 'all_functions'

    #: Only functions nested inside another function are indented
    ONLY_NESTED_FUNCTIONS = 'only_nested_functions'

    #: Function bodies are never indented
    CLASSIC = 'classic'


class OperatorSpacing(Enum):
    """Which operators are surrounded by spaces."""

    #: All binary operators, including the power operators
    ALL_OPERATORS = 'all_operators'

    #: All binary operators except ``^`` and ``.^``
    EXCLUDE_POW = 'exclude_pow'

    #: No spaces around operators
    NO_SPACES = 'no_spaces'


class MatrixIndent(Enum):
    """Indentation of the continuation lines of matrix and cell literals."""

    #: Continuation lines are aligned after the opening bracket
    ALIGNED = 'aligned'

    #: Continuation lines are indented by one indentation step
    SIMPLE = 'simple'


_Options = namedtuple('_Options', [
    'start_line', 'end_line', 'indent_width', 'separate_blocks',
    'indent_mode', 'add_spaces', 'matrix_indent'
])


def _enum_value(enum_cls, value, default):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(
            'Unknown {} value {!r}, using {!r}.'.format(
                enum_cls.__name__, value, default.value
            )
        )
        return default


class Options(_Options):
    """Immutable set of formatting options.

    Attributes
    ----------
    start_line : int
        First line to format (1-based).
    end_line : int
        Last line to format (inclusive), 0 means the end of the file.
    indent_width : int
        Number of spaces per indentation level, must be positive.
    separate_blocks : bool
        Whether to insert blank lines around blocks.
    indent_mode : IndentMode
        Indentation of function bodies.
    add_spaces : OperatorSpacing
        Spacing around operators.
    matrix_indent : MatrixIndent
        Indentation of multi-line matrices and cell arrays.
    """

    __slots__ = ()

    def __new__(
        cls, start_line=1, end_line=0, indent_width=4, separate_blocks=True,
        indent_mode=IndentMode.ALL_FUNCTIONS,
        add_spaces=OperatorSpacing.EXCLUDE_POW,
        matrix_indent=MatrixIndent.ALIGNED
    ):
        if isinstance(indent_width, bool) or not isinstance(indent_width, int):
            raise ConfigurationError(
                'indent_width must be an integer, got {!r}'.format(indent_width),
                option='indent_width'
            )
        if indent_width <= 0:
            raise ConfigurationError(
                'indent_width must be greater than zero, got {}'.format(
                    indent_width
                ), option='indent_width'
            )
        return super().__new__(
            cls, int(start_line or 0), int(end_line or 0), indent_width,
            bool(separate_blocks),
            _enum_value(IndentMode, indent_mode, IndentMode.ALL_FUNCTIONS),
            _enum_value(
                OperatorSpacing, add_spaces, OperatorSpacing.EXCLUDE_POW
            ),
            _enum_value(MatrixIndent, matrix_indent, MatrixIndent.ALIGNED)
        )

    @classmethod
    def from_config(cls, cfg=None, **overrides):
        """Builds the options from a configuration mapping.

        Keys of ``cfg`` that are not option names are ignored; ``overrides``
        set to ``None`` are ignored as well, so that unset command line flags
        do not shadow the configured values.
        """
        if cfg is None:
            cfg = config
        kwargs = {k: cfg[k] for k in cls._fields if k in cfg}
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    @property
    def function_step(self):
        """Indentation steps of a top level function body."""
        if self.indent_mode is IndentMode.ALL_FUNCTIONS:
            return 1
        return 0

    @property
    def operator_spacing(self):
        return self.add_spaces is not OperatorSpacing.NO_SPACES

    @property
    def power_spacing(self):
        return self.add_spaces is OperatorSpacing.ALL_OPERATORS
