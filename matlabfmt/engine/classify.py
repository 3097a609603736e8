# -*- coding: utf-8 -*-
"""Classification of lines by their role in the block structure."""

import re

from enum import Enum
from collections import namedtuple


__all__ = ['Category', 'Classified', 'classify']


class Category(Enum):
    """Structural category of a line."""

    #: import/clear statements, left untouched
    IGNORE = 'ignore'

    #: control statement opened and closed on the same line
    ONE_LINE = 'one_line'

    #: function or classdef opener
    FUNCTION = 'function'

    #: control block opener (if, for, while, ...)
    CONTROL = 'control'

    #: switch opener, indents twice
    SWITCH = 'switch'

    #: mid-block keyword (else, case, catch, ...)
    CONTINUATION = 'continuation'

    #: end of the innermost block
    CLOSER = 'closer'

    #: anything else
    STATEMENT = 'statement'


#: A classified line. ``keyword`` is the block keyword (for closers, with its
#: optional semicolon), ``body`` is the rest of the line. For one-line control
#: statements ``closer`` and ``trailing`` hold the end keyword and the
#: statement following it.
Classified = namedtuple(
    'Classified', ['category', 'keyword', 'body', 'closer', 'trailing']
)


# import, clear
_ignore_p = re.compile(r'^(\s*)(import|clear|clearvars)(.*$)')

# if x, y = 1; end
_one_line_p = re.compile(
    r'^(\s*)(if|while|for|try)(\W\s*\S.*\W)'
    r'((end|endif|endwhile|endfor);?)(\s+\S.*|\s*$)'
)

# function, classdef
_function_p = re.compile(r'^(\s*)(function|classdef)\s*(\W\s*\S.*|\s*$)')

# control blocks
_control_p = re.compile(
    r'^(\s*)(if|while|for|parfor|try|methods|properties|events|arguments'
    r'|enumeration|spmd)\s*(\W\s*\S.*|\s*$)'
)

# switch
_switch_p = re.compile(r'^(\s*)(switch)\s*(\W\s*\S.*|\s*$)')

# else, case, catch
_continuation_p = re.compile(
    r'^(\s*)(elseif|else|case|otherwise|catch)\s*(\W\s*\S.*|\s*$)'
)

# end
_closer_p = re.compile(
    r'^(\s*)((end|endfunction|endif|endwhile|endfor|endswitch);?)'
    r'(\s+\S.*|\s*$)'
)

_block_patterns = [
    (Category.FUNCTION, _function_p),
    (Category.CONTROL, _control_p),
    (Category.SWITCH, _switch_p),
    (Category.CONTINUATION, _continuation_p),
]


def classify(line):
    """Classifies a line of code.

    The patterns are tried in order of priority: ignored statements, one-line
    control statements, block openers, continuation keywords and closers.

    Parameters
    ----------
    line : str
        The line to classify, possibly indented.

    Returns
    -------
    Classified
        The category of the line and its relevant parts.
    """
    if _ignore_p.match(line):
        return Classified(Category.IGNORE, None, line.strip(), None, None)

    m = _one_line_p.match(line)
    if m:
        return Classified(
            Category.ONE_LINE, m.group(2), m.group(3), m.group(4), m.group(6)
        )

    for category, pattern in _block_patterns:
        m = pattern.match(line)
        if m:
            return Classified(category, m.group(2), m.group(3), None, None)

    m = _closer_p.match(line)
    if m:
        return Classified(Category.CLOSER, m.group(2), m.group(4), None, None)

    return Classified(Category.STATEMENT, None, line, None, None)
