"""\
The formatting engine of matlabfmt re-indents and re-spaces MATLAB code one line
at a time, with no parse tree. For instance:

.. code-block:: python3

    matlabfmt.format_lines(['if x>0', 'y=1;', 'end'])

returns:

.. code-block:: python3

    ['if x > 0', '    y = 1;', 'end']

The behavior of the engine is controlled by an ``Options`` object, or by the
same options given as keyword arguments:

.. code-block:: python3

    matlabfmt.format_text(source, indent_width=2, add_spaces='no_spaces')

Only the lines from ``start_line`` to ``end_line`` are formatted; the
indentation of the first of these lines is taken as the indentation of the
enclosing block, so that a range can be formatted in the middle of a file.

Lines can be excluded from formatting with a directive comment:

.. code-block:: matlab

    % formatter ignore 2
    A = [1 0
         0 1];
"""

from . import options
from . import tokens
from . import spacing
from . import classify
from . import tracker
from . import formatter

__all__ = options.__all__ + formatter.__all__

from .options import *
from .formatter import *
