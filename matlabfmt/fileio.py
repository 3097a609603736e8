# -*- coding: utf-8 -*-
"""Reading and writing of source files."""

import os
import sys
import stat

from .log import logger
from .engine.formatter import Formatter


__all__ = ['split_lines', 'read_lines', 'write_lines', 'format_file']


def split_lines(text):
    """Splits text into lines.

    All of ``\\r\\n``, ``\\r`` and ``\\n`` are line terminators. The empty line
    after a final line terminator is dropped, unless the text is empty.
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    lines = text.split('\n')
    if len(lines) > 1 and lines[-1] == '':
        lines.pop()
    return lines


def read_lines(filename):
    """Reads the lines of a file, or of the standard input if filename is
    ``-``.
    """
    if filename == '-':
        text = sys.stdin.read()
    else:
        logger.debug('Reading {}'.format(filename))
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    return split_lines(text)


def write_lines(lines, fout):
    """Writes lines to a file object, each followed by a newline."""
    for line in lines:
        fout.write('{}\n'.format(line))


def format_file(filename, options=None, write=False, fout=None, **kwargs):
    """Formats a source file.

    Parameters
    ----------
    filename : str
        Path to the file to format, ``-`` for the standard input.
    options : Options
        The formatting options (see ``Formatter``).
    write : bool
        If True, the formatted code replaces the content of the file, whose
        permission bits are preserved. Ignored when reading the standard
        input.
    fout : file object
        Where to write the formatted code when not writing the file in place,
        the standard output by default.
    **kwargs
        Options to use instead of ``options``.

    Returns
    -------
    list of str
        The formatted lines.
    """
    formatter = Formatter(options, **kwargs)
    lines = formatter.format_lines(read_lines(filename))

    if write and filename != '-':
        mode = stat.S_IMODE(os.stat(filename).st_mode)
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            write_lines(lines, f)
        os.chmod(filename, mode)
        logger.info('Formatted {}'.format(filename))
    else:
        write_lines(lines, fout or sys.stdout)

    return lines
