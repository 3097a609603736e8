# -*- coding: utf-8 -*-
"""\
matlabfmt is a source code formatter for MATLAB. It re-indents blocks,
normalizes the spacing around operators and separators, aligns the
continuation lines of matrices and cell arrays and separates blocks with blank
lines, leaving the content of strings and comments untouched.
"""

from .log import *
from .config import config
from .exceptions import *
from .engine import *
from .fileio import *

__all__ = (
    ['config'] + log.__all__ + exceptions.__all__ + engine.__all__ +
    fileio.__all__
)


__version__ = '0.3.0'


def main():
    import sys
    import argparse

    import yaml

    def _format(
        file, write=False, start_line=None, end_line=None, indent_width=None,
        separate_blocks=None, indent_mode=None, add_spaces=None,
        matrix_indent=None, **__
    ):
        try:
            options = Options.from_config(
                config, start_line=start_line, end_line=end_line,
                indent_width=indent_width, separate_blocks=separate_blocks,
                indent_mode=indent_mode, add_spaces=add_spaces,
                matrix_indent=matrix_indent
            )
            format_file(file, options, write=write)
        except (OSError, FormatterError) as err:
            print(err, file=sys.stderr)
            sys.exit(1)

    def _config(key=None, value=None, delete=False, **__):
        if not key:
            print('\n'.join(list(config.keys())))
        elif delete:
            config.reset(key)
            config.dump()
        elif value is None:
            print('{} : "{}"'.format(key, config.get(key)))
        else:
            config[key] = yaml.safe_load(value)
            config.dump()

    desc = sys.modules[__name__].__doc__
    fmt = argparse.ArgumentDefaultsHelpFormatter
    parser = argparse.ArgumentParser(description=desc, formatter_class=fmt)
    parser.add_argument(
        '--version', action='version',
        version='matlabfmt, version {}'.format(__version__)
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='display informative messages'
    )

    subparsers = parser.add_subparsers()

    # format
    format_parser = subparsers.add_parser(
        'format', help='format a MATLAB source file'
    )
    format_parser.add_argument(
        'file', help='the file to format, - for the standard input'
    )
    format_parser.add_argument(
        '-w', '--write', action='store_true',
        help='write the result to the source file instead of standard output'
    )

    range_options = format_parser.add_argument_group('Range options')
    range_options.add_argument(
        '--start-line', type=int, help='first line to format (1-based)'
    )
    range_options.add_argument(
        '--end-line', type=int,
        help='last line to format (inclusive, 0 for end of file)'
    )

    style_options = format_parser.add_argument_group('Style options')
    style_options.add_argument(
        '--indent-width', type=int,
        help='number of spaces per indentation level'
    )
    style_options.add_argument(
        '--separate-blocks', dest='separate_blocks', action='store_const',
        const=True, help='insert blank lines between blocks'
    )
    style_options.add_argument(
        '--no-separate-blocks', dest='separate_blocks', action='store_const',
        const=False, help='do not insert blank lines between blocks'
    )
    style_options.add_argument(
        '--indent-mode',
        choices=['all_functions', 'only_nested_functions', 'classic'],
        help='indentation of function bodies'
    )
    style_options.add_argument(
        '--add-spaces', choices=['all_operators', 'exclude_pow', 'no_spaces'],
        help='spacing around operators'
    )
    style_options.add_argument(
        '--matrix-indent', choices=['aligned', 'simple'],
        help='indentation of multi-line matrices and cell arrays'
    )
    format_parser.set_defaults(func=_format)


    # config
    config_parser = subparsers.add_parser(
        'config', help='config matlabfmt default options'
    )
    config_parser.add_argument(
        'key', nargs='?', help='the property to get/set'
    )
    config_parser.add_argument(
        '-d', '--delete', action='store_true',
        help='restore the default value of a key'
    )
    config_parser.add_argument(
        'value', nargs='?', help='the value to set'
    )
    config_parser.set_defaults(func=_config)

    args = parser.parse_args()

    debug(args.verbose)

    args = vars(args)
    if 'func' not in args:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    args['func'](**args)


if __name__ == '__main__':
    main()
