"""
# Mac-Toggle: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import sys
import warnings
from typing import Callable, Iterable

from mactoggle._version import __version__
from mactoggle.constants import COMMAND_LINE_ERROR_EXIT_CODE, DEFAULT_FILE_NAMES, GENERIC_ERROR_EXIT_CODE
from mactoggle.core import rewrite
from mactoggle.exceptions import UnbalancedMarkerException
from mactoggle.utilities import is_comment, is_whitespace_only
from mactoggle.validations import find_marker_imbalances, validate_marker_balance

DESCRIPTION = '''
    Rewrite Mac markers (IF-MAC, END-MAC, IF-NOT-MAC, ...) in source files to their toggled form,
    leaving the not-Mac code live and the Mac code commented out.
'''
FILE_NAME_HELP = '''
    name of source file to be rewritten in place
    (if neither files nor a file list are given, the built-in list of files is used)
'''
LIST_MODE_HELP = '''
    rewrite the files named in a file list
    (one name per line, relative to the file list; blank lines and lines beginning with `#` are ignored)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied)
'''
CHECK_MODE_HELP = '''
    abort instead of warning when a file has unbalanced markers
'''


def extract_file_names(file_list: str, file_list_name: str) -> list[str]:
    """
    Extract file names from the content of a file list.

    Relative names are parsed relative to the directory of the file list.
    """
    file_list_directory = os.path.dirname(file_list_name)
    file_names = []

    for line in file_list.splitlines():
        if is_whitespace_only(line) or is_comment(line):
            continue

        file_name = os.path.normpath(os.path.join(file_list_directory, line.strip()))
        file_names.append(file_name)

    return file_names


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-l', '--list',
        dest='file_list_name',
        default=None,
        help=LIST_MODE_HELP,
        metavar='files.txt',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-c', '--check',
        dest='check_mode_enabled',
        action='store_true',
        help=CHECK_MODE_HELP,
    )
    argument_parser.add_argument(
        'file_name_arguments',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file.java',
        nargs='*',
    )

    return argument_parser.parse_args()


def read_text_file(file_name: str) -> str:
    with open(file_name, 'r', encoding='utf-8', newline='') as file:
        return file.read()


def write_text_file(file_name: str, text: str):
    with open(file_name, 'w', encoding='utf-8', newline='') as file:
        file.write(text)


def rewrite_file(file_name: str, verbose_mode_enabled: bool, check_mode_enabled: bool,
                 read_file: Callable[[str], str], write_file: Callable[[str, str], None]):
    text = read_file(file_name)
    text = rewrite(text, verbose_mode_enabled)

    if check_mode_enabled:
        try:
            validate_marker_balance(text)
        except UnbalancedMarkerException as unbalanced_marker_exception:
            for imbalance in unbalanced_marker_exception.imbalances:
                print(f'error: `{file_name}`, line {imbalance.line_number}: {imbalance.message}', file=sys.stderr)
            raise
    else:
        for imbalance in find_marker_imbalances(text):
            warnings.warn(f'`{file_name}`, line {imbalance.line_number}: {imbalance.message}')

    write_file(file_name, text)
    print(f'success: wrote to `{file_name}`')


def rewrite_files(file_names: Iterable[str], verbose_mode_enabled: bool = False, check_mode_enabled: bool = False,
                  read_file: Callable[[str], str] = read_text_file,
                  write_file: Callable[[str, str], None] = write_text_file):
    """
    Rewrite files in place, one after another in the given order.

    Each file is read, rewritten, and written back in full before the next file is touched.
    The first failure aborts the batch; files already rewritten are left rewritten.
    """
    for file_name in file_names:
        rewrite_file(file_name, verbose_mode_enabled, check_mode_enabled, read_file, write_file)


def main():
    parsed_arguments = parse_command_line_arguments()
    file_name_arguments = parsed_arguments.file_name_arguments
    file_list_name = parsed_arguments.file_list_name
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    check_mode_enabled = parsed_arguments.check_mode_enabled

    if file_list_name is not None:
        if len(file_name_arguments) > 0:
            print('error: option -l (or --list) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        try:
            file_list = read_text_file(file_list_name)
        except FileNotFoundError:
            print(f'error: argument `-l/--list`: file `{file_list_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        file_names = extract_file_names(file_list, file_list_name)
        uses_command_line_argument = False
    elif len(file_name_arguments) > 0:
        file_names = file_name_arguments
        uses_command_line_argument = True
    else:
        file_names = list(DEFAULT_FILE_NAMES)
        uses_command_line_argument = False

    try:
        rewrite_files(file_names, verbose_mode_enabled, check_mode_enabled)
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{file_not_found_error.filename}`: file not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            print(f'error: file `{file_not_found_error.filename}` not found', file=sys.stderr)
            sys.exit(GENERIC_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: cannot access `{os_error.filename}`: {os_error.strerror}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except UnbalancedMarkerException:
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
