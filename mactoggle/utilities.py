"""
# Mac-Toggle: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def compute_line_number(string: str, index: int) -> int:
    return string.count('\n', 0, index) + 1


def is_whitespace_only(line: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=line, flags=re.ASCII))


def is_comment(line: str) -> bool:
    return line.lstrip().startswith('#')
