"""
# Mac-Toggle: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.
"""

import re
from typing import Iterable

from mactoggle.constants import MARKER_DELIMITER_CHARACTERS


def build_delimiter_run_regex(is_mandatory: bool) -> str:
    """
    Build regex for a run of comment-delimiter characters (`*` or `/`).

    A mandatory run has at least one character; an optional run may be empty.
    """
    quantifier = '+' if is_mandatory else '*'
    return f'[{re.escape(MARKER_DELIMITER_CHARACTERS)}]{quantifier}'


def build_marker_tag_regex(tags: Iterable[str]) -> str:
    """
    Build regex for any one of the given marker tags, captured as `tag`.

    Longer tags are tried first, although for the six Mac tags no tag can match
    where another one does once the leading delimiter run is required.
    """
    alternatives = '|'.join(
        re.escape(tag)
        for tag in sorted(tags, key=len, reverse=True)
    )
    return f'(?P<tag> {alternatives} )'


def build_marker_regex(tags: Iterable[str]) -> str:
    """
    Build regex for a delimited marker occurrence, to be compiled with `re.VERBOSE`.

    A delimited marker occurrence is
            «mandatory delimiter run» «tag» «optional delimiter run»
    and the whole occurrence (delimiters included) is what gets replaced.
    """
    return ' '.join([
        build_delimiter_run_regex(is_mandatory=True),
        build_marker_tag_regex(tags),
        build_delimiter_run_regex(is_mandatory=False),
    ])
