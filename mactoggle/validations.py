"""
# Mac-Toggle: validations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Marker balance validation.

Rewriting opens a block comment at `IF-MAC` and `ELSE-IF-MAC` without closing it;
the closing `*/` is supplied by the matching `END-MAC` and `ELSE-IF-NOT-MAC`.
An unbalanced marker therefore yields an unterminated (or prematurely terminated) block comment,
which is what the functions here look for.
"""

import re
from typing import NamedTuple

from mactoggle.constants import BLOCK_COMMENT_OPENING_TAGS, CLOSING_TAG_FROM_OPENING_TAG, MARKER_TAGS
from mactoggle.exceptions import UnbalancedMarkerException
from mactoggle.idioms import build_marker_regex
from mactoggle.utilities import compute_line_number


class MarkerImbalance(NamedTuple):
    tag: str
    line_number: int
    message: str


class OpenMarker(NamedTuple):
    tag: str
    line_number: int


MARKER_PATTERN_COMPILED = re.compile(
    pattern=build_marker_regex(MARKER_TAGS),
    flags=re.VERBOSE,
)


def find_marker_imbalances(text: str) -> list[MarkerImbalance]:
    """
    Find unbalanced markers in a document.

    Markers are paired in document order, innermost first:
    - `IF-NOT-MAC` with `END-NOT-MAC`
    - `IF-MAC` with `END-MAC`
    - `ELSE-IF-MAC` with `ELSE-IF-NOT-MAC`
    Block comments do not nest, so a block-comment opening marker
    inside another open one is reported even if both are later closed.
    A closing marker which does not match the innermost open marker is reported
    and otherwise ignored.
    """
    imbalances: list[MarkerImbalance] = []
    open_markers: list[OpenMarker] = []

    for match in MARKER_PATTERN_COMPILED.finditer(text):
        tag = match.group('tag')
        line_number = compute_line_number(text, match.start('tag'))

        if tag in CLOSING_TAG_FROM_OPENING_TAG:
            if tag in BLOCK_COMMENT_OPENING_TAGS:
                for open_marker in open_markers:
                    if open_marker.tag in BLOCK_COMMENT_OPENING_TAGS:
                        imbalances.append(
                            MarkerImbalance(
                                tag,
                                line_number,
                                f'`{tag}` opens a block comment '
                                f'inside the block comment opened by `{open_marker.tag}` '
                                f'on line {open_marker.line_number}',
                            )
                        )
                        break
            open_markers.append(OpenMarker(tag, line_number))
            continue

        if len(open_markers) == 0:
            imbalances.append(MarkerImbalance(tag, line_number, f'`{tag}` without a preceding opening marker'))
            continue

        innermost_marker = open_markers[-1]
        expected_tag = CLOSING_TAG_FROM_OPENING_TAG[innermost_marker.tag]
        if tag != expected_tag:
            imbalances.append(
                MarkerImbalance(
                    tag,
                    line_number,
                    f'`{tag}` where `{expected_tag}` was expected '
                    f'to close `{innermost_marker.tag}` on line {innermost_marker.line_number}',
                )
            )
            continue

        open_markers.pop()

    for open_marker in open_markers:
        expected_tag = CLOSING_TAG_FROM_OPENING_TAG[open_marker.tag]
        imbalances.append(
            MarkerImbalance(
                open_marker.tag,
                open_marker.line_number,
                f'`{open_marker.tag}` never closed by `{expected_tag}`',
            )
        )

    return imbalances


def validate_marker_balance(text: str):
    imbalances = find_marker_imbalances(text)
    if len(imbalances) > 0:
        raise UnbalancedMarkerException(imbalances)
