"""
# Mac-Toggle: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

MARKER_DELIMITER_CHARACTERS = '*/'

IF_NOT_MAC = 'IF-NOT-MAC'
END_NOT_MAC = 'END-NOT-MAC'
IF_MAC = 'IF-MAC'
END_MAC = 'END-MAC'
ELSE_IF_MAC = 'ELSE-IF-MAC'
ELSE_IF_NOT_MAC = 'ELSE-IF-NOT-MAC'

MARKER_TAGS = (
    IF_NOT_MAC,
    END_NOT_MAC,
    IF_MAC,
    END_MAC,
    ELSE_IF_MAC,
    ELSE_IF_NOT_MAC,
)

# Not-Mac markers stay line comments (not-Mac code live);
# Mac markers open and close a block comment (Mac code dead).
SUBSTITUTE_FROM_MARKER_TAG = {
    IF_NOT_MAC: '//IF-NOT-MAC',
    END_NOT_MAC: '//END-NOT-MAC',
    IF_MAC: '/*IF-MAC',
    END_MAC: '//END-MAC*/',
    ELSE_IF_MAC: '/*ELSE-IF-MAC',
    ELSE_IF_NOT_MAC: '//ELSE-IF-NOT-MAC*/',
}

CLOSING_TAG_FROM_OPENING_TAG = {
    IF_NOT_MAC: END_NOT_MAC,
    IF_MAC: END_MAC,
    ELSE_IF_MAC: ELSE_IF_NOT_MAC,
}
BLOCK_COMMENT_OPENING_TAGS = (
    IF_MAC,
    ELSE_IF_MAC,
)

DEFAULT_FILE_NAMES = (
    'Lemmini.java',
    'Game/Core.java',
    'Game/GraphicsPane.java',
    'Game/GameController.java',
    'Extract/Extract.java',
    'Extract/FolderDialog.java',
)
