"""Lexer content modes and per-mode constants.

The lexer is in exactly one ContentMode at a time. NORMAL dispatches on
each character; every other mode accumulates raw characters until its
terminating delimiter.
"""

from __future__ import annotations

from enum import Enum, auto

from markuplex.tokens import TokenType


class ContentMode(Enum):
    """Lexer operating modes.

    - NORMAL: Between constructs, dispatching per character
    - SCRIPT: Inside <script>, until </script>
    - STYLE: Inside <style>, until </style>
    - CDATA: Inside <![CDATA[, until ]]>
    - PROCESSING_INSTRUCTION: After <?target, until ?>

    """

    NORMAL = auto()
    SCRIPT = auto()
    STYLE = auto()
    CDATA = auto()
    PROCESSING_INSTRUCTION = auto()


# Lower-cased tag name -> mode entered by its opening tag
RAW_TEXT_MODES = {
    "script": ContentMode.SCRIPT,
    "style": ContentMode.STYLE,
}

# Mode -> element whose end tag terminates it
RAW_TEXT_TAGS = {mode: tag for tag, mode in RAW_TEXT_MODES.items()}

CONTENT_TOKEN_TYPES = {
    ContentMode.SCRIPT: TokenType.SCRIPT_CONTENT,
    ContentMode.STYLE: TokenType.STYLE_CONTENT,
    ContentMode.CDATA: TokenType.CDATA_CONTENT,
    ContentMode.PROCESSING_INSTRUCTION: TokenType.PI_CONTENT,
}

COMMENT_START = "--"
COMMENT_END = "-->"
CDATA_START = "[CDATA["
CDATA_END = "]]>"
PI_END = "?>"
