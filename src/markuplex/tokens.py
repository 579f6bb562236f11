"""Token and TokenType definitions for the markuplex lexer.

The lexer produces a flat list of Token objects in document order.
Each Token has a type, string value, and source position; tag tokens also
carry their attributes and classification metadata.

Thread Safety:
Token, Attribute and TagMetadata are frozen (immutable) and safe to share
across threads. TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from markuplex.location import Position


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category for clarity:
    - Tags (open, close, self-closing)
    - Declarations (doctype, comments, CDATA)
    - Character data (text, entities, raw-text element content)
    - Processing instructions
    - Reserved kinds that the lexer never emits

    """

    # Document structure
    EOF = auto()

    # Tags
    HTML_TAG_OPEN = auto()  # <div>
    HTML_TAG_CLOSE = auto()  # </div>
    HTML_TAG_SELF_CLOSE = auto()  # <br/>

    # Declarations
    DOCTYPE = auto()  # <!DOCTYPE html>
    COMMENT_CONTENT = auto()  # <!-- ... -->
    CDATA_CONTENT = auto()  # <![CDATA[ ... ]]>

    # Character data
    TEXT = auto()
    ENTITY = auto()  # &amp;
    SCRIPT_CONTENT = auto()
    STYLE_CONTENT = auto()

    # Processing instructions
    PI_TARGET = auto()  # xml in <?xml ... ?>
    PI_CONTENT = auto()

    # Reserved for downstream consumers, never emitted
    ATTRIBUTE_NAME = auto()
    ATTRIBUTE_VALUE = auto()
    NAMESPACE_PREFIX = auto()
    NAMESPACE_URI = auto()
    TEMPLATE_START = auto()  # {{ or {%
    TEMPLATE_CONTENT = auto()
    TEMPLATE_END = auto()  # }} or %}


TAG_TOKEN_TYPES = frozenset(
    {TokenType.HTML_TAG_OPEN, TokenType.HTML_TAG_CLOSE, TokenType.HTML_TAG_SELF_CLOSE}
)

RESERVED_TOKEN_TYPES = frozenset(
    {
        TokenType.ATTRIBUTE_NAME,
        TokenType.ATTRIBUTE_VALUE,
        TokenType.NAMESPACE_PREFIX,
        TokenType.NAMESPACE_URI,
        TokenType.TEMPLATE_START,
        TokenType.TEMPLATE_CONTENT,
        TokenType.TEMPLATE_END,
    }
)


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single ``name="value"`` pair from an opening tag.

    Attributes written without a value (``<input disabled>``) have an
    empty string value.
    """

    name: str
    value: str = ""


@dataclass(frozen=True, slots=True)
class TagMetadata:
    """Classification of a tag token.

    Attributes:
        is_void: Element is in VOID_ELEMENTS (never has children)
        is_custom_element: Tag name contains a hyphen
        namespace: Prefix before ``:`` in the tag name, if any
        raw: Reconstructed source text of the tag

    """

    is_void: bool = False
    is_custom_element: bool = False
    namespace: str | None = None
    raw: str = ""


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    ``value`` holds the literal text for text and content tokens, and the
    tag name or raw entity text (``&amp;``) otherwise.

    Attributes:
        type: The token type (from TokenType enum)
        value: Token text (see above)
        position: Source span and 1-indexed line/column of its start
        attributes: Attributes of an opening or self-closing tag
        metadata: Tag classification, None for non-tag tokens

    """

    type: TokenType
    value: str
    position: Position
    attributes: tuple[Attribute, ...] = ()
    metadata: TagMetadata | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.position.line}:{self.position.column})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.position.line

    @property
    def column(self) -> int:
        """Column (convenience accessor)."""
        return self.position.column

    @property
    def is_tag(self) -> bool:
        return self.type in TAG_TOKEN_TYPES

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the first attribute called ``name``.

        Attribute names are compared case-insensitively.
        """
        lowered = name.lower()
        for attr in self.attributes:
            if attr.name.lower() == lowered:
                return attr.value
        return default
