"""JSON serialization for tokens, diagnostics and tokenize results.

Converts lexer output to/from JSON-compatible dicts. Useful for:
- Handing a token stream to a tree builder in another process
- Snapshot tests and debugging

All output is deterministic (sorted keys).

Example:
    from markuplex import tokenize
    from markuplex.serialization import to_json, from_json

    result = tokenize("<p>Hi</p>")
    restored = from_json(to_json(result))
    assert restored == result

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from markuplex.diagnostics import Diagnostic, LexerErrorType, TokenizeResult
from markuplex.location import Position
from markuplex.tokens import Attribute, TagMetadata, Token, TokenType


def to_dict(obj: Token | Diagnostic | TokenizeResult) -> dict[str, Any]:
    """Convert lexer output to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        TypeError: For unsupported objects.
    """
    if isinstance(obj, TokenizeResult):
        return {
            "_type": "TokenizeResult",
            "tokens": [to_dict(t) for t in obj.tokens],
            "errors": [to_dict(e) for e in obj.errors],
        }
    if isinstance(obj, Token):
        result: dict[str, Any] = {
            "_type": "Token",
            "type": obj.type.name,
            "value": obj.value,
            "position": _position_to_dict(obj.position),
        }
        if obj.attributes:
            result["attributes"] = [{"name": a.name, "value": a.value} for a in obj.attributes]
        if obj.metadata is not None:
            result["metadata"] = {
                "is_void": obj.metadata.is_void,
                "is_custom_element": obj.metadata.is_custom_element,
                "namespace": obj.metadata.namespace,
                "raw": obj.metadata.raw,
            }
        return result
    if isinstance(obj, Diagnostic):
        return {
            "_type": "Diagnostic",
            "type": obj.type.name,
            "message": obj.message,
            "position": _position_to_dict(obj.position),
            "context": obj.context,
        }
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def _position_to_dict(position: Position) -> dict[str, int]:
    return {
        "start": position.start,
        "end": position.end,
        "line": position.line,
        "column": position.column,
    }


def from_dict(data: dict[str, Any]) -> Token | Diagnostic | TokenizeResult:
    """Reconstruct lexer output from a dict produced by to_dict().

    Raises:
        ValueError: If the ``_type`` discriminator is missing or unknown.
    """
    kind = data.get("_type")
    if kind == "TokenizeResult":
        return TokenizeResult(
            [_token_from_dict(t) for t in data["tokens"]],
            [_diagnostic_from_dict(e) for e in data["errors"]],
        )
    if kind == "Token":
        return _token_from_dict(data)
    if kind == "Diagnostic":
        return _diagnostic_from_dict(data)
    raise ValueError(f"Unknown serialized type: {kind!r}")


def _token_from_dict(data: dict[str, Any]) -> Token:
    metadata = data.get("metadata")
    return Token(
        type=TokenType[data["type"]],
        value=data["value"],
        position=Position(**data["position"]),
        attributes=tuple(Attribute(a["name"], a["value"]) for a in data.get("attributes", ())),
        metadata=TagMetadata(**metadata) if metadata is not None else None,
    )


def _diagnostic_from_dict(data: dict[str, Any]) -> Diagnostic:
    return Diagnostic(
        type=LexerErrorType[data["type"]],
        message=data["message"],
        position=Position(**data["position"]),
        context=data["context"],
    )


def to_json(obj: Token | Diagnostic | TokenizeResult, *, indent: int | None = None) -> str:
    """Serialize lexer output to a JSON string (sorted keys)."""
    return json.dumps(to_dict(obj), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(text: str) -> Token | Diagnostic | TokenizeResult:
    """Deserialize lexer output from a JSON string."""
    return from_dict(json.loads(text))
