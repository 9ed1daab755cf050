"""Decode Firestore document events delivered as JSON CloudEvents.

Eventarc delivers ``google.cloud.firestore.document.v1.*`` events whose body is
a ``DocumentEventData`` message. With the JSON content type every field of a
document is a typed value such as ``{"stringValue": "pending"}``; this module
turns those values into plain Python objects and extracts the path parameters
of the document that changed.
"""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime
from typing import Any, Mapping

_DOCUMENTS_MARKER = "/documents/"
_PLACEHOLDER = re.compile(r"^\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}$")
_FRACTION = re.compile(r"\.(\d+)")


class DocumentDecodeError(ValueError):
    """Raised when an event payload contains an unknown or malformed value."""


class DocumentPathError(ValueError):
    """Raised when a document path does not match the expected pattern."""


def decode_value(value: Mapping[str, Any]) -> Any:
    """Convert one Firestore typed value into its Python representation."""

    if not isinstance(value, Mapping) or len(value) != 1:
        raise DocumentDecodeError(f"Expected a single typed value, got {value!r}")

    kind, raw = next(iter(value.items()))
    if kind == "nullValue":
        return None
    if kind in ("booleanValue", "stringValue", "referenceValue"):
        return raw
    if kind == "integerValue":
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise DocumentDecodeError(f"Invalid integer value {raw!r}") from exc
    if kind == "doubleValue":
        try:
            return float(raw)
        except (TypeError, ValueError) as exc:
            raise DocumentDecodeError(f"Invalid double value {raw!r}") from exc
    if kind == "timestampValue":
        return _parse_timestamp(raw)
    if kind == "bytesValue":
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, TypeError) as exc:
            raise DocumentDecodeError("Invalid base64 bytes value") from exc
    if kind == "geoPointValue":
        raw = raw or {}
        return {
            "latitude": float(raw.get("latitude", 0.0)),
            "longitude": float(raw.get("longitude", 0.0)),
        }
    if kind == "arrayValue":
        return [decode_value(item) for item in (raw or {}).get("values", [])]
    if kind == "mapValue":
        return decode_fields((raw or {}).get("fields", {}))

    raise DocumentDecodeError(f"Unsupported Firestore value type: {kind}")


def decode_fields(fields: Mapping[str, Any] | None) -> dict[str, Any]:
    """Decode the ``fields`` map of a Firestore document."""

    if not fields:
        return {}
    if not isinstance(fields, Mapping):
        raise DocumentDecodeError("Document fields must be a JSON object")
    return {name: decode_value(value) for name, value in fields.items()}


def document_path(name: str) -> str:
    """Return the path relative to the database root for a resource ``name``.

    ``projects/p/databases/(default)/documents/Posts/abc`` becomes ``Posts/abc``;
    relative paths are returned unchanged.
    """

    _, marker, relative = name.partition(_DOCUMENTS_MARKER)
    path = relative if marker else name
    return path.strip("/")


def match_document_path(pattern: str, path: str) -> dict[str, str]:
    """Match ``path`` against a pattern such as ``Posts/{postId}``.

    Returns the placeholder values or raises :class:`DocumentPathError`.
    """

    pattern_parts = pattern.strip("/").split("/")
    path_parts = path.strip("/").split("/")
    if len(pattern_parts) != len(path_parts):
        raise DocumentPathError(f"Document {path!r} does not match {pattern!r}")

    params: dict[str, str] = {}
    for expected, actual in zip(pattern_parts, path_parts):
        if not actual:
            raise DocumentPathError(f"Document {path!r} has an empty segment")
        placeholder = _PLACEHOLDER.match(expected)
        if placeholder:
            params[placeholder.group("name")] = actual
        elif expected != actual:
            raise DocumentPathError(f"Document {path!r} does not match {pattern!r}")
    return params


def _parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise DocumentDecodeError(f"Invalid timestamp value {raw!r}")
    # Firestore emits nanosecond precision; datetime keeps microseconds.
    text = _FRACTION.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), raw, count=1)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise DocumentDecodeError(f"Invalid timestamp value {raw!r}") from exc


__all__ = [
    "DocumentDecodeError",
    "DocumentPathError",
    "decode_fields",
    "decode_value",
    "document_path",
    "match_document_path",
]
