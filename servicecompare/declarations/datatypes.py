"""Datatype catalog for endpoint params and returns."""

from __future__ import annotations

ATOMIC_DATATYPES: frozenset[str] = frozenset(
    {
        "boolean",
        "date",
        "dateTime",
        "dayTimeDuration",
        "decimal",
        "double",
        "float",
        "int",
        "long",
        "string",
        "time",
        "unsignedInt",
        "unsignedLong",
    }
)

# node datatype -> document format
NODE_FORMATS: dict[str, str] = {
    "array": "JSON",
    "binaryDocument": "BINARY",
    "jsonDocument": "JSON",
    "object": "JSON",
    "textDocument": "TEXT",
    "xmlDocument": "XML",
}

SESSION_DATATYPE = "session"

MODULE_EXTENSIONS: tuple[str, ...] = ("sjs", "mjs", "xqy")


def is_session(datatype: str) -> bool:
    return datatype.lower() == SESSION_DATATYPE


def is_known_datatype(datatype: str) -> bool:
    """True for atomic, node and session datatypes."""
    return datatype in ATOMIC_DATATYPES or datatype in NODE_FORMATS or is_session(datatype)


def document_format(datatype: str) -> str:
    """Format used on the wire: node formats from NODE_FORMATS, TEXT for atomics."""
    return NODE_FORMATS.get(datatype, "TEXT")
