"""
Utility functions for SQL schema to code generator.
"""

import re

# Valid TypeScript identifier (ASCII subset)
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_UNSAFE_SEGMENT_CHARS = re.compile(r"[^A-Za-z0-9_$]")

FIELD_DELIMITER = "_"


def _capitalize_segment(segment: str) -> str:
    return segment[:1].upper() + segment[1:].lower()


def snake_to_camel_case(text: str) -> str:
    """Convert a delimited column name to camelCase.

    Names without a delimiter are returned unchanged so that columns which
    only differ by case keep distinct field names.

    Examples:
        "first_name" -> "firstName"
        "FIRST_NAME" -> "firstName"
        "a_field" -> "aField"
        "aField" -> "aField"
        "afield" -> "afield"
        "__id" -> "id"

    Args:
        text: The column name as it appears in the schema or query

    Returns:
        camelCase identifier
    """
    if FIELD_DELIMITER not in text:
        return text
    segments = [s for s in text.split(FIELD_DELIMITER) if s]
    if not segments:
        return text
    return segments[0].lower() + "".join(_capitalize_segment(s) for s in segments[1:])


def safe_namespace_segment(segment: str) -> str:
    """Make a namespace path segment a safe identifier.

    Casing and underscores are kept ("schema_public" stays "schema_public");
    any other character that is not allowed in an identifier becomes "_".

    Examples:
        "schema_public" -> "schema_public"
        "my-dir" -> "my_dir"
        "2021" -> "_2021"
    """
    safe = _UNSAFE_SEGMENT_CHARS.sub("_", segment)
    if safe[:1].isdigit():
        safe = "_" + safe
    return safe


def is_valid_identifier(name: str) -> bool:
    """Check whether a name can be used unquoted as a property name."""
    return bool(_IDENTIFIER_PATTERN.match(name))
