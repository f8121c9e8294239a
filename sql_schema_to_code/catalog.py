"""
Catalog loading: the boundary to the external schema and statement collectors.

A catalog is a JSON document produced by a database introspector and a SQL
file walker. It lists tables, named statements and, optionally, already
resolved row shapes:

    {
        "package": "com.example.db",
        "tables": [
            {"schema": "public", "name": "Person", "columns": [
                {"name": "id", "type": "integer", "nullable": false}
            ]}
        ],
        "statements": [
            {"file": "subdir/Stmts.sql", "name": "loadAll", "columns": [...]}
        ],
        "row_shapes": [
            {"namespace": ["a", "b"], "name": "Person2", "columns": [...]}
        ]
    }

Tables are placed under <package>.schema_<schema>, statements under
<package>.<directories>.<file stem>, both lower-cased like the source tree
they mirror.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any

from .errors import CatalogError
from .model import ColumnDescriptor, NamespacePath, RowShape
from .utils import is_valid_identifier

logger = logging.getLogger(__name__)

SCHEMA_PREFIX = "schema_"


def _require(entry: dict[str, Any], key: str, context: str, expected: type | tuple[type, ...] = str) -> Any:
    if not isinstance(entry, dict):
        raise CatalogError(f"{context}: expected an object, got {type(entry).__name__}")
    if key not in entry:
        raise CatalogError(f"{context}: missing '{key}'")
    return _check_type(entry[key], key, context, expected)


def _optional(entry: dict[str, Any], key: str, context: str, default: Any, expected: type | tuple[type, ...] = str) -> Any:
    if key not in entry:
        return default
    return _check_type(entry[key], key, context, expected)


def _check_type(value: Any, key: str, context: str, expected: type | tuple[type, ...]) -> Any:
    if not isinstance(value, expected):
        names = " or ".join(t.__name__ for t in (expected if isinstance(expected, tuple) else (expected,)))
        raise CatalogError(f"{context}: '{key}' must be {names}, got {type(value).__name__}")
    return value


def _string_list(values: list, key: str, context: str) -> list[str]:
    for value in values:
        if not isinstance(value, str):
            raise CatalogError(f"{context}: '{key}' entries must be str, got {type(value).__name__}")
    return list(values)


def _package_segments(data: dict[str, Any]) -> list[str]:
    package = _optional(data, "package", "catalog", None, (str, list, type(None)))
    if not package:
        return []
    if isinstance(package, str):
        return package.split(".")
    return _string_list(package, "package", "catalog")


def _declaration_name(name: str, context: str) -> str:
    if not is_valid_identifier(name):
        raise CatalogError(f"{context}: '{name}' is not a valid declaration name")
    return name


def _load_columns(entry: dict[str, Any], context: str) -> tuple[ColumnDescriptor, ...]:
    columns = _require(entry, "columns", context, list)
    result = []
    for i, column in enumerate(columns):
        column_context = f"{context}, column {i}"
        name = _require(column, "name", column_context)
        native_type = _require(column, "type", column_context)
        nullable = _optional(column, "nullable", column_context, False, bool)
        try:
            result.append(ColumnDescriptor(name, native_type, nullable))
        except ValueError as e:
            raise CatalogError(f"{column_context}: {e}") from e
    return tuple(result)


def _make_shape(namespace: list[str], name: str, columns: tuple[ColumnDescriptor, ...], context: str) -> RowShape:
    try:
        return RowShape(NamespacePath(tuple(namespace)), _declaration_name(name, context), columns)
    except ValueError as e:
        raise CatalogError(f"{context}: {e}") from e


def _entries(data: dict[str, Any], key: str) -> list:
    return _optional(data, key, "catalog", [], list)


def table_namespace(package: list[str], schema: str) -> list[str]:
    return package + [SCHEMA_PREFIX + schema.lower()]


def statement_namespace(package: list[str], file: str) -> list[str]:
    """Namespace mirroring the statement file location, e.g. "sub/Stmts1.sql" -> [..., "sub", "stmts1"]."""
    path = PurePosixPath(file.replace("\\", "/"))
    directories = [part.lower() for part in path.parent.parts if part not in ("", ".", "/")]
    return package + directories + [path.stem.lower()]


def statement_declaration_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def load_catalog(data: dict[str, Any]) -> list[RowShape]:
    """
    Build row shapes from a catalog document.

    Order: tables, then statements, then raw row shapes, each in document order.
    Declaration names must be valid identifiers.

    Raises:
        CatalogError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a JSON object")

    package = _package_segments(data)
    shapes: list[RowShape] = []

    for i, table in enumerate(_entries(data, "tables")):
        context = f"tables[{i}]"
        name = _require(table, "name", context)
        schema = _optional(table, "schema", context, "public")
        shapes.append(_make_shape(table_namespace(package, schema), name, _load_columns(table, context), context))

    for i, statement in enumerate(_entries(data, "statements")):
        context = f"statements[{i}]"
        name = _require(statement, "name", context)
        file = _require(statement, "file", context)
        shapes.append(
            _make_shape(
                statement_namespace(package, file),
                statement_declaration_name(name),
                _load_columns(statement, context),
                context,
            )
        )

    for i, raw in enumerate(_entries(data, "row_shapes")):
        context = f"row_shapes[{i}]"
        namespace = _require(raw, "namespace", context, (str, list))
        if isinstance(namespace, str):
            namespace = namespace.split(".")
        name = _require(raw, "name", context)
        shapes.append(_make_shape(_string_list(namespace, "namespace", context), name, _load_columns(raw, context), context))

    logger.debug("Loaded %d row shapes from catalog", len(shapes))
    return shapes


def load_catalog_file(path: str | Path) -> list[RowShape]:
    """Load row shapes from a catalog JSON file."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid catalog file {path}: {e}") from e
    return load_catalog(data)
