"""
Type mapper: native column types to TypeScript type tokens.

Maps each column of a row shape to a TargetField, converting the column
name into a camelCase field name and the native type family into the
target type token.
"""

from __future__ import annotations

from types import MappingProxyType

from .config import CodeGeneratorConfig
from .errors import FieldNameCollisionError, UnsupportedTypeError
from .model import ColumnDescriptor, RowShape, TargetField
from .utils import snake_to_camel_case

NUMBER = "number"
STRING = "string"
BOOLEAN = "boolean"

_TYPE_FAMILIES = {
    NUMBER: (
        "integer",
        "int",
        "int2",
        "int4",
        "int8",
        "smallint",
        "bigint",
        "tinyint",
        "serial",
        "bigserial",
        "numeric",
        "decimal",
        "real",
        "double",
        "float",
        "number",
    ),
    STRING: (
        "text",
        "string",
        "varchar",
        "char",
        "character varying",
        "character",
        "clob",
        "uuid",
    ),
    BOOLEAN: (
        "boolean",
        "bool",
        "bit",
    ),
}

# Native type tag -> target type token. Read-only.
TYPE_MAP = MappingProxyType({tag: token for token, tags in _TYPE_FAMILIES.items() for tag in tags})


def normalize_type_tag(native_type: str) -> str:
    return native_type.strip().lower()


class TypeMapper:
    """Maps column descriptors to target fields."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.type_map = dict(TYPE_MAP)
        for tag, token in self.config.type_overrides.items():
            self.type_map[normalize_type_tag(tag)] = token

    def supports(self, native_type: str) -> bool:
        return normalize_type_tag(native_type) in self.type_map

    def translate_type(self, native_type: str, column_name: str = "", shape_name: str = "") -> str:
        """
        Translate a native type tag to a target type token.

        Raises:
            UnsupportedTypeError: If the tag is not in the type map
        """
        try:
            return self.type_map[normalize_type_tag(native_type)]
        except KeyError:
            raise UnsupportedTypeError(shape_name, column_name, native_type) from None

    def map(self, descriptor: ColumnDescriptor, shape_name: str = "") -> TargetField:
        field_type = self.translate_type(descriptor.native_type, descriptor.source_name, shape_name)
        return TargetField(
            field_name=snake_to_camel_case(descriptor.source_name),
            field_type=field_type,
            optional=descriptor.nullable,
            source_name=descriptor.source_name,
        )

    def map_shape(self, shape: RowShape) -> list[TargetField]:
        """
        Map all columns of a row shape, preserving column order.

        Raises:
            UnsupportedTypeError: If a column type is not supported
            FieldNameCollisionError: If two columns map to the same field name
        """
        fields: list[TargetField] = []
        by_name: dict[str, TargetField] = {}
        for column in shape.columns:
            target = self.map(column, shape.qualified_name)
            previous = by_name.get(target.field_name)
            if previous is not None:
                raise FieldNameCollisionError(shape.qualified_name, previous.source_name, column.source_name, target.field_name)
            by_name[target.field_name] = target
            fields.append(target)
        return fields
