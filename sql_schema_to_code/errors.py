"""
Errors raised while generating declarations.

Every error is fatal to the generation run: nothing is written when one
of them is raised.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for all generation failures."""

    pass


class UnsupportedTypeError(CodeGenerationError):
    """A column's native type has no entry in the type map."""

    def __init__(self, shape_name: str, column_name: str, native_type: str):
        self.shape_name = shape_name
        self.column_name = column_name
        self.native_type = native_type
        super().__init__(f"Unsupported native type '{native_type}' for column '{column_name}' in '{shape_name}'")


class FieldNameCollisionError(CodeGenerationError):
    """Two columns of one row shape map to the same field name."""

    def __init__(self, shape_name: str, first_column: str, second_column: str, field_name: str):
        self.shape_name = shape_name
        self.first_column = first_column
        self.second_column = second_column
        self.field_name = field_name
        super().__init__(f"Columns '{first_column}' and '{second_column}' in '{shape_name}' both map to field '{field_name}'")


class DuplicateDeclarationError(CodeGenerationError):
    """Two row shapes share both namespace and declaration name."""

    def __init__(self, qualified_name: str):
        self.qualified_name = qualified_name
        super().__init__(f"Duplicate declaration '{qualified_name}'")


class InvalidNamespaceError(CodeGenerationError, ValueError):
    """A namespace path is empty or contains an empty segment."""

    pass


class CatalogError(CodeGenerationError):
    """The catalog document describing tables and statements is malformed."""

    pass
