"""SQL Schema to Code Generator

Generates TypeScript namespace/interface declarations from the row shapes
of database tables and named SQL statements.
"""

__version__ = "1.0.0"

from .catalog import load_catalog, load_catalog_file
from .config import CodeGeneratorConfig, NullablePolicy
from .emitter import DeclarationEmitter
from .errors import (
    CatalogError,
    CodeGenerationError,
    DuplicateDeclarationError,
    FieldNameCollisionError,
    InvalidNamespaceError,
    UnsupportedTypeError,
)
from .generator import TypeScriptGenerator
from .model import ColumnDescriptor, NamespacePath, RowShape, TargetField
from .type_mapper import TYPE_MAP, TypeMapper
from .writer import AtomicWriter

__all__ = [
    "TypeScriptGenerator",
    "TypeMapper",
    "DeclarationEmitter",
    "TYPE_MAP",
    "CodeGeneratorConfig",
    "NullablePolicy",
    "ColumnDescriptor",
    "NamespacePath",
    "RowShape",
    "TargetField",
    "AtomicWriter",
    "load_catalog",
    "load_catalog_file",
    "CodeGenerationError",
    "UnsupportedTypeError",
    "FieldNameCollisionError",
    "DuplicateDeclarationError",
    "InvalidNamespaceError",
    "CatalogError",
]
