"""
Row shape data model.

These values are produced fresh for every generation run by the collector
(see catalog.py) and consumed by the type mapper and the emitter. They are
immutable and never cached between runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import InvalidNamespaceError
from .utils import safe_namespace_segment


@dataclass(frozen=True)
class ColumnDescriptor:
    """A single column of a table or query result."""

    source_name: str
    native_type: str  # Opaque type family tag, e.g. "integer", "text"
    nullable: bool = False

    def __post_init__(self):
        if not self.source_name:
            raise ValueError("Column source name must not be empty")


@dataclass(frozen=True)
class NamespacePath:
    """Ordered, validated namespace segments.

    The separator is only applied at render time.
    """

    segments: tuple[str, ...] = ()

    def __post_init__(self):
        segments = tuple(self.segments)
        if not segments:
            raise InvalidNamespaceError("Namespace path must have at least one segment")
        for segment in segments:
            if not isinstance(segment, str) or not segment.strip():
                raise InvalidNamespaceError(f"Empty namespace segment in {list(segments)!r}")
        object.__setattr__(self, "segments", tuple(safe_namespace_segment(s.strip()) for s in segments))

    @staticmethod
    def parse(path: str, separator: str = ".") -> NamespacePath:
        """Create a path from a separated string such as "com.example.schema_public"."""
        return NamespacePath(tuple(path.split(separator)))

    def child(self, *segments: str) -> NamespacePath:
        return NamespacePath(self.segments + segments)

    def render(self, separator: str = ".") -> str:
        return separator.join(self.segments)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class RowShape:
    """The named, ordered set of columns of one table or one statement."""

    namespace: NamespacePath
    declaration_name: str
    columns: tuple[ColumnDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if isinstance(self.namespace, str):
            object.__setattr__(self, "namespace", NamespacePath.parse(self.namespace))
        elif not isinstance(self.namespace, NamespacePath):
            object.__setattr__(self, "namespace", NamespacePath(tuple(self.namespace)))
        if not self.declaration_name:
            raise ValueError("Declaration name must not be empty")
        columns = tuple(self.columns)
        seen: set[str] = set()
        for column in columns:
            if column.source_name in seen:
                raise ValueError(f"Duplicate column '{column.source_name}' in '{self.declaration_name}'")
            seen.add(column.source_name)
        object.__setattr__(self, "columns", columns)

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace.render()}.{self.declaration_name}"

    @staticmethod
    def create(namespace: Iterable[str] | str, name: str, columns: Iterable[tuple]) -> RowShape:
        """Build a row shape from plain values.

        Columns are (name, native_type) or (name, native_type, nullable) tuples.
        """
        path = NamespacePath.parse(namespace) if isinstance(namespace, str) else NamespacePath(tuple(namespace))
        return RowShape(path, name, tuple(ColumnDescriptor(*c) for c in columns))


@dataclass(frozen=True)
class TargetField:
    """A column mapped to the target language. Derived, never persisted."""

    field_name: str
    field_type: str
    optional: bool = False
    source_name: str = ""
