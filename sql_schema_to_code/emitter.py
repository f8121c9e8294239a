"""
Declaration emitter.

Renders one namespace-wrapped interface block per row shape, in input
order. Repeated namespaces are never merged: every row shape gets its own
namespace wrapper, even when the previous block used the same path.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import jinja2

from .config import CodeGeneratorConfig, NullablePolicy
from .errors import DuplicateDeclarationError
from .model import RowShape, TargetField
from .type_mapper import TypeMapper
from .utils import is_valid_identifier

TEMPLATE_DIR = Path(__file__).parent / "templates" / "ts"


def _quote_property_name(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DeclarationEmitter:
    """Renders row shapes as TypeScript namespace/interface blocks."""

    FILE_EXTENSION = "ts"

    def __init__(self, config: CodeGeneratorConfig | None = None, mapper: TypeMapper | None = None):
        self.config = config or CodeGeneratorConfig()
        self.mapper = mapper or TypeMapper(self.config)
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.interface_template = self.jinja_env.get_template(f"interface.{self.FILE_EXTENSION}.jinja2")

    def emit(self, row_shapes: Sequence[RowShape]) -> list[str]:
        """
        Render every row shape as its own declaration block.

        All shapes are mapped before anything is returned, so a failure in any
        of them leaves no partial output.

        Raises:
            DuplicateDeclarationError: If two shapes share namespace and name
            UnsupportedTypeError: If a column type is not supported
            FieldNameCollisionError: If two columns map to the same field name
        """
        self._check_duplicates(row_shapes)
        return [self.render_block(shape, self.mapper.map_shape(shape)) for shape in row_shapes]

    def render(self, row_shapes: Sequence[RowShape]) -> str:
        """Render all blocks separated by a blank line."""
        blocks = self.emit(row_shapes)
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def render_block(self, shape: RowShape, fields: list[TargetField]) -> str:
        return self.interface_template.render(self._prepare_block_context(shape, fields))

    def _check_duplicates(self, row_shapes: Sequence[RowShape]) -> None:
        seen = set()
        for shape in row_shapes:
            key = (shape.namespace, shape.declaration_name)
            if key in seen:
                raise DuplicateDeclarationError(shape.qualified_name)
            seen.add(key)

    def _prepare_block_context(self, shape: RowShape, fields: list[TargetField]) -> dict[str, Any]:
        return {
            "NAMESPACE_KEYWORD": "export namespace" if self.config.export_namespaces else "namespace",
            "NAMESPACE": shape.namespace.render(self.config.namespace_separator),
            "DECLARATION_NAME": shape.declaration_name,
            "INDENT": self.config.indent,
            "FIELDS": [self._prepare_field_context(f) for f in fields],
        }

    def _prepare_field_context(self, target: TargetField) -> dict[str, str]:
        name = target.field_name if is_valid_identifier(target.field_name) else _quote_property_name(target.field_name)
        marker = ""
        field_type = target.field_type
        if target.optional:
            match self.config.nullable_policy:
                case NullablePolicy.OPTIONAL:
                    marker = "?"
                case NullablePolicy.UNION:
                    field_type = f"{field_type} | null"
                case NullablePolicy.IGNORE:
                    pass
        return {"NAME": name, "MARKER": marker, "TYPE": field_type}
