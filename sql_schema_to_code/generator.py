"""
Generator - row shapes to a TypeScript declaration document.

Runs the pure transform in three steps:

1. Map: every column of every row shape to a target field (TypeMapper)
2. Emit: one namespace-wrapped interface block per row shape (DeclarationEmitter)
3. Assemble: optional generation comment followed by the blocks

No I/O happens here; writing the result is left to writer.AtomicWriter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import CodeGeneratorConfig
from .emitter import DeclarationEmitter
from .model import RowShape
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class TypeScriptGenerator:
    """Generates TypeScript declarations from row shapes."""

    def __init__(self, row_shapes: Sequence[RowShape], config: CodeGeneratorConfig | None = None):
        self.row_shapes = list(row_shapes)
        self.config = config or CodeGeneratorConfig()
        self.mapper = TypeMapper(self.config)
        self.emitter = DeclarationEmitter(self.config, self.mapper)
        self.prefix_template = self.emitter.jinja_env.get_template("prefix.ts.jinja2")

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        try:
            from .sql_schema_to_code import sql_schema_to_code as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "sql_schema_to_code"

        return f"// Generated by sql_schema_to_code v{__version__} : {command_line}"

    def generate(self) -> str:
        """
        Generate the full document.

        Returns:
            Generated declarations, or only the prefix when there are no row shapes

        Raises:
            CodeGenerationError: On the first unsupported type, field name collision
                or duplicate declaration
        """
        logger.debug("Generating declarations for %d row shapes", len(self.row_shapes))
        body = self.emitter.render(self.row_shapes)
        prefix = self.prefix_template.render(GENERATION_COMMENT=self._generate_command_comment())
        logger.info(
            "Generated %d declarations in %d namespaces",
            len(self.row_shapes),
            len({shape.namespace for shape in self.row_shapes}),
        )
        return prefix + body
