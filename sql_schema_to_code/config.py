"""
Configuration for the declaration generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NullablePolicy(str, Enum):
    """How nullable columns are rendered.

    The default keeps the historical output where every field is a plain,
    non-optional type.
    """

    IGNORE = "ignore"  # firstName: string;
    OPTIONAL = "optional"  # firstName?: string;
    UNION = "union"  # firstName: string | null;


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Rendering of nullable columns
    nullable_policy: NullablePolicy = NullablePolicy.IGNORE

    # Prefix namespaces with "export" (as in .d.ts files)
    export_namespaces: bool = False

    # Add "// Generated by ..." comment at top of file
    add_generation_comment: bool = False

    # Indentation unit for nested lines
    indent: str = "    "

    # Separator placed between namespace segments
    namespace_separator: str = "."

    # Extra native type tag -> target type token entries
    type_overrides: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.nullable_policy = NullablePolicy(self.nullable_policy)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.nullable_policy = NullablePolicy(config.nullable_policy)
        if not isinstance(config.type_overrides, dict):
            raise ValueError("type_overrides must be a mapping of native type to target type")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "nullable_policy": self.nullable_policy.value,
            "export_namespaces": self.export_namespaces,
            "add_generation_comment": self.add_generation_comment,
            "indent": self.indent,
            "namespace_separator": self.namespace_separator,
            "type_overrides": self.type_overrides,
        }
