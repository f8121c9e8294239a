"""
Atomic file writer for generated declarations.

Ensures that an interrupted or failed run never leaves a half-written
declaration file behind.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import CodeGenerationError

logger = logging.getLogger(__name__)

# Quoted property names and line comments may contain braces
_STRINGS_AND_COMMENTS = re.compile(r'"(?:[^"\\\n]|\\.)*"|//[^\n]*')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function for the generated code
        """
        self._validate = validate or self._default_validate

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            CodeGenerationError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)
            logger.debug("Wrote %d bytes to %s", len(content), path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

    def _default_validate(self, content: str) -> None:
        """Basic structural checks on the generated declarations.

        Raises:
            CodeGenerationError: If validation fails
        """
        code = _STRINGS_AND_COMMENTS.sub("", content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise CodeGenerationError(f"Generated code has unbalanced braces: {open_braces} open, {close_braces} close")
