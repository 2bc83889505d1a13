#!/usr/bin/env python3

"""Recognition of ``// ENUM Name (a, b, c)`` declarations in Go source.

Only single-line declarations are recognised. Lines that do not match are
ordinary comments or code and are skipped without error.
"""

import re
from collections.abc import Iterable

from ....infrastructure.logging import get_logger, log_timing
from ...errors import EmptyDeclarationError, EnumGenerationError, NoDeclarationsError
from ...models import EnumDeclaration, ValueRecord
from .label_sanitizer import sanitize_label

logger = get_logger(__name__)

ENUM_PATTERN = re.compile(r"^\s*//\s*ENUM\s+(\w+)\s*\((.*?)\)", re.ASCII)


class DeclarationScanner:
    """Scans source lines for ENUM declarations.

    Each matched line becomes an independent EnumDeclaration; the YAML option
    is applied to every declaration of the run.
    """

    def __init__(self, emit_yaml: bool = False) -> None:
        """Initialize scanner.

        Args:
            emit_yaml: Whether the declarations should get the YAML marshaling unit
        """
        self.emit_yaml = emit_yaml

    def parse_line(self, line: str, line_number: int | None = None) -> EnumDeclaration | None:
        """Parse one line.

        Args:
            line: Source line (with or without trailing newline)
            line_number: 1-based line number for diagnostics

        Returns:
            EnumDeclaration if the line is an ENUM comment, otherwise None

        Raises:
            EmptyDeclarationError: If the declaration lists no values
        """
        match = ENUM_PATTERN.match(line)
        if match is None:
            return None

        name, value_list = match.groups()
        values = tuple(
            ValueRecord(original=label, identifier=sanitize_label(label))
            for label in (piece.strip() for piece in value_list.split(","))
            if label
        )

        if not values:
            raise EmptyDeclarationError(name, line_number)

        logger.debug(f"Found enum {name} with {len(values)} values at line {line_number}")
        return EnumDeclaration(
            name=name,
            values=values,
            emit_yaml=self.emit_yaml,
            line_number=line_number,
        )

    @log_timing(expected=(EnumGenerationError,))
    def scan(self, lines: Iterable[str], source: str = "<input>") -> list[EnumDeclaration]:
        """Scan all lines and return declarations in source order.

        Args:
            lines: Source lines, e.g. an open text file
            source: Name of the input used in error messages

        Returns:
            Declarations in the order they appear

        Raises:
            EmptyDeclarationError: If a declaration lists no values
            NoDeclarationsError: If no line declares an enum
        """
        declarations = []
        line_count = 0

        for line_count, line in enumerate(lines, 1):
            declaration = self.parse_line(line, line_count)
            if declaration is not None:
                declarations.append(declaration)

        logger.debug(f"Scanned {line_count} lines, found {len(declarations)} declarations")

        if not declarations:
            raise NoDeclarationsError(source)

        return declarations


def scan_declarations(
    lines: Iterable[str], emit_yaml: bool = False, source: str = "<input>"
) -> list[EnumDeclaration]:
    """Convenience wrapper around DeclarationScanner.scan()."""
    return DeclarationScanner(emit_yaml=emit_yaml).scan(lines, source)
