#!/usr/bin/env python3

"""Go enum generator orchestrator (Application Layer).

Ties the domain services together:
- package_resolver: namespace context of the input file
- DeclarationScanner: ENUM comment recognition
- EnumEmitter: Go source rendering

The whole file is rendered in memory first, so a failing run never leaves a
partially written output behind.
"""

import io
import sys
from pathlib import Path
from typing import TextIO

from ...domain.errors import EnumGenerationError, PackageResolutionError
from ...domain.models import EnumDeclaration
from ...domain.services.generation import EnumEmitter
from ...domain.services.parsing import DeclarationScanner, resolve_package_name
from ...infrastructure.logging import get_logger, log_timing

logger = get_logger(__name__)


class EnumGenerator:
    """Generates Go safe enum code from the ENUM comments of one source file."""

    def __init__(
        self, input_path: Path, emit_yaml: bool = False, emitter: EnumEmitter | None = None
    ) -> None:
        """Initialize generator.

        Args:
            input_path: Go source file containing ENUM comments
            emit_yaml: Whether to generate YAML marshal/unmarshal methods
            emitter: Emitter to render with (a default one is created if None)
        """
        self.input_path = input_path
        self.emit_yaml = emit_yaml
        self.emitter = emitter or EnumEmitter()
        self.scanner = DeclarationScanner(emit_yaml=emit_yaml)
        self.package: str | None = None
        self.file_handle: TextIO | None = None

    def __enter__(self) -> "EnumGenerator":
        """Context manager entry - opens the input and resolves its package.

        Raises:
            PackageResolutionError: If the file cannot be opened or has no package clause
        """
        logger.debug(f"Opening input file: {self.input_path}")
        try:
            self.file_handle = open(self.input_path, encoding="utf-8")
        except OSError as e:
            raise PackageResolutionError(f"opening file: {e}") from e

        try:
            try:
                source = self.file_handle.read()
            except UnicodeDecodeError as e:
                raise PackageResolutionError(f"reading file {self.input_path}: {e}") from e
            self.package = resolve_package_name(source, str(self.input_path))
            self.file_handle.seek(0)
        except Exception:
            self.file_handle.close()
            raise

        logger.info(f"Processing {self.input_path} (package {self.package})")
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object | None
    ) -> None:
        """Context manager exit - closes the input file."""
        if self.file_handle is not None:
            self.file_handle.close()
            self.file_handle = None
            logger.debug("Input file closed")

    def scan(self) -> list[EnumDeclaration]:
        """Scan the opened input for declarations."""
        if self.file_handle is None:
            raise RuntimeError("EnumGenerator must be used as a context manager")
        return self.scanner.scan(self.file_handle, str(self.input_path))

    @log_timing(expected=(EnumGenerationError,))
    def generate(self) -> str:
        """Render the complete Go file.

        Returns:
            Header followed by one unit per declaration, in source order

        Raises:
            NoDeclarationsError: If the input declares no enum
            EmptyDeclarationError: If a declaration lists no values
        """
        declarations = self.scan()
        assert self.package is not None

        buffer = io.StringIO()
        buffer.write(self.emitter.generate_file_header(self.package, self.emit_yaml))
        for declaration in declarations:
            logger.info(f"Generating enum {declaration.name} ({len(declaration.values)} values)")
            self.emitter.emit_to(declaration, buffer)

        return buffer.getvalue()


@log_timing(expected=(EnumGenerationError,))
def generate_enum_file(
    input_path: Path, output_path: Path | None = None, emit_yaml: bool = False
) -> str:
    """Run the full pipeline and write the result.

    Args:
        input_path: Go source file containing ENUM comments
        output_path: Destination file; stdout when None
        emit_yaml: Whether to generate YAML marshal/unmarshal methods

    Returns:
        The generated Go source
    """
    with EnumGenerator(input_path, emit_yaml=emit_yaml) as generator:
        content = generator.generate()

    if output_path is None:
        sys.stdout.write(content)
        sys.stdout.flush()
    else:
        with open(output_path, "w", encoding="utf-8") as out:
            out.write(content)
        logger.info(f"[SUCCESS] Generated: {output_path}")

    return content
