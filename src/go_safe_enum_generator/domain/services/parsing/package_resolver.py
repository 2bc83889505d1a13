#!/usr/bin/env python3

"""Extraction of the Go package name from a source file."""

import re
from pathlib import Path

from ....infrastructure.logging import get_logger
from ...errors import PackageResolutionError

logger = get_logger(__name__)

# Whitespace, line comments and block comments that may precede the package clause
LEADING_TRIVIA = re.compile(r"(?:\s+|//[^\n]*|/\*.*?\*/)*", re.DOTALL)
PACKAGE_CLAUSE = re.compile(r"package[ \t]+([A-Za-z_][A-Za-z0-9_]*)\b")


def resolve_package_name(source: str, origin: str = "<input>") -> str:
    """Return the name declared by the package clause of Go source text.

    Args:
        source: Complete Go source text
        origin: Name of the input used in error messages

    Returns:
        Package name

    Raises:
        PackageResolutionError: If the file does not start with a package clause
    """
    if source.startswith("\ufeff"):
        source = source[1:]

    position = LEADING_TRIVIA.match(source).end()
    match = PACKAGE_CLAUSE.match(source, position)
    if match is None:
        raise PackageResolutionError(f"parsing package clause: no package clause found in {origin}")

    package = match.group(1)
    if package == "_":
        raise PackageResolutionError(f"parsing package clause: invalid package name _ in {origin}")

    logger.debug(f"Resolved package {package} for {origin}")
    return package


def read_package_name(path: Path) -> str:
    """Read a Go file and return its package name."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PackageResolutionError(f"opening file: {e}") from e
    return resolve_package_name(source, str(path))
