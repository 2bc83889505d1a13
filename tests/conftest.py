"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from go_safe_enum_generator.domain.models import EnumDeclaration
from go_safe_enum_generator.domain.services.parsing import DeclarationScanner
from go_safe_enum_generator.infrastructure.logging import LoggerSetup

AUTH_SOURCE = """\
// Package mail holds SMTP helpers.
package mail

// ENUM AuthType (unknown, plain, login, digest-md5, cram-md5)

// ENUM Status (200-OK, 404-not-found, 500-error)

// An ordinary comment that is not a declaration.
type Client struct{}
"""


@pytest.fixture
def auth_source() -> str:
    """Go source with two ENUM declarations."""
    return AUTH_SOURCE


@pytest.fixture
def go_file(tmp_path: Path, auth_source: str) -> Path:
    """Write the sample Go source to a temporary file."""
    path = tmp_path / "mail.go"
    path.write_text(auth_source, encoding="utf-8")
    return path


@pytest.fixture
def auth_enum() -> EnumDeclaration:
    """The AuthType declaration as scanned."""
    declaration = DeclarationScanner().parse_line(
        "// ENUM AuthType (unknown, plain, login, digest-md5, cram-md5)", 1
    )
    assert declaration is not None
    return declaration


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear generator environment variables and run from an empty directory."""
    for key in (
        "ENUM_INPUT_FILE",
        "ENUM_OUTPUT_FILE",
        "ENUM_YAML",
        "ENUM_YAML_IMPORT",
        "ENUM_REFERENCE_URL",
        "VERBOSE",
        "LOG_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo LoggerSetup.initialize() after the test."""
    yield
    LoggerSetup.reset()
