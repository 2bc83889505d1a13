#!/usr/bin/env python3

"""Integration tests for the EnumGenerator pipeline."""

from pathlib import Path

import pytest

from go_safe_enum_generator.application.generators import EnumGenerator, generate_enum_file
from go_safe_enum_generator.domain.errors import (
    EmptyDeclarationError,
    NoDeclarationsError,
    PackageResolutionError,
)
from go_safe_enum_generator.domain.services.generation import EnumEmitter


def write_go(tmp_path: Path, source: str, name: str = "input.go") -> Path:
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return path


@pytest.mark.integration
class TestEnumGenerator:
    """Test suite for the EnumGenerator orchestrator."""

    def test_generate_full_file(self, go_file):
        """Test header plus one unit per declaration, in order."""
        with EnumGenerator(go_file) as generator:
            assert generator.package == "mail"
            content = generator.generate()

        assert content.startswith("package mail\n\nimport (\n")
        assert "yaml" not in content
        assert content.index("type AuthType struct") < content.index("type Status struct")
        assert content.count("is an enum.") == 2

    def test_auth_type_members(self, go_file):
        with EnumGenerator(go_file) as generator:
            content = generator.generate()

        for member, label in (
            ("AuthTypeUnknown", "unknown"),
            ("AuthTypePlain", "plain"),
            ("AuthTypeLogin", "login"),
            ("AuthTypeDigestMd5", "digest-md5"),
            ("AuthTypeCramMd5", "cram-md5"),
        ):
            assert f'\t{member:<17} = AuthType{{"{label}"}}\n' in content
        assert "\t\t3: AuthTypeDigestMd5,\n" in content

    def test_generate_with_yaml(self, go_file):
        with EnumGenerator(go_file, emit_yaml=True) as generator:
            content = generator.generate()

        assert '\t"gopkg.in/yaml.v3"\n' in content
        assert content.count("UnmarshalYAML(value *yaml.Node)") == 2

    def test_custom_emitter(self, go_file):
        emitter = EnumEmitter(reference_url="https://example.com")
        with EnumGenerator(go_file, emitter=emitter) as generator:
            content = generator.generate()
        assert "// see https://example.com\n" in content

    def test_input_is_closed_after_use(self, go_file):
        generator = EnumGenerator(go_file)
        with generator:
            handle = generator.file_handle
            generator.generate()
        assert handle.closed
        assert generator.file_handle is None

    def test_scan_requires_context(self, go_file):
        with pytest.raises(RuntimeError):
            EnumGenerator(go_file).scan()

    def test_missing_input(self, tmp_path):
        with pytest.raises(PackageResolutionError, match="opening file"):
            with EnumGenerator(tmp_path / "missing.go"):
                pass

    def test_undecodable_input(self, tmp_path):
        path = tmp_path / "latin1.go"
        path.write_bytes("package main\n// ENUM A (caf\xe9)\n".encode("latin-1"))

        generator = EnumGenerator(path)
        with pytest.raises(PackageResolutionError, match="reading file"):
            with generator:
                pass
        assert generator.file_handle.closed

    def test_missing_package_clause(self, tmp_path):
        path = write_go(tmp_path, "// ENUM A (x, y)\n")
        with pytest.raises(PackageResolutionError):
            with EnumGenerator(path):
                pass

    def test_no_declarations(self, tmp_path):
        path = write_go(tmp_path, "package main\n\nfunc main() {}\n")
        with EnumGenerator(path) as generator:
            with pytest.raises(NoDeclarationsError):
                generator.generate()


@pytest.mark.integration
class TestGenerateEnumFile:
    """Test suite for generate_enum_file."""

    def test_writes_output_file(self, go_file, tmp_path):
        output = tmp_path / "mail_enums.go"
        content = generate_enum_file(go_file, output)

        assert output.read_text(encoding="utf-8") == content
        assert "func AuthTypeFromInt(value int) (AuthType, error) {" in content

    def test_writes_stdout_without_output(self, go_file, capsys):
        content = generate_enum_file(go_file)
        captured = capsys.readouterr()
        assert captured.out == content

    def test_no_output_file_on_failure(self, tmp_path):
        path = write_go(tmp_path, "package main\n// nothing here\n")
        output = tmp_path / "out.go"

        with pytest.raises(NoDeclarationsError):
            generate_enum_file(path, output)
        assert not output.exists()

    def test_empty_declaration_aborts_whole_run(self, tmp_path):
        path = write_go(tmp_path, "package main\n// ENUM Good (a)\n// ENUM Foo ()\n")
        output = tmp_path / "out.go"

        with pytest.raises(EmptyDeclarationError, match="Foo"):
            generate_enum_file(path, output)
        assert not output.exists()

    def test_existing_output_untouched_on_failure(self, tmp_path):
        path = write_go(tmp_path, "package main\n")
        output = tmp_path / "out.go"
        output.write_text("previous", encoding="utf-8")

        with pytest.raises(NoDeclarationsError):
            generate_enum_file(path, output)
        assert output.read_text(encoding="utf-8") == "previous"
