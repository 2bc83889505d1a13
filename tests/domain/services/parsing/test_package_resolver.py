#!/usr/bin/env python3

"""Unit tests for Go package name resolution."""

import pytest

from go_safe_enum_generator.domain.errors import PackageResolutionError
from go_safe_enum_generator.domain.services.parsing import read_package_name, resolve_package_name


@pytest.mark.unit
class TestResolvePackageName:
    """Test suite for resolve_package_name."""

    def test_plain_package_clause(self):
        assert resolve_package_name("package mail\n") == "mail"

    def test_skips_leading_comments(self, auth_source):
        assert resolve_package_name(auth_source) == "mail"

    def test_skips_block_comments_and_build_tags(self):
        source = (
            "//go:build linux\n"
            "\n"
            "/*\n"
            "Package storage does things.\n"
            "package notthisone\n"
            "*/\n"
            "package storage // trailing comment\n"
        )
        assert resolve_package_name(source) == "storage"

    def test_byte_order_mark(self):
        assert resolve_package_name("\ufeffpackage bom\n") == "bom"

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "// ENUM Foo (a, b)\n",
            "import \"fmt\"\npackage late\n",
            "package\n",
            "package _\n",
            "/* unterminated\npackage x\n",
        ],
    )
    def test_missing_package_clause(self, source):
        with pytest.raises(PackageResolutionError):
            resolve_package_name(source, "bad.go")

    def test_read_package_name(self, go_file):
        assert read_package_name(go_file) == "mail"

    def test_read_package_name_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.go"
        path.write_bytes(b"package caf\xe9\n")
        with pytest.raises(PackageResolutionError, match="opening file"):
            read_package_name(path)

    def test_read_package_name_missing_file(self, tmp_path):
        with pytest.raises(PackageResolutionError, match="opening file"):
            read_package_name(tmp_path / "missing.go")
