#!/usr/bin/env python3

"""Parsing services: label sanitizing, declaration scanning and package lookup."""

from .declaration_scanner import ENUM_PATTERN, DeclarationScanner, scan_declarations
from .label_sanitizer import sanitize_label
from .package_resolver import read_package_name, resolve_package_name

__all__ = [
    "ENUM_PATTERN",
    "DeclarationScanner",
    "read_package_name",
    "resolve_package_name",
    "sanitize_label",
    "scan_declarations",
]
