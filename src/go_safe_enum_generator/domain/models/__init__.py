#!/usr/bin/env python3

"""Domain models."""

from .enum_declaration import EnumDeclaration, ValueRecord

__all__ = [
    "EnumDeclaration",
    "ValueRecord",
]
