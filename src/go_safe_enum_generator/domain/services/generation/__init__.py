#!/usr/bin/env python3

"""Generation services for Go enum source."""

from .enum_emitter import BASE_IMPORTS, EnumEmitter, go_string

__all__ = [
    "BASE_IMPORTS",
    "EnumEmitter",
    "go_string",
]
