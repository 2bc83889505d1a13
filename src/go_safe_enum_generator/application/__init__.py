#!/usr/bin/env python3

"""Application layer orchestrating the generation pipeline."""

from .generators import EnumGenerator, generate_enum_file

__all__ = ["EnumGenerator", "generate_enum_file"]
