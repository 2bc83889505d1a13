"""Application-level generators."""

from .enum_generator import EnumGenerator, generate_enum_file

__all__ = ["EnumGenerator", "generate_enum_file"]
