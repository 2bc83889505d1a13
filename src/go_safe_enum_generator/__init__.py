"""Go safe enum generator - type-safe Go enums from ENUM comments."""

from .application.generators import EnumGenerator, generate_enum_file
from .domain.models import EnumDeclaration, ValueRecord
from .domain.services.generation import EnumEmitter
from .domain.services.parsing import DeclarationScanner, sanitize_label
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "DeclarationScanner",
    "EnumDeclaration",
    "EnumEmitter",
    "EnumGenerator",
    "ValueRecord",
    "generate_enum_file",
    "main",
    "sanitize_label",
]
