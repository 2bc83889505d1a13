#!/usr/bin/env python3

"""Errors raised while turning ENUM comments into Go code."""


class EnumGenerationError(ValueError):
    """Base class for failures that abort a generation run."""


class PackageResolutionError(EnumGenerationError):
    """The Go package clause of the input could not be determined."""


class NoDeclarationsError(EnumGenerationError):
    """The input contained no ENUM declaration."""

    def __init__(self, source: str) -> None:
        super().__init__(f"no enum definitions found in {source}")
        self.source = source


class EmptyDeclarationError(EnumGenerationError):
    """An ENUM declaration matched but listed no values."""

    def __init__(self, name: str, line_number: int | None = None) -> None:
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"enum {name}{location} declares no values")
        self.name = name
        self.line_number = line_number
