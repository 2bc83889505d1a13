#!/usr/bin/env python3

"""Domain layer containing the enum model, parsing and generation."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
