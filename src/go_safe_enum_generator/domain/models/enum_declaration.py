#!/usr/bin/env python3

"""Enum declaration model parsed from ``// ENUM`` comments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueRecord:
    """One enumerated member: the label as written and its Go identifier fragment."""

    original: str
    identifier: str

    @property
    def exported_identifier(self) -> str:
        """Identifier with its leading letter upper-cased, as used after the enum name."""
        return self.identifier[:1].upper() + self.identifier[1:]


@dataclass(frozen=True)
class EnumDeclaration:
    """A parsed ``// ENUM Name (v1, v2, ...)`` declaration."""

    name: str
    values: tuple[ValueRecord, ...]
    emit_yaml: bool = False
    line_number: int | None = None

    @property
    def lower_name(self) -> str:
        """Lower-cased name used for unexported backing variables and messages."""
        return self.name.lower()

    @property
    def default_value(self) -> ValueRecord:
        """First declared member, substituted on parse failure and NULL scans."""
        return self.values[0]

    @property
    def int_map(self) -> dict[int, ValueRecord]:
        """Positional index to member, in declaration order."""
        return dict(enumerate(self.values))

    def member_name(self, value: ValueRecord) -> str:
        """Go name of the exported member variable for ``value``."""
        return f"{self.name}{value.exported_identifier}"
