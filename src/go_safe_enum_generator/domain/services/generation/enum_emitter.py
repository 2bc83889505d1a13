#!/usr/bin/env python3

"""Go source generation for safe enum types.

Every declaration is rendered into a self-contained unit:
- A struct type wrapping an unexported slug, so the zero value is not a member
- String/Parse and the FromString/FromInt constructors
- A gorilla/schema converter hook
- database/sql Valuer and Scanner
- JSON, text and (optionally) YAML marshaling
- The backing member variables, value list and integer table

All lists and tables follow declaration order, which defines the integer
mapping used by FromInt and Scan.
"""

from typing import TextIO

from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from ...models import EnumDeclaration

logger = get_logger(__name__)

BASE_IMPORTS = (
    "database/sql/driver",
    "encoding/json",
    "fmt",
    "reflect",
    "strings",
)


def go_string(text: str) -> str:
    """Quote text as a Go interpreted string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f'"{escaped}"'


class EnumEmitter:
    """Renders EnumDeclaration objects as Go source."""

    def __init__(self, reference_url: str | None = None, yaml_import: str | None = None) -> None:
        """Initialize emitter.

        Args:
            reference_url: Link written into each type's doc comment
                (defaults to the REFERENCE_URL setting)
            yaml_import: Import path of the YAML package
                (defaults to the YAML_IMPORT setting)
        """
        config = get_config()
        self.reference_url = reference_url if reference_url is not None else config["REFERENCE_URL"]
        self.yaml_import = yaml_import if yaml_import is not None else config["YAML_IMPORT"]

    def generate_file_header(self, package: str, emit_yaml: bool = False) -> str:
        """Generate the package clause and import block shared by all units.

        Args:
            package: Go package name of the generated file
            emit_yaml: Whether the YAML package is imported

        Returns:
            Header text ending with the closing import parenthesis and newline
        """
        imports = list(BASE_IMPORTS)
        if emit_yaml:
            imports.append(self.yaml_import)

        lines = [f"package {package}", "", "import ("]
        lines.extend(f"\t{go_string(path)}" for path in imports)
        lines.extend([")", ""])
        return "\n".join(lines)

    def emit(self, enum: EnumDeclaration) -> str:
        """Render one declaration.

        Args:
            enum: Declaration to render; must have at least one value

        Returns:
            Go source for the complete unit
        """
        sections = [
            self._generate_type_definition(enum),
            self._generate_string_method(enum),
            self._generate_parse_method(enum),
            self._generate_from_string(enum),
            self._generate_from_int(enum),
            self._generate_schema_converter(enum),
            self._generate_valuer(enum),
            self._generate_scanner(enum),
        ]
        if enum.emit_yaml:
            sections.append(self._generate_yaml_methods(enum))
        sections.extend(
            [
                self._generate_json_methods(enum),
                self._generate_text_methods(enum),
                self._generate_values_method(enum),
                self._generate_backing_variables(enum),
            ]
        )

        logger.debug(f"Rendered {enum.name} with {len(sections)} sections")
        return "\n" + "\n\n".join("\n".join(section) for section in sections) + "\n"

    def emit_to(self, enum: EnumDeclaration, out: TextIO) -> None:
        """Append the rendered unit for ``enum`` to ``out``."""
        out.write(self.emit(enum))

    def _generate_type_definition(self, enum: EnumDeclaration) -> list[str]:
        possible_values = ", ".join(value.original for value in enum.values)
        lines = [
            f"// {enum.name} is an enum.",
            f"// Possible values: {possible_values}",
        ]
        if self.reference_url:
            lines.append(f"// see {self.reference_url}")
        lines.extend(
            [
                f"type {enum.name} struct {{",
                "\tslug string",
                "}",
            ]
        )
        return lines

    def _generate_string_method(self, enum: EnumDeclaration) -> list[str]:
        return [
            f"// String returns the string representation of a {enum.name} enum.",
            f"func (e {enum.name}) String() string {{",
            "\treturn e.slug",
            "}",
        ]

    def _generate_parse_method(self, enum: EnumDeclaration) -> list[str]:
        lines = [
            "// Parse sets the enum value from a string.",
            f"func (e *{enum.name}) Parse(s string) error {{",
            "\ts = strings.TrimSpace(s)",
            "\tswitch {",
        ]
        for value in enum.values:
            member = enum.member_name(value)
            lines.extend(
                [
                    f"\tcase strings.EqualFold(s, {member}.slug):",
                    f"\t\te.slug = {member}.slug",
                    "\t\treturn nil",
                ]
            )
        lines.extend(
            [
                "\t}",
                "",
                f"\t*e = {enum.member_name(enum.default_value)}",
                f'\treturn fmt.Errorf("unknown {enum.lower_name}: %s", s)',
                "}",
            ]
        )
        return lines

    def _generate_from_string(self, enum: EnumDeclaration) -> list[str]:
        return [
            f"// {enum.name}FromString returns a {enum.name} from a string.",
            f"func {enum.name}FromString(s string) ({enum.name}, error) {{",
            f"\te := {enum.name}{{}}",
            "\terr := e.Parse(s)",
            "\treturn e, err",
            "}",
        ]

    def _generate_from_int(self, enum: EnumDeclaration) -> list[str]:
        return [
            f"// {enum.name}FromInt returns a {enum.name} from a numeric value.",
            f"func {enum.name}FromInt(value int) ({enum.name}, error) {{",
            f"\tif v, ok := {enum.lower_name}IntMap[value]; ok {{",
            "\t\treturn v, nil",
            "\t}",
            f'\treturn {enum.name}{{}}, fmt.Errorf("can\'t convert the value %d to a {enum.name}", value)',
            "}",
        ]

    def _generate_schema_converter(self, enum: EnumDeclaration) -> list[str]:
        return [
            f"// {enum.name}SchemaConverter is for gorilla/schema "
            "(must be registered with decoder.RegisterConverter).",
            f"func {enum.name}SchemaConverter(value string) reflect.Value {{",
            f"\tvar e {enum.name}",
            "\tif err := e.Parse(value); err != nil {",
            "\t\treturn reflect.ValueOf(nil)",
            "\t}",
            "\treturn reflect.ValueOf(e)",
            "}",
        ]

    def _generate_valuer(self, enum: EnumDeclaration) -> list[str]:
        return [
            "// Value implements the driver.Valuer interface for database serialization.",
            f"func (e {enum.name}) Value() (driver.Value, error) {{",
            "\treturn e.slug, nil",
            "}",
        ]

    def _generate_scanner(self, enum: EnumDeclaration) -> list[str]:
        int_map = f"{enum.lower_name}IntMap"
        lines = [
            "// Scan implements the sql.Scanner interface for database deserialization.",
            f"func (e *{enum.name}) Scan(value interface{{}}) error {{",
            "\tif value == nil {",
            f"\t\te.slug = {enum.member_name(enum.default_value)}.slug",
            "\t\treturn nil",
            "\t}",
            "",
            "\tswitch v := value.(type) {",
            "\tdefault:",
            f'\t\treturn fmt.Errorf("can\'t convert to {enum.name}, unexpected type %T", v)',
        ]
        # Numeric sources resolve through the integer table; floats truncate toward zero
        numeric_cases = (("int", "v", "%d"), ("int64", "int(v)", "%d"), ("float64", "int(v)", "%f"))
        for go_type, key, verb in numeric_cases:
            lines.extend(
                [
                    f"\tcase {go_type}:",
                    f"\t\tif found, ok := {int_map}[{key}]; ok {{",
                    "\t\t\te.slug = found.slug",
                    "\t\t} else {",
                    f'\t\t\treturn fmt.Errorf("invalid value {verb} for {enum.name}", v)',
                    "\t\t}",
                ]
            )
        for go_type, text in (("[]byte", "string(v)"), ("*string", "*v"), ("string", "v")):
            lines.extend(
                [
                    f"\tcase {go_type}:",
                    f"\t\tif err := e.Parse({text}); err != nil {{",
                    f'\t\t\treturn fmt.Errorf("can\'t parse {enum.name}: %w", err)',
                    "\t\t}",
                    "\t\treturn nil",
                ]
            )
        lines.extend(
            [
                "\t}",
                "\treturn nil",
                "}",
            ]
        )
        return lines

    def _generate_yaml_methods(self, enum: EnumDeclaration) -> list[str]:
        return [
            "// MarshalYAML implements the yaml.Marshaler interface.",
            f"func (e {enum.name}) MarshalYAML() (interface{{}}, error) {{",
            "\treturn e.slug, nil",
            "}",
            "",
            "// UnmarshalYAML implements the yaml.Unmarshaler interface.",
            f"func (e *{enum.name}) UnmarshalYAML(value *yaml.Node) error {{",
            "\tif value == nil {",
            f'\t\treturn fmt.Errorf("can\'t unmarshal nil YAML into {enum.name}")',
            "\t}",
            "\tvar text string",
            "\tif err := value.Decode(&text); err != nil {",
            "\t\treturn err",
            "\t}",
            "\treturn e.Parse(text)",
            "}",
        ]

    def _generate_json_methods(self, enum: EnumDeclaration) -> list[str]:
        return [
            "// MarshalJSON implements the json.Marshaler interface.",
            f"func (e {enum.name}) MarshalJSON() ([]byte, error) {{",
            "\treturn json.Marshal(e.slug)",
            "}",
            "",
            "// UnmarshalJSON implements the json.Unmarshaler interface.",
            f"func (e *{enum.name}) UnmarshalJSON(data []byte) error {{",
            "\tif data == nil {",
            f'\t\treturn fmt.Errorf("can\'t unmarshal nil JSON into {enum.name}")',
            "\t}",
            "\tvar text string",
            "\tif err := json.Unmarshal(data, &text); err != nil {",
            "\t\treturn err",
            "\t}",
            "\treturn e.Parse(text)",
            "}",
        ]

    def _generate_text_methods(self, enum: EnumDeclaration) -> list[str]:
        return [
            "// MarshalText implements the encoding.TextMarshaler interface.",
            f"func (e {enum.name}) MarshalText() ([]byte, error) {{",
            "\treturn []byte(e.slug), nil",
            "}",
            "",
            "// UnmarshalText implements the encoding.TextUnmarshaler interface.",
            f"func (e *{enum.name}) UnmarshalText(data []byte) error {{",
            "\tif data == nil {",
            f'\t\treturn fmt.Errorf("can\'t unmarshal empty text into {enum.name}")',
            "\t}",
            "\treturn e.Parse(string(data))",
            "}",
        ]

    def _generate_values_method(self, enum: EnumDeclaration) -> list[str]:
        return [
            "// Values returns the list of possible values for the enum.",
            f"func (e *{enum.name}) Values() []{enum.name} {{",
            f"\treturn append([]{enum.name}{{}}, {enum.lower_name}Values...)",
            "}",
        ]

    def _generate_backing_variables(self, enum: EnumDeclaration) -> list[str]:
        members = [enum.member_name(value) for value in enum.values]
        values_name = f"{enum.lower_name}Values"
        int_map_name = f"{enum.lower_name}IntMap"
        # gofmt aligns the "=" of every spec in the block and the values of the map literal
        width = max(len(name) for name in [values_name, int_map_name, *members])
        key_width = len(str(len(members) - 1)) + 1

        lines = [
            "var (",
            f"\t{values_name.ljust(width)} = []{enum.name}{{{', '.join(members)}}}",
        ]
        for member, value in zip(members, enum.values):
            lines.append(f"\t{member.ljust(width)} = {enum.name}{{{go_string(value.original)}}}")
        lines.append(f"\t{int_map_name.ljust(width)} = map[int]{enum.name}{{")
        for index, value in enum.int_map.items():
            lines.append(f"\t\t{(str(index) + ':').ljust(key_width)} {enum.member_name(value)},")
        lines.extend(["\t}", ")"])
        return lines
