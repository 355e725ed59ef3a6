"""Prisma schema introspection.

Turns a schema file into the normalized DMMF datamodel the converter works
on. Two inputs are understood:
- ``.prisma`` files, read by ``PrismaSchemaParser``
- ``.json`` DMMF dumps (``prisma.getDMMF()`` output, or its ``datamodel``)

The parser reads ``model`` and ``enum`` blocks and skips ``datasource``,
``generator``, ``type`` and ``view`` blocks. Per field it derives:
- Kind: ``object`` for model types, ``enum`` for enum types, else ``scalar``
- Modifiers: list (``[]``) and optional (``?``)
- Attributes: ``@id``, ``@unique``, ``@updatedAt``, ``@default(...)``
- Relations: ``@relation`` name (or Prisma's implicit ``AToB`` name),
  ``fields:`` and ``references:``; scalar fields named in ``fields:`` are
  read-only

Block attributes (``@@id``, ``@@unique``, ``@@map``, ...) are ignored.
"""

import json
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prisma_to_xata.schema.models import (
    Datamodel,
    Dmmf,
    EnumDescriptor,
    FieldDefault,
    ModelDescriptor,
)

logger = logging.getLogger(__name__)


class SchemaParseError(ValueError):
    """Raised when a schema file cannot be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


@dataclass
class _Block:
    keyword: str
    name: str
    body: str
    line: int  # line number of the opening brace


_STRING = re.compile(r'"(?:[^"\\\n]|\\.)*"')
_STRING_OR_COMMENT = re.compile(r'"(?:[^"\\\n]|\\.)*"|//[^\n]*')
_BLOCK_HEADER = re.compile(r"(model|enum|type|view|datasource|generator)\s+(\w+)\s*\{")
_FIELD_LINE = re.compile(
    r'^(\w+)\s+(Unsupported\("(?:[^"\\]|\\.)*"\)|\w+)(\[\])?(\?)?\s*(.*)$'
)
_ENUM_VALUE = re.compile(r"^(\w+)")
_NAMED_ARG = re.compile(r"^(\w+)\s*:\s*(.*)$", re.DOTALL)
_CALL = re.compile(r"^(\w+)\((.*)\)$", re.DOTALL)
_INT = re.compile(r"^-?\d+$")
_FLOAT = re.compile(r"^-?\d+\.\d*(?:[eE][+-]?\d+)?$")

_SKIPPED_BLOCKS = ("datasource", "generator", "type", "view")


def _strip_comments(source: str) -> str:
    """Drop ``//`` and ``///`` comments, keeping string literals and newlines."""
    return _STRING_OR_COMMENT.sub(
        lambda m: m.group(0) if m.group(0).startswith('"') else "", source
    )


def _mask_strings(text: str) -> str:
    """Blank out string literal contents without shifting positions."""
    return _STRING.sub(lambda m: '"' + "_" * (len(m.group(0)) - 2) + '"', text)


def _find_closing(text: str, start: int, open_ch: str, close_ch: str) -> int:
    """Index of the bracket closing the one opened just before *start*, or -1."""
    depth = 1
    i = start
    while i < len(text):
        ch = text[i]
        if ch == '"':
            match = _STRING.match(text, i)
            if match is None:
                return -1
            i = match.end()
            continue
        if ch == open_ch:
            depth += 1
        elif ch == close_ch:
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def _split_top_level(text: str) -> list[str]:
    """Split on commas outside strings, brackets and parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            match = _STRING.match(text, i)
            end = match.end() if match else len(text)
            current.append(text[i:end])
            i = end
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def _parse_value(text: str) -> Any:
    """Parse a Prisma attribute argument into a Python value.

    Examples:
        >>> _parse_value('"draft"')
        'draft'
        >>> _parse_value("autoincrement()")
        FieldDefault(name='autoincrement', args=[])
        >>> _parse_value("[1, 2]")
        [1, 2]
    """
    text = text.strip()

    if text.startswith('"') and text.endswith('"') and len(text) >= 2:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text[1:-1]

    if text.startswith("[") and text.endswith("]"):
        return [_parse_value(item) for item in _split_top_level(text[1:-1])]

    call = _CALL.match(text)
    if call:
        args = [
            _parse_value(arg)
            for arg in _split_top_level(call.group(2))
            if not _NAMED_ARG.match(arg)
        ]
        return FieldDefault(name=call.group(1), args=args)

    if text == "true":
        return True
    if text == "false":
        return False
    if _INT.match(text):
        return int(text)
    if _FLOAT.match(text):
        return float(text)

    # Bare identifier: an enum value
    return text


def _attribute_args(attributes: str, name: str) -> list[str] | None:
    """Top-level arguments of ``@name(...)``; ``[]`` if bare, ``None`` if absent."""
    masked = _mask_strings(attributes)
    match = re.search(rf"(?<![\w.@])@{name}\b", masked)
    if match is None:
        return None

    pos = match.end()
    if pos >= len(attributes) or attributes[pos] != "(":
        return []

    end = _find_closing(attributes, pos + 1, "(", ")")
    if end == -1:
        raise ValueError(f"unclosed @{name}(")
    return _split_top_level(attributes[pos + 1 : end])


class PrismaSchemaParser:
    """Parses Prisma schema language into a DMMF datamodel.

    Usage:
        parser = PrismaSchemaParser(Path("prisma/schema.prisma").read_text())
        dmmf = parser.parse()
        for model in dmmf.datamodel.models:
            print(model.name, [f.name for f in model.fields])
    """

    def __init__(self, source: str):
        """Initialize with schema source text.

        Args:
            source: Contents of a ``.prisma`` file
        """
        self._source = _strip_comments(source)

    def parse(self) -> Dmmf:
        """Parse the whole schema.

        Returns:
            Dmmf with all models (declaration order) and enums

        Raises:
            SchemaParseError: On content that is not a recognized block or
                on a malformed field line
        """
        blocks = self._read_blocks()

        model_names = {b.name for b in blocks if b.keyword == "model"}
        enums = [self._parse_enum(b) for b in blocks if b.keyword == "enum"]
        enum_names = {e.name for e in enums}

        models = [
            self._parse_model(b, model_names, enum_names)
            for b in blocks
            if b.keyword == "model"
        ]

        logger.debug(f"Parsed {len(models)} models and {len(enums)} enums")
        return Dmmf(datamodel=Datamodel(models=models, enums=enums))

    def _line_at(self, pos: int) -> int:
        return self._source.count("\n", 0, pos) + 1

    def _read_blocks(self) -> list[_Block]:
        source = self._source
        blocks: list[_Block] = []
        pos = 0

        while True:
            while pos < len(source) and source[pos].isspace():
                pos += 1
            if pos >= len(source):
                break

            header = _BLOCK_HEADER.match(source, pos)
            if header is None:
                snippet = source[pos:].split("\n", 1)[0].strip()
                raise SchemaParseError(
                    f"unexpected content {snippet!r}", line=self._line_at(pos)
                )

            keyword, name = header.group(1), header.group(2)
            end = _find_closing(source, header.end(), "{", "}")
            if end == -1:
                raise SchemaParseError(
                    f"{keyword} '{name}' is never closed", line=self._line_at(pos)
                )

            if keyword not in _SKIPPED_BLOCKS:
                blocks.append(
                    _Block(
                        keyword=keyword,
                        name=name,
                        body=source[header.end() : end],
                        line=self._line_at(header.end()),
                    )
                )
            pos = end + 1

        return blocks

    def _block_lines(self, block: _Block) -> Iterator[tuple[int, str]]:
        """Yield (line number, stripped line) for non-empty member lines."""
        for offset, raw in enumerate(block.body.split("\n")):
            line = raw.strip()
            if line and not line.startswith("@@"):
                yield block.line + offset, line

    def _parse_enum(self, block: _Block) -> EnumDescriptor:
        values: list[str] = []
        for line_no, line in self._block_lines(block):
            match = _ENUM_VALUE.match(line)
            if match is None:
                raise SchemaParseError(
                    f"invalid value in enum '{block.name}': {line!r}", line=line_no
                )
            values.append(match.group(1))
        return EnumDescriptor(name=block.name, values=values)

    def _parse_model(
        self, block: _Block, model_names: set[str], enum_names: set[str]
    ) -> ModelDescriptor:
        fields: list[dict[str, Any]] = []

        for line_no, line in self._block_lines(block):
            match = _FIELD_LINE.match(line)
            if match is None:
                raise SchemaParseError(
                    f"invalid field in model '{block.name}': {line!r}", line=line_no
                )
            try:
                fields.append(
                    self._parse_field(block.name, match, model_names, enum_names)
                )
            except ValueError as e:
                raise SchemaParseError(
                    f"invalid field in model '{block.name}': {e}", line=line_no
                ) from e

        # Scalars backing a relation are written through the relation
        read_only = {
            name for f in fields for name in (f.get("relationFromFields") or [])
        }
        for f in fields:
            if f["name"] in read_only:
                f["isReadOnly"] = True

        try:
            return ModelDescriptor.model_validate({"name": block.name, "fields": fields})
        except ValidationError as e:
            raise SchemaParseError(
                f"invalid model '{block.name}': {e}", line=block.line
            ) from e

    def _parse_field(
        self,
        model_name: str,
        match: re.Match,
        model_names: set[str],
        enum_names: set[str],
    ) -> dict[str, Any]:
        name, field_type, is_list, optional, attributes = match.groups()

        if field_type in model_names:
            kind = "object"
        elif field_type in enum_names:
            kind = "enum"
        else:
            kind = "scalar"

        field: dict[str, Any] = {
            "name": name,
            "kind": kind,
            "isList": bool(is_list),
            "isRequired": not optional,
            "isUnique": _attribute_args(attributes, "unique") is not None,
            "isId": _attribute_args(attributes, "id") is not None,
            "isReadOnly": False,
            "isGenerated": False,
            "isUpdatedAt": _attribute_args(attributes, "updatedAt") is not None,
            "hasDefaultValue": False,
            "type": field_type,
        }

        default_args = _attribute_args(attributes, "default")
        if default_args:
            positional = [a for a in default_args if not _NAMED_ARG.match(a)]
            if positional:
                field["hasDefaultValue"] = True
                field["default"] = _parse_value(positional[0])

        if kind == "object":
            field.update(self._parse_relation(model_name, field_type, attributes))

        return field

    def _parse_relation(
        self, model_name: str, related: str, attributes: str
    ) -> dict[str, Any]:
        relation_name = None
        from_fields: list[str] = []
        to_fields: list[str] = []

        for arg in _attribute_args(attributes, "relation") or []:
            named = _NAMED_ARG.match(arg)
            if named is None:
                relation_name = _parse_value(arg)
                continue
            key, value = named.group(1), _parse_value(named.group(2))
            if key == "name":
                relation_name = value
            elif key == "fields":
                from_fields = [str(v) for v in value]
            elif key == "references":
                to_fields = [str(v) for v in value]

        if not relation_name:
            # Prisma names unnamed relations after the sorted model pair
            relation_name = "To".join(sorted([model_name, related]))

        return {
            "relationName": relation_name,
            "relationFromFields": from_fields,
            "relationToFields": to_fields,
        }


def _load_dmmf_json(content: str) -> Dmmf:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"invalid JSON: {e.msg}", line=e.lineno) from e

    if not isinstance(data, dict):
        raise SchemaParseError("DMMF document must be a JSON object")

    try:
        if "datamodel" in data:
            return Dmmf.model_validate(data)
        return Dmmf(datamodel=Datamodel.model_validate(data))
    except ValidationError as e:
        raise SchemaParseError(f"invalid DMMF document: {e}") from e


def get_introspected_schema(schema_path: str | Path) -> Dmmf:
    """Load and introspect a Prisma schema file.

    Args:
        schema_path: Path to a ``.prisma`` schema or a ``.json`` DMMF dump

    Returns:
        Dmmf whose ``datamodel.models`` holds every model in the file

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        SchemaParseError: If the schema content is malformed or not UTF-8
    """
    path = Path(schema_path)
    if not path.exists():
        raise FileNotFoundError(f"Prisma schema not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SchemaParseError(f"not valid UTF-8: {e.reason}") from e

    if path.suffix == ".json":
        dmmf = _load_dmmf_json(content)
    else:
        dmmf = PrismaSchemaParser(content).parse()

    logger.debug(f"Introspected {path}: {len(dmmf.datamodel.models)} models")
    return dmmf
