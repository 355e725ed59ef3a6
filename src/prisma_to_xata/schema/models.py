"""Pydantic models for Prisma introspection input and Xata schema output.

This module contains schema-domain models:
- Introspection models: FieldDefault, FieldDescriptor, ModelDescriptor,
  EnumDescriptor, Datamodel, Dmmf
- Output models: LinkTarget, ColumnDescriptor, TableDescriptor, XataSchema
- Diagnostics: ConversionWarning, ConversionResult

Input models accept the camelCase keys Prisma emits in its DMMF JSON
(``isRequired``, ``relationName``, ...). Output models serialize with the
camelCase keys Xata expects (``defaultValue``, ``notNull``) and omit
optional keys that were not set.

Configuration models (ConverterConfig) live in prisma_to_xata.config.models.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Introspection Models (Prisma DMMF)
# ============================================================================


class _DmmfModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldDefault(_DmmfModel):
    """A generator default such as ``autoincrement()`` or ``now()``.

    Example:
        >>> FieldDefault(name="uuid", args=[4]).name
        'uuid'
    """

    name: str
    args: list[Any] = Field(default_factory=list)


DefaultLiteral = str | bool | int | float

FieldDefaultValue = FieldDefault | DefaultLiteral | list[DefaultLiteral]


class FieldDescriptor(_DmmfModel):
    """A single field of a Prisma model, as introspected.

    Example:
        >>> field = FieldDescriptor.model_validate(
        ...     {"name": "title", "type": "String", "isRequired": True}
        ... )
        >>> field.is_required
        True
    """

    name: str
    kind: Literal["object", "scalar", "enum", "union"] = "scalar"
    is_list: bool = False
    is_required: bool = False
    is_unique: bool = False
    is_id: bool = False
    is_read_only: bool = False
    is_generated: bool = False
    is_updated_at: bool = False
    has_default_value: bool = False
    type: str
    relation_name: str | None = None
    relation_from_fields: list[str] | None = None
    relation_to_fields: list[str] | None = None
    default: FieldDefaultValue | None = None


class ModelDescriptor(_DmmfModel):
    """A Prisma model with its fields in declaration order."""

    name: str
    fields: list[FieldDescriptor] = Field(default_factory=list)


class EnumDescriptor(_DmmfModel):
    """A Prisma enum (informational; enums map to plain strings)."""

    name: str
    values: list[str] = Field(default_factory=list)


class Datamodel(_DmmfModel):
    """The ``datamodel`` section of an introspected schema."""

    models: list[ModelDescriptor] = Field(default_factory=list)
    enums: list[EnumDescriptor] = Field(default_factory=list)


class Dmmf(_DmmfModel):
    """Introspected schema document (Prisma DMMF subset)."""

    datamodel: Datamodel = Field(default_factory=Datamodel)


# ============================================================================
# Xata Schema Models
# ============================================================================


class _XataModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump with Xata key names, dropping unset optional keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class LinkTarget(_XataModel):
    """Target table of a link column."""

    table: str


class ColumnDescriptor(_XataModel):
    """Schema for a Xata column.

    ``not_null`` and ``default_value`` are ``None`` when the key must be
    omitted from the document; ``None`` is not the same as ``False``.

    Example:
        >>> col = ColumnDescriptor(name="title", type="string", not_null=True)
        >>> col.to_dict()
        {'name': 'title', 'type': 'string', 'unique': False, 'notNull': True}
    """

    name: str
    type: str
    link: LinkTarget | None = None
    default_value: str | None = Field(default=None, alias="defaultValue")
    unique: bool = False
    not_null: bool | None = Field(default=None, alias="notNull")


class TableDescriptor(_XataModel):
    """Schema for a Xata table."""

    name: str
    columns: list[ColumnDescriptor] = Field(default_factory=list)


class XataSchema(_XataModel):
    """Complete Xata schema document."""

    tables: list[TableDescriptor] = Field(default_factory=list)


# ============================================================================
# Conversion Result Models
# ============================================================================


class ConversionWarning(BaseModel):
    """A lossy mapping decision made while converting a field."""

    table: str
    column: str
    code: str  # unknown_type, autoincrement_dropped, default_args_dropped, default_dropped, list_flattened
    message: str = ""


@dataclass
class ConversionResult:
    """Result of converting a Prisma datamodel to a Xata schema.

    Attributes:
        schema: The Xata schema document.
        warnings: Lossy mapping decisions, in table/column order.

    Example:
        >>> result = ConversionResult(schema=XataSchema())
        >>> result.has_warnings
        False
        >>> result.format_report()
        'Converted 0 tables'
    """

    schema: XataSchema
    warnings: list[ConversionWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """True if any lossy conversion happened."""
        return bool(self.warnings)

    @property
    def column_count(self) -> int:
        return sum(len(table.columns) for table in self.schema.tables)

    def format_report(self) -> str:
        """Format conversion result as human-readable report."""
        lines = [f"Converted {len(self.schema.tables)} tables"]

        if self.warnings:
            lines.append(f"\n  Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(
                    f"    - {warning.table}.{warning.column}: {warning.message}"
                )

        return "\n".join(lines)
