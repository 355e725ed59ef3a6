"""Prisma introspection, field mapping, and Xata schema output.

Provides type mapping (``prisma_type_to_xata_type``), field translation
(``convert_field``), schema conversion (``convert_models``,
``convert_prisma_to_xata``), Prisma schema introspection
(``get_introspected_schema``, ``PrismaSchemaParser``) and the JSON writer
(``save_xata_schema_to_file``).

Usage:
    from prisma_to_xata.schema import convert_prisma_to_xata
    from prisma_to_xata.schema import save_xata_schema_to_file
"""

from prisma_to_xata.schema.converter import convert_models, convert_prisma_to_xata
from prisma_to_xata.schema.fields import (
    convert_field,
    field_warnings,
    handle_default_value,
    handle_link,
    handle_not_null,
)
from prisma_to_xata.schema.introspector import (
    PrismaSchemaParser,
    SchemaParseError,
    get_introspected_schema,
)
from prisma_to_xata.schema.models import (
    ColumnDescriptor,
    ConversionResult,
    ConversionWarning,
    Datamodel,
    Dmmf,
    EnumDescriptor,
    FieldDefault,
    FieldDescriptor,
    LinkTarget,
    ModelDescriptor,
    TableDescriptor,
    XataSchema,
)
from prisma_to_xata.schema.types import PRISMA_TO_XATA_MAPPINGS, prisma_type_to_xata_type
from prisma_to_xata.schema.writer import save_xata_schema_to_file

__all__ = [
    "PRISMA_TO_XATA_MAPPINGS",
    "prisma_type_to_xata_type",
    "convert_field",
    "field_warnings",
    "handle_default_value",
    "handle_link",
    "handle_not_null",
    "convert_models",
    "convert_prisma_to_xata",
    "get_introspected_schema",
    "PrismaSchemaParser",
    "SchemaParseError",
    "save_xata_schema_to_file",
    "FieldDefault",
    "FieldDescriptor",
    "ModelDescriptor",
    "EnumDescriptor",
    "Datamodel",
    "Dmmf",
    "LinkTarget",
    "ColumnDescriptor",
    "TableDescriptor",
    "XataSchema",
    "ConversionWarning",
    "ConversionResult",
]
