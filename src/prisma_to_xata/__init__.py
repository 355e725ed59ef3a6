"""prisma-to-xata: Port a Prisma schema to a Xata schema document.

Reads a Prisma schema (or its DMMF JSON), maps every model field to a Xata
column, and writes a ``xataSchema.json`` ready for ``xata schema upload``.

Usage:
    from prisma_to_xata import convert_prisma_to_xata, save_xata_schema_to_file

    result = convert_prisma_to_xata("prisma/schema.prisma")
    save_xata_schema_to_file(result.schema, "xataSchema.json")
"""

__version__ = "1.0.0"

# Config
from prisma_to_xata.config.loader import load_converter_config
from prisma_to_xata.config.models import ConverterConfig

# Conversion
from prisma_to_xata.schema.converter import convert_models, convert_prisma_to_xata
from prisma_to_xata.schema.fields import convert_field
from prisma_to_xata.schema.types import prisma_type_to_xata_type

# Introspection
from prisma_to_xata.schema.introspector import SchemaParseError, get_introspected_schema

# Output
from prisma_to_xata.schema.models import ConversionResult, XataSchema
from prisma_to_xata.schema.writer import save_xata_schema_to_file

__all__ = [
    # Config
    "load_converter_config",
    "ConverterConfig",
    # Conversion
    "convert_models",
    "convert_prisma_to_xata",
    "convert_field",
    "prisma_type_to_xata_type",
    # Introspection
    "get_introspected_schema",
    "SchemaParseError",
    # Output
    "ConversionResult",
    "XataSchema",
    "save_xata_schema_to_file",
]
