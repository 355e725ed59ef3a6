"""Schema conversion -- Prisma datamodel to Xata schema document.

Walks models and fields in declaration order. The identity field (``id``)
is never emitted; Xata manages record ids itself.

Usage:
    from prisma_to_xata.schema.converter import convert_prisma_to_xata
    from prisma_to_xata.schema.writer import save_xata_schema_to_file

    result = convert_prisma_to_xata("prisma/schema.prisma")
    if result.has_warnings:
        print(result.format_report())
    save_xata_schema_to_file(result.schema, "xataSchema.json")
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from prisma_to_xata.schema.fields import convert_field, field_warnings
from prisma_to_xata.schema.introspector import get_introspected_schema
from prisma_to_xata.schema.models import (
    ColumnDescriptor,
    ConversionResult,
    ConversionWarning,
    ModelDescriptor,
    TableDescriptor,
    XataSchema,
)

logger = logging.getLogger(__name__)

IDENTITY_FIELD = "id"


def convert_models(models: Iterable[ModelDescriptor]) -> ConversionResult:
    """Convert Prisma models into a Xata schema.

    Args:
        models: Introspected models, in the order tables should appear.

    Returns:
        ``ConversionResult`` with:

        - ``schema``: ``XataSchema`` with one table per model; columns follow
          field order, minus the ``id`` field
        - ``warnings``: ``ConversionWarning`` for every lossy field mapping

    Examples:
        >>> from prisma_to_xata.schema.models import FieldDescriptor
        >>> model = ModelDescriptor(
        ...     name="Post",
        ...     fields=[
        ...         FieldDescriptor(name="id", type="Int", is_id=True),
        ...         FieldDescriptor(name="title", type="String", is_required=True),
        ...     ],
        ... )
        >>> result = convert_models([model])
        >>> [c.name for c in result.schema.tables[0].columns]
        ['title']
    """
    tables: list[TableDescriptor] = []
    warnings: list[ConversionWarning] = []

    for model in models:
        columns: list[ColumnDescriptor] = []

        for field in model.fields:
            if field.name == IDENTITY_FIELD:
                continue
            columns.append(convert_field(field))
            warnings.extend(field_warnings(model.name, field))

        logger.debug(f"Converted model {model.name} ({len(columns)} columns)")
        tables.append(TableDescriptor(name=model.name, columns=columns))

    if warnings:
        logger.info(f"Conversion produced {len(warnings)} lossy mapping(s)")

    return ConversionResult(schema=XataSchema(tables=tables), warnings=warnings)


def convert_prisma_to_xata(schema_path: str | Path) -> ConversionResult:
    """Introspect a Prisma schema file and convert it to a Xata schema.

    Args:
        schema_path: Path to a ``.prisma`` file or a DMMF ``.json`` dump.

    Returns:
        ``ConversionResult`` for all models in the schema.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        SchemaParseError: If the schema file cannot be parsed.
    """
    dmmf = get_introspected_schema(schema_path)
    return convert_models(dmmf.datamodel.models)
