"""Prisma scalar type to Xata column type mapping.

Pure logic -- no I/O. Unknown Prisma types (enums, ``Unsupported(...)``)
fall back to ``string``.

Usage:
    from prisma_to_xata.schema.types import prisma_type_to_xata_type

    prisma_type_to_xata_type(field)  # 'datetime'
"""

from prisma_to_xata.schema.models import FieldDescriptor

PRISMA_TO_XATA_MAPPINGS: dict[str, str] = {
    "String": "string",
    "Boolean": "bool",
    "Int": "int",
    "BigInt": "int",
    "Float": "float",
    "Decimal": "float",
    "DateTime": "datetime",
    "Json": "text",
    "Bytes": "text",
}

FALLBACK_XATA_TYPE = "string"


def prisma_type_to_xata_type(field: FieldDescriptor) -> str:
    """Convert a Prisma field's type to its Xata column type.

    Rules, first match wins:
    - a field named ``email`` becomes Xata's native ``email`` type
    - a field with a ``relation_name`` becomes a ``link``
    - the Prisma scalar type is looked up in ``PRISMA_TO_XATA_MAPPINGS``
    - anything else becomes ``string``

    Examples:
        >>> prisma_type_to_xata_type(FieldDescriptor(name="email", type="String"))
        'email'
        >>> prisma_type_to_xata_type(FieldDescriptor(name="age", type="Int"))
        'int'
        >>> prisma_type_to_xata_type(FieldDescriptor(name="role", type="Role"))
        'string'
    """
    if field.name == "email":
        return "email"
    if field.relation_name:
        return "link"
    return PRISMA_TO_XATA_MAPPINGS.get(field.type, FALLBACK_XATA_TYPE)


def is_known_type(field: FieldDescriptor) -> bool:
    """True unless the field's type mapping fell back to ``string``."""
    return (
        field.name == "email"
        or bool(field.relation_name)
        or field.type in PRISMA_TO_XATA_MAPPINGS
    )
