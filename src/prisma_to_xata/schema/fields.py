"""Field translation -- one Prisma field to one Xata column.

Applies the default-value, not-null and link policies on top of the type
mapping. Pure logic: nothing here raises for unexpected input; odd default
shapes degrade to ``None`` or a string.

Lossy decisions are not errors. ``field_warnings()`` reports them so the
caller can audit what the Xata schema could not carry over.

Usage:
    from prisma_to_xata.schema.fields import convert_field, field_warnings

    column = convert_field(field)
    warnings = field_warnings("Post", field)
"""

from prisma_to_xata.schema.models import (
    ColumnDescriptor,
    ConversionWarning,
    FieldDefault,
    FieldDescriptor,
    LinkTarget,
)
from prisma_to_xata.schema.types import is_known_type, prisma_type_to_xata_type

# Fields whose defaults Xata manages itself
_NO_DEFAULT_FIELDS = ("id", "email")


def _stringify(value: object) -> str:
    """Render a literal default the way it reads in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def _default_suppressed(field: FieldDescriptor) -> bool:
    return bool(
        field.name in _NO_DEFAULT_FIELDS or field.is_unique or field.relation_name
    )


def handle_link(field: FieldDescriptor) -> LinkTarget | None:
    """Link target for relation fields, ``None`` for everything else.

    For relation fields ``field.type`` holds the related model's name.
    """
    if prisma_type_to_xata_type(field) == "link":
        return LinkTarget(table=field.type)
    return None


def handle_not_null(field: FieldDescriptor) -> bool | None:
    """Not-null flag for a field, or ``None`` to leave the key out.

    Identity and unique columns carry their constraint in the target
    schema already, and link nullability follows the relation itself.
    """
    if (
        field.name == "id"
        or field.is_unique
        or prisma_type_to_xata_type(field) == "link"
    ):
        return None
    return field.is_required


def handle_default_value(field: FieldDescriptor) -> str | None:
    """Default value for a field as a string, or ``None`` for no default.

    Examples:
        >>> handle_default_value(
        ...     FieldDescriptor(name="isActive", type="Boolean", default=True)
        ... )
        'true'
        >>> handle_default_value(
        ...     FieldDescriptor(
        ...         name="count", type="Int", default={"name": "autoincrement"}
        ...     )
        ... )
        >>> handle_default_value(
        ...     FieldDescriptor(name="createdAt", type="DateTime", default={"name": "now"})
        ... )
        'now'
    """
    default = field.default

    if _default_suppressed(field) or default is None:
        return None

    if isinstance(default, FieldDefault):
        # Xata has no auto-increment; the generator is dropped
        if default.name == "autoincrement":
            return None
        return default.name

    return _stringify(default)


def convert_field(field: FieldDescriptor) -> ColumnDescriptor:
    """Convert one Prisma field into a Xata column.

    Example:
        >>> convert_field(
        ...     FieldDescriptor(name="title", type="String", is_required=True)
        ... ).to_dict()
        {'name': 'title', 'type': 'string', 'unique': False, 'notNull': True}
    """
    return ColumnDescriptor(
        name=field.name,
        type=prisma_type_to_xata_type(field),
        link=handle_link(field),
        default_value=handle_default_value(field),
        unique=field.is_unique,
        not_null=handle_not_null(field),
    )


def field_warnings(table: str, field: FieldDescriptor) -> list[ConversionWarning]:
    """Report the lossy decisions ``convert_field()`` makes for a field.

    Args:
        table: Name of the table the column lands in.
        field: The Prisma field being converted.

    Returns:
        List of ``ConversionWarning`` (empty when the mapping is exact).
    """
    warnings: list[ConversionWarning] = []

    def warn(code: str, message: str) -> None:
        warnings.append(
            ConversionWarning(table=table, column=field.name, code=code, message=message)
        )

    if not is_known_type(field):
        kind = "enum" if field.kind == "enum" else "type"
        warn(
            "unknown_type",
            f"Prisma {kind} '{field.type}' has no Xata equivalent, mapped to string",
        )

    if field.is_list and not field.relation_name:
        warn(
            "list_flattened",
            f"List of '{field.type}' stored as a single "
            f"{prisma_type_to_xata_type(field)} column",
        )

    default = field.default
    if default is not None and _default_suppressed(field):
        # id is never emitted, so its default is not a column-level loss
        if field.name != "id":
            if field.name in _NO_DEFAULT_FIELDS:
                reason = f"'{field.name}' columns take no default"
            elif field.is_unique:
                reason = "unique columns take no default"
            else:
                reason = "link columns take no default"
            warn("default_dropped", f"Default dropped, {reason}")
    elif isinstance(default, FieldDefault):
        if default.name == "autoincrement":
            warn(
                "autoincrement_dropped",
                "Default 'autoincrement()' has no Xata equivalent, dropped",
            )
        elif default.args:
            warn(
                "default_args_dropped",
                f"Arguments of default '{default.name}()' dropped: {default.args!r}",
            )

    return warnings
