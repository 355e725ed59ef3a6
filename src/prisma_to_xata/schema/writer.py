"""Write a Xata schema document to disk."""

from pathlib import Path

from prisma_to_xata.schema.models import XataSchema


def save_xata_schema_to_file(xata_schema: XataSchema, file_path: str | Path) -> Path:
    """Save the Xata schema as 2-space-indented JSON.

    Keys keep model field order (``name, type, link, defaultValue, unique,
    notNull`` per column) and unset optional keys are left out. An existing
    file at *file_path* is overwritten.

    Args:
        xata_schema: Schema document to write.
        file_path: Destination path.

    Returns:
        The path written to.

    Raises:
        OSError: If the destination cannot be written.
    """
    path = Path(file_path)
    path.write_text(
        xata_schema.model_dump_json(indent=2, by_alias=True, exclude_none=True),
        encoding="utf-8",
    )
    return path
