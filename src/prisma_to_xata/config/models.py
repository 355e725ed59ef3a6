"""Pydantic models for converter configuration."""

from pydantic import BaseModel, ConfigDict

DEFAULT_SCHEMA_PATH = "./prisma/schema.prisma"
DEFAULT_OUTPUT_PATH = "./xataSchema.json"


class ConverterConfig(BaseModel):
    """Converter configuration from prisma-to-xata.toml."""

    model_config = ConfigDict(extra="forbid")

    schema_path: str = DEFAULT_SCHEMA_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
