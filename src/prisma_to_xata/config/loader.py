"""Configuration loader for prisma-to-xata.

Reads ``prisma-to-xata.toml``:

    [paths]
    schema = "./prisma/schema.prisma"
    output = "./xataSchema.json"

Both keys are optional; missing keys keep the built-in defaults.
"""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from prisma_to_xata.config.models import ConverterConfig

DEFAULT_CONFIG_FILE = "prisma-to-xata.toml"


def load_converter_config(config_path: Path | None = None) -> ConverterConfig:
    """Load converter configuration from TOML file.

    Args:
        config_path: Path to the config file. When omitted,
            ``./prisma-to-xata.toml`` is used if it exists, otherwise the
            built-in defaults are returned.

    Returns:
        ConverterConfig with schema and output paths

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValueError: If config format is invalid
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not config_path.exists():
            return ConverterConfig()
    elif not config_path.exists():
        raise FileNotFoundError(f"Converter config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    paths = data.get("paths", {})
    if not isinstance(paths, dict):
        raise ValueError(f"[paths] in {config_path} must be a table")

    settings = {}
    if "schema" in paths:
        settings["schema_path"] = paths["schema"]
    if "output" in paths:
        settings["output_path"] = paths["output"]

    try:
        return ConverterConfig(**settings)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {config_path}: {e}") from e
