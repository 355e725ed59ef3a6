"""Configuration: TOML loading and config models.

Usage:
    >>> from prisma_to_xata.config import load_converter_config, ConverterConfig
"""

from prisma_to_xata.config.loader import load_converter_config
from prisma_to_xata.config.models import ConverterConfig

__all__ = ["load_converter_config", "ConverterConfig"]
