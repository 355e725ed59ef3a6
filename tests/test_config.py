"""Tests for converter configuration loading."""

from pathlib import Path

import pytest

from prisma_to_xata.config.loader import load_converter_config
from prisma_to_xata.config.models import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SCHEMA_PATH,
    ConverterConfig,
)


class TestDefaults:
    """Built-in defaults apply when no config file exists."""

    def test_model_defaults(self) -> None:
        config = ConverterConfig()
        assert config.schema_path == "./prisma/schema.prisma"
        assert config.output_path == "./xataSchema.json"

    def test_no_default_file_returns_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_converter_config()
        assert config == ConverterConfig()

    def test_default_file_in_cwd_is_used(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "prisma-to-xata.toml").write_text(
            '[paths]\nschema = "db/schema.prisma"\n'
        )
        monkeypatch.chdir(tmp_path)

        config = load_converter_config()

        assert config.schema_path == "db/schema.prisma"
        assert config.output_path == DEFAULT_OUTPUT_PATH


class TestExplicitFile:
    """An explicit config path must exist and be valid."""

    def test_loads_both_paths(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[paths]\nschema = "a.prisma"\noutput = "b.json"\n')

        config = load_converter_config(path)

        assert config.schema_path == "a.prisma"
        assert config.output_path == "b.json"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text("")
        config = load_converter_config(path)
        assert config.schema_path == DEFAULT_SCHEMA_PATH

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Converter config not found"):
            load_converter_config(tmp_path / "nope.toml")

    def test_invalid_toml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[paths\nschema = ")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_converter_config(path)

    def test_wrong_value_type_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[paths]\nschema = 42\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_converter_config(path)

    def test_paths_not_a_table_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('paths = "x"\n')
        with pytest.raises(ValueError, match="must be a table"):
            load_converter_config(path)
