"""Tests for the prisma-to-xata CLI.

Verifies argument handling, path precedence (argument > config > default),
exit codes, and that fatal errors are reported without a traceback.
"""

import argparse
import json
import textwrap
from pathlib import Path
from unittest.mock import patch

import pytest

from prisma_to_xata.cli import cmd_convert, main

SCHEMA = textwrap.dedent(
    """\
    model User {
      id    Int     @id @default(autoincrement())
      email String  @unique
      role  Role    @default(USER)
      posts Post[]
    }

    model Post {
      id       Int  @id
      title    String
      author   User @relation(fields: [authorId], references: [id])
      authorId Int
    }

    enum Role {
      USER
      ADMIN
    }
    """
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project directory with prisma/schema.prisma, used as cwd."""
    (tmp_path / "prisma").mkdir()
    (tmp_path / "prisma" / "schema.prisma").write_text(SCHEMA)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(*argv: str) -> int:
    with patch("sys.argv", ["prisma-to-xata", *argv]):
        return main()


class TestArguments:
    """Argument parsing and dispatch."""

    def test_positional_paths_are_optional(self) -> None:
        with patch("prisma_to_xata.cli.cmd_convert", return_value=0) as mock_convert:
            assert _run() == 0
        args = mock_convert.call_args[0][0]
        assert args.schema_path is None
        assert args.output_path is None
        assert args.config is None

    def test_positional_paths_are_parsed(self) -> None:
        with patch("prisma_to_xata.cli.cmd_convert", return_value=0) as mock_convert:
            _run("in.prisma", "out.json")
        args = mock_convert.call_args[0][0]
        assert args.schema_path == "in.prisma"
        assert args.output_path == "out.json"

    def test_too_many_positionals_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run("a", "b", "c")
        assert exc_info.value.code == 2


class TestConvert:
    """End-to-end runs against a temporary project."""

    def test_default_paths(self, project: Path) -> None:
        assert _run() == 0

        document = json.loads((project / "xataSchema.json").read_text())
        assert [t["name"] for t in document["tables"]] == ["User", "Post"]
        post_columns = document["tables"][1]["columns"]
        assert [c["name"] for c in post_columns] == ["title", "author", "authorId"]
        assert post_columns[1] == {
            "name": "author",
            "type": "link",
            "link": {"table": "User"},
            "unique": False,
        }

    def test_explicit_paths(self, project: Path) -> None:
        (project / "custom.prisma").write_text("model Tag {\n  id Int @id\n  label String\n}\n")

        assert _run("custom.prisma", "out/schema.json") == 1  # out/ does not exist

        (project / "out").mkdir()
        assert _run("custom.prisma", "out/schema.json") == 0
        document = json.loads((project / "out" / "schema.json").read_text())
        assert document["tables"][0]["name"] == "Tag"

    def test_config_file_paths(self, project: Path) -> None:
        (project / "prisma-to-xata.toml").write_text('[paths]\noutput = "from-config.json"\n')

        assert _run() == 0

        assert (project / "from-config.json").exists()
        assert not (project / "xataSchema.json").exists()

    def test_argument_wins_over_config(self, project: Path) -> None:
        (project / "prisma-to-xata.toml").write_text('[paths]\noutput = "from-config.json"\n')

        assert _run("prisma/schema.prisma", "from-arg.json") == 0

        assert (project / "from-arg.json").exists()
        assert not (project / "from-config.json").exists()

    def test_warnings_are_printed(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run() == 0
        out = capsys.readouterr().out
        assert "Lossy Conversions" in out
        assert "unknown_type" in out

    def test_verbose_flag(self, project: Path) -> None:
        with patch("prisma_to_xata.cli.logging.basicConfig") as mock_config:
            assert _run("--verbose") == 0
        mock_config.assert_called_once()


class TestFailures:
    """Fatal errors exit 1 and leave a message."""

    def test_missing_schema(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run("nope.prisma") == 1
        assert "Error reading Prisma schema" in capsys.readouterr().out
        assert not (project / "xataSchema.json").exists()

    def test_malformed_schema(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        (project / "bad.prisma").write_text("model User {\n  [broken]\n}\n")
        assert _run("bad.prisma") == 1
        out = capsys.readouterr().out
        assert "Error parsing Prisma schema" in out
        assert "[broken]" in out

    def test_missing_explicit_config(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run("--config", "nope.toml") == 1
        assert "Converter config not found" in capsys.readouterr().out

    def test_cmd_convert_returns_int(self, project: Path) -> None:
        args = argparse.Namespace(schema_path=None, output_path=None, config=None)
        assert cmd_convert(args) == 0

    def test_schema_not_utf8(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        (project / "bad.prisma").write_bytes(
            b'model A {\n  name String @default("\xff\xfe")\n}\n'
        )
        assert _run("bad.prisma") == 1
        out = capsys.readouterr().out
        assert "Error parsing Prisma schema" in out
        assert "UTF-8" in out
        assert not (project / "xataSchema.json").exists()

    def test_output_directory_missing(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run("prisma/schema.prisma", "missing/out.json") == 1
        assert "Error writing Xata schema" in capsys.readouterr().out
        assert not (project / "missing").exists()

    def test_output_path_is_directory(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        (project / "taken").mkdir()
        assert _run("prisma/schema.prisma", "taken") == 1
        assert "Error writing Xata schema" in capsys.readouterr().out

    def test_malformed_config(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        (project / "bad.toml").write_text("[paths\nschema = ")
        assert _run("--config", "bad.toml") == 1
        assert "Invalid TOML" in capsys.readouterr().out
        assert not (project / "xataSchema.json").exists()
