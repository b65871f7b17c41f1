"""Tests for the gql-tsgen command line."""

import click
import pytest
from click.testing import CliRunner

from gql_tsgen.cli import main, parse_scalar_overrides

SCHEMA = """
scalar DateTime

type User {
  id: ID!
  createdAt: DateTime
  role: Role
}

enum Role {
  ADMIN
  USER
}

type Query {
  user(id: ID!): User
}
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestParseScalarOverrides:
    """Tests for --scalar parsing."""

    def test_pairs(self):
        assert parse_scalar_overrides(("DateTime=string", " JSON = unknown ")) == {
            "DateTime": "string",
            "JSON": "unknown",
        }

    @pytest.mark.parametrize("value", ["DateTime", "=string", "DateTime="])
    def test_invalid(self, value):
        with pytest.raises(click.BadParameter):
            parse_scalar_overrides((value,))


class TestGenerateCommand:
    """Tests for `gql-tsgen generate`."""

    def test_writes_files(self, runner, schema_file, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(main, ["generate", "-s", str(schema_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in output.iterdir()) == ["enums.ts", "operations.ts", "types.ts"]
        assert "Done! Generated 3 files" in result.output

        types_ts = (output / "types.ts").read_text(encoding="utf-8")
        assert "export interface User {\n  id: string;\n  createdAt: DateTime;\n" in types_ts

    def test_options(self, runner, schema_file, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            main,
            [
                "generate",
                "-s", str(schema_file),
                "-o", str(output),
                "--prefix", "I",
                "--use-enum-type",
                "--strict-null-checks",
                "--scalar", "DateTime=string",
                "--header", "// Do not edit",
            ],
        )

        assert result.exit_code == 0, result.output
        types_ts = (output / "types.ts").read_text(encoding="utf-8")
        assert types_ts.startswith("// Do not edit\n\n/* Auto-generated by gql-tsgen */")
        assert "export interface IUser {\n  id?: string;\n  createdAt?: string;\n  role?: IRole;\n}" in types_ts
        enums_ts = (output / "enums.ts").read_text(encoding="utf-8")
        assert "export const IRole = {" in enums_ts

    def test_exclude_options(self, runner, schema_file, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            main,
            [
                "generate",
                "-s", str(schema_file),
                "-o", str(output),
                "--exclude-type", "Role",
                "--exclude-prefix", "Us",
            ],
        )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in output.iterdir()) == ["operations.ts", "types.ts"]
        types_ts = (output / "types.ts").read_text(encoding="utf-8")
        assert "interface User" not in types_ts
        assert "export interface Query {" in types_ts

    def test_plain_header_becomes_comment(self, runner, schema_file, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            main, ["generate", "-s", str(schema_file), "-o", str(output), "--header", "Do not edit"]
        )

        assert result.exit_code == 0, result.output
        assert (output / "types.ts").read_text(encoding="utf-8").startswith("// Do not edit\n\n")

    def test_scalar_option_does_not_touch_process_map(self, runner, schema_file, tmp_path, fresh_scalar_map):
        runner.invoke(
            main,
            ["generate", "-s", str(schema_file), "-o", str(tmp_path / "out"), "--scalar", "DateTime=string"],
        )
        assert "DateTime" not in fresh_scalar_map

    def test_verbose(self, runner, schema_file, tmp_path):
        result = runner.invoke(
            main, ["generate", "-s", str(schema_file), "-o", str(tmp_path / "out"), "-v"]
        )

        assert result.exit_code == 0, result.output
        assert "  Objects: 2" in result.output
        assert "  Enums: 1" in result.output
        assert "  Query fields: 1" in result.output
        assert "Writing" in result.output

    def test_parse_error(self, runner, tmp_path):
        broken = tmp_path / "broken.graphql"
        broken.write_text("type User {", encoding="utf-8")

        result = runner.invoke(main, ["generate", "-s", str(broken), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Failed to parse schema file" in result.output
        assert not (tmp_path / "out").exists()

    def test_missing_schema(self, runner, tmp_path):
        result = runner.invoke(
            main, ["generate", "-s", str(tmp_path / "missing.graphql"), "-o", str(tmp_path / "out")]
        )
        assert result.exit_code != 0

    def test_bad_scalar_option(self, runner, schema_file, tmp_path):
        result = runner.invoke(
            main,
            ["generate", "-s", str(schema_file), "-o", str(tmp_path / "out"), "--scalar", "DateTime"],
        )
        assert result.exit_code == 2
        assert "NAME=TYPE" in result.output
