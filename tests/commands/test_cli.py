"""Tests for commands/cli.py — the paramfile command group."""

import pytest
from click.testing import CliRunner

from paramfile.commands.cli import paramfile_group


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ini(tmp_path):
    (tmp_path / "db.ini").write_text("databaseUser = scott\n", encoding="utf-8")
    path = tmp_path / "run.ini"
    path.write_text(
        "# run parameters\n"
        "Threads = 8\n"
        "verbose = off\n"
        "hosts = a, b\n"
        "data = ./data/in.txt\n"
        "include = db.ini\n",
        encoding="utf-8",
    )
    return path


class TestShow:
    def test_lists_sorted_parameters(self, runner, ini):
        result = runner.invoke(paramfile_group, ["show", str(ini)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "data = ./data/in.txt",
            "databaseuser = scott",
            "hosts = a, b",
            "threads = 8",
            "verbose = off",
        ]

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(paramfile_group, ["show", str(tmp_path / "nope.ini")])
        assert result.exit_code == 1
        assert "was not found" in result.output

    def test_missing_include(self, runner, tmp_path):
        path = tmp_path / "run.ini"
        path.write_text("include = gone.ini\n", encoding="utf-8")
        result = runner.invoke(paramfile_group, ["show", str(path)])
        assert result.exit_code == 1
        assert "gone.ini" in result.output


class TestGet:
    def test_string(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "databaseUser"])
        assert result.exit_code == 0
        assert result.output == "scott\n"

    def test_int(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "threads", "--type", "int"])
        assert result.output == "8\n"

    def test_bool(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "verbose", "--type", "bool"])
        assert result.output == "false\n"

    def test_list(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "hosts", "--type", "list"])
        assert result.output == "a\nb\n"

    def test_path_with_local_root(self, runner, ini):
        result = runner.invoke(
            paramfile_group,
            ["get", str(ini), "data", "--type", "path", "--local-root", "/srv"],
        )
        assert result.output == "/srv/ata/in.txt\n"

    def test_default(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "missing", "--default", "4"])
        assert result.exit_code == 0
        assert result.output == "4\n"

    def test_bool_default_formatted_like_value(self, runner, ini):
        result = runner.invoke(
            paramfile_group, ["get", str(ini), "missing", "--type", "bool", "--default", "yes"]
        )
        assert result.exit_code == 0
        assert result.output == "true\n"

    def test_bool_default_negative_word(self, runner, ini):
        result = runner.invoke(
            paramfile_group, ["get", str(ini), "missing", "--type", "bool", "--default", "off"]
        )
        assert result.output == "false\n"

    def test_list_default_split(self, runner, ini):
        result = runner.invoke(
            paramfile_group, ["get", str(ini), "missing", "--type", "list", "--default", "x, y"]
        )
        assert result.output == "x\ny\n"

    def test_malformed_int_default(self, runner, ini):
        result = runner.invoke(
            paramfile_group, ["get", str(ini), "missing", "--type", "int", "--default", "many"]
        )
        assert result.exit_code == 1
        assert "not a valid int" in result.output

    def test_default_ignored_when_defined(self, runner, ini):
        result = runner.invoke(
            paramfile_group, ["get", str(ini), "verbose", "--type", "bool", "--default", "yes"]
        )
        assert result.output == "false\n"

    def test_undefined(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "missing"])
        assert result.exit_code == 1
        assert "The parameter missing is undefined in" in result.output

    def test_undefined_list(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "missing", "--type", "list"])
        assert result.exit_code == 1

    def test_malformed(self, runner, ini):
        result = runner.invoke(paramfile_group, ["get", str(ini), "verbose", "--type", "int"])
        assert result.exit_code == 1
        assert "not a valid int" in result.output


class TestCheck:
    def test_all_defined(self, runner, ini):
        result = runner.invoke(paramfile_group, ["check", str(ini), "threads - worker count", "databaseUser"])
        assert result.exit_code == 0
        assert "All 2 parameters are defined" in result.output

    def test_missing_reported_together(self, runner, ini):
        result = runner.invoke(
            paramfile_group,
            ["check", str(ini), "p1 - first thing", "threads", "p2 - second thing"],
        )
        assert result.exit_code == 1
        assert "p1 - first thing" in result.output
        assert "p2 - second thing" in result.output


class TestAdd:
    def test_appends(self, runner, ini):
        result = runner.invoke(paramfile_group, ["add", str(ini), "output", "out.txt"])
        assert result.exit_code == 0
        assert ini.read_text(encoding="utf-8").endswith("output = out.txt\n")

    def test_existing_untouched(self, runner, ini):
        before = ini.read_text(encoding="utf-8")
        result = runner.invoke(paramfile_group, ["add", str(ini), "threads", "2"])
        assert result.exit_code == 0
        assert "already defined as 8" in result.output
        assert ini.read_text(encoding="utf-8") == before


class TestVerbose:
    def test_verbose_flag_accepted(self, runner, ini):
        result = runner.invoke(paramfile_group, ["--verbose", "show", str(ini)])
        assert result.exit_code == 0
        assert "threads = 8" in result.output
