"""Tests for CLI commands."""

import json

import pytest
import yaml

from beanprops.cli import ExitCode, main


BEAN_SOURCE = """
class Person:
    def getName(self) -> str:
        return ""

    def setName(self, name: str) -> None:
        pass

    def getAge(self) -> int:
        return 0

    def setNickname(self, nickname: str) -> None:
        pass

    def getId(self) -> int:
        return 0
"""


@pytest.fixture
def bean_file(tmp_path):
    """Write a Python file with a Person bean."""
    py_file = tmp_path / "person.py"
    py_file.write_text(BEAN_SOURCE)
    return py_file


class TestInspectCommand:
    """Tests for the inspect command."""

    def test_source_target_text_output(self, bean_file, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person"])

        assert exit_code == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert "Person: 4 properties" in out
        assert "name: str [rw]" in out
        assert "age: int [r]" in out
        assert "nickname: str [w]" in out

    def test_source_target_json_output(self, bean_file, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person", "--json"])

        assert exit_code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["bean"] == "Person"
        assert data["property_count"] == 4
        assert [p["name"] for p in data["properties"]] == ["name", "age", "nickname", "id"]
        assert data["properties"][0] == {
            "name": "name",
            "type": "str",
            "read_method": "getName",
            "write_method": "setName",
        }

    def test_module_target(self, bean_file, tmp_path, monkeypatch, capsys):
        """module:Class targets are imported and introspected live."""
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", "person:Person", "--json"])

        assert exit_code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["bean"] == "person.Person"
        assert data["property_count"] == 4

    def test_config_reserved_names(self, bean_file, tmp_path, monkeypatch, capsys):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(yaml.dump({"extra_reserved_names": ["id"]}))

        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person", "--config", str(config_file), "--json"])

        assert exit_code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert "id" not in [p["name"] for p in data["properties"]]

    def test_default_config_file_in_cwd(self, bean_file, tmp_path, monkeypatch, capsys):
        (tmp_path / "beanprops.yaml").write_text(yaml.dump({"extra_reserved_names": ["age"]}))

        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person", "--json"])

        assert exit_code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["property_count"] == 3

    def test_invalid_config_exits_1(self, bean_file, tmp_path, monkeypatch, capsys):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("{ invalid yaml: [")

        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person", "--config", str(config_file)])

        assert exit_code == ExitCode.CONFIG_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "config_invalid"

    def test_missing_class_exits_2(self, bean_file, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Missing"])

        assert exit_code == ExitCode.TARGET_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "class_not_found"

    def test_missing_module_exits_2(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", "no_such_module_xyz:Thing"])

        assert exit_code == ExitCode.TARGET_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "target_not_found"

    def test_module_failing_on_import_exits_2(self, tmp_path, monkeypatch, capsys):
        """A module that raises while importing is a target error, not a crash."""
        (tmp_path / "exploding_bean.py").write_text("raise RuntimeError(\"import failed\")\n")

        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", "exploding_bean:Bean"])

        assert exit_code == ExitCode.TARGET_ERROR
        error = json.loads(capsys.readouterr().err)
        assert error["error"] == "target_not_found"
        assert "import failed" in error["message"]

    def test_unreadable_config_exits_1(self, bean_file, tmp_path, monkeypatch, capsys):
        config_dir = tmp_path / "confdir"
        config_dir.mkdir()

        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", f"{bean_file}:Person", "--config", str(config_dir)])

        assert exit_code == ExitCode.CONFIG_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "config_unreadable"

    def test_target_without_class_exits_2(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        exit_code = main(["inspect", "person.py"])

        assert exit_code == ExitCode.TARGET_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "target_invalid"

    def test_verbose_logs_skipped_methods(self, bean_file, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        with caplog.at_level("DEBUG", logger="beanprops"):
            exit_code = main(["--verbose", "inspect", f"{bean_file}:Person"])

        assert exit_code == ExitCode.SUCCESS
        assert "Read 5 methods from Person" in caplog.text


class TestNameCommand:
    """Tests for the name command."""

    @pytest.mark.parametrize(
        "operation,value,expected",
        [
            ("hyphenate", "fooBar", "foo-bar"),
            ("hyphenate-preserve", "FooBarBaz", "Foo-Bar-Baz"),
            ("dehyphenate", "foo-bar", "FooBar"),
            ("underscore", "fooBar", "foo_bar"),
            ("decapitalize", "URL", "URL"),
            ("capitalize", "name", "Name"),
            ("package", "a.b.C", "a.b"),
            ("simple", "a.b.C", "C"),
            ("setter-property", "setName", "name"),
        ],
    )
    def test_operations(self, operation, value, expected, capsys):
        exit_code = main(["name", operation, value])

        assert exit_code == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == expected

    def test_capitalize_empty_exits_2(self, capsys):
        exit_code = main(["name", "capitalize", ""])

        assert exit_code == ExitCode.TARGET_ERROR
        assert json.loads(capsys.readouterr().err)["error"] == "value_invalid"

    def test_unknown_operation(self):
        with pytest.raises(SystemExit):
            main(["name", "reverse", "abc"])
