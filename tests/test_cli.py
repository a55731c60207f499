"""Tests for the command line tool."""

import io
import json

import phpserialize
import pytest

from safe_serial.cli import main, to_jsonable


class TestCheck:
    """check reports detection through output and exit code."""

    def test_serialized(self, capsys):
        assert main(["check", 's:5:"hello";']) == 0
        assert capsys.readouterr().out.strip() == "true"

    def test_plain(self, capsys):
        assert main(["check", "hello"]) == 1
        assert capsys.readouterr().out.strip() == "false"

    def test_lenient(self, capsys):
        assert main(["check", "i:1;tail"]) == 1
        assert main(["check", "--lenient", "i:1;tail"]) == 0

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("i:42;\n"))
        assert main(["check"]) == 0


class TestDecode:
    """decode prints JSON or fails with exit code 2."""

    def test_array(self, capsys):
        assert main(["decode", 'a:2:{i:0;s:1:"a";i:1;i:3;}']) == 0
        assert json.loads(capsys.readouterr().out) == ["a", 3]

    def test_passthrough(self, capsys):
        assert main(["decode", "plain"]) == 0
        assert json.loads(capsys.readouterr().out) == "plain"

    def test_object(self, capsys):
        assert main(["decode", 'O:8:"stdClass":1:{s:1:"a";i:1;}']) == 0
        assert json.loads(capsys.readouterr().out) == {"__class__": "stdClass", "a": 1}

    def test_failure(self, capsys):
        assert main(["decode", 'a:5:{i:0;s:1:"x";}']) == 2
        assert "Error [decode_failure]" in capsys.readouterr().err


class TestEncode:
    """encode takes JSON and prints the stored form."""

    def test_list(self, capsys):
        assert main(["encode", '["a", "b", 3]']) == 0
        assert capsys.readouterr().out.strip() == 'a:3:{i:0;s:1:"a";i:1;s:1:"b";i:2;i:3;}'

    def test_colliding_string(self, capsys):
        assert main(["encode", '"i:1;"']) == 0
        assert capsys.readouterr().out.strip() == 's:4:"i:1;";'

    def test_invalid_json(self, capsys):
        assert main(["encode", "{nope"]) == 2
        assert "invalid JSON" in capsys.readouterr().err


def test_bad_settings_file(tmp_path, capsys):
    path = tmp_path / "settings.yaml"
    path.write_text("- not\n- a mapping\n")
    assert main(["--settings", str(path), "check", "N;"]) == 2
    assert "Error [settings]" in capsys.readouterr().err


def test_unknown_command():
    with pytest.raises(SystemExit):
        main(["explode"])


def test_to_jsonable_nested_object():
    obj = phpserialize.phpobject("Point", {"x": 1, "tags": {0: "a"}})
    assert to_jsonable([obj]) == [{"__class__": "Point", "x": 1, "tags": {"0": "a"}}]
