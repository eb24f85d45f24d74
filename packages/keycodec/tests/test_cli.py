"""Tests for the pi-keys CLI"""
from __future__ import annotations

import json

import yaml
from typer.testing import CliRunner

from pi_keycodec.cli import app

runner = CliRunner()


class TestCheck:
    def test_valid_file(self, tmp_path, keyboard_data):
        path = tmp_path / "keys.yaml"
        path.write_text(yaml.safe_dump(keyboard_data), encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 0
        assert "move_left" in result.output
        assert "ALT+CONTROL" in result.output
        assert "4 binding(s) OK" in result.output

    def test_bracketed_names_are_literal(self, tmp_path):
        path = tmp_path / "keys.yaml"
        path.write_text(yaml.safe_dump({"[/x]": {"code": "q"}, "[bold]go[/bold]": {"code": "["}}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 0
        assert "[/x]" in result.output
        assert "[bold]go[/bold]" in result.output

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "keys.json"
        path.write_text(json.dumps({"quit": {"code": "q", "modifiers": "ALT+Z"}}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1


class TestNormalize:
    def test_to_stdout(self, tmp_path):
        path = tmp_path / "keys.json"
        path.write_text(json.dumps({"go": {"code": "Up", "modifiers": "CONTROL+ALT"}}), encoding="utf-8")
        result = runner.invoke(app, ["normalize", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"go": {"code": "Up", "modifiers": "ALT+CONTROL"}}

    def test_to_file(self, tmp_path, keyboard_data):
        src = tmp_path / "keys.json"
        src.write_text(json.dumps(keyboard_data), encoding="utf-8")
        out = tmp_path / "out" / "keys.yaml"
        result = runner.invoke(app, ["normalize", str(src), "--output", str(out)])
        assert result.exit_code == 0
        assert yaml.safe_load(out.read_text(encoding="utf-8")) == keyboard_data


class TestEncode:
    def test_named_key(self):
        result = runner.invoke(app, ["encode", "PageUp", "--modifiers", "SHIFT+ALT"])
        assert result.exit_code == 0
        assert 'code: "PageUp"' in result.output
        assert 'modifiers: "ALT+SHIFT"' in result.output

    def test_default_modifiers(self):
        result = runner.invoke(app, ["encode", "a"])
        assert result.exit_code == 0
        assert 'modifiers: "NONE"' in result.output

    def test_invalid(self):
        result = runner.invoke(app, ["encode", "Nope"])
        assert result.exit_code == 1
