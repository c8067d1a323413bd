#!/usr/bin/env python3
"""
YAMLQUILL CLI SUITE
-------------------
The render command end to end: stdout, flags, output files and preview.

Author: YamlQuill Team
Date: 2026-10-18
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from yamlquill.cli.main import QuillCLI, main


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"a": {"b": 1}, "c": [1, 2]}), encoding="utf-8")
    return path


def test_render_to_stdout(data_file, capsys):
    assert QuillCLI().run(["render", "data.json"]) == 0
    assert capsys.readouterr().out == "a:\n    b: 1\nc:\n    - 1\n    - 2\n"


def test_render_flags(data_file, tmp_path, capsys):
    (tmp_path / "notes.json").write_text(json.dumps({"a": "section a"}), encoding="utf-8")
    code = QuillCLI().run(["render", "data.json", "--comments", "notes.json", "--inline", "1", "--indent", "2"])
    assert code == 0
    assert capsys.readouterr().out == "# section a\na: {b: 1}\nc: [1, 2]\n"


def test_render_writes_output_file(data_file, tmp_path):
    assert QuillCLI().run(["render", "data.json", "-o", "out.yaml"]) == 0
    assert (tmp_path / "out.yaml").read_text(encoding="utf-8").startswith("a:\n")


def test_preview_panel(data_file, capsys):
    assert QuillCLI().run(["render", "data.json", "--preview"]) == 0
    assert "Rendered: data.json" in capsys.readouterr().out


def test_failures_exit_with_one(data_file, capsys):
    assert QuillCLI().run(["render", "missing.json"]) == 1
    assert "FILE_NOT_FOUND" in capsys.readouterr().out
    assert QuillCLI().run(["render", "data.json", "--indent", "-2"]) == 1


def test_no_arguments_prints_help(capsys):
    assert QuillCLI().run([]) == 0
    assert "usage: yamlquill" in capsys.readouterr().out


def test_main_exits_with_status(data_file):
    with pytest.raises(SystemExit) as exit_info:
        main(["render", "data.json"])
    assert exit_info.value.code == 0
