# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the wiremap CLI entry point."""

import shutil
import sys
from pathlib import Path

import pytest

from wiremap.cli.main import main

_WIDGETS = Path(__file__).parent.parent / "data" / "widgets.yaml"

# ###############
# Test Helpers
# ###############


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    """Invoke main() with *args* and return the exit code."""
    monkeypatch.setattr(sys, "argv", ["wiremap", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0
    assert "usage: wiremap" in capsys.readouterr().out


# -------- check tests --------


def test_check_valid_document(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check exits with code 0 for a document without issues."""
    assert _run(monkeypatch, "check", str(_WIDGETS)) == 0
    assert "No issues found." in capsys.readouterr().out


def test_check_reports_warnings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """check prints warnings but still succeeds."""
    ir_file = _write(
        tmp_path / "loose.yaml",
        "title: Loose\ntypes:\n  - name: t\n    properties:\n"
        "      - name: p\n        value: {kind: ComplexValue, typeName: missing}\n",
    )
    assert _run(monkeypatch, "check", str(ir_file)) == 0
    out = capsys.readouterr().out
    assert "Warning:" in out
    assert "Unresolved reference 'missing' in property 't.p'" in out
    assert "No issues found." in out


def test_check_reports_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check exits with code 1 when validation finds errors."""
    ir_file = _write(tmp_path / "dup.yaml", "title: Dup\ntypes:\n  - name: a\nenums:\n  - name: a\n")
    assert _run(monkeypatch, "check", str(ir_file)) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "Duplicate name 'a'" in err


def test_check_reports_load_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """check exits with code 1 when the document cannot be loaded."""
    assert _run(monkeypatch, "check", str(tmp_path / "missing.yaml")) == 1
    assert "IR file not found" in capsys.readouterr().err


# -------- generate tests --------


def test_generate_writes_server_artifacts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """generate writes all server artifacts to the output directory."""
    out_dir = tmp_path / "out"
    assert _run(monkeypatch, "generate", str(_WIDGETS), "--output", str(out_dir)) == 0
    assert "Generated 8 file(s)" in capsys.readouterr().out
    assert (out_dir / "v1" / "express" / "index.ts").is_file()
    assert (out_dir / "v1" / "dtos" / "README.md").is_file()


def test_generate_default_output_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """generate writes to ./generated when no output directory is given."""
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "generate", str(_WIDGETS)) == 0
    assert (tmp_path / "generated" / "v1" / "types.ts").is_file()


def test_generate_role_overrides_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--role takes precedence over the role in the options file."""
    config = _write(tmp_path / "wiremap.yaml", "role: server\ninclude-version: false\n")
    out_dir = tmp_path / "out"
    args = ["generate", str(_WIDGETS), "--config", str(config), "--role", "client", "--output", str(out_dir)]
    assert _run(monkeypatch, *args) == 0
    assert (out_dir / "dtos" / "mappers.ts").is_file()
    assert not (out_dir / "express").exists()


def test_generate_invalid_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """generate exits with code 1 when the options file is invalid."""
    config = _write(tmp_path / "wiremap.yaml", "flavor: spicy\n")
    assert _run(monkeypatch, "generate", str(_WIDGETS), "--config", str(config)) == 1
    assert "unknown option(s): flavor" in capsys.readouterr().err


def test_generate_invalid_document_writes_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """generate exits with code 1 and leaves the output directory absent on errors."""
    ir_file = _write(tmp_path / "dup.yaml", "title: Dup\ntypes:\n  - name: a\nenums:\n  - name: a\n")
    out_dir = tmp_path / "out"
    assert _run(monkeypatch, "generate", str(ir_file), "--output", str(out_dir)) == 1
    assert not out_dir.exists()


def test_generate_verbose_yml_document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """generate accepts .yml documents and logs progress with -v."""
    ir_file = tmp_path / "widgets.yml"
    shutil.copy(_WIDGETS, ir_file)
    assert _run(monkeypatch, "-v", "generate", str(ir_file), "--output", str(tmp_path / "out")) == 0
