from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("typer")


def _run_cli(*args: str, cwd: Path | None = None, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    command = [sys.executable, "-m", "sharecrack", *args]
    env = os.environ.copy()
    module_root = Path(__file__).resolve().parents[2] / "src"
    env["PYTHONPATH"] = (
        f"{module_root}{os.pathsep}{env['PYTHONPATH']}"
        if env.get("PYTHONPATH")
        else str(module_root)
    )
    return subprocess.run(
        command,
        check=check,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )


def _write_challenge(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {
                "keys": {"n": 4, "k": 3},
                "1": {"base": "10", "value": "4"},
                "2": {"base": "2", "value": "111"},
                "3": {"base": "10", "value": "12"},
                "6": {"base": "4", "value": "213"},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_reports_version() -> None:
    result = _run_cli("version")
    assert result.stdout.decode("utf-8").strip().startswith("sharecrack")


def test_cli_solve_text(tmp_path: Path) -> None:
    challenge = _write_challenge(tmp_path / "challenge.json")
    result = _run_cli("solve", str(challenge), cwd=tmp_path)
    lines = result.stdout.decode("utf-8").splitlines()
    assert lines == ["Secret: 3", "Wrong Points: None"]


def test_cli_solve_json(tmp_path: Path) -> None:
    challenge = _write_challenge(tmp_path / "challenge.json")
    result = _run_cli("solve", str(challenge), "--json", cwd=tmp_path)
    payload = json.loads(result.stdout.decode("utf-8"))
    assert payload["secret"] == "3"
    assert payload["faulty_share_ids"] == []
    assert payload["diagnostics"]["total_subsets"] == 4


def test_cli_solve_rejects_malformed_document(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    result = _run_cli("solve", str(broken), cwd=tmp_path, check=False)
    assert result.returncode == 2


def test_cli_demo_prints_both_cases(tmp_path: Path) -> None:
    result = _run_cli("demo", cwd=tmp_path)
    lines = result.stdout.decode("utf-8").splitlines()
    assert lines[0] == "TestCase-1 Secret: 3"
    assert lines[1].startswith("TestCase-2 Secret: ")
    assert lines[2] == "TestCase-1 Wrong Points: None"
    assert lines[3].startswith("TestCase-2 Wrong Points: ")


def test_cli_decode(tmp_path: Path) -> None:
    assert _run_cli("decode", "213", "--base", "4", cwd=tmp_path).stdout.decode().strip() == "39"
    failed = _run_cli("decode", "g", "--base", "10", cwd=tmp_path, check=False)
    assert failed.returncode == 2
    assert b"digit_out_of_range" in failed.stderr


def test_cli_init_config_then_use_it(tmp_path: Path) -> None:
    target = tmp_path / "conf" / "config.yaml"
    _run_cli("init-config", "--path", str(target), cwd=tmp_path)
    assert "tie_break: first_seen" in target.read_text(encoding="utf-8")
    challenge = _write_challenge(tmp_path / "challenge.json")
    result = _run_cli("--config", str(target), "solve", str(challenge), cwd=tmp_path)
    assert result.stdout.decode("utf-8").splitlines()[0] == "Secret: 3"


def test_cli_solve_drops_malformed_share(tmp_path: Path) -> None:
    challenge = _write_challenge(tmp_path / "challenge.json")
    payload = json.loads(challenge.read_text(encoding="utf-8"))
    payload["7"] = {"base": "10"}
    payload["8"] = {"base": "36", "value": "\u0130"}
    challenge.write_text(json.dumps(payload), encoding="utf-8")

    result = _run_cli("solve", str(challenge), "--json", cwd=tmp_path)
    assert json.loads(result.stdout.decode("utf-8"))["secret"] == "3"
    assert b"share dropped" in result.stderr

    strict = _run_cli("solve", str(challenge), "--strict", cwd=tmp_path, check=False)
    assert strict.returncode == 2
