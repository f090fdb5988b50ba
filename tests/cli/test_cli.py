from __future__ import annotations

import json
import os
import sys
from pathlib import Path
import textwrap

import pytest

from fsorder.cli import main


def _frames(directory: Path, *names: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_bytes(b"")
    return directory


def test_list_prints_names_in_natural_order(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _frames(tmp_path / "frames", "img2.jpg", "img10.jpg", "img1.jpg", "IMG3.jpg")
    (root / "thumbs").mkdir()

    exit_code = main(["list", str(root)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["img1.jpg", "img2.jpg", "IMG3.jpg", "img10.jpg"]


def test_list_filters_extensions_and_joins_paths(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _frames(tmp_path / "frames", "f10.png", "f2.PNG", "notes.txt")

    exit_code = main(["list", str(root), "--ext", "png", "--full-paths"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        os.path.join(str(root), "f2.PNG"),
        os.path.join(str(root), "f10.png"),
    ]


def test_list_json_output_for_several_roots(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first = _frames(tmp_path / "a", "x10", "x9")
    second = _frames(tmp_path / "b", "y1")
    output = tmp_path / "out" / "listing.json"

    exit_code = main(
        ["list", str(first), str(second), "--format", "json", "--output", str(output), "--no-progress"]
    )

    expected = {str(first): ["x9", "x10"], str(second): ["y1"]}
    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == expected
    assert json.loads(output.read_text(encoding="utf-8")) == expected


def test_list_text_output_with_headers(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first = _frames(tmp_path / "a", "x1")
    second = _frames(tmp_path / "b", "y1")

    main(["list", str(first), str(second), "--no-progress"])

    assert capsys.readouterr().out.splitlines() == [
        f"==> {first} <==",
        "x1",
        "",
        f"==> {second} <==",
        "y1",
    ]


def test_list_reports_missing_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    good = _frames(tmp_path / "good", "a1")

    exit_code = main(["list", str(tmp_path / "missing"), str(good), "--no-progress", "--format", "json"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert json.loads(captured.out) == {str(good): ["a1"]}
    assert "opendir failed" in captured.err


def test_list_reads_roots_from_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _frames(tmp_path / "shots", "s10.exr", "s2.exr", "s1.jpg")
    cfg_path = tmp_path / "fsorder.yaml"
    cfg_path.write_text(
        textwrap.dedent(
            """
            logging:
              level: WARNING
              use_rich: false
            tasks:
              list:
                roots: [shots]
                extensions: [exr]
            """
        ),
        encoding="utf-8",
    )

    exit_code = main(["--config", str(cfg_path), "list"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["s2.exr", "s10.exr"]


def test_list_without_roots_or_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["list"]) == 2
    assert "No directories given" in capsys.readouterr().err


def test_invalid_config_exits_with_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text("logging: [1, 2]\n", encoding="utf-8")

    exit_code = main(["--config", str(cfg_path), "compare", "a", "b"])

    assert exit_code == 2
    assert "must be a mapping" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("left", "right", "symbol"),
    [("file2", "file10", "<"), ("IMG7", "img007", "="), ("b", "A", ">")],
)
def test_compare(left: str, right: str, symbol: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["compare", left, right]) == 0
    assert capsys.readouterr().out.strip() == symbol


def test_resolve(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    install_dir = tmp_path / "install"
    install_dir.mkdir()
    script = install_dir / "tool.py"
    script.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(script)])
    monkeypatch.delattr(sys, "frozen", raising=False)
    existing = tmp_path / "model.bin"
    existing.write_bytes(b"")

    main(["resolve", str(existing)])
    main(["resolve", "assets", "--dir"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(existing), str(install_dir.resolve()) + os.sep + "assets"]


def test_config_prints_validated_task(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_path = tmp_path / "fsorder.yaml"
    cfg_path.write_text("tasks:\n  list:\n    root: frames\n    full_paths: true\n", encoding="utf-8")

    exit_code = main(["-c", str(cfg_path), "config", "list"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["roots"] == [str(tmp_path / "frames")]
    assert payload["full_paths"] is True
    assert payload["__task__"] == "list"


def test_config_accepts_positional_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_path = tmp_path / "my.yaml"
    cfg_path.write_text("tasks:\n  list:\n    roots: [frames]\n", encoding="utf-8")

    exit_code = main(["config", "list", str(cfg_path)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["roots"] == [str(tmp_path / "frames")]
    assert payload["__config_path__"] == str(cfg_path)


def test_list_applies_task_logging_section(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _frames(tmp_path / "shots", "s1.exr")
    cfg_path = tmp_path / "fsorder.yaml"
    cfg_path.write_text(
        textwrap.dedent(
            """
            logging:
              level: ERROR
              use_rich: false
            tasks:
              list:
                roots: [shots]
                logging:
                  level: DEBUG
                  log_dir: tasklogs
                  file_prefix: listing
            """
        ),
        encoding="utf-8",
    )

    exit_code = main(["--config", str(cfg_path), "list"])

    captured = capsys.readouterr()
    log_files = list((tmp_path / "tasklogs").glob("listing_*.log"))
    assert exit_code == 0
    assert captured.out.splitlines() == ["s1.exr"]
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "[DEBUG]" in content
    assert "Loaded 'list' task" in content
