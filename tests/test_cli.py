from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from camel.cli.main import app

runner = CliRunner()


def _write_input(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_score_prints_both_totals(tmp_path: Path, example_input: str) -> None:
    path = _write_input(tmp_path, example_input)

    result = runner.invoke(app, ["score", str(path)])

    assert result.exit_code == 0
    assert "6440" in result.stdout
    assert "5905" in result.stdout


def test_score_single_mode_with_ranking(tmp_path: Path, example_input: str) -> None:
    path = _write_input(tmp_path, example_input)

    result = runner.invoke(app, ["score", str(path), "--mode", "wildcard", "--ranking"])

    assert result.exit_code == 0
    assert "5905" in result.stdout
    assert "6440" not in result.stdout
    assert "KTJJT" in result.stdout


def test_score_reads_stdin(example_input: str) -> None:
    result = runner.invoke(app, ["score", "-"], input=example_input)

    assert result.exit_code == 0
    assert "6440" in result.stdout


def test_score_rejects_bad_input(tmp_path: Path) -> None:
    path = _write_input(tmp_path, "32T3K 765\nT55J5\n")

    result = runner.invoke(app, ["score", str(path)])

    assert result.exit_code == 1


def test_score_rejects_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["score", str(tmp_path / "missing.txt")])

    assert result.exit_code != 0


def test_classify_describes_hand() -> None:
    result = runner.invoke(app, ["classify", "KTJJT"])

    assert result.exit_code == 0
    assert "Two Pair" in result.stdout


def test_classify_wildcard_mode() -> None:
    result = runner.invoke(app, ["classify", "JJJJJ", "--mode", "wildcard"])

    assert result.exit_code == 0
    assert "Full Set (Ace)" in result.stdout


def test_classify_rejects_unknown_symbol() -> None:
    result = runner.invoke(app, ["classify", "KTXJT"])

    assert result.exit_code == 1


def test_score_rejects_non_utf8_input(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"32T3K 765\n\xff\xfe 1\n")

    result = runner.invoke(app, ["score", str(path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_score_accepts_known_log_level(tmp_path: Path, example_input: str) -> None:
    path = _write_input(tmp_path, example_input)

    result = runner.invoke(app, ["score", str(path), "--log-level", "debug"])

    assert result.exit_code == 0
    assert "6440" in result.stdout


def test_score_rejects_unknown_log_level(tmp_path: Path, example_input: str) -> None:
    path = _write_input(tmp_path, example_input)

    result = runner.invoke(app, ["score", str(path), "--log-level", "chatty"])

    assert result.exit_code == 2
