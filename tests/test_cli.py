import json
from pathlib import Path

from typer.testing import CliRunner

from suggestion_engine.cli import app

runner = CliRunner()


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "letter.txt").write_text("I will recieve the letter.", encoding="utf-8")
    (corpus_dir / "nested" / "clean.txt").write_text("The letter is here.", encoding="utf-8")
    (corpus_dir / "ignored.bin").write_bytes(b"\x00\x01")
    return corpus_dir


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze emits one JSON entry per text file with its suggestions."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    documents = {doc["doc_id"]: doc for doc in payload["documents"]}
    assert set(documents) == {"letter.txt", str(Path("nested") / "clean.txt")}
    letter = documents["letter.txt"]
    assert letter["score"] == 92
    assert letter["suggestions"][0]["replacements"] == ["receive"]
    assert documents[str(Path("nested") / "clean.txt")]["suggestions"] == []


def test_cli_apply_writes_edited_text(tmp_path: Path):
    """apply accepts a suggestion by id and writes the new text."""
    source = tmp_path / "letter.txt"
    source.write_text("I will recieve the letter.", encoding="utf-8")
    analyzed = json.loads(
        runner.invoke(app, ["analyze", "--input-path", str(source)]).stdout
    )
    suggestion_id = analyzed["documents"][0]["suggestions"][0]["id"]
    output = tmp_path / "out" / "letter.txt"

    result = runner.invoke(
        app,
        [
            "apply",
            "--input-path",
            str(source),
            "--suggestion-id",
            suggestion_id,
            "--output-path",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == "I will receive the letter."


def test_cli_apply_rejects_unknown_suggestion(tmp_path: Path):
    source = tmp_path / "letter.txt"
    source.write_text("I will recieve the letter.", encoding="utf-8")
    result = runner.invoke(
        app, ["apply", "--input-path", str(source), "--suggestion-id", "nope"]
    )
    assert result.exit_code != 0


def test_cli_analyze_rejects_unknown_detector(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--detector", "telepathy"]
    )
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "penalty_weights" in result.stdout
    assert "debounce_seconds" in result.stdout
