from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple, TypedDict

import typer
import yaml

from .config import EngineConfig, load_config
from .models import AnalysisResult, ApplyStatus, Suggestion
from .pipeline import AnalysisEngine, build_engine_from_config

app = typer.Typer(help="Suggestion Engine CLI.", no_args_is_help=True)

# File types the CLI knows how to read as plain text.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class SuggestionPayload(TypedDict):
    id: str
    category: str
    severity: str
    start: int
    end: int
    original_text: str
    replacements: List[str]
    confidence: float
    message: str
    explanation: str


class DocumentSummary(TypedDict):
    doc_id: str
    score: int
    word_count: int
    text_version: int
    remote_status: str
    failed_detectors: List[str]
    suggestions: List[SuggestionPayload]


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for all sub-commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    detectors: List[str] | None = typer.Option(
        None,
        "--detector",
        "-d",
        help="Detector to enable (repeatable); defaults to the configured set.",
    ),
    remote_url: str | None = typer.Option(
        None, "--remote-url", help="Enable the HTTP analyzer at this endpoint."
    ),
    openai_enabled: bool | None = typer.Option(
        None,
        "--openai-enabled/--openai-disabled",
        help="Toggle OpenAI-backed analysis.",
    ),
    openai_model: str | None = typer.Option(
        None, "--openai-model", help="OpenAI model identifier (e.g., gpt-4.1-mini)."
    ),
    openai_api_key: str | None = typer.Option(
        None, "--openai-api-key", help="Explicit OpenAI API key (prefer env vars)."
    ),
) -> None:
    """Analyze one file or a directory of text files and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, detectors, remote_url, openai_enabled, openai_model, openai_api_key)
    engine = _build_engine(cfg)
    summary: List[DocumentSummary] = []
    for doc_id, text in _load_documents(input_path):
        summary.append(_document_summary(doc_id, engine.analyze(text)))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def apply(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    suggestion_id: str = typer.Option(..., "--suggestion-id", "-s"),
    candidate_index: int = typer.Option(0, "--candidate-index", "-i"),
    output_path: Path | None = typer.Option(
        None, "--output-path", "-o", help="Where to write the edited text (default: stdout)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze a file, accept one suggestion by id and write the edited text."""
    cfg = load_config(config)
    engine = _build_engine(cfg)
    text = _read_text(input_path)
    result = engine.analyze(text)
    outcome, _ = engine.apply(text, result, suggestion_id, candidate_index)
    if outcome.status is ApplyStatus.STALE:
        raise typer.BadParameter(
            f"No pending suggestion with id '{suggestion_id}'.", param_hint="--suggestion-id"
        )
    if outcome.status is ApplyStatus.INVALID_CANDIDATE:
        raise typer.BadParameter(
            f"Suggestion '{suggestion_id}' has no candidate {candidate_index}.",
            param_hint="--candidate-index",
        )
    if output_path is None:
        typer.echo(outcome.text, nl=False)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(outcome.text, encoding="utf-8")
    typer.echo(
        f"Applied {suggestion_id} ({len(outcome.invalidated)} suggestions invalidated); "
        f"wrote {output_path}"
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EngineConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: EngineConfig,
    detectors: List[str] | None,
    remote_url: str | None,
    openai_enabled: bool | None,
    openai_model: str | None,
    openai_api_key: str | None,
) -> None:
    """Override detector and remote analyzer settings from CLI flags."""
    if detectors:
        config.detectors = list(detectors)
    if remote_url:
        config.remote.enabled = True
        config.remote.endpoint_url = remote_url
    settings = config.openai
    if openai_enabled is not None:
        settings.enabled = openai_enabled
    if openai_model:
        settings.model = openai_model
    if openai_api_key:
        settings.api_key = openai_api_key


def _build_engine(config: EngineConfig) -> AnalysisEngine:
    try:
        return build_engine_from_config(config)
    except (ValueError, RuntimeError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, _read_text(input_path))]
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative paths keep doc ids unique across subdirectories.
    return [(str(file.relative_to(input_path)), _read_text(file)) for file in files]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc


def _document_summary(doc_id: str, result: AnalysisResult) -> DocumentSummary:
    return {
        "doc_id": doc_id,
        "score": result.score,
        "word_count": result.word_count,
        "text_version": result.text_version,
        "remote_status": result.remote_status.value,
        "failed_detectors": list(result.failed_detectors),
        "suggestions": [_suggestion_dict(s) for s in result.active_suggestions],
    }


def _suggestion_dict(suggestion: Suggestion) -> SuggestionPayload:
    """Serialize a Suggestion so it can be emitted in JSON."""
    return {
        "id": suggestion.id,
        "category": suggestion.category.value,
        "severity": suggestion.severity.value,
        "start": suggestion.span.start,
        "end": suggestion.span.end,
        "original_text": suggestion.original_text,
        "replacements": list(suggestion.replacement_candidates),
        "confidence": suggestion.confidence,
        "message": suggestion.message,
        "explanation": suggestion.explanation,
    }


if __name__ == "__main__":
    main()
