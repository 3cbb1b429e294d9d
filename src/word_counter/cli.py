from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, List, TypedDict

import pandas as pd
import typer
import yaml

from .analyzer import analyze
from .chart import compute_bars, render_bar_chart
from .config import WordCounterConfig, load_config
from .formatting import format_score, render_cards
from .models import Document, Statistics
from .session import TextSession

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Word Counter CLI.", no_args_is_help=True)

STDIN_DOC_ID = "<stdin>"
TEXT_DOC_ID = "<text>"
EXPORT_SUFFIXES = {".csv", ".json"}


class DocumentSummary(TypedDict):
    doc_id: str
    word_count: int
    char_count: int
    char_no_spaces_count: int
    sentence_count: int
    readability_score: float


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="WORD_COUNTER_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Analyze word, character and sentence counts plus Flesch-Kincaid grade."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command("analyze")
def analyze_text(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Analyze this string."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze text and emit a JSON summary."""
    cfg = _load_config_or_fail(config)
    documents = _collect_documents(input_path, text, cfg)
    summary = [_summary_entry(doc, analyze(doc.text)) for doc in documents]
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def report(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Analyze this string."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    chart: bool | None = typer.Option(
        None, "--chart/--no-chart", help="Override config show_chart flag."
    ),
) -> None:
    """Print statistic cards and the words / chars / sentences chart."""
    cfg = _load_config_or_fail(config)
    if chart is not None:
        cfg.show_chart = chart
    documents = _collect_documents(input_path, text, cfg)
    blocks: List[str] = []
    for doc in documents:
        stats = analyze(doc.text)
        lines = [f"File: {doc.doc_id}", render_cards(stats, cfg)]
        if cfg.show_chart:
            bars = compute_bars(stats, cfg.chart.max_height)
            lines.append("")
            lines.append(render_bar_chart(bars, cfg.chart.min_height, cfg.chart.fill))
        blocks.append("\n".join(lines))
    typer.echo("\n\n".join(blocks))


@app.command()
def live(config: Path | None = typer.Option(None, "--config", "-c")) -> None:
    """Read stdin line by line and print updated statistics after each change."""
    cfg = _load_config_or_fail(config)
    session = TextSession()

    def echo_summary(stats: Statistics) -> None:
        typer.echo(_summary_line(stats, cfg))

    session.subscribe(echo_summary)
    for line in _iter_stdin_lines():
        session.append(line)

    typer.echo("")
    typer.echo(render_cards(session.statistics, cfg))


@app.command()
def export(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output: Path = typer.Option(..., "--output", "-o", dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze every document in a corpus and write a CSV or JSON table."""
    suffix = output.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        raise typer.BadParameter(
            f"Unsupported output type '{output.suffix}'; use .csv or .json.",
            param_hint="--output",
        )
    cfg = _load_config_or_fail(config)
    documents = _load_documents(input_path, cfg.input_extensions)
    if not documents:
        raise typer.BadParameter(
            f"No {', '.join(cfg.input_extensions)} files found under {input_path}.",
            param_hint="--input-path",
        )

    rows: List[Dict[str, Any]] = [
        dict(_summary_entry(doc, analyze(doc.text))) for doc in documents
    ]
    df = pd.DataFrame(rows)
    output.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(output, index=False)
    else:
        df.to_json(output, orient="records", indent=2)
    LOGGER.info("Wrote %d rows to %s", len(rows), output)
    typer.echo(f"Wrote statistics for {len(rows)} documents to {output}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WordCounterConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_or_fail(path: Path | None) -> WordCounterConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _collect_documents(
    input_path: Path | None, text: str | None, config: WordCounterConfig
) -> List[Document]:
    """Resolve --text, --input-path or stdin (in that order) into documents."""
    if text is not None and input_path is not None:
        raise typer.BadParameter("Use either --text or --input-path, not both.")
    if text is not None:
        return [Document(doc_id=TEXT_DOC_ID, text=text)]
    if input_path is not None:
        return _load_documents(input_path, config.input_extensions)
    text = _decode_utf8(_stdin().read(), STDIN_DOC_ID)
    return [Document(doc_id=STDIN_DOC_ID, text=text)]


def _load_documents(input_path: Path, extensions: List[str]) -> List[Document]:
    """Expand a file or directory into documents keyed by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    allowed = {ext.lower() for ext in extensions}
    files = sorted(
        p for p in input_path.rglob("*") if p.is_file() and p.suffix.lower() in allowed
    )
    LOGGER.debug("Found %d input files under %s", len(files), input_path)
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _stdin() -> BinaryIO:
    # Binary stdin keeps "\r\n" intact; text mode would translate it to "\n".
    return typer.get_binary_stream("stdin")


def _iter_stdin_lines() -> Iterator[str]:
    """Yield stdin lines with their original terminators."""
    for raw in _stdin():
        yield _decode_utf8(raw, STDIN_DOC_ID)


def _decode_utf8(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{source} is not valid UTF-8 text.") from exc


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a UTF-8 file without newline translation so counts match the bytes."""
    return Document(doc_id=doc_id, text=_decode_utf8(path.read_bytes(), str(path)))


def _summary_entry(doc: Document, stats: Statistics) -> DocumentSummary:
    return {
        "doc_id": doc.doc_id,
        "word_count": stats.word_count,
        "char_count": stats.char_count,
        "char_no_spaces_count": stats.char_no_spaces_count,
        "sentence_count": stats.sentence_count,
        "readability_score": stats.readability_score,
    }


def _summary_line(stats: Statistics, config: WordCounterConfig) -> str:
    score = format_score(stats.readability_score, config.score_decimals, config.rounding)
    return (
        f"words={stats.word_count} chars={stats.char_count} "
        f"chars_no_spaces={stats.char_no_spaces_count} "
        f"sentences={stats.sentence_count} grade={score}"
    )


if __name__ == "__main__":
    main()
