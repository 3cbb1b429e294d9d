from __future__ import annotations

from pathlib import Path


def write_sample_corpus(root: Path) -> Path:
    """Create a small corpus with nested .txt files and one ignored file."""
    corpus_dir = root / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay. Sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "chapter2.txt").write_text(
        "Hello world.", encoding="utf-8"
    )
    (corpus_dir / "notes.md").write_text("# Not analyzed", encoding="utf-8")
    return corpus_dir
