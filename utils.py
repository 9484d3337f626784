"""Utility helpers for app config, logging, word lists, output and exports."""

from __future__ import annotations

import csv
import json
import logging
import os
from pathlib import Path
from typing import Any

from models import SearchReport, SearchResult, WordListLoadResult


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".acronym_finder"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".acronym_finder")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
LOG_PATH = APP_DIR / "app.log"

WORDS_FILE_ENV = "ACRONYM_WORDS_FILE"
WORDS_FILE_PATHS = ("/usr/share/dict/words", "/usr/dict/words")


def ensure_app_dirs() -> None:
    """Create the app directory if it does not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    if not CONFIG_PATH.exists():
        return {}
    try:
        return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", CONFIG_PATH)


def find_words_file(words_file: str | Path | None = None) -> Path:
    """
    Resolve the word list to search.

    An explicit path must exist. Without one, the ACRONYM_WORDS_FILE
    environment variable is tried, then the usual UNIX dictionary locations.
    """
    if words_file is not None:
        path = Path(words_file)
        if not path.is_file():
            raise FileNotFoundError(f"Words file not found: {words_file}")
        return path

    from_env = os.environ.get(WORDS_FILE_ENV)
    if from_env:
        return find_words_file(from_env)

    if os.name != "posix":
        raise FileNotFoundError("platform does not have a default words file")

    for candidate in WORDS_FILE_PATHS:
        path = Path(candidate)
        if path.is_file():
            return path
    raise FileNotFoundError(f"could not find UNIX words file at {' or '.join(WORDS_FILE_PATHS)}")


def load_words_file(words_file: str | Path) -> WordListLoadResult:
    """
    Load lowercased words from a newline-delimited file.

    Blank lines and lines with anything but letters are skipped.
    """
    path = Path(words_file)
    words: list[str] = []
    total_lines = 0

    with path.open("r", encoding="utf-8", errors="ignore") as handle:
        for line in handle:
            total_lines += 1
            word = line.strip().lower()
            if word and word.isalpha():
                words.append(word)

    skipped = total_lines - len(words)
    if skipped:
        logging.getLogger(__name__).info("Skipped %d of %d lines in %s", skipped, total_lines, path)

    return WordListLoadResult(
        words_path=str(path),
        total_lines=total_lines,
        accepted_words=len(words),
        skipped_lines=skipped,
        words=words,
    )


def format_results(results: list[SearchResult]) -> str:
    """Render results grouped by word length, one `word : gloss` line each."""
    if not results:
        return "No results found."

    lines: list[str] = []
    prev_len: int | None = None
    for result in results:
        word_len = len(result.word)
        if prev_len is None or word_len > prev_len:
            if prev_len is not None:
                lines.append("")
            lines.append(f"{word_len} LETTERS")
            prev_len = word_len
        lines.append(f"{result.word} : {result.phrase_info()}")
    return "\n".join(lines)


def export_report(json_path: Path, csv_path: Path, report: SearchReport) -> None:
    """Export search report to both JSON and CSV."""
    payload = {
        "generated_at_utc": report.generated_at_utc,
        "words_path": report.words_path,
        "options": {
            "max_wildcards": report.options.max_wildcards,
            "max_unmatched_phrases": report.options.max_unmatched_phrases,
        },
        "start": report.start.display if report.start else None,
        "end": report.end.display if report.end else None,
        "phrases": [phrase.display for phrase in report.phrases],
        "results": [
            {
                "word": r.word,
                "phrase_info": r.phrase_info(),
                "phrases": [p.display if p else None for p in r.phrases],
                "num_wildcards": r.num_wildcards,
                "num_unused_phrases": r.num_unused_phrases,
            }
            for r in report.results
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["word", "phrase_info", "num_wildcards", "num_unused_phrases"])
        for row in report.results:
            writer.writerow([row.word, row.phrase_info(), row.num_wildcards, row.num_unused_phrases])
