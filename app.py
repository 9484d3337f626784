"""Command-line entry point for acronym searching."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from models import PhraseError, SearchReport
from solver import AcronymSolver
from utils import (
    export_report,
    find_words_file,
    format_results,
    load_config,
    load_words_file,
    save_config,
    setup_logging,
)

logger = logging.getLogger(__name__)


def _config_int(config: dict, key: str) -> int:
    value = config.get(key, 0)
    if not isinstance(value, int) or value < 0:
        logger.warning("Ignoring invalid %s in config: %r", key, value)
        return 0
    return value


@click.command()
@click.argument("phrases", nargs=-1)
@click.option("-s", "--start", default=None,
              help="Acronym must begin with this phrase.")
@click.option("-e", "--end", default=None,
              help="Acronym must end with this phrase.")
@click.option("-w", "--max-wildcards", type=click.IntRange(min=0), default=None,
              help="Maximum number of allowed wildcards (default: 0).")
@click.option("-u", "--max-unmatched-phrases", type=click.IntRange(min=0), default=None,
              help="Maximum number of unmatched phrases. Start and end are always required.")
@click.option("-f", "--words-file", type=click.Path(path_type=Path), default=None,
              help="Newline-separated words file. Defaults to the system dictionary.")
@click.option("--save", "save_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save results as JSON, with a CSV alongside.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to the app log.")
def main(phrases, start, end, max_wildcards, max_unmatched_phrases, words_file, save_path, verbose):
    """
    Find words that are acronyms of PHRASES.

    Each phrase is a sequence of space-separated words (letters only) where
    the capitalized letters are the ones that go into the acronym, e.g.
    "Portable Network Graphics" or "PNG".
    """
    if not phrases and start is None and end is None:
        click.echo("Bless you!")
        return

    setup_logging(verbose)
    config = load_config()
    if max_wildcards is None:
        max_wildcards = _config_int(config, "max_wildcards")
    if max_unmatched_phrases is None:
        max_unmatched_phrases = _config_int(config, "max_unmatched_phrases")
    if words_file is None and config.get("words_file"):
        words_file = Path(config["words_file"])

    try:
        solver = AcronymSolver.from_text(
            phrases,
            start=start,
            end=end,
            max_wildcards=max_wildcards,
            max_unmatched_phrases=max_unmatched_phrases,
        )
        loaded = load_words_file(find_words_file(words_file))
    except (PhraseError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("Loaded %d words from %s", loaded.accepted_words, loaded.words_path)
    config["last_words_file"] = loaded.words_path
    save_config(config)

    solver.words = loaded.words
    results = solver.search()
    click.echo(format_results(results))

    if save_path is not None:
        report = SearchReport(
            phrases=solver.phrases,
            start=solver.start,
            end=solver.end,
            options=solver.options,
            results=results,
            words_path=loaded.words_path,
        )
        csv_path = save_path.with_suffix(".csv")
        try:
            export_report(json_path=save_path, csv_path=csv_path, report=report)
        except OSError as exc:
            logger.exception("Export failed")
            raise click.ClickException(f"Could not save results: {exc}") from exc
        click.echo(f"Saved: {save_path} and {csv_path}", err=True)


if __name__ == "__main__":
    main()
