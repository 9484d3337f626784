"""Acronym match enumeration and search engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from models import Phrase, SearchOptions, SearchResult

logger = logging.getLogger(__name__)

WordMatch = list[int | None]


def find_word_matches(phrases: Sequence[Phrase], word: str) -> list[WordMatch]:
    """
    Find every way to place the phrases, in order, over the word.

    Each match has one slot per character of the word, holding the index of
    the phrase placed there or None if the character is left as a wildcard.
    For phrases `["ab", "b", "c"]` and the word `"ababc"` this returns
    `[0, 0, None, 1, 2]` and `[None, 1, 0, 0, 2]`.

    Only the first character of a placement has to be free. The rest of the
    placement overwrites whatever an earlier phrase put there.
    """
    current: list[WordMatch] = [[None] * len(word)]

    for phrase_idx, phrase in enumerate(phrases):
        pattern = phrase.pattern
        extended: list[WordMatch] = []
        for word_match in current:
            start = word.find(pattern)
            while start != -1:
                if word_match[start] is None:
                    new_match = word_match.copy()
                    new_match[start:start + len(pattern)] = [phrase_idx] * len(pattern)
                    extended.append(new_match)
                start = word.find(pattern, start + 1)
        current = extended

    return current


def collapse_word_match(word_match: Sequence[int | None]) -> WordMatch:
    """Collapse runs of the same phrase index into one entry, leaving every wildcard in place."""
    collapsed: WordMatch = []
    for idx in word_match:
        if idx is not None and collapsed and collapsed[-1] == idx:
            continue
        collapsed.append(idx)
    return collapsed


def build_results(phrases: Sequence[Phrase], word: str) -> Iterator[SearchResult]:
    """Yield one result per way of matching `phrases` against `word`."""
    for word_match in find_word_matches(phrases, word):
        collapsed = collapse_word_match(word_match)
        used = {idx for idx in collapsed if idx is not None}
        yield SearchResult(
            phrases=tuple(None if idx is None else phrases[idx] for idx in collapsed),
            num_unused_phrases=len(phrases) - len(used),
            word=word,
        )


class AcronymSolver:
    """Search a word list for acronyms of an ordered list of phrases."""

    def __init__(
        self,
        phrases: Sequence[Phrase],
        start: Phrase | None = None,
        end: Phrase | None = None,
        options: SearchOptions | None = None,
        words: Iterable[str] = (),
    ) -> None:
        self.phrases: list[Phrase] = list(phrases)
        self.start = start
        self.end = end
        self.options = options or SearchOptions()
        self.words: list[str] = list(words)

    @classmethod
    def from_text(
        cls,
        phrases: Iterable[str],
        start: str | None = None,
        end: str | None = None,
        max_wildcards: int = 0,
        max_unmatched_phrases: int = 0,
        words: Iterable[str] = (),
    ) -> AcronymSolver:
        """
        Build a solver from raw phrase text.

        Raises a PhraseError for the first phrase that has an invalid character
        or no capital letters.
        """
        return cls(
            phrases=[Phrase.from_text(text) for text in phrases],
            start=Phrase.from_text(start) if start is not None else None,
            end=Phrase.from_text(end) if end is not None else None,
            options=SearchOptions(max_wildcards=max_wildcards, max_unmatched_phrases=max_unmatched_phrases),
            words=words,
        )

    def stripped_words(self) -> list[str]:
        """Words that begin with the start phrase and end with the end phrase, with both removed."""
        stripped: list[str] = []
        for word in self.words:
            if self.start is not None:
                if not word.startswith(self.start.pattern):
                    continue
                word = word[len(self.start.pattern):]
            if self.end is not None:
                if not word.endswith(self.end.pattern):
                    continue
                word = word[:len(word) - len(self.end.pattern)]
            stripped.append(word)
        return stripped

    def _add_start_and_end(self, result: SearchResult) -> SearchResult:
        if self.start is not None:
            result = result.with_start_phrase(self.start)
        if self.end is not None:
            result = result.with_end_phrase(self.end)
        return result

    def _within_limits(self, result: SearchResult) -> bool:
        return (
            result.num_wildcards <= self.options.max_wildcards
            and result.num_unused_phrases <= self.options.max_unmatched_phrases
        )

    def search(self) -> list[SearchResult]:
        """Return distinct results ordered by word length, then alphabetically."""
        candidates = self.stripped_words()
        logger.debug("Searching %d of %d words", len(candidates), len(self.words))

        found: set[SearchResult] = set()
        for word in candidates:
            for result in build_results(self.phrases, word):
                if self._within_limits(result):
                    found.add(self._add_start_and_end(result))

        results = sorted(found)
        logger.info(
            "Found %d results for %d phrases (max wildcards %d, max unmatched %d)",
            len(results),
            len(self.phrases),
            self.options.max_wildcards,
            self.options.max_unmatched_phrases,
        )
        return results
