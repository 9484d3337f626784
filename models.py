"""Data models for acronym phrases, search results and word-list metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone


class PhraseError(ValueError):
    """Raised when phrase text cannot be turned into a matching pattern."""

    def __init__(self, phrase: str, message: str) -> None:
        super().__init__(f"{message}: {phrase}")
        self.phrase = phrase


class InvalidPhraseCharacterError(PhraseError):
    def __init__(self, phrase: str) -> None:
        super().__init__(phrase, "phrase characters can only be letters or spaces")


class MissingCapitalError(PhraseError):
    def __init__(self, phrase: str) -> None:
        super().__init__(phrase, "phrase must have at least one capital letter")


@dataclass(frozen=True, slots=True)
class Phrase:
    """
    Phrase that makes up part of the acronym.

    `words` keeps the phrase as typed for display; `pattern` is the lowercased
    run of its capital letters and is what gets searched for in a word.
    """

    words: tuple[str, ...]
    pattern: str

    @classmethod
    def from_text(cls, text: str) -> Phrase:
        pattern: list[str] = []
        for char in text:
            if not (char.isalpha() or char == " "):
                raise InvalidPhraseCharacterError(text)
            if char.isupper():
                pattern.append(char.lower())

        if not pattern:
            raise MissingCapitalError(text)

        return cls(words=tuple(text.split(" ")), pattern="".join(pattern))

    @property
    def display(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Wildcard and unmatched-phrase budgets applied to every result."""

    max_wildcards: int = 0
    max_unmatched_phrases: int = 0

    def __post_init__(self) -> None:
        if self.max_wildcards < 0:
            raise ValueError(f"max_wildcards must be non-negative, got {self.max_wildcards}")
        if self.max_unmatched_phrases < 0:
            raise ValueError(f"max_unmatched_phrases must be non-negative, got {self.max_unmatched_phrases}")


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    One way of reading a word as an acronym.

    `phrases` holds one entry per matched phrase occurrence, in word order, and
    `None` for each character left as a wildcard. Results order by word length
    and then alphabetically.
    """

    phrases: tuple[Phrase | None, ...]
    num_unused_phrases: int
    word: str

    @property
    def num_wildcards(self) -> int:
        return sum(1 for phrase in self.phrases if phrase is None)

    def sort_key(self) -> tuple:
        # trailing fields only order distinct tilings of the same word
        spans = tuple(("", ()) if p is None else (p.pattern, p.words) for p in self.phrases)
        return (len(self.word), self.word, self.num_unused_phrases, spans)

    def __lt__(self, other: SearchResult) -> bool:
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def with_start_phrase(self, phrase: Phrase) -> SearchResult:
        """Return a copy with `phrase` matched at the start of the word."""
        return replace(self, phrases=(phrase, *self.phrases), word=phrase.pattern + self.word)

    def with_end_phrase(self, phrase: Phrase) -> SearchResult:
        """Return a copy with `phrase` matched at the end of the word."""
        return replace(self, phrases=(*self.phrases, phrase), word=self.word + phrase.pattern)

    def phrase_info(self) -> str:
        """
        Gloss the word with its phrases, filling wildcards from the word.

        Matched phrases print their words; each wildcard prints its letter
        uppercased and followed by `..`, e.g. `Portable Network G.. Format`.
        """
        parts: list[str] = []
        idx = 0
        for phrase in self.phrases:
            if phrase is not None:
                parts.append(phrase.display)
                idx += len(phrase.pattern)
            else:
                # an overlapped match can push the cursor past the end of the word
                letter = self.word[idx:idx + 1].upper() or "?"
                parts.append(f"{letter}..")
                idx += 1
        return " ".join(parts)


@dataclass(slots=True)
class WordListLoadResult:
    """Summary returned after loading a word list."""

    words_path: str
    total_lines: int
    accepted_words: int
    skipped_lines: int
    words: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SearchReport:
    """Search configuration and results, as exported to JSON/CSV."""

    phrases: list[Phrase]
    start: Phrase | None
    end: Phrase | None
    options: SearchOptions
    results: list[SearchResult]
    words_path: str = ""
    generated_at_utc: str = field(default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"))
