import pytest

from models import InvalidPhraseCharacterError, MissingCapitalError, Phrase, PhraseError, SearchOptions, SearchResult


def test_phrase_pattern_uses_only_capital_letters() -> None:
    phrase = Phrase.from_text("Portable Network Graphics")
    assert phrase.pattern == "png"
    assert phrase.words == ("Portable", "Network", "Graphics")

    assert Phrase.from_text("HeLLo").pattern == "hll"


def test_phrase_splits_on_single_spaces_only() -> None:
    phrase = Phrase.from_text("Hello  World")
    assert phrase.words == ("Hello", "", "World")
    assert phrase.display == "Hello  World"


def test_phrase_rejects_invalid_characters() -> None:
    with pytest.raises(InvalidPhraseCharacterError) as excinfo:
        Phrase.from_text("Hello World!")
    assert excinfo.value.phrase == "Hello World!"
    assert "letters or spaces" in str(excinfo.value)
    assert isinstance(excinfo.value, PhraseError)


def test_phrase_requires_a_capital_letter() -> None:
    with pytest.raises(MissingCapitalError) as excinfo:
        Phrase.from_text("hello world")
    assert excinfo.value.phrase == "hello world"
    assert "capital letter" in str(excinfo.value)


def test_search_options_reject_negative_budgets() -> None:
    with pytest.raises(ValueError):
        SearchOptions(max_wildcards=-1)
    with pytest.raises(ValueError):
        SearchOptions(max_unmatched_phrases=-1)


def test_phrase_info_fills_wildcards_from_word() -> None:
    p = Phrase.from_text("Portable")
    g = Phrase.from_text("Graphics Format")
    result = SearchResult(phrases=(p, None, g), num_unused_phrases=0, word="pngf")
    assert result.num_wildcards == 1
    assert result.phrase_info() == "Portable N.. Graphics Format"


def test_boundary_phrases_extend_word_and_phrases() -> None:
    start = Phrase.from_text("FOr")
    end = Phrase.from_text("R")
    result = SearchResult(phrases=(), num_unused_phrases=0, word="")

    extended = result.with_start_phrase(start).with_end_phrase(end)
    assert extended.word == "for"
    assert extended.phrases == (start, end)
    assert result.word == ""


def test_results_order_by_length_then_alphabetically() -> None:
    words = ["cab", "ba", "ab", "a"]
    results = [SearchResult(phrases=(), num_unused_phrases=0, word=w) for w in words]
    assert [r.word for r in sorted(results)] == ["a", "ab", "ba", "cab"]


def test_results_with_different_phrases_are_distinct() -> None:
    a = Phrase.from_text("A")
    first = SearchResult(phrases=(a, None), num_unused_phrases=0, word="ab")
    second = SearchResult(phrases=(None, None), num_unused_phrases=1, word="ab")
    assert first != second
    assert len({first, second, SearchResult(phrases=(a, None), num_unused_phrases=0, word="ab")}) == 2
