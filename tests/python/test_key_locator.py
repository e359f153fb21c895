import math

from extractify.contracts import TextFragment
from extractify.parsing.key_locator import (
    find_key_location,
    matches_exact,
    matches_first_keyword,
    matches_space_normalized,
)


def _frag(text: str, x: float | None = None, y: float | None = None) -> TextFragment:
    return TextFragment(text=text, x=x, y=y)


def test_exact_substring_match_returns_fragment_position() -> None:
    fragments = [_frag("서울시", 150, 500), _frag("주소", 50, 500)]

    location = find_key_location(fragments, "주소")

    assert location is not None
    assert location.fragment_index == 1
    assert (location.x, location.y) == (50.0, 500.0)


def test_space_normalized_match_tolerates_broken_spacing() -> None:
    fragments = [_frag("기 준층 면적", 40, 300)]

    location = find_key_location(fragments, "기준층 면적")

    assert location is not None
    assert location.fragment_index == 0


def test_first_keyword_match_for_compound_label() -> None:
    fragments = [_frag("800평", 150, 300), _frag(" 기준층 ", 40, 300)]

    location = find_key_location(fragments, "기준층 면적")

    assert location is not None
    assert location.fragment_index == 1


def test_earlier_strategy_wins_over_earlier_fragment() -> None:
    fragments = [_frag("기준층 안내", 40, 600), _frag("기준층 면적", 40, 300)]

    location = find_key_location(fragments, "기준층 면적")

    assert location is not None
    assert location.fragment_index == 1


def test_single_word_key_does_not_use_first_keyword_strategy() -> None:
    assert find_key_location([_frag("주차", 10, 10)], "주차사항") is None


def test_fragments_without_valid_position_are_never_keys() -> None:
    fragments = [
        _frag("주소"),
        _frag("주소", math.nan, 10),
        _frag("주소", -5, 10),
        _frag("주소", 20, 30),
    ]

    location = find_key_location(fragments, "주소")

    assert location is not None
    assert location.fragment_index == 3


def test_missing_key_returns_none() -> None:
    assert find_key_location([_frag("교통", 10, 10)], "주소") is None
    assert find_key_location([_frag("교통", 10, 10)], "  ") is None


def test_matcher_predicates() -> None:
    assert matches_exact("주소:", "주소")
    assert not matches_exact("주 소", "주소")
    assert matches_space_normalized("주 소", "주소")
    assert matches_first_keyword("기준층", "기준층 면적")
    assert not matches_first_keyword("면적", "기준층 면적")
