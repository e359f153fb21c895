from extractify.config import TableLayoutConfig
from extractify.contracts import TextFragment
from extractify.parsing.layout_types import ExtractedValue, KeyLocation, RowDescriptor
from extractify.parsing.row_layout import (
    calculate_row_boundaries,
    estimate_key_width,
    extract_row_values,
    sort_values_in_reading_order,
)


def _row(key: str, y: float, x: float = 50.0, index: int = 0) -> RowDescriptor:
    fragment = TextFragment(text=key, x=x, y=y)
    location = KeyLocation(fragment_index=index, fragment=fragment, x=x, y=y)
    return RowDescriptor(key=key, y=y, location=location)


def test_boundaries_use_midpoints_capped_by_tolerance() -> None:
    rows = [_row("주소", 500), _row("교통", 470), _row("연면적", 400)]

    calculate_row_boundaries(rows, row_tolerance=15)

    assert (rows[0].min_y, rows[0].max_y) == (485, 515)
    assert (rows[1].min_y, rows[1].max_y) == (455, 485)
    assert (rows[2].min_y, rows[2].max_y) == (385, 415)


def test_adjacent_close_rows_share_midpoint_boundary() -> None:
    rows = [_row("a", 500), _row("b", 490), _row("c", 480)]

    calculate_row_boundaries(rows, row_tolerance=15)

    for upper, lower in zip(rows, rows[1:]):
        assert upper.min_y == lower.max_y
    for row in rows:
        assert row.min_y <= row.y <= row.max_y


def test_key_width_ignores_spaces() -> None:
    assert estimate_key_width("기준층 면적") == 40
    assert estimate_key_width("주소", char_width=10) == 20


def test_extract_row_values_excludes_key_and_nearby_echo() -> None:
    fragments = [
        TextFragment(text="기준층 면적", x=50, y=300),
        TextFragment(text="기준층", x=200, y=302),
        TextFragment(text="기준층 전용", x=200, y=290),
        TextFragment(text="800평", x=150, y=300),
        TextFragment(text="비고", x=80, y=300),
        TextFragment(text="다른 행", x=150, y=330),
    ]
    row = _row("기준층 면적", 300)
    calculate_row_boundaries([row], row_tolerance=15)

    values = extract_row_values(fragments, row, row.location, TableLayoutConfig())

    assert [value.text for value in values] == ["기준층 전용", "800평"]
    assert all(value.fragment_index != 0 for value in values)


def test_extract_row_values_skips_unpositioned_fragments() -> None:
    fragments = [TextFragment(text="주소", x=50, y=500), TextFragment(text="서울")]
    row = _row("주소", 500)
    calculate_row_boundaries([row])

    assert extract_row_values(fragments, row, row.location) == []


def test_reading_order_groups_same_line_then_top_to_bottom() -> None:
    values = [
        ExtractedValue(fragment_index=0, text="a", x=200, y=400),
        ExtractedValue(fragment_index=1, text="b", x=150, y=400),
        ExtractedValue(fragment_index=2, text="c", x=150, y=385),
        ExtractedValue(fragment_index=3, text="d", x=100, y=401),
    ]

    ordered = sort_values_in_reading_order(values, same_line_tolerance=3)

    assert [value.text for value in ordered] == ["d", "b", "a", "c"]
