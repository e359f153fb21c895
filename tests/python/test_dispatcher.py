import pytest

from extractify.config import OverviewCatalogConfig
from extractify.contracts import TextFragment, ZoneInput
from extractify.parsing.dispatcher import (
    classify_zone,
    post_process_fragments,
    post_process_text,
    post_process_zone,
    resolve_zone_kind,
)

ADDRESS_FRAGMENTS = [
    TextFragment(text="주소", x=50, y=500),
    TextFragment(text="서울시 강남구", x=150, y=500),
    TextFragment(text="교통", x=50, y=470),
    TextFragment(text="지하철 2호선", x=150, y=470),
]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Property Overview", "overview"),
        ("GENERAL", "overview"),
        ("건물 정보", "overview"),
        ("Floor plan", "plain"),
        ("", "plain"),
    ],
)
def test_classify_zone_by_name(name: str, expected: str) -> None:
    assert classify_zone(name) == expected


def test_explicit_kind_overrides_name_classification() -> None:
    assert resolve_zone_kind("Floor plan", "overview") == "overview"
    assert resolve_zone_kind("Property Overview", "plain") == "plain"
    assert resolve_zone_kind("Property Overview") == "overview"


def test_overview_zone_with_positions_uses_row_parser() -> None:
    output = post_process_fragments("Overview", ADDRESS_FRAGMENTS)

    assert output == "주소: 서울시 강남구\n교통: 지하철 2호선"


def test_overview_zone_with_text_uses_keyword_slice() -> None:
    output = post_process_text("Overview", "주소서울시 강남구 교통지하철 2호선")

    assert output == "주소: 서울시 강남구\n교통: 지하철 2호선"


def test_plain_zone_concatenates_non_blank_fragments() -> None:
    fragments = [
        TextFragment(text="첫 줄", x=10, y=20),
        TextFragment(text="  ", x=20, y=20),
        TextFragment(text="둘째 줄", x=10, y=10),
    ]

    assert post_process_fragments("Floor plan", fragments) == "첫 줄 둘째 줄"


def test_plain_zone_text_is_only_cleaned() -> None:
    assert post_process_text("Floor plan", "주소   서울\n\n교통") == "주소 서울 교통"


def test_fragments_without_positions_fall_back_to_text_mode() -> None:
    zone_input = ZoneInput(fragments=[TextFragment(text="주소서울시"), TextFragment(text="교통 2호선")])

    assert post_process_zone("Overview", zone_input) == "주소: 서울시\n교통: 2호선"


def test_empty_input_returns_empty_string() -> None:
    assert post_process_zone("Overview", ZoneInput()) == ""
    assert post_process_zone("Overview", ZoneInput(fragments=[])) == ""
    assert post_process_text("Overview", "") == ""


def test_custom_catalog_is_shared_by_both_parsers() -> None:
    catalog = OverviewCatalogConfig(section_pattern="요약", standard_keys=["교통"])

    positional = post_process_fragments("건물 요약", ADDRESS_FRAGMENTS, catalog=catalog)
    text_only = post_process_text("건물 요약", "주소서울시 교통지하철 2호선", catalog=catalog)

    assert positional == "교통: 지하철 2호선"
    assert text_only == "교통: 지하철 2호선"
