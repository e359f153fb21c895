from extractify.parsing.keyword_slice import (
    clean_ocr_text,
    locate_keyword_offsets,
    parse_by_keywords,
    parse_keyword_fields,
)


def test_slices_text_between_keywords() -> None:
    output = parse_by_keywords("주소서울시 강남구 교통지하철 2호선", ["주소", "교통"])

    assert output == "주소: 서울시 강남구\n교통: 지하철 2호선"


def test_output_follows_catalog_order() -> None:
    output = parse_by_keywords("주소서울시 강남구 교통지하철 2호선", ["교통", "주소"])

    assert output == "교통: 지하철 2호선\n주소: 서울시 강남구"


def test_strips_leading_colon() -> None:
    output = parse_by_keywords("주소: 서울시 강남구   교통 : 지하철\n2호선", ["주소", "교통"])

    assert output == "주소: 서울시 강남구\n교통: 지하철 2호선"


def test_no_keyword_returns_cleaned_text() -> None:
    assert parse_by_keywords("Some unrelated text", ["주소"]) == "Some unrelated text"
    assert parse_by_keywords("Some   unrelated \n\n text", ["주소"]) == "Some unrelated text"


def test_empty_text_returns_empty_string() -> None:
    assert parse_by_keywords("", ["주소"]) == ""
    assert parse_keyword_fields("", ["주소"]) == {}


def test_spaced_out_header_is_removed() -> None:
    assert clean_ocr_text("P R O P E R T Y  O V E R V I E W 주소 서울") == "주소 서울"
    assert clean_ocr_text("A B C 주소") == "A B C 주소"


def test_only_first_occurrence_is_used() -> None:
    fields = parse_keyword_fields("주소 서울 주소 부산 교통 2호선", ["주소", "교통"])

    assert fields == {"주소": "서울 주소 부산", "교통": "2호선"}


def test_shorter_key_inside_longer_match_is_dropped() -> None:
    offsets = locate_keyword_offsets("주차사항 20대", ["주차", "주차사항"])

    assert offsets == [(0, "주차사항")]
    assert parse_by_keywords("주차사항 20대", ["주차", "주차사항"]) == "주차사항: 20대"


def test_empty_values_are_omitted() -> None:
    assert parse_by_keywords("주소 교통 2호선", ["주소", "교통"]) == "교통: 2호선"


def test_spaced_out_header_glued_to_korean_text_is_removed() -> None:
    assert clean_ocr_text("O V E R V I E W주소 서울") == "주소 서울"
    assert parse_by_keywords("O V E R V I E W주소 서울", ["주소"]) == "주소: 서울"
