import pytest
from pydantic import ValidationError

from extractify.config import DEFAULT_STANDARD_KEYS, ExtractionConfig, OverviewCatalogConfig, TableLayoutConfig


def test_defaults_match_layout_constants() -> None:
    layout = TableLayoutConfig()

    assert layout.row_tolerance == 15
    assert layout.key_exclusion_tolerance == 8
    assert layout.min_value_offset == 20
    assert layout.key_char_width == 8
    assert layout.same_line_tolerance == 3


def test_tolerances_must_nest() -> None:
    with pytest.raises(ValidationError, match="row_tolerance 이하"):
        TableLayoutConfig(row_tolerance=5, key_exclusion_tolerance=8)
    with pytest.raises(ValidationError, match="key_exclusion_tolerance 이하"):
        TableLayoutConfig(same_line_tolerance=10)


def test_catalog_defaults_to_canonical_keys() -> None:
    catalog = OverviewCatalogConfig()

    assert catalog.standard_keys == list(DEFAULT_STANDARD_KEYS)
    assert catalog.compile_section_pattern().search("PROPERTY OVERVIEW")


def test_catalog_normalizes_and_rejects_bad_keys() -> None:
    assert OverviewCatalogConfig(standard_keys=["기준층   면적"]).standard_keys == ["기준층 면적"]

    with pytest.raises(ValidationError, match="중복"):
        OverviewCatalogConfig(standard_keys=["주소", "주소 "])
    with pytest.raises(ValidationError, match="빈 키"):
        OverviewCatalogConfig(standard_keys=["주소", "  "])
    with pytest.raises(ValidationError, match="정규식"):
        OverviewCatalogConfig(section_pattern="(overview")


def test_extraction_config_defaults() -> None:
    config = ExtractionConfig()

    assert config.min_text_length == 5
    assert config.render_scale == 2.0
    assert config.ocr_languages == "eng+kor"
    assert config.ocr_error_text == "OCR Error"
