"""
목적:
- Extractify 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 행 경계 허용오차, 표준 키 카탈로그, 2단계 추출 제어 값을 모델로 관리한다.
- 두 파서(좌표 기반/키워드 슬라이스)는 같은 카탈로그 객체를 공유한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-extraction.py
- src_py/extractify/parsing/dispatcher.py
- src_py/extractify/extraction/extractor.py
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_SECTION_PATTERN = r"general|overview|정보"

DEFAULT_STANDARD_KEYS = (
    "주소",
    "교통",
    "연면적",
    "빌딩규모",
    "준공연도",
    "전용율",
    "기준층 면적",
    "천정고",
    "엘리베이터",
    "주차사항",
    "특이사항",
)


class TableLayoutConfig(BaseModel):
    """좌표 기반 표 파싱 허용오차 모델."""

    row_tolerance: float = Field(default=15.0, ge=0)
    key_exclusion_tolerance: float = Field(default=8.0, ge=0)
    min_value_offset: float = Field(default=20.0, ge=0)
    key_char_width: float = Field(default=8.0, ge=0)
    same_line_tolerance: float = Field(default=3.0, ge=0)

    @field_validator("key_exclusion_tolerance")
    @classmethod
    def validate_exclusion_tolerance(cls, value: float, info) -> float:
        row_tolerance = info.data.get("row_tolerance", 15.0)
        if value > row_tolerance:
            raise ValueError("key_exclusion_tolerance는 row_tolerance 이하이어야 합니다")
        return value

    @field_validator("same_line_tolerance")
    @classmethod
    def validate_same_line_tolerance(cls, value: float, info) -> float:
        exclusion = info.data.get("key_exclusion_tolerance", 8.0)
        if value > exclusion:
            raise ValueError("same_line_tolerance는 key_exclusion_tolerance 이하이어야 합니다")
        return value


class OverviewCatalogConfig(BaseModel):
    """개요 구역 식별 패턴과 표준 키 카탈로그 모델."""

    section_pattern: str = Field(default=DEFAULT_SECTION_PATTERN, min_length=1)
    standard_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_STANDARD_KEYS), min_length=1)

    @field_validator("section_pattern")
    @classmethod
    def validate_section_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"section_pattern 정규식이 유효하지 않습니다: {exc}") from exc
        return value

    @field_validator("standard_keys")
    @classmethod
    def validate_standard_keys(cls, value: list[str]) -> list[str]:
        keys = [" ".join(key.split()) for key in value]
        if any(not key for key in keys):
            raise ValueError("standard_keys에 빈 키가 포함되어 있습니다")
        if len(set(keys)) != len(keys):
            raise ValueError("standard_keys에 중복 키가 포함되어 있습니다")
        return keys

    def compile_section_pattern(self) -> re.Pattern[str]:
        """대소문자를 무시하는 구역 식별 정규식을 생성한다."""
        return re.compile(self.section_pattern, re.IGNORECASE)


class ExtractionConfig(BaseModel):
    """2단계(텍스트 레이어 → OCR) 구역 추출 설정 모델."""

    layout: TableLayoutConfig = Field(default_factory=TableLayoutConfig)
    catalog: OverviewCatalogConfig = Field(default_factory=OverviewCatalogConfig)
    min_text_length: int = Field(default=5, ge=0)
    render_scale: float = Field(default=2.0, gt=0)
    ocr_languages: str = Field(default="eng+kor", min_length=1)
    ocr_error_text: str = Field(default="OCR Error")
