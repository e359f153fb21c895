"""
목적:
- 구역 추출 결과 인터페이스 모델을 정의한다.

설명:
- 구역별 결과는 템플릿 순서를 유지한다.
- 이름→텍스트 매핑 형태로도 조회할 수 있다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/extractify/extraction/extractor.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ExtractionSource = Literal["text_layer", "ocr"]


class ZoneExtractionResult(BaseModel):
    """구역 하나의 추출 결과 모델."""

    template_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    text: str = Field(default="")
    source: ExtractionSource = Field(default="text_layer")
    error: str | None = Field(default=None)


class PageExtractionResult(BaseModel):
    """페이지 단위 추출 결과 모델."""

    page_number: int = Field(ge=1)
    zones: list[ZoneExtractionResult] = Field(default_factory=list)

    def as_mapping(self) -> dict[str, str]:
        """구역 이름→결과 텍스트 매핑을 반환한다."""
        return {zone.name: zone.text for zone in self.zones}
