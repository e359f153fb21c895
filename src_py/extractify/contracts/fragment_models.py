"""
목적:
- 구역 추출 입력(텍스트 조각/구역 입력) 인터페이스 모델을 정의한다.

설명:
- 텍스트 조각은 문자열과 선택적 기준선 좌표(x, y, y는 위로 증가)를 가진다.
- 좌표가 없거나 비정상(NaN/무한대/음수)인 조각은 모든 포함 판정에서 탈락한다.
- 구역 입력은 좌표 조각 목록 또는 평문 문자열 중 하나를 담는다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/extractify/parsing/table_parser.py
- src_py/extractify/parsing/dispatcher.py
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class TextFragment(BaseModel):
    """텍스트 레이어/OCR이 만든 단일 텍스트 조각 모델."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="")
    x: float | None = Field(default=None)
    y: float | None = Field(default=None)

    @property
    def has_position(self) -> bool:
        """포함 판정에 사용할 수 있는 좌표인지 확인한다."""
        if self.x is None or self.y is None:
            return False
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            return False
        return self.x >= 0 and self.y >= 0


class ZoneInput(BaseModel):
    """구역 하나의 추출 입력 모델."""

    fragments: list[TextFragment] | None = Field(default=None)
    text: str | None = Field(default=None)

    @property
    def has_positions(self) -> bool:
        """좌표 기반 파서를 사용할 수 있는 입력인지 확인한다."""
        return bool(self.fragments) and any(fragment.has_position for fragment in self.fragments or [])

    def flat_text(self) -> str:
        """좌표 없이 사용할 평문을 반환한다."""
        if self.text is not None:
            return self.text
        return " ".join(fragment.text for fragment in self.fragments or [])
