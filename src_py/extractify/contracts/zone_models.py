"""
목적:
- 추출 구역(템플릿) 인터페이스 모델을 정의한다.

설명:
- bbox는 페이지 크기 대비 0.0~1.0 비율 좌표(좌상단 원점)로 저장한다.
- 구역 유형(kind)은 템플릿 작성 시점에 결정되며,
  값이 없을 때만 이름 기반 정규식 분류를 사용한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/extractify/parsing/dispatcher.py
- src_py/extractify/extraction/region.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

ZoneKind = Literal["overview", "plain"]


class BoundingBox(BaseModel):
    """페이지 비율 좌표 bbox 모델."""

    x1: float = Field(ge=0.0, le=1.0)
    y1: float = Field(ge=0.0, le=1.0)
    x2: float = Field(ge=0.0, le=1.0)
    y2: float = Field(ge=0.0, le=1.0)

    @field_validator("x2")
    @classmethod
    def validate_x2(cls, value: float, info) -> float:
        x1 = info.data.get("x1", 0.0)
        if value < x1:
            raise ValueError("x2는 x1 이상이어야 합니다")
        return value

    @field_validator("y2")
    @classmethod
    def validate_y2(cls, value: float, info) -> float:
        y1 = info.data.get("y1", 0.0)
        if value < y1:
            raise ValueError("y2는 y1 이상이어야 합니다")
        return value


class ZoneTemplate(BaseModel):
    """사용자가 정의한 추출 구역 모델."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    bbox: BoundingBox
    kind: ZoneKind | None = Field(default=None)
