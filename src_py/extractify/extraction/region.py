"""
목적:
- 구역 bbox 좌표 변환과 구역 내 조각 필터링 유틸을 제공한다.

설명:
- 템플릿 bbox(0~1 비율, 좌상단 원점)를 페이지 포인트 좌표로 변환한다.
- 텍스트 레이어 좌표는 좌하단 원점이므로 y 범위를 뒤집어 비교한다.
- OCR용 렌더링 이미지에서 잘라낼 픽셀 박스를 계산한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/extractify/extraction/extractor.py
- src_py/extractify/contracts/zone_models.py
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from extractify.contracts.fragment_models import TextFragment
from extractify.contracts.zone_models import BoundingBox


@dataclass(frozen=True, slots=True)
class PageBox:
    """페이지 포인트 좌표 bbox 모델(좌상단 원점)."""

    x1: float
    y1: float
    x2: float
    y2: float


def to_page_box(*, bbox: BoundingBox, page_width: float, page_height: float) -> PageBox:
    """비율 bbox를 페이지 포인트 좌표로 변환한다."""
    return PageBox(
        x1=bbox.x1 * page_width,
        y1=bbox.y1 * page_height,
        x2=bbox.x2 * page_width,
        y2=bbox.y2 * page_height,
    )


def filter_fragments_in_region(
    fragments: Sequence[TextFragment],
    *,
    box: PageBox,
    page_height: float,
) -> list[TextFragment]:
    """기준점이 bbox 안에 있는 조각을 위→아래, 왼쪽→오른쪽 순서로 반환한다."""
    bottom = page_height - box.y2
    top = page_height - box.y1

    selected = [
        fragment
        for fragment in fragments
        if fragment.has_position
        and box.x1 <= float(fragment.x) <= box.x2
        and bottom <= float(fragment.y) <= top
    ]
    selected.sort(key=lambda fragment: (-float(fragment.y), float(fragment.x)))
    return selected


def region_text(fragments: Sequence[TextFragment]) -> str:
    """구역 조각을 한 줄 원문으로 잇는다."""
    return " ".join(fragment.text for fragment in fragments).strip()


def to_crop_box(
    *,
    box: PageBox,
    scale: float,
    image_width: int,
    image_height: int,
) -> tuple[int, int, int, int] | None:
    """렌더링 이미지에서 잘라낼 픽셀 박스를 계산한다. 면적이 없으면 None."""
    if image_width <= 0 or image_height <= 0:
        return None

    left = max(0, int(math.floor(box.x1 * scale)))
    top = max(0, int(math.floor(box.y1 * scale)))
    right = min(image_width, int(math.ceil(box.x2 * scale)))
    bottom = min(image_height, int(math.ceil(box.y2 * scale)))

    if right - left <= 0 or bottom - top <= 0:
        return None
    return left, top, right, bottom


__all__ = [
    "PageBox",
    "filter_fragments_in_region",
    "region_text",
    "to_crop_box",
    "to_page_box",
]
