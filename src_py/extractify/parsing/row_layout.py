"""
목적:
- 키 행의 세로 경계 계산, 행 값 수집, 읽기 순서 정렬을 제공한다.

설명:
- 행 경계는 인접 행과의 중간점을 쓰되, 키 y에서 row_tolerance 이상 벗어나지 않는다.
- 행 값은 밴드 안에 있고 키 오른쪽(키 추정 폭 + 최소 간격 이후)에 있는 조각이다.
- 키 자신과 키 줄 근처의 첫 단어 반복(에코)은 값에서 제외한다.
- 같은 줄(y 차이 ≤ same_line_tolerance)은 왼쪽→오른쪽, 다른 줄은 위→아래로 정렬한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/extractify/parsing/table_parser.py
- src_py/extractify/config/models.py
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from extractify.config.models import TableLayoutConfig
from extractify.contracts.fragment_models import TextFragment
from extractify.parsing.key_locator import first_keyword, strip_spaces
from extractify.parsing.layout_types import ExtractedValue, KeyLocation, RowDescriptor


def calculate_row_boundaries(rows: list[RowDescriptor], row_tolerance: float = 15.0) -> None:
    """y 내림차순으로 정렬된 행 목록의 min_y/max_y를 제자리에서 채운다."""
    for index, row in enumerate(rows):
        if index > 0:
            midpoint = (row.y + rows[index - 1].y) / 2
            row.max_y = min(midpoint, row.y + row_tolerance)
        else:
            row.max_y = row.y + row_tolerance

        if index < len(rows) - 1:
            midpoint = (row.y + rows[index + 1].y) / 2
            row.min_y = max(midpoint, row.y - row_tolerance)
        else:
            row.min_y = row.y - row_tolerance


def estimate_key_width(key: str, char_width: float = 8.0) -> float:
    """키 라벨의 렌더링 폭을 글자 수 × 고정 폭으로 근사한다."""
    return len(strip_spaces(key)) * char_width


def extract_row_values(
    fragments: Sequence[TextFragment],
    row: RowDescriptor,
    key_location: KeyLocation,
    layout: TableLayoutConfig | None = None,
) -> list[ExtractedValue]:
    """행 밴드 안, 키 오른쪽에 있는 값 조각을 수집한다."""
    layout = layout or TableLayoutConfig()
    value_start_x = (
        key_location.x
        + estimate_key_width(row.key, layout.key_char_width)
        + layout.min_value_offset
    )
    key_word = first_keyword(row.key)

    values: list[ExtractedValue] = []
    for index, fragment in enumerate(fragments):
        if index == key_location.fragment_index:
            continue
        if not fragment.has_position:
            continue

        x = float(fragment.x)
        y = float(fragment.y)
        is_key_echo = key_word in fragment.text.strip()
        if is_key_echo and abs(y - row.y) <= layout.key_exclusion_tolerance:
            continue

        if row.min_y <= y <= row.max_y and x > value_start_x:
            values.append(ExtractedValue(fragment_index=index, text=fragment.text, x=x, y=y))
    return values


def sort_values_in_reading_order(
    values: Sequence[ExtractedValue],
    same_line_tolerance: float = 3.0,
) -> list[ExtractedValue]:
    """값 조각을 위→아래, 같은 줄에서는 왼쪽→오른쪽 순서로 정렬한다."""

    def compare(left: ExtractedValue, right: ExtractedValue) -> float:
        if abs(left.y - right.y) > same_line_tolerance:
            return right.y - left.y
        return left.x - right.x

    return sorted(values, key=cmp_to_key(compare))


__all__ = [
    "calculate_row_boundaries",
    "estimate_key_width",
    "extract_row_values",
    "sort_values_in_reading_order",
]
