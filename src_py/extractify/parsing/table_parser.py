"""
목적:
- 좌표가 있는 텍스트 조각에서 행 기반으로 키-값을 복원한다.

설명:
- 1) 카탈로그 키를 모두 찾는다. 하나도 없으면 전체 조각을 공백으로 이어 반환한다.
- 2) 찾은 키를 y 내림차순(페이지 위쪽 우선)으로 정렬한다.
- 3) 행 경계를 계산한다.
- 4) 행마다 값 조각을 모아 읽기 순서로 정렬해 한 칸 공백으로 잇는다.
  위쪽 행이 먼저 가져간 조각은 아래 행에 다시 귀속하지 않는다.
- 5) 카탈로그 순서대로 `키: 값` 줄을 만든다.

디자인 패턴:
- 파이프라인(Pipeline).

참조:
- src_py/extractify/parsing/key_locator.py
- src_py/extractify/parsing/row_layout.py
- src_py/extractify/parsing/formatting.py
"""

from __future__ import annotations

from typing import Sequence

from extractify.config.models import TableLayoutConfig
from extractify.contracts.fragment_models import TextFragment
from extractify.parsing.formatting import format_fields, normalize_value
from extractify.parsing.key_locator import find_key_location
from extractify.parsing.layout_types import RowDescriptor
from extractify.parsing.row_layout import (
    calculate_row_boundaries,
    extract_row_values,
    sort_values_in_reading_order,
)


def build_row_descriptors(
    fragments: Sequence[TextFragment],
    keys: Sequence[str],
    layout: TableLayoutConfig | None = None,
) -> list[RowDescriptor]:
    """찾은 키마다 경계가 계산된 행 목록을 y 내림차순으로 반환한다."""
    layout = layout or TableLayoutConfig()

    rows: list[RowDescriptor] = []
    for key in keys:
        location = find_key_location(fragments, key)
        if location is None:
            continue
        rows.append(RowDescriptor(key=key, y=location.y, location=location))

    rows.sort(key=lambda row: row.y, reverse=True)
    calculate_row_boundaries(rows, layout.row_tolerance)
    return rows


def collect_row_values(
    fragments: Sequence[TextFragment],
    rows: Sequence[RowDescriptor],
    layout: TableLayoutConfig | None = None,
) -> dict[str, str]:
    """행 목록에서 키별 값 텍스트를 모은다. 빈 값은 포함하지 않는다."""
    layout = layout or TableLayoutConfig()

    claimed: set[int] = set()
    results: dict[str, str] = {}
    for row in rows:
        raw_values = [
            value
            for value in extract_row_values(fragments, row, row.location, layout)
            if value.fragment_index not in claimed
        ]
        claimed.update(value.fragment_index for value in raw_values)

        ordered = sort_values_in_reading_order(raw_values, layout.same_line_tolerance)
        value_text = normalize_value(" ".join(value.text for value in ordered))
        if value_text:
            results[row.key] = value_text
    return results


def parse_table_fields(
    fragments: Sequence[TextFragment],
    keys: Sequence[str],
    layout: TableLayoutConfig | None = None,
) -> dict[str, str]:
    """키별 값 매핑을 반환한다. 키를 하나도 찾지 못하면 빈 dict."""
    if not fragments:
        return {}
    rows = build_row_descriptors(fragments, keys, layout)
    return collect_row_values(fragments, rows, layout)


def parse_table_by_rows(
    fragments: Sequence[TextFragment],
    keys: Sequence[str],
    layout: TableLayoutConfig | None = None,
) -> str:
    """좌표 조각을 `키: 값` 줄 문자열로 변환한다."""
    if not fragments:
        return ""

    rows = build_row_descriptors(fragments, keys, layout)
    if not rows:
        return " ".join(fragment.text for fragment in fragments)

    return format_fields(collect_row_values(fragments, rows, layout), keys)


__all__ = [
    "build_row_descriptors",
    "collect_row_values",
    "parse_table_by_rows",
    "parse_table_fields",
]
