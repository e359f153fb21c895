"""
목적:
- 구역 유형과 입력 형태에 따라 후처리 전략을 선택한다.

설명:
- 구역 유형은 템플릿의 `kind`를 우선 사용한다.
- `kind`가 없는 과거 템플릿은 이름을 대소문자 무시 정규식으로 분류한다.
- 개요(overview) 구역:
  - 좌표 조각이 있으면 행 기반 표 파서를 사용한다.
  - 평문만 있으면 키워드 슬라이스 파서를 사용한다.
  - 두 파서는 같은 표준 키 카탈로그를 쓴다.
- 일반(plain) 구역은 구조화 없이 이어 붙이거나(좌표) 정리만 한다(평문).

디자인 패턴:
- 전략 분기(Strategy Dispatch).

참조:
- src_py/extractify/parsing/table_parser.py
- src_py/extractify/parsing/keyword_slice.py
- src_py/extractify/config/models.py
"""

from __future__ import annotations

import logging
from typing import Sequence

from extractify.config.models import OverviewCatalogConfig, TableLayoutConfig
from extractify.contracts.fragment_models import TextFragment, ZoneInput
from extractify.contracts.zone_models import ZoneKind
from extractify.parsing.keyword_slice import clean_ocr_text, parse_by_keywords
from extractify.parsing.table_parser import parse_table_by_rows

logger = logging.getLogger(__name__)


def classify_zone(name: str, catalog: OverviewCatalogConfig | None = None) -> ZoneKind:
    """구역 이름으로 개요 구역 여부를 판정한다."""
    catalog = catalog or OverviewCatalogConfig()
    if catalog.compile_section_pattern().search(name or ""):
        return "overview"
    return "plain"


def resolve_zone_kind(
    name: str,
    kind: ZoneKind | None = None,
    catalog: OverviewCatalogConfig | None = None,
) -> ZoneKind:
    """명시된 구역 유형을 우선하고, 없으면 이름 분류로 대체한다."""
    if kind is not None:
        return kind
    return classify_zone(name, catalog)


def post_process_zone(
    name: str,
    zone_input: ZoneInput,
    *,
    kind: ZoneKind | None = None,
    layout: TableLayoutConfig | None = None,
    catalog: OverviewCatalogConfig | None = None,
) -> str:
    """구역 입력을 최종 결과 문자열로 변환한다."""
    catalog = catalog or OverviewCatalogConfig()
    zone_kind = resolve_zone_kind(name, kind, catalog)
    keys = catalog.standard_keys

    if zone_input.has_positions:
        fragments = zone_input.fragments or []
        logger.debug("구역 후처리: name=%s kind=%s mode=positional count=%d", name, zone_kind, len(fragments))
        if zone_kind == "overview":
            return parse_table_by_rows(fragments, keys, layout)
        return " ".join(fragment.text for fragment in fragments if fragment.text.strip())

    text = zone_input.flat_text()
    logger.debug("구역 후처리: name=%s kind=%s mode=text length=%d", name, zone_kind, len(text))
    if not text:
        return ""
    if zone_kind == "overview":
        return parse_by_keywords(text, keys)
    return clean_ocr_text(text)


def post_process_fragments(
    name: str,
    fragments: Sequence[TextFragment],
    *,
    kind: ZoneKind | None = None,
    layout: TableLayoutConfig | None = None,
    catalog: OverviewCatalogConfig | None = None,
) -> str:
    """좌표 조각 입력용 편의 함수."""
    return post_process_zone(
        name,
        ZoneInput(fragments=list(fragments)),
        kind=kind,
        layout=layout,
        catalog=catalog,
    )


def post_process_text(
    name: str,
    text: str,
    *,
    kind: ZoneKind | None = None,
    catalog: OverviewCatalogConfig | None = None,
) -> str:
    """평문 입력용 편의 함수."""
    return post_process_zone(name, ZoneInput(text=text), kind=kind, catalog=catalog)


__all__ = [
    "classify_zone",
    "post_process_fragments",
    "post_process_text",
    "post_process_zone",
    "resolve_zone_kind",
]
