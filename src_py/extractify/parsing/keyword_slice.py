"""
목적:
- 좌표가 없는 평문(OCR 결과 등)에서 키워드 위치 기준으로 키-값을 복원한다.

설명:
- 전처리: 한 글자+공백이 6개 이상 이어진 구간(예: "P R O P E R T Y")을 지우고,
  2개 이상 연속된 공백을 한 칸으로 줄인 뒤 양끝을 정리한다.
- 키마다 첫 출현 위치만 사용한다. 더 긴 키의 일치 구간 안에 겹치는
  짧은 키는 버린다.
- 다음 키 위치(없으면 문자열 끝)까지를 값 구간으로 자르고,
  키 문자열과 선행 콜론 하나를 제거한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/extractify/parsing/formatting.py
- src_py/extractify/parsing/dispatcher.py
"""

from __future__ import annotations

import re
from typing import Sequence

from extractify.parsing.formatting import format_fields, normalize_value

_SPACED_LETTERS_PATTERN = re.compile(r"(?<![A-Za-z])(?:[A-Za-z]\s){5,}[A-Za-z](?![A-Za-z])")
_MULTI_SPACE_PATTERN = re.compile(r"\s{2,}")
_LEADING_COLONS = (":", "：")


def clean_ocr_text(text: str) -> str:
    """OCR 평문의 자간 분리 머리글과 중복 공백을 정리한다."""
    cleaned = _SPACED_LETTERS_PATTERN.sub("", text)
    cleaned = _MULTI_SPACE_PATTERN.sub(" ", cleaned)
    return cleaned.strip()


def locate_keyword_offsets(text: str, keys: Sequence[str]) -> list[tuple[int, str]]:
    """키별 첫 출현 위치를 (offset, key) 목록으로 텍스트 순서대로 반환한다."""
    found: list[tuple[int, str]] = []
    for key in keys:
        if not key or any(key == existing for _, existing in found):
            continue
        offset = text.find(key)
        if offset >= 0:
            found.append((offset, key))

    found.sort(key=lambda item: (item[0], -len(item[1])))

    accepted: list[tuple[int, str]] = []
    covered_until = -1
    for offset, key in found:
        if offset < covered_until:
            continue
        accepted.append((offset, key))
        covered_until = offset + len(key)
    return accepted


def parse_keyword_fields(text: str, keys: Sequence[str]) -> dict[str, str]:
    """키별 값 매핑을 반환한다. 키를 하나도 찾지 못하면 빈 dict."""
    cleaned = clean_ocr_text(text or "")
    return _slice_fields(cleaned, locate_keyword_offsets(cleaned, keys))


def parse_by_keywords(text: str, keys: Sequence[str]) -> str:
    """평문을 `키: 값` 줄 문자열로 변환한다."""
    if not text:
        return ""

    cleaned = clean_ocr_text(text)
    offsets = locate_keyword_offsets(cleaned, keys)
    if not offsets:
        return cleaned

    return format_fields(_slice_fields(cleaned, offsets), keys)


def _slice_fields(text: str, offsets: list[tuple[int, str]]) -> dict[str, str]:
    results: dict[str, str] = {}
    for index, (offset, key) in enumerate(offsets):
        end = offsets[index + 1][0] if index + 1 < len(offsets) else len(text)
        span = text[offset + len(key):end].strip()
        if span.startswith(_LEADING_COLONS):
            span = span[1:].strip()

        value = normalize_value(span)
        if value:
            results[key] = value
    return results


__all__ = [
    "clean_ocr_text",
    "locate_keyword_offsets",
    "parse_by_keywords",
    "parse_keyword_fields",
]
