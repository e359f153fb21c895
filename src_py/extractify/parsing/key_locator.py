"""
목적:
- 조각 목록에서 필드 라벨(키)에 해당하는 조각을 찾는다.

설명:
- 매처 함수 목록을 순서대로 적용하고, 첫 번째로 성공한 매처의 첫 조각을 채택한다.
  1) 원문 부분 문자열 일치
  2) 공백 제거 후 부분 문자열 일치 (예: "기 준층 면적" ↔ "기준층면적")
  3) 다단어 키에 한해 첫 단어 일치
- 편집 거리 등 유사도 매칭은 하지 않는다.
- 좌표가 없거나 비정상인 조각은 키 후보가 될 수 없다.

디자인 패턴:
- 전략 체인(Ordered Strategy Chain).

참조:
- src_py/extractify/parsing/table_parser.py
"""

from __future__ import annotations

from typing import Callable, Sequence

from extractify.contracts.fragment_models import TextFragment
from extractify.parsing.layout_types import KeyLocation

KeyMatcher = Callable[[str, str], bool]


def matches_exact(text: str, key: str) -> bool:
    """조각 원문에 키가 그대로 포함되는지 확인한다."""
    return key in text


def matches_space_normalized(text: str, key: str) -> bool:
    """공백을 모두 제거한 뒤 키가 포함되는지 확인한다."""
    return strip_spaces(key) in strip_spaces(text)


def matches_first_keyword(text: str, key: str) -> bool:
    """다단어 키의 첫 단어가 조각에 포함되는지 확인한다."""
    words = key.split()
    if len(words) < 2:
        return False
    stripped = text.strip()
    return stripped == words[0] or words[0] in stripped


KEY_MATCHERS: tuple[KeyMatcher, ...] = (
    matches_exact,
    matches_space_normalized,
    matches_first_keyword,
)


def find_key_location(fragments: Sequence[TextFragment], key: str) -> KeyLocation | None:
    """키와 가장 잘 맞는 조각의 위치를 반환한다. 없으면 None."""
    if not key.strip():
        return None

    for matcher in KEY_MATCHERS:
        for index, fragment in enumerate(fragments):
            if not fragment.has_position:
                continue
            if matcher(fragment.text, key):
                return KeyLocation(
                    fragment_index=index,
                    fragment=fragment,
                    x=float(fragment.x),
                    y=float(fragment.y),
                )
    return None


def strip_spaces(value: str) -> str:
    return "".join(value.split())


def first_keyword(key: str) -> str:
    words = key.split()
    return words[0] if words else key


__all__ = [
    "KEY_MATCHERS",
    "KeyMatcher",
    "find_key_location",
    "first_keyword",
    "matches_exact",
    "matches_first_keyword",
    "matches_space_normalized",
    "strip_spaces",
]
