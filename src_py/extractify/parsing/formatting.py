"""
목적:
- 두 파서가 공유하는 `키: 값` 출력 형식을 제공한다.
"""

from __future__ import annotations

from typing import Mapping, Sequence


def normalize_value(value: str) -> str:
    """값 내부의 연속 공백을 한 칸으로 줄이고 양끝을 정리한다."""
    return " ".join(value.split())


def format_fields(fields: Mapping[str, str], keys: Sequence[str]) -> str:
    """카탈로그 순서대로 `키: 값` 줄을 만든다. 빈 값은 생략한다."""
    lines: list[str] = []
    for key in keys:
        value = normalize_value(fields.get(key, ""))
        if value:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)


__all__ = ["format_fields", "normalize_value"]
