"""
목적:
- 좌표 기반 표 파싱 단계의 중간 타입을 정의한다.

설명:
- 키 위치, 행 경계, 행 값은 한 번의 파싱 호출 안에서만 살아 있는 임시 구조다.
- 행 경계(min_y/max_y)는 경계 계산 단계에서 한 번만 채워진다.

디자인 패턴:
- 데이터 클래스(Data Class).

참조:
- src_py/extractify/parsing/key_locator.py
- src_py/extractify/parsing/row_layout.py
"""

from __future__ import annotations

from dataclasses import dataclass

from extractify.contracts.fragment_models import TextFragment


@dataclass(frozen=True, slots=True)
class KeyLocation:
    """키 라벨로 판정된 조각과 그 기준선 좌표."""

    fragment_index: int
    fragment: TextFragment
    x: float
    y: float


@dataclass(slots=True)
class RowDescriptor:
    """키 하나가 소유하는 행 밴드 모델."""

    key: str
    y: float
    location: KeyLocation
    min_y: float = 0.0
    max_y: float = 0.0


@dataclass(frozen=True, slots=True)
class ExtractedValue:
    """행에 귀속된 값 조각 모델."""

    fragment_index: int
    text: str
    x: float
    y: float
