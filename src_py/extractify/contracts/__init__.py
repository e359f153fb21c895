"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 조각/구역/결과 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/extractify/contracts/fragment_models.py
- src_py/extractify/contracts/zone_models.py
- src_py/extractify/contracts/result_models.py
"""

from .fragment_models import TextFragment, ZoneInput
from .result_models import ExtractionSource, PageExtractionResult, ZoneExtractionResult
from .zone_models import BoundingBox, ZoneKind, ZoneTemplate

__all__ = [
    "TextFragment",
    "ZoneInput",
    "BoundingBox",
    "ZoneKind",
    "ZoneTemplate",
    "ExtractionSource",
    "ZoneExtractionResult",
    "PageExtractionResult",
]
