"""
목적:
- 키-값 복원 코어(파싱 계층)의 공개 심볼을 제공한다.

설명:
- 모든 함수는 입력만으로 결과가 결정되는 순수 함수이며 전역 상태를 갖지 않는다.
  서로 다른 구역에 대해 동시에 호출해도 안전하다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/extractify/parsing/dispatcher.py
- src_py/extractify/parsing/table_parser.py
- src_py/extractify/parsing/keyword_slice.py
"""

from .dispatcher import (
    classify_zone,
    post_process_fragments,
    post_process_text,
    post_process_zone,
    resolve_zone_kind,
)
from .formatting import format_fields, normalize_value
from .key_locator import KEY_MATCHERS, find_key_location
from .keyword_slice import clean_ocr_text, locate_keyword_offsets, parse_by_keywords, parse_keyword_fields
from .layout_types import ExtractedValue, KeyLocation, RowDescriptor
from .row_layout import (
    calculate_row_boundaries,
    estimate_key_width,
    extract_row_values,
    sort_values_in_reading_order,
)
from .table_parser import (
    build_row_descriptors,
    collect_row_values,
    parse_table_by_rows,
    parse_table_fields,
)

__all__ = [
    "KEY_MATCHERS",
    "KeyLocation",
    "RowDescriptor",
    "ExtractedValue",
    "find_key_location",
    "calculate_row_boundaries",
    "estimate_key_width",
    "extract_row_values",
    "sort_values_in_reading_order",
    "build_row_descriptors",
    "collect_row_values",
    "parse_table_by_rows",
    "parse_table_fields",
    "clean_ocr_text",
    "locate_keyword_offsets",
    "parse_by_keywords",
    "parse_keyword_fields",
    "format_fields",
    "normalize_value",
    "classify_zone",
    "resolve_zone_kind",
    "post_process_zone",
    "post_process_fragments",
    "post_process_text",
]
