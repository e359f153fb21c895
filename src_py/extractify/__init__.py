"""
목적:
- Extractify Python 패키지의 공개 진입점을 제공한다.

설명:
- 핵심은 구역 후처리 함수 `post_process_zone`과 2단계 추출기 `ZoneExtractor`다.
- 설정/계약 모델/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/extractify/parsing/dispatcher.py
- src_py/extractify/extraction/extractor.py
"""

from .config.models import ExtractionConfig, OverviewCatalogConfig, TableLayoutConfig
from .contracts.fragment_models import TextFragment, ZoneInput
from .contracts.result_models import PageExtractionResult, ZoneExtractionResult
from .contracts.zone_models import BoundingBox, ZoneKind, ZoneTemplate
from .exceptions import (
    ConfigurationError,
    DependencyUnavailableError,
    DocumentLoadError,
    ExtractifyError,
    OcrProcessingError,
)
from .extraction import OcrEngine, PdfPageSource, TesseractOcrEngine, ZoneExtractor
from .parsing import (
    classify_zone,
    parse_by_keywords,
    parse_keyword_fields,
    parse_table_by_rows,
    parse_table_fields,
    post_process_fragments,
    post_process_text,
    post_process_zone,
)
from .version import __version__

__all__ = [
    "__version__",
    "ZoneExtractor",
    "PdfPageSource",
    "OcrEngine",
    "TesseractOcrEngine",
    "ExtractionConfig",
    "TableLayoutConfig",
    "OverviewCatalogConfig",
    "TextFragment",
    "ZoneInput",
    "BoundingBox",
    "ZoneKind",
    "ZoneTemplate",
    "ZoneExtractionResult",
    "PageExtractionResult",
    "classify_zone",
    "parse_table_by_rows",
    "parse_table_fields",
    "parse_by_keywords",
    "parse_keyword_fields",
    "post_process_zone",
    "post_process_fragments",
    "post_process_text",
    "ExtractifyError",
    "ConfigurationError",
    "DependencyUnavailableError",
    "DocumentLoadError",
    "OcrProcessingError",
]
