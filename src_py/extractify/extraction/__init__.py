"""
목적:
- 구역 추출(텍스트 레이어/OCR) 계층의 공개 심볼을 제공한다.

설명:
- 파싱 코어에 입력을 공급하는 상위 수집기다. 코어 자체는 I/O를 하지 않는다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/extractify/extraction/extractor.py
"""

from .extractor import ProgressCallback, ZoneExtractor
from .ocr import OcrEngine, TesseractOcrEngine
from .pdf_source import PageContent, PageSource, PdfPageSource
from .region import PageBox, filter_fragments_in_region, region_text, to_crop_box, to_page_box

__all__ = [
    "ZoneExtractor",
    "ProgressCallback",
    "OcrEngine",
    "TesseractOcrEngine",
    "PageContent",
    "PageSource",
    "PdfPageSource",
    "PageBox",
    "filter_fragments_in_region",
    "region_text",
    "to_crop_box",
    "to_page_box",
]
