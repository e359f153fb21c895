"""
목적:
- Extractify Python 계층의 예외 타입을 표준화한다.

설명:
- 파싱 코어는 예외를 던지지 않는다. 키 미검출/빈 입력은 정상 흐름이다.
- 설정, 문서 로딩, OCR 의존성 오류만 명시적으로 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/extractify/extraction/pdf_source.py
- src_py/extractify/extraction/extractor.py
"""


class ExtractifyError(Exception):
    """Extractify 공통 베이스 예외."""


class ConfigurationError(ExtractifyError):
    """설정값 또는 템플릿 입력이 유효하지 않을 때 발생한다."""


class DependencyUnavailableError(ExtractifyError):
    """pytesseract/pdfium 등 필수 의존성을 사용할 수 없을 때 발생한다."""


class DocumentLoadError(ExtractifyError):
    """PDF 문서를 열 수 없거나 페이지 번호가 범위를 벗어날 때 발생한다."""


class OcrProcessingError(ExtractifyError):
    """OCR 엔진 실행 중 오류가 발생할 때 사용한다."""
