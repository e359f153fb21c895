"""
목적:
- 구역 이미지 OCR 인터페이스와 Tesseract 어댑터를 제공한다.

설명:
- OCR 엔진은 블랙박스다. 이미지 한 장을 받아 좌표 없는 평문 하나를 돌려준다.
- pytesseract는 선택 의존성이며 어댑터 생성 시점에 불러온다.
- 동기 호출은 워커 스레드에서 실행한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/extractify/extraction/extractor.py
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from PIL import Image

from extractify.exceptions import DependencyUnavailableError, OcrProcessingError


class OcrEngine(Protocol):
    """구역 이미지 OCR 엔진 인터페이스."""

    async def recognize(self, image: Image.Image) -> str: ...


class TesseractOcrEngine:
    """pytesseract를 OcrEngine으로 감싸는 어댑터."""

    def __init__(self, languages: str = "eng+kor", tesseract_config: str = "") -> None:
        try:
            import pytesseract
        except Exception as exc:  # noqa: BLE001
            raise DependencyUnavailableError(
                f"OCR을 위해 pytesseract가 필요합니다: {exc}"
            ) from exc

        self._pytesseract = pytesseract
        self._languages = languages
        self._tesseract_config = tesseract_config

    async def recognize(self, image: Image.Image) -> str:
        try:
            text = await asyncio.to_thread(
                self._pytesseract.image_to_string,
                image,
                lang=self._languages,
                config=self._tesseract_config,
            )
        except self._pytesseract.TesseractNotFoundError as exc:
            raise DependencyUnavailableError(f"tesseract 실행 파일을 찾을 수 없습니다: {exc}") from exc
        except (self._pytesseract.TesseractError, RuntimeError) as exc:
            raise OcrProcessingError(f"Tesseract OCR 실행 실패: {exc}") from exc
        return str(text or "").strip()


__all__ = ["OcrEngine", "TesseractOcrEngine"]
