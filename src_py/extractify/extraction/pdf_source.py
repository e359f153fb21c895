"""
목적:
- PDF 페이지에서 좌표가 있는 텍스트 조각과 렌더링 이미지를 제공한다.

설명:
- pypdfium2 텍스트 페이지의 사각형 단위 텍스트 런을 조각으로 변환한다.
- 조각 기준점은 사각형의 왼쪽/아래 좌표(PDF 사용자 공간, y는 위로 증가)다.
- 페이지 번호는 1부터 시작한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/extractify/extraction/extractor.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import pypdfium2 as pdfium
from PIL import Image

from extractify.contracts.fragment_models import TextFragment
from extractify.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PageContent:
    """페이지 한 장의 크기와 텍스트 조각 모델."""

    page_number: int
    width: float
    height: float
    fragments: list[TextFragment] = field(default_factory=list)


class PageSource(Protocol):
    """구역 추출기가 사용하는 페이지 공급자 인터페이스."""

    def load_page(self, page_number: int) -> PageContent: ...

    def render_page(self, page_number: int, scale: float) -> Image.Image: ...


class PdfPageSource:
    """pypdfium2 기반 PDF 페이지 공급자."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        if not self._path.exists():
            raise DocumentLoadError(f"PDF 파일이 존재하지 않습니다: {self._path}")
        try:
            self._pdf = pdfium.PdfDocument(str(self._path))
        except pdfium.PdfiumError as exc:
            raise DocumentLoadError(f"PDF 문서를 열 수 없습니다: {self._path}: {exc}") from exc

    def __enter__(self) -> PdfPageSource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def page_count(self) -> int:
        return len(self._pdf)

    def load_page(self, page_number: int) -> PageContent:
        """페이지 크기와 텍스트 조각 목록을 읽는다."""
        page = self._get_page(page_number)
        text_page = None
        try:
            width, height = page.get_size()
            text_page = page.get_textpage()
            fragments = read_text_runs(text_page)
        finally:
            if text_page is not None:
                text_page.close()
            page.close()

        logger.debug("페이지 텍스트 조각 로드: page=%d count=%d", page_number, len(fragments))
        return PageContent(
            page_number=page_number,
            width=float(width),
            height=float(height),
            fragments=fragments,
        )

    def render_page(self, page_number: int, scale: float) -> Image.Image:
        """페이지를 지정 배율로 렌더링한 PIL 이미지를 반환한다."""
        page = self._get_page(page_number)
        try:
            return page.render(scale=scale).to_pil()
        finally:
            page.close()

    def close(self) -> None:
        self._pdf.close()

    def _get_page(self, page_number: int):
        if page_number < 1 or page_number > len(self._pdf):
            raise DocumentLoadError(
                f"페이지 번호가 범위를 벗어났습니다: page={page_number}, total={len(self._pdf)}"
            )
        return self._pdf[page_number - 1]


def read_text_runs(text_page) -> list[TextFragment]:
    """텍스트 페이지의 사각형 런을 조각 목록으로 변환한다."""
    fragments: list[TextFragment] = []
    for index in range(text_page.count_rects()):
        left, bottom, right, top = text_page.get_rect(index)
        text = text_page.get_text_bounded(left=left, bottom=bottom, right=right, top=top)
        if not text or not text.strip():
            continue
        fragments.append(TextFragment(text=text.strip(), x=float(left), y=float(bottom)))
    return fragments


__all__ = ["PageContent", "PageSource", "PdfPageSource", "read_text_runs"]
