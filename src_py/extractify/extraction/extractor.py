"""
목적:
- 페이지 한 장의 모든 구역을 2단계로 추출하는 `ZoneExtractor`를 제공한다.

설명:
- 1단계: 텍스트 레이어 조각을 구역별로 모아 좌표 기반으로 후처리한다.
  원문이 `min_text_length`보다 짧은 구역은 OCR 대기열에 넣는다.
- 2단계: 대기열 구역을 순차적으로 렌더링/크롭해 OCR을 실행하고,
  평문 기반으로 후처리한다. OCR 실패는 해당 구역 결과에만 기록한다.
- 진행 상황은 선택적 콜백으로 알린다.
- 템플릿 id는 페이지 안에서 유일해야 한다.

디자인 패턴:
- 서비스 레이어(Service Layer) + 파이프라인(Pipeline).

참조:
- src_py/extractify/extraction/pdf_source.py
- src_py/extractify/extraction/region.py
- src_py/extractify/extraction/ocr.py
- src_py/extractify/parsing/dispatcher.py
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Sequence

from PIL import Image

from extractify.config.models import ExtractionConfig
from extractify.contracts.fragment_models import ZoneInput
from extractify.contracts.result_models import PageExtractionResult, ZoneExtractionResult
from extractify.contracts.zone_models import ZoneTemplate
from extractify.exceptions import ConfigurationError
from extractify.extraction.ocr import OcrEngine
from extractify.extraction.pdf_source import PageContent, PageSource, PdfPageSource
from extractify.extraction.region import (
    filter_fragments_in_region,
    region_text,
    to_crop_box,
    to_page_box,
)
from extractify.parsing.dispatcher import post_process_zone

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class ZoneExtractor:
    """텍스트 레이어 우선, OCR 보조 방식의 구역 추출기."""

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        ocr_engine: OcrEngine | None = None,
    ) -> None:
        self._config = config or ExtractionConfig()
        self._ocr_engine = ocr_engine

    async def extract_pdf(
        self,
        path: str | Path,
        templates: Sequence[ZoneTemplate],
        page_number: int = 1,
        progress_callback: ProgressCallback | None = None,
    ) -> PageExtractionResult:
        """PDF 파일 한 페이지에서 모든 구역을 추출한다."""
        _notify(progress_callback, "PDF 로딩 중...")
        source = await asyncio.to_thread(PdfPageSource, path)
        try:
            return await self.extract_page(
                source,
                templates,
                page_number=page_number,
                progress_callback=progress_callback,
            )
        finally:
            source.close()

    async def extract_page(
        self,
        source: PageSource,
        templates: Sequence[ZoneTemplate],
        page_number: int = 1,
        progress_callback: ProgressCallback | None = None,
    ) -> PageExtractionResult:
        """페이지 공급자에서 모든 구역을 추출한다."""
        if not templates:
            return PageExtractionResult(page_number=page_number)

        _ensure_unique_template_ids(templates)

        _notify(progress_callback, "1/2단계: 텍스트 추출 중...")
        page = await asyncio.to_thread(source.load_page, page_number)
        results, ocr_queue = await asyncio.to_thread(self._run_text_layer_pass, page, templates)

        if ocr_queue:
            await self._run_ocr_pass(source, page, ocr_queue, results, progress_callback)

        return PageExtractionResult(
            page_number=page_number,
            zones=[results[template.id] for template in templates],
        )

    def _run_text_layer_pass(
        self,
        page: PageContent,
        templates: Sequence[ZoneTemplate],
    ) -> tuple[dict[str, ZoneExtractionResult], list[ZoneTemplate]]:
        results: dict[str, ZoneExtractionResult] = {}
        ocr_queue: list[ZoneTemplate] = []
        for template in templates:
            result, needs_ocr = self._extract_from_text_layer(page, template)
            results[template.id] = result
            if needs_ocr:
                ocr_queue.append(template)
        return results, ocr_queue

    def _extract_from_text_layer(
        self,
        page: PageContent,
        template: ZoneTemplate,
    ) -> tuple[ZoneExtractionResult, bool]:
        box = to_page_box(bbox=template.bbox, page_width=page.width, page_height=page.height)
        fragments = filter_fragments_in_region(page.fragments, box=box, page_height=page.height)
        raw_text = region_text(fragments)

        text = post_process_zone(
            template.name,
            ZoneInput(fragments=fragments),
            kind=template.kind,
            layout=self._config.layout,
            catalog=self._config.catalog,
        )
        result = ZoneExtractionResult(
            template_id=template.id,
            name=template.name,
            text=text,
            source="text_layer",
        )
        return result, len(raw_text) < self._config.min_text_length

    async def _run_ocr_pass(
        self,
        source: PageSource,
        page: PageContent,
        queue: list[ZoneTemplate],
        results: dict[str, ZoneExtractionResult],
        progress_callback: ProgressCallback | None,
    ) -> None:
        if self._ocr_engine is None:
            logger.warning(
                "OCR 엔진이 없어 텍스트가 부족한 구역을 그대로 둡니다: %s",
                ", ".join(template.name for template in queue),
            )
            return

        scale = self._config.render_scale
        rendered = await asyncio.to_thread(source.render_page, page.page_number, scale)
        try:
            for index, template in enumerate(queue, start=1):
                _notify(
                    progress_callback,
                    f'2/2단계: "{template.name}" OCR 실행 중 ({index}/{len(queue)})...',
                )
                results[template.id] = await self._extract_with_ocr(rendered, page, template)
        finally:
            rendered.close()

    async def _extract_with_ocr(
        self,
        rendered: Image.Image,
        page: PageContent,
        template: ZoneTemplate,
    ) -> ZoneExtractionResult:
        box = to_page_box(bbox=template.bbox, page_width=page.width, page_height=page.height)
        image_width, image_height = rendered.size
        crop_box = to_crop_box(
            box=box,
            scale=self._config.render_scale,
            image_width=image_width,
            image_height=image_height,
        )
        if crop_box is None:
            return ZoneExtractionResult(template_id=template.id, name=template.name, source="ocr")

        cropped = rendered.crop(crop_box)
        try:
            ocr_text = await self._ocr_engine.recognize(cropped)
        except Exception as exc:  # noqa: BLE001
            logger.exception("구역 OCR 실패: name=%s", template.name)
            return ZoneExtractionResult(
                template_id=template.id,
                name=template.name,
                text=self._config.ocr_error_text,
                source="ocr",
                error=str(exc),
            )
        finally:
            cropped.close()

        text = post_process_zone(
            template.name,
            ZoneInput(text=ocr_text),
            kind=template.kind,
            layout=self._config.layout,
            catalog=self._config.catalog,
        )
        return ZoneExtractionResult(template_id=template.id, name=template.name, text=text, source="ocr")


def _ensure_unique_template_ids(templates: Sequence[ZoneTemplate]) -> None:
    seen: set[str] = set()
    duplicated: list[str] = []
    for template in templates:
        if template.id in seen and template.id not in duplicated:
            duplicated.append(template.id)
        seen.add(template.id)
    if duplicated:
        raise ConfigurationError(f"템플릿 id가 중복되었습니다: {', '.join(duplicated)}")


def _notify(progress_callback: ProgressCallback | None, message: str) -> None:
    logger.info(message)
    if progress_callback is not None:
        progress_callback(message)


__all__ = ["ProgressCallback", "ZoneExtractor"]
