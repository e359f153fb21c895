"""
목적:
- 템플릿 JSON과 PDF 파일로 `ZoneExtractor`를 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일을 직접 읽지 않는다.
- 이 스크립트는 선택적 환경 파일에서 허용오차/OCR 설정을 읽어 설정 객체를 만든다.
- 결과는 JSON 한 줄로 표준 출력에 쓴다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/extractify/config/models.py
- src_py/extractify/extraction/extractor.py
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from extractify import (
    ConfigurationError,
    ExtractionConfig,
    TableLayoutConfig,
    TesseractOcrEngine,
    ZoneExtractor,
    ZoneTemplate,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extractify 구역 추출 드라이버")
    parser.add_argument("--pdf", type=Path, required=True, help="대상 PDF 파일 경로")
    parser.add_argument("--templates", type=Path, required=True, help="구역 템플릿 JSON 파일 경로")
    parser.add_argument("--page", type=int, default=1, help="대상 페이지 번호 (1부터)")
    parser.add_argument("--ocr", action="store_true", help="텍스트가 부족한 구역에 Tesseract OCR 사용")
    parser.add_argument("--env-file", default="", help="설정 환경 파일 경로 (선택)")
    parser.add_argument("--log-level", default="WARNING", help="로그 레벨 (기본: WARNING)")
    return parser.parse_args()


def load_env_file(path: Path) -> None:
    if not path.exists():
        raise RuntimeError(f"환경 파일이 존재하지 않습니다: {path}")

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        os.environ[key.strip()] = value.strip().strip('"').strip("'")


def build_config() -> ExtractionConfig:
    try:
        layout = TableLayoutConfig(
            row_tolerance=float(os.environ.get("EXTRACT_ROW_TOLERANCE", "15")),
            key_exclusion_tolerance=float(os.environ.get("EXTRACT_KEY_EXCLUSION_TOLERANCE", "8")),
            min_value_offset=float(os.environ.get("EXTRACT_MIN_VALUE_OFFSET", "20")),
            key_char_width=float(os.environ.get("EXTRACT_KEY_CHAR_WIDTH", "8")),
            same_line_tolerance=float(os.environ.get("EXTRACT_SAME_LINE_TOLERANCE", "3")),
        )
        return ExtractionConfig(
            layout=layout,
            min_text_length=int(os.environ.get("EXTRACT_MIN_TEXT_LENGTH", "5")),
            render_scale=float(os.environ.get("EXTRACT_RENDER_SCALE", "2.0")),
            ocr_languages=os.environ.get("EXTRACT_OCR_LANGUAGES", "eng+kor"),
        )
    except (ValidationError, ValueError) as exc:
        raise ConfigurationError(f"추출 설정이 유효하지 않습니다: {exc}") from exc


def load_templates(path: Path) -> list[ZoneTemplate]:
    if not path.exists():
        raise ConfigurationError(f"템플릿 파일이 존재하지 않습니다: {path}")
    try:
        return TypeAdapter(list[ZoneTemplate]).validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise ConfigurationError(f"템플릿 JSON 형식이 잘못되었습니다: {exc}") from exc


async def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.env_file:
        load_env_file(Path(args.env_file))

    config = build_config()
    templates = load_templates(args.templates)
    ocr_engine = TesseractOcrEngine(languages=config.ocr_languages) if args.ocr else None

    extractor = ZoneExtractor(config=config, ocr_engine=ocr_engine)
    result = await extractor.extract_pdf(
        args.pdf,
        templates,
        page_number=args.page,
        progress_callback=lambda message: print(f"[progress] {message}", file=sys.stderr),
    )

    print(result.model_dump_json(ensure_ascii=False))
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
