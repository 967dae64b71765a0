"""Точка входа: генерация вариантов обоев из исходного фото и логотипа."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wallpaper.config import DEFAULT_JPEG_QUALITY, Settings
from wallpaper.controllers.generator_controller import WallpaperGenerator
from wallpaper.errors import WallpaperError
from wallpaper.log import configure_logging

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallpaper",
        description="Generate desktop wallpaper variants from a source image and a logo.",
    )
    parser.add_argument("-l", "--logo", required=True, type=Path, help="Logo image.")
    parser.add_argument("-s", "--source", required=True, type=Path, help="Source image.")
    parser.add_argument(
        "-q", "--jpeg-quality", type=int, default=DEFAULT_JPEG_QUALITY,
        help=f"JPEG quality, 1-95 (default: {DEFAULT_JPEG_QUALITY}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, запускает генерацию и возвращает код завершения."""
    args = build_parser().parse_args(argv)
    logger = configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
    )

    generator = WallpaperGenerator(settings=Settings(jpeg_quality=args.jpeg_quality))
    try:
        written = generator.run(args.logo, args.source)
    except WallpaperError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    logger.debug("Wrote %d files", len(written))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
