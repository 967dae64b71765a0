"""Параметры генерации: базовое разрешение логотипа и настройки кодирования."""
from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


# Reference resolution at which the logo size and margins are authored.
BASE_IMAGE_HEIGHT = 2880.0
BASE_LOGO_HEIGHT = 300.0
BASE_LOGO_MARGIN_X = 100.0
BASE_LOGO_MARGIN_Y = 120.0

DEFAULT_JPEG_QUALITY = 90
DEFAULT_PNG_COMPRESS_LEVEL = 6


@dataclass
class Settings:
    """Настройки кодирования и масштабирования.

    Fields:
        jpeg_quality: Качество JPEG (1..95, как рекомендует Pillow).
        png_compress_level: Уровень zlib-сжатия PNG (0..9).
        resample: Фильтр ресэмплинга Pillow для исходника и логотипа.
    """
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    png_compress_level: int = DEFAULT_PNG_COMPRESS_LEVEL
    resample: Image.Resampling = Image.Resampling.LANCZOS

    def __post_init__(self) -> None:
        self.jpeg_quality = max(1, min(int(self.jpeg_quality), 95))
        self.png_compress_level = max(0, min(int(self.png_compress_level), 9))
