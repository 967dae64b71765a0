"""Расчёт геометрии: масштаб исходника и логотипа относительно базового разрешения.

Логотип и отступы масштабируются только по высоте цели (BASE_IMAGE_HEIGHT),
в том числе для ultra-wide и 4:3 — ширина цели в формуле не участвует.
"""
from __future__ import annotations

from wallpaper.config import (
    BASE_IMAGE_HEIGHT,
    BASE_LOGO_HEIGHT,
    BASE_LOGO_MARGIN_X,
    BASE_LOGO_MARGIN_Y,
)
from wallpaper.models.image_model import ImageData
from wallpaper.models.layout import Layout
from wallpaper.models.size_spec import SizeSpec
from wallpaper.services.image_service import ImageService


def compute_layout(source: ImageData, logo: ImageData, spec: SizeSpec) -> Layout:
    """Считает размеры и позиции для одного целевого размера.

    Raises:
        InvalidImageDimensions: если у исходника или логотипа нулевой размер.
    """
    ImageService.validate_dimensions(source.width, source.height, source.path.name)
    ImageService.validate_dimensions(logo.width, logo.height, logo.path.name)

    logo_height = BASE_LOGO_HEIGHT * (spec.height / BASE_IMAGE_HEIGHT)
    logo_width = logo_height * logo.aspect_ratio
    logo_margin_x = (logo_height * BASE_LOGO_MARGIN_X) / BASE_LOGO_HEIGHT
    logo_margin_y = (logo_height * BASE_LOGO_MARGIN_Y) / BASE_LOGO_HEIGHT

    drawn_width = spec.height * source.aspect_ratio

    return Layout(
        canvas_width=spec.width,
        canvas_height=spec.height,
        drawn_width=drawn_width,
        source_x=-((drawn_width - spec.width) / 2),
        logo_width=logo_width,
        logo_height=logo_height,
        logo_margin_x=logo_margin_x,
        logo_margin_y=logo_margin_y,
        logo_x=spec.width - logo_width - logo_margin_x,
        logo_y=logo_margin_y,
    )
