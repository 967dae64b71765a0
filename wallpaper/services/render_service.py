from __future__ import annotations

import io
from typing import Optional

from PIL import Image

from wallpaper.config import Settings
from wallpaper.errors import EncodeError
from wallpaper.models.image_model import ImageData
from wallpaper.models.layout import Layout
from wallpaper.models.size_spec import SizeSpec


class RenderService:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()

    # ---------- Отрисовка ----------
    def render(self, source: ImageData, logo: ImageData, spec: SizeSpec, layout: Layout) -> Image.Image:
        """
        Собирает холст одного варианта обоев:
        - исходник масштабируется по высоте холста и центрируется по горизонтали
          (лишняя ширина обрезается поровну с двух сторон);
        - логотип, если нужен, кладётся с отступом от правого нижнего угла.
        Входные изображения не мутируются.
        """
        width, height = spec.pixel_size
        canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))

        drawn_width = max(1, int(round(layout.drawn_width)))
        scaled = source.pil_image.resize((drawn_width, height), self.settings.resample)
        left = int(round(-layout.source_x))
        # Области за пределами исходника остаются прозрачными
        window = scaled.crop((left, 0, left + width, height))
        canvas.alpha_composite(window)

        if spec.include_logo:
            canvas = self._overlay_logo(canvas, logo, layout)
        return canvas

    def _overlay_logo(self, canvas: Image.Image, logo: ImageData, layout: Layout) -> Image.Image:
        logo_size = (
            max(1, int(round(layout.logo_width))),
            max(1, int(round(layout.logo_height))),
        )
        scaled_logo = logo.pil_image.resize(logo_size, self.settings.resample)
        # Отдельный слой: paste допускает отрицательные координаты, alpha_composite — нет
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        layer.paste(scaled_logo, (int(round(layout.logo_x)), int(round(layout.logo_top))))
        return Image.alpha_composite(canvas, layer)

    # ---------- Кодирование ----------
    def encode(self, canvas: Image.Image, extension: str) -> bytes:
        """
        Кодирует холст в байты по расширению файла ("png" или "jpg").
        PNG сохраняет альфа-канал, JPEG получает RGB.
        """
        buffer = io.BytesIO()
        try:
            if extension == "png":
                canvas.save(buffer, format="PNG", compress_level=self.settings.png_compress_level)
            elif extension == "jpg":
                canvas.convert("RGB").save(buffer, format="JPEG", quality=self.settings.jpeg_quality)
            else:
                raise EncodeError(f"Unsupported output format: {extension}")
        except (OSError, ValueError) as exc:
            raise EncodeError(f"Cannot generate a {extension.upper()} representation") from exc
        return buffer.getvalue()
