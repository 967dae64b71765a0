"""Контроллер генерации: оркестрация сервисов для всех целевых размеров.

SOLID:
- SRP: класс ведёт конвейер и журнал прогресса, не зная деталей Pillow.
- DIP: работает с сервисами как с ролями; конкретные реализации инкапсулированы.
Clean Code:
- Размеры обрабатываются строго по очереди; первая же ошибка прерывает запуск,
  уже записанные файлы остаются на диске.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from wallpaper.config import Settings
from wallpaper.log import get_logger
from wallpaper.models.image_model import ImageData
from wallpaper.models.size_spec import SIZE_SPECS, SizeSpec
from wallpaper.services.geometry_service import compute_layout
from wallpaper.services.image_service import ImageService
from wallpaper.services.output_service import OutputService
from wallpaper.services.render_service import RenderService

logger = get_logger("generator")

_FORMAT_LABELS = {"png": "PNG", "jpg": "JPEG"}


@dataclass
class WallpaperGenerator:
    """Строит все варианты обоев из исходника и логотипа.

    Ответственности:
    - Загрузка входных файлов через `ImageService`.
    - Расчёт геометрии и отрисовка через `compute_layout` / `RenderService`.
    - Раскладка и запись файлов через `OutputService`.
    """
    settings: Settings = field(default_factory=Settings)

    _image_service: ImageService = field(init=False, repr=False)
    _render_service: RenderService = field(init=False, repr=False)
    _output_service: OutputService = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._image_service = ImageService()
        self._render_service = RenderService(self.settings)
        self._output_service = OutputService()

    def run(self, logo_path: str | Path, source_path: str | Path) -> List[Path]:
        """Полный запуск: проверка путей, загрузка, генерация всех размеров."""
        source, logo = self.load_inputs(logo_path, source_path)
        return self.generate(source, logo)

    def load_inputs(self, logo_path: str | Path, source_path: str | Path) -> Tuple[ImageData, ImageData]:
        """Возвращает (исходник, логотип).

        Оба пути проверяются до декодирования, чтобы отсутствующий файл
        не оставлял после себя каталогов и не тратил время на чтение второго.
        """
        logo_file = self._image_service.ensure_exists(logo_path)
        source_file = self._image_service.ensure_exists(source_path)
        logo = self._image_service.load_image(logo_file, label="logo")
        source = self._image_service.load_image(source_file, label="source image")
        return source, logo

    def generate(self, source: ImageData, logo: ImageData, specs: Iterable[SizeSpec] = SIZE_SPECS) -> List[Path]:
        written: List[Path] = []
        for spec in specs:
            written.extend(self.generate_one(source, logo, spec))
        return written

    def generate_one(self, source: ImageData, logo: ImageData, spec: SizeSpec) -> List[Path]:
        logger.info("Reading image %s: %d x %d", source.path.name, source.width, source.height)

        directory = self._output_service.output_dir(source.path, spec)
        layout = compute_layout(source, logo, spec)
        self._output_service.ensure_dir(directory)

        logger.info("    - Logo size:    %.2f x %.2f", layout.logo_width, layout.logo_height)
        logger.info("    - Logo margins: %.2f | %.2f", layout.logo_margin_x, layout.logo_margin_y)
        logger.info("    - Drawing...")

        canvas = self._render_service.render(source, logo, spec, layout)
        logger.debug("    - Canvas %s, output directory %s", canvas.size, directory)

        written: List[Path] = []
        try:
            for extension in spec.formats.extensions:
                data = self._render_service.encode(canvas, extension)
                destination = self._output_service.output_path(source.path, spec, extension)
                logger.info("    - Writing %s image: %s", _FORMAT_LABELS[extension], destination.name)
                written.append(self._output_service.write(destination, data))
        finally:
            canvas.close()
        return written
