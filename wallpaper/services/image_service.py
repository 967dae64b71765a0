"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку и базовую проверку свойств.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError
from PIL.Image import DecompressionBombError

from wallpaper.errors import ImageDecodeError, InvalidImageDimensions, MissingFileError
from wallpaper.models.image_model import ImageData


class ImageService:
    def ensure_exists(self, file_path: str | Path) -> Path:
        """Проверяет, что путь указывает на существующий файл.

        Raises:
            MissingFileError: если файла нет.
        """
        path = Path(file_path)
        if not path.is_file():
            raise MissingFileError(f"Error - File does not exist: {path.name}")
        return path

    def load_image(self, file_path: str | Path, label: str = "image") -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.
            label: Как называть файл в сообщении об ошибке ("logo", "source image").

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            MissingFileError: если путь не существует или не указывает на файл.
            ImageDecodeError: если файл не распознан как изображение.
            InvalidImageDimensions: если ширина или высота равна нулю.
        """
        path = self.ensure_exists(file_path)

        try:
            with Image.open(path) as img:
                img.load()
                mode = img.mode
                pil_image = self._to_rgba(img)
        except (UnidentifiedImageError, DecompressionBombError, OSError) as exc:
            raise ImageDecodeError(f"Cannot read {label}: {path.name}") from exc

        width, height = pil_image.size
        self.validate_dimensions(width, height, path.name)

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=mode,
            size_bytes=size_bytes,
        )

    @staticmethod
    def _to_rgba(img: Image.Image) -> Image.Image:
        # 16-bit grayscale: convert("RGBA") clips, so scale down to 8 bits first
        if img.mode in ("I;16", "I"):
            return img.convert("I").point(lambda v: v * (1 / 256)).convert("L").convert("RGBA")
        return img.convert("RGBA")

    @staticmethod
    def validate_dimensions(width: float, height: float, name: str) -> None:
        if width <= 0 or height <= 0:
            raise InvalidImageDimensions(f"Invalid image dimensions for {name}: {width} x {height}")
