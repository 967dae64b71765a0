"""Иерархия ошибок генератора обоев.

Любая ошибка фатальна для всего запуска: сервисы поднимают исключение в месте
сбоя, `main` печатает диагностику и завершает процесс с ненулевым кодом.
"""
from __future__ import annotations


class WallpaperError(Exception):
    """Базовый класс для всех ошибок генератора."""


class MissingFileError(WallpaperError, FileNotFoundError):
    """Входной файл (логотип или исходное изображение) не существует."""


class ImageDecodeError(WallpaperError):
    """Файл существует, но Pillow не смог его прочитать как изображение."""


class InvalidImageDimensions(WallpaperError, ValueError):
    """У изображения нулевая ширина или высота."""


class EncodeError(WallpaperError):
    """Не удалось закодировать холст в PNG/JPEG."""


class OutputError(WallpaperError, OSError):
    """Не удалось создать выходной каталог или записать файл."""
