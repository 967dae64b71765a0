"""Выходные пути и запись файлов.

Раскладка: `<каталог исходника>/<имя размера>/<имя исходника>-<имя размера>.<ext>`.
"""
from __future__ import annotations

from pathlib import Path

from wallpaper.errors import OutputError
from wallpaper.models.size_spec import SizeSpec


class OutputService:
    def output_dir(self, source_path: Path, spec: SizeSpec) -> Path:
        return source_path.parent / spec.name

    def output_path(self, source_path: Path, spec: SizeSpec, extension: str) -> Path:
        return self.output_dir(source_path, spec) / f"{source_path.stem}-{spec.name}.{extension}"

    def ensure_dir(self, directory: Path) -> Path:
        """Создаёт каталог вместе с промежуточными; существующий не трогает."""
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputError(f"Cannot create directory {directory}: {exc.strerror or exc}") from exc
        return directory

    def write(self, destination: Path, data: bytes) -> Path:
        """Записывает байты, молча перезаписывая существующий файл."""
        try:
            destination.write_bytes(data)
        except OSError as exc:
            raise OutputError(f"Cannot write {destination.name}: {exc.strerror or exc}") from exc
        return destination
