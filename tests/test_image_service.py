"""Tests for loading source and logo images."""

from pathlib import Path

import pytest
from PIL import Image

from wallpaper.errors import ImageDecodeError, InvalidImageDimensions, MissingFileError
from wallpaper.services.image_service import ImageService


def test_load_image_returns_rgba_with_metadata(source_path: Path) -> None:
    data = ImageService().load_image(source_path)

    assert data.path == source_path
    assert (data.width, data.height) == (60, 40)
    assert data.pil_image.mode == "RGBA"
    assert data.mode == "RGB"
    assert data.size_bytes == source_path.stat().st_size
    assert data.aspect_ratio == pytest.approx(1.5)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingFileError) as excinfo:
        ImageService().load_image(tmp_path / "nope.png")
    assert "Error - File does not exist: nope.png" in str(excinfo.value)


def test_missing_file_is_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ImageService().ensure_exists(tmp_path / "nope.png")


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(MissingFileError):
        ImageService().ensure_exists(tmp_path)


def test_garbage_file_is_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "logo.png"
    path.write_bytes(b"definitely not an image")

    with pytest.raises(ImageDecodeError) as excinfo:
        ImageService().load_image(path, label="logo")
    assert str(excinfo.value) == "Cannot read logo: logo.png"


def test_truncated_file_is_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "photo.png"
    Image.new("RGB", (64, 64), (10, 20, 30)).save(path)
    path.write_bytes(path.read_bytes()[:40])

    with pytest.raises(ImageDecodeError):
        ImageService().load_image(path, label="source image")


def test_validate_dimensions() -> None:
    ImageService.validate_dimensions(1, 1, "ok.png")
    with pytest.raises(InvalidImageDimensions):
        ImageService.validate_dimensions(0, 10, "empty.png")


def test_oversized_image_is_decode_error(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "panorama.png"
    Image.new("RGB", (100, 100), (10, 20, 30)).save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(ImageDecodeError) as excinfo:
        ImageService().load_image(path, label="source image")
    assert str(excinfo.value) == "Cannot read source image: panorama.png"


def test_sixteen_bit_grayscale_is_scaled_not_clipped(tmp_path: Path) -> None:
    path = tmp_path / "grey16.png"
    Image.new("I;16", (8, 8), 40000).save(path)

    data = ImageService().load_image(path)

    red, green, blue, alpha = data.pil_image.getpixel((4, 4))
    assert abs(red - 156) <= 1
    assert red == green == blue
    assert alpha == 255
