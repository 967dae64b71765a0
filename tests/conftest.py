import logging
from pathlib import Path

import pytest
from PIL import Image


RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture()
def source_path(tmp_path: Path) -> Path:
    """60x40 photo: left half red, right half green."""
    img = Image.new("RGB", (60, 40), RED[:3])
    img.paste(GREEN[:3], (30, 0, 60, 40))
    path = tmp_path / "photo.png"
    img.save(path)
    return path


@pytest.fixture()
def logo_path(tmp_path: Path) -> Path:
    """Opaque white 60x20 logo."""
    path = tmp_path / "logo.png"
    Image.new("RGBA", (60, 20), WHITE).save(path)
    return path


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("wallpaper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
