from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path: Path):
    def _make(name: str = "photo.png", size: tuple[int, int] = (640, 480)) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, (0, 128, 255)).save(path)
        return path

    return _make
