from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image


def make_image(
    path: Path,
    fmt: str = "PNG",
    size: Tuple[int, int] = (40, 30),
    color: Tuple[int, ...] = (200, 40, 40),
    mode: str = "RGB",
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new(mode, size, color).save(path, format=fmt)
    return path


def make_noise_png(path: Path, size: Tuple[int, int] = (64, 64)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.effect_noise(size, 64).convert("RGB").save(path, format="PNG")
    return path


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """Каталог со смесью изображений и не-изображений."""
    root = tmp_path / "in"
    make_image(root / "photo.png", "PNG")
    make_image(root / "nested" / "shot.jpg", "JPEG", color=(10, 120, 220))
    make_image(root / "nested" / "deeper" / "anim.gif", "GIF", mode="P", color=3)
    (root / "notes.txt").write_text("not an image", encoding="utf-8")
    (root / "nested" / "data.bin").write_bytes(b"\x00\x01\x02\x03" * 16)
    return root


@pytest.fixture(autouse=True)
def _reset_img_tool_logger():
    yield
    logger = logging.getLogger("img_tool")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
