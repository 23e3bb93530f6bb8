from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image

from img_tool.services.errors import EncodeError
from img_tool.services.image_service import ImageService
from img_tool.services.output_service import (
    OutputFormat,
    OutputService,
    build_output_path,
    resolve_output_format,
)


@pytest.mark.parametrize(
    ("requested", "input_format", "expected"),
    [
        (None, "PNG", (OutputFormat.JPEG, "jpg")),
        (None, "JPEG", (OutputFormat.PNG, "png")),
        (None, "GIF", (OutputFormat.PNG, "png")),
        (None, "BMP", (OutputFormat.PNG, "png")),
        ("jpg", "JPEG", (OutputFormat.JPEG, "jpg")),
        ("jpeg", "PNG", (OutputFormat.JPEG, "jpeg")),
        ("png", "PNG", (OutputFormat.PNG, "png")),
    ],
)
def test_resolve_output_format(requested, input_format: str, expected) -> None:
    assert resolve_output_format(requested, input_format) == expected


@pytest.mark.parametrize("requested", ["bmp", "JPG", "webp", ""])
def test_unsupported_format_falls_back_to_png(requested: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        fmt, ext = resolve_output_format(requested, "JPEG")
    assert (fmt, ext) == (OutputFormat.PNG, "png")
    assert "PNG" in caplog.text


def test_output_path_reuses_stem_only(tmp_path: Path) -> None:
    out = build_output_path(Path("a/b/photo.final.jpeg"), tmp_path, "png")
    assert out == tmp_path / "photo.final.png"


def test_output_path_fallback_stem(tmp_path: Path) -> None:
    assert build_output_path(Path(""), tmp_path, "jpg") == tmp_path / "output.jpg"


@pytest.mark.parametrize("fmt", list(OutputFormat))
@pytest.mark.parametrize("mode", ["RGB", "L"])
def test_encoded_bytes_sniff_back_to_target(fmt: OutputFormat, mode: str) -> None:
    image = Image.new(mode, (8, 8))
    data = OutputService().encode(image, fmt)
    assert ImageService().sniff_format(data) == fmt.pil_name


def test_encode_failure_is_encode_error() -> None:
    with pytest.raises(EncodeError):
        OutputService().encode(Image.new("RGBA", (4, 4)), OutputFormat.JPEG)


def test_write_reports_size_on_disk(tmp_path: Path) -> None:
    image = Image.new("RGB", (16, 16), (0, 128, 255))

    path, fmt, size = OutputService().write(image, Path("src/pic.png"), tmp_path, None, "PNG")

    assert path == tmp_path / "pic.jpg"
    assert fmt is OutputFormat.JPEG
    assert size == path.stat().st_size > 0


def test_write_overwrites_existing_output(tmp_path: Path) -> None:
    service = OutputService()
    service.write(Image.new("RGB", (4, 4), (255, 0, 0)), Path("a/x.png"), tmp_path, "png", "PNG")
    path, _, _ = service.write(Image.new("RGB", (4, 4), (0, 0, 255)), Path("b/x.png"), tmp_path, "png", "PNG")

    with Image.open(path) as written:
        assert written.convert("RGB").getpixel((0, 0)) == (0, 0, 255)
