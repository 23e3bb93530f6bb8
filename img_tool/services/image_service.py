"""Чтение файлов, определение формата по содержимому и декодирование.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- «Не изображение» не считается ошибкой: `sniff_format` возвращает `None`,
  а ошибки диска приходят отдельно как `OSError`.
- Формат определяется только по сигнатуре; повреждённое содержимое с верной
  сигнатурой даёт `DecodeError` на этапе декодирования.
"""
from __future__ import annotations

import io
import logging
import struct
from pathlib import Path
from typing import Optional

from PIL import Image

from img_tool.models.image_model import ImageData
from img_tool.services.errors import DecodeError

logger = logging.getLogger(__name__)

# Image.open looks at the same number of leading bytes
SIGNATURE_LENGTH = 16

# MPO is a JPEG with extra frames appended
_FORMAT_ALIASES = {"MPO": "JPEG"}

_TO_RGB_MODES = {"1", "CMYK", "YCbCr", "LAB", "HSV"}


def _normalize_mode(image: Image.Image) -> Image.Image:
    """Приводит изображение к цветному (RGB/RGBA) или яркостному (L/LA) виду.

    Палитра раскрывается в RGBA при наличии прозрачности, иначе в RGB.
    """
    if image.mode in ("P", "PA"):
        if image.mode == "PA" or "transparency" in image.info:
            return image.convert("RGBA")
        return image.convert("RGB")
    if image.mode in _TO_RGB_MODES:
        return image.convert("RGB")
    return image


class ImageService:
    def sniff_format(self, data: bytes) -> Optional[str]:
        """Определяет формат контейнера по сигнатуре, а не по расширению.

        Проверяются только сигнатуры зарегистрированных в Pillow форматов;
        тело файла не разбирается.

        Returns:
            Имя формата в терминах Pillow ("PNG", "JPEG", "GIF", ...) или `None`,
            если содержимое не похоже на изображение.
        """
        Image.init()
        prefix = data[:SIGNATURE_LENGTH]
        for fmt in Image.ID:
            _factory, accept = Image.OPEN[fmt]
            # formats without a signature check cannot be sniffed
            if accept is None:
                continue
            try:
                result = accept(prefix)
            except (IndexError, TypeError, struct.error, SyntaxError):
                continue
            # a string result is a "plugin not available" message
            if result and not isinstance(result, str):
                return _FORMAT_ALIASES.get(fmt, fmt)
        return None

    def decode(self, path: Path, data: bytes, fmt: str, size_bytes: int) -> ImageData:
        """Полностью декодирует пиксели и нормализует режим изображения.

        Raises:
            DecodeError: если файл повреждён, хотя сигнатура распознана.
        """
        try:
            pil_image = Image.open(io.BytesIO(data))
            pil_image.load()
            pil_image = _normalize_mode(pil_image)
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"не удалось декодировать {fmt}: {exc}") from exc

        return ImageData(path=path, pil_image=pil_image, format=fmt, size_bytes=size_bytes)

    def load_image(self, file_path: str | Path) -> Optional[ImageData]:
        """Загружает изображение с диска вместе с метаданными.

        Args:
            file_path: Путь до файла.

        Returns:
            `ImageData` или `None`, если файл не является изображением.

        Raises:
            OSError: если файл не читается.
            DecodeError: если изображение повреждено.
        """
        path = Path(file_path)
        size_bytes = path.stat().st_size
        data = path.read_bytes()

        fmt = self.sniff_format(data)
        if fmt is None:
            logger.debug("Не изображение: %s", path)
            return None

        return self.decode(path, data, fmt, size_bytes)
