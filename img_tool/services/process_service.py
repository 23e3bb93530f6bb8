from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from PIL import Image

from img_tool.models.image_model import ImageData
from img_tool.models.job_model import JobConfig

logger = logging.getLogger(__name__)

_RESIZE_RE = re.compile(r"(\d+)x(\d+)")


def parse_resize(value: str) -> Optional[Tuple[int, int]]:
    """
    Разбирает строку вида "800x600" в (800, 600).
    Возвращает None, если формат не подходит или одна из сторон равна нулю.
    """
    m = _RESIZE_RE.fullmatch(value)
    if not m:
        return None
    width, height = int(m.group(1)), int(m.group(2))
    if width <= 0 or height <= 0:
        return None
    return (width, height)


class ProcessService:
    def resize_exact(self, image: Image.Image, size: Tuple[int, int]) -> Image.Image:
        """
        Точное изменение размера (пропорции не сохраняются), фильтр Lanczos.
        """
        return image.resize(size, resample=Image.Resampling.LANCZOS)

    def to_grayscale(self, image: Image.Image) -> Image.Image:
        """
        Преобразование изображения в оттенки серого (8-бит, L).
        """
        if image.mode == "L":
            return image.copy()
        return image.convert("L")

    def transform(self, image_data: ImageData, config: JobConfig) -> ImageData:
        """
        Применяет шаги конвейера к изображению: сначала resize, затем оттенки серого.
        Порядок фиксирован и не зависит от порядка флагов.
        """
        if config.resize is not None:
            size = parse_resize(config.resize)
            if size is None:
                logger.warning(
                    "Некорректное значение --resize %r (ожидается ШИРИНАxВЫСОТА), resize пропущен.",
                    config.resize,
                )
            else:
                logger.debug("Resize %s: %sx%s -> %sx%s", image_data.path, image_data.width, image_data.height, *size)
                image_data.pil_image = self.resize_exact(image_data.pil_image, size)

        if config.grayscale:
            image_data.pil_image = self.to_grayscale(image_data.pil_image)

        return image_data
