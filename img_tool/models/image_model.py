"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Изображение принадлежит одному вызову конвейера и не разделяется между файлами.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image


@dataclass
class ImageData:
    """Декодированное изображение и его исходные метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL; шаги конвейера заменяют его.
        format: Формат контейнера, определённый по содержимому, например "PNG".
        size_bytes: Размер исходного файла, байт.
    """
    path: Path
    pil_image: Image.Image
    format: str
    size_bytes: int

    @property
    def width(self) -> int:
        return self.pil_image.width

    @property
    def height(self) -> int:
        return self.pil_image.height

    @property
    def mode(self) -> str:
        return self.pil_image.mode
