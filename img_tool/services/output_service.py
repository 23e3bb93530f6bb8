"""Кодирование результата и запись на диск.

Принципы:
- Набор целевых форматов закрыт и описан перечислением `OutputFormat`.
- Неизвестное имя формата не считается ошибкой: используется PNG.
- Размер результата берётся с диска после записи, а не из буфера.
"""
from __future__ import annotations

import enum
import io
import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from img_tool.services.errors import EncodeError

logger = logging.getLogger(__name__)

FALLBACK_STEM = "output"


class OutputFormat(enum.Enum):
    JPEG = ("JPEG", "jpg", ("jpg", "jpeg"))
    PNG = ("PNG", "png", ("png",))

    def __init__(self, pil_name: str, extension: str, aliases: Tuple[str, ...]) -> None:
        self.pil_name = pil_name
        self.extension = extension
        self.aliases = aliases

    @classmethod
    def from_name(cls, name: str) -> Optional["OutputFormat"]:
        """Ищет формат по имени с учётом регистра ("jpg", "jpeg", "png")."""
        for fmt in cls:
            if name in fmt.aliases:
                return fmt
        return None

    @classmethod
    def default_for(cls, input_format: str) -> "OutputFormat":
        """Формат по умолчанию: PNG -> JPEG, JPEG -> PNG, остальное -> PNG."""
        if input_format == "PNG":
            return cls.JPEG
        return cls.PNG


def resolve_output_format(requested: Optional[str], input_format: str) -> Tuple[OutputFormat, str]:
    """Определяет формат и расширение выходного файла.

    Args:
        requested: Значение `--to-format` или None.
        input_format: Формат исходного файла по версии Pillow.

    Returns:
        Пару (формат, расширение). Для распознанного имени расширение совпадает
        с введённым ("jpeg" -> ".jpeg").
    """
    if requested is None:
        fmt = OutputFormat.default_for(input_format)
        return fmt, fmt.extension

    fmt = OutputFormat.from_name(requested)
    if fmt is None:
        logger.warning("Формат вывода не поддерживается (%s), используется PNG.", requested)
        return OutputFormat.PNG, OutputFormat.PNG.extension
    return fmt, requested


def build_output_path(input_path: Path, output_dir: Path, extension: str) -> Path:
    """Строит путь `<output_dir>/<stem>.<extension>`.

    Каталог и расширение исходного файла отбрасываются. Файлы с одинаковым
    stem перезаписывают друг друга.
    """
    stem = Path(input_path).stem or FALLBACK_STEM
    return Path(output_dir) / f"{stem}.{extension}"


class OutputService:
    def encode(self, image: Image.Image, fmt: OutputFormat) -> bytes:
        """Кодирует изображение в память.

        Raises:
            EncodeError: если кодек не принимает изображение (например, RGBA в JPEG).
        """
        buf = io.BytesIO()
        try:
            image.save(buf, format=fmt.pil_name)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"не удалось закодировать в {fmt.pil_name} ({image.mode}): {exc}") from exc
        return buf.getvalue()

    def write(
        self,
        image: Image.Image,
        input_path: Path,
        output_dir: Path,
        requested: Optional[str],
        input_format: str,
    ) -> Tuple[Path, OutputFormat, int]:
        """Кодирует изображение и записывает его в каталог вывода.

        Returns:
            (путь результата, фактический формат, размер файла на диске).

        Raises:
            EncodeError: при ошибке кодирования.
            OSError: при ошибке записи или чтения размера.
        """
        fmt, extension = resolve_output_format(requested, input_format)
        output_path = build_output_path(input_path, output_dir, extension)

        data = self.encode(image, fmt)
        output_path.write_bytes(data)

        new_size = output_path.stat().st_size
        return output_path, fmt, new_size
