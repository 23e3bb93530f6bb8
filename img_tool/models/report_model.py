"""Запись отчёта об одном обработанном файле."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ImageReport:
    """Неизменяемая запись отчёта.

    Fields:
        input: Путь к исходному файлу.
        output: Путь к записанному файлу.
        original_format: Формат исходного файла ("PNG", "JPEG", ...).
        new_format: Формат, в котором файл фактически закодирован.
        original_size: Размер исходного файла, байт.
        new_size: Размер файла на диске после записи, байт.
    """
    input: str
    output: str
    original_format: str
    new_format: str
    original_size: int
    new_size: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
