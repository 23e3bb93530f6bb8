"""Накопление записей отчёта и сохранение в JSON."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from img_tool.models.report_model import ImageReport

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self) -> None:
        self._records: List[ImageReport] = []

    def add(self, record: ImageReport) -> None:
        self._records.append(record)

    @property
    def records(self) -> List[ImageReport]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def save(self, report_path: str | Path) -> Path:
        """Сохраняет все записи одним JSON-массивом в порядке обработки.

        Raises:
            OSError: если файл отчёта не удалось записать.
        """
        path = Path(report_path)
        payload = [record.to_dict() for record in self._records]
        with path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, ensure_ascii=False, indent=2)
        logger.debug("Отчёт: %d записей -> %s", len(payload), path)
        return path
