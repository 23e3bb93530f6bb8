"""Контроллер пакетной обработки: оркестрация сервисов для каждого файла.

SOLID:
- SRP: класс связывает сервисы между собой, но сам изображения не обрабатывает.
- DIP: сервисы подставляются полями dataclass и легко заменяются в тестах.
Clean Code:
- Файлы обрабатываются строго по одному; ошибка одного файла не прерывает запуск.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from img_tool.models.job_model import JobConfig
from img_tool.models.report_model import ImageReport
from img_tool.services.errors import ProcessingError
from img_tool.services.image_service import ImageService
from img_tool.services.output_service import OutputService
from img_tool.services.process_service import ProcessService
from img_tool.services.report_service import ReportService

logger = logging.getLogger(__name__)


@dataclass
class BatchController:
    """Проводит каждый файл через цепочку сервисов.

    Ответственности:
    - Определение формата и декодирование через `ImageService`.
    - Resize и оттенки серого через `ProcessService`.
    - Кодирование и запись через `OutputService`.
    - Накопление записей отчёта в `ReportService`.
    """
    config: JobConfig

    image_service: ImageService = field(default_factory=ImageService)
    process_service: ProcessService = field(default_factory=ProcessService)
    output_service: OutputService = field(default_factory=OutputService)
    report_service: ReportService = field(default_factory=ReportService)

    def run(self, paths: List[Path]) -> List[ImageReport]:
        """Обрабатывает все пути по порядку и возвращает записи отчёта."""
        for path in paths:
            try:
                report = self.process_file(path)
            except (ProcessingError, OSError) as exc:
                logger.error("ERR -> %s: %s", path, exc)
                continue

            if report is None:
                print(f"IGN -> {path}")
            else:
                print(f"OK -> {report.output}")
                self.report_service.add(report)

        return self.report_service.records

    def process_file(self, path: Path) -> Optional[ImageReport]:
        """Обрабатывает один файл.

        Returns:
            Запись отчёта или `None`, если файл не является изображением.

        Raises:
            ProcessingError: при ошибке декодирования или кодирования.
            OSError: при ошибке чтения исходного или записи выходного файла.
        """
        image_data = self.image_service.load_image(path)
        if image_data is None:
            return None

        # ---- pipeline ----
        image_data = self.process_service.transform(image_data, self.config)

        output_path, fmt, new_size = self.output_service.write(
            image_data.pil_image,
            input_path=path,
            output_dir=self.config.output_dir,
            requested=self.config.to_format,
            input_format=image_data.format,
        )

        return ImageReport(
            input=str(path),
            output=str(output_path),
            original_format=image_data.format,
            new_format=fmt.pil_name,
            original_size=image_data.size_bytes,
            new_size=new_size,
        )
