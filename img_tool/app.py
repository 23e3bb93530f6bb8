"""Один запуск утилиты: каталог вывода, поиск файлов, обработка и отчёт."""
from __future__ import annotations

import logging

from img_tool.controllers.batch_controller import BatchController
from img_tool.models.job_model import JobConfig
from img_tool.services.path_service import PathService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


class ImageToolApp:
    def __init__(self, config: JobConfig) -> None:
        self.config = config
        self._path_service = PathService()
        self._controller = BatchController(config=config)

    def run(self) -> int:
        """Выполняет запуск. Ошибки отдельных файлов не меняют код возврата."""
        try:
            return self._run()
        except OSError as exc:
            logger.critical("Фатальная ошибка: %s", exc)
            return EXIT_FATAL

    def _run(self) -> int:
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        paths = self._path_service.collect_paths(self.config.input_path)
        if not paths:
            logger.warning("Не найдено ни одного файла для обработки.")
            return EXIT_OK

        print(f"Найдено файлов для обработки: {len(paths)}")

        self._controller.run(paths)

        if self.config.report_path is not None:
            saved = self._controller.report_service.save(self.config.report_path)
            print(f"Отчёт сохранён: {saved}")

        return EXIT_OK
