"""Сбор путей к файлам для обработки."""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class PathService:
    def collect_paths(self, input_path: str | Path) -> List[Path]:
        """Собирает пути файлов из одного файла или рекурсивно из каталога.

        Args:
            input_path: Файл или каталог.

        Returns:
            Новый список путей в порядке обхода файловой системы (без сортировки).
            Для несуществующего пути или специального файла список пуст.

        Raises:
            OSError: если не удалось прочитать метаданные входного пути
                или какой-либо каталог при обходе.
        """
        path = Path(input_path)
        try:
            st = path.stat()
        except FileNotFoundError:
            logger.warning("Вход не является ни файлом, ни каталогом: %s", path)
            return []

        if stat.S_ISREG(st.st_mode):
            return [path]
        if stat.S_ISDIR(st.st_mode):
            files: List[Path] = []
            self._walk(path, files)
            return files

        logger.warning("Вход не является ни файлом, ни каталогом: %s", path)
        return []

    def _walk(self, directory: Path, files: List[Path]) -> None:
        # symlinks are not followed, same as for directories
        with os.scandir(directory) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    self._walk(Path(entry.path), files)
                elif entry.is_file(follow_symlinks=False):
                    files.append(Path(entry.path))
