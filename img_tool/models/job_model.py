"""Параметры запуска.

Принципы:
- Создаются один раз из аргументов командной строки и дальше только читаются.
- Строка `--resize` хранится как есть: разбор происходит в конвейере, чтобы
  некорректное значение не отменяло весь запуск.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT_DIR = Path("output")


@dataclass(frozen=True)
class JobConfig:
    """Неизменяемые настройки запуска.

    Fields:
        input_path: Файл или каталог с исходными изображениями.
        output_dir: Каталог для результатов.
        to_format: Желаемый формат вывода, как его ввёл пользователь.
        resize: Строка вида "800x600" или None.
        grayscale: Переводить ли изображение в оттенки серого.
        report_path: Куда сохранить JSON-отчёт, если нужно.
        verbose: Подробный вывод диагностики.
    """
    input_path: Path
    output_dir: Path = DEFAULT_OUTPUT_DIR
    to_format: Optional[str] = None
    resize: Optional[str] = None
    grayscale: bool = False
    report_path: Optional[Path] = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "JobConfig":
        return cls(
            input_path=Path(args.input),
            output_dir=Path(args.output),
            to_format=args.to_format,
            resize=args.resize,
            grayscale=bool(args.grayscale),
            report_path=Path(args.report) if args.report else None,
            verbose=bool(args.verbose),
        )
