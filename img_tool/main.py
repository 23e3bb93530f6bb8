"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from img_tool import __version__
from img_tool.app import ImageToolApp
from img_tool.models.job_model import DEFAULT_OUTPUT_DIR, JobConfig

LOG_FORMAT = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img-tool",
        description="Обработка изображений из командной строки: конвертация, resize, оттенки серого и отчёт.",
    )
    parser.add_argument("input", help="Файл или каталог с изображениями")
    parser.add_argument("--output", default=str(DEFAULT_OUTPUT_DIR), help="Каталог вывода (по умолчанию: output)")
    parser.add_argument("--to-format", dest="to_format", default=None, help="Формат вывода: jpg, jpeg или png")
    parser.add_argument("--resize", default=None, help="Точный размер ШИРИНАxВЫСОТА, например 800x600")
    parser.add_argument("--grayscale", action="store_true", help="Перевести в оттенки серого")
    parser.add_argument("--report", default=None, help="Путь для JSON-отчёта")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробная диагностика")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Диагностика пишется в stderr; stdout остаётся для строк OK/IGN."""
    logger = logging.getLogger("img_tool")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, создаёт и запускает приложение."""
    args = build_parser().parse_args(argv)
    config = JobConfig.from_args(args)
    configure_logging(config.verbose)
    return ImageToolApp(config).run()


if __name__ == "__main__":
    sys.exit(main())
