"""Пакетная обработка изображений: конвертация, resize, оттенки серого и JSON-отчёт."""

__version__ = "0.1.0"
