"""Ошибки обработки одного файла.

Такие ошибки не прерывают запуск: контроллер записывает их в лог и переходит
к следующему файлу. Ошибки ввода-вывода верхнего уровня остаются `OSError`.
"""


class ProcessingError(Exception):
    """Файл не удалось обработать."""


class DecodeError(ProcessingError):
    """Содержимое распознано как изображение, но не декодируется."""


class EncodeError(ProcessingError):
    """Изображение не удалось закодировать в выбранный формат."""
