"""
Построчные источники текста.

FileLineSource открывает файл по имени и выдаёт строки; ошибки открытия
и чтения переводятся в ошибки сканера.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from ..errors import SourceNotFoundError, SourceReadError
from ..interfaces.scanner import LineSourceInterface

logger = logging.getLogger(__name__)


class FileLineSource(LineSourceInterface):
    """Файл на диске, читаемый построчно."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.path)

    def lines(self) -> Iterator[str]:
        """
        Выдаёт строки файла без завершающих переводов строки.

        Raises:
            SourceNotFoundError: Файл не существует или не открывается
            SourceReadError: Чтение прервалось посреди файла
        """
        try:
            # newline=None: \n, \r\n и \r считаются концом строки
            handle = open(self.path, "r", encoding=self.encoding, newline=None)
        except OSError as e:
            raise SourceNotFoundError(self.name, e.strerror or str(e)) from e

        logger.debug(f"Открыт источник: {self.name}")
        with handle:
            yield from _read_lines(handle, self.name)


class IterableLineSource(LineSourceInterface):
    """Обёртка над любым итерируемым набором строк (например, открытым потоком)."""

    def __init__(self, lines: Iterable[str], name: str = "<stream>"):
        self._lines = lines
        self._name = getattr(lines, "name", None) or name

    @property
    def name(self) -> str:
        return str(self._name)

    def lines(self) -> Iterator[str]:
        yield from _read_lines(self._lines, self.name)


def _read_lines(lines: Iterable[str], name: str) -> Iterator[str]:
    line_number = 0
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(name, line_number, str(e)) from e
        line_number += 1
        yield line.rstrip("\r\n")
