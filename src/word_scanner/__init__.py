"""
Word Scanner - подсчёт частот слов для облака слов

Этот модуль предоставляет инструменты для:
- Разбиения текста на слова и сведения их без учёта регистра
- Учёта всех вариантов написания каждого слова
- Отсечения стоп-слов и редких слов
- Экспорта итогового списка в Excel/CSV/JSON
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .scanner import Scanner
from .interfaces.scanner import WordRecord, WordList
from .errors import ScannerError, SourceNotFoundError, SourceReadError, UnsupportedSourceError

__all__ = [
    "Scanner",
    "WordRecord",
    "WordList",
    "ScannerError",
    "SourceNotFoundError",
    "SourceReadError",
    "UnsupportedSourceError",
]
