"""
Ошибки сканера слов.

Все ошибки наследуются от ScannerError, чтобы вызывающий код мог
перехватить их одним except. Некорректного текста не бывает: любая
строка принимается и в худшем случае даёт ноль токенов.
"""

from typing import Optional


class ScannerError(Exception):
    """Базовая ошибка сканера."""


class SourceNotFoundError(ScannerError):
    """Источник не существует или не может быть открыт."""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        message = f"Источник не найден: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SourceReadError(ScannerError):
    """Ошибка чтения посреди потока. Уже прочитанные строки остаются в сканере."""

    def __init__(self, source: str, line_number: int, reason: Optional[str] = None):
        self.source = source
        self.line_number = line_number
        message = f"Ошибка чтения {source} после строки {line_number}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedSourceError(ScannerError):
    """Запрошенный тип источника не реализован (URL, RSS)."""

    def __init__(self, kind: str, location: str):
        self.kind = kind
        self.location = location
        super().__init__(f"Загрузка из {kind} не реализована: {location}")
