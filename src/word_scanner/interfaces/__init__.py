"""
Модель данных и интерфейсы компонентов сканера слов.
"""

from .scanner import (
    WordRecord,
    WordList,
    TableRow,
    TokenProcessorInterface,
    LineSourceInterface,
    ResultExporterInterface
)

__all__ = [
    'WordRecord',
    'WordList',
    'TableRow',
    'TokenProcessorInterface',
    'LineSourceInterface',
    'ResultExporterInterface'
]
