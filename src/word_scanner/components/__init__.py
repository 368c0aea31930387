"""
Компоненты сканера слов.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста
- FileLineSource / IterableLineSource - построчное чтение источников
- FrequencyAnalyzer - сортировка и статистика частот
- ResultExporter - таблица "Word" / "#" и экспорт результатов
- stopwords - таблицы стоп-слов по языкам
"""

from .tokenizer import TokenProcessor
from .line_source import FileLineSource, IterableLineSource
from .frequency_analyzer import FrequencyAnalyzer
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'FileLineSource',
    'IterableLineSource',
    'FrequencyAnalyzer',
    'ResultExporter',
]
