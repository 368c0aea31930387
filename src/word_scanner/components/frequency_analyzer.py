"""
Компонент для анализа частотности уже собранного списка слов.

Сканер сам ничего не сортирует: порядок после take_words() не определён.
Сортировку по убыванию частоты вызывающий код применяет явно через
FrequencyAnalyzer.sort_by_frequency().
"""

from collections import defaultdict
from typing import Dict, Optional, Union

from ..interfaces.scanner import WordList, WordRecord


def frequency_key(record: WordRecord) -> int:
    """Ключ сортировки: общее число появлений."""
    return record.total_count


class FrequencyAnalyzer:
    """Анализатор частотности для списка WordRecord."""

    def sort_by_frequency(self, words: WordList) -> WordList:
        """
        Возвращает новый список, отсортированный по убыванию частоты.

        Порядок слов с одинаковой частотой не гарантируется.

        Args:
            words: Список слов (не изменяется)

        Returns:
            Отсортированная копия списка
        """
        return sorted(words, key=frequency_key, reverse=True)

    def get_most_frequent(self, words: WordList, n: int = 10) -> WordList:
        """
        Возвращает n самых частых слов.

        Args:
            words: Список слов
            n: Количество слов для возврата

        Returns:
            Не более n записей по убыванию частоты
        """
        if not words or n <= 0:
            return []
        return self.sort_by_frequency(words)[:n]

    def get_frequency_statistics(self, words: WordList) -> Dict[str, Union[int, float]]:
        """
        Возвращает общую статистику частотности.

        Returns:
            Словарь со статистикой
        """
        if not words:
            return {
                'unique_words': 0,
                'total_occurrences': 0,
                'total_variants': 0,
                'avg_occurrences': 0.0
            }

        total = sum(record.total_count for record in words)
        return {
            'unique_words': len(words),
            'total_occurrences': total,
            'total_variants': sum(len(record.variants) for record in words),
            'avg_occurrences': round(total / len(words), 2)
        }

    def get_frequency_distribution(self, words: WordList) -> Dict[int, int]:
        """
        Возвращает распределение слов по частоте.

        Returns:
            Словарь {частота: количество слов}
        """
        distribution = defaultdict(int)
        for record in words:
            distribution[record.total_count] += 1
        return dict(distribution)

    def get_words_by_frequency_range(self, words: WordList, min_freq: int = 1,
                                     max_freq: Optional[int] = None) -> WordList:
        """
        Возвращает слова в заданном диапазоне частотности.

        Args:
            words: Список слов
            min_freq: Минимальная частота
            max_freq: Максимальная частота (None = без ограничений)

        Returns:
            Подходящие записи по убыванию частоты
        """
        selected = [
            record for record in words
            if record.total_count >= min_freq and (max_freq is None or record.total_count <= max_freq)
        ]
        return self.sort_by_frequency(selected)
