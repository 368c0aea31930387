"""
Компонент для токенизации текста.

Слово - максимальная последовательность "словесных" символов
(буквы, цифры, подчёркивание, комбинирующие знаки). Всё остальное
считается разделителем.
"""

import re
import sys
import unicodedata
from functools import lru_cache
from typing import List, Optional
from ..interfaces.scanner import TokenProcessorInterface


def _mark_ranges() -> str:
    """Диапазоны комбинирующих знаков (Mn, Mc, Me) для класса символов re."""
    ranges = []
    start = None
    for code in range(sys.maxunicode + 2):
        is_mark = code <= sys.maxunicode and unicodedata.category(chr(code)).startswith('M')
        if is_mark and start is None:
            start = code
        elif not is_mark and start is not None:
            ranges.append(f"\\U{start:08x}-\\U{code - 1:08x}")
            start = None
    return "".join(ranges)


@lru_cache(maxsize=1)
def separator_pattern() -> "re.Pattern":
    """
    Серия символов, не являющихся ни \\w, ни комбинирующим знаком.

    В re знаки Mn/Mc попадают в \\W, поэтому "हिन्दी" или "q\\u0301uo"
    разорвались бы на куски; исключаем их из разделителей явно.
    """
    return re.compile(f"[^\\w{_mark_ranges()}]+")


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self, normalize_unicode: bool = True):
        """
        Инициализирует процессор токенизации.

        Args:
            normalize_unicode: Приводить ли текст к NFC перед разбиением
        """
        self.normalize_unicode = normalize_unicode

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Разбивает текст на токены, сохраняя исходный регистр.

        Args:
            text: Исходный текст

        Returns:
            Список токенов в порядке появления
        """
        if not text:
            return []
        if self.normalize_unicode:
            text = unicodedata.normalize('NFC', text)

        # Пустые куски от разделителей в начале/конце строки отбрасываем
        return [token for token in separator_pattern().split(text) if token]

    def count_tokens(self, text: Optional[str]) -> int:
        """Количество токенов в тексте."""
        return len(self.tokenize(text))
