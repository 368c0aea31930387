"""
Модель данных и абстрактные интерфейсы сканера слов.

Определяет запись о слове (WordRecord) и контракты для внешних
участников: токенизатора, построчного источника текста и экспортёра.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union


@dataclass
class WordRecord:
    """Одно слово без учёта регистра вместе со всеми его написаниями."""
    canonical_form: str
    total_count: int
    # Точное написание -> сколько раз встретилось
    variants: Dict[str, int]

    def __post_init__(self):
        if not self.variants:
            raise ValueError(f"У записи '{self.canonical_form}' нет ни одного написания")
        if any(count < 1 for count in self.variants.values()):
            raise ValueError(f"Частота написания '{self.canonical_form}' должна быть >= 1: {self.variants}")
        if self.total_count != sum(self.variants.values()):
            raise ValueError(
                f"total_count={self.total_count} не равен сумме написаний '{self.canonical_form}': {self.variants}"
            )

    @classmethod
    def from_token(cls, word: str) -> "WordRecord":
        """Создаёт запись по первому появлению токена."""
        return cls(canonical_form=word.lower(), total_count=1, variants={word: 1})

    def add_occurrence(self, word: str) -> None:
        """Учитывает ещё одно появление слова в написании word."""
        self.total_count += 1
        self.variants[word] = self.variants.get(word, 0) + 1

    def representative_variant(self) -> str:
        """
        Возвращает одно из написаний для показа.

        Выбор не зависит от частоты: берётся наименьший ключ, поэтому
        вызывающий код не должен рассчитывать на самое частое написание.
        """
        return min(self.variants)

    def copy(self) -> "WordRecord":
        return WordRecord(self.canonical_form, self.total_count, dict(self.variants))


WordList = List[WordRecord]
TableRow = Tuple[str, int]


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass


class LineSourceInterface(ABC):
    """Интерфейс построчного источника текста."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя источника для сообщений."""
        pass

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """Выдаёт строки одну за другой до исчерпания источника."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта списка слов."""

    @abstractmethod
    def export_to_excel(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует список слов в Excel."""
        pass

    @abstractmethod
    def export_to_csv(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует список слов в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует список слов в JSON."""
        pass
