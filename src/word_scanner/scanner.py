"""
Сканер слов: накопитель частот с учётом вариантов написания.

Scanner принимает текст из строк и построчных источников, сводит токены
к одной записи на слово без учёта регистра (помня каждое написание),
умеет отбрасывать стоп-слова и редкие слова и отдаёт итоговый список
через take_words(), после чего накопитель пуст.

Экземпляр не потокобезопасен: при загрузке из нескольких потоков
доступ должен сериализовать вызывающий код.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .components.line_source import FileLineSource, IterableLineSource
from .components.stopwords import get_patterns, is_stopword
from .components.tokenizer import TokenProcessor
from .config import config
from .errors import UnsupportedSourceError
from .interfaces.scanner import LineSourceInterface, TableRow, WordList, WordRecord

logger = logging.getLogger(__name__)

LineSource = Union[str, Path, LineSourceInterface, Iterable[str]]


class Scanner:
    """Накопитель частот слов."""

    def __init__(self,
                 prune_threshold: Optional[int] = None,
                 min_count: Optional[int] = None,
                 language: Optional[str] = None,
                 encoding: Optional[str] = None,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Args:
            prune_threshold: С какого числа записей take_words() отбрасывает редкие слова
            min_count: Минимальная частота, которую переживает слово в take_words()
            language: Язык стоп-слов для take_words()
            encoding: Кодировка файлов для ingest_line_source()
            tokenizer: Токенизатор (по умолчанию TokenProcessor по config)
        """
        # Пороги take_words() берутся из конфигурации, если не заданы явно
        self.prune_threshold = config.get_prune_threshold() if prune_threshold is None else prune_threshold
        self.min_count = config.get_min_count() if min_count is None else min_count
        self.language = language or config.get_language()
        self.encoding = encoding or config.get_encoding()
        self.tokenizer = tokenizer or TokenProcessor(normalize_unicode=config.is_unicode_normalization_enabled())
        # Ключ - каноническая форма; порядок вставки сохраняется, но смысла не несёт
        self._words: Dict[str, WordRecord] = {}

    # ===== Загрузка =====

    def ingest_text(self, text: Optional[str]) -> None:
        """Разбивает текст на токены и учитывает каждый по порядку."""
        for token in self.tokenizer.tokenize(text):
            self._add_word(token)

    def ingest_line_source(self, source: LineSource) -> None:
        """
        Читает источник построчно и учитывает каждую строку.

        Args:
            source: Путь к файлу, LineSourceInterface или итерируемый набор строк

        Raises:
            SourceNotFoundError: Файл не найден или не открывается (накопитель не изменён)
            SourceReadError: Ошибка посреди чтения; уже прочитанные строки остаются учтёнными
        """
        line_source = self._as_line_source(source)
        lines_read = 0
        for line in line_source.lines():
            self.ingest_text(line)
            lines_read += 1
        logger.debug(f"Прочитано строк из {line_source.name}: {lines_read}, записей: {len(self._words)}")

    def ingest_file(self, path: Union[str, Path]) -> None:
        """Читает текстовый файл построчно."""
        self.ingest_line_source(FileLineSource(path, encoding=self.encoding))

    def ingest_url(self, url: str) -> None:
        """Загрузка по URL не реализована."""
        logger.warning(f"Scanner.ingest_url({url}) не реализован")
        raise UnsupportedSourceError("URL", url)

    def ingest_rss(self, url: str) -> None:
        """Загрузка RSS-ленты не реализована."""
        logger.warning(f"Scanner.ingest_rss({url}) не реализован")
        raise UnsupportedSourceError("RSS", url)

    # ===== Фильтрация =====

    def filter_by_language(self, language: Optional[str]) -> bool:
        """
        Удаляет записи, каноническая форма которых целиком совпадает
        с одним из шаблонов стоп-слов языка.

        Args:
            language: Код языка ("it") или его название ("italian")

        Returns:
            True если фильтр применён, False если язык не поддерживается
            (накопитель при этом не меняется)
        """
        patterns = get_patterns(language)
        if patterns is None:
            logger.warning(f"Scanner.filter_by_language: язык не поддерживается: {language!r}")
            return False

        before = len(self._words)
        self._words = {
            key: record for key, record in self._words.items()
            if not is_stopword(key, patterns)
        }
        logger.debug(f"Стоп-слова ({language}): удалено {before - len(self._words)} записей")
        return True

    def remove_below(self, min_count: int) -> None:
        """Удаляет записи с общей частотой меньше min_count."""
        self._words = {
            key: record for key, record in self._words.items()
            if record.total_count >= min_count
        }

    # ===== Выдача =====

    def take_words(self) -> WordList:
        """
        Применяет итоговую фильтрацию, возвращает список и очищает накопитель.

        Редкие слова отбрасываются только когда записей не меньше
        prune_threshold: в маленьком тексте каждое слово важно.
        Стоп-слова отбрасываются всегда. Список не сортируется.
        """
        if len(self._words) >= self.prune_threshold:
            self.remove_below(self.min_count)
        self.filter_by_language(self.language)

        words = list(self._words.values())
        self._words = {}
        logger.info(f"Выдано слов: {len(words)}")
        return words

    def words(self) -> WordList:
        """Копия текущего содержимого без очистки."""
        return [record.copy() for record in self._words.values()]

    def table_rows(self) -> List[TableRow]:
        """Строки для таблицы "Word" / "#": одно написание и общая частота на запись."""
        return [(record.representative_variant(), record.total_count) for record in self._words.values()]

    def dump_words(self) -> str:
        """Отладочный вывод канонических форм в виде "a", "b", ..."""
        dump = ", ".join(f'"{key}"' for key in self._words)
        logger.debug(f"WordList: {dump}")
        return dump

    # ===== Состояние =====

    def word_count(self) -> int:
        """Число различных записей (не общее число появлений)."""
        return len(self._words)

    def is_empty(self) -> bool:
        return not self._words

    def clear(self) -> None:
        """Очищает накопитель без какой-либо фильтрации."""
        self._words.clear()

    def __len__(self) -> int:
        return self.word_count()

    def _add_word(self, word: str) -> None:
        key = word.lower()
        record = self._words.get(key)
        if record is None:
            self._words[key] = WordRecord.from_token(word)
        else:
            record.add_occurrence(word)

    def _as_line_source(self, source: LineSource) -> LineSourceInterface:
        if isinstance(source, LineSourceInterface):
            return source
        if isinstance(source, (str, Path)):
            return FileLineSource(source, encoding=self.encoding)
        return IterableLineSource(source)
