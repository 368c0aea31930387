"""
Компонент для экспорта списка слов.

Отдаёт строки таблицы "Word" / "#" для отображения и сохраняет
список в Excel, CSV и JSON.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from ..config import config
from ..interfaces.scanner import ResultExporterInterface, TableRow, WordList

logger = logging.getLogger(__name__)

WORD_COLUMN = "Word"
COUNT_COLUMN = "#"
VARIANTS_COLUMN = "Variants"


def format_variants(variants: Dict[str, int]) -> str:
    """Написания в виде 'форма:число; ...' в порядке ключей."""
    return "; ".join(f"{form}:{count}" for form, count in sorted(variants.items()))


class ResultExporter(ResultExporterInterface):
    """Экспортёр списка слов."""

    def __init__(self, output_dir: Optional[str] = None, sheet_name: Optional[str] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            sheet_name: Имя листа Excel
        """
        self.output_dir = Path(output_dir or config.get_results_folder())
        self.sheet_name = sheet_name or config.get_main_sheet_name()

    def to_rows(self, words: WordList) -> List[TableRow]:
        """
        Строки таблицы: одно написание слова и его общая частота.

        Returns:
            Список пар (слово, число), по одной на запись
        """
        return [(record.representative_variant(), record.total_count) for record in words]

    def to_dataframe(self, words: WordList) -> pd.DataFrame:
        """Таблица со столбцами Word, #, Variants."""
        data = [
            {
                WORD_COLUMN: record.representative_variant(),
                COUNT_COLUMN: record.total_count,
                VARIANTS_COLUMN: format_variants(record.variants),
            }
            for record in words
        ]
        return pd.DataFrame(data, columns=[WORD_COLUMN, COUNT_COLUMN, VARIANTS_COLUMN])

    def export_to_excel(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует список в Excel формат.

        Args:
            words: Список слов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу или None, если экспортировать нечего
        """
        if not words:
            logger.info("Нет данных для экспорта в Excel")
            return None

        filepath = self._prepare_path(filepath, '.xlsx')
        df = self.to_dataframe(words)
        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name=self.sheet_name, index=False)

        logger.info(f"Список слов экспортирован в Excel: {filepath}")
        return filepath

    def export_to_csv(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует список в CSV формат.

        Args:
            words: Список слов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу или None, если экспортировать нечего
        """
        if not words:
            logger.info("Нет данных для экспорта в CSV")
            return None

        filepath = self._prepare_path(filepath, '.csv')
        self.to_dataframe(words).to_csv(filepath, index=False, encoding='utf-8')
        logger.info(f"Список слов экспортирован в CSV: {filepath} ({len(words)} строк)")
        return filepath

    def export_to_json(self, words: WordList, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует список в JSON формат.

        Args:
            words: Список слов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу или None, если экспортировать нечего
        """
        if not words:
            logger.info("Нет данных для экспорта в JSON")
            return None

        filepath = self._prepare_path(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'unique_words': len(words),
                'total_occurrences': sum(record.total_count for record in words),
            },
            'words': [
                {
                    'word': record.canonical_form,
                    'count': record.total_count,
                    'variants': record.variants,
                }
                for record in words
            ],
        }
        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)

        logger.info(f"Список слов экспортирован в JSON: {filepath}")
        return filepath

    def export_all_formats(self, words: WordList, base_filename: Optional[str] = None) -> Dict[str, Path]:
        """
        Экспортирует список во все доступные форматы.

        Args:
            words: Список слов
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь {формат: путь} для созданных файлов
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename or config.get_results_filename_prefix()}_{timestamp}"

        exported_files = {}
        for fmt, export, suffix in (
            ('excel', self.export_to_excel, '.xlsx'),
            ('csv', self.export_to_csv, '.csv'),
            ('json', self.export_to_json, '.json'),
        ):
            path = export(words, self.output_dir / f"{base_filename}{suffix}")
            if path is not None:
                exported_files[fmt] = path

        if exported_files:
            logger.info(f"Список слов экспортирован во все форматы в папку: {self.output_dir}")
        return exported_files

    def _prepare_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath
