#!/usr/bin/env python3
"""
Интерфейс командной строки для Word Scanner

Собирает слова из файлов и строк, применяет итоговую фильтрацию,
печатает таблицу "Word" / "#" и при необходимости экспортирует её.
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from .components.exporter import ResultExporter
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.stopwords import supported_languages
from .errors import ScannerError
from .scanner import Scanner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word_scanner",
        description="Word Scanner - частотный список слов для облака слов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m word_scanner.cli testo.txt                  # Таблица слов из файла
  python -m word_scanner.cli a.txt b.txt --sort --top 20
  python -m word_scanner.cli --text "il gatto e il cane" --min-count 1
  python -m word_scanner.cli testo.txt --export all --output data/results
        """
    )
    parser.add_argument('files', nargs='*', help='Текстовые файлы для чтения')
    parser.add_argument('--text', action='append', default=[], help='Текст для разбора (можно повторять)')
    parser.add_argument('--url', action='append', default=[], help='Адрес страницы (не поддерживается)')
    parser.add_argument('--rss', action='append', default=[], help='Адрес RSS-ленты (не поддерживается)')
    parser.add_argument('--language', help=f'Язык стоп-слов ({", ".join(supported_languages())})')
    parser.add_argument('--min-count', type=int, help='Минимальная частота слова при отсечении')
    parser.add_argument('--threshold', type=int, help='С какого числа слов отсекать редкие')
    parser.add_argument('--encoding', help='Кодировка входных файлов')
    parser.add_argument('--sort', action='store_true', help='Сортировать по убыванию частоты')
    parser.add_argument('--top', type=int, help='Показать только N первых строк')
    parser.add_argument('--export', choices=['excel', 'csv', 'json', 'all'], help='Формат экспорта')
    parser.add_argument('--output', help='Папка для экспорта')
    return parser


def ingest_sources(scanner: Scanner, args: argparse.Namespace) -> bool:
    """Загружает все источники; возвращает False, если хотя бы один не удался."""
    success = True

    for path in args.files:
        try:
            scanner.ingest_file(path)
            print(f"📄 {path}: слов в накопителе {scanner.word_count()}")
        except ScannerError as e:
            print(f"❌ {e}")
            success = False

    for text in args.text:
        scanner.ingest_text(text)

    for url in args.url:
        try:
            scanner.ingest_url(url)
        except ScannerError as e:
            print(f"⚠️ {e}")
            success = False

    for url in args.rss:
        try:
            scanner.ingest_rss(url)
        except ScannerError as e:
            print(f"⚠️ {e}")
            success = False

    return success


def print_table(rows: List[tuple]) -> None:
    """Печатает таблицу из двух столбцов."""
    width = max([len("Word")] + [len(word) for word, _ in rows])
    print(f"{'Word':<{width}}  #")
    print("-" * (width + 8))
    for word, count in rows:
        print(f"{word:<{width}}  {count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    from .config import config

    # Специальная обработка WORD_SCANNER_DEBUG для переопределения уровня логирования
    if os.environ.get('WORD_SCANNER_DEBUG') == '1':
        config._set_nested(config.config_data, 'logging.level', 'DEBUG')
        config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.files or args.text or args.url or args.rss):
        parser.error("нужен хотя бы один источник: файл, --text, --url или --rss")

    scanner = Scanner(
        prune_threshold=args.threshold,
        min_count=args.min_count,
        language=args.language,
        encoding=args.encoding,
    )

    success = ingest_sources(scanner, args)
    scanner.dump_words()

    words = scanner.take_words()
    if args.sort:
        words = FrequencyAnalyzer().sort_by_frequency(words)
    if args.top is not None:
        words = words[:max(0, args.top)]

    exporter = ResultExporter(output_dir=args.output)
    print_table(exporter.to_rows(words))
    print(f"\n📊 Всего слов: {len(words)}")

    if args.export:
        try:
            if args.export == 'all':
                exported = exporter.export_all_formats(words)
                for path in exported.values():
                    print(f"✅ Экспортировано: {path}")
            else:
                export = {
                    'excel': exporter.export_to_excel,
                    'csv': exporter.export_to_csv,
                    'json': exporter.export_to_json,
                }[args.export]
                path = export(words, exporter.output_dir / config.get_results_filename_prefix())
                if path:
                    print(f"✅ Экспортировано: {path}")
        except OSError as e:
            logger.error(f"Ошибка экспорта: {e}")
            print(f"❌ Ошибка экспорта: {e}")
            success = False

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
