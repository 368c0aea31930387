"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс WORD_SCANNER_, вложенность через __)
- Валидация порогов сканера
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WORD_SCANNER_'
ENV_PROFILE = 'WORD_SCANNER_ENV'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_env()
        self._load_config()
        self._apply_env_overrides()
        self._validate()
        self._configure_logging_if_needed()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла (не перезаписывая уже заданные)"""
        if load_dotenv():
            logger.debug("Переменные окружения загружены из .env")

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"Некорректный формат конфигурации {self.config_path}: ожидался словарь")
            return
        self._merge(self.config_data, loaded)
        logger.debug(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (WORD_SCANNER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE:
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    @staticmethod
    def _parse_env_value(val: str) -> Any:
        if val.lower() in ('true', 'false'):
            return val.lower() == 'true'
        try:
            if '.' in val:
                return float(val)
            return int(val)
        except ValueError:
            return val

    def _validate(self) -> None:
        """Проверяет диапазоны порогов сканера."""
        defaults = self._get_default_config()['scanner']
        try:
            min_count = int(self.get('scanner.min_count', defaults['min_count']))
        except (TypeError, ValueError):
            logger.warning("scanner.min_count не число — используется значение по умолчанию")
            min_count = defaults['min_count']
        if min_count < 1:
            logger.warning("scanner.min_count < 1 — принудительно установлено в 1")
            min_count = 1
        self._set_nested(self.config_data, 'scanner.min_count', min_count)

        try:
            threshold = int(self.get('scanner.prune_threshold', defaults['prune_threshold']))
        except (TypeError, ValueError):
            logger.warning("scanner.prune_threshold не число — используется значение по умолчанию")
            threshold = defaults['prune_threshold']
        if threshold < 0:
            logger.warning("scanner.prune_threshold < 0 — принудительно установлено в 0")
            threshold = 0
        self._set_nested(self.config_data, 'scanner.prune_threshold', threshold)

        if not str(self.get('scanner.encoding') or '').strip():
            self._set_nested(self.config_data, 'scanner.encoding', defaults['encoding'])

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_word_scanner_configured", False) and not force:
            current = getattr(root, "_word_scanner_settings", None)
            if current == (console_level_name, file_level_name, desired_fmt, desired_file):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")
                desired_file = None

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_word_scanner_configured", True)
        setattr(root, "_word_scanner_settings", (console_level_name, file_level_name, desired_fmt, desired_file))

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'scanner': {
                # take_words() отбрасывает единичные слова только если записей не меньше порога
                'prune_threshold': 100,
                'min_count': 2,
                'language': "it",
                'encoding': "utf-8",
                'normalize_unicode': True
            },
            'export': {
                'results_folder': "data/results",
                'results_filename_prefix': "word_scan",
                'main_sheet_name': "Words"
            },
            'logging': {
                'level': "INFO",
                'file_level': "DEBUG",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/word_scanner.log",
                'max_log_files': 10
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения (включая загруженные из .env)"""
        return os.environ.get(key, default)

    def get_scanner_config(self) -> Dict[str, Any]:
        """Получает конфигурацию сканера"""
        return self.config_data.get('scanner', {})

    def get_prune_threshold(self) -> int:
        """Минимальное число записей, при котором take_words() отбрасывает редкие слова"""
        return int(self.get('scanner.prune_threshold', 100))

    def get_min_count(self) -> int:
        """Минимальная частота, которую переживает слово при отсечении"""
        return int(self.get('scanner.min_count', 2))

    def get_language(self) -> str:
        """Язык таблицы стоп-слов для take_words()"""
        return str(self.get('scanner.language', "it"))

    def get_encoding(self) -> str:
        """Кодировка входных файлов"""
        return str(self.get('scanner.encoding', "utf-8"))

    def is_unicode_normalization_enabled(self) -> bool:
        """Приводить ли текст к NFC перед токенизацией"""
        return bool(self.get('scanner.normalize_unicode', True))

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('export.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('export.results_filename_prefix', "word_scan")

    def get_main_sheet_name(self) -> str:
        """Получает название листа Excel"""
        return self.get('export.main_sheet_name', "Words")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Путь к файлу лога; {timestamp} в шаблоне заменяется меткой сессии"""
        template = self.get('logging.log_file', "logs/word_scanner.log")
        if "{timestamp}" in template:
            return template.replace("{timestamp}", datetime.now().strftime("%Y%m%d_%H%M%S"))
        return template

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def get_log_file_glob(self) -> str:
        """Шаблон имён файлов логов, построенный из logging.log_file"""
        template = Path(self.get('logging.log_file', "logs/word_scanner.log"))
        if "{timestamp}" in template.name:
            return template.name.replace("{timestamp}", "*")
        return f"{template.stem}*{template.suffix}"

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        template = Path(self.get('logging.log_file', "logs/word_scanner.log"))
        logs_dir = template.parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob(self.get_log_file_glob()))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:len(log_files) - max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
