from pathlib import Path

import pytest

from word_scanner.scanner import Scanner


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Простые наборы итальянских текстов для тестирования."""
    from .fixtures.sample_texts import SAMPLE_SIMPLE_TEXT, SAMPLE_COMPLEX_TEXT, SAMPLE_STOPWORD_TEXT

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "complex": SAMPLE_COMPLEX_TEXT,
        "stopwords": SAMPLE_STOPWORD_TEXT,
    }


@pytest.fixture
def scanner() -> Scanner:
    """Сканер с порогами по умолчанию, независимо от config.yaml и ENV."""
    return Scanner(prune_threshold=100, min_count=2, language="it")


@pytest.fixture
def text_file(tmp_path: Path):
    """Фабрика текстовых файлов во временной директории."""
    def _make(content: str, name: str = "testo.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _make


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
