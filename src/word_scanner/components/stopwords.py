"""
Таблицы стоп-слов по языкам.

Шаблоны в glob-синтаксисе: "?" - ровно один любой символ, это покрывает
слова с диакритикой и без ("pi?" -> "più" и "piu"). Совпадение проверяется
по всей строке, не по подстроке.
"""

from fnmatch import fnmatchcase
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


ITALIAN_STOPWORDS: Tuple[str, ...] = (
    "?", "a?", "all", "alla", "anche", "anzich?", "che", "ci", "cio?",
    "come", "con", "cos?", "cui", "da", "da?", "dall?", "degli", "de?",
    "dell", "della", "delle", "di", "dove", "due", "ed", "far?", "fino",
    "fra", "gli", "i?", "l?", "loro", "nel", "nell", "nella", "nelle",
    "non", "per", "pi?", "poi", "pu?", "quale", "quell?", "quest?", "sar?",
    "s?", "senza", "su?", "sull", "sull?", "tali", "tra", "un", "un?", "uso",
)

# Язык (ISO 639-1) -> шаблоны. Новые языки добавляются записью сюда.
STOPWORD_PATTERNS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "it": ITALIAN_STOPWORDS,
})

LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType({
    "italian": "it",
    "italiano": "it",
})

DEFAULT_LANGUAGE = "it"


def resolve_language(language: Optional[str]) -> Optional[str]:
    """
    Приводит обозначение языка к коду таблицы.

    Returns:
        Код языка или None, если таблицы для него нет
    """
    if not language:
        return None
    code = str(language).strip().lower()
    code = LANGUAGE_ALIASES.get(code, code)
    return code if code in STOPWORD_PATTERNS else None


def get_patterns(language: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Шаблоны стоп-слов для языка или None."""
    code = resolve_language(language)
    if code is None:
        return None
    return STOPWORD_PATTERNS[code]


def is_stopword(word: str, patterns: Tuple[str, ...]) -> bool:
    """Проверяет, совпадает ли слово целиком хотя бы с одним шаблоном."""
    return any(fnmatchcase(word, pattern) for pattern in patterns)


def supported_languages() -> Tuple[str, ...]:
    return tuple(STOPWORD_PATTERNS)
