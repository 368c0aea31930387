"""Наборы итальянских текстов для тестирования.

Содержит простые и сложные примеры, а также текст, насыщенный стоп-словами.
"""

SAMPLE_SIMPLE_TEXT = """
Il gatto dorme. Il Gatto mangia, il GATTO gioca.
""".strip()


SAMPLE_COMPLEX_TEXT = """
Anche se gli studenti studiano spesso di sera, alcuni preferiscono
alzarsi presto per ripassare: ciò può migliorare la memoria, più di quanto
si pensi. Perché no? L'uso della memoria è un'abitudine.
""".strip()


SAMPLE_STOPWORD_TEXT = """
Che cosa fa il gatto di Maria? Non lo so, ma il gatto dorme con la nonna.
""".strip()


def distinct_words(count: int, prefix: str = "parola") -> str:
    """Текст из count различных слов, не совпадающих со стоп-словами."""
    return " ".join(f"{prefix}{i}" for i in range(count))
