"""
Formatting — Текстовое представление последовательностей

DisplayList: список base-10 меток, по одной на элемент, порядок сохранён.
render: {"a", "b", "c"}: каждая метка в двойных кавычках, разделитель ", ".

Ограничение: кавычки внутри меток не экранируются.
"""

from collections.abc import Iterable
from typing import Final

from src.core.math.integral_ops import to_decimal_str

# Заголовки строк отчёта
ORIGINAL_LABEL: Final[str] = "Original numbers"
EVENS_LABEL: Final[str] = "Even numbers"
SQUARED_EVENS_LABEL: Final[str] = "Squared even numbers"
TOTAL_LABEL: Final[str] = "Sum of squared even numbers"

LABEL_SEPARATOR: Final[str] = ", "


def to_labels(sequence: Iterable[int]) -> list[str]:
    """
    Конверсия целых в каноническое base-10 представление.

    Тотальна: длина числа не ограничена (см. to_decimal_str).

    Examples:
        >>> to_labels([1, -2, 30])
        ['1', '-2', '30']
    """
    return [to_decimal_str(n) for n in sequence]


def render(labels: Iterable[str]) -> str:
    """
    Сборка DisplayList в одну строку.

    Args:
        labels: Упорядоченные текстовые метки (может быть пустым)

    Returns:
        '{"a", "b"}'; для пустого входа '{}'

    Examples:
        >>> render(["1", "2"])
        '{"1", "2"}'
        >>> render([])
        '{}'
    """
    quoted = LABEL_SEPARATOR.join(f'"{label}"' for label in labels)
    return "{" + quoted + "}"


def render_sequence(sequence: Iterable[int]) -> str:
    """render(to_labels(sequence))"""
    return render(to_labels(sequence))


def format_report_lines(
    original: Iterable[int],
    evens: Iterable[int],
    squared_evens: Iterable[int],
    total: int,
) -> list[str]:
    """
    Четыре строки отчёта в фиксированном порядке.

    Returns:
        [Original..., Even..., Squared even..., Sum of squared even...]
    """
    return [
        f"{ORIGINAL_LABEL}: {render_sequence(original)}",
        f"{EVENS_LABEL}: {render_sequence(evens)}",
        f"{SQUARED_EVENS_LABEL}: {render_sequence(squared_evens)}",
        f"{TOTAL_LABEL}: {to_decimal_str(total)}",
    ]
