"""
Sequence Ops — filter → transform → reduce над последовательностями целых

Чистые функции без состояния:
- filter_even / iter_even: чётные элементы в исходном порядке
- square_all / iter_squares: поэлементный квадрат, та же длина и порядок
- sum_integral: однопроходная сумма, 0 для пустого входа

Lazy-варианты (iter_*) дают те же элементы, что и eager-функции.
Eager-функции всегда возвращают новый list, вход не мутируется.

Переполнение задаётся явно через OverflowPolicy (см. integral_ops).
По умолчанию WIDEN: Python int не переполняется.
"""

from collections.abc import Iterable, Iterator
from numbers import Integral
from typing import TypeVar

from src.core.math.integral_ops import (
    DEFAULT_INTEGER_BITS,
    OverflowPolicy,
    apply_overflow_policy,
    validate_integral,
)

T = TypeVar("T", bound=Integral)


# =============================================================================
# PARITY FILTER
# =============================================================================


def is_even(n: int) -> bool:
    """
    Предикат чётности.

    Ноль и отрицательные чётные числа считаются чётными.

    Examples:
        >>> is_even(0)
        True
        >>> is_even(-4)
        True
        >>> is_even(7)
        False
    """
    return n % 2 == 0


def iter_even(sequence: Iterable[T]) -> Iterator[T]:
    """Lazy view: чётные элементы sequence в исходном порядке."""
    for n in sequence:
        validate_integral(n, "sequence element")
        if is_even(n):
            yield n


def filter_even(sequence: Iterable[T]) -> list[T]:
    """
    Чётная подпоследовательность.

    Тотальная функция: пустой вход → пустой результат.
    Идемпотентна: filter_even(filter_even(s)) == filter_even(s).

    Args:
        sequence: Любая последовательность целых

    Returns:
        Новый список только из чётных элементов, порядок сохранён

    Raises:
        TypeError: Если элемент не целый

    Examples:
        >>> filter_even([1, 2, 3, 4, 5, 6])
        [2, 4, 6]
        >>> filter_even([-3, -2, 0, 1])
        [-2, 0]
    """
    return list(iter_even(sequence))


# =============================================================================
# TRANSFORM
# =============================================================================


def iter_squares(
    sequence: Iterable[int],
    policy: OverflowPolicy = OverflowPolicy.WIDEN,
    bits: int = DEFAULT_INTEGER_BITS,
) -> Iterator[int]:
    """Lazy view: n * n для каждого элемента, с применением policy."""
    for n in sequence:
        validate_integral(n, "sequence element")
        yield apply_overflow_policy(n * n, policy, bits)


def square_all(
    sequence: Iterable[int],
    policy: OverflowPolicy = OverflowPolicy.WIDEN,
    bits: int = DEFAULT_INTEGER_BITS,
) -> list[int]:
    """
    Поэлементный квадрат.

    Args:
        sequence: Любая последовательность целых
        policy: Политика переполнения (default: WIDEN)
        bits: Разрядность для WRAP/SATURATE/CHECKED (default: 32)

    Returns:
        Новый список той же длины и порядка

    Raises:
        TypeError: Если элемент не целый
        IntegerOverflowError: При policy == CHECKED и выходе за диапазон

    Examples:
        >>> square_all([2, 4, 6])
        [4, 16, 36]
        >>> square_all([46341], policy=OverflowPolicy.WRAP)
        [-2147479015]
    """
    return list(iter_squares(sequence, policy, bits))


# =============================================================================
# REDUCTION
# =============================================================================


def sum_integral(
    sequence: Iterable[T],
    policy: OverflowPolicy = OverflowPolicy.WIDEN,
    bits: int = DEFAULT_INTEGER_BITS,
) -> T | int:
    """
    Сумма последовательности целых.

    Однопроходное накопление слева направо, начиная с 0 (O(1) доп. памяти).
    Обобщена по целочисленному типу элемента (numbers.Integral):
    работает с int и любыми зарегистрированными Integral типами.

    Policy применяется к каждой промежуточной сумме, как у регистра
    фиксированной разрядности.

    Args:
        sequence: Последовательность целых
        policy: Политика переполнения (default: WIDEN)
        bits: Разрядность для WRAP/SATURATE/CHECKED (default: 32)

    Returns:
        Сумма того же типа, что и элементы (0 + n даёт тип n);
        для пустого входа int 0

    Raises:
        TypeError: Если элемент не целый (float, Decimal, str, bool)
        IntegerOverflowError: При policy == CHECKED и выходе за диапазон

    Examples:
        >>> sum_integral([4, 16, 36])
        56
        >>> sum_integral([])
        0
    """
    total = 0
    for n in sequence:
        validate_integral(n, "sequence element")
        total = apply_overflow_policy(total + n, policy, bits)
    return total
