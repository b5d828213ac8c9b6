"""
Integral Ops — Целочисленные примитивы и политики переполнения

Модуль задаёт явное поведение при выходе результата за фиксированную
разрядность целого (по умолчанию 32 бита со знаком):
- WIDEN: без ограничений (Python int произвольной точности)
- WRAP: two's-complement wrap-around, как у 32-битного регистра
- SATURATE: clamp к границам диапазона
- CHECKED: IntegerOverflowError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения внутри диапазона никогда не изменяются ни одной политикой
2. WIDEN никогда не изменяет значение
3. Все операции детерминированы и воспроизводимы
"""

import logging
from enum import Enum
from numbers import Integral
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ РАЗРЯДНОСТИ
# =============================================================================

# Разрядность по умолчанию (signed int32)
DEFAULT_INTEGER_BITS: Final[int] = 32

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# Порог прямого str(int): ~3010 цифр, ниже лимита CPython (4300 цифр)
DIRECT_STR_MAX_BITS: Final[int] = 10_000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowError(ArithmeticError):
    """
    Результат вышел за границы signed диапазона заданной разрядности.

    Возникает только при OverflowPolicy.CHECKED.
    """

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        low, high = int_bounds(bits)
        super().__init__(
            f"Integer overflow: {to_decimal_str(value)} outside signed "
            f"{bits}-bit range [{low}, {high}]"
        )


# =============================================================================
# ПОЛИТИКИ ПЕРЕПОЛНЕНИЯ
# =============================================================================


class OverflowPolicy(str, Enum):
    """Политика обработки переполнения"""

    WIDEN = "widen"
    WRAP = "wrap"
    SATURATE = "saturate"
    CHECKED = "checked"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_integral(value: object) -> bool:
    """
    Проверка, является ли значение целым (numbers.Integral, но не bool).

    bool формально Integral, но в последовательностях чисел считается ошибкой типа.
    """
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_integral(value: object, name: str = "value") -> None:
    """
    Валидация, что значение целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не numbers.Integral (или является bool)
    """
    if not is_integral(value):
        raise TypeError(
            f"{name} must be an integral number, got {type(value).__name__}: {value!r}"
        )


def validate_bits(bits: int) -> None:
    """
    Валидация разрядности.

    Raises:
        ValueError: Если bits не положительное целое
    """
    if not is_integral(bits) or bits <= 0:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")


# =============================================================================
# ГРАНИЦЫ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def int_bounds(bits: int = DEFAULT_INTEGER_BITS) -> tuple[int, int]:
    """
    Границы signed диапазона заданной разрядности.

    Args:
        bits: Разрядность (default: 32)

    Returns:
        (min, max) = (-2**(bits-1), 2**(bits-1) - 1)

    Examples:
        >>> int_bounds(8)
        (-128, 127)
        >>> int_bounds(32)
        (-2147483648, 2147483647)
    """
    validate_bits(bits)
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def to_decimal_str(value: int) -> str:
    """
    Каноническое base-10 представление целого любой длины.

    В отличие от str(int), не ограничено лимитом CPython на число цифр:
    большие значения делятся пополам по степени 10 (divide-and-conquer),
    каждая часть ниже DIRECT_STR_MAX_BITS конвертируется напрямую.

    Examples:
        >>> to_decimal_str(-42)
        '-42'
        >>> len(to_decimal_str(10**5000))
        5001
    """
    value = int(value)
    if value < 0:
        return "-" + _decimal_digits(-value, 0)
    return _decimal_digits(value, 0)


def _decimal_digits(value: int, width: int) -> str:
    # value >= 0; width > 0 дополняет ведущими нулями (младшие половины)
    if value.bit_length() <= DIRECT_STR_MAX_BITS:
        return str(value).zfill(width)

    # half меньше числа цифр value, поэтому high >= 1
    half = (value.bit_length() * 30103 // 100000) // 2
    high, low = divmod(value, 10**half)
    return _decimal_digits(high, max(width - half, 0)) + _decimal_digits(low, half)


def fits_in_width(value: int, bits: int = DEFAULT_INTEGER_BITS) -> bool:
    """Проверка, помещается ли value в signed диапазон разрядности bits."""
    low, high = int_bounds(bits)
    return low <= value <= high


def wrap_to_width(value: int, bits: int = DEFAULT_INTEGER_BITS) -> int:
    """
    Two's-complement wrap-around к signed диапазону.

    Алгоритм:
        u = value mod 2**bits
        result = u - 2**bits если u >= 2**(bits-1), иначе u

    Examples:
        >>> wrap_to_width(2**31, 32)
        -2147483648
        >>> wrap_to_width(46341 * 46341, 32)
        -2147479015
        >>> wrap_to_width(-1, 32)
        -1
    """
    validate_bits(bits)
    modulus = 1 << bits
    unsigned = value % modulus

    if unsigned >= modulus >> 1:
        return unsigned - modulus
    return unsigned


def saturate_to_width(value: int, bits: int = DEFAULT_INTEGER_BITS) -> int:
    """
    Clamp значения к signed диапазону.

    Examples:
        >>> saturate_to_width(2**40, 32)
        2147483647
        >>> saturate_to_width(-(2**40), 32)
        -2147483648
    """
    low, high = int_bounds(bits)
    return max(low, min(value, high))


def apply_overflow_policy(
    value: int,
    policy: OverflowPolicy = OverflowPolicy.WIDEN,
    bits: int = DEFAULT_INTEGER_BITS,
) -> int:
    """
    Применение политики переполнения к промежуточному результату.

    Args:
        value: Результат арифметической операции
        policy: Политика переполнения (default: WIDEN)
        bits: Разрядность для WRAP/SATURATE/CHECKED (default: 32)

    Returns:
        value без изменений, если оно в диапазоне или policy == WIDEN;
        иначе результат wrap/saturate

    Raises:
        IntegerOverflowError: При policy == CHECKED и выходе за диапазон
        ValueError: Неизвестная политика или некорректный bits
    """
    policy = OverflowPolicy(policy)
    validate_bits(bits)

    if policy is OverflowPolicy.WIDEN or fits_in_width(value, bits):
        return value

    if policy is OverflowPolicy.CHECKED:
        raise IntegerOverflowError(value, bits)

    if policy is OverflowPolicy.WRAP:
        adjusted = wrap_to_width(value, bits)
    else:
        adjusted = saturate_to_width(value, bits)

    logger.debug(
        "overflow adjusted: %d-bit value -> %d (policy=%s, bits=%d)",
        value.bit_length(),
        adjusted,
        policy.value,
        bits,
    )
    return adjusted
