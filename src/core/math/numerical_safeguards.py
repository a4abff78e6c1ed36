"""
Numerical Safeguards — Checked Unsigned Integer Primitives

Модуль обеспечивает безопасную арифметику над беззнаковыми целыми
фиксированной ширины (по умолчанию 256 бит):
- Проверяемые сложение/вычитание/умножение с явным отказом вместо wraparound
- Степени десяти и десятичные сдвиги мантиссы с контролем переполнения
- Типизированные исключения для трёх классов арифметических отказов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не возвращает значение > max_value (ArithmeticOverflow)
2. Ни одна операция не возвращает отрицательное значение (ArithmeticUnderflow)
3. Деление на ноль никогда не выполняется (DivisionByZero)
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final

from src.core.domain.sci_number import UINT256_MAX

# =============================================================================
# ШИРИНА ЦЕЛОГО
# =============================================================================

# Ширина беззнакового целого для мантисс, произведений и множителей 10^k.
# Мантиссы до ~1e35, произведения до ~1e70, апскейл до 1e35 * 1e40 = 1e75
UINT_BITS: Final[int] = 256


def uint_max(bits: int) -> int:
    """
    Максимальное значение беззнакового целого заданной ширины.

    Args:
        bits: Ширина в битах (> 0)

    Returns:
        2**bits - 1

    Raises:
        ValueError: Если bits <= 0

    Examples:
        >>> uint_max(8)
        255
        >>> uint_max(256) == UINT256_MAX
        True
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << bits) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SciArithmeticError(ArithmeticError):
    """Базовый класс отказов арифметики над SciNumber."""


class DivisionByZero(SciArithmeticError, ZeroDivisionError):
    """
    Мантисса делителя равна нулю.

    Проверяется до выполнения любой арифметики в div.
    """


class ArithmeticUnderflow(SciArithmeticError):
    """
    Беззнаковое вычитание дало бы отрицательный результат.

    Вычитаемое (после выравнивания экспонент) больше уменьшаемого.
    """


class ArithmeticOverflow(SciArithmeticError):
    """
    Промежуточное значение превысило ширину целого.

    Возникает при умножении мантисс, апскейле mantissa * 10^k,
    сложении экспонент и вычислении 10^k.
    """


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint(value: int, name: str, max_value: int = UINT256_MAX) -> None:
    """
    Валидация, что значение — беззнаковое целое в пределах ширины.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        max_value: Максимальное допустимое значение

    Raises:
        ValueError: Если value не int (bool не допускается) или value < 0
        ArithmeticOverflow: Если value > max_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > max_value:
        raise ArithmeticOverflow(f"{name} exceeds integer width: {value} > {max_value}")


# =============================================================================
# ПРОВЕРЯЕМЫЕ ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int, max_value: int = UINT256_MAX) -> int:
    """
    Сложение с проверкой переполнения.

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(UINT256_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    result = a + b
    if result > max_value:
        raise ArithmeticOverflow(f"Addition overflow: {a} + {b} > {max_value}")
    return result


def checked_sub(a: int, b: int) -> int:
    """
    Беззнаковое вычитание.

    Raises:
        ArithmeticUnderflow: Если b > a
    """
    if b > a:
        raise ArithmeticUnderflow(f"Subtraction underflow: {a} - {b} < 0")
    return a - b


def checked_mul(a: int, b: int, max_value: int = UINT256_MAX) -> int:
    """Умножение с проверкой переполнения (ArithmeticOverflow)."""
    result = a * b
    if result > max_value:
        raise ArithmeticOverflow(f"Multiplication overflow: {a} * {b} > {max_value}")
    return result


def truncating_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением.

    Raises:
        DivisionByZero: Если b == 0
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} / 0")
    return a // b


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ И ДЕСЯТИЧНЫЕ СДВИГИ
# =============================================================================


def pow10(k: int, max_value: int = UINT256_MAX) -> int:
    """
    10^k в пределах ширины целого.

    Для 256 бит максимальный допустимый k = 77.

    Args:
        k: Показатель (>= 0)
        max_value: Максимальное представимое значение

    Returns:
        10**k

    Raises:
        ValueError: Если k < 0
        ArithmeticOverflow: Если 10**k > max_value

    Examples:
        >>> pow10(3)
        1000
        >>> pow10(0)
        1
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    # 10^k > 2^(3k)
    if 3 * k > max_value.bit_length():
        raise ArithmeticOverflow(f"10^{k} exceeds integer width")

    result = 10**k
    if result > max_value:
        raise ArithmeticOverflow(f"10^{k} exceeds integer width")
    return result


def shift_down(value: int, digits: int, max_value: int = UINT256_MAX) -> int:
    """
    Сдвиг вправо на digits десятичных разрядов (усечение).

    Отброшенные младшие разряды теряются безвозвратно.

    Examples:
        >>> shift_down(12345, 2)
        123
        >>> shift_down(99, 2)
        0
    """
    return value // pow10(digits, max_value)


def scale_up(value: int, digits: int, max_value: int = UINT256_MAX) -> int:
    """
    Сдвиг влево на digits десятичных разрядов.

    Raises:
        ArithmeticOverflow: Если value * 10^digits > max_value
    """
    return checked_mul(value, pow10(digits, max_value), max_value)
