"""
Sci Arithmetic — Четыре операции над SciNumber

Модуль реализует add/sub/mul/div с ограниченной шириной мантисс:
- add/sub: выравнивание экспонент сдвигом меньшего операнда вниз
- mul: произведение нормализованных мантисс (≤ ~1e70) и сумма экспонент
- div: апскейл делимого вместо сдвига делителя для сохранения точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы никогда не мутируют, каждая операция возвращает новый SciNumber
2. Переполнение/underflow/деление на ноль → типизированное исключение,
   никогда не молча неверный результат
3. Отсечение незначимого слагаемого (diff > 31) — политика точности, не ошибка

ПОВЕДЕНИЕ ПО ВЕТВЯМ (воспроизводится как есть):
    add:  операнды нормализуются, результат — нет;
          отсечение diff > 31 только при a.exponent > b.exponent
    sub:  операнды НЕ нормализуются; те же три ветви, что у add
    mul:  операнды и результат нормализуются
    div:  a.exponent < b.exponent → результат не нормализуется;
          a.exponent > b.exponent → апскейл на 10^min(diff, 40), нормализация
"""

import logging
from enum import Enum
from typing import Callable

from src.core.domain.sci_number import SciNumber
from src.core.math.normalization import DEFAULT_CONFIG, ArithmeticConfig, normalize
from src.core.math.numerical_safeguards import (
    DivisionByZero,
    checked_add,
    checked_mul,
    checked_sub,
    scale_up,
    shift_down,
    truncating_div,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Бинарная операция, выбираемая вызывающей стороной"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


# =============================================================================
# ВЫРАВНИВАНИЕ ЭКСПОНЕНТ (add/sub)
# =============================================================================


def _combine_aligned(
    a: SciNumber,
    b: SciNumber,
    combine: Callable[[int, int], int],
    config: ArithmeticConfig,
) -> SciNumber:
    """
    Выравнивание экспонент и комбинирование мантисс.

    Мантисса операнда с меньшей экспонентой сдвигается вниз на diff
    разрядов (усечение). Если a.exponent - b.exponent > negligibility_cutoff,
    b отбрасывается и возвращается a без изменений. В обратном направлении
    отсечение не применяется.
    """
    max_value = config.max_value

    if a.exponent == b.exponent:
        return SciNumber(mantissa=combine(a.mantissa, b.mantissa), exponent=a.exponent)

    if a.exponent > b.exponent:
        diff = a.exponent - b.exponent

        if diff > config.negligibility_cutoff:
            logger.debug(
                "Operand %s dropped as negligible: exponent diff %d > cutoff %d",
                b,
                diff,
                config.negligibility_cutoff,
            )
            return a

        aligned = shift_down(b.mantissa, diff, max_value)
        return SciNumber(mantissa=combine(a.mantissa, aligned), exponent=a.exponent)

    diff = b.exponent - a.exponent
    aligned = shift_down(a.mantissa, diff, max_value)
    return SciNumber(mantissa=combine(aligned, b.mantissa), exponent=b.exponent)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def add(a_: SciNumber, b_: SciNumber, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Сложение.

    Оба операнда нормализуются, затем экспоненты выравниваются.
    Результат НЕ нормализуется повторно.

    Args:
        a_: Первое слагаемое
        b_: Второе слагаемое
        config: Конфигурация движка

    Returns:
        Сумма при экспоненте большего операнда

    Raises:
        ArithmeticOverflow: Если сумма мантисс или 10^diff превышает ширину

    Examples:
        >>> add(SciNumber(mantissa=5, exponent=2), SciNumber(mantissa=123, exponent=0))
        SciNumber(mantissa=6, exponent=2)
    """
    a = normalize(a_, config)
    b = normalize(b_, config)

    def _add(x: int, y: int) -> int:
        return checked_add(x, y, config.max_value)

    return _combine_aligned(a, b, _add, config)


def sub(a: SciNumber, b: SciNumber, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Вычитание.

    Операнды НЕ нормализуются: для канонического выравнивания вызывающая
    сторона нормализует их сама. Ветви выравнивания те же, что у add.

    Raises:
        ArithmeticUnderflow: Если выровненная мантисса b больше мантиссы a
        ArithmeticOverflow: Если 10^diff превышает ширину
    """
    return _combine_aligned(a, b, checked_sub, config)


def mul(a_: SciNumber, b_: SciNumber, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Умножение.

    Мантиссы нормализованных операндов ≤ ~1e35, поэтому произведение
    ≤ ~1e70 и укладывается в 256 бит. Результат нормализуется.

    Raises:
        ArithmeticOverflow: Если произведение мантисс или сумма экспонент
            превышает ширину целого
    """
    a = normalize(a_, config)
    b = normalize(b_, config)

    product = checked_mul(a.mantissa, b.mantissa, config.max_value)
    exponent = checked_add(a.exponent, b.exponent, config.max_value)

    return normalize(SciNumber(mantissa=product, exponent=exponent), config)


def div(a_: SciNumber, b_: SciNumber, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Деление с усечением.

    Ветви:
        a.exponent == b.exponent: a.m // b.m, exponent 0
        a.exponent <  b.exponent: (a.m // 10^diff) // b.m, exponent 0,
                                  без нормализации
        a.exponent >  b.exponent: diff >= 40 → (a.m * 10^40) // b.m,
                                  exponent diff - 40;
                                  иначе (a.m * 10^diff) // b.m, exponent 0;
                                  результат нормализуется

    Апскейл делимого сохраняет младшие разряды частного, которые иначе
    были бы потеряны при сдвиге делителя вниз.

    Args:
        a_: Делимое
        b_: Делитель (мантисса != 0)
        config: Конфигурация движка

    Returns:
        Частное

    Raises:
        DivisionByZero: Если b_.mantissa == 0 (проверяется до арифметики)
        ArithmeticOverflow: Если апскейл или 10^diff превышает ширину

    Examples:
        >>> div(SciNumber(mantissa=100, exponent=3), SciNumber(mantissa=4, exponent=3))
        SciNumber(mantissa=25, exponent=0)
        >>> div(SciNumber(mantissa=1, exponent=2), SciNumber(mantissa=3, exponent=0))
        SciNumber(mantissa=33, exponent=0)
    """
    if b_.mantissa == 0:
        raise DivisionByZero(f"Division by zero: {a_} / {b_}")

    a = normalize(a_, config)
    b = normalize(b_, config)
    max_value = config.max_value

    if a.exponent == b.exponent:
        return SciNumber(mantissa=truncating_div(a.mantissa, b.mantissa), exponent=0)

    if a.exponent < b.exponent:
        diff = b.exponent - a.exponent
        aligned = shift_down(a.mantissa, diff, max_value)
        return SciNumber(mantissa=truncating_div(aligned, b.mantissa), exponent=0)

    diff = a.exponent - b.exponent
    upscale = config.division_upscale_digits

    if diff >= upscale:
        logger.debug(
            "Dividend upscaled by 10^%d, exponent diff %d carried as %d",
            upscale,
            diff,
            diff - upscale,
        )
        scaled = scale_up(a.mantissa, upscale, max_value)
        exponent = diff - upscale
    else:
        scaled = scale_up(a.mantissa, diff, max_value)
        exponent = 0

    quotient = truncating_div(scaled, b.mantissa)
    return normalize(SciNumber(mantissa=quotient, exponent=exponent), config)


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================

_OPERATIONS: dict[Operation, Callable[[SciNumber, SciNumber, ArithmeticConfig], SciNumber]] = {
    Operation.ADD: add,
    Operation.SUB: sub,
    Operation.MUL: mul,
    Operation.DIV: div,
}


def apply_operation(
    op: Operation | str,
    a: SciNumber,
    b: SciNumber,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> SciNumber:
    """
    Выполнение операции, выбранной вызывающей стороной.

    Args:
        op: Operation или её строковое имя ("add", "sub", "mul", "div")
        a: Первый операнд
        b: Второй операнд
        config: Конфигурация движка

    Returns:
        Результат операции

    Raises:
        ValueError: Если op не является известной операцией
    """
    try:
        operation = Operation(op)
    except ValueError:
        raise ValueError(f"Unknown operation: {op!r}") from None

    return _OPERATIONS[operation](a, b, config)
