"""
Normalization — Каноническая форма SciNumber

Модуль приводит значения к канонической форме с ограниченной мантиссой:
- normalize: мантисса ≤ 1e35 (усечением с компенсацией экспонентой)
- from_integer: конверсия обычного целого, мантисса ≤ 1e30
- to_integer: обратное восстановление величины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize идемпотентна: normalize(normalize(x)) == normalize(x)
2. Экспонента при нормализации только растёт
3. Потолки 1e35 (normalize) и 1e30 (from_integer) различны
4. Усечение теряет младшие разряды безвозвратно (один разряд на каждом шаге)

Граница потолка: условие цикла строгое (mantissa > ceiling), поэтому
мантисса ровно 1e35 считается нормализованной. Режим
strict_mantissa_ceiling=True ужесточает условие до mantissa >= ceiling.
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.sci_number import SciNumber
from src.core.math.numerical_safeguards import (
    UINT_BITS,
    checked_add,
    uint_max,
    validate_uint,
)

# =============================================================================
# ПАРАМЕТРЫ ДВИЖКА
# =============================================================================

# Потолок мантиссы после normalize
MANTISSA_CEILING: Final[int] = 10**35

# Потолок мантиссы при конверсии из обычного целого
CONVERSION_CEILING: Final[int] = 10**30

# Разница экспонент, при которой меньший слагаемый отбрасывается (add/sub)
NEGLIGIBILITY_CUTOFF: Final[int] = 31

# Разрядов апскейла делимого при большой разнице экспонент (div)
DIVISION_UPSCALE_DIGITS: Final[int] = 40


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация движка научной нотации.

    Значения по умолчанию воспроизводят эталонное поведение; их изменение
    меняет наблюдаемые результаты операций.
    """

    integer_bits: int = UINT_BITS
    mantissa_ceiling: int = MANTISSA_CEILING
    conversion_ceiling: int = CONVERSION_CEILING
    negligibility_cutoff: int = NEGLIGIBILITY_CUTOFF
    division_upscale_digits: int = DIVISION_UPSCALE_DIGITS
    strict_mantissa_ceiling: bool = False

    def __post_init__(self) -> None:
        if self.integer_bits <= 0:
            raise ValueError(f"integer_bits must be positive, got {self.integer_bits}")
        if self.integer_bits > UINT_BITS:
            # SciNumber хранит компоненты не шире 256 бит
            raise ValueError(f"integer_bits must be <= {UINT_BITS}, got {self.integer_bits}")
        if self.mantissa_ceiling <= 0:
            raise ValueError(f"mantissa_ceiling must be positive, got {self.mantissa_ceiling}")
        if self.conversion_ceiling <= 0:
            raise ValueError(
                f"conversion_ceiling must be positive, got {self.conversion_ceiling}"
            )
        if self.negligibility_cutoff < 0:
            raise ValueError(
                f"negligibility_cutoff must be non-negative, got {self.negligibility_cutoff}"
            )
        if self.division_upscale_digits < 0:
            raise ValueError(
                "division_upscale_digits must be non-negative, "
                f"got {self.division_upscale_digits}"
            )

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение для integer_bits"""
        return uint_max(self.integer_bits)


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()


# =============================================================================
# NORMALIZE
# =============================================================================


def _exceeds_ceiling(mantissa: int, ceiling: int, strict: bool) -> bool:
    if strict:
        return mantissa >= ceiling
    return mantissa > ceiling


def normalize(x: SciNumber, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Приведение SciNumber к канонической форме.

    Пока mantissa > ceiling: mantissa //= 10, exponent += 1.

    Args:
        x: Исходное значение (может быть ненормализованным)
        config: Конфигурация движка

    Returns:
        Новый SciNumber с mantissa ≤ ceiling (< ceiling в strict режиме)

    Raises:
        ArithmeticOverflow: Если экспонента выходит за ширину целого

    Examples:
        >>> normalize(SciNumber(mantissa=10**36, exponent=0))
        SciNumber(mantissa=100000000000000000000000000000000000, exponent=1)
        >>> normalize(SciNumber(mantissa=12, exponent=0))
        SciNumber(mantissa=12, exponent=0)
    """
    mantissa = x.mantissa
    exponent = x.exponent

    while _exceeds_ceiling(mantissa, config.mantissa_ceiling, config.strict_mantissa_ceiling):
        mantissa //= 10
        exponent = checked_add(exponent, 1, config.max_value)

    if mantissa == x.mantissa:
        return x

    return SciNumber(mantissa=mantissa, exponent=exponent)


# =============================================================================
# КОНВЕРСИЯ ЦЕЛЫХ
# =============================================================================


def from_integer(n: int, config: ArithmeticConfig = DEFAULT_CONFIG) -> SciNumber:
    """
    Конверсия обычного беззнакового целого в SciNumber.

    Пока n > conversion_ceiling (1e30): n //= 10, exponent += 1.
    Экспонента — минимальная, при которой мантисса ≤ 1e30.

    Args:
        n: Беззнаковое целое в пределах ширины
        config: Конфигурация движка

    Returns:
        SciNumber(mantissa ≤ 1e30, exponent)

    Raises:
        ValueError: Если n не int или n < 0
        ArithmeticOverflow: Если n > max_value

    Examples:
        >>> from_integer(3 * 10**55)
        SciNumber(mantissa=300000000000000000000000000000, exponent=26)
        >>> from_integer(0)
        SciNumber(mantissa=0, exponent=0)
    """
    validate_uint(n, "n", config.max_value)

    exponent = 0
    while n > config.conversion_ceiling:
        n //= 10
        exponent += 1

    return SciNumber(mantissa=n, exponent=exponent)


def to_integer(x: SciNumber) -> int:
    """
    Восстановление величины mantissa × 10^exponent.

    Результат аппроксимирует исходное целое с точностью до усечённых
    младших разрядов (не более exponent штук).

    Raises:
        ArithmeticOverflow: Если mantissa != 0 и exponent > MAGNITUDE_EXPONENT_LIMIT
    """
    return x.magnitude()
