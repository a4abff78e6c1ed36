"""
SciNumber — Значение в научной нотации mantissa × 10^exponent

Immutable Pydantic модель. Обе компоненты — беззнаковые целые в пределах
256-битной ширины. Конструирование НЕ нормализует значение: каноническую
форму гарантируют только normalize/from_integer и операции mul/div.

Равенство — по полям, а не по величине: (12, 0) != (1, 1).
"""

from typing import Final

from pydantic import BaseModel, Field

# Максимальное значение 256-битного беззнакового целого (≈ 1.158e77)
UINT256_MAX: Final[int] = 2**256 - 1

# Максимальная экспонента для восстановления величины в обычный int.
# 10**10000 занимает около 4 КБ
MAGNITUDE_EXPONENT_LIMIT: Final[int] = 10_000


class SciNumber(BaseModel):
    """
    Большое беззнаковое число: mantissa × 10^exponent.

    Immutable модель (frozen=True): каждая операция создаёт новый экземпляр.
    """

    mantissa: int = Field(
        ..., ge=0, le=UINT256_MAX, strict=True, description="Значащие разряды"
    )
    exponent: int = Field(
        ..., ge=0, le=UINT256_MAX, strict=True, description="Степень десяти"
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def zero(cls) -> "SciNumber":
        """Ноль: (0, 0)"""
        return cls(mantissa=0, exponent=0)

    def is_zero(self) -> bool:
        """True если мантисса равна нулю (при любой экспоненте)"""
        return self.mantissa == 0

    def magnitude(self) -> int:
        """
        Восстановленная величина mantissa * 10**exponent.

        Вычисляется в неограниченных Python int, вне ширины движка.
        Ноль восстанавливается при любой экспоненте.

        Raises:
            ArithmeticOverflow: Если mantissa != 0 и
                exponent > MAGNITUDE_EXPONENT_LIMIT
        """
        if self.mantissa == 0:
            return 0

        if self.exponent > MAGNITUDE_EXPONENT_LIMIT:
            from src.core.math.numerical_safeguards import ArithmeticOverflow

            raise ArithmeticOverflow(
                f"Magnitude of {self} not representable: exponent "
                f"{self.exponent} > {MAGNITUDE_EXPONENT_LIMIT}"
            )

        return self.mantissa * 10**self.exponent

    def __str__(self) -> str:
        return f"{self.mantissa}e{self.exponent}"
