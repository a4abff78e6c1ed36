"""
Тесты для доменной модели SciNumber

Проверяет:
1. Создание и валидацию модели Pydantic
2. Immutability (frozen=True) и равенство по полям
3. Восстановление величины и строковое представление
4. Сериализацию/десериализацию JSON
5. Граничные случаи и невалидные данные
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import MAGNITUDE_EXPONENT_LIMIT, UINT256_MAX, SciNumber
from src.core.math.numerical_safeguards import ArithmeticOverflow


class TestSciNumber:
    """Тесты для модели SciNumber"""

    @pytest.fixture
    def large_value(self) -> SciNumber:
        """Ненормализованное большое значение"""
        return SciNumber(mantissa=5 * 10**76, exponent=100)

    def test_create_valid(self) -> None:
        x = SciNumber(mantissa=12345, exponent=7)
        assert x.mantissa == 12345
        assert x.exponent == 7

    def test_construction_does_not_normalize(self, large_value: SciNumber) -> None:
        """Конструктор хранит пару как есть"""
        assert large_value.mantissa == 5 * 10**76
        assert large_value.exponent == 100

    def test_width_boundary(self) -> None:
        """Компоненты до 2^256 - 1 включительно"""
        x = SciNumber(mantissa=UINT256_MAX, exponent=UINT256_MAX)
        assert x.mantissa == UINT256_MAX

        with pytest.raises(ValidationError):
            SciNumber(mantissa=UINT256_MAX + 1, exponent=0)

        with pytest.raises(ValidationError):
            SciNumber(mantissa=0, exponent=UINT256_MAX + 1)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SciNumber(mantissa=-1, exponent=0)

        with pytest.raises(ValidationError):
            SciNumber(mantissa=1, exponent=-1)

    def test_non_integer_rejected(self) -> None:
        """Strict: float, str и bool не принимаются"""
        with pytest.raises(ValidationError):
            SciNumber(mantissa=5e76, exponent=0)  # type: ignore

        with pytest.raises(ValidationError):
            SciNumber(mantissa="12", exponent=0)  # type: ignore

        with pytest.raises(ValidationError):
            SciNumber(mantissa=1, exponent=True)  # type: ignore

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SciNumber(mantissa=1)  # type: ignore

    def test_immutable(self, large_value: SciNumber) -> None:
        """SciNumber должен быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            large_value.mantissa = 1  # type: ignore

    def test_equality_by_fields(self) -> None:
        """Равенство по полям, а не по величине"""
        assert SciNumber(mantissa=12, exponent=0) == SciNumber(mantissa=12, exponent=0)
        assert SciNumber(mantissa=10, exponent=0) != SciNumber(mantissa=1, exponent=1)
        assert (
            SciNumber(mantissa=10, exponent=0).magnitude()
            == SciNumber(mantissa=1, exponent=1).magnitude()
        )

    def test_hashable(self) -> None:
        values = {
            SciNumber(mantissa=1, exponent=1),
            SciNumber(mantissa=1, exponent=1),
            SciNumber(mantissa=10, exponent=0),
        }
        assert len(values) == 2

    def test_zero(self) -> None:
        zero = SciNumber.zero()
        assert zero == SciNumber(mantissa=0, exponent=0)
        assert zero.is_zero()
        assert SciNumber(mantissa=0, exponent=99).is_zero()
        assert not SciNumber(mantissa=1, exponent=0).is_zero()

    def test_magnitude(self, large_value: SciNumber) -> None:
        assert SciNumber(mantissa=123, exponent=0).magnitude() == 123
        assert SciNumber(mantissa=3, exponent=4).magnitude() == 30000
        assert large_value.magnitude() == 5 * 10**176

    def test_magnitude_exponent_limit(self) -> None:
        """Экспонента выше лимита не восстанавливается в int"""
        at_limit = SciNumber(mantissa=7, exponent=MAGNITUDE_EXPONENT_LIMIT)
        assert at_limit.magnitude() == 7 * 10**MAGNITUDE_EXPONENT_LIMIT

        with pytest.raises(ArithmeticOverflow, match="not representable"):
            SciNumber(mantissa=1, exponent=10**20).magnitude()

        with pytest.raises(ArithmeticOverflow):
            SciNumber(mantissa=1, exponent=UINT256_MAX).magnitude()

    def test_magnitude_of_zero_any_exponent(self) -> None:
        assert SciNumber(mantissa=0, exponent=UINT256_MAX).magnitude() == 0

    def test_str(self) -> None:
        assert str(SciNumber(mantissa=5, exponent=141)) == "5e141"
        assert str(SciNumber.zero()) == "0e0"

    def test_json_serialization(self) -> None:
        """Сериализация/десериализация JSON"""
        x = SciNumber(mantissa=12345, exponent=7)
        json_str = x.model_dump_json()
        data = json.loads(json_str)

        assert data == {"mantissa": 12345, "exponent": 7}

        restored = SciNumber.model_validate_json(json_str)
        assert restored == x

    def test_dict_round_trip_wide_values(self, large_value: SciNumber) -> None:
        """Пара целых переносится без потери разрядов"""
        data = large_value.model_dump()
        assert data == {"mantissa": 5 * 10**76, "exponent": 100}

        restored = SciNumber.model_validate(json.loads(json.dumps(data)))
        assert restored == large_value
