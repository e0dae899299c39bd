"""
Тесты для Angle

Проверяет:
1. Конверсии градусы ↔ радианы
2. Нормализацию в [0, 360) и её идемпотентность
3. as_degrees / as_radians (смена представления)
4. Конверсию «сырого» числа как градусов
"""

import math

import pytest

from src.core.math.angle import Angle, AngleUnit


class TestAngleConversion:
    """Конверсии единиц"""

    def test_degrees_to_radians(self) -> None:
        assert Angle.from_degrees(90.0).to_radians() == math.pi / 2

    def test_radians_to_degrees(self) -> None:
        assert Angle.from_radians(math.pi).to_degrees() == 180.0

    def test_same_unit_is_identity(self) -> None:
        """Конверсия в собственную единицу возвращает значение как есть"""
        assert Angle.from_degrees(123.456).to_degrees() == 123.456
        assert Angle.from_radians(0.789).to_radians() == 0.789

    @pytest.mark.parametrize("degrees", [0.0, 45.0, -30.0, 359.9, 1234.5])
    def test_degrees_to_radians_formula(self, degrees: float) -> None:
        """to_radians() == degrees * π / 180"""
        assert Angle.from_degrees(degrees).to_radians() == pytest.approx(
            degrees * math.pi / 180.0
        )

    @pytest.mark.parametrize("degrees", [45.0, -720.5, 0.001, 89.99])
    def test_roundtrip(self, degrees: float) -> None:
        """Инвариант: градусы → радианы → градусы ≈ исходное"""
        radians = Angle.from_degrees(degrees).to_radians()
        assert Angle.from_radians(radians).to_degrees() == pytest.approx(degrees, abs=1e-10)

    def test_no_implicit_normalization(self) -> None:
        """Значение хранится без нормализации"""
        assert Angle.from_degrees(720.0).to_degrees() == 720.0
        assert Angle.from_degrees(-45.0).value == -45.0


class TestAngleAsUnits:
    """as_degrees / as_radians"""

    def test_as_radians(self) -> None:
        in_rad = Angle.from_degrees(90.0).as_radians()
        assert in_rad.unit is AngleUnit.RADIAN
        assert in_rad.to_radians() == math.pi / 2

    def test_as_degrees(self) -> None:
        in_deg = Angle.from_radians(math.pi).as_degrees()
        assert in_deg.unit is AngleUnit.DEGREE
        assert in_deg.value == 180.0

    def test_unit_participates_in_equality(self) -> None:
        """Degree(180) и Radian(π) — разные значения Angle"""
        assert Angle.from_degrees(180.0) != Angle.from_radians(math.pi)
        assert Angle.from_radians(math.pi).as_degrees() == Angle.from_degrees(180.0)


class TestAngleNormalize:
    """normalize()"""

    def test_above_full_turn(self) -> None:
        assert Angle.from_degrees(400.0).normalize().to_degrees() == 40.0

    def test_negative(self) -> None:
        assert Angle.from_degrees(-45.0).normalize().to_degrees() == 315.0

    def test_multiple_rotations(self) -> None:
        assert Angle.from_degrees(720.0 + 45.0).normalize().to_degrees() == 45.0

    @pytest.mark.parametrize("degrees", [0.0, 360.0, 720.0, -360.0, -1080.0])
    def test_multiples_of_full_turn_give_positive_zero(self, degrees: float) -> None:
        """Кратные 360 дают 0.0 (не -0.0)"""
        result = Angle.from_degrees(degrees).normalize().to_degrees()
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_result_is_always_degrees(self) -> None:
        result = Angle.from_radians(-math.pi / 2).normalize()
        assert result.unit is AngleUnit.DEGREE
        assert result.to_degrees() == pytest.approx(270.0)

    def test_tiny_negative_stays_in_range(self) -> None:
        """-1e-20 + 360 округляется до 360.0 — результат складывается в 0.0"""
        result = Angle.from_degrees(-1e-20).normalize().to_degrees()
        assert 0.0 <= result < 360.0

    @pytest.mark.parametrize("degrees", [-1e6, -359.5, -0.5, 0.5, 359.5, 1e6, 12345.678])
    def test_range_and_idempotence(self, degrees: float) -> None:
        """Результат в [0, 360), повторная нормализация ничего не меняет"""
        once = Angle.from_degrees(degrees).normalize()
        twice = once.normalize()
        assert 0.0 <= once.to_degrees() < 360.0
        assert twice == once

    def test_non_finite_gives_nan(self) -> None:
        """NaN/Inf пропагируют без исключения"""
        assert math.isnan(Angle.from_degrees(math.inf).normalize().to_degrees())
        assert math.isnan(Angle.from_degrees(math.nan).normalize().to_degrees())


class TestAngleFromValue:
    """Конверсия «сырого» числа"""

    def test_from_value_is_degrees(self) -> None:
        angle = Angle.from_value(90.0)
        assert angle.unit is AngleUnit.DEGREE
        assert angle.to_degrees() == 90.0

    def test_coerce_passes_angle_through(self) -> None:
        angle = Angle.from_radians(1.0)
        assert Angle.coerce(angle) is angle

    def test_coerce_number(self) -> None:
        assert Angle.coerce(30) == Angle.from_degrees(30.0)

    def test_immutable(self) -> None:
        angle = Angle.from_degrees(10.0)
        with pytest.raises(AttributeError):
            angle.value = 20.0  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Angle.from_degrees(90.0)) == "90°"
        assert str(Angle.from_radians(1.5)) == "1.5 rad"


class TestAngleUnitCoercion:
    """unit, переданный строкой, приводится к AngleUnit"""

    def test_string_unit_becomes_enum(self) -> None:
        angle = Angle(90.0, "degree")  # type: ignore[arg-type]
        assert angle.unit is AngleUnit.DEGREE
        assert angle.to_degrees() == 90.0
        assert angle == Angle.from_degrees(90.0)

    def test_string_radian_unit_converts(self) -> None:
        angle = Angle(math.pi, "radian")  # type: ignore[arg-type]
        assert angle.unit is AngleUnit.RADIAN
        assert angle.to_degrees() == 180.0

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(ValueError):
            Angle(1.0, "gradian")  # type: ignore[arg-type]
