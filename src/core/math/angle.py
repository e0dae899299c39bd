"""
Angle — Угол в градусах или радианах

Tagged value: хранит исходное число в той единице, в которой оно было задано,
и конвертирует только по запросу. Неявной нормализации нет; normalize()
явно возвращает новый Angle в диапазоне [0, 360) градусов.

ФОРМУЛЫ:
    degrees = radians * 180 / π
    radians = degrees * π / 180
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from src.core.math.numerical_safeguards import (
    FULL_TURN_DEGREES,
    STRAIGHT_ANGLE_DEGREES,
    format_float,
    ieee_fmod,
)


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    DEGREE = "degree"
    RADIAN = "radian"


# =============================================================================
# ANGLE
# =============================================================================


@dataclass(frozen=True)
class Angle:
    """
    Угол, заданный в градусах или радианах.

    Immutable (frozen=True). Любое значение float допустимо, включая
    отрицательные, > 360° и NaN/Inf.

    Два угла равны, только если совпадают и единица, и значение:
    Angle.from_degrees(180.0) != Angle.from_radians(math.pi).
    """

    value: float
    unit: AngleUnit = AngleUnit.DEGREE

    def __post_init__(self) -> None:
        """
        Приведение unit к AngleUnit.

        Raises:
            ValueError: Если unit не "degree" / "radian"
        """
        # "degree" == AngleUnit.DEGREE, но ветки конверсии сравнивают через is
        object.__setattr__(self, "unit", AngleUnit(self.unit))

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        """Угол в градусах, без нормализации."""
        return cls(float(degrees), AngleUnit.DEGREE)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        """Угол в радианах, без нормализации."""
        return cls(float(radians), AngleUnit.RADIAN)

    @classmethod
    def from_value(cls, degrees: float) -> "Angle":
        """Конверсия «сырого» числа: всегда интерпретируется как градусы."""
        return cls.from_degrees(degrees)

    @classmethod
    def coerce(cls, angle: Union["Angle", float]) -> "Angle":
        """
        Приведение к Angle.

        Args:
            angle: Angle (возвращается как есть) или число в градусах

        Returns:
            Angle
        """
        if isinstance(angle, Angle):
            return angle
        return cls.from_value(angle)

    @property
    def is_degrees(self) -> bool:
        return self.unit is AngleUnit.DEGREE

    @property
    def is_radians(self) -> bool:
        return self.unit is AngleUnit.RADIAN

    def to_degrees(self) -> float:
        """
        Значение в градусах (без нормализации).

        Examples:
            >>> Angle.from_radians(math.pi).to_degrees()
            180.0
        """
        if self.unit is AngleUnit.DEGREE:
            return self.value
        return self.value * STRAIGHT_ANGLE_DEGREES / math.pi

    def to_radians(self) -> float:
        """
        Значение в радианах (без нормализации).

        Examples:
            >>> Angle.from_degrees(90.0).to_radians() == math.pi / 2
            True
        """
        if self.unit is AngleUnit.RADIAN:
            return self.value
        return self.value * math.pi / STRAIGHT_ANGLE_DEGREES

    def as_degrees(self) -> "Angle":
        """Копия, хранящая значение в градусах."""
        return Angle.from_degrees(self.to_degrees())

    def as_radians(self) -> "Angle":
        """Копия, хранящая значение в радианах."""
        return Angle.from_radians(self.to_radians())

    def normalize(self) -> "Angle":
        """
        Приведение к диапазону [0, 360) градусов.

        Алгоритм:
            r = fmod(degrees, 360)
            r < 0 → r + 360

        Результат всегда в градусах. Кратные 360 (включая 0 и -360)
        дают 0.0. Неконечный вход даёт NaN.

        Examples:
            >>> Angle.from_degrees(400.0).normalize().to_degrees()
            40.0
            >>> Angle.from_degrees(-45.0).normalize().to_degrees()
            315.0
        """
        normalized = ieee_fmod(self.to_degrees(), FULL_TURN_DEGREES)
        if normalized < 0.0:
            normalized += FULL_TURN_DEGREES

        # -1e-20 + 360.0 округляется ровно до 360.0
        if normalized >= FULL_TURN_DEGREES:
            normalized = 0.0

        # -0.0 → 0.0
        return Angle.from_degrees(normalized + 0.0)

    def __str__(self) -> str:
        if self.unit is AngleUnit.DEGREE:
            return f"{format_float(self.value)}°"
        return f"{format_float(self.value)} rad"
