"""
Complex — Комплексное число a + bi

Value-тип из двух float (real, imag) с арифметикой, полярной формой,
модулем/аргументом, сопряжением и парсером текстового формата.

ТЕКСТОВЫЙ ФОРМАТ (внешний контракт, bit-exact):
    [<real>][<sign><imag>i]

    <real>, <imag> — десятичные float-литералы (опциональная экспонента)
    <sign>         — "+" или "-"
    голое "i"      — коэффициент 1 (или -1 для "-i")

    "2+3i" → (2, 3)     "-1.5-2.5i" → (-1.5, -2.5)     "3i" → (0, 3)
    "-i"   → (0, -1)    "5"         → (5, 0)           "1e-5+2i" → (1e-5, 2)

ФОРМУЛЫ:
    (a+bi)(c+di) = (ac - bd) + (ad + bc)i
    (a+bi)/(c+di) = ((ac + bd) + (bc - ad)i) / (c² + d²)

Деление на ноль не бросает исключение: компоненты становятся NaN/±Inf
(IEEE-754).
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from src.core.math.angle import Angle
from src.core.math.numerical_safeguards import (
    format_float,
    ieee_cos,
    ieee_divide,
    ieee_sin,
)

logger = logging.getLogger(__name__)

Real = Union[int, float]

# Десятичный float-литерал: знак, мантисса с опциональной дробной частью,
# опциональная экспонента; плюс inf/infinity/nan без учёта регистра.
# Только ASCII-цифры: "٣" или "３" не являются литералами
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Категория ошибки парсинга"""

    EMPTY = "empty"  # Пустая строка (после trim)
    INVALID_REAL = "invalid_real"  # Невалидная действительная часть
    INVALID_IMAGINARY = "invalid_imaginary"  # Невалидная мнимая часть


class ComplexParseError(ValueError):
    """
    Восстановимая ошибка парсинга строки в Complex.

    Attributes:
        kind: Категория ошибки (какая часть невалидна)
        text: Фрагмент входа, который не удалось разобрать
    """

    _MESSAGES = {
        ParseErrorKind.EMPTY: "Empty string",
        ParseErrorKind.INVALID_REAL: "Invalid real part",
        ParseErrorKind.INVALID_IMAGINARY: "Invalid imaginary part",
    }

    def __init__(self, kind: ParseErrorKind, text: str = ""):
        self.kind = kind
        self.text = text
        message = self._MESSAGES[kind]
        if kind is not ParseErrorKind.EMPTY:
            message = f"{message}: {text!r}"
        super().__init__(message)


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Комплексное число real + imag·i.

    Immutable (frozen=True). Никаких инвариантов не навязывается: компоненты
    могут быть NaN, ±Inf и любым float.

    Равенство — точное покомпонентное сравнение float (без epsilon,
    NaN != NaN). Для сравнения с толерантностью сравнивайте модуль разности.

    Значение по умолчанию: Complex() == 0 + 0i.
    """

    real: float = 0.0
    imag: float = 0.0

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, real: float, imag: float) -> "Complex":
        """Декартова форма, без валидации."""
        return cls(float(real), float(imag))

    @classmethod
    def from_real(cls, real: float) -> "Complex":
        """Конверсия действительного числа: real + 0i."""
        return cls(float(real), 0.0)

    @classmethod
    def from_polar(cls, magnitude: float, angle: Union[Angle, float]) -> "Complex":
        """
        Полярная форма: (r·cos θ, r·sin θ).

        Отрицательный magnitude допустим и даёт диаметрально
        противоположную точку.

        Args:
            magnitude: Модуль r
            angle: Angle или число в градусах

        Returns:
            Complex

        Examples:
            >>> z = Complex.from_polar(2.0, Angle.from_degrees(60.0))
            >>> round(z.real, 10), round(z.imag, 3)
            (1.0, 1.732)
        """
        radians = Angle.coerce(angle).to_radians()
        return cls(magnitude * ieee_cos(radians), magnitude * ieee_sin(radians))

    @classmethod
    def parse(cls, text: str) -> "Complex":
        """
        Разбор строки текстового формата.

        Алгоритм:
        1. trim; пустая строка → EMPTY
        2. Нет "i" → чистое действительное число
        3. Нет "+"/"-" → чистое мнимое число ("" → 1, иначе префикс до "i")
        4. Иначе разбиение на знаковые термы слева направо: новый терм
           начинается с каждого "+"/"-", НЕ стоящего сразу после "e"/"E"
           (экспонента вида 1e-5 не разрывается). Терм с "i" — мнимый,
           остальные — действительные. Если термов одного вида несколько,
           побеждает последний.

        Args:
            text: Входная строка

        Returns:
            Complex

        Raises:
            ComplexParseError: EMPTY / INVALID_REAL / INVALID_IMAGINARY
        """
        s = text.strip()

        if not s:
            logger.debug("complex parse failed: empty input")
            raise ComplexParseError(ParseErrorKind.EMPTY)

        if "i" not in s:
            return cls(_parse_real_term(s), 0.0)

        if "+" not in s and "-" not in s:
            return cls(0.0, _parse_imaginary_term(s))

        real = 0.0
        imag = 0.0
        for term in _split_terms(s):
            if "i" in term:
                imag = _parse_imaginary_term(term)
            else:
                real = _parse_real_term(term)

        return cls(real, imag)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """|z| = √(real² + imag²)"""
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        """
        |z|² = real² + imag² (без квадратного корня).

        Используется в делении и нормализации векторов.
        """
        return self.real * self.real + self.imag * self.imag

    def argument(self) -> float:
        """arg z = atan2(imag, real), диапазон (-π, π]"""
        return math.atan2(self.imag, self.real)

    def angle(self) -> Angle:
        """Аргумент как Angle в радианах."""
        return Angle.from_radians(self.argument())

    def conjugate(self) -> "Complex":
        """a + bi → a - bi"""
        return Complex(self.real, -self.imag)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return Complex(
                self.real * other.real - self.imag * other.imag,
                self.real * other.imag + self.imag * other.real,
            )
        if _is_real(other):
            return Complex(self.real * other, self.imag * other)
        return NotImplemented

    def __rmul__(self, other: Real) -> "Complex":
        if _is_real(other):
            return Complex(other * self.real, other * self.imag)
        return NotImplemented

    def __truediv__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            # Умножение на сопряжённое делителя и деление на |делитель|²
            denominator = other.magnitude_squared()
            return Complex(
                ieee_divide(self.real * other.real + self.imag * other.imag, denominator),
                ieee_divide(self.imag * other.real - self.real * other.imag, denominator),
            )
        if _is_real(other):
            return Complex(ieee_divide(self.real, other), ieee_divide(self.imag, other))
        return NotImplemented

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    # -------------------------------------------------------------------------
    # Сравнение и рендеринг
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __hash__(self) -> int:
        return hash((self.real, self.imag))

    def __str__(self) -> str:
        """
        "a+bi" / "a-bi"; при imag == 0.0 только действительная часть.

        Examples:
            >>> str(Complex(3.0, 4.0)), str(Complex(3.0, -4.0)), str(Complex(3.0, 0.0))
            ('3+4i', '3-4i', '3')
        """
        if self.imag == 0.0:
            return format_float(self.real)

        sign = "+" if self.imag >= 0.0 else ""
        return f"{format_float(self.real)}{sign}{format_float(self.imag)}i"


# =============================================================================
# ПАРСИНГ (внутренние помощники)
# =============================================================================


def _is_real(value: object) -> bool:
    # bool: подкласс int, но скаляром не считается
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_float(text: str) -> float:
    if _FLOAT_LITERAL.fullmatch(text) is None:
        raise ValueError(text)
    return float(text)


def _parse_real_term(term: str) -> float:
    try:
        return _parse_float(term)
    except ValueError:
        logger.debug("complex parse failed: invalid real part %r", term)
        raise ComplexParseError(ParseErrorKind.INVALID_REAL, term) from None


def _parse_imaginary_term(term: str) -> float:
    coefficient = term.rstrip("i")

    if coefficient in ("", "+"):
        return 1.0
    if coefficient == "-":
        return -1.0

    try:
        return _parse_float(coefficient)
    except ValueError:
        logger.debug("complex parse failed: invalid imaginary part %r", coefficient)
        raise ComplexParseError(ParseErrorKind.INVALID_IMAGINARY, coefficient) from None


def _split_terms(s: str) -> list[str]:
    terms: list[str] = []
    current = ""
    previous = " "

    for char in s:
        if char in "+-" and previous not in "eE":
            if current:
                terms.append(current)
            current = char
        else:
            current += char
        previous = char

    if current:
        terms.append(current)

    return terms
