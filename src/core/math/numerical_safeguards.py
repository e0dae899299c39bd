"""
Numerical Safeguards — IEEE-754 примитивы и контрактные проверки

Модуль содержит общие для всех value-типов (Angle, Complex, ComplexVector,
Matrix) численные примитивы:
- Фиксированные толерантности и константы (не конфигурируются)
- Семейство исключений ContractViolation (ошибки программиста)
- IEEE-754 деление, тригонометрия и остаток без Python-исключений
- Рендеринг float в текстовом формате обмена ("3", "-0.5", "NaN", "inf")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf пропагируют по правилам IEEE-754, а не через исключения
2. Нарушение контракта размерностей прерывает операцию до любого частичного результата
3. ContractViolation не отключается флагом `python -O` (не используем assert)
4. Все операции детерминированы и воспроизводимы
"""

import logging
import math
from decimal import Decimal
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Абсолютная толерантность для проверки унитарности: |(U·U†)[i][j] - I[i][j]| <= tol
# Фиксированная, не относительная и не настраиваемая
UNITARY_TOLERANCE: Final[float] = 1e-10

# Полный оборот в градусах (диапазон нормализации [0, 360))
FULL_TURN_DEGREES: Final[float] = 360.0

# Развёрнутый угол: π радиан = 180 градусов
STRAIGHT_ANGLE_DEGREES: Final[float] = 180.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(AssertionError):
    """
    Нарушение контракта операции (ошибка программиста, а не окружения).

    Эквивалент assertion failure: операция прерывается немедленно, частичный
    результат не возвращается. Не предназначено для перехвата и повтора.
    Вызывающий код, которому нужна восстановимость, проверяет размерности
    до вызова.
    """

    pass


class DimensionMismatch(ContractViolation):
    """Несовпадение размерностей операндов векторной/матричной операции."""

    pass


class ZeroVectorNormalization(ContractViolation):
    """Попытка нормализовать нулевой вектор (норма == 0)."""

    pass


# =============================================================================
# КОНТРАКТНЫЕ ПРОВЕРКИ
# =============================================================================


def require_equal(left: int, right: int, message: str) -> None:
    """
    Проверка равенства двух размерностей.

    Args:
        left: Размерность левого операнда
        right: Размерность правого операнда
        message: Сообщение об ошибке (описывает операцию)

    Raises:
        DimensionMismatch: Если left != right
    """
    if left != right:
        logger.debug("dimension contract violated: %s (left=%d, right=%d)", message, left, right)
        raise DimensionMismatch(f"{message}: left={left}, right={right}")


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Python бросает ZeroDivisionError при делении float на 0.0; здесь вместо
    этого возвращается тот же результат, что и на уровне железа:
    - x / ±0 → ±inf (знак = sign(x) * sign(0))
    - 0 / 0, NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator с IEEE-семантикой

    Examples:
        >>> ieee_divide(1.0, 2.0)
        0.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_cos(radians: float) -> float:
    """cos(x); для ±inf возвращает NaN вместо ValueError."""
    if math.isinf(radians):
        return math.nan
    return math.cos(radians)


def ieee_sin(radians: float) -> float:
    """sin(x); для ±inf возвращает NaN вместо ValueError."""
    if math.isinf(radians):
        return math.nan
    return math.sin(radians)


def ieee_fmod(value: float, modulus: float) -> float:
    """
    Остаток с знаком делимого (C fmod), NaN для неконечного делимого.

    В отличие от оператора `%`, результат для отрицательного value
    отрицательный: ieee_fmod(-45.0, 360.0) == -45.0.
    """
    if not math.isfinite(value) or math.isnan(modulus) or modulus == 0.0:
        return math.nan
    return math.fmod(value, modulus)


# =============================================================================
# ТЕКСТОВЫЙ РЕНДЕРИНГ
# =============================================================================


def format_float(value: float) -> str:
    """
    Рендеринг float в текстовом формате обмена.

    Кратчайшее десятичное представление без экспоненты; целые значения
    без хвоста ".0".

    Examples:
        >>> format_float(3.0)
        '3'
        >>> format_float(-1.5)
        '-1.5'
        >>> format_float(1e-7)
        '0.0000001'
        >>> format_float(float('nan'))
        'NaN'
        >>> format_float(float('-inf'))
        '-inf'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
