"""
ComplexVector — Вектор комплексных чисел фиксированной размерности

Размерность задаётся при создании и больше не меняется. Все бинарные
операции (+, -, inner_product) требуют равной размерности операндов;
несовпадение — нарушение контракта (DimensionMismatch), а не восстановимая
ошибка.

ФОРМУЛЫ:
    ‖v‖² = Σ |v_i|²
    ⟨v, w⟩ = Σ v_i · conj(w_i)    (антилинейно по второму аргументу)
"""

import logging
import math
from typing import Iterable, Iterator, Union

from src.core.math.complex import Complex
from src.core.math.numerical_safeguards import (
    ZeroVectorNormalization,
    require_equal,
)

logger = logging.getLogger(__name__)

Real = Union[int, float]


class ComplexVector:
    """
    Упорядоченный набор Complex фиксированной длины.

    Компоненты хранятся в tuple; арифметика всегда создаёт новый вектор.
    """

    __slots__ = ("components",)

    def __init__(self, components: Iterable[Complex]):
        self.components: tuple[Complex, ...] = tuple(components)

    @classmethod
    def zeros(cls, dimension: int) -> "ComplexVector":
        """Нулевой вектор размерности dimension."""
        return cls(Complex() for _ in range(dimension))

    def dimension(self) -> int:
        return len(self.components)

    def is_zero(self) -> bool:
        """True, если все компоненты ровно 0 + 0i."""
        return all(c.real == 0.0 and c.imag == 0.0 for c in self.components)

    def norm_squared(self) -> float:
        """Σ |v_i|² (без квадратного корня)."""
        return sum((c.magnitude_squared() for c in self.components), 0.0)

    def norm(self) -> float:
        """
        Евклидова норма ‖v‖ = √(Σ |v_i|²).

        Считается через math.hypot, без промежуточных квадратов: компоненты
        порядка 1e-200 или 1e200 не дают переполнения в 0 или inf.
        """
        return math.hypot(*(part for c in self.components for part in (c.real, c.imag)))

    def inner_product(self, other: "ComplexVector") -> Complex:
        """
        Скалярное произведение Σ self[i] · conj(other[i]).

        Args:
            other: Вектор той же размерности

        Returns:
            Complex

        Raises:
            DimensionMismatch: Если размерности различаются

        Examples:
            >>> v1 = ComplexVector([Complex(1.0, 2.0), Complex(3.0, 4.0)])
            >>> v2 = ComplexVector([Complex(5.0, 6.0), Complex(7.0, 8.0)])
            >>> str(v1.inner_product(v2))
            '70+8i'
        """
        require_equal(
            self.dimension(),
            other.dimension(),
            "Vectors must have the same dimension for inner product",
        )

        result = Complex()
        for left, right in zip(self.components, other.components):
            result = result + left * right.conjugate()
        return result

    def normalize(self) -> "ComplexVector":
        """
        Единичный вектор того же направления.

        Raises:
            ZeroVectorNormalization: Если норма равна 0
        """
        norm = self.norm()
        if norm == 0.0:
            logger.debug("normalize called on a zero vector of dimension %d", self.dimension())
            raise ZeroVectorNormalization("Cannot normalize a zero vector")

        return ComplexVector(c / norm for c in self.components)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "ComplexVector") -> "ComplexVector":
        if not isinstance(other, ComplexVector):
            return NotImplemented
        require_equal(
            self.dimension(),
            other.dimension(),
            "Vectors must have the same dimension for addition",
        )
        return ComplexVector(a + b for a, b in zip(self.components, other.components))

    def __sub__(self, other: "ComplexVector") -> "ComplexVector":
        if not isinstance(other, ComplexVector):
            return NotImplemented
        require_equal(
            self.dimension(),
            other.dimension(),
            "Vectors must have the same dimension for subtraction",
        )
        return ComplexVector(a - b for a, b in zip(self.components, other.components))

    def __mul__(self, scalar: Real) -> "ComplexVector":
        if not isinstance(scalar, (int, float)) or isinstance(scalar, bool):
            return NotImplemented
        return ComplexVector(c * scalar for c in self.components)

    __rmul__ = __mul__

    def __neg__(self) -> "ComplexVector":
        return ComplexVector(-c for c in self.components)

    # -------------------------------------------------------------------------
    # Протокол последовательности
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Complex]:
        return iter(self.components)

    def __getitem__(self, index: int) -> Complex:
        return self.components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self.dimension() == other.dimension() and all(
            a == b for a, b in zip(self.components, other.components)
        )

    def __hash__(self) -> int:
        return hash(self.components)

    def __repr__(self) -> str:
        return f"ComplexVector({list(self.components)!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.components) + "]"
