"""
Value Models — Pydantic модели обмена для Complex, ComplexVector, Matrix

Immutable Pydantic модели, представляющие value-типы в виде JSON-документов.
Полная совместимость с JSON Schema (src/core/contracts/schema/*.json).

Модели — граница ввода: здесь ошибки формы данных (нечисловые поля,
len(data) != rows * cols) — восстановимые ValidationError, а не
ContractViolation. Внутри ядра после to_value() действуют обычные контракты.

Опциональный слой границы: ядро value-типов (src/core/math, src/core/linalg)
от него не зависит и не импортирует pydantic.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.linalg.matrix import Matrix
from src.core.math.complex import Complex
from src.core.math.vector import ComplexVector


# =============================================================================
# COMPLEX
# =============================================================================


class ComplexModel(BaseModel):
    """
    Комплексное число {"real": a, "imag": b}.

    Также принимает текстовую форму ("2+3i", "-i", "5"), которая разбирается
    через Complex.parse; ошибка парсинга становится ValidationError.
    """

    real: float = Field(..., description="Действительная часть")
    imag: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def parse_text_form(cls, data: Any) -> Any:
        """Текстовая форма → {"real", "imag"}."""
        if isinstance(data, str):
            value = Complex.parse(data)
            return {"real": value.real, "imag": value.imag}
        if isinstance(data, Complex):
            return {"real": data.real, "imag": data.imag}
        return data

    @classmethod
    def from_value(cls, value: Complex) -> "ComplexModel":
        return cls(real=value.real, imag=value.imag)

    def to_value(self) -> Complex:
        return Complex(self.real, self.imag)


# =============================================================================
# COMPLEX VECTOR
# =============================================================================


class ComplexVectorModel(BaseModel):
    """Вектор {"components": [complex, ...]}."""

    components: list[ComplexModel] = Field(..., description="Компоненты вектора")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_value(cls, vector: ComplexVector) -> "ComplexVectorModel":
        return cls(components=[ComplexModel.from_value(c) for c in vector])

    def to_value(self) -> ComplexVector:
        return ComplexVector(c.to_value() for c in self.components)


# =============================================================================
# COMPLEX MATRIX
# =============================================================================


class ComplexMatrixModel(BaseModel):
    """
    Матрица {"rows": m, "cols": n, "data": [complex, ...]} в row-major порядке.
    """

    rows: int = Field(..., ge=0, description="Количество строк")
    cols: int = Field(..., ge=0, description="Количество столбцов")
    data: list[ComplexModel] = Field(..., description="Элементы в row-major порядке")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_data_length(self) -> "ComplexMatrixModel":
        """Проверка len(data) == rows * cols."""
        expected = self.rows * self.cols
        if len(self.data) != expected:
            raise ValueError(
                f"data length {len(self.data)} does not match {self.rows}x{self.cols} "
                f"(expected {expected})"
            )
        return self

    @classmethod
    def from_value(cls, matrix: Matrix[Complex]) -> "ComplexMatrixModel":
        """
        Raises:
            TypeError: Если элементы матрицы не Complex
        """
        values = matrix.to_list()
        if not all(isinstance(v, Complex) for v in values):
            raise TypeError("Only Complex matrices can be exported")
        return cls(
            rows=matrix.rows(),
            cols=matrix.cols(),
            data=[ComplexModel.from_value(v) for v in values],
        )

    def to_value(self) -> Matrix[Complex]:
        return Matrix(self.rows, self.cols, [c.to_value() for c in self.data])
