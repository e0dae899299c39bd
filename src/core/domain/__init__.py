"""
Domain models.

Pydantic модели обмена для value-типов: Complex, ComplexVector, Matrix[Complex].
"""

from src.core.domain.values import (
    ComplexMatrixModel,
    ComplexModel,
    ComplexVectorModel,
)

__all__ = [
    "ComplexModel",
    "ComplexVectorModel",
    "ComplexMatrixModel",
]
