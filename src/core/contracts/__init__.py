"""
Contract Validation Module

Модуль для валидации JSON-документов value-типов (Complex, ComplexVector,
Matrix[Complex]) против JSON Schema контрактов.
"""

from .validators import (
    ComplexMatrixValidator,
    ComplexValidator,
    ComplexVectorValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex,
    validate_complex_matrix,
    validate_complex_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValidator",
    "ComplexVectorValidator",
    "ComplexMatrixValidator",
    # Functions
    "validate_complex",
    "validate_complex_vector",
    "validate_complex_matrix",
]
