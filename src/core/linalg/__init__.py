"""
Linear algebra

Обобщённая матрица Matrix[T] и операции над Matrix[Complex].
"""

from src.core.linalg.matrix import Matrix, matrix_from_rows

__all__ = [
    "Matrix",
    "matrix_from_rows",
]
