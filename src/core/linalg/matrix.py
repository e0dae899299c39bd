"""
Matrix — Обобщённая 2-D матрица в row-major порядке

Базовые операции (создание, get/set, размеры, поэлементные +, -, унарный -)
работают для любого типа элемента T, поддерживающего соответствующие
операторы. Матричное умножение, единичная матрица, эрмитово сопряжение,
проверка унитарности и умножение на вектор определены только для
Matrix[Complex]; тип элементов проверяется на входе этих операций.

ИНВАРИАНТЫ:
1. len(data) == rows * cols всегда
2. Элемент (row, col) хранится в data[row * cols + col]
3. Несовпадение размерностей — ContractViolation до любого частичного результата
4. Арифметика создаёт новую матрицу; мутирует только set()

ФОРМУЛЫ:
    (A·B)[i][j] = Σ_k A[i][k] · B[k][j]          O(m·n·k), наивный тройной цикл
    (A†)[j][i]  = conj(A[i][j])
    A унитарна ⇔ |(A·A†)[i][j] - I[i][j]| <= 1e-10 для всех i, j
"""

import logging
from typing import Callable, Generic, Iterable, TypeVar, Union, overload

from src.core.math.complex import Complex
from src.core.math.numerical_safeguards import (
    UNITARY_TOLERANCE,
    ContractViolation,
    require_equal,
)
from src.core.math.vector import ComplexVector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Matrix(Generic[T]):
    """
    Матрица rows × cols с элементами типа T в row-major порядке.

    Examples:
        >>> m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        >>> m.get(0, 1)
        2.0
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, data: Iterable[T]):
        """
        Args:
            rows: Количество строк
            cols: Количество столбцов
            data: Элементы в row-major порядке

        Raises:
            ContractViolation: Если len(data) != rows * cols
        """
        if rows < 0 or cols < 0:
            raise ContractViolation(f"Matrix dimensions must be non-negative, got {rows}x{cols}")

        values = list(data)
        if len(values) != rows * cols:
            logger.debug(
                "matrix construction rejected: %d elements for %dx%d", len(values), rows, cols
            )
            raise ContractViolation(
                f"Data length must match matrix dimensions: "
                f"got {len(values)} elements for {rows}x{cols}"
            )

        self._rows = rows
        self._cols = cols
        self._data: list[T] = values

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(
        cls, rows: int, cols: int, element_type: Callable[[], T] = Complex
    ) -> "Matrix[T]":
        """
        Матрица из значений по умолчанию.

        Args:
            rows: Количество строк
            cols: Количество столбцов
            element_type: Фабрика нулевого элемента (Complex → 0+0i, float → 0.0)
        """
        return cls(rows, cols, [element_type() for _ in range(rows * cols)])

    @classmethod
    def identity(cls, size: int) -> "Matrix[Complex]":
        """Единичная матрица size × size: 1+0i на диагонали, 0+0i вне её."""
        result: Matrix[Complex] = Matrix.zeros(size, size, Complex)
        for i in range(size):
            result.set(i, i, Complex(1.0, 0.0))
        return result

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def get(self, row: int, col: int) -> T:
        return self._data[self._index(row, col)]

    def set(self, row: int, col: int, value: T) -> None:
        """Замена одного элемента на месте."""
        self._data[self._index(row, col)] = value

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self._rows}x{self._cols} matrix"
            )
        return row * self._cols + col

    # -------------------------------------------------------------------------
    # Поэлементная арифметика (любой T)
    # -------------------------------------------------------------------------

    def _require_same_shape(self, other: "Matrix") -> None:
        require_equal(self._rows, other._rows, "Matrices must have same number of rows")
        require_equal(self._cols, other._cols, "Matrices must have same number of columns")

    def __add__(self, other: "Matrix[T]") -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(self._rows, self._cols, [a + b for a, b in zip(self._data, other._data)])

    def __sub__(self, other: "Matrix[T]") -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(self._rows, self._cols, [a - b for a, b in zip(self._data, other._data)])

    def __neg__(self) -> "Matrix[T]":
        return Matrix(self._rows, self._cols, [-a for a in self._data])

    # -------------------------------------------------------------------------
    # Операции только для Matrix[Complex]
    # -------------------------------------------------------------------------

    def _require_complex(self, operation: str) -> None:
        if not all(isinstance(value, Complex) for value in self._data):
            raise TypeError(f"{operation} is defined only for Complex matrices")

    def matmul(self, other: "Matrix[Complex]") -> "Matrix[Complex]":
        """
        Матричное произведение self (m×k) · other (k×n) → m×n.

        Raises:
            DimensionMismatch: Если self.cols != other.rows
            TypeError: Если other не Matrix или элементы не Complex
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"Matrix multiplication requires a Matrix operand, got {type(other).__name__}"
            )
        require_equal(
            self._cols,
            other._rows,
            "Number of columns in first matrix must match number of rows in second matrix",
        )
        self._require_complex("Matrix multiplication")
        other._require_complex("Matrix multiplication")

        result: Matrix[Complex] = Matrix.zeros(self._rows, other._cols, Complex)
        for i in range(self._rows):
            for j in range(other._cols):
                total = Complex()
                for k in range(self._cols):
                    total = total + self.get(i, k) * other.get(k, j)
                result.set(i, j, total)
        return result

    def mul_vector(self, vector: ComplexVector) -> ComplexVector:
        """
        Произведение матрицы на вектор; размерность результата = rows.

        Raises:
            DimensionMismatch: Если cols != vector.dimension()
        """
        require_equal(
            self._cols, vector.dimension(), "Matrix columns must match vector dimension"
        )
        self._require_complex("Matrix-vector multiplication")

        components = []
        for i in range(self._rows):
            total = Complex()
            for j in range(self._cols):
                total = total + self.get(i, j) * vector[j]
            components.append(total)
        return ComplexVector(components)

    @overload
    def __matmul__(self, other: "Matrix[Complex]") -> "Matrix[Complex]": ...

    @overload
    def __matmul__(self, other: ComplexVector) -> ComplexVector: ...

    def __matmul__(
        self, other: Union["Matrix[Complex]", ComplexVector]
    ) -> Union["Matrix[Complex]", ComplexVector]:
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, ComplexVector):
            return self.mul_vector(other)
        return NotImplemented

    def __mul__(self, other: "Matrix[Complex]") -> "Matrix[Complex]":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def conjugate_transpose(self) -> "Matrix[Complex]":
        """Эрмитово сопряжение: result[j][i] = conj(self[i][j]), размер cols × rows."""
        self._require_complex("Conjugate transpose")

        result: Matrix[Complex] = Matrix.zeros(self._cols, self._rows, Complex)
        for row in range(self._rows):
            for col in range(self._cols):
                result.set(col, row, self.get(row, col).conjugate())
        return result

    def is_unitary(self) -> bool:
        """
        Проверка унитарности: A · A† ≈ I.

        Неквадратная матрица — сразу False. Сравнение поэлементное по модулю
        разности с фиксированной абсолютной толерантностью UNITARY_TOLERANCE;
        NaN не проходит проверку.
        """
        if self._rows != self._cols:
            return False

        size = self._rows
        identity = Matrix.identity(size)
        product = self.matmul(self.conjugate_transpose())

        for i in range(size):
            for j in range(size):
                diff = product.get(i, j) - identity.get(i, j)
                if not diff.magnitude() <= UNITARY_TOLERANCE:
                    return False
        return True

    # -------------------------------------------------------------------------
    # Сравнение и рендеринг
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and all(a == b for a, b in zip(self._data, other._data))
        )

    # Мутабельна через set()
    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> list[T]:
        """Копия элементов в row-major порядке."""
        return list(self._data)

    def row(self, index: int) -> list[T]:
        start = index * self._cols
        return self._data[start : start + self._cols]

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def __str__(self) -> str:
        """
        Заголовок "Matrix(RxC)", затем по строке на каждый ряд;
        после каждого элемента ровно один пробел.
        """
        lines = [f"Matrix({self._rows}x{self._cols})\n"]
        for row in range(self._rows):
            lines.append("".join(f"{value} " for value in self.row(row)) + "\n")
        return "".join(lines)


def matrix_from_rows(rows: Iterable[Iterable[T]]) -> Matrix[T]:
    """
    Сборка матрицы из списка строк.

    Raises:
        ContractViolation: Если строки разной длины
    """
    materialized = [list(r) for r in rows]
    n_rows = len(materialized)
    n_cols = len(materialized[0]) if materialized else 0
    for r in materialized:
        require_equal(len(r), n_cols, "All matrix rows must have the same length")
    return Matrix(n_rows, n_cols, [value for r in materialized for value in r])
