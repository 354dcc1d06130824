"""
Matrix — плотная матрица float

Прямоугольная таблица rows × cols (хранение по строкам) с арифметикой,
транспонированием, определителем, обратной матрицей, целой степенью,
предикатами и фабриками identity/zeros/ones.

ИНВАРИАНТЫ:
1. Все строки имеют длину cols (проверяется при построении)
2. Матрица 0×0 допустима
3. Доступ по индексу вне границ → OutOfRange (отрицательные индексы тоже)

АЛГОРИТМЫ:
    determinant: 1×1 и 2×2 — явная формула, больше — рекурсивное разложение
                 по первой строке (экспоненциальная сложность, только для
                 небольших матриц)
    inverse:     2×2 — через присоединённую матрицу, больше — метод
                 Гаусса-Жордана с выбором главного элемента по столбцу
    power:       возведение в степень быстрым возведением в квадрат
"""

from numbers import Integral, Real
from typing import Iterable, Iterator, Sequence

from src.core.domain.display import DEFAULT_DISPLAY, DisplayConfig, format_float, split_tokens
from src.core.math.exceptions import DivisionByZero, InvalidArgument, OutOfRange
from src.core.math.numerical_safeguards import (
    EPS_VALUE_COMPARE,
    is_zero,
    validate_non_negative_int,
)


class MatrixRow:
    """
    Изменяемое представление строки матрицы фиксированной длины.

    Поддерживает чтение и запись элементов (row[j], row[j] = value), но не
    изменение длины: append/pop/insert/del отсутствуют.
    """

    __slots__ = ("_matrix", "_row")

    def __init__(self, matrix: "Matrix", row: int):
        self._matrix = matrix
        self._row = row

    def __len__(self) -> int:
        return self._matrix.cols

    def __getitem__(self, col: int) -> float:
        return self._matrix.get(self._row, col)

    def __setitem__(self, col: int, value: float) -> None:
        self._matrix.set(self._row, col, value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._matrix.row(self._row))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (MatrixRow, list, tuple)):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"MatrixRow({list(self)!r})"


class Matrix:
    """
    Матрица rows × cols.

    m[i, j] — элемент, m[i] — изменяемая строка фиксированной длины
    (MatrixRow), m.row(i) — копия строки только для чтения.
    """

    __slots__ = ("_data", "_rows", "_cols")

    def __init__(self, rows: int = 0, cols: int = 0, fill: float = 0.0):
        validate_non_negative_int(rows, "rows")
        validate_non_negative_int(cols, "cols")
        self._rows = rows
        self._cols = cols
        self._data = [[float(fill)] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Построение из полностью заданных строк.

        Raises:
            InvalidArgument: Если строки имеют разную длину
        """
        rows = [list(row) for row in data]
        if not rows:
            return cls(0, 0)

        cols = len(rows[0])
        for row in rows:
            if len(row) != cols:
                raise InvalidArgument("Все строки должны иметь одинаковую длину")

        result = cls(len(rows), cols)
        result._data = [[float(value) for value in row] for row in rows]
        return result

    @classmethod
    def parse(cls, text: str) -> "Matrix":
        """
        Разбор строки "ROWS COLS v00 v01 ... ".

        Значения перечисляются по строкам, переводы строк допустимы.
        """
        tokens = split_tokens(text, None, cls.__name__)
        if len(tokens) < 2:
            raise InvalidArgument("Matrix: ожидались размеры ROWS COLS")

        rows, cols = int(tokens[0]), int(tokens[1])
        values = split_tokens(" ".join(tokens[2:]), rows * cols, cls.__name__)

        result = cls(rows, cols)
        for i in range(rows):
            for j in range(cols):
                result._data[i][j] = float(values[i * cols + j])
        return result

    # -------------------------------------------------------------------------
    # Размеры и доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfRange(f"Индекс строки {row} вне границ (rows={self._rows})")

    def _check_element(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfRange(
                f"Индекс ({row}, {col}) вне границ матрицы {self._rows}x{self._cols}"
            )

    def get(self, row: int, col: int) -> float:
        self._check_element(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: float) -> None:
        self._check_element(row, col)
        self._data[row][col] = float(value)

    def row(self, row: int) -> tuple[float, ...]:
        """Копия строки только для чтения."""
        self._check_row(row)
        return tuple(self._data[row])

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.get(*key)
        self._check_row(key)
        return MatrixRow(self, key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        if not isinstance(key, tuple):
            raise TypeError("Присваивание возможно только элементу: m[row, col] = value")
        self.set(*key, value)

    def to_list(self) -> list[list[float]]:
        return [list(row) for row in self._data]

    def resize(self, rows: int, cols: int, fill: float = 0.0) -> None:
        """
        Изменение размеров на месте.

        Пересекающиеся элементы сохраняются, новые заполняются fill.
        """
        validate_non_negative_int(rows, "rows")
        validate_non_negative_int(cols, "cols")

        data = self._data[:rows]
        data.extend([] for _ in range(rows - len(data)))
        for i, row in enumerate(data):
            data[i] = row[:cols] + [float(fill)] * (cols - len(row[:cols]))

        self._data = data
        self._rows = rows
        self._cols = cols

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _elementwise(self, other: "Matrix", sign: float, operation: str) -> list[list[float]]:
        if self.shape != other.shape:
            raise InvalidArgument(f"Размеры матриц не совпадают для {operation}")
        return [
            [a + sign * b for a, b in zip(row, other_row)]
            for row, other_row in zip(self._data, other._data)
        ]

    def _product(self, other: "Matrix") -> list[list[float]]:
        if self._cols != other._rows:
            raise InvalidArgument("Несовместимые размеры для умножения матриц")

        result = [[0.0] * other._cols for _ in range(self._rows)]
        for i in range(self._rows):
            for j in range(other._cols):
                total = 0.0
                for k in range(self._cols):
                    total += self._data[i][k] * other._data[k][j]
                result[i][j] = total
        return result

    def _scaled(self, scalar: float) -> list[list[float]]:
        return [[value * scalar for value in row] for row in self._data]

    @staticmethod
    def _checked_scalar(scalar: float) -> float:
        if is_zero(scalar):
            raise DivisionByZero("Деление матрицы на ноль")
        return float(scalar)

    @classmethod
    def _wrap(cls, data: list[list[float]], rows: int, cols: int) -> "Matrix":
        result = cls(0, 0)
        result._data = data
        result._rows = rows
        result._cols = cols
        return result

    def _assign(self, data: list[list[float]], rows: int, cols: int) -> "Matrix":
        self._data = data
        self._rows = rows
        self._cols = cols
        return self

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(self._elementwise(other, 1.0, "сложения"), *self.shape)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(self._elementwise(other, -1.0, "вычитания"), *self.shape)

    def __mul__(self, other: object) -> "Matrix":
        if isinstance(other, Matrix):
            return self._wrap(self._product(other), self._rows, other._cols)
        if isinstance(other, Real):
            return self._wrap(self._scaled(other), *self.shape)
        return NotImplemented

    def __rmul__(self, scalar: object) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._wrap(self._scaled(scalar), *self.shape)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self * other

    def __truediv__(self, scalar: object) -> "Matrix":
        """
        Деление на скаляр.

        Raises:
            DivisionByZero: Если |scalar| < 1e-10
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1.0 / self._checked_scalar(scalar))

    def __iadd__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._assign(self._elementwise(other, 1.0, "сложения"), *self.shape)

    def __isub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._assign(self._elementwise(other, -1.0, "вычитания"), *self.shape)

    def __imul__(self, other: object) -> "Matrix":
        if isinstance(other, Matrix):
            return self._assign(self._product(other), self._rows, other._cols)
        if isinstance(other, Real):
            return self._assign(self._scaled(other), *self.shape)
        return NotImplemented

    def __itruediv__(self, scalar: object) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._assign(self._scaled(1.0 / self._checked_scalar(scalar)), *self.shape)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= EPS_VALUE_COMPARE
            for row, other_row in zip(self._data, other._data)
            for a, b in zip(row, other_row)
        )

    __hash__ = None  # mutable

    # -------------------------------------------------------------------------
    # Матричные операции
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        data = [[self._data[i][j] for i in range(self._rows)] for j in range(self._cols)]
        return self._wrap(data, self._cols, self._rows)

    def _require_square(self, operation: str) -> None:
        if not self.is_square():
            raise InvalidArgument(
                f"{operation} возможно только для квадратной матрицы, "
                f"получено {self._rows}x{self._cols}"
            )

    def _minor(self, col: int) -> "Matrix":
        data = [
            [value for k, value in enumerate(self._data[i]) if k != col]
            for i in range(1, self._rows)
        ]
        return self._wrap(data, self._rows - 1, self._cols - 1)

    def determinant(self) -> float:
        """
        Определитель квадратной матрицы.

        Для n > 2 — разложение по первой строке:
            det(A) = Σ_j (-1)^j · a_0j · det(M_0j)

        Матрица 0×0 даёт 0.0.

        Raises:
            InvalidArgument: Если матрица не квадратная
        """
        self._require_square("Вычисление определителя")

        if self._rows == 1:
            return self._data[0][0]

        if self._rows == 2:
            return self._data[0][0] * self._data[1][1] - self._data[0][1] * self._data[1][0]

        det = 0.0
        for j in range(self._cols):
            sign = 1.0 if j % 2 == 0 else -1.0
            det += sign * self._data[0][j] * self._minor(j).determinant()
        return det

    def inverse(self) -> "Matrix":
        """
        Обратная матрица.

        2×2 — через присоединённую матрицу и определитель,
        n×n (n > 2) — метод Гаусса-Жордана.

        Raises:
            InvalidArgument: Если матрица не квадратная или вырожденная
        """
        self._require_square("Обращение")

        if self._rows <= 2:
            det = self.determinant()
            if is_zero(det):
                raise InvalidArgument("Матрица вырожденная (определитель равен нулю)")
            if self._rows == 1:
                return self._wrap([[1.0 / det]], 1, 1)

            (a, b), (c, d) = self._data
            return self._wrap([[d / det, -b / det], [-c / det, a / det]], 2, 2)

        return self._gauss_jordan_inverse()

    def _gauss_jordan_inverse(self) -> "Matrix":
        n = self._rows
        # Расширенная матрица [A | I]
        augmented = [
            row + [1.0 if i == j else 0.0 for j in range(n)]
            for i, row in enumerate(self.to_list())
        ]

        for col in range(n):
            pivot_row = max(range(col, n), key=lambda r: abs(augmented[r][col]))
            if is_zero(augmented[pivot_row][col]):
                raise InvalidArgument("Матрица вырожденная (определитель равен нулю)")
            augmented[col], augmented[pivot_row] = augmented[pivot_row], augmented[col]

            pivot = augmented[col][col]
            augmented[col] = [value / pivot for value in augmented[col]]

            for r in range(n):
                factor = augmented[r][col]
                if r != col and factor != 0.0:
                    augmented[r] = [
                        value - factor * pivot_value
                        for value, pivot_value in zip(augmented[r], augmented[col])
                    ]

        return self._wrap([row[n:] for row in augmented], n, n)

    def power(self, exponent: int) -> "Matrix":
        """
        Целая неотрицательная степень (быстрое возведение в степень).

        Raises:
            InvalidArgument: Если матрица не квадратная, exponent не целое
                или exponent < 0
        """
        self._require_square("Возведение в степень")
        if isinstance(exponent, bool) or not isinstance(exponent, Integral):
            raise InvalidArgument(
                f"Показатель степени должен быть целым числом, получено {exponent!r}"
            )
        exponent = int(exponent)
        if exponent < 0:
            raise InvalidArgument("Отрицательные степени не поддерживаются")

        result = Matrix.identity(self._rows)
        if exponent == 0:
            return result

        base = self.copy()
        while exponent > 0:
            if exponent % 2 == 1:
                result = result * base
            exponent //= 2
            if exponent:
                base = base * base
        return result

    def copy(self) -> "Matrix":
        return self._wrap(self.to_list(), *self.shape)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_identity(self, eps: float = EPS_VALUE_COMPARE) -> bool:
        if not self.is_square():
            return False
        return all(
            abs(self._data[i][j] - (1.0 if i == j else 0.0)) <= eps
            for i in range(self._rows)
            for j in range(self._cols)
        )

    def is_symmetric(self, eps: float = EPS_VALUE_COMPARE) -> bool:
        if not self.is_square():
            return False
        return all(
            abs(self._data[i][j] - self._data[j][i]) <= eps
            for i in range(self._rows)
            for j in range(i + 1, self._cols)
        )

    # -------------------------------------------------------------------------
    # Заполнение и фабрики
    # -------------------------------------------------------------------------

    def _fill(self, value: float) -> None:
        self._data = [[value] * self._cols for _ in range(self._rows)]

    def fill_zeros(self) -> None:
        self._fill(0.0)

    def fill_ones(self) -> None:
        self._fill(1.0)

    def make_identity(self) -> None:
        """
        Raises:
            InvalidArgument: Если матрица не квадратная
        """
        self._require_square("Единичная матрица")
        self._data = [
            [1.0 if i == j else 0.0 for j in range(self._cols)] for i in range(self._rows)
        ]

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        result = cls(size, size)
        result.make_identity()
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols, 0.0)

    @classmethod
    def ones(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols, 1.0)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def _format_rows(self, config: DisplayConfig) -> Iterable[str]:
        width = config.matrix_column_width
        for row in self._data:
            cells = " ".join(format_float(value, config).rjust(width) for value in row)
            yield f"[{cells}]"

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY) -> str:
        return "\n".join(self._format_rows(config))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"
