"""
Exceptions — таксономия ошибок библиотеки

Все ошибки поднимаются в точке нарушения контракта и пробрасываются
вызывающему коду без перехвата и без логирования внутри библиотеки.

Иерархия:
    MathLibraryError
    ├── InvalidArgument (ValueError)
    │   └── DivisionByZero (ZeroDivisionError)
    ├── OutOfRange (IndexError)
    └── InvalidOperation (ArithmeticError)

DivisionByZero наследует InvalidArgument: деление на ноль — частный случай
недопустимого аргумента (делитель, знаменатель, скаляр).
"""


class MathLibraryError(Exception):
    """Базовое исключение библиотеки математических классов."""


class InvalidArgument(MathLibraryError, ValueError):
    """
    Недопустимый аргумент операции.

    Примеры: нулевой знаменатель, несовпадение размеров матриц,
    неквадратная матрица для determinant/inverse/power,
    вырожденная матрица, отрицательная степень матрицы,
    ноль в отрицательной степени, строки разной длины.
    """


class DivisionByZero(InvalidArgument, ZeroDivisionError):
    """Делитель равен нулю или отличается от нуля меньше чем на 1e-10."""


class OutOfRange(MathLibraryError, IndexError):
    """Индекс элемента или строки матрицы вне границ."""


class InvalidOperation(MathLibraryError, ArithmeticError):
    """
    Геометрически невозможная операция.

    Нормализация, проекция или угол с вектором почти нулевой длины.
    """
