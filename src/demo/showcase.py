"""Showcase — демонстрация Complex, Vector3D, Matrix, Fraction.

Каждая функция demonstrate_* печатает в поток out набор операций
над своим типом. main() печатает заголовок, запускает все четыре
демонстрации и возвращает код завершения.
"""

import logging
import sys
from typing import TextIO

from src.core.domain import Complex, Fraction, Matrix, Vector3D
from src.core.library_info import get_library_info
from src.core.math.exceptions import InvalidArgument, MathLibraryError

logger = logging.getLogger(__name__)


def _yes_no(flag: bool) -> str:
    return "да" if flag else "нет"


def _true_false(flag: bool) -> str:
    return "true" if flag else "false"


def demonstrate_complex(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== ДЕМОНСТРАЦИЯ КЛАССА COMPLEX ===", file=out)

    c1 = Complex(3.0, 4.0)
    c2 = Complex(1.0, -2.0)
    print(f"c1 = {c1}", file=out)
    print(f"c2 = {c2}", file=out)

    print("\nАрифметические операции:", file=out)
    print(f"c1 + c2 = {c1 + c2}", file=out)
    print(f"c1 - c2 = {c1 - c2}", file=out)
    print(f"c1 * c2 = {c1 * c2}", file=out)
    print(f"c1 / c2 = {c1 / c2}", file=out)

    print("\nМатематические функции:", file=out)
    print(f"Модуль c1: {c1.magnitude():.3f}", file=out)
    print(f"Аргумент c1: {c1.argument():.3f} радиан", file=out)
    print(f"Сопряженное c1: {c1.conjugate()}", file=out)
    print(f"c1^2: {c1.power(2)}", file=out)
    print(f"sqrt(c1): {c1.sqrt()}", file=out)


def demonstrate_vector3d(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== ДЕМОНСТРАЦИЯ КЛАССА VECTOR3D ===", file=out)

    v1 = Vector3D(1.0, 2.0, 3.0)
    v2 = Vector3D(4.0, 5.0, 6.0)
    print(f"v1 = {v1}", file=out)
    print(f"v2 = {v2}", file=out)

    print("\nАрифметические операции:", file=out)
    print(f"v1 + v2 = {v1 + v2}", file=out)
    print(f"v1 - v2 = {v1 - v2}", file=out)
    print(f"v1 * 2.0 = {v1 * 2.0}", file=out)
    print(f"v1 / 2.0 = {v1 / 2.0}", file=out)

    print("\nВекторные операции:", file=out)
    print(f"Длина v1: {v1.magnitude():.3f}", file=out)
    print(f"Скалярное произведение v1 * v2: {v1.dot_product(v2):.3f}", file=out)
    print(f"Векторное произведение v1 x v2: {v1.cross_product(v2)}", file=out)
    print(f"Угол между v1 и v2: {v1.angle_between(v2):.3f} радиан", file=out)
    print(f"Расстояние от v1 до v2: {v1.distance_to(v2):.3f}", file=out)

    normalized = v1.normalize()
    print(f"Нормализованный v1: {normalized}", file=out)
    print(f"Длина нормализованного вектора: {normalized.magnitude():.3f}", file=out)


def demonstrate_matrix(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== ДЕМОНСТРАЦИЯ КЛАССА MATRIX ===", file=out)

    m1 = Matrix(2, 2)
    m1[0][0], m1[0][1] = 1, 2
    m1[1][0], m1[1][1] = 3, 4
    m2 = Matrix.from_rows([[5, 6], [7, 8]])
    print(f"Матрица m1:\n{m1}", file=out)
    print(f"Матрица m2:\n{m2}", file=out)

    print("\nАрифметические операции:", file=out)
    print(f"m1 + m2:\n{m1 + m2}", file=out)
    print(f"m1 - m2:\n{m1 - m2}", file=out)
    print(f"m1 * m2:\n{m1 * m2}", file=out)
    print(f"m1 * 2.0:\n{m1 * 2.0}", file=out)

    print("\nМатричные операции:", file=out)
    print(f"Транспонированная m1:\n{m1.transpose()}", file=out)
    print(f"Определитель m1: {m1.determinant():.3f}", file=out)
    try:
        inv = m1.inverse()
    except InvalidArgument as e:
        print(f"Ошибка при вычислении обратной матрицы: {e}", file=out)
    else:
        print(f"Обратная матрица m1:\n{inv}", file=out)
        print(f"Проверка m1 * inv:\n{m1 * inv}", file=out)

    print("\nСтатические методы:", file=out)
    print(f"Единичная матрица 3x3:\n{Matrix.identity(3)}", file=out)
    print(f"Нулевая матрица 2x3:\n{Matrix.zeros(2, 3)}", file=out)


def demonstrate_fraction(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("\n=== ДЕМОНСТРАЦИЯ КЛАССА FRACTION ===", file=out)

    f1 = Fraction(3, 4)
    f2 = Fraction(2, 6)
    f3 = Fraction(5)
    print(f"f1 = {f1}", file=out)
    print(f"f2 = {f2} (автоматически сокращена)", file=out)
    print(f"f3 = {f3}", file=out)

    print("\nАрифметические операции:", file=out)
    print(f"f1 + f2 = {f1 + f2}", file=out)
    print(f"f1 - f2 = {f1 - f2}", file=out)
    print(f"f1 * f2 = {f1 * f2}", file=out)
    print(f"f1 / f2 = {f1 / f2}", file=out)

    print("\nОперации сравнения:", file=out)
    print(f"f1 == f2: {_true_false(f1 == f2)}", file=out)
    print(f"f1 > f2: {_true_false(f1 > f2)}", file=out)
    print(f"f1 < f3: {_true_false(f1 < f3)}", file=out)

    print("\nДополнительные функции:", file=out)
    print(f"Абсолютное значение f1: {f1.abs()}", file=out)
    print(f"Обратная дробь f1: {f1.reciprocal()}", file=out)
    print(f"f1 в степени 2: {f1.power(2)}", file=out)
    print(f"f1 как десятичная дробь: {f1.to_float():.3f}", file=out)

    print("\nПроверки:", file=out)
    print(f"f1 - правильная дробь: {_yes_no(f1.is_proper())}", file=out)
    print(f"f3 - целое число: {_yes_no(f3.is_integer())}", file=out)

    mixed = Fraction(7, 3)
    print(f"\nСмешанное число {mixed}:", file=out)
    print(f"Целая часть: {mixed.integer_part()}", file=out)
    print(f"Дробная часть: {mixed.fractional_part()}", file=out)


def main(out: TextIO | None = None) -> int:
    """
    Запуск всех демонстраций.

    Returns:
        0 при успехе, 1 если демонстрация прервана ошибкой библиотеки
    """
    out = out or sys.stdout

    print("==========================================", file=out)
    print("  БИБЛИОТЕКА МАТЕМАТИЧЕСКИХ КЛАССОВ", file=out)
    print("==========================================", file=out)
    print(get_library_info(), file=out)

    try:
        demonstrate_complex(out)
        demonstrate_vector3d(out)
        demonstrate_matrix(out)
        demonstrate_fraction(out)
    except MathLibraryError as e:
        logger.error("Демонстрация прервана: %s", e)
        print(f"\nОШИБКА: {e}", file=out)
        return 1

    return 0
