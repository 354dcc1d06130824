"""
Library Info — сведения о библиотеке математических классов

Immutable Pydantic модель с версией и автором, а также текстовые
справки для демонстрационной программы.
"""

from pydantic import BaseModel, Field


class LibraryInfo(BaseModel):
    """Метаданные библиотеки."""

    name: str = Field(..., min_length=1, description="Название библиотеки")
    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$", description="Версия (semver)")
    author: str = Field(..., min_length=1, description="Автор")
    date: str = Field(..., description="Год создания")

    model_config = {"frozen": True}


LIBRARY_INFO = LibraryInfo(
    name="Библиотека математических классов",
    version="1.0.0",
    author="Finaldz",
    date="2024",
)


def get_library_info(info: LibraryInfo = LIBRARY_INFO) -> str:
    """
    Строка с версией и автором.

    Examples:
        >>> get_library_info()
        'Библиотека математических классов v1.0.0 (автор: Finaldz, 2024)'
    """
    return f"{info.name} v{info.version} (автор: {info.author}, {info.date})"


def get_detailed_info() -> str:
    """Перечень классов библиотеки."""
    return (
        "Библиотека содержит 4 основных класса:\n"
        "1. Complex - комплексные числа\n"
        "2. Vector3D - трехмерные векторы\n"
        "3. Matrix - матрицы\n"
        "4. Fraction - обыкновенные дроби\n"
        "Все классы поддерживают основные математические операции."
    )
