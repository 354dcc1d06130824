"""
Display — текстовое представление и разбор значений

Общий слой форматирования для Complex, Vector3D, Matrix, Fraction:
- DisplayConfig: immutable Pydantic модель параметров вывода
- format_float: вывод float с фиксированным числом знаков
- split_tokens: разбор строки из полей, разделённых пробелами

Разбор не восстанавливается после ошибок: нечисловой токен пробрасывает
ValueError от float()/int(), неверное число токенов — InvalidArgument.
"""

from pydantic import BaseModel, Field

from src.core.math.exceptions import InvalidArgument


class DisplayConfig(BaseModel):
    """
    Параметры текстового вывода.

    Immutable модель (frozen=True): одна конфигурация разделяется всеми типами.
    """

    precision: int = Field(3, ge=0, description="Число знаков после запятой")
    matrix_column_width: int = Field(
        8, ge=1, description="Ширина поля элемента матрицы"
    )

    model_config = {"frozen": True}


DEFAULT_DISPLAY = DisplayConfig()


def format_float(value: float, config: DisplayConfig = DEFAULT_DISPLAY) -> str:
    """
    Вывод float с фиксированной точностью.

    Examples:
        >>> format_float(3.14159)
        '3.142'
    """
    return f"{value:.{config.precision}f}"


def split_tokens(text: str, expected: int | None, type_name: str) -> list[str]:
    """
    Разбиение строки на поля по пробельным символам.

    Args:
        text: Исходная строка (может содержать переводы строк)
        expected: Ожидаемое число полей (None — без проверки)
        type_name: Имя типа для сообщения об ошибке

    Returns:
        Список токенов

    Raises:
        InvalidArgument: Если число полей не совпадает с expected
    """
    tokens = text.split()
    if expected is not None and len(tokens) != expected:
        raise InvalidArgument(
            f"{type_name}: ожидалось {expected} полей, получено {len(tokens)}"
        )
    return tokens
