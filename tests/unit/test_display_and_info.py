"""
Тесты для слоя отображения и сведений о библиотеке

Проверяет:
1. DisplayConfig: значения по умолчанию, валидацию, immutability
2. format_float / split_tokens
3. LibraryInfo и текстовые справки
"""

import pytest
from pydantic import ValidationError

from src.core.domain import DEFAULT_DISPLAY, DisplayConfig, format_float, split_tokens
from src.core.library_info import (
    LIBRARY_INFO,
    LibraryInfo,
    get_detailed_info,
    get_library_info,
)
from src.core.math import InvalidArgument


class TestDisplayConfig:
    """Тесты для DisplayConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_DISPLAY.precision == 3
        assert DEFAULT_DISPLAY.matrix_column_width == 8

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_DISPLAY.precision = 5

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(precision=-1)
        with pytest.raises(ValidationError):
            DisplayConfig(matrix_column_width=0)


class TestFormatting:
    """Тесты format_float и split_tokens"""

    def test_format_float(self) -> None:
        assert format_float(3.14159) == "3.142"
        assert format_float(2.0, DisplayConfig(precision=0)) == "2"

    def test_split_tokens(self) -> None:
        assert split_tokens(" 1\t2\n3 ", 3, "Vector3D") == ["1", "2", "3"]
        assert split_tokens("", None, "Matrix") == []

    def test_split_tokens_count_mismatch(self) -> None:
        with pytest.raises(InvalidArgument, match="Vector3D"):
            split_tokens("1 2", 3, "Vector3D")


class TestLibraryInfo:
    """Тесты для LibraryInfo"""

    def test_library_info_line(self) -> None:
        line = get_library_info()
        assert line.startswith("Библиотека математических классов v1.0.0")
        assert LIBRARY_INFO.version in line

    def test_custom_info(self) -> None:
        info = LibraryInfo(name="MathLib", version="2.1.0", author="team", date="2025")
        assert get_library_info(info) == "MathLib v2.1.0 (автор: team, 2025)"

    def test_invalid_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LibraryInfo(name="MathLib", version="v2", author="team", date="2025")

    def test_detailed_info_lists_all_classes(self) -> None:
        text = get_detailed_info()
        for name in ("Complex", "Vector3D", "Matrix", "Fraction"):
            assert name in text
