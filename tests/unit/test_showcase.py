"""
Тесты для демонстрационной программы

Проверяет, что каждая демонстрация выполняется без ошибок и выводит
ожидаемые значения, а main() возвращает корректный код завершения.
"""

import io
import logging

import pytest

from src.demo import showcase
from src.core.math import InvalidArgument


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


class TestDemonstrations:
    """Тесты отдельных демонстраций"""

    def test_complex(self, out: io.StringIO) -> None:
        showcase.demonstrate_complex(out)
        text = out.getvalue()
        assert "c1 = 3.000 + 4.000i" in text
        assert "c1 / c2 = -1.000 + 2.000i" in text
        assert "Модуль c1: 5.000" in text

    def test_vector3d(self, out: io.StringIO) -> None:
        showcase.demonstrate_vector3d(out)
        text = out.getvalue()
        assert "Векторное произведение v1 x v2: (-3.000, 6.000, -3.000)" in text
        assert "Скалярное произведение v1 * v2: 32.000" in text
        assert "Длина нормализованного вектора: 1.000" in text

    def test_matrix(self, out: io.StringIO) -> None:
        showcase.demonstrate_matrix(out)
        text = out.getvalue()
        assert "Определитель m1: -2.000" in text
        assert "[  -2.000    1.000]" in text
        assert "Нулевая матрица 2x3:" in text

    def test_fraction(self, out: io.StringIO) -> None:
        showcase.demonstrate_fraction(out)
        text = out.getvalue()
        assert "f2 = 1/3 (автоматически сокращена)" in text
        assert "f1 + f2 = 13/12" in text
        assert "Целая часть: 2" in text
        assert "Дробная часть: 1/3" in text


class TestMain:
    """Тесты main()"""

    def test_success(self, out: io.StringIO) -> None:
        assert showcase.main(out) == 0
        text = out.getvalue()
        assert "БИБЛИОТЕКА МАТЕМАТИЧЕСКИХ КЛАССОВ" in text
        assert "=== ДЕМОНСТРАЦИЯ КЛАССА FRACTION ===" in text

    def test_library_error_returns_one(
        self, out: io.StringIO, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def failing(_out) -> None:
            raise InvalidArgument("сбой")

        monkeypatch.setattr(showcase, "demonstrate_vector3d", failing)
        assert showcase.main(out) == 1
        assert "ОШИБКА: сбой" in out.getvalue()

    def test_library_error_is_logged(
        self,
        out: io.StringIO,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def failing(_out) -> None:
            raise InvalidArgument("сбой")

        monkeypatch.setattr(showcase, "demonstrate_matrix", failing)
        with caplog.at_level(logging.ERROR, logger=showcase.__name__):
            assert showcase.main(out) == 1
        assert "Демонстрация прервана: сбой" in caplog.text

    def test_does_not_configure_logging(
        self, out: io.StringIO, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Настройка логирования — забота точки входа, а не main()"""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        assert showcase.main(out) == 0
        assert calls == []
