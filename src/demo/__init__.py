"""Demo — консольная демонстрация классов библиотеки.

Запуск: python -m src.demo
"""

from src.demo.showcase import (
    demonstrate_complex,
    demonstrate_fraction,
    demonstrate_matrix,
    demonstrate_vector3d,
    main,
)

__all__ = [
    "demonstrate_complex",
    "demonstrate_vector3d",
    "demonstrate_matrix",
    "demonstrate_fraction",
    "main",
]
