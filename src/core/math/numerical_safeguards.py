"""
Numerical Safeguards — Проверки индексов и натуральных чисел

Ядро индексации намеренно НЕ проверяет границы (горячие циклы
перебора). Этот модуль предоставляет явную валидацию для вызывающего
кода и checked-вариантов операций пространств:
- Проверка, что значение — натуральное число (int >= 0, не bool)
- Проверка, что индекс лежит в [0, count)
- Проверка размерностей (неотрицательные размеры осей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация не меняет поведение in-range операций
2. Ошибки никогда не подавляются: нарушение → exception
"""

from typing import Sequence

# =============================================================================
# EXCEPTIONS
# =============================================================================


class SpaceIndexError(IndexError):
    """Индекс вне диапазона [0, count(dim))."""

    pass


class SpacePositionError(ValueError):
    """Позиция не принадлежит пространству при заданной размерности."""

    pass


# =============================================================================
# ПРОВЕРКИ НАТУРАЛЬНЫХ ЧИСЕЛ
# =============================================================================


def is_natural(value: object) -> bool:
    """
    Проверка, что значение — натуральное число (включая 0).

    bool исключён явно: True/False не являются индексами.

    Examples:
        >>> is_natural(0)
        True
        >>> is_natural(-1)
        False
        >>> is_natural(True)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_natural(value: object, name: str) -> None:
    """
    Валидация, что значение натуральное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    if not is_natural(value):
        raise ValueError(f"{name} must be a natural number (int >= 0), got {value!r}")


def validate_index(index: object, count: int, name: str = "index") -> None:
    """
    Валидация, что индекс лежит в [0, count).

    Args:
        index: Проверяемый индекс
        count: Мощность пространства
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        SpaceIndexError: Если index вне диапазона или не натуральный

    Examples:
        >>> validate_index(3, 6)
        >>> validate_index(6, 6)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        SpaceIndexError: ...
    """
    if not is_natural(index):
        raise SpaceIndexError(f"{name} must be a natural number, got {index!r}")

    if index >= count:
        raise SpaceIndexError(f"{name} {index} out of range [0, {count})")


def validate_axis_sizes(sizes: Sequence[int], name: str = "dim") -> None:
    """
    Валидация списка размеров осей.

    Raises:
        ValueError: Если хотя бы один размер не натуральный
    """
    for axis, size in enumerate(sizes):
        validate_natural(size, f"{name}[{axis}]")
