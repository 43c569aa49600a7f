"""
Positions — Структурированные позиции составных пространств

Immutable value objects:
- First / Second: выбор стороны в дизъюнктном объединении (Either)
- Point / Path: бинарное дерево позиций Homotopy (HPoint)

Остальные позиции — обычные int, tuple и list.
"""

from dataclasses import dataclass
from typing import Any, Union


# =============================================================================
# EITHER
# =============================================================================


@dataclass(frozen=True)
class First:
    """Позиция из первого пространства Either."""

    value: Any


@dataclass(frozen=True)
class Second:
    """Позиция из второго пространства Either."""

    value: Any


Select = Union[First, Second]


# =============================================================================
# HOMOTOPY
# =============================================================================


class HPoint:
    """
    Точка высшего порядка для пространств Homotopy.

    Point(value) — точка уровня 0.
    Path(left, right) — путь между двумя точками уровня ниже.
    """

    __slots__ = ()

    def level(self) -> int:
        """Гомотопический уровень позиции."""
        raise NotImplementedError


@dataclass(frozen=True)
class Point(HPoint):
    """Точка (уровень 0)."""

    value: Any

    def level(self) -> int:
        return 0


@dataclass(frozen=True)
class Path(HPoint):
    """Путь между двумя точками высшего порядка."""

    left: HPoint
    right: HPoint

    def level(self) -> int:
        return max(self.left.level(), self.right.level()) + 1
