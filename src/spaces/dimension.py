"""Dimension — тождественное пространство.

Размерность — натуральное число n, позиция совпадает с индексом.
Служит элементом по умолчанию для всех комбинаторов (Of(Dimension())).
"""

from typing import Optional

from src.core.math.numerical_safeguards import validate_natural
from src.spaces.base import Space


class Dimension(Space):
    """Пространство [0, n): count = n, позиция = индекс."""

    def count(self, dim: int) -> int:
        return self.domain.natural(dim)

    def zero(self, dim: int) -> int:
        return 0

    def to_index(self, dim: int, pos: int) -> int:
        return self.domain.natural(pos)

    def to_pos(self, dim: int, index: int, pos: Optional[int] = None) -> int:
        return self.domain.natural(index)

    def validate_dim(self, dim: int) -> None:
        validate_natural(dim, "dim")
