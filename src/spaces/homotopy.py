"""Homotopy — башня "путей между путями".

Гомотопический уровень соединяет части пространства уровня ниже.
Уровень 0 — сами части (пространство элементов, по умолчанию Dimension),
уровень k — EqPair над уровнем k-1: неупорядоченная пара элементов
уровня k-1 с допуском петель (путь от точки к самой себе).

Размерность — (level, n), позиция — HPoint:
- Point(value) на уровне 0
- Path(left, right) на уровне k, left/right — позиции уровня k-1

    level   n=0     n=1     n=2     n=3         n=4
    0       0       1       2       3           4
    1       0       1       3       6           10
    2       0       1       6       21          55
    3       0       1       21      231         1540
"""

from typing import Any, Optional, Tuple

from src.core.domain.positions import HPoint, Path, Point
from src.core.math.numerical_safeguards import validate_natural
from src.core.math.triangular import eq_pair_count, eq_pair_from_index, eq_pair_index
from src.spaces.of import Combinator

HomotopyDim = Tuple[int, Any]


class Homotopy(Combinator):
    """Неориентированные гомотопические пути заданного уровня."""

    def validate_dim(self, dim: HomotopyDim) -> None:
        level, n = dim
        validate_natural(level, "level")
        self.of.validate_dim(n)

    def count(self, dim: HomotopyDim) -> int:
        level, n = dim
        count = self.of.count(n)
        for _ in range(level):
            count = eq_pair_count(count, self.domain)
        return count

    def zero(self, dim: HomotopyDim) -> HPoint:
        level, n = dim
        if level == 0:
            return Point(self.of.zero(n))
        lower = self.zero((level - 1, n))
        return Path(lower, lower)

    def to_index(self, dim: HomotopyDim, pos: HPoint) -> int:
        level, n = dim
        if isinstance(pos, Point):
            return self.of.to_index(n, pos.value)
        if isinstance(pos, Path):
            a = self.to_index((level - 1, n), pos.left)
            b = self.to_index((level - 1, n), pos.right)
            return eq_pair_index(min(a, b), max(a, b), self.domain)
        raise TypeError(f"Homotopy position must be Point or Path, got {pos!r}")

    def to_pos(self, dim: HomotopyDim, index: int, pos: Optional[HPoint] = None) -> HPoint:
        level, n = dim
        if level == 0:
            return Point(self.of.to_pos(n, index))
        min_index, max_index = eq_pair_from_index(index, self.domain)
        return Path(
            self.to_pos((level - 1, n), min_index),
            self.to_pos((level - 1, n), max_index),
        )
