"""DimensionN — декартово произведение осей.

Размерность — список размерностей осей, позиция — список координат.
Индекс — mixed-radix кодирование, ПОСЛЕДНЯЯ ось — старшая
(обход осей в обратном порядке в обоих направлениях).

    dim = [3, 3]:  [0, 0] = 0,  [1, 0] = 1,  [0, 1] = 3

С Of(inner) каждая ось — отдельное пространство inner со своей
размерностью: DimensionN(Of(Pair())) при dim = [3, 4] — пары рёбер.
"""

from typing import Any, List, Optional, Sequence

from src.core.math.triangular import mixed_radix_decode, mixed_radix_encode, product
from src.spaces.of import Combinator


class DimensionN(Combinator):
    """N-мерная сетка с независимыми размерами осей."""

    def axis_sizes(self, dim: Sequence[Any]) -> List[int]:
        """Мощности осей (count элемента по каждой размерности)."""
        return [self.of.count(axis_dim) for axis_dim in dim]

    def validate_dim(self, dim: Sequence[Any]) -> None:
        self.validate_axes(dim)

    def count(self, dim: Sequence[Any]) -> int:
        return product(self.axis_sizes(dim), self.domain)

    def zero(self, dim: Sequence[Any]) -> List[Any]:
        return [self.of.zero(axis_dim) for axis_dim in dim]

    def to_index(self, dim: Sequence[Any], pos: Sequence[Any]) -> int:
        digits = [self.of.to_index(axis_dim, p) for axis_dim, p in zip(dim, pos)]
        return mixed_radix_encode(digits, self.axis_sizes(dim), self.domain)

    def to_pos(
        self, dim: Sequence[Any], index: int, pos: Optional[List[Any]] = None
    ) -> List[Any]:
        digits = mixed_radix_decode(index, self.axis_sizes(dim), self.domain)
        buffers = list(pos) if pos is not None and len(pos) == len(dim) else [None] * len(dim)
        coords = pos if pos is not None else []
        coords.clear()
        for axis_dim, digit, buf in zip(dim, digits, buffers):
            coords.append(self.of.to_pos(axis_dim, digit, buf))
        return coords
