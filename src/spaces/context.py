"""Context — пространство рёбер N-мерного решётчатого графа.

Вершины — позиции DimensionN, рёбра соединяют вершины, отличающиеся
ровно одной координатой. Полезно для контекстного анализа: пространственные
операции над произвольными состояниями.

Размерность — список размеров осей (или размерностей элемента при Of),
позиция — (coords, axis, new_value):
- coords: координаты вершины
- axis: индекс изменяемой оси
- new_value: новое значение этой оси

Размеры [2, 2, 2] дают 12 рёбер куба.

Пространство разбито на N поддиапазонов, по одному на изменяемую ось:

    [(a, x), b, c]
    [a, (b, x), c]
    [a, b, (c, x)]

Размер поддиапазона оси k = Pair.count(size_k) * ∏ size_j (j != k).

    index = offset(axis) + pair_index(min, max) * ∏others + mixed_radix(others)
"""

from typing import Any, List, Optional, Sequence, Tuple

from src.core.math.triangular import (
    mixed_radix_decode,
    mixed_radix_encode,
    pair_count,
    pair_from_index,
    pair_index,
    product,
)
from src.spaces.of import Combinator

ContextPos = Tuple[List[Any], int, Any]


class Context(Combinator):
    """Неориентированные рёбра решётки."""

    def axis_sizes(self, dim: Sequence[Any]) -> List[int]:
        return [self.of.count(axis_dim) for axis_dim in dim]

    def _others(self, sizes: Sequence[int], axis: int) -> List[int]:
        return [size for j, size in enumerate(sizes) if j != axis]

    def _subspace_size(self, sizes: Sequence[int], axis: int) -> int:
        d = self.domain
        return d.mul(pair_count(sizes[axis], d), product(self._others(sizes, axis), d))

    def subspace_offset(self, sizes: Sequence[int], axis: int) -> int:
        """Смещение поддиапазона оси axis (сумма размеров предыдущих)."""
        offset = 0
        for i in range(axis):
            offset = self.domain.add(offset, self._subspace_size(sizes, i))
        return offset

    def axis_from_index(self, sizes: Sequence[int], index: int) -> Tuple[int, int]:
        """Поиск изменяемой оси по индексу.

        Returns:
            (axis, offset) — ось, чьему поддиапазону принадлежит index,
            и смещение этого поддиапазона
        """
        offset = 0
        for axis in range(len(sizes)):
            size = self._subspace_size(sizes, axis)
            if offset + size > index:
                return axis, offset
            offset = self.domain.add(offset, size)
        return len(sizes), offset

    def validate_dim(self, dim: Sequence[Any]) -> None:
        self.validate_axes(dim)

    def count(self, dim: Sequence[Any]) -> int:
        sizes = self.axis_sizes(dim)
        return self.subspace_offset(sizes, len(sizes))

    def zero(self, dim: Sequence[Any]) -> ContextPos:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Sequence[Any], pos: ContextPos) -> int:
        coords, axis, new_value = pos
        d = self.domain
        sizes = self.axis_sizes(dim)
        others = self._others(sizes, axis)

        old = self.of.to_index(dim[axis], coords[axis])
        new = self.of.to_index(dim[axis], new_value)
        single = pair_index(min(old, new), max(old, new), d)

        digits = [
            self.of.to_index(dim[i], coords[i]) for i in range(len(dim)) if i != axis
        ]
        dim_index = mixed_radix_encode(digits, others, d)

        pos_offset = d.mul(single, product(others, d))
        return d.add(d.add(self.subspace_offset(sizes, axis), pos_offset), dim_index)

    def to_pos(
        self, dim: Sequence[Any], index: int, pos: Optional[ContextPos] = None
    ) -> ContextPos:
        d = self.domain
        sizes = self.axis_sizes(dim)
        axis, offset = self.axis_from_index(sizes, index)
        others = self._others(sizes, axis)

        # Остаток: single * prod + dim_index
        index = d.sub(index, offset)
        prod = product(others, d)
        single = d.floordiv(index, prod)
        min_index, max_index = pair_from_index(single, d)
        digits = iter(mixed_radix_decode(d.sub(index, d.mul(single, prod)), others, d))

        coords = pos[0] if pos is not None else []
        coords.clear()
        for i, axis_dim in enumerate(dim):
            if i == axis:
                coords.append(self.of.to_pos(axis_dim, min_index))
            else:
                coords.append(self.of.to_pos(axis_dim, next(digits)))
        return coords, axis, self.of.to_pos(dim[axis], max_index)
