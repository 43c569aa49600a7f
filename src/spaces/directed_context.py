"""DirectedContext — ориентированные рёбра решётки.

То же, что Context, но ребро хранит направление: младший бит индекса
равен 1, если новое значение меньше старого (аналогично NeqPair
относительно Pair).

    count  = 2 * Context.count
    index  = 2 * context_index + (1 if old > new else 0)
    to_pos : Context(i // 2), при нечётном i старое и новое меняются местами
"""

from typing import Any, Optional, Sequence, Union

from src.core.math.naturals import NumericDomain
from src.spaces.base import Space
from src.spaces.context import Context, ContextPos
from src.spaces.of import Combinator, Of


class DirectedContext(Combinator):
    """Ориентированные рёбра решётки."""

    def __init__(
        self,
        of: Union[Of, Space, None] = None,
        domain: Optional[NumericDomain] = None,
    ):
        super().__init__(of, domain)
        self.context = Context(self.of, self.domain)

    def validate_dim(self, dim: Sequence[Any]) -> None:
        self.validate_axes(dim)

    def count(self, dim: Sequence[Any]) -> int:
        return self.domain.mul(self.context.count(dim), 2)

    def zero(self, dim: Sequence[Any]) -> ContextPos:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Sequence[Any], pos: ContextPos) -> int:
        coords, axis, new_value = pos
        d = self.domain
        index = d.mul(self.context.to_index(dim, pos), 2)
        old = self.of.to_index(dim[axis], coords[axis])
        new = self.of.to_index(dim[axis], new_value)
        if old > new:
            return d.add(index, 1)
        return index

    def to_pos(
        self, dim: Sequence[Any], index: int, pos: Optional[ContextPos] = None
    ) -> ContextPos:
        d = self.domain
        coords, axis, new_value = self.context.to_pos(dim, d.floordiv(index, 2), pos)
        if d.mod(index, 2) == 1:
            coords[axis], new_value = new_value, coords[axis]
        return coords, axis, new_value
