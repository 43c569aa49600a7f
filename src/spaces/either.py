"""Either — дизъюнктное объединение двух пространств.

Размерность — (dim_t, dim_u), позиция — First(pos_t) | Second(pos_u).

    count          = count_T + count_U
    First(pos_t)   → [0, count_T)
    Second(pos_u)  → [count_T, count_T + count_U)
    to_pos         : сравнение индекса с count_T выбирает сторону
"""

from typing import Any, Optional, Tuple

from src.core.domain.positions import First, Second, Select
from src.core.math.naturals import NumericDomain
from src.spaces.base import Space


class Either(Space):
    """Выбор между двумя пространствами."""

    def __init__(self, first: Space, second: Space, domain: Optional[NumericDomain] = None):
        super().__init__(domain)
        self.first = first
        self.second = second

    def validate_dim(self, dim: Tuple[Any, Any]) -> None:
        dim_t, dim_u = dim
        self.first.validate_dim(dim_t)
        self.second.validate_dim(dim_u)

    def count(self, dim: Tuple[Any, Any]) -> int:
        dim_t, dim_u = dim
        return self.domain.add(self.first.count(dim_t), self.second.count(dim_u))

    def zero(self, dim: Tuple[Any, Any]) -> Select:
        dim_t, _ = dim
        return First(self.first.zero(dim_t))

    def to_index(self, dim: Tuple[Any, Any], pos: Select) -> int:
        dim_t, dim_u = dim
        if isinstance(pos, First):
            return self.first.to_index(dim_t, pos.value)
        if isinstance(pos, Second):
            return self.domain.add(
                self.first.count(dim_t), self.second.to_index(dim_u, pos.value)
            )
        raise TypeError(f"Either position must be First or Second, got {pos!r}")

    def to_pos(self, dim: Tuple[Any, Any], index: int, pos: Optional[Select] = None) -> Select:
        dim_t, dim_u = dim
        count_t = self.first.count(dim_t)
        if index < count_t:
            buf = pos.value if isinstance(pos, First) else None
            return First(self.first.to_pos(dim_t, index, buf))
        buf = pos.value if isinstance(pos, Second) else None
        return Second(self.second.to_pos(dim_u, self.domain.sub(index, count_t), buf))

    def __repr__(self) -> str:
        return f"Either({self.first!r}, {self.second!r})"


# Дизъюнктная сумма пространств
Sum = Either
