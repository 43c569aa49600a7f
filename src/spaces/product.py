"""Product — произведение двух произвольных пространств.

Размерность — (dim_t, dim_u), позиция — (pos_t, pos_u).

    count  = count_T(dim_t) * count_U(dim_u)
    index  = index_T * count_U(dim_u) + index_U
    to_pos : divmod по count_U(dim_u)

Общий закон mixed-radix, на котором построены почти все остальные
пространства.
"""

from typing import Any, Optional, Tuple

from src.core.math.naturals import NumericDomain
from src.spaces.base import Space


class Product(Space):
    """Пары (pos_t, pos_u) из двух пространств."""

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
        return self.domain.mul(self.first.count(dim_t), self.second.count(dim_u))

    def zero(self, dim: Tuple[Any, Any]) -> Tuple[Any, Any]:
        dim_t, dim_u = dim
        return (self.first.zero(dim_t), self.second.zero(dim_u))

    def to_index(self, dim: Tuple[Any, Any], pos: Tuple[Any, Any]) -> int:
        dim_t, dim_u = dim
        pos_t, pos_u = pos
        d = self.domain
        count_u = self.second.count(dim_u)
        return d.add(
            d.mul(self.first.to_index(dim_t, pos_t), count_u),
            self.second.to_index(dim_u, pos_u),
        )

    def to_pos(
        self, dim: Tuple[Any, Any], index: int, pos: Optional[Tuple[Any, Any]] = None
    ) -> Tuple[Any, Any]:
        dim_t, dim_u = dim
        buf_t, buf_u = pos if pos is not None else (None, None)
        d = self.domain
        count_u = self.second.count(dim_u)
        x = d.floordiv(index, count_u)
        return (
            self.first.to_pos(dim_t, x, buf_t),
            self.second.to_pos(dim_u, d.sub(index, d.mul(x, count_u)), buf_u),
        )

    def __repr__(self) -> str:
        return f"Product({self.first!r}, {self.second!r})"
