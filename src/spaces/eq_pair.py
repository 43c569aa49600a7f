"""EqPair — неупорядоченные пары с допуском совпадения.

Позиция — (min, max), min <= max по индексам элементов.
Включает "петли" (элемент в паре с самим собой).

    count    = n(n+1)/2
    index    = min + max(max+1)/2

    n = 4:
        (0,0)=0
        (0,1)=1 (1,1)=2
        (0,2)=3 (1,2)=4 (2,2)=5
        (0,3)=6 (1,3)=7 (2,3)=8 (3,3)=9
"""

from typing import Any, Optional, Tuple

from src.core.math.triangular import eq_pair_count, eq_pair_from_index, eq_pair_index
from src.spaces.of import Combinator


class EqPair(Combinator):
    """Неупорядоченная пара min <= max."""

    def count(self, dim: Any) -> int:
        return eq_pair_count(self.of.count(dim), self.domain)

    def zero(self, dim: Any) -> Tuple[Any, Any]:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Any, pos: Tuple[Any, Any]) -> int:
        min_pos, max_pos = pos
        return eq_pair_index(
            self.of.to_index(dim, min_pos), self.of.to_index(dim, max_pos), self.domain
        )

    def to_pos(
        self, dim: Any, index: int, pos: Optional[Tuple[Any, Any]] = None
    ) -> Tuple[Any, Any]:
        min_buf, max_buf = pos if pos is not None else (None, None)
        min_index, max_index = eq_pair_from_index(index, self.domain)
        return (
            self.of.to_pos(dim, min_index, min_buf),
            self.of.to_pos(dim, max_index, max_buf),
        )
