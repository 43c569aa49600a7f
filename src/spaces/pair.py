"""Pair — неупорядоченные пары различных элементов.

Размерность — размерность элемента (натуральное n для Pair()),
позиция — (min, max), min < max по индексам элементов.

    count    = n(n-1)/2
    index    = min + max(max-1)/2
    to_pos   : max = floor((1 + sqrt(8i+1)) / 2), min = i - max(max-1)/2

    n = 4:   (0,1)=0  (0,2)=1  (1,2)=2  (0,3)=3  (1,3)=4  (2,3)=5
"""

from typing import Any, Optional, Tuple

from src.core.math.triangular import pair_count, pair_from_index, pair_index
from src.spaces.of import Combinator


class Pair(Combinator):
    """Неупорядоченная пара min < max."""

    def count(self, dim: Any) -> int:
        return pair_count(self.of.count(dim), self.domain)

    def zero(self, dim: Any) -> Tuple[Any, Any]:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Any, pos: Tuple[Any, Any]) -> int:
        min_pos, max_pos = pos
        return pair_index(
            self.of.to_index(dim, min_pos), self.of.to_index(dim, max_pos), self.domain
        )

    def to_pos(
        self, dim: Any, index: int, pos: Optional[Tuple[Any, Any]] = None
    ) -> Tuple[Any, Any]:
        min_buf, max_buf = pos if pos is not None else (None, None)
        min_index, max_index = pair_from_index(index, self.domain)
        return (
            self.of.to_pos(dim, min_index, min_buf),
            self.of.to_pos(dim, max_index, max_buf),
        )
