"""NeqPair — упорядоченные пары различных элементов.

Строится удвоением индекса Pair: младший бит хранит порядок.

    index  = 2 * pair_index(min(a,b), max(a,b)) + (1 if a > b else 0)
    to_pos : (min, max) = Pair(i // 2); при нечётном i → (max, min)

    n = 4:   (0,1)=0  (1,0)=1  (0,2)=2  (2,0)=3  (1,2)=4  (2,1)=5 ...
"""

from typing import Any, Optional, Tuple

from src.core.math.triangular import pair_count, pair_from_index, pair_index
from src.spaces.of import Combinator


class NeqPair(Combinator):
    """Упорядоченная пара a != b."""

    def count(self, dim: Any) -> int:
        return self.domain.mul(pair_count(self.of.count(dim), self.domain), 2)

    def zero(self, dim: Any) -> Tuple[Any, Any]:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Any, pos: Tuple[Any, Any]) -> int:
        a_pos, b_pos = pos
        a = self.of.to_index(dim, a_pos)
        b = self.of.to_index(dim, b_pos)
        d = self.domain
        if a < b:
            return d.mul(pair_index(a, b, d), 2)
        return d.add(d.mul(pair_index(b, a, d), 2), 1)

    def to_pos(
        self, dim: Any, index: int, pos: Optional[Tuple[Any, Any]] = None
    ) -> Tuple[Any, Any]:
        a_buf, b_buf = pos if pos is not None else (None, None)
        d = self.domain
        min_index, max_index = pair_from_index(d.floordiv(index, 2), d)
        if d.mod(index, 2) == 1:
            min_index, max_index = max_index, min_index
        return (
            self.of.to_pos(dim, min_index, a_buf),
            self.of.to_pos(dim, max_index, b_buf),
        )
