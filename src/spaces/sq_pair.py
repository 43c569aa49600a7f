"""SqPair — полный квадрат упорядоченных пар N×N.

Позиция — (a, b), a, b ∈ [0, n).

    count  = n²
    index  = a + b * n
    to_pos = (i % n, i // n)
"""

from typing import Any, Optional, Tuple

from src.spaces.of import Combinator


class SqPair(Combinator):
    """Полная сетка пар (a, b)."""

    def count(self, dim: Any) -> int:
        n = self.of.count(dim)
        return self.domain.mul(n, n)

    def zero(self, dim: Any) -> Tuple[Any, Any]:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Any, pos: Tuple[Any, Any]) -> int:
        a_pos, b_pos = pos
        d = self.domain
        n = self.of.count(dim)
        a = self.of.to_index(dim, a_pos)
        b = self.of.to_index(dim, b_pos)
        return d.add(a, d.mul(b, n))

    def to_pos(
        self, dim: Any, index: int, pos: Optional[Tuple[Any, Any]] = None
    ) -> Tuple[Any, Any]:
        a_buf, b_buf = pos if pos is not None else (None, None)
        d = self.domain
        n = self.of.count(dim)
        return (
            self.of.to_pos(dim, d.mod(index, n), a_buf),
            self.of.to_pos(dim, d.floordiv(index, n), b_buf),
        )
