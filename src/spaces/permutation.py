"""Permutation — перестановки элементов.

Размерность — размерность элемента (n для Permutation()), позиция —
список из n различных элементов.

Факториальная система счисления (код Лемера): на шаге i выбранный
элемент — ind-й по возрастанию среди оставшихся, где
ind = index // (n-1-i)!.

    count = n!

    n = 4:
        0 → [0, 1, 2, 3]
        1 → [0, 1, 3, 2]
        2 → [0, 2, 1, 3]
        3 → [0, 2, 3, 1]
        6 → [1, 0, 2, 3]
"""

from typing import Any, List, Optional

from src.core.math.triangular import factorial
from src.spaces.of import Combinator


class Permutation(Combinator):
    """Упорядочения элементов [0, n)."""

    def count(self, dim: Any) -> int:
        return factorial(self.of.count(dim), self.domain)

    def zero(self, dim: Any) -> List[Any]:
        return self.to_pos(dim, 0)

    def to_index(self, dim: Any, pos: List[Any]) -> int:
        d = self.domain
        n = self.of.count(dim)
        remaining = list(range(n))
        block = factorial(n, d)
        index = 0
        for i, item in enumerate(pos):
            block = d.floordiv(block, n - i)
            rank = remaining.index(self.of.to_index(dim, item))
            remaining.pop(rank)
            index = d.add(index, d.mul(rank, block))
        return index

    def to_pos(self, dim: Any, index: int, pos: Optional[List[Any]] = None) -> List[Any]:
        d = self.domain
        n = self.of.count(dim)

        # Голова items: оставшиеся по возрастанию; хвост: выбранные по порядку
        items = list(range(n))
        count = factorial(n, d)
        for i in range(n):
            block = d.floordiv(count, n - i)
            ind = d.floordiv(index, block)
            items.append(items.pop(ind))
            count = d.floordiv(count, n - i)
            index = d.sub(index, d.mul(ind, block))

        result = pos if pos is not None else []
        result.clear()
        result.extend(self.of.to_pos(dim, item) for item in items)
        return result
