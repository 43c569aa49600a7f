"""PowerSet — множество всех подмножеств.

Размерность — размерность элемента (n для PowerSet()), позиция —
строго возрастающий (по индексам элементов) список членов.

    count  = 2^n
    index  = битовая маска: бит i установлен ⇔ элемент i входит в множество
    to_pos : просмотр битов от младшего к старшему

    n = 6:   [] = 0,  [0] = 1,  [1] = 2,  [0, 1] = 3,  [0, 3] = 9
"""

from typing import Any, List, Optional

from src.spaces.of import Combinator


class PowerSet(Combinator):
    """Подмножества пространства элементов."""

    def count(self, dim: Any) -> int:
        return self.domain.natural(1 << self.of.count(dim))

    def zero(self, dim: Any) -> List[Any]:
        return []

    def to_index(self, dim: Any, pos: List[Any]) -> int:
        index = 0
        for member in pos:
            index |= 1 << self.of.to_index(dim, member)
        return self.domain.natural(index)

    def to_pos(self, dim: Any, index: int, pos: Optional[List[Any]] = None) -> List[Any]:
        members = pos if pos is not None else []
        members.clear()
        n = self.of.count(dim)
        for i in range(min(n, index.bit_length())):
            if (index >> i) & 1 == 1:
                members.append(self.of.to_pos(dim, i))
        return members
