"""
Тесты для DimensionN

Проверяет:
1. Mixed-radix порядок (последняя ось — старшая)
2. Разные размеры осей и пустую размерность
3. Оси из вложенных пространств (Of)
"""

import pytest

from src.core.math.naturals import USIZE, NumericDomainViolation
from src.spaces import DimensionN, Of, Pair


class TestDimensionN:
    """Тесты DimensionN над натуральными числами."""

    def test_count(self) -> None:
        assert DimensionN().count([3, 3]) == 9
        assert DimensionN().count([2, 3, 4]) == 24

    def test_order(self) -> None:
        space = DimensionN()
        assert space.to_index([3, 3], [0, 0]) == 0
        assert space.to_index([3, 3], [1, 0]) == 1
        assert space.to_index([3, 3], [0, 1]) == 3
        assert space.to_pos([3, 3], 5) == [2, 1]

    def test_zero(self) -> None:
        assert DimensionN().zero([3, 4, 5]) == [0, 0, 0]

    def test_empty_dimension(self) -> None:
        """Пустой список осей — одна пустая позиция."""
        space = DimensionN()
        assert space.count([]) == 1
        assert space.to_pos([], 0) == []
        assert space.to_index([], []) == 0

    def test_zero_sized_axis(self) -> None:
        assert DimensionN().count([3, 0, 2]) == 0

    def test_buffer_reused(self) -> None:
        buf = [7, 7, 7]
        result = DimensionN().to_pos([2, 3, 4], 23, buf)
        assert result is buf
        assert buf == [1, 2, 3]

    def test_usize_overflow(self) -> None:
        with pytest.raises(NumericDomainViolation):
            DimensionN(domain=USIZE).count([2**32, 2**32])


class TestDimensionNOf:
    """Тесты DimensionN(Of(Pair())) — кортежи рёбер."""

    def test_count(self) -> None:
        assert DimensionN(Of(Pair())).count([3, 4]) == 18

    def test_order(self) -> None:
        space = DimensionN(Of(Pair()))
        dim = [3, 4]
        assert space.to_index(dim, [(0, 1), (0, 1)]) == 0
        assert space.to_index(dim, [(0, 2), (0, 1)]) == 1
        assert space.to_index(dim, [(1, 2), (0, 1)]) == 2
        assert space.to_index(dim, [(0, 1), (0, 2)]) == 3
        assert space.to_pos(dim, 3) == [(0, 1), (0, 2)]

    def test_zero(self) -> None:
        assert DimensionN(Of(Pair())).zero([3, 4]) == [(0, 1), (0, 1)]
