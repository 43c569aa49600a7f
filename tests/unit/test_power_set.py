"""
Тесты для PowerSet

Проверяет:
1. Мощность 2^n
2. Битовую маску как индекс
3. Подмножества вложенных пространств
"""

import pytest

from src.core.math.naturals import USIZE, NumericDomainViolation
from src.spaces import Of, Pair, PowerSet


class TestPowerSet:
    """Тесты PowerSet над натуральными числами."""

    def test_count(self) -> None:
        assert PowerSet().count(0) == 1
        assert PowerSet().count(6) == 64

    def test_bitmask_index(self) -> None:
        space = PowerSet()
        assert space.to_index(6, []) == 0
        assert space.to_index(6, [0]) == 1
        assert space.to_index(6, [1]) == 2
        assert space.to_index(6, [0, 1]) == 3
        assert space.to_index(6, [0, 3]) == 9

    def test_to_pos_ascending(self) -> None:
        assert PowerSet().to_pos(6, 9) == [0, 3]
        assert PowerSet().to_pos(6, 63) == [0, 1, 2, 3, 4, 5]

    def test_zero_is_empty_set(self) -> None:
        assert PowerSet().zero(6) == []

    def test_buffer_reused(self) -> None:
        buf = [5, 5, 5, 5]
        result = PowerSet().to_pos(6, 2, buf)
        assert result is buf
        assert buf == [1]

    def test_usize_overflow(self) -> None:
        """2^64 подмножеств не помещаются в USIZE."""
        assert PowerSet(domain=USIZE).count(63) == 2**63
        with pytest.raises(NumericDomainViolation):
            PowerSet(domain=USIZE).count(64)

    def test_biguint_large(self) -> None:
        space = PowerSet()
        assert space.count(100) == 2**100
        assert space.to_pos(100, 2**99 + 1) == [0, 99]


class TestPowerSetOf:
    """Тесты PowerSet(Of(Pair())) — множества рёбер."""

    def test_count(self) -> None:
        assert PowerSet(Of(Pair())).count(4) == 64

    def test_edges(self) -> None:
        space = PowerSet(Of(Pair()))
        assert space.to_index(4, [(0, 1)]) == 1
        assert space.to_index(4, [(0, 2)]) == 2
        assert space.to_index(4, [(0, 1), (0, 2)]) == 3
        assert space.to_index(4, [(1, 2)]) == 4
        assert space.to_pos(4, 7) == [(0, 1), (0, 2), (1, 2)]
