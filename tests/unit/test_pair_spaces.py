"""
Тесты для пространств пар и Dimension

Проверяет:
1. Dimension — тождественное пространство
2. Pair / EqPair / NeqPair / SqPair — мощности и порядок позиций
3. Пары над вложенными пространствами (Of)
"""

import pytest

from src.core.math.naturals import USIZE, NumericDomainViolation
from src.spaces import Dimension, DimensionN, EqPair, NeqPair, Of, Pair, SqPair


# =============================================================================
# DIMENSION
# =============================================================================


class TestDimension:
    """Тесты Dimension."""

    def test_identity(self) -> None:
        space = Dimension()
        assert space.count(5) == 5
        assert space.zero(5) == 0
        assert space.to_index(5, 3) == 3
        assert space.to_pos(5, 3) == 3

    def test_empty(self) -> None:
        assert Dimension().count(0) == 0


# =============================================================================
# PAIR
# =============================================================================


class TestPair:
    """Тесты Pair (min < max)."""

    def test_count(self) -> None:
        assert Pair().count(4) == 6
        assert Pair().count(1) == 0
        assert Pair().count(0) == 0

    def test_order(self) -> None:
        space = Pair()
        assert space.to_index(4, (0, 1)) == 0
        assert space.to_index(4, (0, 2)) == 1
        assert space.to_index(4, (1, 2)) == 2
        assert space.to_index(4, (0, 3)) == 3
        assert space.to_pos(4, 3) == (0, 3)
        assert space.to_pos(4, 5) == (2, 3)

    def test_zero(self) -> None:
        assert Pair().zero(4) == (0, 1)

    def test_of_dimension_n(self) -> None:
        """Пары вершин квадрата 2x2."""
        space = Pair(Of(DimensionN()))
        dim = [2, 2]
        assert space.count(dim) == 6
        assert space.to_index(dim, ([0, 0], [1, 0])) == 0
        assert space.to_index(dim, ([0, 0], [0, 1])) == 1
        assert space.to_index(dim, ([1, 0], [0, 1])) == 2
        assert space.to_index(dim, ([0, 1], [1, 1])) == 5
        assert space.to_pos(dim, 5) == ([0, 1], [1, 1])

    def test_of_pair(self) -> None:
        """Пары рёбер: элементы — позиции Pair."""
        space = Pair(Of(Pair()))
        assert space.count(3) == 3
        assert space.to_pos(3, 0) == ((0, 1), (0, 2))
        assert space.to_index(3, ((0, 2), (1, 2))) == 2

    def test_to_pos_with_buffers(self) -> None:
        """Буферы списков заполняются на месте."""
        space = Pair(Of(DimensionN()))
        a, b = [9, 9], [9, 9]
        result = space.to_pos([2, 2], 2, (a, b))
        assert result == ([1, 0], [0, 1])
        assert result[0] is a
        assert result[1] is b


# =============================================================================
# EQ PAIR
# =============================================================================


class TestEqPair:
    """Тесты EqPair (min <= max)."""

    def test_count(self) -> None:
        assert EqPair().count(4) == 10
        assert EqPair().count(1) == 1

    def test_order(self) -> None:
        space = EqPair()
        expected = [(0, 0), (0, 1), (1, 1), (0, 2), (1, 2), (2, 2)]
        assert [space.to_pos(4, i) for i in range(6)] == expected
        assert space.to_index(4, (3, 3)) == 9

    def test_usize_count_at_word_limit(self) -> None:
        """USIZE и BIGUINT согласны, пока мощность помещается в слово."""
        n = 2**32
        assert EqPair(domain=USIZE).count(n) == 2**63 + 2**31
        assert EqPair(domain=USIZE).count(n) == EqPair().count(n)
        assert EqPair(domain=USIZE).to_pos(n, 2**63 + 2**31 - 1) == (n - 1, n - 1)

    def test_zero_is_loop(self) -> None:
        assert EqPair().zero(4) == (0, 0)

    def test_of_dimension_n(self) -> None:
        space = EqPair(Of(DimensionN()))
        dim = [2, 2]
        assert space.count(dim) == 10
        assert space.to_index(dim, ([1, 0], [1, 0])) == 2
        assert space.to_pos(dim, 9) == ([1, 1], [1, 1])


# =============================================================================
# NEQ PAIR
# =============================================================================


class TestNeqPair:
    """Тесты NeqPair (упорядоченные a != b)."""

    def test_count(self) -> None:
        assert NeqPair().count(4) == 12

    def test_order(self) -> None:
        space = NeqPair()
        expected = [(0, 1), (1, 0), (0, 2), (2, 0), (1, 2), (2, 1), (0, 3)]
        assert [space.to_pos(4, i) for i in range(7)] == expected
        assert [space.to_index(4, p) for p in expected] == list(range(7))

    def test_odd_index_swaps(self) -> None:
        """Нечётный индекс — обратный порядок пары."""
        assert NeqPair().to_index(4, (1, 0)) == 1
        assert NeqPair().to_pos(4, 1) == (1, 0)

    def test_of_dimension_n(self) -> None:
        space = NeqPair(Of(DimensionN()))
        dim = [2, 2]
        assert space.count(dim) == 12
        assert space.to_index(dim, ([0, 0], [1, 0])) == 0
        assert space.to_index(dim, ([0, 0], [0, 1])) == 2
        assert space.to_index(dim, ([0, 1], [1, 1])) == 10
        assert space.to_pos(dim, 10) == ([0, 1], [1, 1])
        assert space.to_pos(dim, 11) == ([1, 1], [0, 1])


# =============================================================================
# SQ PAIR
# =============================================================================


class TestSqPair:
    """Тесты SqPair (полный квадрат)."""

    def test_count(self) -> None:
        assert SqPair().count(4) == 16

    def test_order(self) -> None:
        space = SqPair()
        assert space.to_index(4, (0, 0)) == 0
        assert space.to_index(4, (1, 0)) == 1
        assert space.to_index(4, (0, 1)) == 4
        assert space.to_pos(4, 7) == (3, 1)

    def test_of_uses_element_dimension(self) -> None:
        """Элемент получает исходную размерность, а не n²."""
        space = SqPair(Of(Pair()))
        assert space.count(3) == 9
        assert space.to_pos(3, 5) == ((1, 2), (0, 2))

    def test_usize_overflow(self) -> None:
        with pytest.raises(NumericDomainViolation):
            SqPair(domain=USIZE).count(2**32)
