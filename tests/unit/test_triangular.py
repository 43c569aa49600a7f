"""
Тесты для арифметических примитивов индексации

Проверяет:
1. Треугольные числа и их обращение (pair / eq_pair)
2. Факториалы и переполнение в USIZE
3. Mixed-radix кодирование (последняя ось — старшая)
"""

import pytest

from src.core.math.naturals import BIGUINT, USIZE, NumericDomainViolation
from src.core.math.triangular import (
    eq_pair_count,
    eq_pair_from_index,
    eq_pair_index,
    factorial,
    mixed_radix_decode,
    mixed_radix_encode,
    pair_count,
    pair_from_index,
    pair_index,
    product,
)


# =============================================================================
# TRIANGULAR
# =============================================================================


class TestPairArithmetic:
    """Тесты пар min < max."""

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 0), (2, 1), (4, 6), (10, 45)])
    def test_pair_count(self, n, expected) -> None:
        assert pair_count(n) == expected

    def test_pair_order(self) -> None:
        """Порядок: (0,1) (0,2) (1,2) (0,3) (1,3) (2,3)."""
        expected = [(0, 1), (0, 2), (1, 2), (0, 3), (1, 3), (2, 3)]
        assert [pair_from_index(i) for i in range(6)] == expected
        assert [pair_index(a, b) for a, b in expected] == list(range(6))

    def test_pair_index_with_zero_max(self) -> None:
        assert pair_index(0, 0) == 0

    @pytest.mark.parametrize("domain", [USIZE, BIGUINT])
    def test_pair_inverse(self, domain) -> None:
        for index in range(2000):
            a, b = pair_from_index(index, domain)
            assert a < b
            assert pair_index(a, b, domain) == index

    def test_pair_high_index_in_usize(self) -> None:
        """Индекс выше 2**61: 8i+1 не помещается в слово, но обращение точное."""
        n = 2**32
        last = pair_count(n, USIZE) - 1
        assert pair_from_index(last, USIZE) == (n - 2, n - 1)

    def test_pair_count_top_of_usize(self) -> None:
        """Мощность, помещающаяся в слово, считается без переполнения."""
        n = 2**32 + 1
        assert pair_count(n, USIZE) == 2**63 + 2**31 == pair_count(n, BIGUINT)
        assert pair_from_index(2**63 + 2**31 - 1, USIZE) == (n - 2, n - 1)

    def test_pair_huge_biguint(self) -> None:
        n = 10**20
        last = pair_count(n) - 1
        assert pair_from_index(last) == (n - 2, n - 1)


class TestEqPairArithmetic:
    """Тесты пар min <= max."""

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 3), (4, 10)])
    def test_eq_pair_count(self, n, expected) -> None:
        assert eq_pair_count(n) == expected

    def test_eq_pair_order(self) -> None:
        expected = [(0, 0), (0, 1), (1, 1), (0, 2), (1, 2), (2, 2), (0, 3)]
        assert [eq_pair_from_index(i) for i in range(7)] == expected
        assert [eq_pair_index(a, b) for a, b in expected] == list(range(7))

    def test_eq_pair_count_top_of_usize(self) -> None:
        n = 2**32
        assert eq_pair_count(n, USIZE) == 2**63 + 2**31 == eq_pair_count(n, BIGUINT)
        assert eq_pair_from_index(2**63 + 2**31 - 1, USIZE) == (n - 1, n - 1)
        assert eq_pair_index(n - 1, n - 1, USIZE) == 2**63 + 2**31 - 1

    @pytest.mark.parametrize("domain", [USIZE, BIGUINT])
    def test_eq_pair_inverse(self, domain) -> None:
        for index in range(2000):
            a, b = eq_pair_from_index(index, domain)
            assert a <= b
            assert eq_pair_index(a, b, domain) == index


# =============================================================================
# FACTORIAL / PRODUCT
# =============================================================================


class TestFactorial:
    """Тесты факториала."""

    def test_values(self) -> None:
        assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]

    def test_usize_limit(self) -> None:
        """20! помещается в 64 бита, 21! — нет."""
        assert factorial(20, USIZE) == 2432902008176640000
        with pytest.raises(NumericDomainViolation):
            factorial(21, USIZE)

    def test_biguint_no_limit(self) -> None:
        assert factorial(25) == 15511210043330985984000000


class TestProduct:
    def test_empty_product(self) -> None:
        assert product([]) == 1

    def test_product(self) -> None:
        assert product([2, 3, 4]) == 24


# =============================================================================
# MIXED RADIX
# =============================================================================


class TestMixedRadix:
    """Тесты смешанной системы счисления."""

    def test_last_axis_most_significant(self) -> None:
        assert mixed_radix_encode([1, 0], [3, 3]) == 1
        assert mixed_radix_encode([0, 1], [3, 3]) == 3
        assert mixed_radix_encode([2, 1, 1], [3, 2, 4]) == 2 + 1 * 3 + 1 * 6

    def test_decode(self) -> None:
        assert mixed_radix_decode(3, [3, 3]) == [0, 1]
        assert mixed_radix_decode(11, [3, 2, 4]) == [2, 1, 1]

    def test_inverse(self) -> None:
        radices = [2, 3, 4]
        for index in range(product(radices)):
            assert mixed_radix_encode(mixed_radix_decode(index, radices), radices) == index

    def test_empty(self) -> None:
        assert mixed_radix_encode([], []) == 0
        assert mixed_radix_decode(0, []) == []
