"""
Triangular — Общие арифметические примитивы индексации

Треугольные числа и их обращение, факториалы, смешанная система
счисления (mixed-radix). Используются почти всеми пространствами.

ФОРМУЛЫ:
    pair_count(n)     = n(n-1)/2          (min < max)
    eq_pair_count(n)  = n(n+1)/2          (min <= max)
    pair_index        = min + max(max-1)/2
    eq_pair_index     = min + max(max+1)/2
    pair_max(i)       = floor((1 + sqrt(8i+1)) / 2)
    eq_pair_max(i)    = floor((sqrt(8i+1) - 1) / 2)

Все функции принимают числовой домен (NumericDomain) и выполняют
точную арифметику; sqrt — только через domain.isqrt.
"""

from typing import Iterable, List, Sequence, Tuple

from src.core.math.naturals import DEFAULT_DOMAIN, NumericDomain

# =============================================================================
# ТРЕУГОЛЬНЫЕ ЧИСЛА
# =============================================================================


def _half_product(a: int, b: int, domain: NumericDomain) -> int:
    """
    a * b / 2 для соседних a, b без промежуточного a * b.

    Чётный множитель делится первым, поэтому результат, который
    помещается в машинное слово, не переполняет его по пути.
    """
    if a % 2 == 0:
        return domain.mul(domain.floordiv(a, 2), b)
    return domain.mul(a, domain.floordiv(b, 2))


def pair_count(n: int, domain: NumericDomain = DEFAULT_DOMAIN) -> int:
    """
    Число неупорядоченных пар min < max над [0, n).

    Examples:
        >>> pair_count(4)
        6
    """
    if n == 0:
        return 0
    return _half_product(n, domain.sub(n, 1), domain)


def eq_pair_count(n: int, domain: NumericDomain = DEFAULT_DOMAIN) -> int:
    """
    Число неупорядоченных пар min <= max над [0, n).

    Examples:
        >>> eq_pair_count(4)
        10
    """
    return _half_product(n, domain.add(n, 1), domain)


def pair_index(
    min_value: int, max_value: int, domain: NumericDomain = DEFAULT_DOMAIN
) -> int:
    """
    Индекс пары (min, max), min < max.

    Examples:
        >>> pair_index(1, 2)
        2
        >>> pair_index(0, 3)
        3
    """
    if max_value == 0:
        return domain.natural(min_value)
    offset = _half_product(max_value, domain.sub(max_value, 1), domain)
    return domain.add(min_value, offset)


def eq_pair_index(
    min_value: int, max_value: int, domain: NumericDomain = DEFAULT_DOMAIN
) -> int:
    """
    Индекс пары (min, max), min <= max.

    Examples:
        >>> eq_pair_index(0, 0)
        0
        >>> eq_pair_index(0, 1)
        1
    """
    offset = _half_product(max_value, domain.add(max_value, 1), domain)
    return domain.add(min_value, offset)


def pair_from_index(
    index: int, domain: NumericDomain = DEFAULT_DOMAIN
) -> Tuple[int, int]:
    """
    Обращение pair_index: индекс → (min, max), min < max.

    max = floor((1 + sqrt(8i+1)) / 2) через точный isqrt домена.

    Examples:
        >>> pair_from_index(0)
        (0, 1)
        >>> pair_from_index(3)
        (0, 3)
    """
    # Радиканд 8i+1 может не помещаться в машинное слово
    root = domain.isqrt(8 * domain.natural(index) + 1)
    max_value = domain.add(domain.floordiv(domain.sub(root, 1), 2), 1)
    offset = _half_product(max_value, domain.sub(max_value, 1), domain)
    return domain.sub(index, offset), max_value


def eq_pair_from_index(
    index: int, domain: NumericDomain = DEFAULT_DOMAIN
) -> Tuple[int, int]:
    """
    Обращение eq_pair_index: индекс → (min, max), min <= max.

    Examples:
        >>> eq_pair_from_index(0)
        (0, 0)
        >>> eq_pair_from_index(4)
        (1, 2)
    """
    root = domain.isqrt(8 * domain.natural(index) + 1)
    max_value = domain.floordiv(domain.sub(root, 1), 2)
    offset = _half_product(max_value, domain.add(max_value, 1), domain)
    return domain.sub(index, offset), max_value


# =============================================================================
# ФАКТОРИАЛЫ
# =============================================================================


def factorial(n: int, domain: NumericDomain = DEFAULT_DOMAIN) -> int:
    """
    n! в числовом домене (переполнение USIZE → NumericDomainViolation).

    Examples:
        >>> factorial(4)
        24
        >>> factorial(0)
        1
    """
    result = 1
    for x in range(1, n + 1):
        result = domain.mul(result, x)
    return result


# =============================================================================
# MIXED-RADIX
# =============================================================================


def product(values: Iterable[int], domain: NumericDomain = DEFAULT_DOMAIN) -> int:
    """Произведение счётчиков (пустое произведение = 1)."""
    result = 1
    for value in values:
        result = domain.mul(result, value)
    return result


def mixed_radix_encode(
    digits: Sequence[int],
    radices: Sequence[int],
    domain: NumericDomain = DEFAULT_DOMAIN,
) -> int:
    """
    Кодирование кортежа цифр в число; ПОСЛЕДНЯЯ ось — старшая.

    Examples:
        >>> mixed_radix_encode([1, 0], [3, 3])
        1
        >>> mixed_radix_encode([0, 1], [3, 3])
        3
    """
    index = 0
    for digit, radix in zip(reversed(digits), reversed(radices)):
        index = domain.add(domain.mul(index, radix), digit)
    return index


def mixed_radix_decode(
    index: int,
    radices: Sequence[int],
    domain: NumericDomain = DEFAULT_DOMAIN,
) -> List[int]:
    """
    Обращение mixed_radix_encode (последняя ось — старшая).

    Examples:
        >>> mixed_radix_decode(3, [3, 3])
        [0, 1]
    """
    digits = [0] * len(radices)
    prod = product(radices, domain)
    for i in reversed(range(len(radices))):
        prod = domain.floordiv(prod, radices[i])
        digit = domain.floordiv(index, prod)
        digits[i] = digit
        index = domain.sub(index, domain.mul(digit, prod))
    return digits
