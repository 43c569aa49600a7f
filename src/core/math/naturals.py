"""
Naturals — Числовые домены для счётчиков и индексов

Модуль задаёт единственный интерфейс натуральных чисел (NumericDomain),
через который записаны ВСЕ алгоритмы индексации пространств:
- USIZE: беззнаковое машинное целое фиксированной ширины (64 бита)
- BIGUINT: беззнаковое целое произвольной точности

Значения в обоих доменах — обычные Python int. Домен отвечает за:
- проверку представимости результата (overflow / underflow)
- точный целочисленный квадратный корень (floor)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика точная, без потерь округления
2. Деление floor-согласовано между доменами: одинаковые размерности
   дают одинаковые позиции независимо от домена
3. isqrt(x) == floor(sqrt(x)) в обоих доменах
4. Выход за [0, 2**64) в USIZE → NumericDomainViolation (без wrap-around)
"""

import math
from abc import ABC, abstractmethod
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ДОМЕНОВ
# =============================================================================

# Ширина машинного слова для домена фиксированной ширины
FIXED_WIDTH_BITS: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericDomainViolation(ArithmeticError):
    """
    Результат операции не представим в числовом домене.

    Возникает при underflow (отрицательный результат вычитания)
    или overflow (выход за ширину машинного слова в USIZE).
    """

    pass


# =============================================================================
# ИНТЕРФЕЙС NATURAL
# =============================================================================


class NumericDomain(ABC):
    """
    Минимальный набор возможностей натуральных чисел.

    Ordering, +, -, *, //, %, isqrt и приведение малых литералов.
    Алгоритмы пространств пишутся один раз против этого интерфейса.
    """

    name: str = "natural"

    @abstractmethod
    def natural(self, value: int) -> int:
        """
        Приведение целого к домену с проверкой представимости.

        Raises:
            NumericDomainViolation: если value вне домена
        """

    @abstractmethod
    def isqrt(self, value: int) -> int:
        """Точный floor(sqrt(value))."""

    def add(self, a: int, b: int) -> int:
        return self.natural(a + b)

    def sub(self, a: int, b: int) -> int:
        return self.natural(a - b)

    def mul(self, a: int, b: int) -> int:
        return self.natural(a * b)

    def floordiv(self, a: int, b: int) -> int:
        return self.natural(a // b)

    def mod(self, a: int, b: int) -> int:
        return self.natural(a % b)

    def __repr__(self) -> str:
        return self.name.upper()


class FixedWidthDomain(NumericDomain):
    """
    Беззнаковое целое фиксированной ширины (аналог usize).

    isqrt использует float-приближение с шагом коррекции,
    который устраняет ошибку округления на ±1.
    """

    def __init__(self, bits: int = FIXED_WIDTH_BITS):
        if bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        self.bits = bits
        self.max_value = (1 << bits) - 1
        self.name = "usize" if bits == FIXED_WIDTH_BITS else f"u{bits}"

    def natural(self, value: int) -> int:
        value = int(value)
        if value < 0:
            raise NumericDomainViolation(f"{self.name} underflow: {value} < 0")
        if value > self.max_value:
            raise NumericDomainViolation(
                f"{self.name} overflow: {value} > {self.max_value}"
            )
        return value

    def isqrt(self, value: int) -> int:
        # Радиканд не ограничен шириной слова (как и float-вычисление)
        value = int(value)
        if value < 0:
            raise NumericDomainViolation(f"{self.name} isqrt of negative value: {value}")
        root = int(math.sqrt(value))
        # Коррекция приближения (off-by-one от округления float)
        while root * root > value:
            root -= 1
        while (root + 1) * (root + 1) <= value:
            root += 1
        return root


class BigNaturalDomain(NumericDomain):
    """
    Беззнаковое целое произвольной точности (аналог BigUint).

    isqrt всегда точный (math.isqrt), float не используется.
    """

    name = "biguint"

    def natural(self, value: int) -> int:
        value = int(value)
        if value < 0:
            raise NumericDomainViolation(f"{self.name} underflow: {value} < 0")
        return value

    def isqrt(self, value: int) -> int:
        return math.isqrt(self.natural(value))


# Stateless экземпляры доменов
USIZE: Final[NumericDomain] = FixedWidthDomain()
BIGUINT: Final[NumericDomain] = BigNaturalDomain()

DEFAULT_DOMAIN: Final[NumericDomain] = BIGUINT


def domain_by_name(name: str) -> NumericDomain:
    """
    Поиск домена по имени ('usize' | 'biguint').

    Raises:
        ValueError: если имя неизвестно
    """
    for domain in (USIZE, BIGUINT):
        if domain.name == name:
            return domain
    raise ValueError(f"Unknown numeric domain: {name!r}")
