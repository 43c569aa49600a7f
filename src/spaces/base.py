"""Space — контракт дискретного пространства.

Каждое пространство задаёт биекцию [0, count(dim)) ↔ позиции(dim)
через четыре операции:
- count(dim) → N: мощность пространства
- zero(dim) → pos: каноническая первая позиция (индекс 0)
- to_index(dim, pos) → N: ранг позиции
- to_pos(dim, index, pos=None) → pos: позиция по рангу

Экземпляр пространства не хранит состояния вызовов: только параметры
типа (вложенные пространства) и числовой домен. Размерность передаётся
заново в каждый вызов.

Ядро не проверяет границы; checked-варианты (to_pos_checked,
to_index_checked) добавляют явную валидацию без изменения in-range
поведения.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.core.domain.positions import First, Path, Point, Second
from src.core.math.naturals import DEFAULT_DOMAIN, NumericDomain
from src.core.math.numerical_safeguards import (
    SpaceIndexError,
    SpacePositionError,
    validate_index,
)


def normalize_position(pos: Any) -> Any:
    """
    Каноническая форма позиции для сравнения.

    Списки и кортежи приводятся к кортежам рекурсивно, в том числе
    внутри First/Second и Point/Path.

    Examples:
        >>> normalize_position(([0, 1], 2)) == normalize_position([(0, 1), 2])
        True
    """
    if isinstance(pos, (list, tuple)):
        return tuple(normalize_position(p) for p in pos)
    if isinstance(pos, (First, Second, Point)):
        return type(pos)(normalize_position(pos.value))
    if isinstance(pos, Path):
        return Path(normalize_position(pos.left), normalize_position(pos.right))
    return pos


class Space(ABC):
    """Базовый класс дискретных пространств.

    Args:
        domain: числовой домен счётчиков и индексов (default BIGUINT)
    """

    def __init__(self, domain: Optional[NumericDomain] = None):
        self.domain = domain or DEFAULT_DOMAIN

    @abstractmethod
    def count(self, dim: Any) -> int:
        """Мощность пространства при размерности dim."""

    @abstractmethod
    def zero(self, dim: Any) -> Any:
        """Каноническая первая позиция (позиция индекса 0)."""

    @abstractmethod
    def to_index(self, dim: Any, pos: Any) -> int:
        """Ранг позиции в [0, count(dim))."""

    @abstractmethod
    def to_pos(self, dim: Any, index: int, pos: Optional[Any] = None) -> Any:
        """Позиция по рангу.

        Для позиций-списков переданный буфер pos очищается и заполняется
        на месте; возвращается всегда итоговая позиция.
        """

    # -------------------------------------------------------------------------
    # CHECKED OPERATIONS
    # -------------------------------------------------------------------------

    def validate_dim(self, dim: Any) -> None:
        """Проверка размерности для checked-операций.

        Raises:
            ValueError: если размерность некорректна
        """

    def to_pos_checked(self, dim: Any, index: int, pos: Optional[Any] = None) -> Any:
        """to_pos с проверкой диапазона индекса.

        Raises:
            SpaceIndexError: если index вне [0, count(dim))
            ValueError: если размерность некорректна
        """
        self.validate_dim(dim)
        validate_index(index, self.count(dim))
        return self.to_pos(dim, index, pos)

    def to_index_checked(self, dim: Any, pos: Any) -> int:
        """to_index с проверкой принадлежности позиции пространству.

        Позиция валидна, если её индекс в диапазоне и она
        восстанавливается из этого индекса без искажений (list и tuple
        при сравнении не различаются).

        Raises:
            SpacePositionError: если позиция не принадлежит пространству
            ValueError: если размерность некорректна
        """
        self.validate_dim(dim)
        try:
            index = self.to_index(dim, pos)
            validate_index(index, self.count(dim))
        except (SpaceIndexError, ArithmeticError, IndexError, TypeError, ValueError) as e:
            raise SpacePositionError(f"{pos!r} is not a position of {self!r} at {dim!r}: {e}") from e

        if normalize_position(self.to_pos(dim, index)) != normalize_position(pos):
            raise SpacePositionError(
                f"{pos!r} is not a position of {self!r} at {dim!r} "
                f"(index {index} decodes to a different position)"
            )
        return index

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))
