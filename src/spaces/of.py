"""Of — подстановка пространства в качестве типа элемента.

Комбинатор (Pair, PowerSet, DimensionN, Context, ...) определён над
абстрактным "элементом". Of(inner) говорит, что элементами служат
позиции пространства inner:
1. позиции inner → индексы через inner.to_index
2. алгоритм комбинатора работает только с индексами и count(inner)
3. индексы → позиции через inner.to_pos

Элемент по умолчанию — Of(Dimension()), т.е. обычные натуральные числа.
Так Pair(Of(Pair())) — неупорядоченные пары рёбер, PowerSet(Of(Permutation()))
— множества перестановок.
"""

from typing import Any, Optional, Sequence, Union

from src.core.math.naturals import NumericDomain
from src.core.math.numerical_safeguards import validate_axis_sizes
from src.spaces.base import Space
from src.spaces.dimension import Dimension


class Of(Space):
    """Пространство элементов комбинатора.

    Делегирует все четыре операции вложенному пространству;
    размерность и позиции Of — это размерность и позиции inner.
    """

    def __init__(self, inner: Space):
        if isinstance(inner, Of):
            inner = inner.inner
        super().__init__(inner.domain)
        self.inner = inner

    @classmethod
    def wrap(cls, element: Union["Of", Space, None], domain: Optional[NumericDomain] = None) -> "Of":
        """Приведение аргумента комбинатора к Of (None → Of(Dimension()))."""
        if element is None:
            return cls(Dimension(domain))
        if isinstance(element, Of):
            return element
        return cls(element)

    @property
    def is_data(self) -> bool:
        """Элементы — обычные натуральные числа."""
        return type(self.inner) is Dimension

    def count(self, dim: Any) -> int:
        return self.inner.count(dim)

    def zero(self, dim: Any) -> Any:
        return self.inner.zero(dim)

    def to_index(self, dim: Any, pos: Any) -> int:
        return self.inner.to_index(dim, pos)

    def to_pos(self, dim: Any, index: int, pos: Optional[Any] = None) -> Any:
        return self.inner.to_pos(dim, index, pos)

    def validate_dim(self, dim: Any) -> None:
        self.inner.validate_dim(dim)

    def __repr__(self) -> str:
        return f"Of({self.inner!r})"


class Combinator(Space):
    """Пространство, параметризованное типом элемента (Of).

    Args:
        of: пространство элементов (Of, Space или None для натуральных чисел)
        domain: числовой домен счётчиков и индексов
    """

    def __init__(
        self,
        of: Union[Of, Space, None] = None,
        domain: Optional[NumericDomain] = None,
    ):
        super().__init__(domain)
        self.of = Of.wrap(of, self.domain)

    def validate_dim(self, dim: Any) -> None:
        self.of.validate_dim(dim)

    def validate_axes(self, dim: Sequence[Any]) -> None:
        """Проверка размерности-списка осей (по одной размерности элемента на ось)."""
        if self.of.is_data:
            validate_axis_sizes(dim)
            return
        for axis_dim in dim:
            self.of.validate_dim(axis_dim)

    def __repr__(self) -> str:
        if self.of.is_data:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.of!r})"
