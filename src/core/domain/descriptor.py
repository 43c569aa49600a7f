"""
SpaceDescriptor — Описание пространства как значения

Immutable Pydantic модель, задающая составное пространство в виде
tagged-variant дерева (kind + параметры типа). Используется реестром
(src.spaces.registry) для построения Space из конфигурации.

Соответствует схеме src/core/contracts/schema/space_descriptor.json.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class SpaceKind(str, Enum):
    """Вид пространства"""

    DIMENSION = "dimension"
    PAIR = "pair"
    EQ_PAIR = "eq_pair"
    NEQ_PAIR = "neq_pair"
    SQ_PAIR = "sq_pair"
    POWER_SET = "power_set"
    PERMUTATION = "permutation"
    DIMENSION_N = "dimension_n"
    PRODUCT = "product"
    EITHER = "either"
    CONTEXT = "context"
    DIRECTED_CONTEXT = "directed_context"
    HOMOTOPY = "homotopy"


class NumericKind(str, Enum):
    """Числовой домен счётчиков и индексов"""

    USIZE = "usize"
    BIGUINT = "biguint"


# Пространства, составленные из двух других (first, second)
BINARY_KINDS = frozenset({SpaceKind.PRODUCT, SpaceKind.EITHER})

# Пространства без элемента (Of неприменим)
NO_ELEMENT_KINDS = frozenset({SpaceKind.DIMENSION}) | BINARY_KINDS


# =============================================================================
# DESCRIPTOR MODEL
# =============================================================================


class SpaceDescriptor(BaseModel):
    """
    Описание пространства.

    Примеры:
        {"kind": "pair"}                                  → Pair()
        {"kind": "pair", "of": {"kind": "dimension_n"}}   → Pair(Of(DimensionN()))
        {"kind": "product", "first": {...}, "second": {...}}
    """

    kind: SpaceKind = Field(..., description="Вид пространства")
    of: Optional[SpaceDescriptor] = Field(
        None, description="Пространство элементов (Of) для комбинатора"
    )
    first: Optional[SpaceDescriptor] = Field(
        None, description="Первое пространство (product / either)"
    )
    second: Optional[SpaceDescriptor] = Field(
        None, description="Второе пространство (product / either)"
    )
    numeric: NumericKind = Field(
        NumericKind.BIGUINT, description="Числовой домен (usize / biguint)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_shape(self) -> SpaceDescriptor:
        """
        Проверка согласованности параметров с видом пространства.

        - product / either требуют first и second
        - остальные виды не допускают first / second
        - dimension, product, either не допускают of
        """
        if self.kind in BINARY_KINDS:
            if self.first is None or self.second is None:
                raise ValueError(f"{self.kind.value} requires both 'first' and 'second'")
        elif self.first is not None or self.second is not None:
            raise ValueError(f"{self.kind.value} does not accept 'first'/'second'")

        if self.kind in NO_ELEMENT_KINDS and self.of is not None:
            raise ValueError(f"{self.kind.value} does not accept 'of'")
        return self

    def depth(self) -> int:
        """Глубина вложенности описания (1 для примитива)."""
        children = [d for d in (self.of, self.first, self.second) if d is not None]
        return 1 + max((child.depth() for child in children), default=0)


SpaceDescriptor.model_rebuild()
