"""Registry — построение пространств из описаний.

Интерпретирует SpaceDescriptor (tagged-variant значение) и строит
соответствующее дерево Space. Словари сначала проходят JSON Schema
контракт (space_descriptor.json), затем разбираются Pydantic моделью.

    build_space({"kind": "pair", "of": {"kind": "permutation"}})
        → Pair(Of(Permutation()))
"""

import logging
from typing import Any, Dict, Final, Mapping, Type, Union

from src.core.contracts import SpaceDescriptorValidator
from src.core.domain.descriptor import (
    BINARY_KINDS,
    NumericKind,
    SpaceDescriptor,
    SpaceKind,
)
from src.core.math.naturals import domain_by_name
from src.spaces.base import Space
from src.spaces.context import Context
from src.spaces.dimension import Dimension
from src.spaces.dimension_n import DimensionN
from src.spaces.directed_context import DirectedContext
from src.spaces.either import Either
from src.spaces.eq_pair import EqPair
from src.spaces.homotopy import Homotopy
from src.spaces.neq_pair import NeqPair
from src.spaces.of import Combinator, Of
from src.spaces.pair import Pair
from src.spaces.permutation import Permutation
from src.spaces.power_set import PowerSet
from src.spaces.product import Product
from src.spaces.sq_pair import SqPair

logger = logging.getLogger(__name__)

# =============================================================================
# ТАБЛИЦА ВИДОВ
# =============================================================================

SPACE_CLASSES: Final[Mapping[SpaceKind, Type[Space]]] = {
    SpaceKind.DIMENSION: Dimension,
    SpaceKind.PAIR: Pair,
    SpaceKind.EQ_PAIR: EqPair,
    SpaceKind.NEQ_PAIR: NeqPair,
    SpaceKind.SQ_PAIR: SqPair,
    SpaceKind.POWER_SET: PowerSet,
    SpaceKind.PERMUTATION: Permutation,
    SpaceKind.DIMENSION_N: DimensionN,
    SpaceKind.PRODUCT: Product,
    SpaceKind.EITHER: Either,
    SpaceKind.CONTEXT: Context,
    SpaceKind.DIRECTED_CONTEXT: DirectedContext,
    SpaceKind.HOMOTOPY: Homotopy,
}

_KINDS_BY_CLASS: Final[Dict[Type[Space], SpaceKind]] = {
    cls: kind for kind, cls in SPACE_CLASSES.items()
}


# =============================================================================
# BUILD / DESCRIBE
# =============================================================================


def build_space(descriptor: Union[SpaceDescriptor, Dict[str, Any]]) -> Space:
    """
    Построение пространства по описанию.

    Все нарушения контракта dict-описания пишутся в лог (warning)
    до исключения.

    Args:
        descriptor: SpaceDescriptor или dict в формате space_descriptor.json

    Returns:
        Экземпляр Space

    Raises:
        jsonschema.ValidationError: если dict не соответствует контракту
        pydantic.ValidationError: если описание не проходит валидацию модели
    """
    if not isinstance(descriptor, SpaceDescriptor):
        _check_contract(descriptor)
        descriptor = SpaceDescriptor.model_validate(descriptor)

    space = _build(descriptor)
    logger.debug(
        "built space %r (kind=%s, depth=%d)", space, descriptor.kind.value, descriptor.depth()
    )
    return space


def _check_contract(data: Dict[str, Any]) -> None:
    validator = SpaceDescriptorValidator()
    if validator.is_valid(data):
        return
    for message in validator.describe_errors(data):
        logger.warning("space descriptor contract violation %s", message)
    validator.validate(data)


def _build(descriptor: SpaceDescriptor) -> Space:
    cls = SPACE_CLASSES[descriptor.kind]
    domain = domain_by_name(descriptor.numeric.value)

    if descriptor.kind in BINARY_KINDS:
        return cls(_build(descriptor.first), _build(descriptor.second), domain)

    if descriptor.kind == SpaceKind.DIMENSION:
        return cls(domain)

    of = Of(_build(descriptor.of)) if descriptor.of is not None else None
    return cls(of, domain)


def describe_space(space: Space) -> SpaceDescriptor:
    """
    Обратная операция: описание построенного пространства.

    Raises:
        ValueError: если тип пространства или домен не зарегистрирован
    """
    if isinstance(space, Of):
        space = space.inner

    kind = _KINDS_BY_CLASS.get(type(space))
    if kind is None:
        raise ValueError(f"Unregistered space type: {type(space).__name__}")

    fields: Dict[str, Any] = {"kind": kind, "numeric": NumericKind(space.domain.name)}
    if kind in BINARY_KINDS:
        fields["first"] = describe_space(space.first)
        fields["second"] = describe_space(space.second)
    elif isinstance(space, Combinator) and not space.of.is_data:
        fields["of"] = describe_space(space.of.inner)

    return SpaceDescriptor(**fields)
