"""Spaces — дискретные пространства и их композиция.

Каждое пространство реализует контракт Space:
- count(dim), zero(dim), to_index(dim, pos), to_pos(dim, index, pos=None)

Примитивы:
- Dimension, Pair, EqPair, NeqPair, SqPair, PowerSet, Permutation, DimensionN

Композиторы:
- Product, Either (Sum), Of

Производные пространства:
- Context, DirectedContext, Homotopy
"""

from .base import Space
from .context import Context
from .dimension import Dimension
from .dimension_n import DimensionN
from .directed_context import DirectedContext
from .either import Either, Sum
from .eq_pair import EqPair
from .homotopy import Homotopy
from .neq_pair import NeqPair
from .of import Combinator, Of
from .pair import Pair
from .permutation import Permutation
from .power_set import PowerSet
from .product import Product
from .registry import SPACE_CLASSES, build_space, describe_space
from .sq_pair import SqPair

__all__ = [
    # Contract
    "Space",
    "Combinator",
    # Primitives
    "Dimension",
    "Pair",
    "EqPair",
    "NeqPair",
    "SqPair",
    "PowerSet",
    "Permutation",
    "DimensionN",
    # Compositors
    "Product",
    "Either",
    "Sum",
    "Of",
    # Derived
    "Context",
    "DirectedContext",
    "Homotopy",
    # Registry
    "SPACE_CLASSES",
    "build_space",
    "describe_space",
]
