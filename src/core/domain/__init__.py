"""
Domain models and value objects.

Contains position value objects (Either / Homotopy) and space descriptors.
"""

from src.core.domain.descriptor import (
    BINARY_KINDS,
    NO_ELEMENT_KINDS,
    NumericKind,
    SpaceDescriptor,
    SpaceKind,
)
from src.core.domain.positions import (
    First,
    HPoint,
    Path,
    Point,
    Second,
    Select,
)

__all__ = [
    # Positions
    "First",
    "Second",
    "Select",
    "HPoint",
    "Point",
    "Path",
    # Descriptor model
    "SpaceDescriptor",
    "SpaceKind",
    "NumericKind",
    "BINARY_KINDS",
    "NO_ELEMENT_KINDS",
]
