"""
Core math modules для discrete

Числовые домены и арифметические примитивы индексации.
"""

# Numeric domains
from src.core.math.naturals import (
    BIGUINT,
    DEFAULT_DOMAIN,
    FIXED_WIDTH_BITS,
    USIZE,
    BigNaturalDomain,
    FixedWidthDomain,
    NumericDomain,
    NumericDomainViolation,
    domain_by_name,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    SpaceIndexError,
    SpacePositionError,
    is_natural,
    validate_axis_sizes,
    validate_index,
    validate_natural,
)

# Triangular / mixed-radix helpers
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

__all__ = [
    # Naturals — Constants
    "FIXED_WIDTH_BITS",
    "USIZE",
    "BIGUINT",
    "DEFAULT_DOMAIN",
    # Naturals — Types
    "NumericDomain",
    "FixedWidthDomain",
    "BigNaturalDomain",
    # Naturals — Exceptions
    "NumericDomainViolation",
    # Naturals — Functions
    "domain_by_name",
    # Numerical Safeguards — Exceptions
    "SpaceIndexError",
    "SpacePositionError",
    # Numerical Safeguards — Validation
    "is_natural",
    "validate_axis_sizes",
    "validate_index",
    "validate_natural",
    # Triangular — Functions
    "pair_count",
    "eq_pair_count",
    "pair_index",
    "eq_pair_index",
    "pair_from_index",
    "eq_pair_from_index",
    "factorial",
    "product",
    "mixed_radix_encode",
    "mixed_radix_decode",
]
