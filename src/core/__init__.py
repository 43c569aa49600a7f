"""
Core numeric domains, arithmetic primitives, value objects and contracts.

This module contains the foundational building blocks shared by every
discrete space; it has no knowledge of concrete spaces.
"""
