"""
Test suite for discrete

Contains:
- tests/unit/          : Unit tests for numeric domains, spaces and contracts
"""
