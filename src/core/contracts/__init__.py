"""
Contract Validation Module

Модуль для валидации JSON контрактов (описаний пространств).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SpaceDescriptorValidator,
    get_schema_loader,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SpaceDescriptorValidator",
    # Functions
    "get_schema_loader",
]
