"""
Contract Validation Module

In-memory dict контракт элементов групп и его валидация по JSON Schema.
"""

from .validators import (
    ELEMENT_SCHEMA_NAME,
    ContractValidator,
    ElementContractValidator,
    SchemaLoader,
    element_from_contract,
    element_to_contract,
    validate_element_contract,
)

__all__ = [
    # Constants
    "ELEMENT_SCHEMA_NAME",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ElementContractValidator",
    # Functions
    "element_to_contract",
    "element_from_contract",
    "validate_element_contract",
]
