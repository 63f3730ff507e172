"""
Contract Validation Module

Модуль для валидации JSON контрактов на границах доменного ядра.
"""

from .validators import (
    ContractValidator,
    ReplenishmentResultValidator,
    SchemaLoader,
    StockItemRecordValidator,
    validate_replenishment_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StockItemRecordValidator",
    "ReplenishmentResultValidator",
    # Functions
    "validate_replenishment_result",
]
