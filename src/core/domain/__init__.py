"""
Domain models and value objects.

Contains the validated domain primitives, the ProfitCategory adjustment rule
and the StockItem aggregate.
"""

from src.core.domain.primitives import (
    INVENTORY_ID_MAX_LENGTH,
    INVENTORY_ID_MIN_LENGTH,
    UNIT_COST_MAX_EXCLUSIVE,
    UNIT_COST_MIN_EXCLUSIVE,
    DaysOfInventory,
    DomainPrimitive,
    ValidatedModel,
    InventoryIdentifier,
    ItemQuantity,
    OrderQuantity,
    PurchaseValue,
    SalesRate,
    UnitCost,
)
from src.core.domain.profit_category import (
    ADJUSTMENT_RULES,
    DEFAULT_ADJUSTMENT_CONFIG,
    CategoryAdjustmentConfig,
    ProfitCategory,
    UnmappedProfitCategoryError,
    adjust_target,
    ensure_exhaustive,
)
from src.core.domain.stock_item import FieldError, StockItem, StockItemResult

__all__ = [
    # Primitives
    "INVENTORY_ID_MIN_LENGTH",
    "INVENTORY_ID_MAX_LENGTH",
    "UNIT_COST_MIN_EXCLUSIVE",
    "UNIT_COST_MAX_EXCLUSIVE",
    "ValidatedModel",
    "DomainPrimitive",
    "InventoryIdentifier",
    "UnitCost",
    "SalesRate",
    "DaysOfInventory",
    "ItemQuantity",
    "OrderQuantity",
    "PurchaseValue",
    # Profit category
    "ProfitCategory",
    "CategoryAdjustmentConfig",
    "DEFAULT_ADJUSTMENT_CONFIG",
    "ADJUSTMENT_RULES",
    "UnmappedProfitCategoryError",
    "adjust_target",
    "ensure_exhaustive",
    # Stock item aggregate
    "StockItem",
    "StockItemResult",
    "FieldError",
]
