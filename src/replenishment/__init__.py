"""Replenishment — расчёт количества к заказу для складской позиции.

- Корректировка цели DOI по категории доходности
- Пересчёт в количество через темп продаж
- Стоимость закупки через себестоимость единицы
"""

from .engine import (
    BLOCK_REASON_TARGET_INFEASIBLE,
    ReplenishmentEngine,
    ReplenishmentResult,
    purchase_quantity,
    purchase_value,
)

__all__ = [
    "BLOCK_REASON_TARGET_INFEASIBLE",
    "ReplenishmentEngine",
    "ReplenishmentResult",
    "purchase_quantity",
    "purchase_value",
]
