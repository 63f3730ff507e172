"""Replenishment Engine — расчёт количества к заказу для одной позиции.

Порядок расчёта:
1. Корректировка цели DOI по категории доходности позиции
2. adjusted_target * sales_rate -> ItemQuantity
3. ItemQuantity -> OrderQuantity (конверсия 1:1)

Политика для недостижимой цели (Category3, T <= штраф): ошибка
пропагируется вызывающему. Нулевое количество не подставляется:
purchase_quantity возвращает None, evaluate возвращает результат с
order_allowed=False и block_reason="adjusted_target_infeasible".

Все операции чистые: состояния нет, ввода-вывода нет.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Final, Optional

from src.core.contracts import validate_replenishment_result
from src.core.domain.primitives import (
    DaysOfInventory,
    ItemQuantity,
    OrderQuantity,
    PurchaseValue,
)
from src.core.domain.profit_category import (
    CategoryAdjustmentConfig,
    ProfitCategory,
    adjust_target,
)
from src.core.domain.stock_item import StockItem


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BLOCK_REASON_TARGET_INFEASIBLE: Final[str] = "adjusted_target_infeasible"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ReplenishmentResult:
    """Результат расчёта пополнения."""

    order_allowed: bool
    block_reason: str

    inventory_id: str
    profit_category: ProfitCategory

    doi_target: DaysOfInventory
    adjusted_target: Optional[DaysOfInventory]
    item_quantity: Optional[ItemQuantity]
    order_quantity: Optional[OrderQuantity]

    # Детали
    details: str

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в форму контракта replenishment_result.

        Returns:
            dict, прошедший проверку контракта

        Raises:
            ValidationError: Если результат не соответствует контракту
        """
        data = {
            "order_allowed": self.order_allowed,
            "block_reason": self.block_reason,
            "inventory_id": self.inventory_id,
            "profit_category": self.profit_category.value,
            "doi_target": self.doi_target.value,
            "adjusted_target": _value_or_none(self.adjusted_target),
            "item_quantity": _value_or_none(self.item_quantity),
            "order_quantity": _value_or_none(self.order_quantity),
            "details": self.details,
        }
        validate_replenishment_result(data)
        return data


# =============================================================================
# ENGINE
# =============================================================================


class ReplenishmentEngine:
    """Расчёт рекомендуемого количества к заказу.

    Движок не хранит состояния: один экземпляр безопасно использовать
    параллельно для независимых позиций.
    """

    def __init__(self, adjustment_config: CategoryAdjustmentConfig | None = None):
        """
        Args:
            adjustment_config: величины бонуса/штрафа по категориям
                (опционально, используется default)
        """
        self.adjustment_config = adjustment_config or CategoryAdjustmentConfig()

    def evaluate(self, doi_target: DaysOfInventory, item: StockItem) -> ReplenishmentResult:
        """Полный расчёт с диагностикой.

        Args:
            doi_target: целевые дни запаса
            item: складская позиция

        Returns:
            ReplenishmentResult; order_quantity заполнен только при order_allowed
        """
        category = item.profit_category

        # 1. Корректировка цели по категории
        adjusted_target = adjust_target(doi_target, category, self.adjustment_config)

        if adjusted_target is None:
            details = (
                f"{category.value}: target {doi_target.value:g} days does not cover "
                f"penalty {self.adjustment_config.category3_penalty_days:g} days"
            )
            logger.warning(
                "Replenishment blocked for %s: %s", item.inventory_id.value, details
            )
            return ReplenishmentResult(
                order_allowed=False,
                block_reason=BLOCK_REASON_TARGET_INFEASIBLE,
                inventory_id=item.inventory_id.value,
                profit_category=category,
                doi_target=doi_target,
                adjusted_target=None,
                item_quantity=None,
                order_quantity=None,
                details=details,
            )

        # 2. Дни запаса * темп продаж
        item_quantity = adjusted_target * item.sales_rate

        # 3. Маркировка как заказ
        order_quantity = item_quantity.to_order_quantity()

        logger.debug(
            "Replenishment for %s: target=%s adjusted=%s rate=%s qty=%s",
            item.inventory_id.value,
            doi_target.value,
            adjusted_target.value,
            item.sales_rate.value,
            order_quantity.value,
        )

        return ReplenishmentResult(
            order_allowed=True,
            block_reason="",
            inventory_id=item.inventory_id.value,
            profit_category=category,
            doi_target=doi_target,
            adjusted_target=adjusted_target,
            item_quantity=item_quantity,
            order_quantity=order_quantity,
            details=(
                f"{category.value}: adjusted_target={adjusted_target.value:g} days, "
                f"sales_rate={item.sales_rate.value:g}/day, "
                f"order_quantity={order_quantity.value:g}"
            ),
        )

    def purchase_quantity(
        self, doi_target: DaysOfInventory, item: StockItem
    ) -> Optional[OrderQuantity]:
        """Количество к заказу.

        Returns:
            OrderQuantity или None, если скорректированная цель недостижима
        """
        return self.evaluate(doi_target, item).order_quantity

    def purchase_value(self, quantity: OrderQuantity, item: StockItem) -> PurchaseValue:
        """Стоимость закупки: quantity * unit_cost.

        Количество переводится в Decimal через str, чтобы float и Decimal
        не смешивались неявно.
        """
        return PurchaseValue(value=Decimal(str(quantity.value)) * item.unit_cost.value)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_ENGINE = ReplenishmentEngine()


def purchase_quantity(doi_target: DaysOfInventory, item: StockItem) -> Optional[OrderQuantity]:
    """Количество к заказу с правилами категорий по умолчанию."""
    return _DEFAULT_ENGINE.purchase_quantity(doi_target, item)


def purchase_value(quantity: OrderQuantity, item: StockItem) -> PurchaseValue:
    """Стоимость закупки для заданного количества."""
    return _DEFAULT_ENGINE.purchase_value(quantity, item)


def _value_or_none(primitive) -> Optional[float]:
    return None if primitive is None else primitive.value
