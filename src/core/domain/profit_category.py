"""
ProfitCategory — Категория доходности и правило корректировки цели DOI

Закрытая классификация {Category1, Category2, Category3}. Каждая категория
обязана иметь правило корректировки целевых дней запаса:
- Category1: T + 10 (бонус)
- Category2: T      (без изменений)
- Category3: T - 15 (штраф, частичная операция: None при T <= 15)

Таблица правил проверяется на полноту при импорте модуля: категория без
правила — ошибка загрузки, а не тихий default.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Final, Mapping, Optional

from src.core.domain.primitives import DaysOfInventory


# =============================================================================
# ENUMS
# =============================================================================


class ProfitCategory(str, Enum):
    """Категория доходности позиции"""

    CATEGORY_1 = "Category1"
    CATEGORY_2 = "Category2"
    CATEGORY_3 = "Category3"


class UnmappedProfitCategoryError(RuntimeError):
    """Категория без правила корректировки"""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CategoryAdjustmentConfig:
    """Конфигурация корректировок по категориям.

    Значения по умолчанию соответствуют действующему бизнес-правилу.
    """

    category1_bonus_days: float = 10.0
    category3_penalty_days: float = 15.0

    def __post_init__(self) -> None:
        if not self.category1_bonus_days > 0:
            raise ValueError(
                f"category1_bonus_days must be positive: {self.category1_bonus_days}"
            )
        if not self.category3_penalty_days > 0:
            raise ValueError(
                f"category3_penalty_days must be positive: {self.category3_penalty_days}"
            )


DEFAULT_ADJUSTMENT_CONFIG: Final[CategoryAdjustmentConfig] = CategoryAdjustmentConfig()


# =============================================================================
# ПРАВИЛА
# =============================================================================

AdjustmentRule = Callable[[DaysOfInventory, CategoryAdjustmentConfig], Optional[DaysOfInventory]]


def _bonus_rule(target: DaysOfInventory, config: CategoryAdjustmentConfig) -> DaysOfInventory:
    return target + DaysOfInventory(value=config.category1_bonus_days)


def _unchanged_rule(target: DaysOfInventory, config: CategoryAdjustmentConfig) -> DaysOfInventory:
    return target


def _penalty_rule(
    target: DaysOfInventory, config: CategoryAdjustmentConfig
) -> Optional[DaysOfInventory]:
    return target - DaysOfInventory(value=config.category3_penalty_days)


ADJUSTMENT_RULES: Final[Mapping[ProfitCategory, AdjustmentRule]] = MappingProxyType(
    {
        ProfitCategory.CATEGORY_1: _bonus_rule,
        ProfitCategory.CATEGORY_2: _unchanged_rule,
        ProfitCategory.CATEGORY_3: _penalty_rule,
    }
)


def ensure_exhaustive(rules: Mapping[ProfitCategory, AdjustmentRule]) -> None:
    """
    Проверка, что каждая категория имеет правило.

    Args:
        rules: Таблица правил

    Raises:
        UnmappedProfitCategoryError: Если хотя бы одна категория без правила
    """
    missing = [category.value for category in ProfitCategory if category not in rules]
    if missing:
        raise UnmappedProfitCategoryError(
            f"No adjustment rule for profit categories: {', '.join(missing)}"
        )


ensure_exhaustive(ADJUSTMENT_RULES)


def adjust_target(
    target: DaysOfInventory,
    category: ProfitCategory,
    config: CategoryAdjustmentConfig | None = None,
    rules: Mapping[ProfitCategory, AdjustmentRule] = ADJUSTMENT_RULES,
) -> Optional[DaysOfInventory]:
    """
    Корректировка целевых дней запаса по категории.

    Args:
        target: Целевые дни запаса
        category: Категория доходности позиции
        config: Величины бонуса/штрафа (опционально, используется default)
        rules: Таблица правил (по умолчанию ADJUSTMENT_RULES)

    Returns:
        Скорректированная цель или None, если штраф Category3 не покрывается
        целью (T <= penalty)

    Raises:
        UnmappedProfitCategoryError: Если для категории нет правила
    """
    rule = rules.get(category)
    if rule is None:
        raise UnmappedProfitCategoryError(
            f"No adjustment rule for profit category: {category!r}"
        )
    return rule(target, config or DEFAULT_ADJUSTMENT_CONFIG)
