"""
StockItem — Агрегат складской позиции

Immutable Pydantic модель, собранная из валидированных примитивов:
InventoryIdentifier, UnitCost, SalesRate и ProfitCategory.

Агрегат существует только если каждое поле прошло свою валидацию.
Валидации полей выполняются независимо (без short-circuit), ошибки
накапливаются в StockItemResult в порядке полей.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import Field, ValidationError

from src.core.contracts import StockItemRecordValidator
from src.core.domain.primitives import (
    DomainPrimitive,
    InventoryIdentifier,
    SalesRate,
    UnitCost,
    ValidatedModel,
)
from src.core.domain.profit_category import ProfitCategory


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FieldError:
    """Ошибка валидации одного поля."""

    field: str
    raw_value: Any
    message: str


@dataclass(frozen=True)
class StockItemResult:
    """Результат сборки агрегата.

    item заполнен тогда и только тогда, когда errors пуст.
    """

    item: Optional["StockItem"]
    errors: Tuple[FieldError, ...]

    @property
    def is_valid(self) -> bool:
        return self.item is not None

    @property
    def failed_fields(self) -> Tuple[str, ...]:
        return tuple(error.field for error in self.errors)


# =============================================================================
# STOCK ITEM MODEL
# =============================================================================


class StockItem(ValidatedModel):
    """
    Складская позиция, для которой выдаётся рекомендация заказа.

    Immutable модель (frozen=True). Перекрёстных ограничений между полями нет.
    """

    inventory_id: InventoryIdentifier = Field(..., description="Идентификатор позиции")
    unit_cost: UnitCost = Field(..., description="Себестоимость единицы")
    sales_rate: SalesRate = Field(..., description="Темп продаж (единиц в день)")
    profit_category: ProfitCategory = Field(..., description="Категория доходности")

    @classmethod
    def create(
        cls,
        inventory_id_raw: Any,
        unit_cost_raw: Any,
        sales_rate_raw: Any,
        category: ProfitCategory,
    ) -> StockItemResult:
        """
        Сборка агрегата с накоплением ошибок.

        Args:
            inventory_id_raw: Сырой идентификатор (текст)
            unit_cost_raw: Сырая себестоимость (decimal/число)
            sales_rate_raw: Сырой темп продаж (число)
            category: Категория доходности (закрытый тип, уже валиден)

        Returns:
            StockItemResult с агрегатом или со списком ошибок по всем полям
        """
        errors: List[FieldError] = []

        inventory_id = _validate_field("inventory_id", InventoryIdentifier, inventory_id_raw, errors)
        unit_cost = _validate_field("unit_cost", UnitCost, unit_cost_raw, errors)
        sales_rate = _validate_field("sales_rate", SalesRate, sales_rate_raw, errors)

        if errors:
            return StockItemResult(item=None, errors=tuple(errors))

        item = cls(
            inventory_id=inventory_id,
            unit_cost=unit_cost,
            sales_rate=sales_rate,
            profit_category=category,
        )
        return StockItemResult(item=item, errors=())

    @classmethod
    def try_create(
        cls,
        inventory_id_raw: Any,
        unit_cost_raw: Any,
        sales_rate_raw: Any,
        category: ProfitCategory,
    ) -> Optional["StockItem"]:
        """
        Сборка агрегата без диагностики.

        Returns:
            StockItem если все поля валидны, иначе None
        """
        return cls.create(inventory_id_raw, unit_cost_raw, sales_rate_raw, category).item

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> StockItemResult:
        """
        Сборка агрегата из сырой записи.

        Форма записи проверяется контрактом stock_item_record; доменные
        предикаты проверяются для каждого поля, форма которого верна.
        Ошибки обоих видов накапливаются и возвращаются в порядке полей.

        Args:
            record: Сырая запись с ключами inventory_id, unit_cost,
                sales_rate, profit_category

        Returns:
            StockItemResult; ошибки формы возвращаются как FieldError
        """
        errors: List[FieldError] = []
        shape_failed = set()

        for e in StockItemRecordValidator().iter_errors(record):
            field = _error_field(e)
            if e.absolute_path:
                shape_failed.add(str(e.absolute_path[0]))
            errors.append(
                FieldError(
                    field=field,
                    raw_value=e.instance if e.absolute_path else None,
                    message=e.message,
                )
            )

        if not isinstance(record, dict):
            return StockItemResult(item=None, errors=tuple(errors))

        values: Dict[str, Any] = {}
        for field, primitive in _PRIMITIVE_FIELDS:
            if field in record and field not in shape_failed:
                values[field] = _validate_field(field, primitive, record[field], errors)

        if errors:
            return StockItemResult(item=None, errors=tuple(sorted(errors, key=_field_order)))

        item = cls(**values, profit_category=ProfitCategory(record["profit_category"]))
        return StockItemResult(item=item, errors=())


# =============================================================================
# HELPERS
# =============================================================================

_PRIMITIVE_FIELDS: Tuple[Tuple[str, Type[DomainPrimitive]], ...] = (
    ("inventory_id", InventoryIdentifier),
    ("unit_cost", UnitCost),
    ("sales_rate", SalesRate),
)

_RECORD_FIELD_ORDER: Tuple[str, ...] = ("inventory_id", "unit_cost", "sales_rate", "profit_category")


def _field_order(error: FieldError) -> Tuple[int, str]:
    top = error.field.split(".")[0]
    if top in _RECORD_FIELD_ORDER:
        return _RECORD_FIELD_ORDER.index(top), error.message
    return len(_RECORD_FIELD_ORDER), error.message


def _validate_field(
    field: str,
    primitive: Type[DomainPrimitive],
    raw: Any,
    errors: List[FieldError],
) -> Optional[DomainPrimitive]:
    try:
        return primitive(value=raw)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"]
        errors.append(FieldError(field=field, raw_value=raw, message=message))
        return None


def _error_field(error) -> str:
    return ".".join(str(p) for p in error.absolute_path) or "record"
