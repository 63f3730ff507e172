"""
Domain Primitives — Валидированные скалярные типы домена пополнения

Каждый скалярный концепт (идентификатор, себестоимость, темп продаж,
дни запаса) — отдельный immutable тип поверх одного и того же скаляра.
Экземпляр существует только если сырое значение прошло доменный предикат.

Единственный допустимый способ получить экземпляр из сырого значения:
`try_create(raw)` — возвращает экземпляр или None, исключений не бросает.

Числовые примитивы принимают только конечные числа: NaN и ±inf отклоняются,
текст и bool для float-величин не принимаются.

Алгебра DaysOfInventory:
- DOI + DOI -> DOI                  (тотальная в пределах float)
- DOI - DOI -> Optional[DOI]        (частичная, только при d1 > d2)
- DOI * SalesRate -> ItemQuantity   (единственная межтиповая операция)

ЗАПРЕЩЕНО смешивать типы без явной операции из этого модуля:
DOI + UnitCost, DOI + float и т.п. дают TypeError.
"""

import math
from decimal import Decimal
from typing import Any, Final, Mapping, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator


# =============================================================================
# ДОМЕННЫЕ ГРАНИЦЫ
# =============================================================================

# Длина идентификатора: 5 < len <= 20
INVENTORY_ID_MIN_LENGTH: Final[int] = 6
INVENTORY_ID_MAX_LENGTH: Final[int] = 20

# Себестоимость единицы: 0 < cost < 2000 (обе границы исключены)
UNIT_COST_MIN_EXCLUSIVE: Final[Decimal] = Decimal("0")
UNIT_COST_MAX_EXCLUSIVE: Final[Decimal] = Decimal("2000")


_P = TypeVar("_P", bound="DomainPrimitive")
_M = TypeVar("_M", bound="ValidatedModel")


# =============================================================================
# БАЗОВЫЕ ТИПЫ
# =============================================================================


class ValidatedModel(BaseModel):
    """
    Immutable модель, которую нельзя получить в обход валидации.

    model_copy(update=...) в pydantic не валидирует обновлённые поля,
    поэтому копия с изменениями собирается заново через конструктор.
    """

    model_config = {"frozen": True}

    def model_copy(
        self: _M, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> _M:
        if not update:
            return super().model_copy(deep=deep)
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields.update(update)
        return type(self)(**fields)


class DomainPrimitive(ValidatedModel):
    """
    Базовый класс доменного примитива.

    Единственное поле `value`; ограничения домена задаются в подклассах
    через Field.
    """

    @classmethod
    def try_create(cls: type[_P], raw: Any) -> Optional[_P]:
        """
        Валидирующий конструктор.

        Args:
            raw: Сырое значение от внешнего источника

        Returns:
            Экземпляр типа, если raw удовлетворяет предикату домена, иначе None
        """
        try:
            return cls(value=raw)
        except ValidationError:
            return None


def _reject_non_numeric(value: Any) -> Any:
    """Float-величины принимают только числа (как тип number в контрактах)"""
    if isinstance(value, (str, bytes, bool)):
        raise ValueError(f"numeric value expected, got {type(value).__name__}")
    return value


# =============================================================================
# ПРИМИТИВЫ СО СВОБОДНЫМ ВХОДОМ
# =============================================================================


class InventoryIdentifier(DomainPrimitive):
    """Идентификатор складской позиции (5 < длина <= 20)"""

    value: str = Field(
        ...,
        min_length=INVENTORY_ID_MIN_LENGTH,
        max_length=INVENTORY_ID_MAX_LENGTH,
        description="Идентификатор позиции",
    )

    def __str__(self) -> str:
        return self.value


class UnitCost(DomainPrimitive):
    """
    Себестоимость единицы товара (0 < cost < 2000, десятичная точность).

    Принимает число или десятичную строку; NaN/Infinity отклоняются.
    """

    value: Decimal = Field(
        ...,
        gt=UNIT_COST_MIN_EXCLUSIVE,
        lt=UNIT_COST_MAX_EXCLUSIVE,
        allow_inf_nan=False,
        description="Себестоимость единицы",
    )


class SalesRate(DomainPrimitive):
    """
    Ожидаемый темп продаж (единиц в день).

    Ноль допустим: позиция без продаж.
    """

    value: float = Field(..., ge=0.0, allow_inf_nan=False, description="Единиц в день")

    @field_validator("value", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        return _reject_non_numeric(v)


# =============================================================================
# КОЛИЧЕСТВА (результаты операций)
# =============================================================================


class OrderQuantity(DomainPrimitive):
    """
    Рекомендуемое количество к заказу (>= 0, конечное).

    Получается конверсией из ItemQuantity.
    """

    value: float = Field(..., ge=0.0, allow_inf_nan=False, description="Единиц к заказу")

    @classmethod
    def from_item_quantity(cls, quantity: "ItemQuantity") -> "OrderQuantity":
        return cls(value=quantity.value)


class ItemQuantity(DomainPrimitive):
    """
    Расчётное количество единиц до маркировки как заказ.

    Значение — произведение валидных операндов (DaysOfInventory * SalesRate),
    поэтому всегда >= 0.
    """

    value: float = Field(..., ge=0.0, allow_inf_nan=False, description="Единиц")

    def to_order_quantity(self) -> OrderQuantity:
        """Конверсия 1:1 в OrderQuantity"""
        return OrderQuantity.from_item_quantity(self)


class PurchaseValue(DomainPrimitive):
    """Стоимость закупки (OrderQuantity * UnitCost)"""

    value: Decimal = Field(..., ge=Decimal("0"), description="Стоимость закупки")


# =============================================================================
# DAYS OF INVENTORY + АЛГЕБРА
# =============================================================================


class DaysOfInventory(DomainPrimitive):
    """
    Дни запаса (строго > 0, конечное).

    Нулевой или отрицательный запас в днях не представим: вычитание,
    которое дало бы такое значение, возвращает None.
    """

    value: float = Field(..., gt=0.0, allow_inf_nan=False, description="Дни запаса")

    @field_validator("value", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        return _reject_non_numeric(v)

    def add(self, other: "DaysOfInventory") -> "DaysOfInventory":
        """
        Сложение.

        Верхняя граница суммы не перепроверяется; единственный отказ —
        выход за пределы float.

        Args:
            other: Второе слагаемое

        Returns:
            DaysOfInventory(self + other)

        Raises:
            OverflowError: Если сумма не представима конечным float
        """
        total = self.value + other.value
        if math.isinf(total):
            raise OverflowError(f"DaysOfInventory sum overflows: {self.value} + {other.value}")
        return DaysOfInventory(value=total)

    def try_subtract(self, other: "DaysOfInventory") -> Optional["DaysOfInventory"]:
        """
        Вычитание (частичное).

        Args:
            other: Вычитаемое

        Returns:
            DaysOfInventory(self - other) если self > other, иначе None
        """
        if self.value <= other.value:
            return None
        return DaysOfInventory.try_create(self.value - other.value)

    def multiply_by_sales_rate(self, rate: SalesRate) -> ItemQuantity:
        """
        Дни запаса * темп продаж = количество единиц.

        Args:
            rate: Темп продаж (единиц в день)

        Returns:
            ItemQuantity(days * rate); при rate = 0 результат 0

        Raises:
            OverflowError: Если произведение не представимо конечным float
        """
        product = self.value * rate.value
        if math.isinf(product):
            raise OverflowError(f"ItemQuantity overflows: {self.value} * {rate.value}")
        return ItemQuantity(value=product)

    def __add__(self, other: object) -> "DaysOfInventory":
        if not isinstance(other, DaysOfInventory):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Optional["DaysOfInventory"]:
        if not isinstance(other, DaysOfInventory):
            return NotImplemented
        return self.try_subtract(other)

    def __mul__(self, other: object) -> ItemQuantity:
        if not isinstance(other, SalesRate):
            return NotImplemented
        return self.multiply_by_sales_rate(other)
