"""
Тесты для доменных примитивов: InventoryIdentifier, UnitCost, SalesRate, DaysOfInventory

Проверяет:
1. Предикаты домена на границах (включая исключённые границы)
2. try_create никогда не бросает исключений на невалидный вход
3. Immutability (frozen=True)
4. Конверсию ItemQuantity -> OrderQuantity
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import (
    DaysOfInventory,
    InventoryIdentifier,
    ItemQuantity,
    OrderQuantity,
    SalesRate,
    UnitCost,
)


# =============================================================================
# INVENTORY IDENTIFIER
# =============================================================================


class TestInventoryIdentifier:
    """Тесты для InventoryIdentifier (5 < len <= 20)"""

    @pytest.mark.parametrize(
        "length,expected_valid",
        [
            (0, False),
            (1, False),
            (5, False),
            (6, True),
            (12, True),
            (20, True),
            (21, False),
            (50, False),
        ],
    )
    def test_length_predicate(self, length: int, expected_valid: bool) -> None:
        """Валидность определяется только длиной"""
        result = InventoryIdentifier.try_create("X" * length)
        assert (result is not None) is expected_valid

    def test_value_preserved(self) -> None:
        """Значение сохраняется без изменений"""
        identifier = InventoryIdentifier.try_create("ABC123")
        assert identifier is not None
        assert identifier.value == "ABC123"
        assert str(identifier) == "ABC123"

    def test_whitespace_counts_toward_length(self) -> None:
        """Пробелы не обрезаются и учитываются в длине"""
        assert InventoryIdentifier.try_create("  AB  ") is not None
        assert InventoryIdentifier.try_create(" AB  ") is None

    def test_non_text_returns_none(self) -> None:
        """Не-текстовый вход даёт None, а не исключение"""
        assert InventoryIdentifier.try_create(None) is None
        assert InventoryIdentifier.try_create(["ABC123"]) is None

    def test_immutable(self) -> None:
        """Идентификатор должен быть immutable (frozen=True)"""
        identifier = InventoryIdentifier.try_create("ABC123")
        with pytest.raises(ValidationError):
            identifier.value = "ZZZ999"  # type: ignore


# =============================================================================
# UNIT COST
# =============================================================================


class TestUnitCost:
    """Тесты для UnitCost (0 < cost < 2000)"""

    @pytest.mark.parametrize(
        "raw,expected_valid",
        [
            (-1.0, False),
            (0, False),
            (0.0, False),
            (0.01, True),
            (50.0, True),
            (1999.99, True),
            (2000, False),
            (2000.0, False),
            (2500.0, False),
            (Decimal("0.01"), True),
            (Decimal("1999.99"), True),
            (Decimal("2000"), False),
        ],
    )
    def test_range_predicate(self, raw, expected_valid: bool) -> None:
        """Обе границы (0 и 2000) исключены"""
        result = UnitCost.try_create(raw)
        assert (result is not None) is expected_valid

    def test_decimal_representation(self) -> None:
        """Значение хранится как Decimal"""
        cost = UnitCost.try_create(Decimal("49.95"))
        assert cost is not None
        assert isinstance(cost.value, Decimal)
        assert cost.value == Decimal("49.95")

    def test_decimal_string_accepted(self) -> None:
        """Десятичная строка от внешней системы допустима"""
        cost = UnitCost.try_create("49.95")
        assert cost is not None
        assert cost.value == Decimal("49.95")

    def test_garbage_returns_none(self) -> None:
        """Нечисловой вход даёт None, а не исключение"""
        assert UnitCost.try_create(None) is None
        assert UnitCost.try_create("not-a-number") is None

    @pytest.mark.parametrize(
        "raw",
        [Decimal("Infinity"), Decimal("-Infinity"), Decimal("NaN"), "Infinity", float("inf")],
    )
    def test_non_finite_returns_none(self, raw) -> None:
        """Бесконечность и NaN не являются себестоимостью"""
        assert UnitCost.try_create(raw) is None


# =============================================================================
# SALES RATE
# =============================================================================


class TestSalesRate:
    """Тесты для SalesRate (rate >= 0)"""

    @pytest.mark.parametrize(
        "raw,expected_valid",
        [
            (-100.0, False),
            (-0.1, False),
            (0.0, True),
            (0, True),
            (0.1, True),
            (2.5, True),
            (1_000_000.0, True),
        ],
    )
    def test_non_negative_predicate(self, raw, expected_valid: bool) -> None:
        """Ноль допустим (нет продаж), отрицательное значение — нет"""
        result = SalesRate.try_create(raw)
        assert (result is not None) is expected_valid

    def test_garbage_returns_none(self) -> None:
        """Нечисловой вход даёт None"""
        assert SalesRate.try_create(None) is None
        assert SalesRate.try_create("fast") is None

    @pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_returns_none(self, raw: float) -> None:
        """Бесконечный темп продаж и NaN отклоняются"""
        assert SalesRate.try_create(raw) is None

    @pytest.mark.parametrize("raw", ["2.5", "0", b"2.5", True, False])
    def test_text_and_bool_rejected(self, raw) -> None:
        """Только числа: строка или bool не приводятся к темпу продаж"""
        assert SalesRate.try_create(raw) is None

    def test_int_accepted(self) -> None:
        """Целое число допустимо и хранится как float"""
        rate = SalesRate.try_create(3)
        assert rate is not None
        assert rate.value == 3.0


# =============================================================================
# DAYS OF INVENTORY
# =============================================================================


class TestDaysOfInventory:
    """Тесты для DaysOfInventory (days > 0)"""

    @pytest.mark.parametrize(
        "raw,expected_valid",
        [
            (-5.0, False),
            (0.0, False),
            (0, False),
            (0.1, True),
            (10, True),
            (365.0, True),
        ],
    )
    def test_positive_predicate(self, raw, expected_valid: bool) -> None:
        """Ноль дней запаса не представим"""
        result = DaysOfInventory.try_create(raw)
        assert (result is not None) is expected_valid

    def test_equality_by_value(self) -> None:
        """Равенство по значению"""
        assert DaysOfInventory.try_create(10) == DaysOfInventory.try_create(10.0)
        assert DaysOfInventory.try_create(10) != DaysOfInventory.try_create(11)

    def test_distinct_types_not_equal(self) -> None:
        """Разные доменные типы с одним скаляром не равны"""
        assert DaysOfInventory.try_create(2.5) != SalesRate.try_create(2.5)

    def test_direct_construction_validates(self) -> None:
        """Прямой конструктор тоже проходит валидацию"""
        with pytest.raises(ValidationError):
            DaysOfInventory(value=0.0)

    @pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_returns_none(self, raw: float) -> None:
        """Дни запаса всегда конечны"""
        assert DaysOfInventory.try_create(raw) is None

    @pytest.mark.parametrize("raw", ["10", True])
    def test_text_and_bool_rejected(self, raw) -> None:
        """Строка или bool не приводятся к дням запаса"""
        assert DaysOfInventory.try_create(raw) is None

    def test_copy_with_update_validates(self) -> None:
        """model_copy(update=...) не обходит предикат домена"""
        days = DaysOfInventory(value=10)
        with pytest.raises(ValidationError):
            days.model_copy(update={"value": -3.0})
        with pytest.raises(ValidationError):
            days.model_copy(update={"value": float("inf")})

    def test_copy_with_valid_update(self) -> None:
        """Валидное обновление даёт новый экземпляр, исходный не меняется"""
        days = DaysOfInventory(value=10)
        copy = days.model_copy(update={"value": 12.5})
        assert copy == DaysOfInventory(value=12.5)
        assert days.value == 10.0

    def test_copy_without_update(self) -> None:
        assert DaysOfInventory(value=10).model_copy() == DaysOfInventory(value=10)


# =============================================================================
# QUANTITIES
# =============================================================================


class TestQuantities:
    """Тесты для ItemQuantity / OrderQuantity"""

    def test_item_to_order_quantity(self) -> None:
        """Конверсия 1:1 с меткой заказа"""
        order = ItemQuantity(value=25.0).to_order_quantity()
        assert isinstance(order, OrderQuantity)
        assert order.value == 25.0

    def test_from_item_quantity(self) -> None:
        """Конверсия через конструктор OrderQuantity"""
        order = OrderQuantity.from_item_quantity(ItemQuantity(value=0.0))
        assert order.value == 0.0

    def test_order_quantity_is_not_item_quantity(self) -> None:
        """OrderQuantity и ItemQuantity — разные типы"""
        assert ItemQuantity(value=25.0) != OrderQuantity(value=25.0)

    @pytest.mark.parametrize("quantity_type", [ItemQuantity, OrderQuantity])
    @pytest.mark.parametrize("raw", [-5.0, -0.001, float("inf"), float("nan")])
    def test_negative_or_non_finite_rejected(self, quantity_type, raw: float) -> None:
        """Количество не бывает отрицательным или бесконечным"""
        with pytest.raises(ValidationError):
            quantity_type(value=raw)
        assert quantity_type.try_create(raw) is None

    def test_order_quantity_copy_validates(self) -> None:
        """Отрицательное количество нельзя получить через model_copy"""
        with pytest.raises(ValidationError):
            OrderQuantity(value=5.0).model_copy(update={"value": -5.0})
