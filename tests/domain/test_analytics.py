"""Unit tests for the analytics functions."""

from datetime import datetime, timedelta, timezone

from pos.domain.model.bill import Bill, BillLineItem, BillStatus
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.service.analytics import (
    MONTHS,
    category_sales,
    low_stock_products,
    monthly_sales,
    product_forecast,
    top_selling_products,
    total_inventory_value,
    total_revenue,
)

_BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _product(n: int, quantity: int = 10, sales: int = 0, price: str = "1.00") -> Product:
    return Product(
        id=str(n),
        name=f"Product {n}",
        barcode=f"bc{n}",
        category="General",
        price=Money.of(price),
        quantity=quantity,
        sales_count=sales,
        created_at=_BASE + timedelta(days=n),
    )


def _bill(when: datetime, *lines: tuple[str, str, int]) -> Bill:
    """lines: (category, unit_price, quantity)"""
    return Bill(
        id=None,
        items=[
            BillLineItem(
                product_id=f"p{i}",
                product_name=f"P{i}",
                barcode=f"{i}",
                category=category,
                quantity=Quantity(qty),
                unit_price=Money.of(price),
            )
            for i, (category, price, qty) in enumerate(lines)
        ],
        user_id="u1",
        status=BillStatus.COMPLETED,
        created_at=when,
    )


class TestMonthlySales:

    def test_twelve_buckets_in_calendar_order(self):
        result = monthly_sales([])
        assert [m.name for m in result] == list(MONTHS)
        assert all(m.sales.is_zero for m in result)

    def test_bills_summed_into_their_month(self):
        bills = [
            _bill(datetime(2024, 3, 5, tzinfo=timezone.utc), ("A", "10.00", 1)),
            _bill(datetime(2024, 3, 20, tzinfo=timezone.utc), ("A", "2.50", 2)),
            _bill(datetime(2024, 12, 31, tzinfo=timezone.utc), ("A", "1.00", 1)),
        ]
        result = {m.name: m.sales for m in monthly_sales(bills)}
        assert result["Mar"] == Money.of("15.00")
        assert result["Dec"] == Money.of("1.00")
        assert result["Jan"].is_zero

    def test_years_collapse_into_same_month(self):
        bills = [
            _bill(datetime(2023, 6, 1, tzinfo=timezone.utc), ("A", "4.00", 1)),
            _bill(datetime(2024, 6, 1, tzinfo=timezone.utc), ("A", "6.00", 1)),
        ]
        result = {m.name: m.sales for m in monthly_sales(bills)}
        assert result["Jun"] == Money.of("10.00")


class TestCategorySales:

    def test_shares_are_rounded_percentages(self):
        bills = [
            _bill(_BASE, ("Dairy", "1.00", 1), ("Bakery", "2.00", 1)),
        ]
        # 1/3 = 33.33 -> 33, 2/3 = 66.67 -> 67
        assert category_sales(bills) == {"Dairy": 33, "Bakery": 67}

    def test_half_rounds_up(self):
        bills = [_bill(_BASE, ("A", "1.00", 1), ("B", "1.00", 1))]
        assert category_sales(bills) == {"A": 50, "B": 50}
        bills = [_bill(_BASE, ("A", "1.00", 1), *[("B", "1.00", 1)] * 7)]
        # 1/8 = 12.5 -> 13
        assert category_sales(bills)["A"] == 13

    def test_categories_accumulate_across_bills(self):
        bills = [
            _bill(_BASE, ("Dairy", "3.00", 1)),
            _bill(_BASE, ("Dairy", "1.00", 1), ("Snacks", "4.00", 1)),
        ]
        assert category_sales(bills) == {"Dairy": 50, "Snacks": 50}

    def test_no_bills_gives_no_categories(self):
        assert category_sales([]) == {}

    def test_zero_revenue_divides_by_one(self):
        zero_price = BillLineItem(
            product_id="free",
            product_name="Free sample",
            barcode="0",
            category="Promo",
            quantity=Quantity(3),
            unit_price=Money.of("0"),
        )
        bills = [Bill(id="1", items=[zero_price], user_id="u1", created_at=_BASE)]
        assert category_sales(bills) == {"Promo": 0}


class TestProductForecast:

    def test_only_first_five_in_catalog_order(self):
        products = [_product(n) for n in range(1, 8)]
        result = product_forecast(products)
        assert [f.id for f in result] == ["1", "2", "3", "4", "5"]

    def test_formula(self):
        # 90 sold over 30 days: 3/day -> 21 a week, 42 a fortnight
        result = product_forecast([_product(1, quantity=10, sales=90)])[0]
        assert result.current_stock == 10
        assert result.predicted_demand == 21
        assert result.recommended_stock == 42
        assert result.trend == "increasing"

    def test_recommended_never_below_current_stock(self):
        result = product_forecast([_product(1, quantity=100, sales=30)])[0]
        assert result.recommended_stock == 100

    def test_half_unit_demand_rounds_up(self):
        # 15 / 30 * 7 = 3.5
        assert product_forecast([_product(1, sales=15)])[0].predicted_demand == 4

    def test_trend_threshold(self):
        assert product_forecast([_product(1, sales=50)])[0].trend == "stable"
        assert product_forecast([_product(1, sales=51)])[0].trend == "increasing"

    def test_no_sales(self):
        result = product_forecast([_product(1, quantity=4, sales=0)])[0]
        assert result.predicted_demand == 0
        assert result.recommended_stock == 4
        assert result.trend == "stable"


class TestStockViews:

    def test_low_stock_inclusive_default_threshold(self):
        products = [_product(1, quantity=0), _product(2, quantity=5), _product(3, quantity=6)]
        assert [p.id for p in low_stock_products(products)] == ["1", "2"]

    def test_low_stock_custom_threshold(self):
        products = [_product(1, quantity=8), _product(2, quantity=12)]
        assert [p.id for p in low_stock_products(products, threshold=10)] == ["1"]

    def test_top_sellers_descending_and_limited(self):
        products = [_product(n, sales=n * 10) for n in range(1, 8)]
        assert [p.id for p in top_selling_products(products)] == ["7", "6", "5", "4", "3"]

    def test_top_sellers_ties_keep_catalog_order(self):
        products = [_product(1, sales=5), _product(2, sales=5), _product(3, sales=9)]
        assert [p.id for p in top_selling_products(products)] == ["3", "1", "2"]


class TestHeadlineFigures:

    def test_total_revenue(self):
        bills = [_bill(_BASE, ("A", "10.00", 1)), _bill(_BASE, ("A", "5.00", 1))]
        assert total_revenue(bills) == Money.of("15.00")

    def test_inventory_value(self):
        products = [_product(1, quantity=2, price="3.00"), _product(2, quantity=0, price="9.99")]
        assert total_inventory_value(products) == Money.of("6.00")
