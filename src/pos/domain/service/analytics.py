"""Domain service: sales analytics.

Every function here is a pure function of the catalog and the bill
history.  Nothing is cached at this level; callers that want caching
wrap these in ``pos.application.show_analytics.AnalyticsView``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pos.domain.model.bill import Bill
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DEFAULT_LOW_STOCK_THRESHOLD = 5
TOP_SELLERS_LIMIT = 5
FORECAST_LIMIT = 5

# The sales counter is treated as a 30-day total
_COUNTER_WINDOW_DAYS = Decimal(30)
_DEMAND_DAYS = Decimal(7)
_RESTOCK_DAYS = Decimal(14)
_TRENDING_SALES = 50


@dataclass(frozen=True)
class MonthlySales:
    name: str
    sales: Money


@dataclass(frozen=True)
class ProductForecast:
    id: str
    name: str
    current_stock: int
    predicted_demand: int
    recommended_stock: int
    trend: str


def monthly_sales(bills: Iterable[Bill]) -> list[MonthlySales]:
    """Revenue per calendar month, Jan..Dec.

    Bills from different years land in the same bucket.
    """
    buckets = [Money.zero() for _ in MONTHS]
    for bill in bills:
        buckets[bill.created_at.month - 1] += bill.total_amount
    return [MonthlySales(name, sales) for name, sales in zip(MONTHS, buckets)]


def category_sales(bills: Sequence[Bill]) -> dict[str, int]:
    """Share of revenue per category, as whole percentages.

    With no revenue at all the divisor falls back to 1.
    """
    totals: dict[str, Decimal] = {}
    for bill in bills:
        for item in bill.items:
            if not item.category:
                continue
            totals[item.category] = (
                totals.get(item.category, Decimal("0")) + item.total_price.amount
            )

    divisor = total_revenue(bills).amount or Decimal(1)
    return {
        category: _round_half_up(value / divisor * 100)
        for category, value in totals.items()
    }


def product_forecast(products: Sequence[Product]) -> list[ProductForecast]:
    """Naive weekly demand estimate for the first products in catalog order."""
    forecasts = []
    for product in products[:FORECAST_LIMIT]:
        daily_rate = Decimal(product.sales_count) / _COUNTER_WINDOW_DAYS
        forecasts.append(
            ProductForecast(
                id=product.id,
                name=product.name,
                current_stock=product.quantity,
                predicted_demand=_round_half_up(daily_rate * _DEMAND_DAYS),
                recommended_stock=max(
                    product.quantity, _round_half_up(daily_rate * _RESTOCK_DAYS)
                ),
                trend="increasing" if product.sales_count > _TRENDING_SALES else "stable",
            )
        )
    return forecasts


def low_stock_products(
    products: Iterable[Product],
    threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> list[Product]:
    return [p for p in products if p.is_low_stock(threshold)]


def top_selling_products(
    products: Iterable[Product],
    limit: int = TOP_SELLERS_LIMIT,
) -> list[Product]:
    return sorted(products, key=lambda p: p.sales_count, reverse=True)[:limit]


def total_revenue(bills: Iterable[Bill]) -> Money:
    return Money.sum(bill.total_amount for bill in bills)


def total_inventory_value(products: Iterable[Product]) -> Money:
    return Money.sum(p.stock_value for p in products)


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
