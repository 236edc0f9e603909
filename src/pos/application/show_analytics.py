"""Application service: dashboard analytics (query).

``AnalyticsView`` recomputes the full report from the repositories and
keeps the result until something invalidates it.  Register
``AnalyticsView.invalidate`` with ``CheckoutHandler.subscribe`` so a new
sale is reflected on the next read.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.bill import Bill
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.bill_repository import BillRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service import analytics
from pos.domain.service.analytics import MonthlySales, ProductForecast


@dataclass(frozen=True)
class AnalyticsReport:
    monthly_sales: list[MonthlySales]
    category_sales: dict[str, int]
    forecasts: list[ProductForecast]
    low_stock: list[Product]
    top_sellers: list[Product]
    total_revenue: Money
    inventory_value: Money
    bill_count: int


class AnalyticsView:

    def __init__(
        self,
        product_repo: ProductRepository,
        bill_repo: BillRepository,
        low_stock_threshold: int = analytics.DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        if low_stock_threshold < 0:
            raise ValidationError("Low-stock threshold cannot be negative")
        self._product_repo = product_repo
        self._bill_repo = bill_repo
        self._threshold = low_stock_threshold
        self._cache: dict[str, AnalyticsReport] = {}

    @property
    def low_stock_threshold(self) -> int:
        return self._threshold

    def report(self, user_id: str) -> AnalyticsReport:
        if not user_id:
            raise ValidationError("A current user is required for analytics")
        if user_id not in self._cache:
            self._cache[user_id] = self._build(user_id)
        return self._cache[user_id]

    def invalidate(self, bill: Bill | None = None) -> None:
        # Stock levels are shared by every user, so drop all reports
        self._cache.clear()

    def _build(self, user_id: str) -> AnalyticsReport:
        products = self._product_repo.list_all()
        bills = self._bill_repo.list_for_user(user_id)
        return AnalyticsReport(
            monthly_sales=analytics.monthly_sales(bills),
            category_sales=analytics.category_sales(bills),
            forecasts=analytics.product_forecast(products),
            low_stock=analytics.low_stock_products(products, self._threshold),
            top_sellers=analytics.top_selling_products(products),
            total_revenue=analytics.total_revenue(bills),
            inventory_value=analytics.total_inventory_value(products),
            bill_count=len(bills),
        )
