"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pos.application.checkout import CheckoutHandler
from pos.application.show_analytics import AnalyticsView
from pos.infrastructure.config import Settings
from pos.infrastructure.persistence.json_bill_draft_repository import (
    JsonBillDraftRepository,
)
from pos.infrastructure.persistence.json_bill_repository import JsonBillRepository
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.json_store import JsonStore
from pos.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def store(settings: Settings) -> JsonStore:
    return JsonStore(settings.store_path)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(store(settings))


def bill_repository(settings: Settings) -> JsonBillRepository:
    return JsonBillRepository(store(settings))


def bill_draft_repository(settings: Settings) -> JsonBillDraftRepository:
    source = store(settings)
    return JsonBillDraftRepository(source, JsonProductRepository(source))


def unit_of_work(settings: Settings) -> JsonUnitOfWork:
    return JsonUnitOfWork(store(settings))


def analytics_view(settings: Settings) -> AnalyticsView:
    return AnalyticsView(
        product_repo=product_repository(settings),
        bill_repo=bill_repository(settings),
        low_stock_threshold=settings.low_stock_threshold,
    )


def checkout_handler(
    settings: Settings,
    analytics: AnalyticsView | None = None,
) -> CheckoutHandler:
    handler = CheckoutHandler(unit_of_work(settings))
    if analytics is not None:
        handler.subscribe(analytics.invalidate)
    return handler
