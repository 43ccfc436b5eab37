from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge

if TYPE_CHECKING:
    from catalog.domain.models import CatalogAction, CatalogState

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

CATALOG_ACTIONS = Counter(
    "catalog_actions_total",
    "Total number of catalog actions that changed the store state",
    ["action"],
)

CATALOG_PRODUCTS = Gauge(
    "catalog_products",
    "Number of products currently held by the catalog store",
)


def record_catalog_change(state: CatalogState, action: CatalogAction) -> None:
    """Store subscriber: counts the applied action and tracks the catalog size."""
    CATALOG_ACTIONS.labels(action=action.type).inc()
    CATALOG_PRODUCTS.set(len(state.products))
