from __future__ import annotations

import math
from collections.abc import Sequence

from catalog.core.parsing import parse_leading_number
from catalog.domain.models import Product, ProductPage, ViewParams


def filter_products(products: Sequence[Product], params: ViewParams) -> list[Product]:
    """Applies search, category and price bounds in that order, keeping store order."""
    result = list(products)

    needle = params.search_text.strip().casefold()
    if needle:
        result = [p for p in result if needle in p.name.casefold()]

    if params.category is not None:
        result = [p for p in result if p.category == params.category]

    min_price = parse_leading_number(params.min_price)
    if min_price is not None:
        result = [p for p in result if p.price >= min_price]

    max_price = parse_leading_number(params.max_price)
    if max_price is not None:
        result = [p for p in result if p.price <= max_price]

    return result


def compute_view(products: Sequence[Product], params: ViewParams) -> ProductPage:
    """
    Derives the visible page of the product list.

    The requested page number is clamped into [1, total_pages], so a stale page
    number after a narrower filter yields the last page instead of an empty one.
    An empty result still has one page.
    """
    filtered = filter_products(products, params)

    total_count = len(filtered)
    total_pages = max(1, math.ceil(total_count / params.page_size))
    page_number = min(max(1, params.page_number), total_pages)

    start = (page_number - 1) * params.page_size
    return ProductPage(
        items=filtered[start : start + params.page_size],
        total_count=total_count,
        total_pages=total_pages,
        page_number=page_number,
        page_size=params.page_size,
    )
