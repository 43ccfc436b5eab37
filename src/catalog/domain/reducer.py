# src/catalog/domain/reducer.py
from __future__ import annotations

from catalog.domain.models import CatalogAction, CatalogState, Product


def transition(state: CatalogState, action: CatalogAction) -> CatalogState:
    """
    Pure state transition of the catalog.

    Returns a new state and never touches the given one. Update and delete
    actions for an unknown id, as well as unknown action kinds, return the
    given state object unchanged.
    """
    if action.type == "add":
        product = Product.from_fields(state.next_id, action.payload)
        return CatalogState(products=(product, *state.products), next_id=state.next_id + 1)

    if action.type == "update":
        updated = action.payload
        if not any(p.id == updated.id for p in state.products):
            return state
        products = tuple(updated if p.id == updated.id else p for p in state.products)
        return state.model_copy(update={"products": products})

    if action.type == "delete":
        remaining = tuple(p for p in state.products if p.id != action.product_id)
        if len(remaining) == len(state.products):
            return state
        return state.model_copy(update={"products": remaining})

    if action.type == "set":
        # next_id follows the list length, not the largest supplied id
        products = tuple(action.payload)
        return CatalogState(products=products, next_id=max(1, len(products) + 1))

    return state
