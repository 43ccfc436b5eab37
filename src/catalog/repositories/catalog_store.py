# src/catalog/repositories/catalog_store.py
from __future__ import annotations

import logging
from collections.abc import Callable

from catalog.domain.models import CatalogAction, CatalogState, Product
from catalog.domain.reducer import transition

logger = logging.getLogger(__name__)

Listener = Callable[[CatalogState, CatalogAction], None]


class CatalogStore:
    """
    In-memory state container for the product catalog.

    The store is the only owner of the product collection: all changes go
    through dispatch(), which replaces the committed state with the result of
    transition(). Committed states are never mutated, so a state obtained
    earlier stays valid. Subscribers are called after each dispatch that
    produced a new state, in the order they subscribed.
    """

    def __init__(self, initial_state: CatalogState | None = None) -> None:
        self._state = initial_state if initial_state is not None else CatalogState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> CatalogState:
        return self._state

    def dispatch(self, action: CatalogAction) -> CatalogState:
        previous = self._state
        new_state = transition(previous, action)
        if new_state is previous:
            logger.debug("Action '%s' left the catalog unchanged", action.type)
            return previous

        self._state = new_state
        logger.debug(
            "Applied '%s': %d -> %d products, next_id=%d",
            action.type,
            len(previous.products),
            len(new_state.products),
            new_state.next_id,
        )
        for listener in list(self._listeners):
            listener(new_state, action)
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a listener and returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def find_by_id(self, product_id: int) -> Product | None:
        return next((p for p in self._state.products if p.id == product_id), None)
