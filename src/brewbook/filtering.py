from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Optional

from .catalog import Catalog
from .domain import FilterState, Temperature

log = logging.getLogger(__name__)

Listener = Callable[[FilterState], None]


class FilterController:
    """Temperature filter over a catalog, publishing each new state to subscribers."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._listeners: list[Listener] = []
        self._state = FilterState(selected_temperature=None, visible_recipes=catalog.list_all())

    def current(self) -> FilterState:
        return self._state

    def set_filter(self, temperature: Optional[Temperature]) -> FilterState:
        selected = temperature if isinstance(temperature, Temperature) else None
        recipes = self._catalog.list_all()
        if selected is not None:
            recipes = tuple(recipe for recipe in recipes if recipe.temperature is selected)
        state = FilterState(selected_temperature=selected, visible_recipes=recipes)

        if state == self._state:
            return self._state
        self._state = state
        log.debug("Filter set to %s (%d visible)", selected, len(recipes))
        for listener in tuple(self._listeners):
            listener(state)
        return state

    def toggle(self, temperature: Temperature) -> FilterState:
        if self._state.selected_temperature is temperature:
            return self.set_filter(None)
        return self.set_filter(temperature)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
