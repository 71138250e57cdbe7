from __future__ import annotations

from brewbook.catalog import Catalog
from brewbook.domain import FilterState, Temperature
from brewbook.filtering import FilterController


# Purpose: verify the controller starts unfiltered.
def test_initial_state(small_catalog: Catalog) -> None:
    state = FilterController(small_catalog).current()
    assert state.selected_temperature is None
    assert state.visible_recipes == small_catalog.list_all()


# Purpose: verify filtering keeps catalog order.
def test_set_filter_keeps_order(small_catalog: Catalog) -> None:
    controller = FilterController(small_catalog)
    state = controller.set_filter(Temperature.COLD)
    assert state.selected_temperature is Temperature.COLD
    assert [r.id for r in state.visible_recipes] == ["garage_cold_brew", "instant_iced"]
    assert controller.current() == state


# Purpose: verify applying the same filter twice is idempotent.
def test_set_filter_idempotent(default_catalog: Catalog) -> None:
    controller = FilterController(default_catalog)
    once = controller.set_filter(Temperature.HOT).visible_recipes
    twice = controller.set_filter(Temperature.HOT).visible_recipes
    assert once == twice
    assert all(r.temperature is Temperature.HOT for r in twice)


# Purpose: verify clearing the filter restores the full catalog order.
def test_clear_filter_round_trip(default_catalog: Catalog) -> None:
    controller = FilterController(default_catalog)
    controller.set_filter(Temperature.HOT)
    state = controller.set_filter(None)
    assert state.selected_temperature is None
    assert state.visible_recipes == default_catalog.list_all()


# Purpose: verify an unrecognized filter value means no filter.
def test_unrecognized_filter_value(default_catalog: Catalog) -> None:
    controller = FilterController(default_catalog)
    controller.set_filter(Temperature.COLD)
    state = controller.set_filter("all")  # type: ignore[arg-type]
    assert state.selected_temperature is None
    assert len(state.visible_recipes) == len(default_catalog.list_all())


# Purpose: verify toggling the active temperature clears it.
def test_toggle(small_catalog: Catalog) -> None:
    controller = FilterController(small_catalog)
    assert controller.toggle(Temperature.HOT).selected_temperature is Temperature.HOT
    assert controller.toggle(Temperature.COLD).selected_temperature is Temperature.COLD
    assert controller.toggle(Temperature.COLD).selected_temperature is None


# Purpose: verify subscribers see changes but not repeated equal states.
def test_subscribe_notifications(small_catalog: Catalog) -> None:
    controller = FilterController(small_catalog)
    seen: list[FilterState] = []
    unsubscribe = controller.subscribe(seen.append)

    controller.set_filter(Temperature.HOT)
    controller.set_filter(Temperature.HOT)
    controller.set_filter(None)
    assert [s.selected_temperature for s in seen] == [Temperature.HOT, None]

    unsubscribe()
    unsubscribe()
    controller.set_filter(Temperature.COLD)
    assert len(seen) == 2


# Purpose: verify a listener may unsubscribe while being notified.
def test_unsubscribe_during_notification(small_catalog: Catalog) -> None:
    controller = FilterController(small_catalog)
    calls: list[str] = []
    handle = {}

    def once(state: FilterState) -> None:
        calls.append("once")
        handle["unsub"]()

    handle["unsub"] = controller.subscribe(once)
    controller.subscribe(lambda state: calls.append("always"))
    controller.set_filter(Temperature.HOT)
    controller.set_filter(Temperature.COLD)
    assert calls == ["once", "always", "always"]
