from __future__ import annotations

from ...domain import CoffeeRecipe, FilterState, Temperature
from ..common import apply_centered_card_width, header_icon, sync_screen_layout
from ..state import art_for, filter_button_label, recipe_row_label
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Label,
    ListItem,
    ListView,
    Screen,
    Static,
    Vertical,
)
from ..widgets.list_utils import clear_list
from .detail import RecipeDetailScreen


class RecipeItem(ListItem):
    def __init__(self, recipe: CoffeeRecipe) -> None:
        super().__init__(Label(recipe_row_label(recipe, art_for(recipe, "list"))))
        self.recipe = recipe


class RecipeListScreen(Screen):
    BINDINGS = [
        ("h", "toggle_hot", "Hot"),
        ("c", "toggle_cold", "Cold"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="list-shell", classes="screen-shell"):
            with Vertical(id="list-card", classes="screen-card"):
                yield Static("Coffee Recipes", id="title")
                with Horizontal(id="filter-actions"):
                    yield Button("", id="filter-hot")
                    yield Button("", id="filter-cold")
                yield ListView(id="recipe-list")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        sync_screen_layout(self)
        apply_centered_card_width(self, "#list-card")
        self._unsubscribe = self.app.filters.subscribe(self._render_state)
        self._render_state(self.app.filters.current())
        self.query_one("#recipe-list", ListView).focus()

    def on_unmount(self, event=None) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_resize(self, event) -> None:
        sync_screen_layout(self)
        apply_centered_card_width(self, "#list-card")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "filter-hot":
            self.action_toggle_hot()
        elif event.button.id == "filter-cold":
            self.action_toggle_cold()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        recipe = getattr(event.item, "recipe", None)
        if recipe is not None:
            self.app.push_screen(RecipeDetailScreen(recipe.id))

    def action_toggle_hot(self) -> None:
        self.app.filters.toggle(Temperature.HOT)

    def action_toggle_cold(self) -> None:
        self.app.filters.toggle(Temperature.COLD)

    def _render_state(self, state: FilterState) -> None:
        self.query_one("#filter-hot", Button).label = filter_button_label(
            Temperature.HOT, state.selected_temperature
        )
        self.query_one("#filter-cold", Button).label = filter_button_label(
            Temperature.COLD, state.selected_temperature
        )

        list_view = self.query_one("#recipe-list", ListView)
        clear_list(list_view)
        for recipe in state.visible_recipes:
            list_view.append(RecipeItem(recipe))

        shown = len(state.visible_recipes)
        self.query_one("#status", Static).update(f"{shown} recipes · h: hot · c: cold · enter: open")
