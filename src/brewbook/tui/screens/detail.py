from __future__ import annotations

from ...display import NO_VARIANT_TEXT, NOT_FOUND_TEXT, recipe_meta_for, subtitle
from ...domain import CoffeeRecipe, Method
from ...errors import NoteStoreError, RecipeNotFoundError
from ...notes import load_note, save_note
from ..common import (
    apply_centered_card_width,
    current_layout_mode,
    header_icon,
    set_hidden,
    sync_screen_layout,
)
from ..layout import show_detail_art
from ..state import art_for, method_button_label
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    Screen,
    Static,
    Vertical,
    VerticalScroll,
)


class RecipeDetailScreen(Screen):
    BINDINGS = [
        ("escape", "back", "Back"),
        ("e", "method('espresso')", "Espresso"),
        ("g", "method('granules')", "Granules"),
    ]

    def __init__(self, recipe_id: str) -> None:
        super().__init__()
        self.recipe_id = recipe_id
        self.recipe: CoffeeRecipe | None = None
        self.method = Method.ESPRESSO
        self.practical_open = False
        self.note_open = False

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="detail-shell", classes="screen-shell"):
            with VerticalScroll(id="detail-card", classes="screen-card"):
                yield Static("", id="detail-art")
                yield Static("", id="detail-title")
                yield Static("", id="detail-subtitle")
                yield Static("", id="detail-meta")
                with Horizontal(id="method-actions"):
                    yield Button("", id="method-espresso")
                    yield Button("", id="method-granules")
                with Vertical(id="detail-body"):
                    yield Static("Ingredients", classes="section-title", id="ingredients-title")
                    yield Static("", id="ingredients")
                    yield Static("Steps", classes="section-title", id="steps-title")
                    yield Static("", id="steps")
                with Horizontal(id="detail-actions"):
                    yield Button("Practical info", id="practical", variant="primary")
                    yield Button("Back", id="back")
                with Vertical(id="practical-panel"):
                    yield Static("", id="practical-text")
                    yield Button("Write your own recipe", id="note-toggle", variant="primary")
                    yield Input(placeholder="Write your recipe here", id="note-input")
                    with Horizontal(id="note-actions"):
                        yield Button("Save", id="note-save", variant="primary")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        sync_screen_layout(self)
        apply_centered_card_width(self, "#detail-card")
        self.method = self.app.cfg.default_method
        try:
            self.recipe = self.app.catalog.find_by_id(self.recipe_id)
        except RecipeNotFoundError:
            self.recipe = None
        if self.recipe is None:
            self._render_not_found()
            return
        try:
            self.query_one("#note-input", Input).value = load_note(self.app.notes, self.recipe.id)
        except NoteStoreError as exc:
            self._status(str(exc))
        self._render()

    def on_resize(self, event) -> None:
        sync_screen_layout(self)
        apply_centered_card_width(self, "#detail-card")
        self._sync_art()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "back":
            self.action_back()
        elif button_id == "method-espresso":
            self.action_method(Method.ESPRESSO.value)
        elif button_id == "method-granules":
            self.action_method(Method.GRANULES.value)
        elif button_id == "practical":
            self.practical_open = not self.practical_open
            self._render()
        elif button_id == "note-toggle":
            self.note_open = not self.note_open
            self._render()
        elif button_id == "note-save":
            self._save_note()

    def action_back(self) -> None:
        self.app.pop_screen()

    def action_method(self, value: str) -> None:
        if self.recipe is None:
            return
        self.method = Method(value)
        self._render()

    def _save_note(self) -> None:
        if self.recipe is None:
            return
        text = self.query_one("#note-input", Input).value
        try:
            save_note(self.app.notes, self.recipe.id, text)
        except NoteStoreError as exc:
            self._status(str(exc))
            return
        self._status("Saved.")

    def _render_not_found(self) -> None:
        self.query_one("#detail-title", Static).update(NOT_FOUND_TEXT)
        for selector in ("#detail-art", "#method-actions", "#detail-body", "#practical-panel"):
            set_hidden(self.query_one(selector), True)
        set_hidden(self.query_one("#practical", Button), True)

    def _render(self) -> None:
        recipe = self.recipe
        if recipe is None:
            return
        meta = recipe_meta_for(recipe.id)
        self.query_one("#detail-title", Static).update(recipe.name)
        self.query_one("#detail-subtitle", Static).update(subtitle(recipe))
        self.query_one("#detail-meta", Static).update(f"⏱ {meta.minutes} min   🔥 {meta.calories} kcal")
        self.query_one("#method-espresso", Button).label = method_button_label(Method.ESPRESSO, self.method)
        self.query_one("#method-granules", Button).label = method_button_label(Method.GRANULES, self.method)
        self._sync_art()

        variant = recipe.variant(self.method)
        ingredients = self.query_one("#ingredients", Static)
        steps = self.query_one("#steps", Static)
        if variant is None:
            ingredients.update(NO_VARIANT_TEXT)
            steps.update("")
        else:
            ingredients.update("\n".join(f"• {item}" for item in variant.ingredients))
            steps.update("\n".join(f"{idx}. {step}" for idx, step in enumerate(variant.steps, start=1)))
        set_hidden(self.query_one("#steps-title", Static), variant is None)

        set_hidden(self.query_one("#practical-panel"), not self.practical_open)
        self.query_one("#practical-text", Static).update("\n".join(self._practical_lines()))
        set_hidden(self.query_one("#note-input", Input), not self.note_open)
        set_hidden(self.query_one("#note-actions"), not self.note_open)

    def _practical_lines(self) -> list[str]:
        recipe = self.recipe
        lines: list[str] = []
        if recipe is None:
            return lines
        if recipe.general_tips:
            lines.append("General tips")
            lines.extend(f"• {tip}" for tip in recipe.general_tips)
        variant = recipe.variant(self.method)
        if variant is not None and variant.tips:
            if lines:
                lines.append("")
            lines.append("Method tip")
            lines.append(variant.tips)
        return lines

    def _sync_art(self) -> None:
        art = self.query_one("#detail-art", Static)
        if self.recipe is None:
            return
        visible = show_detail_art(current_layout_mode(self))
        set_hidden(art, not visible)
        if visible:
            art.update(art_for(self.recipe, "detail"))

    def _status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)
