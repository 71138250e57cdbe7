from __future__ import annotations

from ..catalog import Catalog
from ..config import EffectiveConfig
from ..filtering import FilterController
from ..notes import NoteStore
from .common import apply_theme, sync_layout_classes
from .layout import normalize_density, resolve_layout_mode
from .screens.recipes import RecipeListScreen
from .textual import App
from .theme import APP_CSS


class BrewbookApp(App):
    TITLE = "brewbook"
    CSS = APP_CSS
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, cfg: EffectiveConfig, catalog: Catalog) -> None:
        super().__init__(ansi_color=True)
        self.cfg = cfg
        self.catalog = catalog
        self.filters = FilterController(catalog)
        self.notes = NoteStore(cfg.notes_path)
        self.tui_layout_mode = "normal"
        self.tui_density = normalize_density(cfg.tui.density)

    def on_mount(self) -> None:
        apply_theme(self)
        self._refresh_layout_mode()
        self.push_screen(RecipeListScreen())

    def on_resize(self, event) -> None:
        self._refresh_layout_mode()

    def _refresh_layout_mode(self) -> None:
        size = getattr(self, "size", None)
        width = int(getattr(size, "width", 0) or 0)
        height = int(getattr(size, "height", 0) or 0)
        self.tui_layout_mode = resolve_layout_mode(width, height, self.cfg.tui.layout)
        for screen in tuple(getattr(self, "screen_stack", ())):
            sync_layout_classes(screen, self.tui_layout_mode, self.tui_density)
