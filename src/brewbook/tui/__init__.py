from __future__ import annotations

from ..catalog import Catalog
from ..config import EffectiveConfig
from .app import BrewbookApp


def run_tui(cfg: EffectiveConfig, catalog: Catalog) -> int:
    app = BrewbookApp(cfg, catalog)
    app.run()
    return 0


__all__ = ["run_tui", "BrewbookApp"]
