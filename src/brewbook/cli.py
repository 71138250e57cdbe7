from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable

from .catalog import load_catalog
from .config import EffectiveConfig, config_to_toml, resolve_config
from .display import format_recipe, format_summary
from .domain import Method, Temperature
from .errors import (
    BrewbookError,
    CatalogError,
    ConfigError,
    NoteStoreError,
    RecipeNotFoundError,
)
from .filtering import FilterController
from .notes import NoteStore, load_note, save_note


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "list": _cmd_list,
        "show": _cmd_show,
        "note": _cmd_note,
        "config": _cmd_config,
    }

    if args.tui or not args.command:
        handler = _cmd_tui
    else:
        handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except BrewbookError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _common_options(suppress: bool = False) -> argparse.ArgumentParser:
    # Subcommand copies leave unset options alone so values given before
    # the subcommand survive.
    extra = {"default": argparse.SUPPRESS} if suppress else {}
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--catalog", dest="catalog_path", **extra)
    common.add_argument("--notes", dest="notes_path", **extra)
    common.add_argument(
        "--default-method", dest="default_method", choices=[m.value for m in Method], **extra
    )
    common.add_argument("--tui-header-icon", **extra)
    common.add_argument("--tui-layout", **extra)
    common.add_argument("--tui-density", **extra)
    common.add_argument("-v", "--verbose", action="store_true", **extra)
    return common


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brewbook", parents=[_common_options()])
    common = _common_options(suppress=True)
    parser.add_argument("--tui", action="store_true", help="Launch interactive TUI")
    sub = parser.add_subparsers(dest="command")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--temp", choices=[t.value for t in Temperature])
    listing.add_argument("--json", action="store_true")

    show = sub.add_parser("show", parents=[common])
    show.add_argument("recipe_id")
    show.add_argument("--method", choices=[m.value for m in Method])

    note = sub.add_parser("note", parents=[common])
    note.add_argument("recipe_id")
    note.add_argument("--set", dest="text")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_list(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    controller = FilterController(load_catalog(cfg.catalog_path))
    state = controller.set_filter(Temperature(args.temp) if args.temp else None)
    if args.json:
        rows = [
            {
                "id": recipe.id,
                "name": recipe.name,
                "temperature": recipe.temperature.value,
                "methods": [method.value for method in recipe.variants],
            }
            for recipe in state.visible_recipes
        ]
        print(json.dumps(rows, indent=2, ensure_ascii=False))
    else:
        for recipe in state.visible_recipes:
            print(format_summary(recipe))
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg.catalog_path)
    recipe = catalog.find_by_id(args.recipe_id)
    method = Method(args.method) if args.method else cfg.default_method
    note = load_note(NoteStore(cfg.notes_path), recipe.id)
    for line in format_recipe(recipe, method, note=note):
        print(line)
    return 0


def _cmd_note(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    recipe = load_catalog(cfg.catalog_path).find_by_id(args.recipe_id)
    store = NoteStore(cfg.notes_path)
    if args.text is None:
        print(load_note(store, recipe.id))
        return 0
    save_note(store, recipe.id, args.text)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    cfg = _resolve_cfg(args)
    return run_tui(cfg, load_catalog(cfg.catalog_path))


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _exit_code(exc: BrewbookError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, RecipeNotFoundError):
        return 3
    if isinstance(exc, CatalogError):
        return 4
    if isinstance(exc, NoteStoreError):
        return 5
    return 1
