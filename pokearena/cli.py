"""Command line front end: browse the catalogue and run battles.

  pokearena battle pikachu bulbasaur --seed 7
  pokearena show charizard
  pokearena list --page 3
  pokearena search saur
"""
from __future__ import annotations
import argparse
import json
import math
import random
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from pokearena.battle.engine import BattleEngine
from pokearena.battle.render import render_names, render_page, render_record, render_result
from pokearena.battle.stats import extract_stats
from pokearena.core.errors import MatchupError, PokeArenaError
from pokearena.core.logging import logger
from pokearena.data.local import LocalDumpProvider
from pokearena.data.pokeapi import PokeApiProvider
from pokearena.data.provider import PAGE_SIZE, CatalogueProvider, normalize_name
from pokearena.system.settings import Settings

def validate_matchup(name_a: str, name_b: str) -> tuple[str, str]:
    """Reject empty and identical names before a battle is started."""
    a, b = normalize_name(name_a), normalize_name(name_b)
    if not a or not b:
        raise MatchupError("Pick two creatures to start a battle.")
    if a == b:
        raise MatchupError("A creature cannot battle itself; pick two different creatures.")
    return a, b

def total_pages(count: int, limit: int = PAGE_SIZE) -> int:
    return math.ceil(count / limit) if count > 0 else 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokearena", description="Browse creatures and simulate battles")
    parser.add_argument("--data-dir", help="Read creature JSON dumps from this directory instead of PokeAPI")
    parser.add_argument("--debug", action="store_true", help="Verbose provider/battle logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_battle = sub.add_parser("battle", help="Simulate a battle between two creatures")
    p_battle.add_argument("name_a")
    p_battle.add_argument("name_b")
    p_battle.add_argument("--seed", type=int, help="Seed for a reproducible battle")
    p_battle.add_argument("--json", action="store_true", help="Print the result as JSON")

    p_show = sub.add_parser("show", help="Show one creature's stats")
    p_show.add_argument("name")

    p_list = sub.add_parser("list", help="List creatures page by page")
    p_list.add_argument("--page", type=int, default=1)

    p_search = sub.add_parser("search", help="Find creatures whose name contains TERM")
    p_search.add_argument("term")
    return parser

def make_provider(settings: Settings, data_dir: Optional[str] = None) -> CatalogueProvider:
    directory = data_dir or settings.data.data_dir
    if directory:
        return LocalDumpProvider(directory)
    return PokeApiProvider.from_settings(settings.data)

def _configure_logging(settings: Settings, debug_flag: bool):
    debug = debug_flag or settings.data.debug
    if debug:
        logger.set_level("DEBUG")
    elif settings.data.log_level in {"INFO","DEBUG"}:
        # keep the terminal quiet unless asked
        logger.set_level("WARN")
    else:
        logger.set_level(settings.data.log_level)  # type: ignore[arg-type]

def cmd_battle(args, provider: CatalogueProvider, console: Console) -> int:
    name_a, name_b = validate_matchup(args.name_a, args.name_b)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    result = BattleEngine(provider, rng).battle(name_a, name_b)
    if args.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        render_result(result, console)
    return 0

def cmd_show(args, provider: CatalogueProvider, console: Console) -> int:
    record = provider.get_by_name(args.name)
    render_record(record, extract_stats(record), console)
    return 0

def cmd_list(args, provider: CatalogueProvider, console: Console) -> int:
    page = max(1, args.page)
    listing = provider.get_all(PAGE_SIZE, (page - 1) * PAGE_SIZE)
    render_page(listing, page, total_pages(listing.count), console)
    return 0

def cmd_search(args, provider: CatalogueProvider, console: Console) -> int:
    render_names(provider.search_by_name(args.term), console)
    return 0

COMMANDS = {
    "battle": cmd_battle,
    "show": cmd_show,
    "list": cmd_list,
    "search": cmd_search,
}

def run(argv: Optional[Sequence[str]] = None, *, settings: Optional[Settings] = None,
        provider: Optional[CatalogueProvider] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or Settings.load()
    _configure_logging(settings, args.debug)
    console = console or Console(highlight=False)
    try:
        provider = provider or make_provider(settings, args.data_dir)
        return COMMANDS[args.command](args, provider, console)
    except PokeArenaError as e:
        logger.debug("CommandFailed", command=args.command, error=type(e).__name__)
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1

def main():
    raise SystemExit(run())

if __name__ == "__main__":
    main()
