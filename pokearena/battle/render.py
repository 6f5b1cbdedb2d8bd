"""Terminal rendering of creatures and battle results using rich."""
from __future__ import annotations
from typing import Iterable, Optional

from rich.align import Align
from rich.box import ROUNDED
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pokearena.core.types import format_types
from pokearena.data.records import Creature, CreaturePage, RawCreatureRecord
from .models import BattleResult, CreatureStats

def hp_bar(current: int, max_hp: int, width: int = 20) -> str:
    """HP bar as rich markup: green above 50%, yellow above 25%, red below."""
    if max_hp <= 0:
        return "[red]FAINTED[/red]"
    current = max(0, min(current, max_hp))
    percent = current / max_hp
    filled = int(percent * width)
    if current > 0 and filled == 0:
        filled = 1
    if percent > 0.5:
        color = "green"
    elif percent > 0.25:
        color = "yellow"
    else:
        color = "red"
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/{color}]"

def creature_panel(creature: Creature, stats: CreatureStats, hp: Optional[int] = None, *, title: str = "") -> Panel:
    hp = stats.health if hp is None else hp
    lines = [f"[bold bright_white]{escape(creature.display_name)}[/bold bright_white] #{creature.id}"]
    if creature.types:
        lines.append(f"[bright_white][[/bright_white]{format_types(creature.types)}[bright_white]][/bright_white]")
    lines.append(f"HP: {hp}/{stats.health}")
    lines.append(hp_bar(hp, stats.health))
    lines.append(f"ATK {stats.attack}  DEF {stats.defense}  SPD {stats.speed}")
    return Panel(
        "\n".join(lines),
        title=f"[bright_white bold]{title}[/bright_white bold]" if title else None,
        box=ROUNDED,
        width=40,
        padding=(0, 1),
    )

def _log_line_markup(line: str) -> str:
    text = escape(line)
    if line.startswith("--- Round"):
        return f"[bold cyan]{text}[/bold cyan]"
    if line.endswith("is knocked out!") or line.endswith("cannot fight!"):
        return f"[red]{text}[/red]"
    if line.endswith("wins the battle!"):
        return f"[bold green]{text}[/bold green]"
    if "draw" in line:
        return f"[bold yellow]{text}[/bold yellow]"
    return text

def render_result(result: BattleResult, console: Console) -> None:
    left = creature_panel(result.creature_a, result.stats_a, result.final_hp_a, title="CHALLENGER")
    right = creature_panel(result.creature_b, result.stats_b, result.final_hp_b, title="OPPONENT")
    console.print(Align.center(Columns([left, right], equal=True, expand=False, padding=(0, 4))))
    for line in result.log:
        console.print(_log_line_markup(line))
    if result.winner is not None:
        banner = f"[bold green]Winner: {escape(result.winner.display_name)}[/bold green] after {result.turns} full round(s)"
    else:
        banner = f"[bold yellow]Draw[/bold yellow] after {result.turns} full round(s)"
    console.print(Panel(banner, box=ROUNDED, expand=False))

def render_record(record: RawCreatureRecord, stats: CreatureStats, console: Console) -> None:
    console.print(creature_panel(record.to_creature(), stats, title="CREATURE"))
    table = Table(title="Base stats", box=ROUNDED)
    table.add_column("Stat")
    table.add_column("Base", justify="right")
    table.add_column("Effort", justify="right")
    for entry in record.stats:
        table.add_row(entry.name, str(entry.base_stat), str(entry.effort))
    console.print(table)
    if record.sprite_url:
        console.print(f"Sprite: {record.sprite_url}")

def render_page(page: CreaturePage, page_number: int, total_pages: int, console: Console) -> None:
    table = Table(title=f"Creatures - page {page_number}/{max(1, total_pages)} ({page.count} total)", box=ROUNDED)
    table.add_column("Name")
    table.add_column("URL", overflow="fold")
    for name, url in page.results:
        table.add_row(escape(name), escape(url))
    console.print(table)

def render_names(names: Iterable[str], console: Console) -> None:
    names = list(names)
    if not names:
        console.print("[yellow]No matching creatures.[/yellow]")
        return
    for name in names:
        console.print(f"- {escape(name)}")

__all__ = ["hp_bar","creature_panel","render_result","render_record","render_page","render_names"]
