"""Rich terminal display for calculation results and dice tables."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dicemath.mechanics.damage import calculate_average_damage
from dicemath.mechanics.distribution import Pairs
from dicemath.models.result import DamageResult

console = Console()


class Display:
    def __init__(self, precision: int = 4, show_distribution: bool = True, out: Console | None = None):
        self.console = out if out is not None else console
        self.precision = precision
        self.show_distribution_default = show_distribution

    def _pct(self, value: float) -> str:
        return f"{value * 100:.{max(self.precision - 2, 0)}f}%"

    def _distribution_table(self, dist: Pairs, title: str) -> Table:
        table = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False)
        table.add_column("Sum", justify="right", style="cyan")
        table.add_column("Probability", justify="right")
        table.add_column("", justify="left")
        peak = max((p for _, p in dist), default=0.0)
        bar_w = 30
        for s, p in dist:
            filled = int(round(p / peak * bar_w)) if peak > 0 else 0
            table.add_row(str(s), f"{p:.{self.precision}f}", f"[green]{'█' * filled}[/green]")
        return table

    def show_result(
        self,
        result: DamageResult,
        resistance: int,
        base_attack_bonus: int,
        atk_dice: int,
        show_distribution: bool | None = None,
    ) -> None:
        """Summary panel, then the floored damage table unless hidden."""
        content = Text()
        content.append(f"  {atk_dice}d6 vs {resistance}d6, bonus {base_attack_bonus:+d}\n\n", style="bold yellow")
        content.append("  Average damage: ", style="bold")
        content.append(f"{result.average_damage:.{self.precision}f}\n", style="cyan")
        content.append("  Hit chance:     ", style="bold")
        hit_color = "green" if result.hit_chance >= 0.5 else "red"
        content.append(self._pct(result.hit_chance), style=hit_color)
        self.console.print(Panel(content, title="Attack", border_style="magenta", box=box.ROUNDED))

        if show_distribution is None:
            show_distribution = self.show_distribution_default
        if show_distribution:
            self.console.print(self._distribution_table(result.crushed, "Damage distribution"))

    def show_json(self, result: DamageResult) -> None:
        self.console.print_json(result.model_dump_json(by_alias=True))

    def show_distribution(self, dist: Pairs, title: str) -> None:
        self.console.print(self._distribution_table(dist, title))
        mean = calculate_average_damage(dist)
        self.console.print(f"[bold]Mean:[/bold] {mean:.{self.precision}f}   [bold]Outcomes:[/bold] {len(dist)}")
