"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="dicemath",
    help="d6 pool odds: average damage and hit chance for attack vs defense",
    no_args_is_help=True,
)


def _configure(verbose: bool) -> None:
    if verbose:
        from dicemath.logging_setup import setup_logging

        setup_logging(logging.DEBUG)


@app.command()
def calc(
    resistance: int = typer.Option(0, "--resistance", "-r", help="Defense dice (also added as a flat bonus)"),
    bonus: int = typer.Option(0, "--bonus", "-b", help="Base attack bonus"),
    dice: int = typer.Option(1, "--dice", "-d", help="Attack dice"),
    cover: int = typer.Option(0, "--cover", "-c", help="Cover level (not used in the math yet)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    hide_dist: bool = typer.Option(False, "--hide-dist", help="Don't print the damage table"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every pipeline stage"),
) -> None:
    """Average damage and hit chance for one attack."""
    from dicemath.app import CalculatorApp

    _configure(verbose)
    CalculatorApp(config_path=config).run_calculation(
        resistance, bonus, dice, cover, as_json=as_json, hide_distribution=hide_dist,
    )


@app.command()
def dist(
    dice: int = typer.Argument(..., help="Number of d6 to roll"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log cache growth"),
) -> None:
    """Show the sum distribution for a pool of d6."""
    from dicemath.app import CalculatorApp

    _configure(verbose)
    CalculatorApp(config_path=config).show_dice(dice)


if __name__ == "__main__":
    app()
