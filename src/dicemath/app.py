"""Application bootstrap — reads config.toml and wires the engine to the display."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dicemath.models.result import DamageResult

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def _load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config.toml from project root."""
    import tomllib

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


class CalculatorApp:
    """Holds one dice cache and one display, configured from config.toml."""

    def __init__(self, config_path: Path | None = None, config: dict[str, Any] | None = None):
        self.config = config if config is not None else _load_config(config_path)

        # Lazy-initialized components
        self._cache = None
        self._display = None

    @property
    def cache(self):
        if self._cache is None:
            from dicemath.mechanics.dice_cache import DEFAULT_MAX_DICE, DEFAULT_WARM_DICE, DiceSumCache, default_cache
            from dicemath.mechanics.distribution import clamp_int

            engine_cfg = self.config.get("engine", {})
            warm = engine_cfg.get("warm_dice", DEFAULT_WARM_DICE)
            ceiling = clamp_int(engine_cfg.get("max_dice", DEFAULT_MAX_DICE), 1, DEFAULT_MAX_DICE)
            if ceiling == default_cache.max_dice:
                # Same ceiling as the import-time table: share it.
                default_cache.warm(warm)
                self._cache = default_cache
            else:
                logger.debug("Building dice cache: warm_dice=%s max_dice=%s", warm, ceiling)
                self._cache = DiceSumCache(warm_dice=warm, max_dice=ceiling)
        return self._cache

    @property
    def display(self):
        if self._display is None:
            from dicemath.cli.display import Display

            display_cfg = self.config.get("display", {})
            self._display = Display(
                precision=display_cfg.get("precision", 4),
                show_distribution=display_cfg.get("show_distribution", True),
            )
        return self._display

    def calculate(self, resistance: int, base_attack_bonus: int, atk_dice: int, cover: Any = None) -> DamageResult:
        from dicemath.mechanics.damage import full_calculation

        return full_calculation(resistance, base_attack_bonus, atk_dice, cover, cache=self.cache)

    def run_calculation(
        self,
        resistance: int,
        base_attack_bonus: int,
        atk_dice: int,
        cover: Any = None,
        as_json: bool = False,
        hide_distribution: bool = False,
    ) -> DamageResult:
        result = self.calculate(resistance, base_attack_bonus, atk_dice, cover)
        if as_json:
            self.display.show_json(result)
        else:
            self.display.show_result(
                result,
                resistance=resistance,
                base_attack_bonus=base_attack_bonus,
                atk_dice=atk_dice,
                show_distribution=False if hide_distribution else None,
            )
        return result

    def show_dice(self, dice: int) -> None:
        dist = self.cache.prop_n_dice(dice)
        self.display.show_distribution(dist, title=f"{dice}d6")
