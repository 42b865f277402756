from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DamageResult(BaseModel):
    """Summary of one attack-vs-defense calculation.

    Dumps with camelCase keys (``averageDamage``, ``hitChance``, ``crushed``)
    when ``by_alias=True``.
    """

    model_config = ConfigDict(frozen=True)

    average_damage: float = Field(serialization_alias="averageDamage")
    hit_chance: float = Field(serialization_alias="hitChance")
    crushed: list[tuple[int | float, float]] = Field(default_factory=list)
