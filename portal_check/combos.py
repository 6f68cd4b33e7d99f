# portal_check/combos.py
"""Factored load combinations (dead, live, wind)."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LoadCombination:
    name: str
    dead: float   # Dead-load factor
    live: float   # Live-load factor
    wind: float   # Wind-load factor


# Order matters: worst-case selection keeps the earliest entry on ties.
LOAD_COMBINATIONS: Tuple[LoadCombination, ...] = (
    LoadCombination('1.4DL', dead=1.4, live=0.0, wind=0.0),
    LoadCombination('1.2DL+1.6LL', dead=1.2, live=1.6, wind=0.0),
    LoadCombination('1.2DL+1.6LL+0.5WL', dead=1.2, live=1.6, wind=0.5),
    LoadCombination('1.0DL+1.0LL+1.0WL', dead=1.0, live=1.0, wind=1.0),
)


def get_combination(name: str) -> LoadCombination:
    """Look up a combination of the fixed table by name."""
    for combo in LOAD_COMBINATIONS:
        if combo.name == name:
            return combo
    raise KeyError(f"Unknown load combination: {name!r}")
