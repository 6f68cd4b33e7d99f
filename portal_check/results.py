# portal_check/results.py
"""Result containers passed from the analysis to reporting and drawing."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, Tuple

from .beams import BeamCheckResult
from .checks.steel import ColumnCheckResult


@dataclass(frozen=True)
class ComboResult:
    """Checks of all four members under one load combination."""
    combo_name: str
    q_total: float      # Distributed load on each rafter (N/m)
    wind_factor: float
    beam1: BeamCheckResult
    beam2: BeamCheckResult
    col1: ColumnCheckResult
    col2: ColumnCheckResult


@dataclass(frozen=True)
class BeamWorstCase:
    combo: str
    util: float
    sigma: float        # MPa
    M_max: float        # N·m
    safe: bool


@dataclass(frozen=True)
class ColumnWorstCase:
    combo: str
    util: float         # Interaction utilization U_int
    buckling_ratio: float
    P_cr: float         # N
    sigma_axial: float  # MPa
    N: float            # N
    M: float            # N·m
    slenderness: float
    safe: bool


@dataclass(frozen=True)
class FrameVerdict:
    """Worst case of every member plus the frame-wide verdict."""
    col1: ColumnWorstCase
    col2: ColumnWorstCase
    beam1: BeamWorstCase
    beam2: BeamWorstCase
    combinations: Tuple[ComboResult, ...]
    rafter_length_m: float

    @property
    def safe(self) -> bool:
        return all(worst.safe for _, worst in self.items())

    def items(self) -> Iterator[Tuple[str, Any]]:
        for key in ('col1', 'col2', 'beam1', 'beam2'):
            yield key, getattr(self, key)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of the verdict (JSON-serialisable)."""
        out = {key: asdict(worst) for key, worst in self.items()}
        out['rafter_length_m'] = self.rafter_length_m
        out['safe'] = self.safe
        return out
