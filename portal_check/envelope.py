# portal_check/envelope.py
"""
Worst-case selection across load combinations.

For each member the combination with the largest governing utilization is
kept: bending utilization for rafters, interaction utilization for
columns. The comparison is strict, so on equal utilization the earliest
combination in table order wins.
"""

from typing import Optional, Sequence

from .config import CONFIG
from .results import BeamWorstCase, ColumnWorstCase, ComboResult

BEAM_KEYS = ('beam1', 'beam2')
COLUMN_KEYS = ('col1', 'col2')


def select_worst_beam(results: Sequence[ComboResult], key: str) -> BeamWorstCase:
    """Worst combination for rafter `key` ('beam1' or 'beam2')."""
    if key not in BEAM_KEYS:
        raise KeyError(f"Not a rafter key: {key!r}")
    if not results:
        raise ValueError("No combination results to select from")

    worst: Optional[BeamWorstCase] = None
    for r in results:
        beam = getattr(r, key)
        if worst is None or beam.util > worst.util:
            worst = BeamWorstCase(
                combo=r.combo_name,
                util=beam.util,
                sigma=beam.sigma,
                M_max=beam.M_max,
                safe=beam.util <= CONFIG.utilization_limit,
            )
    return worst


def select_worst_column(results: Sequence[ComboResult], key: str) -> ColumnWorstCase:
    """Worst combination for column `key` ('col1' or 'col2'), ranked by U_int."""
    if key not in COLUMN_KEYS:
        raise KeyError(f"Not a column key: {key!r}")
    if not results:
        raise ValueError("No combination results to select from")

    worst: Optional[ColumnWorstCase] = None
    for r in results:
        col = getattr(r, key)
        if worst is None or col.U_int > worst.util:
            worst = ColumnWorstCase(
                combo=r.combo_name,
                util=col.U_int,
                buckling_ratio=col.buckling_ratio,
                P_cr=col.P_cr,
                sigma_axial=col.sigma_axial,
                N=col.N,
                M=col.M,
                slenderness=col.slenderness,
                safe=col.safe,
            )
    return worst
