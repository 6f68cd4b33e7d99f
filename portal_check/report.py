# portal_check/report.py
"""Text and tabular reports of a FrameVerdict."""

from typing import List

import pandas as pd

from .model import MEMBER_LABELS
from .results import BeamWorstCase, ColumnWorstCase, FrameVerdict


def _status(safe: bool) -> str:
    return "SAFE" if safe else "UNSAFE"


def _column_lines(label: str, worst: ColumnWorstCase) -> List[str]:
    return [
        label,
        f"  Worst combination: {worst.combo}",
        f"  P-M interaction U = {worst.util:.3f} (<= 1)",
        f"  Buckling N/Pcr = {worst.buckling_ratio:.3f} (<= 1)",
        f"  Axial stress = {worst.sigma_axial:.3f} MPa",
        f"  Status: {_status(worst.safe)}",
    ]


def _beam_lines(label: str, worst: BeamWorstCase) -> List[str]:
    return [
        label,
        f"  Worst combination: {worst.combo}",
        f"  Bending stress = {worst.sigma:.3f} MPa",
        f"  Utilization = {worst.util:.3f}",
        f"  Status: {_status(worst.safe)}",
    ]


def format_report(verdict: FrameVerdict) -> str:
    """Plain-text results report (all combinations checked)."""
    lines = ["Results (all load combinations checked)", "=" * 40]
    for key, worst in verdict.items():
        label = MEMBER_LABELS[key]
        if isinstance(worst, ColumnWorstCase):
            lines.extend(_column_lines(label, worst))
        else:
            lines.extend(_beam_lines(label, worst))
        lines.append("")

    lines.append("-" * 40)
    if verdict.safe:
        lines.append("Overall: frame is SAFE under all combinations")
    else:
        lines.append("Overall: frame has UNSAFE members")
    return "\n".join(lines)


def verdict_table(verdict: FrameVerdict) -> pd.DataFrame:
    """One row per member with its worst case."""
    rows = []
    for key, worst in verdict.items():
        is_column = isinstance(worst, ColumnWorstCase)
        rows.append({
            'member': key,
            'label': MEMBER_LABELS[key],
            'combo': worst.combo,
            'util': worst.util,
            'buckling_ratio': worst.buckling_ratio if is_column else None,
            'sigma_axial_mpa': worst.sigma_axial if is_column else None,
            'sigma_bending_mpa': None if is_column else worst.sigma,
            'safe': worst.safe,
        })
    return pd.DataFrame(rows)


def combination_table(verdict: FrameVerdict) -> pd.DataFrame:
    """One row per load combination with every member's governing ratios."""
    rows = []
    for r in verdict.combinations:
        rows.append({
            'combo': r.combo_name,
            'q_total_n_m': r.q_total,
            'wind_factor': r.wind_factor,
            'beam1_util': r.beam1.util,
            'beam2_util': r.beam2.util,
            'col1_U_int': r.col1.U_int,
            'col1_buckling_ratio': r.col1.buckling_ratio,
            'col2_U_int': r.col2.U_int,
            'col2_buckling_ratio': r.col2.buckling_ratio,
        })
    return pd.DataFrame(rows)
