# portal_check/analysis.py
"""
Per-combination analysis and the top-level frame check.

Flow: section properties (once) -> one ComboResult per load combination
-> worst case per member -> FrameVerdict.
"""

import logging
import math
from typing import Dict, Optional, Sequence

from .beams import beam_reactions, check_beam_bending
from .checks.steel import check_column
from .combos import LOAD_COMBINATIONS, LoadCombination
from .envelope import select_worst_beam, select_worst_column
from .model import FrameInput, InvalidFrameError
from .results import ComboResult, FrameVerdict
from .section import SectionProperties

logger = logging.getLogger(__name__)


def analyze_combination(
    frame: FrameInput,
    combo: LoadCombination,
    props: Dict[str, SectionProperties],
) -> ComboResult:
    """
    Check all four members under one load combination.

    Wind does not load the rafters; it is added to each column as a lump
    axial force on top of the rafter's support reaction. Column head moment
    is the connected rafter's end moment.

    Args:
        frame: Frame input
        combo: Load combination factors
        props: Section properties keyed 'col1', 'col2', 'beam1', 'beam2'
    """
    L = frame.rafter_length_m
    q_total = combo.dead * frame.dead_n_m + combo.live * frame.live_n_m
    wind_axial = combo.wind * frame.wind_n

    b1 = beam_reactions(frame.connection('beam1'), q_total, L)
    b2 = beam_reactions(frame.connection('beam2'), q_total, L)

    N1 = b1.V_react + wind_axial
    N2 = b2.V_react + wind_axial

    column_args = dict(H=frame.height_m, K=frame.k_factor, fy=frame.fy_mpa, E=frame.e_pa)
    col1 = check_column(props['col1'], N1, b1.M_end, **column_args)
    col2 = check_column(props['col2'], N2, b2.M_end, **column_args)

    result = ComboResult(
        combo_name=combo.name,
        q_total=q_total,
        wind_factor=combo.wind,
        beam1=check_beam_bending(props['beam1'], b1, frame.fy_mpa),
        beam2=check_beam_bending(props['beam2'], b2, frame.fy_mpa),
        col1=col1,
        col2=col2,
    )
    logger.debug(
        "%s: q=%.2f N/m, beam utils %.3f/%.3f, column U_int %.3f/%.3f",
        combo.name, q_total, result.beam1.util, result.beam2.util, col1.U_int, col2.U_int,
    )
    return result


def _check_finite(result: ComboResult) -> None:
    ratios = (
        result.beam1.util, result.beam2.util,
        result.col1.U_int, result.col1.buckling_ratio,
        result.col2.U_int, result.col2.buckling_ratio,
    )
    if not all(math.isfinite(v) for v in ratios):
        raise InvalidFrameError(f"Non-finite utilization under {result.combo_name}: {ratios}")


def run_analysis(
    frame: Optional[FrameInput] = None,
    combinations: Sequence[LoadCombination] = LOAD_COMBINATIONS,
) -> FrameVerdict:
    """
    Check the frame under every load combination and reduce to a verdict.

    Args:
        frame: Frame input (defaults to FrameInput())
        combinations: Load combinations in tie-break order

    Returns:
        FrameVerdict with the worst case of each member

    Raises:
        InvalidFrameError: on invalid geometry, material or loads, or an
            empty combination sequence
    """
    if frame is None:
        frame = FrameInput()
    if not combinations:
        raise InvalidFrameError("At least one load combination is required")
    props = frame.validate()

    results = []
    for combo in combinations:
        result = analyze_combination(frame, combo, props)
        _check_finite(result)
        results.append(result)

    verdict = FrameVerdict(
        col1=select_worst_column(results, 'col1'),
        col2=select_worst_column(results, 'col2'),
        beam1=select_worst_beam(results, 'beam1'),
        beam2=select_worst_beam(results, 'beam2'),
        combinations=tuple(results),
        rafter_length_m=frame.rafter_length_m,
    )
    logger.info("Portal frame check: %s", "SAFE" if verdict.safe else "UNSAFE")
    return verdict
