# File: tests/test_envelope.py
"""
Test worst-case selection across combinations, including the
earliest-wins tie-break.
"""

import pytest

from portal_check.beams import BeamCheckResult
from portal_check.checks.steel import ColumnCheckResult
from portal_check.envelope import select_worst_beam, select_worst_column
from portal_check.results import ComboResult


def _beam(util):
    return BeamCheckResult(sigma=util * 325.0, util=util, M_max=1.0, M_end=0.0, V_react=1.0)


def _col(U, buckling=0.1):
    return ColumnCheckResult(
        U_int=U, P_cr=1e6, buckling_ratio=buckling, safe=(U <= 1.0 and buckling <= 1.0),
        sigma_axial=1.0, N=1.0, M=0.0, slenderness=100.0,
    )


def _combo(name, b1, b2, c1, c2):
    return ComboResult(
        combo_name=name, q_total=1.0, wind_factor=0.0,
        beam1=_beam(b1), beam2=_beam(b2), col1=_col(c1), col2=_col(c2),
    )


def test_picks_maximum():
    results = [
        _combo('A', 0.2, 0.3, 0.1, 0.5),
        _combo('B', 0.6, 0.1, 0.4, 0.2),
        _combo('C', 0.4, 0.2, 0.7, 0.3),
    ]
    assert select_worst_beam(results, 'beam1').combo == 'B'
    assert select_worst_beam(results, 'beam2').combo == 'A'
    assert select_worst_column(results, 'col1').combo == 'C'
    assert select_worst_column(results, 'col2').combo == 'A'


def test_tie_keeps_earliest_combination():
    """Equal utilization: the first combination in order is retained."""
    results = [
        _combo('first', 0.1, 0.5, 0.3, 0.8),
        _combo('second', 0.5, 0.5, 0.8, 0.8),
        _combo('third', 0.5, 0.2, 0.8, 0.1),
    ]
    assert select_worst_beam(results, 'beam1').combo == 'second'
    assert select_worst_beam(results, 'beam2').combo == 'first'
    assert select_worst_column(results, 'col1').combo == 'second'
    assert select_worst_column(results, 'col2').combo == 'first'


def test_all_zero_keeps_first():
    results = [_combo('x', 0.0, 0.0, 0.0, 0.0), _combo('y', 0.0, 0.0, 0.0, 0.0)]
    assert select_worst_beam(results, 'beam1').combo == 'x'
    assert select_worst_column(results, 'col2').combo == 'x'


def test_column_worst_case_carries_buckling_and_safety():
    results = [
        ComboResult('A', 1.0, 0.0, _beam(0.1), _beam(0.1), _col(0.2, buckling=1.5), _col(0.1)),
        ComboResult('B', 1.0, 0.0, _beam(0.1), _beam(0.1), _col(0.1, buckling=0.2), _col(0.1)),
    ]
    worst = select_worst_column(results, 'col1')
    assert worst.combo == 'A'
    assert worst.buckling_ratio == 1.5
    assert not worst.safe


def test_beam_safe_flag_inclusive_limit():
    results = [_combo('A', 1.0, 1.0000001, 0.1, 0.1)]
    assert select_worst_beam(results, 'beam1').safe
    assert not select_worst_beam(results, 'beam2').safe


def test_bad_key_and_empty_input():
    results = [_combo('A', 0.1, 0.1, 0.1, 0.1)]
    with pytest.raises(KeyError):
        select_worst_beam(results, 'col1')
    with pytest.raises(KeyError):
        select_worst_column(results, 'beam1')
    with pytest.raises(ValueError):
        select_worst_beam([], 'beam1')
