# File: tests/test_column_check.py
"""
Test the column P-M interaction and Euler buckling check.
"""

import numpy as np
import pytest

from portal_check.checks.steel import (
    axial_capacity,
    check_column,
    euler_critical_load,
    moment_capacity,
)
from portal_check.section import i_section_properties

PROPS = i_section_properties(200, 8, 150, 12)


def test_euler_critical_load():
    E, I, Le = 210e9, 6.7585e-6, 15.0
    assert np.isclose(euler_critical_load(E, I, Le), np.pi**2 * E * I / Le**2)


def test_euler_rejects_zero_length():
    with pytest.raises(ValueError):
        euler_critical_load(210e9, 1e-6, 0.0)


def test_capacities():
    assert axial_capacity(PROPS, 325.0) == pytest.approx(325.0 * 5200.0)
    assert moment_capacity(PROPS, 325.0) == pytest.approx(325.0 * PROPS.Zx_mm3)


def test_interaction_and_buckling_values():
    """
    N = 100 kN, M = 10 kN·m on the reference section, H = 5 m, K = 1.
    U = N/(fy·A) + |M|·1000/(fy·Zx); Pcr uses the weak axis in m⁴.
    """
    N, M = 100e3, 10e3
    fy, E, H, K = 325.0, 210e9, 5.0, 1.0
    r = check_column(PROPS, N, M, H=H, K=K, fy=fy, E=E)

    U_expected = N / (fy * PROPS.A_mm2) + M * 1000.0 / (fy * PROPS.Zx_mm3)
    Pcr_expected = np.pi**2 * E * PROPS.Iy_mm4 * 1e-12 / (K * H)**2

    assert np.isclose(r.U_int, U_expected)
    assert np.isclose(r.P_cr, Pcr_expected)
    assert np.isclose(r.buckling_ratio, N / Pcr_expected)
    assert np.isclose(r.sigma_axial, N / PROPS.A_mm2)
    assert r.N == N and r.M == M
    assert np.isclose(r.slenderness, K * H * 1000.0 / PROPS.r_min_mm)


def test_negative_moment_uses_magnitude():
    pos = check_column(PROPS, 50e3, 8e3, H=4.0, K=1.0, fy=325.0, E=210e9)
    neg = check_column(PROPS, 50e3, -8e3, H=4.0, K=1.0, fy=325.0, E=210e9)
    assert pos.U_int == neg.U_int


def test_safe_flag_requires_both_ratios():
    # Short stocky column: both ratios small
    ok = check_column(PROPS, 100e3, 0.0, H=2.0, K=1.0, fy=325.0, E=210e9)
    assert ok.safe

    # Slender column: interaction fine, buckling fails
    slender = check_column(PROPS, 100e3, 0.0, H=15.0, K=1.0, fy=325.0, E=210e9)
    assert slender.U_int < 1.0
    assert slender.buckling_ratio > 1.0
    assert not slender.safe

    # Large moment: interaction fails
    bent = check_column(PROPS, 10e3, 200e3, H=2.0, K=1.0, fy=325.0, E=210e9)
    assert bent.U_int > 1.0
    assert not bent.safe


def test_ratio_of_exactly_one_is_safe():
    """The limit is inclusive."""
    Pcr = euler_critical_load(210e9, PROPS.I_min_mm4 * 1e-12, 15.0)
    r = check_column(PROPS, Pcr, 0.0, H=15.0, K=1.0, fy=325.0, E=210e9)
    assert r.buckling_ratio == pytest.approx(1.0)
    assert r.safe
