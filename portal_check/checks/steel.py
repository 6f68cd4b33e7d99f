# portal_check/checks/steel.py
"""Steel column checks: linear P-M interaction and Euler buckling."""

import numpy as np
from dataclasses import dataclass

from ..section import SectionProperties
from ..units import MM_PER_M, mm4_to_m4, nm_to_nmm
from ..config import CONFIG


@dataclass(frozen=True)
class ColumnCheckResult:
    """Result of checking one column under one load combination."""
    U_int: float           # Interaction utilization N/Nc + |M|/Mc
    P_cr: float            # Euler critical load (N)
    buckling_ratio: float  # N / P_cr
    safe: bool
    sigma_axial: float     # Axial stress (MPa), informational
    N: float               # Applied axial force (N)
    M: float               # Applied moment (N·m)
    slenderness: float     # K·H / r_min, informational


def euler_critical_load(E: float, I: float, Le: float) -> float:
    """
    Euler buckling load of an ideal pin-ended strut.

    Pcr = π²·E·I / Le²

    Args:
        E: Elastic modulus (Pa)
        I: Second moment of area (m⁴)
        Le: Effective length (m)

    Returns:
        Pcr: Critical load (N)
    """
    if Le <= 0.0:
        raise ValueError(f"Effective length must be positive, got {Le}")
    return np.pi**2 * E * I / Le**2


def axial_capacity(props: SectionProperties, fy: float) -> float:
    """Nc = fy·A (N), with fy in MPa and A in mm²."""
    return fy * props.A_mm2


def moment_capacity(props: SectionProperties, fy: float) -> float:
    """Mc = fy·Zx (N·mm), with fy in MPa and Zx in mm³."""
    return fy * props.Zx_mm3


def check_column(
    props: SectionProperties,
    N: float,
    M: float,
    H: float,
    K: float,
    fy: float,
    E: float,
) -> ColumnCheckResult:
    """
    Check a column for combined axial force and moment, and for buckling.

    U_int is the simple linear interaction N/Nc + |M|/Mc. Buckling uses the
    weaker of the two axes.

    Args:
        props: Column section properties (mm)
        N: Axial compression (N)
        M: Moment at the column head (N·m)
        H: Column clear height (m)
        K: Effective length factor
        fy: Yield strength (MPa)
        E: Elastic modulus (Pa)

    Returns:
        ColumnCheckResult
    """
    Nc = axial_capacity(props, fy)
    Mc = moment_capacity(props, fy)
    U_int = N / Nc + abs(nm_to_nmm(M)) / Mc

    Le = K * H
    P_cr = euler_critical_load(E, mm4_to_m4(props.I_min_mm4), Le)
    buckling_ratio = N / P_cr

    limit = CONFIG.utilization_limit
    safe = (U_int <= limit) and (buckling_ratio <= limit)

    return ColumnCheckResult(
        U_int=U_int,
        P_cr=P_cr,
        buckling_ratio=buckling_ratio,
        safe=safe,
        sigma_axial=N / props.A_mm2,
        N=N,
        M=M,
        slenderness=Le * MM_PER_M / props.r_min_mm,
    )
