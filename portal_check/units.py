# portal_check/units.py
"""
Unit conversions used at the boundary between user units and SI.

Convention inside the package:
    - forces in newtons (N), moments in N·m
    - lengths in metres (m)
    - section geometry in millimetres, always named with a _mm / _mm2 /
      _mm3 / _mm4 suffix
    - stresses and strengths in MPa (= N/mm²)
"""

GRAVITY = 9.81  # m/s², kg-force -> N

MM_PER_M = 1000.0


def kg_to_newton(mass_kg: float) -> float:
    """Convert a kilogram-force value (kg or kg/m) to newtons (N or N/m)."""
    return mass_kg * GRAVITY


def mm_to_m(length_mm: float) -> float:
    return length_mm / MM_PER_M


def mm4_to_m4(inertia_mm4: float) -> float:
    return inertia_mm4 * 1e-12


def gpa_to_pa(modulus_gpa: float) -> float:
    return modulus_gpa * 1e9


def nm_to_nmm(moment_nm: float) -> float:
    """N·m -> N·mm, used when comparing moments against fy·Zx."""
    return moment_nm * MM_PER_M
