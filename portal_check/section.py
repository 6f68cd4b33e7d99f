# portal_check/section.py
"""
Elastic section properties for a doubly-symmetric I (H) section.

Idealisation: a web of height h with one flange of bf x tf on each face,
so the overall depth is h + 2·tf and each flange centroid sits
d = h/2 + tf/2 from the neutral axis.

    ┌──────bf──────┐  ─┬─ tf
    └─────┐  ┌─────┘   │
          │tw│         h
    ┌─────┘  └─────┐   │
    └──────────────┘  ─┴─ tf

All values are in millimetres (mm, mm², mm³, mm⁴).
"""

import math
from dataclasses import dataclass


class InvalidSectionError(ValueError):
    """
    Section dimensions that would give zero, negative or non-finite properties.

    Every dimension must be positive and finite, and each thickness must be
    smaller than both outer dimensions: tw < bf, tw < h, tf < h, tf < bf.
    """


@dataclass(frozen=True)
class SectionProperties:
    A_mm2: float    # Cross-sectional area (mm²)
    Ix_mm4: float   # Second moment about the strong axis (mm⁴)
    Iy_mm4: float   # Second moment about the weak axis (mm⁴)
    Zx_mm3: float   # Elastic section modulus, strong axis (mm³)

    @property
    def I_min_mm4(self) -> float:
        """Governing (smaller) second moment for flexural buckling."""
        return min(self.Ix_mm4, self.Iy_mm4)

    @property
    def r_min_mm(self) -> float:
        """Least radius of gyration (mm)."""
        return math.sqrt(self.I_min_mm4 / self.A_mm2)


def _validate_dimensions(h: float, tw: float, bf: float, tf: float) -> None:
    for name, value in (("h", h), ("tw", tw), ("bf", bf), ("tf", tf)):
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidSectionError(f"Section dimension {name} must be positive and finite, got {value}")
    if tw >= bf:
        raise InvalidSectionError(f"Web thickness tw={tw} must be smaller than flange width bf={bf}")
    if tw >= h:
        raise InvalidSectionError(f"Web thickness tw={tw} must be smaller than web height h={h}")
    if tf >= h:
        raise InvalidSectionError(f"Flange thickness tf={tf} must be smaller than web height h={h}")
    if tf >= bf:
        raise InvalidSectionError(f"Flange thickness tf={tf} must be smaller than flange width bf={bf}")


def i_section_properties(h: float, tw: float, bf: float, tf: float) -> SectionProperties:
    """
    Compute A, Ix, Iy and Zx of an I-section.

    A  = h·tw + 2·bf·tf
    Ix = tw·h³/12 + 2·(bf·tf³/12 + bf·tf·d²),   d = h/2 + tf/2
    Iy = tw³·h/12 + 2·bf³·tf/12
    Zx = Ix / (h/2 + tf)

    Args:
        h: Web height (mm)
        tw: Web thickness (mm)
        bf: Flange width (mm)
        tf: Flange thickness (mm)

    Returns:
        SectionProperties in mm units

    Raises:
        InvalidSectionError: for non-positive or inconsistent dimensions
    """
    _validate_dimensions(h, tw, bf, tf)

    A = h * tw + 2 * bf * tf

    d = h / 2 + tf / 2
    Ix_web = tw * h**3 / 12
    Ix_flange = bf * tf**3 / 12 + bf * tf * d**2
    Ix = Ix_web + 2 * Ix_flange

    Iy_web = tw**3 * h / 12
    Iy_flange = bf**3 * tf / 12
    Iy = Iy_web + 2 * Iy_flange

    y_max = h / 2 + tf
    Zx = Ix / y_max

    return SectionProperties(A_mm2=A, Ix_mm4=Ix, Iy_mm4=Iy, Zx_mm3=Zx)


@dataclass(frozen=True)
class ISection:
    """Geometric input for one member's I-section (mm)."""
    h: float
    tw: float
    bf: float
    tf: float

    def properties(self) -> SectionProperties:
        return i_section_properties(self.h, self.tw, self.bf, self.tf)
