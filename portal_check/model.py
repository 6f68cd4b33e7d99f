# portal_check/model.py
"""
FRAME INPUT: THE PORTAL FRAME BEING CHECKED
===========================================

A symmetric single-bay portal frame:

                 apex
                 ╱╲
       beam1   ╱    ╲   beam2
             ╱        ╲
            ┃          ┃
      col1  ┃          ┃  col2
            ┃          ┃
           ━┻━━━━━━━━━━┻━
            |<--width-->|

Inputs are held in the units a user types them in (mm, kg/m, kg, MPa,
GPa). The properties below expose the SI values the analysis works with,
so no conversion happens anywhere else.
"""

import math
from dataclasses import dataclass, field
from typing import Dict

import numpy as np

from .beams import ConnectionType
from .config import CONFIG
from .section import ISection, InvalidSectionError, SectionProperties
from .units import gpa_to_pa, kg_to_newton, mm_to_m


class InvalidFrameError(ValueError):
    """Frame input that cannot produce a finite, meaningful check."""


MEMBER_LABELS: Dict[str, str] = {
    'col1': 'Left column',
    'col2': 'Right column',
    'beam1': 'Left rafter',
    'beam2': 'Right rafter',
}


def default_section() -> ISection:
    return ISection(
        h=CONFIG.default_section_h,
        tw=CONFIG.default_section_tw,
        bf=CONFIG.default_section_bf,
        tf=CONFIG.default_section_tf,
    )


@dataclass(frozen=True)
class FrameInput:
    """
    Complete input set for one portal frame check.

    Parameters:
    -----------
    height_mm : float
        Column clear height (mm)
    width_mm : float
        Frame width, column to column (mm)
    dead_load_kg_m, live_load_kg_m : float
        Distributed loads on each rafter (kg per metre)
    wind_load_kg : float
        Wind load per column, applied as an axial add-on (kg)
    fy_mpa : float
        Steel yield strength (MPa)
    e_gpa : float
        Elastic modulus (GPa)
    k_factor : float
        Column effective length factor
    col1, col2, beam1, beam2 : ISection
        Member section geometry (mm)
    beam1_conn, beam2_conn : ConnectionType
        Rafter-to-column connection
    """
    height_mm: float = CONFIG.default_height_mm
    width_mm: float = CONFIG.default_width_mm
    dead_load_kg_m: float = CONFIG.default_dead_kg_m
    live_load_kg_m: float = CONFIG.default_live_kg_m
    wind_load_kg: float = CONFIG.default_wind_kg
    fy_mpa: float = CONFIG.default_fy_mpa
    e_gpa: float = CONFIG.default_e_gpa
    k_factor: float = CONFIG.default_k_factor
    col1: ISection = field(default_factory=default_section)
    col2: ISection = field(default_factory=default_section)
    beam1: ISection = field(default_factory=default_section)
    beam2: ISection = field(default_factory=default_section)
    beam1_conn: ConnectionType = ConnectionType(CONFIG.default_connection)
    beam2_conn: ConnectionType = ConnectionType(CONFIG.default_connection)

    # ------------------------------------------------------------------
    # SI views
    # ------------------------------------------------------------------
    @property
    def height_m(self) -> float:
        return mm_to_m(self.height_mm)

    @property
    def width_m(self) -> float:
        return mm_to_m(self.width_mm)

    @property
    def rafter_length_m(self) -> float:
        # Each rafter spans half the width and rises by the column height.
        return float(np.hypot(self.width_m / 2, self.height_m))

    @property
    def dead_n_m(self) -> float:
        return kg_to_newton(self.dead_load_kg_m)

    @property
    def live_n_m(self) -> float:
        return kg_to_newton(self.live_load_kg_m)

    @property
    def wind_n(self) -> float:
        return kg_to_newton(self.wind_load_kg)

    @property
    def e_pa(self) -> float:
        return gpa_to_pa(self.e_gpa)

    def sections(self) -> Dict[str, ISection]:
        return {'col1': self.col1, 'col2': self.col2, 'beam1': self.beam1, 'beam2': self.beam2}

    def connection(self, beam_key: str) -> ConnectionType:
        return ConnectionType.parse(getattr(self, f'{beam_key}_conn'))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self) -> Dict[str, SectionProperties]:
        """
        Raise InvalidFrameError if the input cannot be checked.

        Returns the section properties of every member on success.
        """
        positive = {
            'height_mm': self.height_mm,
            'width_mm': self.width_mm,
            'fy_mpa': self.fy_mpa,
            'e_gpa': self.e_gpa,
            'k_factor': self.k_factor,
        }
        for name, value in positive.items():
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidFrameError(f"{name} must be positive and finite, got {value}")

        loads = {
            'dead_load_kg_m': self.dead_load_kg_m,
            'live_load_kg_m': self.live_load_kg_m,
            'wind_load_kg': self.wind_load_kg,
        }
        for name, value in loads.items():
            if not math.isfinite(value) or value < 0.0:
                raise InvalidFrameError(f"{name} must be zero or positive, got {value}")

        for key in ('beam1', 'beam2'):
            try:
                self.connection(key)
            except ValueError as e:
                raise InvalidFrameError(f"{MEMBER_LABELS[key]}: {e}") from e

        return self.section_properties()

    def section_properties(self) -> Dict[str, SectionProperties]:
        """Section properties of every member, keyed like MEMBER_LABELS."""
        props = {}
        for key, section in self.sections().items():
            try:
                props[key] = section.properties()
            except InvalidSectionError as e:
                raise InvalidFrameError(f"{MEMBER_LABELS[key]}: {e}") from e
        return props
