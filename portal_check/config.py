# portal_check/config.py
"""
Check configuration and input defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class CheckConfig:
    """Global configuration for the portal frame check."""

    # Metadata
    app_name: str = "PortalCheck"
    version: str = "0.1.0"

    # Governing ratio limit (inclusive)
    utilization_limit: float = 1.0

    # Geometry defaults (mm)
    default_height_mm: float = 15000.0
    default_width_mm: float = 50000.0

    # Loads: dead/live as kg per metre of rafter, wind as kg per column
    default_dead_kg_m: float = 10.0
    default_live_kg_m: float = 4.0
    default_wind_kg: float = 9600.0

    # Material defaults (steel)
    default_fy_mpa: float = 325.0
    default_e_gpa: float = 210.0
    default_k_factor: float = 1.0

    # Default I-section for every member (mm)
    default_section_h: float = 200.0
    default_section_tw: float = 8.0
    default_section_bf: float = 150.0
    default_section_tf: float = 12.0

    default_connection: str = "hinge"

    # Accepted ranges for the HTTP/CLI boundary
    height_range: Tuple[float, float] = (1000.0, 60000.0)
    width_range: Tuple[float, float] = (1000.0, 200000.0)
    k_factor_range: Tuple[float, float] = (0.5, 2.5)

    # Browser origins allowed to call the HTTP API (none by default)
    cors_origins: Tuple[str, ...] = ()


# Global config instance
CONFIG = CheckConfig()
