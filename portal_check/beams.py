# portal_check/beams.py
"""
Rafter end actions and bending check.

Each rafter carries a uniform load q (N/m) over its length L (m). The
connection at the column head decides how much moment is transferred:

    HINGE  (pin-pin):   M_end = 0          M_max = qL²/8
    MOMENT (fixed-pin): M_end = qL²/12     M_max = 0.10·qL²

M_max for the moment case is a reduced span moment approximating the
fixed-pin condition, not the exact beam-theory value. The vertical
support reaction V = qL/2 is the same for both.
"""

from dataclasses import dataclass
from enum import Enum

from .section import SectionProperties
from .units import nm_to_nmm


class ConnectionType(str, Enum):
    """Rafter-to-column connection."""
    HINGE = 'hinge'
    MOMENT = 'moment'

    @classmethod
    def parse(cls, value) -> 'ConnectionType':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown connection type {value!r}; expected 'hinge' or 'moment'"
            ) from None


@dataclass(frozen=True)
class MemberReactions:
    M_end: float    # Moment transferred to the column head (N·m)
    M_max: float    # Maximum span moment (N·m)
    V_react: float  # Vertical support reaction (N)


@dataclass(frozen=True)
class BeamCheckResult:
    sigma: float    # Bending stress (MPa)
    util: float     # sigma / fy
    M_max: float    # Span moment used (N·m)
    M_end: float    # End moment (N·m)
    V_react: float  # Support reaction (N)


def beam_reactions(conn: ConnectionType, q: float, L: float) -> MemberReactions:
    """
    End moment, span moment and support shear for one rafter.

    Args:
        conn: Connection type at the column end
        q: Total distributed load (N/m)
        L: Rafter length (m)

    Returns:
        MemberReactions (N·m, N·m, N)
    """
    conn = ConnectionType.parse(conn)
    V_react = q * L / 2

    if conn is ConnectionType.MOMENT:
        M_end = q * L**2 / 12
        M_max = 0.10 * q * L**2
    elif conn is ConnectionType.HINGE:
        M_end = 0.0
        M_max = q * L**2 / 8
    else:  # pragma: no cover
        raise ValueError(f"Unhandled connection type {conn!r}")

    return MemberReactions(M_end=M_end, M_max=M_max, V_react=V_react)


def check_beam_bending(
    props: SectionProperties,
    reactions: MemberReactions,
    fy: float,
) -> BeamCheckResult:
    """
    Elastic bending check of a rafter: sigma = M_max / Zx, util = sigma / fy.

    Args:
        props: Rafter section properties (mm)
        reactions: Rafter end actions
        fy: Yield strength (MPa)
    """
    sigma = nm_to_nmm(reactions.M_max) / props.Zx_mm3
    return BeamCheckResult(
        sigma=sigma,
        util=sigma / fy,
        M_max=reactions.M_max,
        M_end=reactions.M_end,
        V_react=reactions.V_react,
    )
