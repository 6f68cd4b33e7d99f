# portal_check/checks - Member design checks
"""Steel member checks for the portal frame columns."""

from .steel import (
    ColumnCheckResult,
    euler_critical_load,
    axial_capacity,
    moment_capacity,
    check_column,
)

__all__ = [
    'ColumnCheckResult',
    'euler_critical_load',
    'axial_capacity',
    'moment_capacity',
    'check_column',
]
