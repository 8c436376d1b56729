"""
FinPulse - Source Package

A small personal expense dashboard guarded by a login screen.

DESIGN PRINCIPLES:
1. All state is in memory and owned by exactly one component
2. Totals change in the same call as the expense list
3. Bad input is absorbed, never half-applied
4. Every mutation is auditable
"""

__version__ = "1.0.0"
__author__ = "FinPulse Team"


class FinPulseError(Exception):
    """Base class for all FinPulse errors."""
    pass
