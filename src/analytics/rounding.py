"""
Rounding helpers shared by the analytics and pricing modules.
Dashboard figures round halves away from zero, not to the nearest even digit.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with `.5` going away from zero, e.g. `round_half_up(2.5) == 3.0`.

    The value is rounded from its shortest decimal repr, so `round_half_up(1.005, 2) == 1.01`.
    """

    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(round_half_up(value))
