from __future__ import annotations

from typing import Optional, Sequence

from ...time_entries.model import ClockEvent
from .base import PairingStrategy


class FirstLaterPairing(PairingStrategy):
    """Legacy rule: first clock-out later than the clock-in, shared between clock-ins.

    Two clock-ins before the same clock-out both close on it, so their hours
    overlap. Kept for reports that must match historical figures.
    """

    def pair(
        self,
        clock_ins: Sequence[ClockEvent],
        clock_outs: Sequence[ClockEvent],
    ) -> list[Optional[ClockEvent]]:
        return [
            next((out for out in clock_outs if out.timestamp > clock_in.timestamp), None)
            for clock_in in clock_ins
        ]
