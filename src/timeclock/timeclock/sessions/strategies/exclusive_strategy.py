from __future__ import annotations

from typing import Optional, Sequence

from ...time_entries.model import ClockEvent
from .base import PairingStrategy


class ExclusivePairing(PairingStrategy):
    """Greedy earliest-available: each clock-out closes at most one clock-in."""

    def pair(
        self,
        clock_ins: Sequence[ClockEvent],
        clock_outs: Sequence[ClockEvent],
    ) -> list[Optional[ClockEvent]]:
        matches: list[Optional[ClockEvent]] = []
        cursor = 0
        for clock_in in clock_ins:
            # clock_ins are ascending, so a clock-out skipped here is never later than a following clock-in either
            while cursor < len(clock_outs) and clock_outs[cursor].timestamp <= clock_in.timestamp:
                cursor += 1
            if cursor < len(clock_outs):
                matches.append(clock_outs[cursor])
                cursor += 1
            else:
                matches.append(None)
        return matches
