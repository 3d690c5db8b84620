from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...time_entries.model import ClockEvent


class PairingStrategy(ABC):
    """Strategy Pattern: decide which clock-out closes each clock-in of one partition.

    Both sequences are chronological. The result has one entry per clock-in,
    `None` where the clock-in stays open.
    """

    @abstractmethod
    def pair(
        self,
        clock_ins: Sequence[ClockEvent],
        clock_outs: Sequence[ClockEvent],
    ) -> list[Optional[ClockEvent]]:
        raise NotImplementedError
