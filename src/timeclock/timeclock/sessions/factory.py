from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from .strategies.base import PairingStrategy
from .strategies.exclusive_strategy import ExclusivePairing
from .strategies.first_later_strategy import FirstLaterPairing


@dataclass
class PairingStrategyFactory:
    """Factory Pattern: pick the pairing rule by its configured name."""

    def for_name(self, name: str | None) -> PairingStrategy:
        key = (name or "exclusive").strip().lower()
        if key == "exclusive":
            return ExclusivePairing()
        if key in {"first-later", "first_later", "legacy"}:
            return FirstLaterPairing()
        raise ValidationError(f"Unknown pairing strategy: {name!r}")
