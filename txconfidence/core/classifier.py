# txconfidence/core/classifier.py
"""
Maps a raw confidence signal to what the confirmation widgets show.
"""

from dataclasses import dataclass
from typing import Optional

from txconfidence import config
from txconfidence.core.models import ConfidenceSignal, ConfidenceType


@dataclass(frozen=True)
class Classification:
    """Status text, progress and indicator size for one signal.

    ``progress`` is None when the previous progress value must be kept.
    """
    status_text: str
    progress: Optional[float]
    indicator_size: float


def building_progress(depth: int) -> float:
    """Fraction of the confirmation target reached, capped at 1."""
    return min(1.0, depth / float(config.confirmation_target()))


def classify(signal: ConfidenceSignal) -> Classification:
    size = config.indicator_size()
    confidence_type = signal.type

    if confidence_type == ConfidenceType.PENDING:
        return Classification(
            f"Seen by {signal.broadcast_peers} peer(s) / 0 confirmations",
            -1.0,
            config.pending_indicator_size(),
        )
    if confidence_type == ConfidenceType.BUILDING:
        return Classification(
            f"Confirmed in {signal.depth} block(s)",
            building_progress(signal.depth),
            size,
        )
    if confidence_type == ConfidenceType.DEAD:
        # progress is left where it was
        return Classification("Transaction is invalid.", None, size)

    # UNKNOWN and anything newer than this module knows about
    return Classification("", 0.0, size)
