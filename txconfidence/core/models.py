# txconfidence/core/models.py
"""
Data model shared by the tracker, the wallet and the UI sink.

Everything here is an immutable snapshot: the wallet owns the truth and
hands out new instances whenever something changes.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional, Union


class ConfidenceType(Enum):
    """How sure the wallet is that a transaction will stick"""
    UNKNOWN = "unknown"
    PENDING = "pending"
    BUILDING = "building"
    DEAD = "dead"


_TYPES_BY_VALUE = {member.value: member for member in ConfidenceType}


@dataclass(frozen=True)
class ConfidenceSignal:
    """Raw confidence reported by the wallet for one transaction"""
    type: Union[ConfidenceType, str] = ConfidenceType.UNKNOWN
    broadcast_peers: int = 0
    depth: int = 0

    def __post_init__(self):
        # newer upstream types stay as given; classify() shows them as unknown
        if isinstance(self.type, str) and self.type.lower() in _TYPES_BY_VALUE:
            object.__setattr__(self, "type", _TYPES_BY_VALUE[self.type.lower()])
        if self.broadcast_peers < 0:
            raise ValueError(f"Broadcast peer count must not be negative: {self.broadcast_peers}")
        if self.depth < 0:
            raise ValueError(f"Depth in blocks must not be negative: {self.depth}")

    @classmethod
    def unknown(cls) -> "ConfidenceSignal":
        return cls(ConfidenceType.UNKNOWN)

    @classmethod
    def pending(cls, broadcast_peers: int) -> "ConfidenceSignal":
        return cls(ConfidenceType.PENDING, broadcast_peers=broadcast_peers)

    @classmethod
    def building(cls, depth: int) -> "ConfidenceSignal":
        return cls(ConfidenceType.BUILDING, depth=depth)

    @classmethod
    def dead(cls) -> "ConfidenceSignal":
        return cls(ConfidenceType.DEAD)


@dataclass(frozen=True)
class TransactionRef:
    """Snapshot of a wallet transaction as seen by observers"""
    hash: str
    update_time: float = 0.0
    confidence: ConfidenceSignal = ConfidenceSignal()

    def to_dict(self) -> Dict:
        """Convert transaction to dictionary"""
        data = asdict(self)
        confidence_type = self.confidence.type
        data["confidence"]["type"] = getattr(confidence_type, "value", confidence_type)
        return data


# =========================================================================
# Tracker modes
# =========================================================================

class TrackerMode:
    """Base for the two tracking modes; chosen once per tracker."""


@dataclass(frozen=True)
class WholeWallet(TrackerMode):
    """Follow whichever transaction touched the wallet most recently"""


@dataclass(frozen=True)
class Pinned(TrackerMode):
    """Follow one transaction only"""
    transaction: TransactionRef

    @property
    def hash(self) -> str:
        return self.transaction.hash


# =========================================================================
# View state
# =========================================================================

@dataclass(frozen=True)
class ViewState:
    """Everything the UI needs to draw the confirmation widgets"""
    balance_text: Optional[str] = ""
    status_text: str = ""
    progress: float = 0.0
    visible: bool = False
    indicator_size: float = 50.0

    def __post_init__(self):
        if not -1.0 <= self.progress <= 1.0:
            raise ValueError(f"Progress out of range [-1, 1]: {self.progress}")
        if not self.visible and (self.status_text or self.progress != 0):
            raise ValueError("Hidden view state must have empty status and zero progress")

    @property
    def indeterminate(self) -> bool:
        return self.progress < 0

    def to_dict(self) -> Dict:
        return asdict(self)


# =========================================================================
# Wallet events
# =========================================================================

class WalletEvent:
    """Base for everything a wallet can tell its observers."""


@dataclass(frozen=True)
class CoinsReceived(WalletEvent):
    transaction: TransactionRef
    previous_balance: int
    new_balance: int


@dataclass(frozen=True)
class CoinsSent(WalletEvent):
    transaction: TransactionRef
    previous_balance: int
    new_balance: int


@dataclass(frozen=True)
class ConfidenceChanged(WalletEvent):
    transaction: TransactionRef


@dataclass(frozen=True)
class Reorganized(WalletEvent):
    pass


@dataclass(frozen=True)
class WalletChanged(WalletEvent):
    pass
