"""
txconfidence - transaction confirmation status tracking for wallet UIs
"""
from .core.models import (
    ConfidenceSignal,
    ConfidenceType,
    Pinned,
    TransactionRef,
    ViewState,
    WholeWallet,
)
from .core.tracker import ConfidenceTracker
from .core.wallet import ObservableWallet

__version__ = "1.0.0"
__all__ = [
    'ConfidenceTracker',
    'ObservableWallet',
    'ConfidenceSignal',
    'ConfidenceType',
    'TransactionRef',
    'ViewState',
    'WholeWallet',
    'Pinned',
]
