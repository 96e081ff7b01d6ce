# txconfidence/core/wallet.py
"""
Observable Wallet

A small in-memory wallet that keeps a balance and a set of transaction
snapshots and tells its subscribers about every change. It satisfies the
wallet interface the ConfidenceTracker expects and backs the demo and tests.
"""

import threading
import time
from typing import Callable, Dict, List, Optional, Set

from txconfidence.core.models import (
    CoinsReceived,
    CoinsSent,
    ConfidenceChanged,
    ConfidenceSignal,
    Reorganized,
    TransactionRef,
    WalletChanged,
    WalletEvent,
)
from txconfidence.utils.console import print_debug, print_warn


WalletEventHandler = Callable[[WalletEvent], None]


class ObservableWallet:
    """
    In-memory wallet that:
    1. Tracks a balance in base units
    2. Keeps the latest snapshot of every transaction by hash
    3. Delivers events to subscribers serially, in subscription order
    """

    def __init__(self, balance: int = 0):
        if balance < 0:
            raise ValueError(f"Balance must not be negative: {balance}")
        self._balance = balance
        self._transactions: Dict[str, TransactionRef] = {}
        self._handlers: List[WalletEventHandler] = []
        self.state_lock = threading.RLock()

    # =========================================================================
    # Queries
    # =========================================================================

    def balance(self) -> int:
        with self.state_lock:
            return self._balance

    def transactions(self) -> Set[TransactionRef]:
        with self.state_lock:
            return set(self._transactions.values())

    def transaction(self, tx_hash: str) -> Optional[TransactionRef]:
        with self.state_lock:
            return self._transactions.get(tx_hash)

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, handler: WalletEventHandler) -> None:
        """Register a handler; registering the same handler twice is a no-op"""
        with self.state_lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def unsubscribe(self, handler: WalletEventHandler) -> bool:
        """Remove a handler; returns whether it was registered"""
        with self.state_lock:
            if handler in self._handlers:
                self._handlers.remove(handler)
                return True
            return False

    @property
    def subscriber_count(self) -> int:
        with self.state_lock:
            return len(self._handlers)

    def _emit(self, event: WalletEvent) -> None:
        with self.state_lock:
            handlers = list(self._handlers)
        print_debug(f"Wallet event {type(event).__name__} -> {len(handlers)} handler(s)")
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                print_warn(f"⚠️  Wallet event handler error: {e}")

    # =========================================================================
    # Mutations
    # =========================================================================

    def _store(self, tx: TransactionRef) -> None:
        self._transactions[tx.hash] = tx

    def receive(self, tx: TransactionRef, amount: int) -> CoinsReceived:
        """Credit ``amount`` base units carried by ``tx``"""
        if amount < 0:
            raise ValueError(f"Received amount must not be negative: {amount}")
        with self.state_lock:
            previous = self._balance
            self._balance = previous + amount
            self._store(tx)
            event = CoinsReceived(tx, previous, self._balance)
        self._emit(event)
        return event

    def send(self, tx: TransactionRef, amount: int) -> CoinsSent:
        """Debit ``amount`` base units spent by ``tx``"""
        if amount < 0:
            raise ValueError(f"Sent amount must not be negative: {amount}")
        with self.state_lock:
            previous = self._balance
            if amount > previous:
                raise ValueError(f"Insufficient balance: {previous} < {amount}")
            self._balance = previous - amount
            self._store(tx)
            event = CoinsSent(tx, previous, self._balance)
        self._emit(event)
        return event

    def update_confidence(self, tx_hash: str, signal: ConfidenceSignal,
                          update_time: Optional[float] = None) -> ConfidenceChanged:
        """Replace the confidence of a known transaction"""
        with self.state_lock:
            current = self._transactions.get(tx_hash)
            if current is None:
                raise KeyError(f"Unknown transaction: {tx_hash}")
            updated = TransactionRef(
                hash=tx_hash,
                update_time=time.time() if update_time is None else update_time,
                confidence=signal,
            )
            self._store(updated)
            event = ConfidenceChanged(updated)
        self._emit(event)
        return event

    def reorganize(self) -> Reorganized:
        event = Reorganized()
        self._emit(event)
        return event

    def notify_changed(self) -> WalletChanged:
        event = WalletChanged()
        self._emit(event)
        return event
