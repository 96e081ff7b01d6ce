# txconfidence/core/tracker.py
"""
Confidence Tracker

Watches a wallet and keeps the confirmation widgets up to date, either for
the most recently updated transaction (WholeWallet) or for one transaction
(Pinned). The wallet is borrowed: the tracker subscribes on construction and
lets go of it again in destroy().
"""

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional

from txconfidence import config
from txconfidence.core.balance import project
from txconfidence.core.classifier import classify
from txconfidence.core.models import (
    CoinsReceived,
    CoinsSent,
    ConfidenceChanged,
    ConfidenceSignal,
    Pinned,
    Reorganized,
    TrackerMode,
    TransactionRef,
    ViewState,
    WalletChanged,
    WalletEvent,
    WholeWallet,
)
from txconfidence.core.publisher import ViewStatePublisher, ViewStateSink
from txconfidence.core.selector import select_latest
from txconfidence.utils.console import print_debug, print_error, print_warn


class TrackerState(Enum):
    """Subscription state of a tracker"""
    DETACHED = "detached"
    ATTACHED = "attached"


@dataclass(frozen=True)
class Diagnostic:
    """A fault caught at the event handler boundary"""
    event: Optional[WalletEvent]
    error: str
    timestamp: float


class ConfidenceTracker:
    """
    Derives a ViewState from wallet events and pushes it to ``sink``.

    Parameters:
        wallet: object with balance(), transactions(), subscribe(handler)
            and unsubscribe(handler)
        mode: WholeWallet() or Pinned(transaction); defaults to WholeWallet
        sink: callable receiving each new ViewState
        show_balance: publish balance text; when False balance_text is None
    """

    def __init__(self, wallet, mode: Optional[TrackerMode], sink: ViewStateSink,
                 show_balance: bool = True):
        self.mode = mode if mode is not None else WholeWallet()
        if not isinstance(self.mode, (WholeWallet, Pinned)):
            raise ValueError(f"Unsupported tracker mode: {self.mode!r}")
        self.wallet = wallet
        self.state = TrackerState.DETACHED
        self.diagnostics: Deque[Diagnostic] = deque(maxlen=config.diagnostic_cache_size())
        self._publisher = ViewStatePublisher(sink, show_balance=show_balance)
        self._attach()

    # =========================================================================
    # Subscription
    # =========================================================================

    @property
    def is_attached(self) -> bool:
        return self.state == TrackerState.ATTACHED

    @property
    def view_state(self) -> ViewState:
        return self._publisher.snapshot()

    def _attach(self) -> None:
        self.wallet.subscribe(self.on_wallet_event)
        self.state = TrackerState.ATTACHED
        print_debug(f"ConfidenceTracker attached ({self._mode_label()})")
        try:
            self._catch_up()
        except Exception:
            self.destroy()
            raise

    def destroy(self) -> None:
        """Unsubscribe and publish the neutral state. Safe to call repeatedly."""
        if self.state != TrackerState.ATTACHED:
            return
        self.state = TrackerState.DETACHED
        was_subscribed = self.wallet.unsubscribe(self.on_wallet_event)
        print_debug(f"ConfidenceTracker.destroy was_subscribed = {was_subscribed}")
        self.wallet = None
        self._publisher.reset()

    def _catch_up(self) -> None:
        balance = self.wallet.balance()
        if isinstance(self.mode, Pinned):
            self._publisher.apply_balance(project(balance))
            self._update_confidence(self._pinned_transaction())
        else:
            self._update_balance(balance)
        self._publisher.publish()

    # =========================================================================
    # Event handling
    # =========================================================================

    def on_wallet_event(self, event: WalletEvent) -> None:
        """Single entry point for everything the wallet reports."""
        if self.state != TrackerState.ATTACHED:
            return
        try:
            if self._dispatch(event):
                self._publisher.publish()
        except Exception as e:
            self._record_fault(event, e)

    def _dispatch(self, event: WalletEvent) -> bool:
        """Apply one event; returns True when the view state may have changed."""
        if isinstance(event, (CoinsReceived, CoinsSent)):
            if isinstance(self.mode, Pinned):
                if event.transaction.hash != self.mode.hash:
                    return False
                self._publisher.apply_balance(project(event.new_balance))
                return True
            self._update_balance(event.new_balance)
            return True

        if isinstance(event, ConfidenceChanged):
            if isinstance(self.mode, Pinned):
                if event.transaction.hash != self.mode.hash:
                    return False
                self._update_confidence(self._pinned_transaction())
                return True
            self._update_latest()
            return True

        if isinstance(event, (Reorganized, WalletChanged)):
            return False

        print_warn(f"⚠️  Ignoring unknown wallet event: {event!r}")
        return False

    def _update_balance(self, balance: int) -> None:
        projection = project(balance)
        self._publisher.apply_balance(projection)
        if projection.positive:
            self._publisher.set_indeterminate()
        self._update_latest()

    def _update_latest(self) -> None:
        latest = select_latest(self.wallet.transactions())
        if latest is not None:
            self._update_confidence(latest)

    def _update_confidence(self, tx: TransactionRef) -> None:
        signal = tx.confidence
        print_debug(f"updateConfidence: tx {tx.hash} type={getattr(signal.type, 'value', signal.type)} "
                    f"peers={signal.broadcast_peers} depth={signal.depth}")
        self._publisher.apply_classification(classify(signal))

    def _pinned_transaction(self) -> TransactionRef:
        """Current wallet copy of the pinned transaction, or the pinned snapshot."""
        pinned = self.mode.transaction
        for tx in self.wallet.transactions():
            if tx.hash == pinned.hash:
                return tx
        return pinned

    # =========================================================================
    # Faults
    # =========================================================================

    def _record_fault(self, event: Optional[WalletEvent], error: Exception) -> None:
        self.diagnostics.append(Diagnostic(event, f"{type(error).__name__}: {error}", time.time()))
        print_error(f"❌ Confidence tracker error on {type(event).__name__}: {error}")
        self._publisher.apply_classification(classify(ConfidenceSignal.unknown()))
        try:
            self._publisher.publish()
        except Exception as e:
            self.diagnostics.append(Diagnostic(event, f"{type(e).__name__}: {e}", time.time()))
            print_error(f"❌ Could not publish fallback state: {e}")

    def _mode_label(self) -> str:
        if isinstance(self.mode, Pinned):
            return f"pinned {self.mode.hash}"
        return "whole wallet"

    def __repr__(self) -> str:
        return f"ConfidenceTracker({self._mode_label()}, {self.state.value})"
