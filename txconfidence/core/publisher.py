# txconfidence/core/publisher.py
"""
View State Publisher

Collects classifier and balance output and hands the UI one complete
ViewState at a time, so the consumer never sees half an update.
"""

from typing import Callable, Optional

from txconfidence import config
from txconfidence.core.balance import BalanceProjection
from txconfidence.core.classifier import Classification
from txconfidence.core.models import ViewState


ViewStateSink = Callable[[ViewState], None]


def neutral_view_state(show_balance: bool = True) -> ViewState:
    """State shown before any data arrives and after teardown"""
    return ViewState(
        balance_text="" if show_balance else None,
        status_text="",
        progress=0.0,
        visible=False,
        indicator_size=config.indicator_size(),
    )


class ViewStatePublisher:
    """Accumulates partial results and pushes whole ViewStates to a sink."""

    def __init__(self, sink: ViewStateSink, show_balance: bool = True):
        self.sink = sink
        self.show_balance = show_balance
        self.balance_text: Optional[str] = "" if show_balance else None
        self.status_text = ""
        self.progress = 0.0
        self.visible = False
        self.indicator_size = config.indicator_size()
        self.last_published: Optional[ViewState] = None

    def apply_balance(self, projection: BalanceProjection) -> None:
        if self.show_balance:
            self.balance_text = projection.text
        if projection.positive:
            self.visible = True

    def apply_classification(self, classification: Classification) -> None:
        self.status_text = classification.status_text
        if classification.progress is not None:
            self.progress = classification.progress
        self.indicator_size = classification.indicator_size

    def set_indeterminate(self) -> None:
        self.progress = -1.0

    def snapshot(self) -> ViewState:
        if not self.visible:
            return ViewState(
                balance_text=self.balance_text,
                status_text="",
                progress=0.0,
                visible=False,
                indicator_size=self.indicator_size,
            )
        return ViewState(
            balance_text=self.balance_text,
            status_text=self.status_text,
            progress=self.progress,
            visible=True,
            indicator_size=self.indicator_size,
        )

    def publish(self) -> Optional[ViewState]:
        """Push the current state if it differs from the last one pushed."""
        state = self.snapshot()
        if state == self.last_published:
            return None
        self.sink(state)
        self.last_published = state
        return state

    def reset(self) -> ViewState:
        """Return to the neutral state and push it."""
        neutral = neutral_view_state(self.show_balance)
        self.balance_text = neutral.balance_text
        self.status_text = neutral.status_text
        self.progress = neutral.progress
        self.visible = neutral.visible
        self.indicator_size = neutral.indicator_size
        self.publish()
        return neutral
