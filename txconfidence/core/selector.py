from typing import Iterable, Optional

from txconfidence.core.models import TransactionRef


def _sort_key(tx: TransactionRef):
    return (tx.update_time or 0, tx.hash or "")


def select_latest(transactions: Iterable[TransactionRef]) -> Optional[TransactionRef]:
    """Return the most recently updated transaction, or None if there are none.

    Ties on update time go to the greater hash so the result never depends
    on set iteration order.
    """
    latest = None
    latest_key = None
    for tx in transactions:
        key = _sort_key(tx)
        if latest is None or key > latest_key:
            latest = tx
            latest_key = key
    return latest
