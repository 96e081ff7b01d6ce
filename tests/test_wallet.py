import pytest

from txconfidence.core.models import (
    CoinsReceived,
    CoinsSent,
    ConfidenceChanged,
    ConfidenceSignal,
    ConfidenceType,
    Reorganized,
    WalletChanged,
)
from txconfidence.core.wallet import ObservableWallet


class TestObservableWallet:
    def test_receive_and_send(self, wallet, make_tx):
        """Balance follows received and sent coins"""
        events = []
        wallet.subscribe(events.append)

        received = wallet.receive(make_tx("aa", 1.0), 500)
        sent = wallet.send(make_tx("bb", 2.0), 200)

        assert wallet.balance() == 300
        assert events == [received, sent]
        assert isinstance(received, CoinsReceived)
        assert (received.previous_balance, received.new_balance) == (0, 500)
        assert isinstance(sent, CoinsSent)
        assert (sent.previous_balance, sent.new_balance) == (500, 300)
        assert {tx.hash for tx in wallet.transactions()} == {"aa", "bb"}

    def test_overspend_rejected(self, wallet, make_tx):
        with pytest.raises(ValueError):
            wallet.send(make_tx("aa"), 1)
        assert wallet.balance() == 0
        assert wallet.transactions() == set()

    def test_negative_amounts_rejected(self, make_tx):
        with pytest.raises(ValueError):
            ObservableWallet(balance=-1)
        with pytest.raises(ValueError):
            ObservableWallet().receive(make_tx("aa"), -5)

    def test_update_confidence_replaces_snapshot(self, wallet, make_tx):
        wallet.receive(make_tx("aa", 1.0, ConfidenceSignal.pending(1)), 10)
        events = []
        wallet.subscribe(events.append)

        event = wallet.update_confidence("aa", ConfidenceSignal.building(2), update_time=4.0)

        assert isinstance(event, ConfidenceChanged)
        current = wallet.transaction("aa")
        assert current.confidence.type == ConfidenceType.BUILDING
        assert current.update_time == 4.0
        assert len(wallet.transactions()) == 1
        assert events == [event]

    def test_update_unknown_transaction(self, wallet):
        with pytest.raises(KeyError):
            wallet.update_confidence("missing", ConfidenceSignal.dead())

    def test_update_time_defaults_to_now(self, wallet, make_tx):
        wallet.receive(make_tx("aa", 1.0), 10)
        wallet.update_confidence("aa", ConfidenceSignal.building(1))
        assert wallet.transaction("aa").update_time > 1.0

    def test_subscription_management(self, wallet):
        events = []
        wallet.subscribe(events.append)
        wallet.subscribe(events.append)
        assert wallet.subscriber_count == 1

        assert isinstance(wallet.reorganize(), Reorganized)
        assert isinstance(wallet.notify_changed(), WalletChanged)
        assert len(events) == 2

        assert wallet.unsubscribe(events.append) is True
        assert wallet.unsubscribe(events.append) is False
        wallet.reorganize()
        assert len(events) == 2

    def test_failing_handler_does_not_stop_others(self, wallet, make_tx):
        """One broken observer must not starve the rest"""
        seen = []

        def broken(event):
            raise RuntimeError("boom")

        wallet.subscribe(broken)
        wallet.subscribe(seen.append)
        wallet.receive(make_tx("aa"), 1)

        assert len(seen) == 1

    def test_transactions_returns_copy(self, wallet, make_tx):
        wallet.receive(make_tx("aa"), 1)
        snapshot = wallet.transactions()
        snapshot.clear()
        assert len(wallet.transactions()) == 1

    def test_to_dict(self, make_tx):
        data = make_tx("aa", 2.5, ConfidenceSignal.pending(3)).to_dict()
        assert data == {
            "hash": "aa",
            "update_time": 2.5,
            "confidence": {"type": "pending", "broadcast_peers": 3, "depth": 0},
        }
