import os

import pytest

from txconfidence.core.models import ConfidenceSignal, TransactionRef
from txconfidence.core.wallet import ObservableWallet


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the built-in defaults"""
    for key in list(os.environ):
        if key.startswith("TXCONF_"):
            monkeypatch.delenv(key, raising=False)
    yield
    # profiles write os.environ directly
    for key in list(os.environ):
        if key.startswith("TXCONF_"):
            del os.environ[key]


@pytest.fixture
def wallet():
    """Empty in-memory wallet"""
    return ObservableWallet()


@pytest.fixture
def sink():
    """Collects every published ViewState"""
    return []


@pytest.fixture
def make_tx():
    """Factory for transaction snapshots"""
    def _make(tx_hash, update_time=0.0, confidence=None):
        return TransactionRef(
            hash=tx_hash,
            update_time=update_time,
            confidence=confidence or ConfidenceSignal.unknown(),
        )
    return _make
