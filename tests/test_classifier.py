import pytest

from txconfidence.core.classifier import classify
from txconfidence.core.models import ConfidenceSignal, ConfidenceType


class TestClassifier:
    def test_unknown(self):
        """Unknown confidence hides status and resets progress"""
        result = classify(ConfidenceSignal.unknown())
        assert result.status_text == ""
        assert result.progress == 0
        assert result.indicator_size == 50

    @pytest.mark.parametrize("peers", [0, 1, 7])
    def test_pending_is_indeterminate(self, peers):
        """Pending is indeterminate whatever the peer count"""
        result = classify(ConfidenceSignal.pending(peers))
        assert result.progress == -1
        assert str(peers) in result.status_text
        assert "0 confirmations" in result.status_text
        assert result.indicator_size == 20

    @pytest.mark.parametrize("depth,expected", [(0, 0.0), (3, 0.5), (6, 1.0), (12, 1.0)])
    def test_building_progress(self, depth, expected):
        """Building progress is depth / 6, capped at 1"""
        result = classify(ConfidenceSignal.building(depth))
        assert result.progress == pytest.approx(expected)
        assert f"Confirmed in {depth} block(s)" == result.status_text
        assert result.indicator_size == 50

    def test_dead_holds_progress(self):
        """Dead reports invalid and leaves progress alone"""
        result = classify(ConfidenceSignal.dead())
        assert result.status_text == "Transaction is invalid."
        assert result.progress is None

    def test_unrecognized_type_degrades_to_unknown(self):
        """A type this library does not know is shown as unknown"""
        result = classify(ConfidenceSignal("in_conflict"))
        assert result == classify(ConfidenceSignal.unknown())

    @pytest.mark.parametrize("raw,expected", [
        ("pending", ConfidenceType.PENDING),
        ("BUILDING", ConfidenceType.BUILDING),
        ("dead", ConfidenceType.DEAD),
        ("unknown", ConfidenceType.UNKNOWN),
    ])
    def test_string_types_become_enum_members(self, raw, expected):
        """Adapters passing enum values as strings get the real classification"""
        signal = ConfidenceSignal(raw, broadcast_peers=4, depth=3)
        assert signal.type == expected
        assert classify(signal) == classify(ConfidenceSignal(expected, broadcast_peers=4, depth=3))

    def test_string_pending_is_not_degraded(self):
        result = classify(ConfidenceSignal("pending", broadcast_peers=2))
        assert result.progress == -1
        assert "Seen by 2 peer(s)" in result.status_text

    def test_unrecognized_string_kept_as_given(self):
        assert ConfidenceSignal("in_conflict").type == "in_conflict"

    def test_confirmation_target_from_env(self, monkeypatch):
        """Fully confirmed depth can be configured"""
        monkeypatch.setenv("TXCONF_CONFIRMATION_TARGET", "2")
        assert classify(ConfidenceSignal.building(1)).progress == pytest.approx(0.5)
        assert classify(ConfidenceSignal.building(3)).progress == 1.0

    def test_negative_counts_rejected(self):
        """Negative peer counts and depths are contract violations"""
        with pytest.raises(ValueError):
            ConfidenceSignal.pending(-1)
        with pytest.raises(ValueError):
            ConfidenceSignal.building(-2)

    def test_signal_constructors(self):
        assert ConfidenceSignal.pending(3).type == ConfidenceType.PENDING
        assert ConfidenceSignal.building(2).depth == 2
        assert ConfidenceSignal.dead().type == ConfidenceType.DEAD
