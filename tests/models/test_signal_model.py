"""Tests for signal and snapshot value objects"""

import dataclasses

import orjson
import pytest
from equity_signals.models.metrics import IndicatorSnapshot
from equity_signals.models.signal import Signal, SignalType


class TestSignal:
    """Test Signal invariants and serialization"""

    def test_buy_signal(self):
        signal = Signal(signal_type=SignalType.BUY, price=100.0, entry_price=100.0,
                        target=102.0, stop_loss=99.0, reasons=["a", "b"])
        assert signal.is_actionable
        assert signal.reasons == ("a", "b")

    def test_signal_type_coerced_from_string(self):
        signal = Signal(signal_type="HOLD", price=1.0, entry_price=1.0)
        assert signal.signal_type is SignalType.HOLD

    def test_hold_with_exits_rejected(self):
        with pytest.raises(ValueError):
            Signal(signal_type=SignalType.HOLD, price=1.0, entry_price=1.0,
                   target=1.1, stop_loss=0.9)

    def test_buy_without_exits_rejected(self):
        with pytest.raises(ValueError):
            Signal(signal_type=SignalType.SELL, price=1.0, entry_price=1.0)

    def test_target_without_stop_rejected(self):
        with pytest.raises(ValueError):
            Signal(signal_type=SignalType.BUY, price=1.0, entry_price=1.0, target=1.1)

    def test_immutable(self):
        signal = Signal(signal_type=SignalType.HOLD, price=1.0, entry_price=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            signal.price = 2.0

    def test_to_dict_hold_omits_exits(self):
        data = Signal(signal_type=SignalType.HOLD, price=1.0, entry_price=1.0,
                      reasons=("Neutral trend - await clear signal",)).to_dict()
        assert data == {
            "signal_type": "HOLD",
            "price": 1.0,
            "entry_price": 1.0,
            "reasons": ["Neutral trend - await clear signal"],
        }

    def test_to_json(self):
        signal = Signal(signal_type=SignalType.SELL, price=100.0, entry_price=100.0,
                        target=98.0, stop_loss=101.0, reasons=("Nearest support: ₹95",))
        data = orjson.loads(signal.to_json())
        assert data["signal_type"] == "SELL"
        assert data["target"] == 98.0
        assert data["stop_loss"] == 101.0
        assert data["reasons"] == ["Nearest support: ₹95"]


class TestIndicatorSnapshot:
    """Test snapshot value object"""

    def test_change_against_previous_close(self):
        snapshot = IndicatorSnapshot(price=110.0, previous_close=100.0)
        assert snapshot.change == 10.0
        assert snapshot.change_pct == pytest.approx(10.0)

    @pytest.mark.parametrize("previous_close", [None, 0.0])
    def test_no_prior_session(self, previous_close):
        snapshot = IndicatorSnapshot(price=110.0, previous_close=previous_close)
        assert snapshot.change is None
        assert snapshot.change_pct is None

    def test_levels_frozen(self):
        snapshot = IndicatorSnapshot(price=1.0, support_levels=[1.0, 2.0])
        assert snapshot.support_levels == (1.0, 2.0)
        assert snapshot.to_dict()["support_levels"] == [1.0, 2.0]
