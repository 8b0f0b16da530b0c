"""
PURPOSE: Tests for tick, prediction and record schemas.

Covers:
- Tick construction from quotes and parity validation
- ModelPrediction abstention rules and confidence bounds
- Record field constraints
"""

import pytest
from pydantic import ValidationError

from tickparity.config.constants import ModelKind, Parity, TradeResult
from tickparity.schemas.prediction import Decision, ModelPrediction
from tickparity.schemas.records import ModelAccuracyRecord, TradeRecord
from tickparity.schemas.tick import Tick


class TestTick:
    """Test the Tick model."""

    def test_from_quote_odd(self):
        """Test an odd terminal digit."""
        tick = Tick.from_quote(1234.57, epoch=1_700_000_000)
        assert tick.digit == 7
        assert tick.is_even is False
        assert tick.parity == Parity.ODD
        assert tick.timestamp == 1_700_000_000

    def test_from_quote_drops_trailing_zero(self):
        """Test that 123.40 reads as digit 4."""
        tick = Tick.from_quote(123.40)
        assert tick.digit == 4
        assert tick.parity == Parity.EVEN

    @pytest.mark.parametrize(
        "quote,digit,parity",
        [(0.00005123, 3, Parity.ODD), (0.00001, 1, Parity.ODD), (1.5e16, 0, Parity.EVEN)],
    )
    def test_from_quote_without_exponent_form(self, quote, digit, parity):
        """Test that tiny and huge quotes use their positional decimal digits."""
        tick = Tick.from_quote(quote)
        assert tick.digit == digit
        assert tick.parity == parity

    def test_parity_mismatch_rejected(self):
        """Test that is_even must agree with the digit."""
        with pytest.raises(ValidationError):
            Tick(digit=3, is_even=True, quote=1.3)

    def test_digit_out_of_range(self):
        """Test that digits above 9 are rejected."""
        with pytest.raises(ValidationError):
            Tick(digit=12, is_even=True, quote=1.12)

    def test_frozen(self):
        """Test that ticks are immutable."""
        tick = Tick.from_quote(10.5)
        with pytest.raises(ValidationError):
            tick.digit = 6


class TestModelPrediction:
    """Test model output constraints."""

    def test_abstain(self):
        """Test the explicit abstention constructor."""
        prediction = ModelPrediction.abstain(ModelKind.PATTERN, matches_found=0)
        assert prediction.prediction is None
        assert prediction.confidence == 0.0
        assert prediction.details == {"matches_found": 0}

    def test_abstention_with_confidence_rejected(self):
        """Test that a None prediction cannot carry confidence."""
        with pytest.raises(ValidationError):
            ModelPrediction(model=ModelKind.PATTERN, prediction=None, confidence=0.4)

    def test_confidence_above_one_rejected(self):
        """Test the upper confidence bound."""
        with pytest.raises(ValidationError):
            ModelPrediction(model=ModelKind.STATISTICAL, prediction=Parity.EVEN, confidence=1.2)

    def test_model_kind_values(self):
        """Test that model ids parse from their string values."""
        prediction = ModelPrediction(model="rule_based", prediction="ODD", confidence=0.52)
        assert prediction.model == ModelKind.RULE_BASED
        assert prediction.prediction == Parity.ODD

    def test_decision_defaults(self):
        """Test an empty decision."""
        decision = Decision()
        assert decision.final_prediction is None
        assert decision.should_trade is False
        assert decision.model_breakdown == []


class TestRecords:
    """Test accuracy and trade records."""

    def test_accuracy_bounds(self):
        """Test that accuracy is a percentage."""
        with pytest.raises(ValidationError):
            ModelAccuracyRecord(accuracy=101.0)

    def test_trade_pnl(self):
        """Test profit and loss of wins and losses."""
        win = TradeRecord(result=TradeResult.WIN, stake=2.0, payout=3.9, prediction=Parity.EVEN)
        loss = TradeRecord(result=TradeResult.LOSS, stake=2.0, prediction=Parity.ODD)
        assert win.pnl == pytest.approx(1.9)
        assert loss.pnl == -2.0
