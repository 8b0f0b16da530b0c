"""
PURPOSE: Tests for model accuracy tracking and trade summaries.
"""

import pytest

from tickparity.brain.performance import ModelPerformanceTracker, summarize_trades
from tickparity.config.constants import ModelKind, Parity, TradeResult
from tickparity.schemas.records import TradeRecord


@pytest.fixture
def sample_trades():
    """Win, loss, win, loss at one-second spacing."""
    return [
        TradeRecord(result=TradeResult.WIN, stake=1.0, payout=1.95, prediction=Parity.EVEN, timestamp=1000),
        TradeRecord(result=TradeResult.LOSS, stake=1.0, prediction=Parity.ODD, timestamp=2000),
        TradeRecord(result=TradeResult.WIN, stake=2.0, payout=3.9, prediction=Parity.ODD, timestamp=3000),
        TradeRecord(result=TradeResult.LOSS, stake=1.0, prediction=Parity.EVEN, timestamp=4000),
    ]


class TestModelPerformanceTracker:
    """Test running accuracy records."""

    def test_first_correct_prediction(self, memory_store):
        """Test that one correct call gives 100% accuracy."""
        record = ModelPerformanceTracker(memory_store).record(
            ModelKind.STATISTICAL, Parity.EVEN, Parity.EVEN
        )
        assert record.accuracy == 100.0
        assert record.predictions_made == 1
        assert record.correct_count == 1
        assert memory_store.read_model_accuracy()["statistical"] == record

    def test_accuracy_accumulates(self, memory_store):
        """Test that a hit then a miss gives 50%."""
        tracker = ModelPerformanceTracker(memory_store)
        tracker.record(ModelKind.PATTERN, Parity.ODD, Parity.ODD)
        record = tracker.record(ModelKind.PATTERN, Parity.EVEN, Parity.ODD)
        assert record.accuracy == pytest.approx(50.0)
        assert record.predictions_made == 2

    def test_abstention_not_scored(self, memory_store):
        """Test that a None prediction leaves the store untouched."""
        result = ModelPerformanceTracker(memory_store).record(
            ModelKind.ADAPTIVE, None, Parity.EVEN
        )
        assert result is None
        assert memory_store.writes == 0

    def test_record_many_writes_once(self, memory_store):
        """Test that several models are scored in a single write."""
        updated = ModelPerformanceTracker(memory_store).record_many(
            [
                (ModelKind.STATISTICAL, Parity.ODD),
                (ModelKind.PATTERN, None),
                (ModelKind.RULE_BASED, Parity.EVEN),
            ],
            Parity.ODD,
        )
        assert set(updated) == {"statistical", "rule_based"}
        assert updated["statistical"].accuracy == 100.0
        assert updated["rule_based"].accuracy == 0.0
        assert memory_store.writes == 1


class TestSummarizeTrades:
    """Test trade aggregation."""

    def test_empty(self):
        """Test that no trades give an all-zero summary."""
        summary = summarize_trades([])
        assert summary.total_trades == 0
        assert summary.win_rate == 0.0
        assert summary.profit_factor == 0.0

    def test_mixed_results(self, sample_trades):
        """Test aggregates over two wins and two losses."""
        summary = summarize_trades(sample_trades)
        assert summary.total_trades == 4
        assert summary.wins == 2
        assert summary.losses == 2
        assert summary.win_rate == pytest.approx(50.0)
        assert summary.gross_profit == pytest.approx(2.85)
        assert summary.gross_loss == pytest.approx(2.0)
        assert summary.profit_factor == pytest.approx(1.425)
        assert summary.total_pnl == pytest.approx(0.85)
        assert summary.avg_win == pytest.approx(1.425)
        assert summary.avg_loss == pytest.approx(1.0)
        # Cumulative PnL 0.95, -0.05, 1.85, 0.85
        assert summary.max_drawdown == pytest.approx(1.0)
        # Returns 0.95, -1, 0.95, -1: mean -0.025, std 0.975
        assert summary.sharpe_ratio == pytest.approx(-0.025 / 0.975)

    def test_date_range_filter(self, sample_trades):
        """Test that start and end bounds are inclusive."""
        summary = summarize_trades(sample_trades, start=2000, end=3000)
        assert summary.total_trades == 2
        assert summary.wins == 1
        assert summary.losses == 1

    def test_no_losses(self, sample_trades):
        """Test that profit factor is 0 without losses."""
        summary = summarize_trades([sample_trades[0]])
        assert summary.profit_factor == 0.0
        assert summary.max_drawdown == 0.0
