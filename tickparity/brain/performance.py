"""
PURPOSE: Model accuracy tracking and settled-trade performance summaries.

ModelPerformanceTracker keeps each model's running accuracy in the state
store; those records drive performance-based ensemble weighting.
summarize_trades() aggregates settled wagers into backtest-style statistics.

CALLED BY: engine/engine.py → settle(); callers reporting on trade history
"""

from typing import Iterable, Optional

from tickparity.config.constants import ModelKind, Parity, TradeResult
from tickparity.schemas.records import ModelAccuracyRecord, TradeRecord, TradeSummary
from tickparity.storage.base import StateStore
from tickparity.utils.logger import get_logger
from tickparity.utils.math_utils import (
    calculate_max_drawdown,
    calculate_profit_factor,
    calculate_sharpe,
)

logger = get_logger("brain.performance")


def _safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning default when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


class ModelPerformanceTracker:
    """
    PURPOSE: Maintain per-model accuracy records in the state store.

    Attributes:
        _store: State store holding the records.
    """

    def __init__(self, store: StateStore):
        self._store = store

    def record(
        self,
        model: ModelKind,
        predicted: Optional[Parity],
        actual: Parity,
    ) -> Optional[ModelAccuracyRecord]:
        """
        PURPOSE: Score one model prediction against the actual parity.

        Abstentions are not scored.

        Args:
            model: Model that made the prediction.
            predicted: Parity it predicted, or None.
            actual: Parity of the tick that settled the wager.

        Returns:
            Optional[ModelAccuracyRecord]: Updated record, None for abstentions.
        """
        return self.record_many([(model, predicted)], actual).get(ModelKind(model).value)

    def record_many(
        self,
        outcomes: Iterable[tuple[ModelKind, Optional[Parity]]],
        actual: Parity,
    ) -> dict[str, ModelAccuracyRecord]:
        """
        PURPOSE: Score several model predictions with one read and one write.

        Args:
            outcomes: (model, predicted parity) pairs.
            actual: Parity of the tick that settled the wager.

        Returns:
            dict: Updated records keyed by model id, for scored models only.

        Raises:
            RuntimeError: If the store fails to persist the records.
        """
        records = self._store.read_model_accuracy()
        updated: dict[str, ModelAccuracyRecord] = {}

        for model, predicted in outcomes:
            if predicted is None:
                continue
            model_id = ModelKind(model).value
            record = records.get(model_id, ModelAccuracyRecord())
            made = record.predictions_made + 1
            correct = record.correct_count + (1 if Parity(predicted) == Parity(actual) else 0)
            records[model_id] = ModelAccuracyRecord(
                accuracy=_safe_div(correct, made) * 100,
                predictions_made=made,
                correct_count=correct,
            )
            updated[model_id] = records[model_id]

        if updated:
            self._store.write_model_accuracy(records)
            logger.info(
                "model_accuracy_updated",
                actual=Parity(actual).value,
                models={k: round(v.accuracy, 2) for k, v in updated.items()},
            )
        return updated


def summarize_trades(
    trades: Iterable[TradeRecord],
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> TradeSummary:
    """
    PURPOSE: Aggregate settled trades into win rate, profit and risk statistics.

    Args:
        trades: Settled trades in settlement order.
        start: Inclusive lower bound on timestamp (epoch ms), or None.
        end: Inclusive upper bound on timestamp (epoch ms), or None.

    Returns:
        TradeSummary: Aggregates; all zeros when no trade is in range.
    """
    selected = [
        t for t in trades
        if (start is None or t.timestamp >= start) and (end is None or t.timestamp <= end)
    ]
    if not selected:
        return TradeSummary()

    won = [t for t in selected if t.result == TradeResult.WIN]
    lost = [t for t in selected if t.result == TradeResult.LOSS]

    gross_profit = sum(t.payout - t.stake for t in won)
    gross_loss = sum(t.stake for t in lost)

    returns = [
        _safe_div(t.payout - t.stake, t.stake) if t.result == TradeResult.WIN else -1.0
        for t in selected
    ]

    return TradeSummary(
        total_trades=len(selected),
        wins=len(won),
        losses=len(lost),
        win_rate=_safe_div(len(won), len(selected)) * 100,
        profit_factor=calculate_profit_factor(gross_profit, gross_loss),
        gross_profit=gross_profit,
        gross_loss=gross_loss,
        total_pnl=gross_profit - gross_loss,
        avg_win=_safe_div(gross_profit, len(won)),
        avg_loss=_safe_div(gross_loss, len(lost)),
        max_drawdown=calculate_max_drawdown([t.pnl for t in selected]),
        sharpe_ratio=calculate_sharpe(returns),
    )
