"""
PURPOSE: Pydantic models for the statistics and trade records exchanged with
the persistence collaborator.
"""

from pydantic import BaseModel, Field

from tickparity.config.constants import Parity, TradeResult


class ModelAccuracyRecord(BaseModel):
    """
    PURPOSE: Running accuracy statistics for one prediction model.

    Attributes:
        accuracy: Percentage of correct predictions (0-100).
        predictions_made: Number of scored predictions.
        correct_count: Number of correct predictions.
    """

    accuracy: float = Field(default=0.0, ge=0.0, le=100.0)
    predictions_made: int = Field(default=0, ge=0)
    correct_count: int = Field(default=0, ge=0)


class TradeRecord(BaseModel):
    """
    PURPOSE: A settled wager as kept by the trade history store.

    Attributes:
        result: Win or loss.
        stake: Amount wagered.
        payout: Amount returned (0 on a loss).
        prediction: Parity that was wagered on.
        timestamp: Settlement time in epoch milliseconds.
    """

    result: TradeResult
    stake: float = Field(ge=0.0)
    payout: float = Field(default=0.0, ge=0.0)
    prediction: Parity
    timestamp: int = 0

    @property
    def pnl(self) -> float:
        if self.result == TradeResult.WIN:
            return self.payout - self.stake
        return -self.stake


class TradeSummary(BaseModel):
    """Aggregate performance of a set of settled trades."""

    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    profit_factor: float = 0.0
    gross_profit: float = 0.0
    gross_loss: float = 0.0
    total_pnl: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    max_drawdown: float = 0.0
    sharpe_ratio: float = 0.0
