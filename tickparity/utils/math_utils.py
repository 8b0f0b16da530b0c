"""
PURPOSE: Mathematical utilities for parity prediction including smoothing,
sequence similarity, weight normalization, and trade performance statistics.
"""

import numpy as np
from typing import List, Optional, Sequence


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value into the closed interval [low, high]."""
    return max(low, min(high, value))


def calculate_ema(values: Sequence[float], alpha: float) -> Optional[float]:
    """
    PURPOSE: Exponential moving average seeded with the first value.
    Formula: ema = alpha * x + (1 - alpha) * ema, applied left to right.

    Args:
        values: Series to smooth, oldest first.
        alpha: Smoothing factor in [0, 1].

    Returns:
        Optional[float]: Final EMA value, or None when values is empty.
    """
    if len(values) == 0:
        return None

    ema = float(values[0])
    for value in values[1:]:
        ema = alpha * value + (1 - alpha) * ema
    return ema


def pattern_similarity(first: Sequence[int], second: Sequence[int]) -> float:
    """
    PURPOSE: Normalized Hamming similarity between two digit sequences.

    Args:
        first: Reference sequence.
        second: Candidate sequence.

    Returns:
        float: Fraction of position-wise equal elements in [0, 1].
            Returns 0.0 if lengths differ or both are empty.
    """
    if len(first) != len(second) or len(first) == 0:
        return 0.0

    equal = sum(1 for a, b in zip(first, second) if a == b)
    return equal / len(first)


def normalize_weights(weights: List[float]) -> List[float]:
    """
    PURPOSE: Normalize weights so they sum to 1.0.
    Falls back to equal weights when the total is not positive.

    Args:
        weights: Raw non-negative weights.

    Returns:
        list: Normalized weights summing to 1.0. Returns empty list if input is empty.
    """
    if not weights:
        return []

    total = sum(weights)

    if total <= 0:
        return [1.0 / len(weights)] * len(weights)

    return [weight / total for weight in weights]


def calculate_sharpe(returns: List[float], risk_free: float = 0.0) -> float:
    """
    PURPOSE: Calculate Sharpe ratio for a series of returns.
    Formula: (mean(returns) - risk_free_rate) / std(returns)

    Args:
        returns: List of per-trade return values.
        risk_free: Risk-free rate (default 0.0).

    Returns:
        float: Sharpe ratio. Returns 0.0 if returns list is empty or std is zero.
    """
    if not returns:
        return 0.0

    returns_array = np.array(returns, dtype=float)
    mean_return = np.mean(returns_array)
    std_return = np.std(returns_array)

    if std_return == 0:
        return 0.0

    return float((mean_return - risk_free) / std_return)


def calculate_profit_factor(gross_profit: float, gross_loss: float) -> float:
    """
    PURPOSE: Calculate profit factor (gross profit / absolute gross loss).

    Args:
        gross_profit: Sum of winning trade profits.
        gross_loss: Sum of losing trade stakes (sign ignored).

    Returns:
        float: Profit factor. Returns 0.0 when there is no loss.
    """
    if abs(gross_loss) == 0:
        return 0.0

    return float(gross_profit / abs(gross_loss))


def calculate_max_drawdown(pnl_series: List[float]) -> float:
    """
    PURPOSE: Largest peak-to-trough drop of the cumulative PnL curve.

    The curve starts at 0, so an initial loss counts as drawdown.

    Args:
        pnl_series: Per-trade profit and loss values in order.

    Returns:
        float: Maximum drawdown in account currency (non-negative).
    """
    if not pnl_series:
        return 0.0

    cumulative = np.cumsum(np.array(pnl_series, dtype=float))
    peaks = np.maximum.accumulate(np.concatenate(([0.0], cumulative)))[1:]
    drawdowns = peaks - cumulative
    return float(max(0.0, drawdowns.max()))
