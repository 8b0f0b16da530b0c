"""
PURPOSE: Decision fusion gate for the prediction ensemble.

Combines weighted model votes into a single parity call, applies the
minimum-confidence threshold and, for the "weighted" ensemble method, a Monte
Carlo check that can veto the trade.

Tie-break: the final call is EVEN only when the even score is strictly larger.
Equal scores, including the all-zero case, resolve to ODD, and downstream
consumers rely on that.

CALLED BY: engine/engine.py
"""

import random
from typing import Optional, Sequence

from tickparity.config.constants import (
    MONTE_CARLO_MIN_WIN_PROBABILITY,
    EnsembleMethod,
    Parity,
)
from tickparity.config.settings import StrategyConfig
from tickparity.engine.weighting import calculate_weights
from tickparity.schemas.prediction import (
    Decision,
    FusionScores,
    ModelPrediction,
    MonteCarloResult,
)
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.utils.logger import get_logger
from tickparity.utils.math_utils import clamp

logger = get_logger("engine.fusion")

NO_PREDICTIONS_REASON = "No models provided predictions"
MONTE_CARLO_REJECT_REASON = "Monte Carlo simulation suggests unfavorable odds"


def run_monte_carlo(
    predictions: Sequence[ModelPrediction],
    iterations: int,
    rng: Optional[random.Random] = None,
) -> MonteCarloResult:
    """
    PURPOSE: Simulate trade outcomes from the models' own confidences.

    Each iteration draws u, walks the predictions accumulating confidence/n
    until the running sum reaches u, then counts a win if a second draw falls
    below that model's confidence. The confidence/n slices need not cover
    [0, 1], so an iteration whose u is never reached records no outcome.

    Args:
        predictions: Model outputs of this cycle.
        iterations: Number of simulated draws.
        rng: Random source; a fresh unseeded one when None.

    Returns:
        MonteCarloResult: wins / iterations, or 0.0 when iterations is 0.
    """
    rng = rng or random.Random()
    count = len(predictions)
    wins = 0

    for _ in range(iterations):
        draw = rng.random()
        cumulative = 0.0
        for pred in predictions:
            cumulative += pred.confidence / count
            if draw <= cumulative:
                if rng.random() < pred.confidence:
                    wins += 1
                break

    win_probability = wins / iterations if iterations > 0 else 0.0
    return MonteCarloResult(win_probability=win_probability, iterations=iterations, wins=wins)


def fuse_decisions(
    predictions: Sequence[ModelPrediction],
    strategy: StrategyConfig,
    accuracy_records: Optional[dict[str, ModelAccuracyRecord]] = None,
    rng: Optional[random.Random] = None,
) -> Decision:
    """
    PURPOSE: Fuse model predictions into one trade/no-trade decision.

    Args:
        predictions: Model outputs of this cycle, in model order.
        strategy: Weighting, ensemble and threshold settings.
        accuracy_records: Accuracy records for performance weighting.
        rng: Random source for the Monte Carlo gate.

    Returns:
        Decision: Fused call. Never raises for an empty prediction list.

    CALLED BY: engine/engine.py → ParityEngine.predict()
    """
    if not predictions:
        logger.info("fusion_no_predictions")
        return Decision(
            final_prediction=None,
            confidence=0.0,
            should_trade=False,
            reason=NO_PREDICTIONS_REASON,
            model_breakdown=[],
        )

    breakdown = list(predictions)
    weights = calculate_weights(breakdown, strategy.weight_method, accuracy_records)

    even_score = 0.0
    odd_score = 0.0
    for pred, weight in zip(breakdown, weights):
        if pred.prediction == Parity.EVEN:
            even_score += pred.confidence * weight
        elif pred.prediction == Parity.ODD:
            odd_score += pred.confidence * weight

    total_score = even_score + odd_score
    final_prediction = Parity.EVEN if even_score > odd_score else Parity.ODD
    confidence = clamp(max(even_score, odd_score) / total_score) if total_score > 0 else 0.0

    threshold = strategy.min_confidence / 100
    should_trade = confidence >= threshold

    if should_trade:
        reason = (
            f"Strong {final_prediction.value} signal with "
            f"{confidence * 100:.1f}% confidence"
        )
    else:
        reason = (
            f"Confidence {confidence * 100:.1f}% below threshold "
            f"{strategy.min_confidence:g}%"
        )

    scores = FusionScores(even_score=even_score, odd_score=odd_score)
    simulation = None

    if should_trade and strategy.ensemble_method == EnsembleMethod.WEIGHTED.value:
        simulation = run_monte_carlo(breakdown, strategy.monte_carlo_iterations, rng)
        if simulation.win_probability < MONTE_CARLO_MIN_WIN_PROBABILITY:
            should_trade = False
            reason = MONTE_CARLO_REJECT_REASON
            logger.info(
                "monte_carlo_gate_rejected",
                win_probability=simulation.win_probability,
                iterations=simulation.iterations,
                prediction=final_prediction.value,
                confidence=round(confidence, 4),
            )

    logger.debug(
        "fusion_complete",
        prediction=final_prediction.value,
        confidence=round(confidence, 4),
        should_trade=should_trade,
        even_score=round(even_score, 4),
        odd_score=round(odd_score, 4),
        weight_method=strategy.weight_method,
    )

    return Decision(
        final_prediction=final_prediction,
        confidence=confidence,
        should_trade=should_trade,
        reason=reason,
        model_breakdown=breakdown,
        scores=scores,
        simulation=simulation,
    )
