"""
PURPOSE: Ensemble weighting strategies.

Turns the model predictions of one cycle into one weight per prediction.
Weights always sum to 1 over a non-empty list. Abstaining models receive a
weight like any other; they add nothing during fusion because their
confidence is 0.

CALLED BY: engine/fusion.py
"""

from typing import Optional, Sequence

from tickparity.config.constants import DEFAULT_MODEL_ACCURACY, WeightMethod
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.utils.logger import get_logger
from tickparity.utils.math_utils import normalize_weights

logger = get_logger("engine.weighting")


def _equal_weights(count: int) -> list[float]:
    return [1.0 / count] * count


def calculate_weights(
    predictions: Sequence[ModelPrediction],
    method: str,
    accuracy_records: Optional[dict[str, ModelAccuracyRecord]] = None,
) -> list[float]:
    """
    PURPOSE: Compute one weight per prediction.

    Methods:
        equal: 1/n each.
        performance: proportional to stored accuracy (0.5 without a record).
        confidence: proportional to each model's own confidence.
    Unknown methods and zero totals fall back to equal weights.

    Args:
        predictions: Model outputs of this cycle.
        method: WeightMethod value.
        accuracy_records: Accuracy records keyed by model id, for "performance".

    Returns:
        list[float]: Weights aligned with predictions; empty for empty input.
    """
    if not predictions:
        return []

    try:
        weight_method = WeightMethod(method)
    except ValueError:
        logger.warning("weight_method_unknown", method=method, fallback=WeightMethod.EQUAL.value)
        return _equal_weights(len(predictions))

    if weight_method == WeightMethod.PERFORMANCE:
        records = accuracy_records or {}
        accuracies = []
        for p in predictions:
            record = records.get(p.model.value)
            accuracies.append(record.accuracy / 100 if record else DEFAULT_MODEL_ACCURACY)
        return normalize_weights(accuracies)

    if weight_method == WeightMethod.CONFIDENCE:
        return normalize_weights([p.confidence for p in predictions])

    return _equal_weights(len(predictions))
