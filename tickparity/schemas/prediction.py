"""
PURPOSE: Pydantic models for model outputs and ensemble decisions.

Defines ModelPrediction (one model's vote), FusionScores, MonteCarloResult,
and Decision (the fused trade/no-trade call). All are created fresh on every
prediction cycle and never persisted by the engine.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from tickparity.config.constants import ModelKind, Parity


class ModelPrediction(BaseModel):
    """
    PURPOSE: Output of a single prediction model for one cycle.

    Attributes:
        model: Which model produced the vote.
        prediction: Predicted parity, or None when the model abstains.
        confidence: Confidence in [0, 1]; always 0 when prediction is None.
        details: Free-form diagnostic fields.
    """

    model: ModelKind
    prediction: Optional[Parity] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    details: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_abstention(self) -> "ModelPrediction":
        """An abstaining model cannot report confidence."""
        if self.prediction is None and self.confidence != 0.0:
            raise ValueError("prediction=None requires confidence=0")
        return self

    @classmethod
    def abstain(cls, model: ModelKind, **details: Any) -> "ModelPrediction":
        """Return an explicit no-vote for model."""
        return cls(model=model, prediction=None, confidence=0.0, details=details)


class FusionScores(BaseModel):
    """Weighted confidence mass behind each parity."""

    even_score: float = 0.0
    odd_score: float = 0.0


class MonteCarloResult(BaseModel):
    """
    PURPOSE: Outcome of the Monte Carlo confidence gate.

    Attributes:
        win_probability: wins / iterations, 0.0 when no iterations ran.
        iterations: Number of simulated draws.
        wins: Simulated winning draws.
    """

    win_probability: float = Field(ge=0.0, le=1.0)
    iterations: int = Field(ge=0)
    wins: int = Field(ge=0)


class Decision(BaseModel):
    """
    PURPOSE: Final fused decision for one prediction cycle.

    Attributes:
        final_prediction: Fused parity call, None when no model voted.
        confidence: Share of weighted confidence behind the call, in [0, 1].
        should_trade: Whether the call passed every gate.
        reason: Human-readable explanation of the outcome.
        model_breakdown: Individual model outputs that took part.
        scores: Weighted even/odd scores, when fusion ran.
        simulation: Monte Carlo result, when the gate ran.
    """

    final_prediction: Optional[Parity] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    should_trade: bool = False
    reason: str = ""
    model_breakdown: list[ModelPrediction] = Field(default_factory=list)
    scores: Optional[FusionScores] = None
    simulation: Optional[MonteCarloResult] = None
