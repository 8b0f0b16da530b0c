"""
PURPOSE: Ensemble engine exports for tickparity.
"""

from tickparity.engine.engine import ParityEngine
from tickparity.engine.fusion import fuse_decisions, run_monte_carlo
from tickparity.engine.weighting import calculate_weights

__all__ = [
    "ParityEngine",
    "calculate_weights",
    "fuse_decisions",
    "run_monte_carlo",
]
