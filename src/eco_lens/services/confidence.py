"""Confidence arithmetic shared by the decision rules."""

import math

DEFAULT_SIGNAL_SCORE = 0.5


def clamp(value: float, low: float, high: float) -> float:
    """Limit a value to the inclusive range [low, high]."""
    return max(low, min(high, value))


def to_percent(score: float) -> int:
    """Convert a 0-1 score to an integer percentage, rounding halves up."""
    return math.floor(clamp(score, 0.0, 1.0) * 100 + 0.5)


def aggregate_confidence(
    text_score: float | None,
    image_score: float | None,
    edible_confidence: int,
) -> int:
    """Average text, image and edibility confidence into one percentage.

    Missing classifier scores count as a neutral 0.5.
    """
    text = DEFAULT_SIGNAL_SCORE if text_score is None else text_score
    image = DEFAULT_SIGNAL_SCORE if image_score is None else image_score
    return to_percent((text + image + edible_confidence / 100) / 3)
