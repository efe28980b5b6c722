"""
Mood trend computation.

Emotions are placed on a single valence axis (joy best, anger worst). The
trend compares the average of the most recent entries against the oldest
entry still inside the window.
"""

from collections.abc import Sequence
from statistics import fmean

from .models import ClassificationResult, EmotionCategory, MoodTrend
from .taxonomy import require_all_categories

TREND_WINDOW = 5
RECENT_WINDOW = 3
TREND_MARGIN = 10

VALENCE = require_all_categories(
    {
        EmotionCategory.JOY: 100,
        EmotionCategory.NEUTRAL: 50,
        EmotionCategory.ANXIETY: 30,
        EmotionCategory.SADNESS: 20,
        EmotionCategory.ANGER: 10,
    },
    "VALENCE",
)


def compute_trend(
    history: Sequence[ClassificationResult], most_recent_first: bool = False
) -> MoodTrend:
    """
    Classify the direction of ``history``.

    Args:
        history: User classifications, oldest first unless ``most_recent_first``
        most_recent_first: Set when ``history`` is ordered newest to oldest

    Returns:
        ``MoodTrend.NEUTRAL`` when fewer than two entries are available,
        otherwise improving, worsening or stable.
    """
    ordered = list(reversed(history)) if most_recent_first else list(history)
    window = ordered[-TREND_WINDOW:]
    if len(window) < 2:
        return MoodTrend.NEUTRAL

    recent = fmean(VALENCE[entry.category] for entry in window[-RECENT_WINDOW:])
    baseline = VALENCE[window[0].category]

    if recent > baseline + TREND_MARGIN:
        return MoodTrend.IMPROVING
    if recent < baseline - TREND_MARGIN:
        return MoodTrend.WORSENING
    return MoodTrend.STABLE
