"""
Intensity scoring for classified messages.

Two policies are available. The fixed policy assigns each category a constant
base intensity and backs every lexical classification. The feature policy
derives a score from emphasis in the text itself (exclamation marks and
capital letters) and is used for remotely classified messages.
"""

import math
from enum import Enum

from .models import EmotionCategory
from .taxonomy import require_all_categories

MIN_INTENSITY = 0
MAX_INTENSITY = 100

FEATURE_BASE = 50
FEATURE_FLOOR = 30
EXCLAMATION_WEIGHT = 10
UPPERCASE_WEIGHT = 20

FIXED_INTENSITY = require_all_categories(
    {
        EmotionCategory.JOY: 80,
        EmotionCategory.SADNESS: 75,
        EmotionCategory.ANXIETY: 70,
        EmotionCategory.ANGER: 85,
        EmotionCategory.NEUTRAL: 50,
    },
    "FIXED_INTENSITY",
)


class IntensityPolicy(str, Enum):
    FIXED = "fixed"
    FEATURES = "features"


def clamp(value: float, low: int = MIN_INTENSITY, high: int = MAX_INTENSITY) -> int:
    """Round ``value`` half up to an integer within ``[low, high]``."""
    return min(high, max(low, math.floor(value + 0.5)))


def fixed_intensity(category: EmotionCategory) -> int:
    return FIXED_INTENSITY[category]


def feature_intensity(text: str) -> int:
    """
    Score how emphatic ``text`` is.

    Starts from 50, adds 10 per ``!`` and up to 20 for the share of uppercase
    letters, then clamps to ``[30, 100]``. Empty text scores the base.
    """
    exclamations = text.count("!")
    uppercase = sum(1 for char in text if "A" <= char <= "Z")
    ratio = uppercase / len(text) if text else 0.0

    raw = FEATURE_BASE + exclamations * EXCLAMATION_WEIGHT + ratio * UPPERCASE_WEIGHT
    return clamp(raw, FEATURE_FLOOR, MAX_INTENSITY)


def score(
    text: str,
    category: EmotionCategory,
    policy: IntensityPolicy = IntensityPolicy.FIXED,
) -> int:
    """Score ``text`` under the given policy; always within ``[0, 100]``."""
    if policy is IntensityPolicy.FEATURES:
        return feature_intensity(text)
    return clamp(fixed_intensity(category))
