"""
Static registry of the supported emotion categories.

Every table keyed by ``EmotionCategory`` goes through ``require_all_categories``
at import time, so adding a category fails loudly until each table covers it.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

from .models import EmotionCategory, EmotionMetadata

V = TypeVar("V")


def require_all_categories(
    table: Mapping[EmotionCategory, V], name: str
) -> Mapping[EmotionCategory, V]:
    """Return a read-only view of ``table`` after checking it is exhaustive."""
    missing = set(EmotionCategory) - set(table)
    if missing:
        names = ", ".join(sorted(category.value for category in missing))
        raise RuntimeError(f"{name} is missing categories: {names}")
    return MappingProxyType(dict(table))


EMOTIONS = require_all_categories(
    {
        EmotionCategory.JOY: EmotionMetadata(
            name=EmotionCategory.JOY, label="Joyful", accent="green", icon="😊"
        ),
        EmotionCategory.SADNESS: EmotionMetadata(
            name=EmotionCategory.SADNESS, label="Sad", accent="blue", icon="😢"
        ),
        EmotionCategory.ANXIETY: EmotionMetadata(
            name=EmotionCategory.ANXIETY, label="Anxious", accent="yellow", icon="😰"
        ),
        EmotionCategory.ANGER: EmotionMetadata(
            name=EmotionCategory.ANGER, label="Angry", accent="red", icon="😠"
        ),
        EmotionCategory.NEUTRAL: EmotionMetadata(
            name=EmotionCategory.NEUTRAL, label="Neutral", accent="gray", icon="😐"
        ),
    },
    "EMOTIONS",
)


def metadata_for(category: EmotionCategory) -> EmotionMetadata:
    return EMOTIONS[category]
