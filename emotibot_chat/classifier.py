"""
Lexical emotion classifier.

Matches lower-cased text against one keyword list per emotion. Lists are
checked in a fixed priority order and the first hit wins, so "I love it but
I'm so annoyed" is joy, not anger.
"""

from .models import ClassificationResult, ClassificationSource, EmotionCategory
from .scoring import IntensityPolicy, score

# Priority order matters: earlier entries win ties.
KEYWORDS: tuple[tuple[EmotionCategory, tuple[str, ...]], ...] = (
    (
        EmotionCategory.JOY,
        ("happy", "great", "awesome", "amazing", "excellent", "wonderful", "love", "good"),
    ),
    (
        EmotionCategory.SADNESS,
        ("sad", "depressed", "down", "unhappy", "terrible", "awful", "cry", "upset"),
    ),
    (
        EmotionCategory.ANXIETY,
        ("worried", "anxious", "nervous", "stress", "overwhelm", "panic", "fear", "scared"),
    ),
    (
        EmotionCategory.ANGER,
        ("angry", "mad", "furious", "annoyed", "hate", "irritated", "frustrated"),
    ),
)


def classify(text: str) -> EmotionCategory:
    """Return the first category whose keywords appear in ``text``."""
    lowered = text.lower()
    for category, keywords in KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return EmotionCategory.NEUTRAL


def classify_local(text: str) -> ClassificationResult:
    """Classify ``text`` lexically and score it with the fixed policy."""
    category = classify(text)
    return ClassificationResult(
        category=category,
        intensity=score(text, category, IntensityPolicy.FIXED),
        source=ClassificationSource.LEXICAL,
    )
