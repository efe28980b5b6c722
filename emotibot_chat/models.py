"""
Shared data models for the EmotiBot Chat service.

This module defines the core domain models used across multiple layers
of the application (classification, trend analysis, session, CLI, API).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EmotionCategory(str, Enum):
    """The closed set of emotions a message can be classified as."""

    JOY = "joy"
    SADNESS = "sadness"
    ANXIETY = "anxiety"
    ANGER = "anger"
    NEUTRAL = "neutral"


class MoodTrend(str, Enum):
    """
    Direction of the conversation's mood.

    ``NEUTRAL`` here means "not enough history yet" and is unrelated to
    ``EmotionCategory.NEUTRAL``.
    """

    IMPROVING = "improving"
    WORSENING = "worsening"
    STABLE = "stable"
    NEUTRAL = "neutral"


class ClassificationSource(str, Enum):
    LEXICAL = "lexical"
    REMOTE = "remote"


class Sender(str, Enum):
    USER = "user"
    SYSTEM = "system"


class EmotionMetadata(BaseModel):
    """Display descriptor for one emotion category."""

    model_config = ConfigDict(frozen=True)

    name: EmotionCategory
    label: str = Field(..., description="Human readable label, e.g. 'Joyful'")
    accent: str = Field(..., description="Visual accent color identifier")
    icon: str = Field(..., description="Icon glyph shown next to the badge")


class ClassificationResult(BaseModel):
    """The emotion detected for a single message."""

    model_config = ConfigDict(frozen=True)

    category: EmotionCategory
    intensity: int = Field(..., ge=0, le=100, description="Strength of the emotion")
    source: ClassificationSource = Field(
        ClassificationSource.LEXICAL, description="Which classifier produced it"
    )


class ConversationTurn(BaseModel):
    """A single message in the conversation log."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    text: str
    sender: Sender
    classification: ClassificationResult | None = None
    timestamp: float = Field(..., description="Unix timestamp of the turn")

    @model_validator(mode="after")
    def _system_turns_are_unclassified(self) -> "ConversationTurn":
        if self.sender is Sender.SYSTEM and self.classification is not None:
            raise ValueError("system turns cannot carry a classification")
        return self


class TurnReply(BaseModel):
    """What the session hands back for one user message."""

    classification: ClassificationResult
    reply: str


class MoodSnapshot(BaseModel):
    """Current mood state as published to readers and stream subscribers."""

    trend: MoodTrend
    current: ClassificationResult | None = Field(
        None, description="Most recent user classification"
    )
    history: list[ClassificationResult] = Field(
        default_factory=list, description="Bounded trend window, oldest first"
    )
    timestamp: float | None = Field(None, description="Unix timestamp of snapshot")
