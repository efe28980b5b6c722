"""
Supportive reply selection.

Canned templates are the terminal fallback and cannot fail. When the remote
service is configured, a short generated reply is preferred.
"""

from .errors import Success
from .models import EmotionCategory
from .remote import CompletionClient, log_fallback
from .taxonomy import require_all_categories

RESPOND_PROMPT = """You're a supportive mental health chatbot. User feels {emotion}.

User: "{message}"

Write 1-2 supportive sentences:"""

TEMPLATES = require_all_categories(
    {
        EmotionCategory.JOY: (
            "That's wonderful to hear! I'm glad you're feeling positive. 😊 "
            "What's bringing you joy today?"
        ),
        EmotionCategory.SADNESS: (
            "I hear you, and it's okay to feel this way. 💙 "
            "Would you like to talk about what's making you feel down?"
        ),
        EmotionCategory.ANXIETY: (
            "It sounds like you're dealing with a lot right now. Remember, it's okay "
            "to take things one step at a time. I'm here to listen. 🤗"
        ),
        EmotionCategory.ANGER: (
            "I can sense your frustration. It's completely valid to feel this way. "
            "Would you like to talk about what's bothering you?"
        ),
        EmotionCategory.NEUTRAL: (
            "I'm here to listen and support you. How are you feeling today?"
        ),
    },
    "TEMPLATES",
)


def canned_response(category: EmotionCategory) -> str:
    return TEMPLATES[category]


class ResponseSelector:
    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    async def select(self, category: EmotionCategory, message: str) -> str:
        """Pick a reply for ``message`` given its detected ``category``."""
        if not self.client.enabled:
            return canned_response(category)

        prompt = RESPOND_PROMPT.format(emotion=category.value, message=message)
        outcome = await self.client.attempt(prompt)
        if isinstance(outcome, Success):
            return outcome.text

        log_fallback("respond", outcome.error)
        return canned_response(category)
