"""
The chat session: the only surface the presentation layer talks to.

One session per process. Each user message is classified, stored, answered,
and the reply stored, in that order.
"""

import asyncio

from .config import Settings, get_settings
from .log import get_logger
from .models import ClassificationResult, ConversationTurn, MoodTrend, TurnReply
from .remote import CompletionClient, RemoteClassifier
from .responses import ResponseSelector
from .store import ConversationStore

log = get_logger(__name__)


class ChatSession:
    def __init__(
        self,
        store: ConversationStore,
        classifier: RemoteClassifier,
        responder: ResponseSelector,
    ) -> None:
        self.store = store
        self.classifier = classifier
        self.responder = responder
        self._turn_lock = asyncio.Lock()

    @property
    def remote_enabled(self) -> bool:
        return self.classifier.client.enabled

    async def process_user_message(self, text: str) -> TurnReply:
        """
        Classify ``text``, record it and produce a supportive reply.

        Turns run one at a time, so each reply directly follows its own
        message in the log. Never fails because of the remote service; at
        worst the keyword classifier and canned replies are used.
        """
        async with self._turn_lock:
            classification = await self.classifier.classify(text)
            await self.store.add_user_turn(text, classification)

            reply = await self.responder.select(classification.category, text)
            await self.store.add_system_turn(reply)

        log.info(
            "turn_processed",
            category=classification.category.value,
            intensity=classification.intensity,
            source=classification.source.value,
        )
        return TurnReply(classification=classification, reply=reply)

    async def current_trend(self) -> MoodTrend:
        snapshot = await self.store.snapshot()
        return snapshot.trend

    async def emotion_history(self) -> list[ClassificationResult]:
        return await self.store.history()

    async def turns(self) -> list[ConversationTurn]:
        return await self.store.turns()

    async def aclose(self) -> None:
        await self.classifier.client.aclose()


def build_session(settings: Settings | None = None) -> ChatSession:
    """Wire a session from configuration; one shared client for both calls."""
    settings = settings or get_settings()
    client = CompletionClient.from_settings(settings)
    log.debug("session_created", remote=client.enabled, model=settings.model)
    return ChatSession(
        store=ConversationStore(),
        classifier=RemoteClassifier(client),
        responder=ResponseSelector(client),
    )
