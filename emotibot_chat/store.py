"""
Conversation storage for the EmotiBot Chat service.

This module keeps the in-memory, append-only conversation log for the single
active session, plus the bounded emotion history derived from it. Mood
snapshots can be streamed to subscribers after every classified user turn.
"""

import asyncio
import time
from collections import deque
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from .models import (
    ClassificationResult,
    ConversationTurn,
    MoodSnapshot,
    Sender,
)
from .trend import TREND_WINDOW, compute_trend

GREETING = "Hello! I'm here to listen and support you. How are you feeling today?"


class ConversationStore:
    """
    In-memory conversation log with a rolling emotion-history view.

    The log keeps every turn for display. The history keeps only the last
    ``TREND_WINDOW`` user classifications and is what the trend is computed
    from. All writes go through an ``asyncio.Condition`` which also wakes
    stream subscribers.
    """

    def __init__(self, greeting: str | None = GREETING) -> None:
        self._turns: list[ConversationTurn] = []
        self._history: deque[ClassificationResult] = deque(maxlen=TREND_WINDOW)
        self._condition = asyncio.Condition()
        self._update_counter = 0

        if greeting:
            self._turns.append(self._make_turn(greeting, Sender.SYSTEM, None))

    def _make_turn(
        self,
        text: str,
        sender: Sender,
        classification: ClassificationResult | None,
    ) -> ConversationTurn:
        return ConversationTurn(
            id=len(self._turns) + 1,
            text=text,
            sender=sender,
            classification=classification,
            timestamp=time.time(),
        )

    def _snapshot(self) -> MoodSnapshot:
        history = list(self._history)
        return MoodSnapshot(
            trend=compute_trend(history),
            current=history[-1] if history else None,
            history=history,
            timestamp=time.time(),
        )

    async def add_user_turn(
        self, text: str, classification: ClassificationResult
    ) -> ConversationTurn:
        """
        Append a classified user message and notify all subscribers.

        Args:
            text: The raw message text
            classification: The emotion detected for it

        Returns:
            The stored turn
        """
        async with self._condition:
            turn = self._make_turn(text, Sender.USER, classification)
            self._turns.append(turn)
            self._history.append(classification)
            self._update_counter += 1

            self._condition.notify_all()

            return turn

    async def add_system_turn(self, text: str) -> ConversationTurn:
        """Append a reply. Replies carry no classification."""
        async with self._condition:
            turn = self._make_turn(text, Sender.SYSTEM, None)
            self._turns.append(turn)
            return turn

    async def turns(self) -> list[ConversationTurn]:
        async with self._condition:
            return list(self._turns)

    async def history(self) -> list[ClassificationResult]:
        """The bounded trend window, oldest first."""
        async with self._condition:
            return list(self._history)

    async def snapshot(self) -> MoodSnapshot:
        async with self._condition:
            return self._snapshot()

    @asynccontextmanager
    async def stream(self) -> AsyncGenerator[AsyncGenerator[MoodSnapshot, None], None]:
        """
        Stream mood snapshots to a subscriber.

        Yields an async generator that produces the current snapshot first and
        then a new one after every classified user turn.
        """

        async def snapshot_generator() -> AsyncGenerator[MoodSnapshot, None]:
            async with self._condition:
                last_seen_counter = self._update_counter
                snapshot = self._snapshot()
            yield snapshot

            try:
                while True:
                    # Never yield while holding the lock.
                    async with self._condition:
                        await self._condition.wait_for(
                            lambda: self._update_counter > last_seen_counter
                        )

                        last_seen_counter = self._update_counter
                        snapshot = self._snapshot()
                    yield snapshot

            except (asyncio.CancelledError, GeneratorExit):
                # Subscriber went away
                return

        yield snapshot_generator()
