"""
Client and classifier adapter for the remote text-completion service.

The service is any OpenAI-compatible ``/chat/completions`` endpoint. It is
only contacted when an API key is configured; every failure is absorbed and
replaced by the local lexical result.
"""

import httpx

from .classifier import classify_local
from .config import Settings
from .errors import (
    Failure,
    Outcome,
    RemoteCallFailed,
    RemoteError,
    RemoteResponseUnparseable,
    RemoteUnavailable,
    Success,
)
from .log import get_logger
from .models import ClassificationResult, ClassificationSource, EmotionCategory
from .scoring import IntensityPolicy, score

log = get_logger(__name__)

CLASSIFY_PROMPT = """Analyze this message's emotion. Reply ONLY with ONE word: joy, sadness, anxiety, anger, or neutral.

Message: "{text}"

Reply with only the emotion word:"""


class CompletionClient:
    """
    Thin async wrapper over a chat-completions endpoint.

    ``complete`` raises ``RemoteError`` subclasses; ``attempt`` wraps the same
    call into a ``Success``/``Failure`` outcome for callers that fall back.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = (api_key or "").strip() or None
        self.model = model
        self._client: httpx.AsyncClient | None = None
        if self.api_key:
            self._client = httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout,
                transport=transport,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            model=settings.model,
            timeout=settings.remote_timeout,
        )

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the stripped completion text."""
        if self._client is None:
            raise RemoteUnavailable("no API key configured")

        payload = {"model": self.model, "messages": [{"role": "user", "content": prompt}]}
        try:
            response = await self._client.post("/chat/completions", json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise RemoteCallFailed(str(e) or type(e).__name__) from e

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise RemoteResponseUnparseable("malformed completion body") from e

        if not isinstance(content, str) or not content.strip():
            raise RemoteResponseUnparseable("empty completion")
        return content.strip()

    async def attempt(self, prompt: str) -> Outcome:
        try:
            return Success(await self.complete(prompt))
        except RemoteError as e:
            return Failure(e)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()


def parse_category(reply: str) -> EmotionCategory | None:
    """Return the first category name contained in ``reply``, if any."""
    lowered = reply.lower()
    for category in EmotionCategory:
        if category.value in lowered:
            return category
    return None


def log_fallback(operation: str, error: RemoteError) -> None:
    if isinstance(error, RemoteUnavailable):
        log.debug("remote_fallback", operation=operation, error=type(error).__name__)
        return
    log.warning(
        "remote_fallback",
        operation=operation,
        error=type(error).__name__,
        detail=str(error),
    )


class RemoteClassifier:
    """Classifies through the remote service, falling back to keywords."""

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    async def classify(self, text: str) -> ClassificationResult:
        if not self.client.enabled:
            return classify_local(text)

        outcome = await self.client.attempt(CLASSIFY_PROMPT.format(text=text))
        if isinstance(outcome, Success):
            category = parse_category(outcome.text)
            if category is not None:
                return ClassificationResult(
                    category=category,
                    intensity=score(text, category, IntensityPolicy.FEATURES),
                    source=ClassificationSource.REMOTE,
                )
            outcome = Failure(
                RemoteResponseUnparseable(f"no emotion in reply {outcome.text!r}")
            )

        log_fallback("classify", outcome.error)
        return classify_local(text)
