"""
Shared fixtures: a fake chat-completions service built on httpx.MockTransport.
"""

import json
from collections.abc import Callable

import httpx
import pytest

from emotibot_chat.remote import CompletionClient, RemoteClassifier
from emotibot_chat.responses import ResponseSelector
from emotibot_chat.session import ChatSession
from emotibot_chat.store import ConversationStore

BASE_URL = "https://llm.test/v1"

Handler = Callable[[httpx.Request], httpx.Response]


def completion(content: str | None) -> httpx.Response:
    """A well-formed chat-completions response carrying ``content``."""
    return httpx.Response(
        200, json={"choices": [{"message": {"role": "assistant", "content": content}}]}
    )


def prompt_of(request: httpx.Request) -> str:
    return json.loads(request.content)["messages"][0]["content"]


@pytest.fixture
def make_client() -> Callable[[Handler | None], CompletionClient]:
    """Build a CompletionClient; without a handler the remote path is off."""

    def factory(handler: Handler | None = None) -> CompletionClient:
        if handler is None:
            return CompletionClient(api_key=None)
        return CompletionClient(
            api_key="test-key",
            base_url=BASE_URL,
            model="test-model",
            timeout=1.0,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def make_session(make_client) -> Callable[[Handler | None], ChatSession]:
    def factory(handler: Handler | None = None) -> ChatSession:
        client = make_client(handler)
        return ChatSession(
            store=ConversationStore(),
            classifier=RemoteClassifier(client),
            responder=ResponseSelector(client),
        )

    return factory
