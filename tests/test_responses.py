"""
Tests for supportive reply selection.
"""

import httpx
import pytest
from conftest import completion, prompt_of

from emotibot_chat.models import EmotionCategory
from emotibot_chat.responses import TEMPLATES, ResponseSelector, canned_response


class TestCannedResponses:
    @pytest.mark.parametrize("category", list(EmotionCategory))
    def test_every_category_has_a_reply(self, category):
        reply = canned_response(category)
        assert isinstance(reply, str)
        assert reply.strip()

    def test_replies_are_distinct(self):
        assert len(set(TEMPLATES.values())) == len(EmotionCategory)


class TestResponseSelector:
    @pytest.mark.parametrize("category", list(EmotionCategory))
    async def test_inactive_uses_templates(self, make_client, category):
        selector = ResponseSelector(make_client(None))
        assert await selector.select(category, "whatever") == canned_response(category)

    async def test_remote_reply(self, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            prompt = prompt_of(request)
            assert "User feels anxiety" in prompt
            assert "exams tomorrow" in prompt
            return completion("That sounds stressful. One step at a time.\n")

        selector = ResponseSelector(make_client(handler))
        reply = await selector.select(EmotionCategory.ANXIETY, "exams tomorrow")
        assert reply == "That sounds stressful. One step at a time."

    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(502),
            lambda request: completion(""),
            lambda request: httpx.Response(200, text="<html>"),
        ],
    )
    async def test_failure_falls_back_to_template(self, make_client, handler):
        selector = ResponseSelector(make_client(handler))
        reply = await selector.select(EmotionCategory.ANGER, "so annoyed")
        assert reply == canned_response(EmotionCategory.ANGER)
