import json

import httpx
import pytest
from sqlalchemy.exc import SQLAlchemyError

from skillswap.common.config import settings
from skillswap.common.exceptions import CollaboratorUnavailable
from skillswap.common.utils.global_messages import GlobalMessages
from skillswap.modules.chat import chat_service
from skillswap.modules.chat.gemini_client import GeminiClient, MentorContext, build_mentor_prompt
from skillswap.modules.chat.mentor_replies import (
    DEFAULT_REPLY,
    HELP_REPLY,
    LEARN_REPLY,
    REACT_REPLY,
    RESOURCES_REPLY,
    SCHEDULE_REPLY,
    TEACHER_REPLY,
    generate_local_reply,
)


class UnavailableDB:
    async def get(self, *args, **kwargs):
        raise SQLAlchemyError("database offline")

    async def execute(self, *args, **kwargs):
        raise SQLAlchemyError("database offline")


def gemini_with(handler):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient("test-key", model="gemini-2.5-pro", http_client=http_client)


def candidate(text):
    return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})


@pytest.mark.parametrize("message, expected", [
    ("Can you help me?", HELP_REPLY),
    ("React please", REACT_REPLY),
    ("Any study materials?", RESOURCES_REPLY),
    ("Good resources for Go", RESOURCES_REPLY),
    ("I want to learn Python", LEARN_REPLY),
    ("Locate a teacher", TEACHER_REPLY),
    ("Can I book a slot", SCHEDULE_REPLY),
    ("Good morning", DEFAULT_REPLY),
])
def test_local_reply_keywords(message, expected):
    assert generate_local_reply(message) == expected


def test_local_reply_greets_by_name_first():
    reply = generate_local_reply("Hello, can you help with React?", user_name="Alex")
    assert reply.startswith("Hello Alex!")


def test_local_reply_greeting_matches_inside_words():
    # "hi" anywhere in the message wins, as in "this"
    assert generate_local_reply("Is this the schedule?").startswith("Hello there!")


def test_mentor_prompt_includes_context():
    context = MentorContext(
        display_name="Alex",
        teach_skills=["Figma"],
        learn_skills=[],
        available_skills=["Figma", "Python"],
    )
    prompt = build_mentor_prompt(context, "What next?")

    assert "- Name: Alex" in prompt
    assert "- Bio: No bio available" in prompt
    assert "- Skills they can teach: Figma" in prompt
    assert "- Skills they want to learn: None listed" in prompt
    assert "Available skills in platform: Figma, Python" in prompt
    assert prompt.endswith("Current user message: What next?")


async def test_gemini_client_posts_generation_config():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return candidate("Try pairing with Sarah.")

    reply = await gemini_with(handler).generate("prompt text")

    assert reply == "Try pairing with Sarah."
    assert seen["url"].path == "/v1beta/models/gemini-2.5-pro:generateContent"
    assert seen["url"].params["key"] == "test-key"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "prompt text"
    assert seen["body"]["generationConfig"] == {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 1024,
    }


async def test_gemini_client_error_status():
    client = gemini_with(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(CollaboratorUnavailable):
        await client.generate("prompt")


async def test_gemini_client_no_candidates():
    client = gemini_with(lambda request: httpx.Response(200, json={"candidates": []}))
    with pytest.raises(CollaboratorUnavailable):
        await client.generate("prompt")


async def test_gemini_client_transport_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(CollaboratorUnavailable):
        await gemini_with(handler).generate("prompt")


async def test_send_chat_prompt_uses_gemini(user):
    reply = await chat_service.send_chat_prompt(user, "Hi", UnavailableDB(), client=gemini_with(lambda r: candidate("Welcome!")))

    assert reply.reply == "Welcome!"
    assert reply.source == "gemini"
    assert reply.timestamp.tzinfo is not None


async def test_send_chat_prompt_falls_back_on_failure(user):
    client = gemini_with(lambda request: httpx.Response(503))
    reply = await chat_service.send_chat_prompt(user, "Hi", UnavailableDB(), client=client)

    assert reply.reply == GlobalMessages.CHAT_UNAVAILABLE
    assert reply.source == "fallback"


async def test_send_chat_prompt_without_key_uses_local_replies(user, monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    monkeypatch.setattr(settings, "CHAT_FALLBACK_DELAY_SECONDS", 0)

    reply = await chat_service.send_chat_prompt(user, "I need help", UnavailableDB())

    assert reply.source == "local"
    assert reply.reply == HELP_REPLY


def test_chat_endpoint(client, monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    monkeypatch.setattr(settings, "CHAT_FALLBACK_DELAY_SECONDS", 0)

    res = client.post("/chat", json={"message": "Where can I book a session?"})

    assert res.status_code == 200
    assert res.json()["source"] == "local"
    assert res.json()["reply"] == SCHEDULE_REPLY


def test_chat_endpoint_rejects_blank_message(client):
    res = client.post("/chat", json={"message": "   "})
    assert res.status_code == 422
