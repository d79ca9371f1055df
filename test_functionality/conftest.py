"""Shared fixtures: settings, an isolated store, and a factory with a scripted model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from langchain_core.language_models.fake_chat_models import FakeMessagesListChatModel
from langchain_core.messages import AIMessage

from factory import ServiceFactory
from infrastructure.config import Settings
from infrastructure.persistence.proverbs_store import InMemoryProverbsStore


class ScriptedChatModel(FakeMessagesListChatModel):
    """Replays canned AIMessages in order; tool binding is a no-op."""

    def bind_tools(self, tools: Any, **kwargs: Any) -> "ScriptedChatModel":
        return self


class FailingChatModel(ScriptedChatModel):
    """Model whose every call fails, like an unreachable provider."""

    def _generate(self, *args: Any, **kwargs: Any):
        raise RuntimeError("model provider unavailable")


def tool_call(name: str, args: dict[str, Any], call_id: str = "call_1") -> AIMessage:
    return AIMessage(content="", tool_calls=[{"name": name, "args": args, "id": call_id}])


def reply(text: str) -> AIMessage:
    return AIMessage(content=text)


@pytest.fixture
def settings() -> Settings:
    return Settings(project_root=Path("."), github_token="test-token")


@pytest.fixture
def store() -> InMemoryProverbsStore:
    return InMemoryProverbsStore()


@pytest.fixture
def make_factory(settings, store):
    """Build a factory whose model replays the given messages."""

    def _make(*messages: AIMessage, hooks=None, llm=None) -> ServiceFactory:
        model = llm or ScriptedChatModel(responses=list(messages) or [reply("ok")])
        return ServiceFactory(settings, llm=model, store=store, hooks=hooks)

    return _make


@pytest.fixture
def factory(make_factory) -> ServiceFactory:
    return make_factory(hooks=[])


@pytest.fixture
def ctx(factory):
    return factory.create_session_ctx(thread_id="thread-1", run_id="run-1")
