"""
Test configuration loading and the ServiceFactory composition root,
including the fail-fast behaviour when the model credential is missing.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from adapters.rest.app import create_app
from agent.executor import AgentExecutor
from application.dto import ChatTurn
from domain.exceptions import ConfigurationError
from factory import ServiceFactory
from infrastructure.config import GITHUB_MODELS_ENDPOINT, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "GITHUB_TOKEN", "OPENAI_API_KEY", "LLM_PROVIDER", "LLM_MODEL", "LLM_BASE_URL",
        "AGENT_MAX_ITERATIONS", "LOG_LEVEL", "CORS_ORIGINS",
    ):
        monkeypatch.delenv(var, raising=False)
    # An empty value stops python-dotenv from filling it in from a local .env
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    return monkeypatch


def test_settings_from_env_defaults(clean_env):
    config = Settings.from_env(project_root=Path("."))
    assert config.llm_provider == "github"
    assert config.llm_model == "gpt-4o-mini"
    assert config.llm_base_url == GITHUB_MODELS_ENDPOINT
    assert config.github_token == ""
    assert config.credential_env_var == "GITHUB_TOKEN"
    assert config.cors_origins == ("*",)


def test_settings_from_env_reads_overrides(clean_env):
    clean_env.setenv("GITHUB_TOKEN", "ghp_secret")
    clean_env.setenv("LLM_MODEL", "gpt-4o")
    clean_env.setenv("AGENT_MAX_ITERATIONS", "3")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    config = Settings.from_env(project_root=Path("."))
    assert config.active_api_key == "ghp_secret"
    assert config.llm_model == "gpt-4o"
    assert config.agent_max_iterations == 3
    assert config.log_level == "DEBUG"
    assert config.cors_origins == ("http://a.test", "http://b.test")


def test_openai_provider_uses_openai_key():
    config = Settings(project_root=Path("."), llm_provider="openai",
                      github_token="gh", openai_api_key="sk")
    assert config.active_api_key == "sk"
    assert config.credential_env_var == "OPENAI_API_KEY"


# ---------------------------------------------------------------------------
# Startup fatality
# ---------------------------------------------------------------------------

def test_factory_fails_without_github_token():
    config = Settings(project_root=Path("."), github_token="")
    with pytest.raises(ConfigurationError) as exc_info:
        ServiceFactory(config)
    message = str(exc_info.value)
    assert "GITHUB_TOKEN" in message
    assert "gh auth token" in message


def test_factory_fails_without_openai_key():
    config = Settings(project_root=Path("."), llm_provider="openai", openai_api_key="")
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        ServiceFactory(config)


def test_factory_rejects_unknown_provider():
    config = Settings(project_root=Path("."), llm_provider="carrier-pigeon", github_token="x")
    with pytest.raises(ConfigurationError, match="Unsupported LLM_PROVIDER"):
        ServiceFactory(config)


def test_factory_builds_real_chat_model_with_token():
    from langchain_openai import ChatOpenAI

    factory = ServiceFactory(Settings(project_root=Path("."), github_token="ghp_test"))
    assert isinstance(factory._llm, ChatOpenAI)


def test_app_refuses_to_start_without_credential(clean_env):
    app = create_app()
    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass


# ---------------------------------------------------------------------------
# Session binding
# ---------------------------------------------------------------------------

def test_each_run_gets_a_fresh_agent_sharing_one_store(factory):
    ctx_a = factory.create_session_ctx()
    ctx_b = factory.create_session_ctx()
    agent_a = factory.create_agent(ctx_a)
    agent_b = factory.create_agent(ctx_b)

    assert isinstance(agent_a, AgentExecutor)
    assert agent_a is not agent_b
    assert agent_a.name == "ProverbsAgent"
    assert ctx_a.run_id != ctx_b.run_id
    assert ctx_a.proverbs is ctx_b.proverbs is factory.store


def test_create_session_ctx_keeps_client_ids(factory):
    ctx = factory.create_session_ctx(thread_id="t-9", run_id="r-9")
    assert (ctx.thread_id, ctx.run_id) == ("t-9", "r-9")
    assert ctx.tool_calls == []


def test_create_agent_loads_history(factory):
    history = [
        ChatTurn(role="user", content="hi"),
        ChatTurn(role="assistant", content="hello"),
        ChatTurn(role="tool", content="{}"),
    ]
    agent = factory.create_agent(factory.create_session_ctx(), history)
    assert [m.type for m in agent.memory.messages] == ["human", "ai"]


def test_history_is_trimmed(settings, store):
    from conftest import ScriptedChatModel, reply

    config = Settings(project_root=Path("."), github_token="x", agent_max_history=2)
    factory = ServiceFactory(config, llm=ScriptedChatModel(responses=[reply("ok")]),
                             store=store, hooks=[])
    history = [ChatTurn(role="user", content=str(i)) for i in range(5)]
    agent = factory.create_agent(factory.create_session_ctx(), history)
    assert [m.content for m in agent.memory.messages] == ["3", "4"]


def test_zero_history_keeps_no_messages():
    from agent.memory import ConversationMemory

    memory = ConversationMemory(max_messages=0)
    memory.add_user_message("hi")
    memory.add_ai_message("hello")
    assert memory.messages == []
