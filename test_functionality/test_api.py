"""
Test the REST adapter end to end with an injected factory.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from adapters.rest.app import create_app
from conftest import reply, tool_call


@pytest.fixture
def client_for(make_factory):
    def _client(*messages, hooks=None):
        factory = make_factory(*messages, hooks=hooks if hooks is not None else [])
        return TestClient(create_app(factory))

    return _client


def test_health(client_for):
    with client_for() as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_run_returns_reply_tool_calls_and_state(client_for):
    with client_for(
        tool_call("add_proverbs", {"proverbs": ["Actions speak louder than words."]}),
        reply("Added it."),
    ) as client:
        response = client.post("/", json={
            "threadId": "thread-7",
            "runId": "run-7",
            "messages": [{"role": "user", "content": "Add a proverb about actions"}],
        })
        state = client.get("/state").json()

    assert response.status_code == 200
    body = response.json()
    assert body["thread_id"] == "thread-7"
    assert body["run_id"] == "run-7"
    assert body["reply"] == "Added it."
    assert body["failed"] is False
    assert body["tool_calls"][0]["name"] == "add_proverbs"
    assert body["tool_calls"][0]["error"] is None
    assert body["state"] == {"proverbs": ["Actions speak louder than words."]}
    assert state == {"proverbs": ["Actions speak louder than words."]}


def test_run_without_mutation_has_null_state(client_for):
    with client_for(tool_call("get_weather", {"location": "Seattle"}), reply("Sunny.")) as client:
        response = client.post("/", json={
            "messages": [
                {"role": "user", "content": "hi"},
                {"role": "assistant", "content": "hello"},
                {"role": "user", "content": "weather in Seattle?"},
            ],
        })

    body = response.json()
    assert response.status_code == 200
    assert body["state"] is None
    assert body["tool_calls"][0]["output"]["feelsLike"] == 25
    assert body["thread_id"]
    assert body["run_id"]


@pytest.mark.parametrize("payload", [
    {"messages": []},
    {"messages": [{"role": "assistant", "content": "no user input"}]},
    {"messages": [{"role": "user", "content": "   "}]},
    {"messages": [{"role": "robot", "content": "hi"}]},
    {"messages": [{"role": "tool", "content": "{}"}, {"role": "user", "content": "hi"}]},
    {},
])
def test_run_rejects_malformed_requests(client_for, payload):
    with client_for() as client:
        response = client.post("/", json=payload)
    assert response.status_code == 422


def test_state_starts_empty(client_for):
    with client_for() as client:
        assert client.get("/state").json() == {"proverbs": []}


def test_tools_endpoint_lists_catalog(client_for):
    with client_for() as client:
        tools = client.get("/tools").json()
    assert [t["name"] for t in tools] == [
        "get_proverbs", "add_proverbs", "set_proverbs", "get_weather",
    ]
    assert tools[3]["input_schema"]["required"] == ["location"]
