"""
Test full agent runs with a scripted chat model standing in for the provider.

The model's tool calls go through LangChain's AgentExecutor, the registry
and the real store, exactly as in production.
"""

from __future__ import annotations

import asyncio

from conftest import FailingChatModel, reply, tool_call

from agent.executor import FRIENDLY_ERROR_REPLY


async def test_run_without_tools(make_factory, store):
    factory = make_factory(reply("Hello! Ask me about proverbs."), hooks=[])
    ctx = factory.create_session_ctx(thread_id="t", run_id="r")

    result = await factory.create_agent(ctx).run(ctx, "hi")

    assert result.reply == "Hello! Ask me about proverbs."
    assert (result.thread_id, result.run_id) == ("t", "r")
    assert result.tool_calls == []
    assert result.state is None
    assert not result.failed


async def test_run_reads_then_adds(make_factory, store):
    store.replace(["Look before you leap."])
    factory = make_factory(
        tool_call("get_proverbs", {}, "call_1"),
        tool_call("add_proverbs", {"proverbs": ["Haste makes waste."]}, "call_2"),
        reply("Added one proverb."),
        hooks=[],
    )
    ctx = factory.create_session_ctx()

    result = await factory.create_agent(ctx).run(ctx, "Add a proverb about haste")

    assert result.reply == "Added one proverb."
    assert [c.name for c in result.tool_calls] == ["get_proverbs", "add_proverbs"]
    assert result.tool_calls[0].output == {"proverbs": ["Look before you leap."]}
    assert result.state.proverbs == ("Look before you leap.", "Haste makes waste.")
    assert store.get_all() == result.state.proverbs


async def test_state_is_last_mutation_snapshot(make_factory, store):
    factory = make_factory(
        tool_call("set_proverbs", {"proverbs": ["a", "b"]}, "call_1"),
        tool_call("add_proverbs", {"proverbs": ["c"]}, "call_2"),
        tool_call("get_weather", {"location": "Seattle"}, "call_3"),
        reply("Done."),
        hooks=[],
    )
    ctx = factory.create_session_ctx()

    result = await factory.create_agent(ctx).run(ctx, "reset, add, and check weather")

    assert result.state.proverbs == ("a", "b", "c")
    assert result.tool_calls[-1].output["feelsLike"] == 25


async def test_invalid_tool_args_leave_store_untouched(make_factory, store):
    store.replace(["keep"])
    seen = []
    factory = make_factory(
        tool_call("add_proverbs", {"proverbs": [1, 2]}, "call_1"),
        tool_call("get_weather", {"location": ""}, "call_2"),
        reply("Sorry, I could not add those."),
        hooks=[lambda ctx, record: seen.append(record.name)],
    )
    ctx = factory.create_session_ctx()

    result = await factory.create_agent(ctx).run(ctx, "add numbers")

    assert result.reply == "Sorry, I could not add those."
    assert result.state is None
    assert store.get_all() == ("keep",)
    assert [c.name for c in result.tool_calls] == ["add_proverbs", "get_weather"]
    assert all(not c.ok for c in result.tool_calls)
    assert result.tool_calls[0].arguments == {"proverbs": [1, 2]}
    assert seen == ["add_proverbs", "get_weather"]


async def test_model_failure_returns_friendly_error(make_factory, store):
    factory = make_factory(llm=FailingChatModel(responses=[reply("never")]), hooks=[])
    ctx = factory.create_session_ctx()
    agent = factory.create_agent(ctx)

    result = await agent.run(ctx, "hello?")

    assert result.failed
    assert result.reply == FRIENDLY_ERROR_REPLY
    assert store.get_all() == ()
    assert [m.content for m in agent.memory.messages] == ["hello?", FRIENDLY_ERROR_REPLY]


async def test_concurrent_runs_share_one_store(make_factory, store):
    # Each factory owns its own scripted model; both write to the same store.
    factory_a = make_factory(
        tool_call("add_proverbs", {"proverbs": ["a1", "a2"]}), reply("a done"), hooks=[],
    )
    factory_b = make_factory(
        tool_call("add_proverbs", {"proverbs": ["b1", "b2"]}), reply("b done"), hooks=[],
    )
    ctx_a = factory_a.create_session_ctx()
    ctx_b = factory_b.create_session_ctx()

    result_a, result_b = await asyncio.gather(
        factory_a.create_agent(ctx_a).run(ctx_a, "add a"),
        factory_b.create_agent(ctx_b).run(ctx_b, "add b"),
    )

    final = store.get_all()
    assert sorted(final) == ["a1", "a2", "b1", "b2"]
    assert result_a.state.proverbs[-2:] == ("a1", "a2")
    assert result_b.state.proverbs[-2:] == ("b1", "b2")
    assert final == max(result_a.state.proverbs, result_b.state.proverbs, key=len)
