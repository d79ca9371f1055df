"""Agent run endpoint: one conversation turn in, reply plus state changes out."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import ProverbsStateOut, RunAgentBody, RunAgentOut, ToolCallOut
from application.dto import ChatTurn, RunResult
from factory import ServiceFactory

router = APIRouter(tags=["agent"])
logger = logging.getLogger(__name__)


@router.post("/", response_model=RunAgentOut)
async def run_agent(
    body: RunAgentBody,
    factory: ServiceFactory = Depends(get_factory),
):
    """Run the agent for one turn.

    A fresh agent is bound per request; the only state shared with other
    requests is the process-wide proverb store.
    """
    ctx = factory.create_session_ctx(thread_id=body.thread_id, run_id=body.run_id)
    history = [ChatTurn(role=m.role, content=m.content) for m in body.history]
    agent = factory.create_agent(ctx, history)

    result = await agent.run(ctx, body.user_input)
    if result.failed:
        logger.warning("Run %s (thread %s) failed", result.run_id, result.thread_id)
    return _to_out(result)


def _to_out(result: RunResult) -> RunAgentOut:
    return RunAgentOut(
        thread_id=result.thread_id,
        run_id=result.run_id,
        reply=result.reply,
        failed=result.failed,
        tool_calls=[
            ToolCallOut(
                name=c.name,
                arguments=c.arguments,
                output=c.output,
                error=c.error,
                duration_ms=round(c.duration_ms, 3),
            )
            for c in result.tool_calls
        ],
        state=(
            ProverbsStateOut(proverbs=list(result.state.proverbs))
            if result.state is not None else None
        ),
    )
