"""
agent.tools.registry - Tool registration, discovery, and invocation.

The catalog is an explicit static table (name → input schema → handler →
output schema) built once at startup by the ServiceFactory. Every call goes
through dispatch(), which validates the input, runs the handler, records
the call on the SessionContext and notifies the observability hooks.

Also provides LangChain-compatible tool wrappers bound to a SessionContext.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Iterable

from langchain_core.tools import StructuredTool, ToolException
from pydantic import BaseModel, ValidationError

from application.context import SessionContext
from application.dto import ToolCallRecord
from domain.exceptions import InvalidToolInput, ToolNotFoundError
from agent.tools.base import BaseTool, ToolResult
from agent.tools.hooks import ToolCallHook

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Manages tool registration and invocation."""

    def __init__(self, hooks: Iterable[ToolCallHook] = ()):
        self._tools: dict[str, BaseTool] = {}
        self._hooks: list[ToolCallHook] = list(hooks)

    def register(self, tool: BaseTool) -> None:
        """Register a tool by its name."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool
        logger.debug("Registered tool: %s", tool.name)

    def add_hook(self, hook: ToolCallHook) -> None:
        self._hooks.append(hook)

    def get(self, name: str) -> BaseTool:
        """Get a tool by name."""
        if name not in self._tools:
            raise ToolNotFoundError(f"Tool '{name}' not registered")
        return self._tools[name]

    def all(self) -> list[BaseTool]:
        """Return all registered tools."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        """Return all registered tool names."""
        return list(self._tools.keys())

    def describe(self) -> list[dict[str, Any]]:
        """Return name, description and input/output JSON schemas for every tool."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "mutates_state": tool.mutates_state,
                "input_schema": tool.get_schema().model_json_schema(),
                "output_schema": tool.get_output_schema().model_json_schema(by_alias=True),
            }
            for tool in self._tools.values()
        ]

    def validate(self, name: str, arguments: dict[str, Any]) -> BaseModel:
        """Validate raw arguments against the tool's input schema.

        Raises:
            ToolNotFoundError: unknown tool name.
            InvalidToolInput: the arguments violate the schema.
        """
        tool = self.get(name)
        try:
            return tool.get_schema().model_validate(arguments)
        except ValidationError as exc:
            raise InvalidToolInput(name, _format_validation_error(exc)) from exc

    async def dispatch(self, name: str, ctx: SessionContext, **kwargs: Any) -> ToolResult:
        """Validate, execute and record a single tool call.

        The handler only runs once validation has passed, so a rejected call
        never touches the store. Failures are recorded and re-raised.
        """
        tool = self.get(name)
        started = time.perf_counter()
        arguments: dict[str, Any] = dict(kwargs)
        try:
            validated = self.validate(name, kwargs)
            arguments = validated.model_dump()
            result = await tool.execute(ctx, **arguments)
        except Exception as exc:
            message = exc.message if isinstance(exc, InvalidToolInput) else str(exc)
            self._record(ctx, ToolCallRecord(
                name=name,
                arguments=arguments,
                error=message,
                duration_ms=_elapsed_ms(started),
            ))
            raise

        self._record(ctx, ToolCallRecord(
            name=name,
            arguments=arguments,
            output=result.data,
            duration_ms=_elapsed_ms(started),
            snapshot=result.snapshot,
        ))
        return result

    async def invoke(self, name: str, ctx: SessionContext, **kwargs: Any) -> str:
        """Invoke a tool by name.

        Returns the string output (what the LLM sees).
        """
        result = await self.dispatch(name, ctx, **kwargs)
        return result.output

    def to_langchain_tools(self, ctx: SessionContext) -> list[StructuredTool]:
        """Convert all registered tools to LangChain StructuredTools.

        Binds the SessionContext so LangChain's agent can call them. The
        wrappers advertise the input schema as plain JSON schema, so LangChain
        passes raw arguments through and dispatch() does the validating. That
        way a rejected call is recorded and seen by the hooks like any other,
        then reported back to the model as a tool error.
        """
        lc_tools = []
        for tool in self._tools.values():

            # Create closures that capture both tool and ctx
            def _make_funcs(t: BaseTool, context: SessionContext):
                def func(**kwargs: Any) -> str:
                    # This function always runs inside a thread-pool worker
                    # (via run_in_executor), so there is no running event loop
                    # in this thread; asyncio.run() creates a fresh one.
                    try:
                        return asyncio.run(self.invoke(t.name, context, **kwargs))
                    except InvalidToolInput as exc:
                        raise ToolException(str(exc)) from exc

                async def coroutine(**kwargs: Any) -> str:
                    try:
                        return await self.invoke(t.name, context, **kwargs)
                    except InvalidToolInput as exc:
                        raise ToolException(str(exc)) from exc

                return func, coroutine

            func, coroutine = _make_funcs(tool, ctx)
            lc_tools.append(StructuredTool.from_function(
                func=func,
                coroutine=coroutine,
                name=tool.name,
                description=tool.description,
                args_schema=tool.get_schema().model_json_schema(),
                handle_tool_error=True,
            ))
        return lc_tools

    def _record(self, ctx: SessionContext, record: ToolCallRecord) -> None:
        ctx.tool_calls.append(record)
        for hook in self._hooks:
            try:
                hook(ctx, record)
            except Exception:
                logger.exception("Tool-call hook %r failed for '%s'", hook, record.name)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "input"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
