"""
agent.executor - Agent execution engine.

The single class that runs the LLM + tool selection loop for one run.
No component construction, no global state, no business logic: tools read
and write the shared store only through the SessionContext.
"""

from __future__ import annotations

import asyncio
import logging

from langchain.agents import AgentExecutor as LangChainAgentExecutor
from langchain.agents import create_tool_calling_agent
from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from application.context import SessionContext
from application.dto import RunResult
from agent.memory import ConversationMemory
from agent.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

FRIENDLY_ERROR_REPLY = (
    "I'm sorry, I ran into a problem while processing your request. "
    "Please try again, or rephrase your question."
)


class AgentExecutor:
    """Runs the LLM + tool selection loop.

    Constructed by factory.py with all dependencies injected, one instance
    per run. All shared state flows through SessionContext.proverbs.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        tools: ToolRegistry,
        memory: ConversationMemory,
        system_prompt: str,
        max_iterations: int = 6,
        name: str = "agent",
    ):
        self._tools = tools
        self._memory = memory
        self._system_prompt = system_prompt
        self._llm = llm
        self._max_iterations = max_iterations
        self.name = name

    @property
    def memory(self) -> ConversationMemory:
        return self._memory

    def _build_executor(self, ctx: SessionContext) -> LangChainAgentExecutor:
        """Build the LangChain agent executor with tools bound to context."""
        lc_tools = self._tools.to_langchain_tools(ctx)

        prompt = ChatPromptTemplate.from_messages([
            ("system", self._system_prompt),
            MessagesPlaceholder(variable_name="chat_history"),
            ("human", "{input}"),
            MessagesPlaceholder(variable_name="agent_scratchpad"),
        ])

        agent = create_tool_calling_agent(
            llm=self._llm,
            tools=lc_tools,
            prompt=prompt,
        )

        return LangChainAgentExecutor(
            agent=agent,
            tools=lc_tools,
            verbose=False,
            handle_parsing_errors=True,
            max_iterations=self._max_iterations,
            return_intermediate_steps=True,
        )

    async def run(self, ctx: SessionContext, user_input: str) -> RunResult:
        """Process a user message and return the agent's reply plus tool effects.

        The synchronous LangChain executor runs in the default thread pool so
        concurrent runs don't block the event loop. Cancelling the awaiting
        task does not roll back a store mutation that already started.

        Args:
            ctx:        Run context (store handle, ids, tool-call log).
            user_input: The user's new message text.

        Returns:
            RunResult with the reply, every tool call and the last snapshot
            produced by a state-mutating tool (None if nothing changed).
        """
        executor = self._build_executor(ctx)

        logger.info(
            "Agent %s processing (thread=%s, run=%s): %s",
            self.name, ctx.thread_id, ctx.run_id, user_input[:80],
        )

        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(
                None,
                executor.invoke,
                {"input": user_input, "chat_history": self._memory.messages},
            )
        except Exception:
            logger.exception(
                "Agent execution failed for run %s, returning friendly error",
                ctx.run_id,
            )
            self._memory.add_user_message(user_input)
            self._memory.add_ai_message(FRIENDLY_ERROR_REPLY)
            return RunResult(
                thread_id=ctx.thread_id,
                run_id=ctx.run_id,
                reply=FRIENDLY_ERROR_REPLY,
                tool_calls=list(ctx.tool_calls),
                state=ctx.latest_snapshot,
                failed=True,
            )

        output = response.get("output", "I couldn't generate a response.")
        if not isinstance(output, str):
            output = str(output)
        steps = response.get("intermediate_steps", [])
        logger.info(
            "Agent finished: %d tool step(s), %d recorded call(s), output starts with: %s",
            len(steps), len(ctx.tool_calls), output[:80],
        )

        self._memory.add_user_message(user_input)
        self._memory.add_ai_message(output)

        return RunResult(
            thread_id=ctx.thread_id,
            run_id=ctx.run_id,
            reply=output,
            tool_calls=list(ctx.tool_calls),
            state=ctx.latest_snapshot,
        )
