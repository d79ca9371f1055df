"""
factory - Composition root for the proverbs agent service.

ALL dependency wiring happens here. No other module constructs its own
dependencies. Adapters (CLI, REST) call this factory to get a fully
configured agent per run.

Usage:
    from factory import ServiceFactory
    from infrastructure.config import Settings

    config = Settings.from_env()
    factory = ServiceFactory(config)   # fails fast without a model credential

    ctx = factory.create_session_ctx(thread_id="t-1")
    agent = factory.create_agent(ctx)
    result = await agent.run(ctx, user_input)
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from langchain_core.language_models import BaseChatModel

from infrastructure.config import Settings
from infrastructure.llm.llm_builder import build_llm
from infrastructure.persistence.proverbs_store import InMemoryProverbsStore
from infrastructure.weather import SyntheticWeatherProvider
from application.context import SessionContext
from application.dto import ChatTurn
from domain.ports import ProverbsStorePort, WeatherProviderPort
from agent.tools.registry import ToolRegistry
from agent.tools.hooks import ToolCallHook, log_tool_call
from agent.tools.get_proverbs import GetProverbsTool
from agent.tools.add_proverbs import AddProverbsTool
from agent.tools.set_proverbs import SetProverbsTool
from agent.tools.get_weather import GetWeatherTool
from agent.memory import ConversationMemory
from agent.prompt import AGENT_NAME, build_system_prompt
from agent.executor import AgentExecutor

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Composition root: wires all dependencies together.

    Everything expensive or shared (chat model, store, tool catalog) is
    built once here at startup; create_agent() only binds them per run.
    Construction fails with ConfigurationError when the model credential
    is missing, before any endpoint can serve.
    """

    def __init__(
        self,
        config: Settings,
        *,
        llm: Optional[BaseChatModel] = None,
        store: Optional[ProverbsStorePort] = None,
        weather: Optional[WeatherProviderPort] = None,
        hooks: Optional[Iterable[ToolCallHook]] = None,
    ):
        self._config = config
        self._llm = llm if llm is not None else self._build_agent_llm()
        self._store: ProverbsStorePort = store if store is not None else InMemoryProverbsStore()
        self._weather: WeatherProviderPort = weather or SyntheticWeatherProvider()
        self._registry = self._build_registry(
            [log_tool_call] if hooks is None else list(hooks)
        )
        self._system_prompt = build_system_prompt(self._registry)
        logger.info(
            "ServiceFactory ready (provider=%s, model=%s, tools=%s)",
            config.llm_provider, config.llm_model, ", ".join(self._registry.names()),
        )

    @property
    def config(self) -> Settings:
        return self._config

    @property
    def store(self) -> ProverbsStorePort:
        """The single process-wide proverb store."""
        return self._store

    @property
    def registry(self) -> ToolRegistry:
        """The tool catalog, built once at startup."""
        return self._registry

    # ------------------------------------------------------------------
    # Per-run creation
    # ------------------------------------------------------------------

    def create_session_ctx(
        self,
        thread_id: Optional[str] = None,
        run_id: Optional[str] = None,
    ) -> SessionContext:
        """Create a SessionContext bound to the shared store."""
        ctx = SessionContext(proverbs=self._store)
        if thread_id:
            ctx.thread_id = thread_id
        if run_id:
            ctx.run_id = run_id
        return ctx

    def create_agent(
        self,
        ctx: SessionContext,
        history: Iterable[ChatTurn] = (),
    ) -> AgentExecutor:
        """Create a fresh AgentExecutor for one run.

        Args:
            ctx:     Run context carrying the shared store handle.
            history: Prior conversation turns resent by the client.

        Returns:
            AgentExecutor bound to the agent identity, the whole tool
            catalog and the chat model.
        """
        memory = ConversationMemory(max_messages=self._config.agent_max_history)
        loaded = memory.load_turns(history)
        logger.debug("Created agent for run %s with %d prior message(s)", ctx.run_id, loaded)

        return AgentExecutor(
            llm=self._llm,
            tools=self._registry,
            memory=memory,
            system_prompt=self._system_prompt,
            max_iterations=self._config.agent_max_iterations,
            name=AGENT_NAME,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_agent_llm(self) -> BaseChatModel:
        """Build the chat model. Raises ConfigurationError without a credential."""
        return build_llm(
            provider=self._config.llm_provider,
            model=self._config.llm_model,
            api_key=self._config.active_api_key,
            base_url=self._config.llm_base_url,
            temperature=self._config.llm_temperature,
        )

    def _build_registry(self, hooks: list[ToolCallHook]) -> ToolRegistry:
        registry = ToolRegistry(hooks=hooks)
        registry.register(GetProverbsTool())
        registry.register(AddProverbsTool())
        registry.register(SetProverbsTool())
        registry.register(GetWeatherTool(self._weather))
        return registry
