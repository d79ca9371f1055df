"""
infrastructure.llm.llm_builder - Centralized LLM construction.

Single source of truth for building the chat model used by the agent.
The provider is controlled by the LLM_PROVIDER environment variable.

Supported providers (both OpenAI-compatible, both via langchain_openai):
    - "github"  → GitHub Models endpoint, authenticated with GITHUB_TOKEN
    - "openai"  → OpenAI API, authenticated with OPENAI_API_KEY
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel

from domain.exceptions import ConfigurationError
from infrastructure.config import GITHUB_MODELS_ENDPOINT

logger = logging.getLogger(__name__)

_SUPPORTED_PROVIDERS = ("github", "openai")


def build_llm(
    *,
    provider: str,
    model: str,
    api_key: str,
    base_url: str = "",
    temperature: float = 0,
    max_tokens: Optional[int] = None,
) -> BaseChatModel:
    """Build a tool-calling chat model for the given provider.

    Args:
        provider: One of "github", "openai".
        model: Model name for the selected provider.
        api_key: Credential for the provider.
        base_url: Endpoint override. Defaults to the GitHub Models endpoint
                  for provider="github" and the OpenAI default otherwise.
        temperature: Sampling temperature.
        max_tokens: Maximum tokens in the reply.

    Returns:
        A configured LangChain chat model.

    Raises:
        ConfigurationError: If the provider is unknown or the credential is missing.
    """
    provider = provider.lower().strip()

    if provider not in _SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"Unsupported LLM_PROVIDER: '{provider}'. "
            "Must be 'github' or 'openai'."
        )

    if not api_key:
        if provider == "github":
            raise ConfigurationError(
                "GITHUB_TOKEN not found in configuration. "
                "Please set it in your .env file (GITHUB_TOKEN=<your-token>) "
                "or export it using: export GITHUB_TOKEN=$(gh auth token)"
            )
        raise ConfigurationError(
            "OPENAI_API_KEY not found in configuration. "
            "Please set it in your .env file (OPENAI_API_KEY=<your-key>) "
            "when LLM_PROVIDER='openai'."
        )

    from langchain_openai import ChatOpenAI

    kwargs: Dict[str, Any] = {
        "model": model,
        "temperature": temperature,
        "api_key": api_key,
    }
    if provider == "github":
        kwargs["base_url"] = base_url or GITHUB_MODELS_ENDPOINT
    elif base_url:
        kwargs["base_url"] = base_url
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens

    logger.info(
        "Building %s chat model (model=%s, endpoint=%s)",
        provider, model, kwargs.get("base_url", "default"),
    )
    return ChatOpenAI(**kwargs)
