"""
infrastructure.config - Typed, injectable configuration.

A frozen dataclass that can be constructed from environment or passed
explicitly in tests. Credentials are only read here; whether they are
present is checked by the ServiceFactory at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

GITHUB_MODELS_ENDPOINT = "https://models.inference.ai.azure.com"


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the proverbs agent service.

    No module-level globals; construct via from_env() or pass explicitly
    in tests.
    """
    project_root: Path

    # ── LLM Provider ────────────────────────────────────────────
    # "github" uses GitHub Models (OpenAI-compatible endpoint, GITHUB_TOKEN).
    # "openai" talks to the OpenAI API directly (OPENAI_API_KEY).
    llm_provider: str = "github"
    llm_model: str = "gpt-4o-mini"
    llm_base_url: str = GITHUB_MODELS_ENDPOINT
    llm_temperature: float = 0.0

    # Credentials
    github_token: str = ""
    openai_api_key: str = ""

    # Agent
    agent_max_iterations: int = 6
    agent_max_history: int = 50

    # Logging
    log_level: str = "INFO"

    # REST
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def active_api_key(self) -> str:
        """Return the credential for the currently active LLM provider."""
        if self.llm_provider == "openai":
            return self.openai_api_key
        return self.github_token

    @property
    def credential_env_var(self) -> str:
        """Name of the environment variable that supplies active_api_key."""
        if self.llm_provider == "openai":
            return "OPENAI_API_KEY"
        return "GITHUB_TOKEN"

    @classmethod
    def from_env(cls, project_root: Optional[Path] = None) -> Settings:
        """Build Settings from the environment (and a .env file, if present)."""
        from dotenv import load_dotenv
        load_dotenv()

        root = project_root or Path(__file__).resolve().parent.parent.parent
        provider = os.getenv("LLM_PROVIDER", "github").lower().strip()
        default_base_url = GITHUB_MODELS_ENDPOINT if provider == "github" else ""

        origins = tuple(
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        )

        return cls(
            project_root=root,
            llm_provider=provider,
            llm_model=os.getenv("LLM_MODEL", "gpt-4o-mini"),
            llm_base_url=os.getenv("LLM_BASE_URL", default_base_url),
            llm_temperature=float(os.getenv("LLM_TEMPERATURE", "0")),
            github_token=os.getenv("GITHUB_TOKEN", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            agent_max_iterations=int(os.getenv("AGENT_MAX_ITERATIONS", "6")),
            agent_max_history=int(os.getenv("AGENT_MAX_HISTORY", "50")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            cors_origins=origins or ("*",),
        )
