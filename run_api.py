"""
Run the Proverbs Agent REST API.

Usage:
    python run_api.py

Environment variables:
    GITHUB_TOKEN          Model credential (required when LLM_PROVIDER=github).
                          Put it in .env or run: export GITHUB_TOKEN=$(gh auth token)
    LLM_PROVIDER          "github" or "openai" (default: github)
    LLM_MODEL             Model name (default: gpt-4o-mini)
    LLM_BASE_URL          Endpoint override (default: GitHub Models endpoint)
    OPENAI_API_KEY        Required when LLM_PROVIDER=openai
    AGENT_MAX_ITERATIONS  Max tool-calling iterations per run (default: 6)
    LOG_LEVEL             Logging level (default: INFO)
    API_HOST / API_PORT   Bind address (default: 0.0.0.0:8000)
    CORS_ORIGINS          Comma-separated allowed origins (default: *)
"""

import os
import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "adapters.rest.app:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
    )
