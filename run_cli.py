"""
Run the Proverbs Agent CLI.

Usage:
    python run_cli.py [COMMAND] [OPTIONS]

Commands:
    chat       Interactive chat session against an in-process agent
    ask        One-shot question
    tools      Show the tool catalog
    serve      Run the REST API with uvicorn

Examples:
    python run_cli.py chat
    python run_cli.py ask "What's the weather in Seattle?"
    python run_cli.py tools

Environment variables:
    GITHUB_TOKEN        Required when LLM_PROVIDER=github (the default).
                        Get one with: gh auth token
    LLM_PROVIDER        "github" or "openai" (default: github)
    LLM_MODEL           Model name (default: gpt-4o-mini)
    OPENAI_API_KEY      Required when LLM_PROVIDER=openai
    LOG_LEVEL           Logging level (default: INFO)
"""

import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

from adapters.cli.main import app

if __name__ == "__main__":
    app()
