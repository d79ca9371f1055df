"""
adapters.cli.main - CLI adapter for the Proverbs Agent.

Mirrors src/adapters/rest/ but for terminal use. Uses the same
ServiceFactory, ToolRegistry and AgentExecutor as the REST API so all
behaviour is identical. The proverb list lives in this process only.

Commands
--------
  chat       Interactive chat session against an in-process agent
  ask        One-shot question
  tools      Show the tool catalog
  serve      Run the REST API with uvicorn

Usage
-----
  python src/adapters/cli/main.py chat
  python src/adapters/cli/main.py ask "add 'a stitch in time saves nine'"
  python src/adapters/cli/main.py serve --port 8000
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# ── Ensure src/ is on the path ──
_SRC = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(_SRC))

import typer
from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from application.dto import ChatTurn, RunResult
from domain.exceptions import ConfigurationError
from factory import ServiceFactory
from infrastructure.config import Settings
from infrastructure.logging_setup import configure_logging

__version__ = "0.1.0"

console = Console()
app = typer.Typer(
    help="Proverbs Agent CLI",
    add_completion=False,
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _make_factory() -> ServiceFactory:
    """Build the ServiceFactory or exit with a user-friendly error."""
    config = Settings.from_env()
    configure_logging("WARNING" if config.log_level == "INFO" else config.log_level)
    try:
        return ServiceFactory(config)
    except ConfigurationError as exc:
        console.print(Panel(str(exc), title="Configuration error", border_style="red"))
        raise typer.Exit(code=1)


def _print_result(result: RunResult) -> None:
    """Show tool calls, the reply and, after a mutation, the resynced list."""
    if result.tool_calls:
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Tool")
        table.add_column("Arguments")
        table.add_column("Result")
        for call in result.tool_calls:
            outcome = f"[red]{call.error}[/red]" if call.error else "[green]ok[/green]"
            args = ", ".join(f"{k}={v}" for k, v in call.arguments.items())
            table.add_row(call.name, args or "-", outcome)
        console.print(table)

    border = "red" if result.failed else "green"
    console.print(Panel(Markdown(result.reply), title="ProverbsAgent", border_style=border))

    if result.state is not None:
        _print_proverbs(result.state.proverbs)


def _print_proverbs(proverbs) -> None:
    if not proverbs:
        console.print("[dim]The proverb list is empty.[/dim]")
        return
    for i, proverb in enumerate(proverbs, 1):
        console.print(f"  [bold]{i}.[/bold] {proverb}")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"proverbs-agent v{__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Commands: Agent
# ---------------------------------------------------------------------------

@app.command()
def ask(
    question: str = typer.Argument(..., help="What to ask the agent"),
) -> None:
    """Ask a single question and exit."""
    factory = _make_factory()

    async def _run() -> None:
        ctx = factory.create_session_ctx()
        agent = factory.create_agent(ctx)
        with console.status("[bold cyan]Thinking…", spinner="dots"):
            result = await agent.run(ctx, question)
        _print_result(result)

    asyncio.run(_run())


@app.command()
def chat() -> None:
    """Start an interactive chat session."""
    factory = _make_factory()

    async def _run() -> None:
        ctx = factory.create_session_ctx()
        history: list[ChatTurn] = []

        console.print(Panel(
            "[bold]Proverbs Agent Chat[/bold]\n"
            "Ask about proverbs or the weather.\n"
            "Type [bold]/list[/bold] to show the proverbs, "
            "[bold]exit[/bold] / [bold]quit[/bold] to stop.",
            border_style="cyan",
        ))

        while True:
            try:
                user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")
            except (KeyboardInterrupt, EOFError):
                console.print("\n[dim]Goodbye![/dim]")
                break

            if user_input.strip().lower() in ("exit", "quit", "q", "bye"):
                console.print("[dim]Goodbye![/dim]")
                break

            if user_input.strip() == "/list":
                _print_proverbs(factory.store.get_all())
                continue

            if not user_input.strip():
                continue

            # New run, same thread: fresh agent, history resent like a REST client would
            ctx.new_request()
            agent = factory.create_agent(ctx, history)
            with console.status("[bold cyan]Thinking…", spinner="dots"):
                result = await agent.run(ctx, user_input)

            console.print()
            _print_result(result)
            history.append(ChatTurn(role="user", content=user_input))
            history.append(ChatTurn(role="assistant", content=result.reply))

    asyncio.run(_run())


# ---------------------------------------------------------------------------
# Commands: Catalog / server
# ---------------------------------------------------------------------------

@app.command()
def tools() -> None:
    """Show the tools the agent can call."""
    factory = _make_factory()

    table = Table(title="Tool catalog", box=box.ROUNDED, header_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Arguments")
    table.add_column("Mutates", justify="center")
    for entry in factory.registry.describe():
        args = ", ".join(entry["input_schema"].get("properties", {}).keys())
        table.add_row(
            entry["name"],
            entry["description"],
            args or "-",
            "✔" if entry["mutates_state"] else "",
        )
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind address (default: API_HOST or 0.0.0.0)"),
    port: int = typer.Option(None, help="Port (default: API_PORT or 8000)"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes"),
) -> None:
    """Run the REST API."""
    import uvicorn

    config = Settings.from_env()
    uvicorn.run(
        "adapters.rest.app:app",
        host=host or config.api_host,
        port=port or config.api_port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Global version option
# ---------------------------------------------------------------------------

@app.callback()
def _callback(
    version: bool = typer.Option(
        False, "--version", "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Proverbs Agent CLI"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
