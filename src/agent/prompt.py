"""
agent.prompt - Identity and system prompt for the proverbs agent.

The description is the only behavioural guidance the model gets; calling
get_proverbs before discussing the list is best-effort, not enforced.
"""

from __future__ import annotations

from agent.tools.registry import ToolRegistry

AGENT_NAME = "ProverbsAgent"

AGENT_DESCRIPTION = (
    "A helpful assistant that helps manage and discuss proverbs. "
    "You have tools available to add, set, or retrieve proverbs from the list. "
    "When discussing proverbs, ALWAYS use the get_proverbs tool to see the current "
    "list before mentioning, updating, or discussing proverbs with the user."
)


def build_system_prompt(registry: ToolRegistry) -> str:
    """Build the system prompt with the registered tools listed.

    Args:
        registry: The tool registry with all registered tools.

    Returns:
        The system prompt string. Contains no template braces, so it is safe
        to pass to ChatPromptTemplate as-is.
    """
    tool_lines = "\n".join(
        f"- {tool.name}: {tool.description}" for tool in registry.all()
    )
    return (
        f"You are {AGENT_NAME}. {AGENT_DESCRIPTION}\n\n"
        f"AVAILABLE TOOLS:\n{tool_lines}\n\n"
        "RULES:\n"
        "1. Call get_proverbs before mentioning, updating, or discussing proverbs.\n"
        "2. To add proverbs to the existing list → add_proverbs. "
        "To rewrite, reorder or remove proverbs → set_proverbs with the full new list.\n"
        "3. Never invent the content of the list; only report what the tools return.\n"
        "4. For weather questions → get_weather with the fully spelled-out location."
    )
