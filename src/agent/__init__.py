"""
agent - Conversational agent orchestration layer.

Contains the tool catalog, per-run memory, the system prompt, and the executor
that runs the LLM+tool loop. Tools reach the shared proverb store only through
the SessionContext they are handed. Depends on domain/ and application/.
Never imports from infrastructure/.
"""
