"""
infrastructure - Concrete implementations of domain ports.

Contains all vendor-specific code: LangChain/OpenAI model construction,
the in-memory proverb store, the weather provider, configuration and logging.
Depends on domain/ only (implements ports). Never imported by application/.
"""
