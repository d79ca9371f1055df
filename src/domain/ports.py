"""
domain.ports - Abstract interfaces (Protocols) for the system boundaries.

These define WHAT the tools need without specifying HOW. Infrastructure
modules provide concrete implementations; tools depend only on these
protocols, never on concrete classes.

Using typing.Protocol (structural typing) instead of ABC: any class that
implements the methods satisfies the port without explicit inheritance.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from domain.models import ProverbsSnapshot, WeatherInfo


@runtime_checkable
class ProverbsStorePort(Protocol):
    """Shared, linearizable proverb list.

    Every operation observes a consistent prior state and its effect is
    visible atomically to every later call.
    """

    def get_all(self) -> tuple[str, ...]: ...

    def append(self, items: Iterable[str]) -> ProverbsSnapshot: ...

    def replace(self, items: Iterable[str]) -> ProverbsSnapshot: ...


@runtime_checkable
class WeatherProviderPort(Protocol):
    """Look up the weather for a fully spelled-out location."""

    def lookup(self, location: str) -> WeatherInfo: ...
