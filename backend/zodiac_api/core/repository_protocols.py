"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Entry persistence accessed through the EntryStore Protocol
    - Implementations provided by shell via dependency injection (app.state)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure entry_log functions
      they call are never async themselves
"""

from typing import Protocol

from zodiac_api.core.domain_types import Entry


class EntryStore(Protocol):
    """Contract for the bounded entry log - implemented by shell."""
    async def initialize(self) -> None: ...
    async def append(self, entry: Entry) -> None: ...
    async def recent(self, n: int | None = None) -> list[Entry]: ...
    async def all(self) -> list[Entry]: ...
