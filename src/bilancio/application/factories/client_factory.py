"""Client factory protocol for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.context import SessionContext
    from bilancio.application.ports import LedgerApiPort


class ClientFactory(Protocol):
    """Protocol wiring queries and commands to one session."""

    @property
    def session(self) -> SessionContext:
        """Session the backend calls are made for."""
        ...

    @property
    def cache(self) -> QueryCache:
        """Query cache shared by all queries and commands of the session."""
        ...

    @property
    def page_size(self) -> int:
        """Page size used when walking the transaction list."""
        ...

    def ledger_api(self) -> LedgerApiPort:
        """Get the backend port."""
        ...
