"""Session store implementations."""

from bilancio.infrastructure.session.in_memory_session_store import (
    InMemorySessionStore,
)
from bilancio.infrastructure.session.json_file_session_store import (
    JsonFileSessionStore,
)

__all__ = ["InMemorySessionStore", "JsonFileSessionStore"]
