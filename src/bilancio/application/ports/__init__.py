from bilancio.application.ports.ledger_api import LedgerApiPort
from bilancio.application.ports.session_store import SessionStore, StoredSession

__all__ = [
    "LedgerApiPort",
    "SessionStore",
    "StoredSession",
]
