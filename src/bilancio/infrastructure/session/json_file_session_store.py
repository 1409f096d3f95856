"""Session persistence in a JSON file under the state directory."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from bilancio_auth import UserInfo

from bilancio.application.ports.session_store import StoredSession

logger = logging.getLogger(__name__)


class JsonFileSessionStore:
    """Stores ``{"token": ..., "user": {...}}`` in a single file.

    The file holds a bearer token, so it is created readable by the owner
    only. An unreadable or malformed file counts as "no session".
    """

    def __init__(self, path: Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StoredSession | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            token = data["token"]
            user = UserInfo.from_dict(data["user"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return None
        if not isinstance(token, str) or not token:
            return None
        return StoredSession(token=token, user=user)

    def save(self, session: StoredSession) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"token": session.token, "user": session.user.to_dict()})
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.debug("Session saved to %s", self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
