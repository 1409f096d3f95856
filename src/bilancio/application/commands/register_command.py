"""Register a new user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bilancio_contracts import RegistrationForm

    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort

logger = logging.getLogger(__name__)


class RegisterCommand:
    def __init__(self, ledger_api: LedgerApiPort):
        self._api = ledger_api

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> RegisterCommand:
        return cls(ledger_api=factory.ledger_api())

    async def execute(self, form: RegistrationForm) -> None:
        await self._api.register(form.to_request())
        logger.info("Registered user %s", form.username)
