"""Log in with credentials or a Google credential."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio_auth import TokenService

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio_auth import UserInfo

    from bilancio.application.cache import QueryCache
    from bilancio.application.context import SessionContext
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort


class LoginCommand:
    """Exchange credentials for a token and start the session.

    The token is decoded locally first so a malformed token is rejected
    before the user info request is made.
    """

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        session: SessionContext,
        cache: QueryCache,
        token_service: TokenService | None = None,
    ):
        self._api = ledger_api
        self._session = session
        self._cache = cache
        self._token_service = token_service or TokenService()

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> LoginCommand:
        return cls(
            ledger_api=factory.ledger_api(),
            session=factory.session,
            cache=factory.cache,
        )

    async def execute(self, username_or_email: str, password: str) -> UserInfo:
        token = await self._api.login(username_or_email, password)
        return await self._start_session(token)

    async def execute_google(self, credential: str) -> UserInfo:
        token = await self._api.google_login(credential)
        return await self._start_session(token)

    async def _start_session(self, token: str) -> UserInfo:
        payload = self._token_service.decode(token)
        # user info is fetched with the new token
        self._session.login_success(token, payload.to_user())
        try:
            user = await self._api.get_user_info()
        except Exception:
            self._session.logout()
            raise
        self._session.update_user(user)
        self._cache.invalidate(CacheTag.AUTH)
        return user
