"""HTTP client for the finance backend."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, AsyncIterator, Sequence

import httpx
from bilancio_contracts import (
    ContactRequest,
    ContactResponse,
    GetUsersResponse,
    GoogleLoginRequest,
    LoginRequest,
    LoginResponse,
    PaginatedTransactionsResponse,
    RegistrationRequest,
    TotalUpdateRequest,
)

from bilancio.application.ports.ledger_api import TransactionPage
from bilancio.domain.ledger.exceptions import PayloadValidationError
from bilancio.infrastructure.api import mappers
from bilancio.infrastructure.api.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from bilancio_auth import UserInfo

    from bilancio.application.context import SessionContext
    from bilancio.domain.ledger.entities import (
        Description,
        DescriptionCatalog,
        Total,
        Transaction,
    )
    from bilancio.domain.ledger.value_objects import TransactionDraft

logger = logging.getLogger(__name__)


class BilancioApiClient:
    """HTTP client wrapper for the backend REST API.

    The bearer token is read from the session on every request. A 401
    answer logs the session out before ``UnauthorizedError`` is raised.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionContext,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> BilancioApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body (None if empty)."""
        headers = {}
        token = self._session.token
        if authenticated and token:
            headers["Authorization"] = f"Bearer {token}"

        client = await self._get_client()
        logger.debug("%s %s", method, path)
        try:
            response = await client.request(
                method,
                path,
                json=json,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning("Backend timeout on %s %s: %s", method, path, e)
            msg = f"Backend did not answer {method} {path} in time"
            raise ApiConnectionError(msg) from e
        except httpx.TransportError as e:
            logger.warning("Backend connection failed on %s %s: %s", method, path, e)
            msg = f"Cannot reach backend at {self._base_url}"
            raise ApiConnectionError(msg) from e

        if response.status_code == 401:
            logger.warning("Backend rejected credentials on %s %s", method, path)
            self._session.logout()
            raise UnauthorizedError(response.text, method, path)

        if response.is_error:
            logger.warning(
                "Backend returned error %d on %s %s: %s",
                response.status_code,
                method,
                path,
                response.text[:200] if response.text else "no body",
            )
            raise ApiResponseError(response.status_code, response.text, method, path)

        if not response.content:
            return None
        try:
            return response.json(parse_float=Decimal)
        except ValueError as e:
            raise PayloadValidationError(path, reason="response is not JSON") from e

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    async def login(self, username_or_email: str, password: str) -> str:
        request = LoginRequest(username_or_email=username_or_email, password=password)
        data = await self._request(
            "POST", "/auth", json=request.to_wire(), authenticated=False
        )
        return mappers.parse_model(LoginResponse, data, "login").token

    async def google_login(self, credential: str) -> str:
        request = GoogleLoginRequest(credential=credential)
        data = await self._request(
            "POST", "/auth/google", json=request.to_wire(), authenticated=False
        )
        return mappers.parse_model(LoginResponse, data, "login").token

    async def get_user_info(self) -> UserInfo:
        return mappers.parse_user_info(await self._request("GET", "/user-info"))

    async def register(self, request: RegistrationRequest) -> None:
        await self._request(
            "POST", "/registration", json=request.to_wire(), authenticated=False
        )

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    async def list_transactions(
        self,
        page_index: int = 0,
        page_size: int = 50,
    ) -> TransactionPage:
        data = await self._request(
            "GET",
            "/transaction/list",
            params={"pageIndex": page_index, "pageSize": page_size},
        )
        page = mappers.parse_model(
            PaginatedTransactionsResponse, data, "transaction page"
        )
        return TransactionPage(
            transactions=tuple(
                mappers.transaction_from_payload(p) for p in page.transactions
            ),
            total_count=page.total_count,
            page_index=page.page_index,
            page_size=page.page_size,
        )

    async def iter_transactions(self, page_size: int = 50) -> AsyncIterator[Transaction]:
        """Yield every transaction of the user, page by page.

        Stops once ``totalCount`` items were seen or a page comes back empty.
        Offset paging shifts when the backend gains a row between two
        fetches, so an id already yielded is skipped.
        """
        page_index = 0
        fetched = 0
        seen_ids: set[int] = set()
        while True:
            page = await self.list_transactions(page_index, page_size)
            if not page.transactions:
                return
            for txn in page.transactions:
                if txn.id in seen_ids:
                    logger.debug("Skipping repeated transaction %s", txn.id)
                    continue
                seen_ids.add(txn.id)
                yield txn
            fetched += len(page.transactions)
            if fetched >= page.total_count:
                return
            page_index += 1

    async def get_transaction(self, transaction_id: int) -> Transaction:
        return mappers.parse_transaction(
            await self._request("GET", f"/transaction/{transaction_id}")
        )

    async def get_transaction_years(self) -> list[int]:
        data = await self._request("GET", "/transaction/years")
        if not isinstance(data, list) or not all(
            isinstance(y, int) and not isinstance(y, bool) for y in data
        ):
            raise PayloadValidationError("transaction years", reason="expected a list of years")
        return sorted(data)

    async def add_transaction(self, draft: TransactionDraft) -> Transaction:
        request = mappers.draft_to_add_request(draft)
        data = await self._request("POST", "/transaction/add", json=request.to_wire())
        return mappers.parse_transaction(data)

    async def update_transaction(
        self,
        transaction_id: int,
        draft: TransactionDraft,
    ) -> Transaction:
        request = mappers.draft_to_update_request(transaction_id, draft)
        data = await self._request("PUT", "/transaction/update", json=request.to_wire())
        return mappers.parse_transaction(data)

    async def delete_transaction(self, transaction_id: int) -> None:
        await self._request("DELETE", f"/transaction/delete/{transaction_id}")

    async def delete_transactions(self, transactions: Sequence[Transaction]) -> None:
        items = [mappers.transaction_to_delete_item(t) for t in transactions]
        await self._request(
            "POST",
            "/transaction/delete-transaction-list",
            json=mappers.dump_list(items),
        )

    # -------------------------------------------------------------------------
    # Totals (accounts)
    # -------------------------------------------------------------------------

    async def get_totals(self) -> list[Total]:
        return mappers.parse_totals(await self._request("GET", "/totals"))

    async def update_totals(self, totals: Sequence[TotalUpdateRequest]) -> list[Total]:
        data = await self._request(
            "POST", "/update-totals", json=mappers.dump_list(totals)
        )
        return mappers.parse_totals(data)

    # -------------------------------------------------------------------------
    # Descriptions
    # -------------------------------------------------------------------------

    async def get_descriptions(
        self,
        with_occurrences: bool = False,
    ) -> DescriptionCatalog:
        data = await self._request(
            "GET",
            "/description-list",
            params={"occurrences": str(with_occurrences).lower()},
        )
        return mappers.parse_description_catalog(data)

    async def update_description(self, description: Description) -> Description:
        request = mappers.description_to_update_request(description)
        data = await self._request(
            "POST", "/update-description", json=request.to_wire()
        )
        return mappers.parse_description(data)

    async def delete_description(self, description_id: int) -> None:
        await self._request("DELETE", f"/delete-description/{description_id}")

    # -------------------------------------------------------------------------
    # Admin / contact
    # -------------------------------------------------------------------------

    async def list_users(
        self,
        page_index: int = 0,
        page_size: int = 50,
        search: str = "",
    ) -> GetUsersResponse:
        params: dict[str, Any] = {"pageIndex": page_index, "pageSize": page_size}
        if search:
            params["search"] = search
        data = await self._request("GET", "/admin/users", params=params)
        return mappers.parse_model(GetUsersResponse, data, "user list")

    async def send_contact_message(self, request: ContactRequest) -> ContactResponse:
        data = await self._request(
            "POST", "/contact", json=request.to_wire(), authenticated=False
        )
        return mappers.parse_model(ContactResponse, data, "contact")
