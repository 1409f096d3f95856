"""Port for the finance backend.

Each method corresponds to one backend endpoint and returns validated
domain objects; implementations fail closed on unexpected payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Protocol, Sequence

from bilancio_auth import UserInfo
from bilancio_contracts import (
    ContactRequest,
    ContactResponse,
    GetUsersResponse,
    RegistrationRequest,
    TotalUpdateRequest,
)

from bilancio.domain.ledger.entities import (
    Description,
    DescriptionCatalog,
    Total,
    Transaction,
)
from bilancio.domain.ledger.value_objects import TransactionDraft


@dataclass(frozen=True)
class TransactionPage:
    transactions: tuple[Transaction, ...]
    total_count: int
    page_index: int
    page_size: int


class LedgerApiPort(Protocol):
    """Backend operations used by queries and commands."""

    # Auth
    async def login(self, username_or_email: str, password: str) -> str: ...

    async def google_login(self, credential: str) -> str: ...

    async def get_user_info(self) -> UserInfo: ...

    async def register(self, request: RegistrationRequest) -> None: ...

    # Transactions
    async def list_transactions(
        self,
        page_index: int = 0,
        page_size: int = 50,
    ) -> TransactionPage: ...

    def iter_transactions(self, page_size: int = 50) -> AsyncIterator[Transaction]: ...

    async def get_transaction(self, transaction_id: int) -> Transaction: ...

    async def get_transaction_years(self) -> list[int]: ...

    async def add_transaction(self, draft: TransactionDraft) -> Transaction: ...

    async def update_transaction(
        self,
        transaction_id: int,
        draft: TransactionDraft,
    ) -> Transaction: ...

    async def delete_transaction(self, transaction_id: int) -> None: ...

    async def delete_transactions(self, transactions: Sequence[Transaction]) -> None: ...

    # Totals (accounts)
    async def get_totals(self) -> list[Total]: ...

    async def update_totals(self, totals: Sequence[TotalUpdateRequest]) -> list[Total]: ...

    # Descriptions
    async def get_descriptions(
        self,
        with_occurrences: bool = False,
    ) -> DescriptionCatalog: ...

    async def update_description(self, description: Description) -> Description: ...

    async def delete_description(self, description_id: int) -> None: ...

    # Admin / misc
    async def list_users(
        self,
        page_index: int = 0,
        page_size: int = 50,
        search: str = "",
    ) -> GetUsersResponse: ...

    async def send_contact_message(self, request: ContactRequest) -> ContactResponse: ...
