"""Shared fixtures for unit tests."""

from datetime import date
from decimal import Decimal

import jwt
import pytest
from bilancio_auth import UserInfo, UserRole

from bilancio.domain.ledger.entities import Transaction
from bilancio.domain.ledger.value_objects import AccountRef, OperationType

CHECKING = AccountRef(id=1, name="Checking")
CASH = AccountRef(id=2, name="Cash")


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""
    counter = {"next_id": 1}

    def _make(
        type: OperationType = OperationType.EXPENSE,  # NOQA: A002
        amount: str = "10.00",
        on: date = date(2024, 3, 15),
        description: str | None = "Groceries",
        txn_id: int | None = None,
    ) -> Transaction:
        if txn_id is None:
            txn_id = counter["next_id"]
        counter["next_id"] = txn_id + 1
        is_withdrawal = type is OperationType.WITHDRAWAL
        return Transaction(
            id=txn_id,
            type=type,
            amount=Decimal(amount),
            date=on,
            account=CASH if is_withdrawal else CHECKING,
            description=None if is_withdrawal else description,
            source_account=CHECKING if is_withdrawal else None,
        )

    return _make


@pytest.fixture
def transaction_payload():
    """Factory for backend transaction JSON (camelCase keys)."""

    def _payload(
        txn_id: int = 1,
        type: str = "USCITA",  # NOQA: A002
        amount: object = 12.5,
        on: str = "2024-03-15",
        description: str | None = "Groceries",
        bill: dict | None = None,
        source: dict | None = None,
    ) -> dict:
        return {
            "id": txn_id,
            "type": type,
            "amount": amount,
            "description": description,
            "additionalNotes": None,
            "date": on,
            "bill": bill if bill is not None else {"id": 1, "description": "Checking"},
            "billFromWhichWithdraw": source,
        }

    return _payload


@pytest.fixture
def user_info() -> UserInfo:
    return UserInfo(
        person_id=7,
        email="anna@example.com",
        username="anna",
        role=UserRole.USER,
        firstname="Anna",
        lastname="Bianchi",
    )


@pytest.fixture
def make_token():
    """Factory for backend tokens signed with a key the client never sees."""

    def _make(**overrides) -> str:
        claims = {
            "person_id": 7,
            "email": "anna@example.com",
            "username": "anna",
            "role": "ROLE_USER",
        }
        claims.update(overrides)
        claims = {k: v for k, v in claims.items() if v is not None}
        return jwt.encode(claims, "backend-secret-not-known-to-client", algorithm="HS256")

    return _make
