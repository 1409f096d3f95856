"""Tests for payload -> domain conversion."""

from datetime import date
from decimal import Decimal

import pytest

from bilancio_auth import UserRole
from bilancio.domain.ledger.entities import Description
from bilancio.domain.ledger.exceptions import (
    MissingSourceAccountError,
    PayloadValidationError,
)
from bilancio.domain.ledger.value_objects import (
    AccountRef,
    OperationType,
    TransactionDraft,
)
from bilancio.domain.shared.exceptions import ErrorCode
from bilancio.infrastructure.api import mappers


class TestParseTransaction:
    def test_expense(self, transaction_payload):
        txn = mappers.parse_transaction(transaction_payload(amount=12.5))

        assert txn.id == 1
        assert txn.type is OperationType.EXPENSE
        assert txn.amount == Decimal("12.5")
        assert txn.date == date(2024, 3, 15)
        assert txn.account == AccountRef(id=1, name="Checking")
        assert txn.source_account is None

    def test_withdrawal_keeps_source_and_drops_description(self, transaction_payload):
        txn = mappers.parse_transaction(
            transaction_payload(
                type="PRELIEVO",
                description="ignored",
                bill={"id": 2, "description": "Cash"},
                source={"id": 1, "description": "Checking"},
            )
        )

        assert txn.is_withdrawal
        assert txn.description is None
        assert txn.source_account == AccountRef(id=1, name="Checking")

    def test_withdrawal_without_source_rejected(self, transaction_payload):
        with pytest.raises(PayloadValidationError, match="no source account"):
            mappers.parse_transaction(transaction_payload(type="PRELIEVO"))

    def test_expense_with_source_rejected(self, transaction_payload):
        with pytest.raises(PayloadValidationError, match="has a source account"):
            mappers.parse_transaction(transaction_payload(source={"id": 2}))

    def test_bill_without_id_rejected(self, transaction_payload):
        with pytest.raises(PayloadValidationError, match="bill has no id"):
            mappers.parse_transaction(transaction_payload(bill={"description": "x"}))

    def test_shape_errors_carry_pydantic_details(self, transaction_payload):
        data = transaction_payload(amount=-5)
        del data["date"]

        with pytest.raises(PayloadValidationError) as exc_info:
            mappers.parse_transaction(data)

        error = exc_info.value
        assert error.code is ErrorCode.INVALID_PAYLOAD
        locations = {tuple(e["loc"]) for e in error.details["errors"]}
        assert ("amount",) in locations
        assert ("date",) in locations

    def test_list_expected(self):
        with pytest.raises(PayloadValidationError, match="expected a list"):
            mappers.parse_transactions({"id": 1})

    def test_parse_list(self, transaction_payload):
        txns = mappers.parse_transactions(
            [transaction_payload(txn_id=1), transaction_payload(txn_id=2)],
        )

        assert [t.id for t in txns] == [1, 2]


class TestRequestMapping:
    def test_add_request_from_draft(self):
        draft = TransactionDraft.create(
            type=OperationType.WITHDRAWAL,
            amount="50",
            date=date(2024, 3, 5),
            account_id=2,
            source_account_id=1,
        )

        wire = mappers.draft_to_add_request(draft).to_wire()

        assert wire["type"] == "PRELIEVO"
        assert wire["amount"] == 50
        assert wire["bill"] == {"id": 2}
        assert wire["billFromWhichWithdraw"] == {"id": 1}

    def test_update_request_carries_id(self):
        draft = TransactionDraft.create(
            type="ENTRATA",
            amount="1500,00",
            date=date(2024, 3, 1),
            account_id=1,
            description="Salary",
        )

        wire = mappers.draft_to_update_request(42, draft).to_wire()

        assert wire["id"] == 42
        assert wire["amount"] == 1500
        assert wire["description"] == "Salary"

    def test_delete_item(self, make_transaction):
        txn = make_transaction(OperationType.WITHDRAWAL, "20.25")

        wire = mappers.transaction_to_delete_item(txn).to_wire()

        assert wire["amount"] == 20.25
        assert wire["bill"] == {"id": 2}
        assert wire["billFromWhichWithdraw"] == {"id": 1}

    def test_draft_from_transaction_applies_changes(self, make_transaction):
        txn = make_transaction(OperationType.EXPENSE, "10.00")

        draft = mappers.draft_from_transaction(txn, amount="12,30")

        assert draft.amount == Decimal("12.30")
        assert draft.description == "Groceries"
        assert draft.account_id == 1

    def test_draft_from_transaction_revalidates(self, make_transaction):
        txn = make_transaction(OperationType.EXPENSE)

        with pytest.raises(MissingSourceAccountError):
            mappers.draft_from_transaction(txn, type=OperationType.WITHDRAWAL)


class TestDescriptionsAndTotals:
    def test_catalog(self):
        catalog = mappers.parse_description_catalog(
            {
                "earningDescription": [
                    {"id": 1, "type": "ENTRATA", "description": "Salary"},
                ],
                "expenseDescription": [
                    {"id": 2, "type": "USCITA", "description": "Rent", "occurrences": 12},
                ],
            }
        )

        assert [d.description for d in catalog.earning] == ["Salary"]
        assert catalog.expense[0].occurrences == 12

    def test_withdrawal_description_rejected(self):
        with pytest.raises(PayloadValidationError):
            mappers.parse_description({"id": 1, "type": "PRELIEVO", "description": "x"})

    def test_update_request(self):
        description = Description(id=3, type=OperationType.EXPENSE, description="Food")

        wire = mappers.description_to_update_request(description).to_wire()

        assert wire == {"id": 3, "type": "USCITA", "description": "Food"}

    def test_totals_allow_negative_balance(self):
        totals = mappers.parse_totals(
            [
                {"id": 1, "amount": -20.5, "description": "Card", "canDelete": False},
                {"id": 2, "amount": 100, "description": "Cash"},
            ]
        )

        assert totals[0].amount == Decimal("-20.5")
        assert totals[0].can_delete is False
        assert totals[1].can_delete is True


class TestUserInfo:
    def test_parse(self):
        user = mappers.parse_user_info(
            {
                "person_id": 7,
                "email": "anna@example.com",
                "username": "anna",
                "role": "ROLE_ADMIN",
                "firstname": "Anna",
            }
        )

        assert user.role is UserRole.ADMIN
        assert user.is_admin
        assert user.display_name == "Anna"

    def test_unknown_role_rejected(self):
        with pytest.raises(PayloadValidationError, match="unknown role"):
            mappers.parse_user_info(
                {"person_id": 7, "email": "a@b.it", "username": "a", "role": "ROOT"},
            )
