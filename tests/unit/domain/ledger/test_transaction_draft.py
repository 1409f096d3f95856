"""Tests for transaction input validation."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from bilancio.domain.ledger.exceptions import (
    InvalidAmountError,
    InvalidTransactionDateError,
    MissingSourceAccountError,
    MissingTransactionDateError,
    UnexpectedSourceAccountError,
)
from bilancio.domain.ledger.value_objects import (
    OperationType,
    TransactionDraft,
    parse_amount,
)
from bilancio.domain.shared import ErrorCode


class TestParseAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12,50", Decimal("12.50")),
            ("12.5", Decimal("12.5")),
            (" 7 ", Decimal("7")),
            (3, Decimal("3")),
            (0.1, Decimal("0.1")),
            (Decimal("4.20"), Decimal("4.20")),
            ("1.500", Decimal("1.50")),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "0", "-3", "0,00", None, True, "1.234", "NaN", "Infinity"],
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidAmountError):
            parse_amount(raw)


class TestTransactionDraft:
    def test_expense(self):
        draft = TransactionDraft.create(
            type=OperationType.EXPENSE,
            amount="45,10",
            date=date(2024, 2, 3),
            account_id=1,
            description=" Groceries ",
            additional_notes="  ",
        )

        assert draft.amount == Decimal("45.10")
        assert draft.description == "Groceries"
        assert draft.additional_notes is None
        assert draft.source_account_id is None

    def test_type_from_label_and_datetime(self):
        draft = TransactionDraft.create(
            type="income",
            amount=100,
            date=datetime(2024, 2, 3, 10, 30),
            account_id=1,
        )

        assert draft.type is OperationType.INCOME
        assert draft.date == date(2024, 2, 3)

    def test_withdrawal_drops_description(self):
        draft = TransactionDraft.create(
            type=OperationType.WITHDRAWAL,
            amount="50",
            date=date(2024, 2, 3),
            account_id=2,
            source_account_id=1,
            description="ignored",
        )

        assert draft.description is None
        assert draft.source_account_id == 1

    def test_withdrawal_requires_source_account(self):
        with pytest.raises(MissingSourceAccountError):
            TransactionDraft.create(
                type=OperationType.WITHDRAWAL,
                amount="50",
                date=date(2024, 2, 3),
                account_id=2,
            )

    def test_income_rejects_source_account(self):
        with pytest.raises(UnexpectedSourceAccountError):
            TransactionDraft.create(
                type=OperationType.INCOME,
                amount="50",
                date=date(2024, 2, 3),
                account_id=2,
                source_account_id=1,
            )

    def test_future_dates_allowed(self):
        draft = TransactionDraft.create(
            type=OperationType.EXPENSE,
            amount="1",
            date=date(2999, 1, 1),
            account_id=1,
        )

        assert draft.date.year == 2999

    def test_dates_before_1900_rejected(self):
        with pytest.raises(InvalidTransactionDateError):
            TransactionDraft.create(
                type=OperationType.EXPENSE,
                amount="1",
                date=date(1899, 12, 31),
                account_id=1,
            )

    @pytest.mark.parametrize("value", [None, "2024-03-15", 20240315])
    def test_missing_or_non_date_rejected(self, value):
        with pytest.raises(MissingTransactionDateError) as exc_info:
            TransactionDraft.create(
                type="USCITA",
                amount="1",
                date=value,
                account_id=1,
            )

        assert exc_info.value.code == ErrorCode.INVALID_DATE
