"""Tests for the backend wire models."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from bilancio_contracts import (
    AddTransactionRequest,
    BillId,
    DescriptionsResponse,
    LoginRequest,
    PaginatedTransactionsResponse,
    RegistrationForm,
    RegistrationRequest,
    TotalUpdateRequest,
    TransactionPayload,
    UserInfoResponse,
)


class TestTransactionPayload:
    def test_reads_camel_case_keys(self, transaction_payload):
        payload = TransactionPayload.model_validate(
            transaction_payload(source={"id": 2}, type="PRELIEVO"),
        )

        assert payload.bill.id == 1
        assert payload.bill.description == "Checking"
        assert payload.bill_from_which_withdraw.id == 2

    def test_float_amount_becomes_exact_decimal(self, transaction_payload):
        payload = TransactionPayload.model_validate(transaction_payload(amount=0.1))

        assert payload.amount == Decimal("0.1")

    def test_timestamp_is_cut_to_date(self, transaction_payload):
        payload = TransactionPayload.model_validate(
            transaction_payload(on="2024-03-15T23:30:00.000+00:00"),
        )

        assert payload.date == date(2024, 3, 15)

    def test_rejects_negative_amount(self, transaction_payload):
        with pytest.raises(ValidationError):
            TransactionPayload.model_validate(transaction_payload(amount=-1))

    def test_rejects_unknown_type(self, transaction_payload):
        with pytest.raises(ValidationError):
            TransactionPayload.model_validate(transaction_payload(type="TRANSFER"))

    def test_paginated_response(self, transaction_payload):
        page = PaginatedTransactionsResponse.model_validate(
            {
                "transactions": [transaction_payload()],
                "totalCount": 1,
                "pageIndex": 0,
                "pageSize": 50,
            }
        )

        assert page.total_count == 1
        assert len(page.transactions) == 1


class TestRequests:
    def test_add_request_wire_format(self):
        request = AddTransactionRequest(
            type="USCITA",
            amount=Decimal("12.50"),
            additional_notes="weekly",
            date=date(2024, 3, 15),
            bill=BillId(id=1),
        )

        wire = request.to_wire()

        assert wire == {
            "type": "USCITA",
            "amount": 12.5,
            "description": None,
            "additionalNotes": "weekly",
            "date": "2024-03-15",
            "bill": {"id": 1},
            "billFromWhichWithdraw": None,
        }

    def test_whole_amounts_are_sent_as_integers(self):
        request = TotalUpdateRequest(amount=Decimal("100.00"), description="Cash")

        assert request.to_wire()["amount"] == 100

    def test_add_request_rejects_zero_amount(self):
        with pytest.raises(ValidationError):
            AddTransactionRequest(
                type="ENTRATA",
                amount=Decimal("0"),
                date=date(2024, 1, 1),
                bill=BillId(id=1),
            )

    def test_login_request_alias(self):
        request = LoginRequest(username_or_email="mario", password="secret")

        assert request.to_wire() == {"usernameOrEmail": "mario", "password": "secret"}


class TestRegistration:
    def _form(self, **overrides):
        values = {
            "username": "mario",
            "password": "secret1",
            "confirm_password": "secret1",
            "firstname": "Mario",
            "lastname": "Rossi",
            "email": "mario@example.com",
        }
        values.update(overrides)
        return RegistrationForm(**values)

    def test_valid_form_converts_to_request(self):
        request = self._form().to_request()

        assert isinstance(request, RegistrationRequest)
        assert "confirmPassword" not in request.to_wire()

    def test_password_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Passwords do not match"):
            self._form(confirm_password="other")

    @pytest.mark.parametrize(
        "field,value",
        [("username", "ab"), ("password", "12345"), ("email", "not-an-email")],
    )
    def test_field_constraints(self, field, value):
        overrides = {field: value}
        if field == "password":
            overrides["confirm_password"] = value
        with pytest.raises(ValidationError):
            self._form(**overrides)


class TestResponses:
    def test_user_info_uses_snake_case(self):
        info = UserInfoResponse.model_validate(
            {
                "person_id": 3,
                "email": "a@b.it",
                "username": "anna",
                "role": "ROLE_USER",
            }
        )

        assert info.person_id == 3
        assert info.provider is None

    def test_descriptions_default_to_empty_lists(self):
        response = DescriptionsResponse.model_validate({})

        assert response.earning_description == []
        assert response.expense_description == []
