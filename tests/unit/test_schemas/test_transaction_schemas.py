"""Unit tests for transaction schemas."""

from datetime import date
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from finparse.categorization import TransactionType
from finparse.schemas.classify import ClassifyResponse
from finparse.schemas.transaction import ParsedTransaction, Transaction


def make_parsed(**overrides) -> ParsedTransaction:
    fields = {
        "date": date(2024, 1, 5),
        "title": "Shop",
        "amount": 2500,
        "is_expense": True,
        "category": "Shopping",
    }
    fields.update(overrides)
    return ParsedTransaction(**fields)


class TestParsedTransaction:
    """Test suite for ParsedTransaction model."""

    def test_defaults(self):
        txn = make_parsed()

        assert isinstance(txn.id, UUID)
        assert txn.is_selected is True
        assert txn.bank is None
        assert txn.details is None

    def test_formatted_amount_expense(self):
        assert make_parsed().formatted_amount == "-₸2500"

    def test_formatted_amount_income(self):
        assert make_parsed(amount=1200.4, is_expense=False).formatted_amount == "+₸1200"

    def test_formatted_date(self):
        assert make_parsed().formatted_date == "05.01.2024"

    def test_amount_made_absolute(self):
        assert make_parsed(amount=-40).amount == 40

    def test_to_transaction(self):
        parsed = make_parsed(bank="Kaspi", details="POS purchase")

        txn = parsed.to_transaction()

        assert isinstance(txn, Transaction)
        assert txn.title == "Shop"
        assert txn.amount == 2500
        assert txn.category == "Shopping"
        assert txn.date == date(2024, 1, 5)
        assert txn.is_expense is True
        assert txn.note == ""
        assert txn.id != parsed.id
        assert txn.type == TransactionType.SHOPPING
        assert txn.card_id is None

    def test_to_transaction_with_card(self):
        card_id = uuid4()

        assert make_parsed().to_transaction(card_id=card_id).card_id == card_id

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            make_parsed(amount=amount)


class TestClassifyResponse:
    def test_missing_transactions_defaults_to_empty(self):
        response = ClassifyResponse.model_validate_json('{"error": "busy"}')

        assert response.transactions == []
        assert response.error == "busy"

    def test_unknown_fields_ignored(self):
        response = ClassifyResponse.model_validate_json(
            '{"bank": "Kaspi", "pages": 3, "transactions": [{"date": "2024-01-05", "mcc": "5411"}]}'
        )

        assert response.bank == "Kaspi"
        assert response.transactions[0].date == "2024-01-05"

    def test_wire_field_names(self):
        response = ClassifyResponse.model_validate_json(
            '{"transactions": [{"amount": -12.5, "amount_raw": "-12,50 ₸", "currency": "KZT"}],'
            ' "summary": {"total_transactions": 1, "by_category": {"другое": 1}}}'
        )

        record = response.transactions[0]
        assert record.amount == -12.5
        assert record.amount_raw == "-12,50 ₸"
        assert record.currency == "KZT"
        assert response.summary.by_category == {"другое": 1}

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            ClassifyResponse.model_validate_json('{"transactions": "none"}')

    def test_nan_amount_rejected(self):
        with pytest.raises(ValidationError):
            ClassifyResponse.model_validate({"transactions": [{"amount": float("nan")}]})


class TestTransaction:
    def test_stored_defaults(self):
        txn = Transaction(title="x", amount=1, category="Food", date=date(2024, 1, 5), is_expense=True)

        assert txn.type == TransactionType.OTHER
        assert txn.card_id is None

    def test_nan_amount_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(title="x", amount=float("nan"), category="Food", date=date(2024, 1, 5), is_expense=True)
