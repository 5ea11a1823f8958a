from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from homebank.schemas import AccountPatch, CardCreate, Transaction, TransferPayload


def test_transfer_payload_defaults():
    payload = TransferPayload(amount=-75, origin="acc1", destination="acc2")
    data = payload.to_json()
    assert data["type"] == "Transfer"
    assert data["amount"] == -75
    assert "name" not in data
    assert payload.dated.tzinfo is not None


def test_transfer_payload_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        TransferPayload(amount=1, origin="a", destination="b", fee=2)


def test_account_patch_requires_a_field():
    with pytest.raises(ValidationError):
        AccountPatch()
    assert AccountPatch(alias="casa.perro.gato").to_json() == {"alias": "casa.perro.gato"}


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_account_patch_rejects_non_finite_balance(value):
    with pytest.raises(ValidationError):
        AccountPatch(balance=value)


def test_card_create_accepts_field_names_and_aliases():
    by_alias = CardCreate.model_validate(
        {"cardNumber": "4111", "expiration": "01/30", "firstLastName": "Ana Paz"}
    )
    by_name = CardCreate(card_number="4111", expiration="01/30", first_last_name="Ana Paz")
    assert by_alias == by_name
    assert by_name.to_json() == {"cardNumber": "4111", "expiration": "01/30", "firstLastName": "Ana Paz"}


def test_transaction_parses_server_record():
    tx = Transaction.model_validate(
        {"id": 12, "amount": -75, "dated": "2024-05-01T12:30:00Z", "accountId": 4, "status": "ok"}
    )
    assert tx.id == "12"
    assert tx.account_id == "4"
    assert tx.dated == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    assert tx.model_extra == {"status": "ok"}
