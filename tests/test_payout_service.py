from decimal import Decimal

import pytest

from zenopay.exceptions import ValidationError
from zenopay.schemas import SendMoneyRequest
from zenopay.services.payout_service import PayoutService


def make_request(**overrides):
    fields = dict(
        transaction_id="7pbBX-lnnASw-erwnn-nrrr09AZ",
        phone_number="0744963858",
        amount=1000,
        pin=1234,
    )
    fields.update(overrides)
    return SendMoneyRequest(**fields)


@pytest.fixture
def service(config, http_client):
    return PayoutService(config, http_client)


def test_send_money(service, session):
    session.respond({
        "status": "success",
        "message": "Wallet Cashin processed successfully.",
        "amount_sent_to_customer": 1000,
        "total_deducted": 1150,
        "new_balance": "8850.50",
        "zenopay_response": {
            "reference": "0949694350",
            "transid": "7pbBX-lnnASw-erwnn-nrrr09AZ",
            "resultcode": "000",
            "result": "SUCCESS",
            "message": "Request in progress. You will receive a callback shortly",
            "data": [],
        },
    })

    result = service.send_money(make_request())

    assert result.ok
    assert result.amount_sent == Decimal("1000")
    assert result.total_deducted == Decimal("1150")
    assert result.new_balance == Decimal("8850.50")
    assert result.provider_detail.reference == "0949694350"
    assert result.provider_detail.result_code == "000"
    assert result.provider_detail.transaction_id == "7pbBX-lnnASw-erwnn-nrrr09AZ"

    call = session.calls[0]
    assert call["url"] == "https://zenoapi.com/api/payments/walletcashin/process"
    assert call["headers"]["x-api-key"] == "test-api-key"
    assert call["json"] == {
        "transid": "7pbBX-lnnASw-erwnn-nrrr09AZ",
        "utilitycode": "CASHIN",
        "utilityref": "255744963858",
        "amount": 1000,
        "pin": 1234,
    }


def test_send_money_field_errors(service, session):
    session.respond({
        "status": "error",
        "message": "Validation failed",
        "errors": {"utilityref": ["The utilityref field must be a valid phone number."]},
    }, status_code=422)

    result = service.send_money(make_request())

    assert not result.ok
    assert result.errors == {"utilityref": ("The utilityref field must be a valid phone number.",)}
    assert result.amount_sent == Decimal("0")
    assert result.provider_detail.reference == ""


@pytest.mark.parametrize("overrides", [
    {"transaction_id": ""},
    {"phone_number": "74496385"},
    {"amount": 0},
    {"pin": "1234"},
    {"pin": True},
])
def test_send_money_invalid_request(service, session, overrides):
    with pytest.raises(ValidationError):
        service.send_money(make_request(**overrides))
    assert session.calls == []
