from decimal import Decimal

import pytest

from zenopay.config import ZenoPayConfig
from zenopay.exceptions import APIError, ConfigError, InvalidAmountError, ValidationError
from zenopay.schemas import PaymentRequest, StatusQuery
from zenopay.services.payment_service import PaymentService


def make_request(**overrides):
    fields = dict(
        customer_name="Asha Juma",
        customer_email="asha@example.com",
        customer_phone="0712345678",
        amount=1000,
        callback_url="https://shop.example.com/zenopay/callback",
    )
    fields.update(overrides)
    return PaymentRequest(**fields)


@pytest.fixture
def service(config, http_client):
    return PaymentService(config, http_client)


def test_pay_returns_order_id(service, session):
    session.respond({"status": "success", "order_id": "ORD123"})

    result = service.pay(make_request())

    assert result.order_id == "ORD123"
    assert result.status == "success"


def test_pay_sends_form_fields(service, session):
    session.respond({"status": "success", "order_id": "ORD123"})

    service.pay(make_request(amount="2500.5"))

    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.zeno.africa/"
    assert call["data"] == {
        "create_order": "1",
        "api_key": "test-api-key",
        "account_id": "zp-123",
        "secret_key": "test-secret",
        "amount": "2500.50",
        "buyer_name": "Asha Juma",
        "webhook_url": "https://shop.example.com/zenopay/callback",
        "buyer_email": "asha@example.com",
        "buyer_phone": "255712345678",
    }
    assert call["timeout"] == 5


def test_pay_without_normalization_sends_raw_phone(http_client, session):
    service = PaymentService(
        ZenoPayConfig(api_key="k", secret_key="s", account_id="a", normalize_phone_numbers=False),
        http_client,
    )
    session.respond({"status": "success", "order_id": "ORD9"})

    service.pay(make_request())

    assert session.calls[0]["data"]["buyer_phone"] == "0712345678"


def test_pay_empty_order_id_raises_api_error_with_provider_message(service, session):
    session.respond({"status": "success", "order_id": "", "message": "insufficient funds"})

    with pytest.raises(APIError) as exc:
        service.pay(make_request())

    assert exc.value.message == "insufficient funds"
    assert str(exc.value) == "zenopay error: insufficient funds"


def test_pay_empty_order_id_even_on_http_error(service, session):
    session.respond({"status": "error", "message": "Invalid API key"}, status_code=401)

    with pytest.raises(APIError) as exc:
        service.pay(make_request())
    assert exc.value.message == "Invalid API key"


@pytest.mark.parametrize("amount", [0, -1, "-250.00"])
def test_pay_non_positive_amount_sends_nothing(service, session, amount):
    with pytest.raises(ValidationError):
        service.pay(make_request(amount=amount))
    assert session.calls == []


@pytest.mark.parametrize("amount", [Decimal("0.004"), "1000.005"])
def test_pay_sub_cent_amount_sends_nothing(service, session, amount):
    session.respond({"status": "success", "order_id": "ORD123"})

    with pytest.raises(InvalidAmountError) as exc:
        service.pay(make_request(amount=amount))

    assert exc.value.field == "amount"
    assert session.calls == []


def test_pay_missing_secret_key_sends_nothing(http_client, session):
    service = PaymentService(ZenoPayConfig(api_key="k", secret_key="", account_id="a"), http_client)

    with pytest.raises(ConfigError):
        service.pay(make_request())
    assert session.calls == []


def test_check_payment_status(service, session):
    session.respond({
        "status": "success",
        "order_id": "ORD123",
        "message": "Order fetched successfully",
        "payment_status": "COMPLETED",
    })

    result = service.check_payment_status("ORD123")

    assert result.payment_status == "COMPLETED"
    assert result.is_completed
    call = session.calls[0]
    assert call["url"] == "https://api.zeno.africa/order-status"
    assert call["data"] == {"check_status": "1", "order_id": "ORD123"}


def test_check_payment_status_accepts_status_query(service, session):
    session.respond({"status": "success", "order_id": "ORD7", "payment_status": "PENDING"})

    result = service.check_payment_status(StatusQuery(order_id="ORD7"))

    assert session.calls[0]["data"]["order_id"] == "ORD7"
    assert not result.is_completed


def test_check_payment_status_empty_order_id_is_rejected(service, session):
    with pytest.raises(ValidationError):
        service.check_payment_status("")
    assert session.calls == []


def test_check_payment_status_lenient_mode_sends_empty_order_id(http_client, session):
    service = PaymentService(ZenoPayConfig(strict_order_id_check=False), http_client)
    session.respond({"status": "error", "message": "Order not found"})

    result = service.check_payment_status("")

    assert result.status == "error"
    assert result.payment_status == ""
    assert session.calls[0]["data"]["order_id"] == ""


def test_check_payment_status_requires_order_id_when_enabled(http_client, session):
    service = PaymentService(ZenoPayConfig(require_order_id_all=True), http_client)
    session.respond({"status": "error", "order_id": "", "message": "Order not found"})

    with pytest.raises(APIError) as exc:
        service.check_payment_status("ORD404")
    assert exc.value.message == "Order not found"
