"""
Request and result records for ZenoPay operations.

Requests are built fresh for each call. Results are decoded from the
provider's JSON and are read-only; each keeps the decoded body in ``raw``.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, Union

from .constants import PaymentStatus, UtilityCode
from .utils.formatters import parse_amount

Amount = Union[int, float, Decimal, str]


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    return str(value)


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    return str(value)


def _dict(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _list(data: Dict[str, Any], key: str) -> list:
    value = data.get(key)
    return value if isinstance(value, list) else []


# Requests

@dataclass(frozen=True)
class PaymentRequest:
    """Order creation on the form-encoded API."""
    customer_name: str
    customer_email: str
    customer_phone: str
    amount: Amount
    callback_url: str


@dataclass(frozen=True)
class StatusQuery:
    order_id: str


@dataclass(frozen=True)
class USSDPushRequest:
    """Mobile money USSD push; webhook_url and metadata are sent only when set."""
    amount: Amount
    order_id: str
    customer_name: str
    customer_phone: str
    customer_email: str
    webhook_url: Optional[str] = None
    metadata: Any = None


@dataclass(frozen=True)
class SendMoneyRequest:
    """Wallet cash-in to phone_number."""
    transaction_id: str
    phone_number: str
    amount: Amount
    pin: int
    utility_code: str = UtilityCode.CASHIN.value


@dataclass(frozen=True)
class CheckoutRequest:
    """Hosted checkout; currency falls back to the configured default."""
    amount: Amount
    order_id: str
    customer_name: str
    customer_phone: str
    customer_email: str
    redirect_url: str = ''
    webhook_url: str = ''
    currency: Optional[str] = None
    metadata: Any = None


# Results

@dataclass(frozen=True)
class PaymentResult:
    status: str
    message: str
    order_id: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PaymentResult':
        return cls(
            status=_str(data, 'status'),
            message=_str(data, 'message'),
            order_id=_str(data, 'order_id'),
            raw=data,
        )


@dataclass(frozen=True)
class StatusResult:
    status: str
    order_id: str
    message: str
    payment_status: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatusResult':
        return cls(
            status=_str(data, 'status'),
            order_id=_str(data, 'order_id'),
            message=_str(data, 'message'),
            payment_status=_str(data, 'payment_status'),
            raw=data,
        )

    @property
    def is_completed(self) -> bool:
        return self.payment_status.upper() == PaymentStatus.COMPLETED.value


@dataclass(frozen=True)
class USSDPushResult:
    status: str
    message: str
    order_id: Optional[str] = None
    result_code: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'USSDPushResult':
        return cls(
            status=_str(data, 'status'),
            message=_str(data, 'message'),
            order_id=_optional_str(data, 'order_id'),
            result_code=_optional_str(data, 'resultcode'),
            raw=data,
        )

    @property
    def ok(self) -> bool:
        return self.status.lower() == 'success'


@dataclass(frozen=True)
class TransactionRecord:
    order_id: str
    creation_date: str
    amount: str
    payment_status: str
    transaction_id: str
    channel: str
    reference: str
    msisdn: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionRecord':
        return cls(
            order_id=_str(data, 'order_id'),
            creation_date=_str(data, 'creation_date'),
            amount=_str(data, 'amount'),
            payment_status=_str(data, 'payment_status'),
            transaction_id=_str(data, 'transid'),
            channel=_str(data, 'channel'),
            reference=_str(data, 'reference'),
            msisdn=_str(data, 'msisdn'),
        )

    @property
    def is_completed(self) -> bool:
        return self.payment_status.upper() == PaymentStatus.COMPLETED.value


@dataclass(frozen=True)
class CheckStatusResult:
    result: str
    message: str
    reference: str
    result_code: str
    records: Tuple[TransactionRecord, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CheckStatusResult':
        return cls(
            result=_str(data, 'result'),
            message=_str(data, 'message'),
            reference=_str(data, 'reference'),
            result_code=_str(data, 'resultcode'),
            records=tuple(
                TransactionRecord.from_dict(item)
                for item in _list(data, 'data')
                if isinstance(item, dict)
            ),
            raw=data,
        )

    @property
    def ok(self) -> bool:
        return self.result.upper() == 'SUCCESS'


@dataclass(frozen=True)
class SendMoneyProviderDetail:
    """The nested ``zenopay_response`` of a cash-in."""
    reference: str = ''
    transaction_id: str = ''
    result_code: str = ''
    result: str = ''
    message: str = ''
    data: Tuple[Any, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SendMoneyProviderDetail':
        return cls(
            reference=_str(data, 'reference'),
            transaction_id=_str(data, 'transid'),
            result_code=_str(data, 'resultcode'),
            result=_str(data, 'result'),
            message=_str(data, 'message'),
            data=tuple(_list(data, 'data')),
        )


@dataclass(frozen=True)
class SendMoneyResult:
    status: str
    message: str
    amount_sent: Decimal = Decimal('0')
    total_deducted: Decimal = Decimal('0')
    new_balance: Decimal = Decimal('0')
    provider_detail: SendMoneyProviderDetail = field(default_factory=SendMoneyProviderDetail)
    errors: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SendMoneyResult':
        errors = {
            name: tuple(str(m) for m in messages) if isinstance(messages, list) else (str(messages),)
            for name, messages in _dict(data, 'errors').items()
        }
        return cls(
            status=_str(data, 'status'),
            message=_str(data, 'message'),
            amount_sent=parse_amount(data.get('amount_sent_to_customer')),
            total_deducted=parse_amount(data.get('total_deducted')),
            new_balance=parse_amount(data.get('new_balance')),
            provider_detail=SendMoneyProviderDetail.from_dict(_dict(data, 'zenopay_response')),
            errors=errors,
            raw=data,
        )

    @property
    def ok(self) -> bool:
        return self.status.lower() == 'success' and not self.errors


@dataclass(frozen=True)
class CheckoutResult:
    payment_link: str
    transaction_reference: str
    error: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CheckoutResult':
        return cls(
            payment_link=_str(data, 'payment_link'),
            transaction_reference=_str(data, 'tx_ref'),
            error=_optional_str(data, 'error'),
            raw=data,
        )

    @property
    def ok(self) -> bool:
        return not self.error and bool(self.payment_link)


@dataclass(frozen=True)
class WebhookEvent:
    """Payload ZenoPay posts to a USSD push webhook_url."""
    order_id: str
    payment_status: str
    reference: str
    metadata: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WebhookEvent':
        return cls(
            order_id=_str(data, 'order_id'),
            payment_status=_str(data, 'payment_status'),
            reference=_str(data, 'reference'),
            metadata=data.get('metadata'),
        )

    @property
    def is_completed(self) -> bool:
        return self.payment_status.upper() == PaymentStatus.COMPLETED.value
