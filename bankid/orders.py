"""Options and request bodies for starting and following BankID orders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bankid.constants import (
    CallInitiator,
    CardReader,
    CertificatePolicy,
    RiskFlag,
    TransactionType,
    UserVisibleDataFormat,
)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str) and value == "":
        return True
    if isinstance(value, (list, tuple)) and not value:
        return True
    return False


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_wire(item) for item in value]
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def _object(
    fields: Iterable[tuple[str, Any]], required: Iterable[str] = ()
) -> dict[str, Any]:
    """Build a JSON object, leaving out empty values unless their key is required."""
    keep = frozenset(required)
    return {
        key: _wire(value)
        for key, value in fields
        if key in keep or not _is_empty(value)
    }


@dataclass
class App:
    """Data about your app, sent when the order is started from it."""

    app_identifier: str = ""
    device_os: str = ""
    device_identifier: str = ""
    device_model_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [
                ("appIdentifier", self.app_identifier),
                ("deviceOS", self.device_os),
                ("deviceIdentifier", self.device_identifier),
                ("deviceModelName", self.device_model_name),
            ]
        )


@dataclass
class Web:
    """Data about your web page, sent when the order is started from it."""

    device_identifier: str = ""
    referring_domain: str = ""
    user_agent: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [
                ("deviceIdentifier", self.device_identifier),
                ("referringDomain", self.referring_domain),
                ("userAgent", self.user_agent),
            ]
        )


@dataclass
class Requirement:
    """Requirements on how an order must be performed."""

    card_reader: CardReader | str = ""
    certificate_policies: list[CertificatePolicy | str] = field(default_factory=list)
    mrtd: bool = False
    personal_number: str = ""
    pin_code: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [
                ("cardReader", self.card_reader),
                ("certificatePolicies", self.certificate_policies),
                ("mrtd", self.mrtd),
                ("personalNumber", self.personal_number),
                ("pinCode", self.pin_code),
            ]
        )


@dataclass
class PhoneRequirement:
    """Requirements on how a phone order must be performed."""

    card_reader: CardReader | str = ""
    certificate_policies: list[CertificatePolicy | str] = field(default_factory=list)
    pin_code: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [
                ("cardReader", self.card_reader),
                ("certificatePolicies", self.certificate_policies),
                ("pinCode", self.pin_code),
            ]
        )


@dataclass
class Recipient:
    """Recipient of a payment; for card payments the merchant name."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return _object([("name", self.name)], required=("name",))


@dataclass
class Money:
    """Amount of a payment, with "," as the decimal separator, and its ISO 4217 currency."""

    amount: str
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [("amount", self.amount), ("currency", self.currency)],
            required=("amount", "currency"),
        )


@dataclass
class UserVisibleTransaction:
    """The transaction the user is asked to approve."""

    transaction_type: TransactionType | str
    recipient: Recipient
    money: Money | None = None
    risk_warning: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _object(
            [
                ("transactionType", self.transaction_type),
                ("recipient", self.recipient),
                ("money", self.money),
                ("riskWarning", self.risk_warning),
            ],
            required=("transactionType", "recipient"),
        )


@dataclass
class AuthOpts:
    """Optional settings of an identification order."""

    app: App | None = None
    return_risk: bool = False
    return_url: str = ""
    user_non_visible_data: str = ""
    user_visible_data: str = ""
    user_visible_data_format: UserVisibleDataFormat | str = ""
    web: Web | None = None
    requirement: Requirement | None = None


@dataclass
class SignOpts:
    """Optional settings of a signing order."""

    app: App | None = None
    return_risk: bool = False
    return_url: str = ""
    user_non_visible_data: str = ""
    user_visible_data_format: UserVisibleDataFormat | str = ""
    web: Web | None = None
    requirement: Requirement | None = None


@dataclass
class PaymentOpts:
    """Optional settings of a payment order."""

    app: App | None = None
    return_risk: bool = False
    return_url: str = ""
    risk_flags: list[RiskFlag | str] = field(default_factory=list)
    user_non_visible_data: str = ""
    user_visible_data: str = ""
    user_visible_data_format: UserVisibleDataFormat | str = ""
    web: Web | None = None
    requirement: Requirement | None = None


@dataclass
class PhoneAuthOpts:
    """Optional settings of a phone identification order."""

    personal_number: str = ""
    user_non_visible_data: str = ""
    user_visible_data: str = ""
    user_visible_data_format: UserVisibleDataFormat | str = ""
    requirement: PhoneRequirement | None = None


@dataclass
class PhoneSignOpts:
    """Optional settings of a phone signing order."""

    personal_number: str = ""
    user_non_visible_data: str = ""
    user_visible_data_format: UserVisibleDataFormat | str = ""
    requirement: PhoneRequirement | None = None


def _require(value: Any, name: str) -> None:
    if _is_empty(value):
        raise ValueError(f"{name} is empty")


def auth_request(end_user_ip: str, opts: AuthOpts | None = None) -> dict[str, Any]:
    """Body of an identification order. Raises ValueError if the IP is empty."""
    _require(end_user_ip, "end_user_ip")
    opts = opts or AuthOpts()
    return _object(
        [
            ("app", opts.app),
            ("endUserIp", end_user_ip),
            ("returnRisk", opts.return_risk),
            ("returnUrl", opts.return_url),
            ("userNonVisibleData", opts.user_non_visible_data),
            ("userVisibleData", opts.user_visible_data),
            ("userVisibleDataFormat", opts.user_visible_data_format),
            ("web", opts.web),
            ("requirement", opts.requirement),
        ],
        required=("endUserIp",),
    )


def sign_request(
    end_user_ip: str, user_visible_data: str, opts: SignOpts | None = None
) -> dict[str, Any]:
    """Body of a signing order. Raises ValueError if a mandatory value is empty."""
    _require(end_user_ip, "end_user_ip")
    _require(user_visible_data, "user_visible_data")
    opts = opts or SignOpts()
    return _object(
        [
            ("app", opts.app),
            ("endUserIp", end_user_ip),
            ("returnRisk", opts.return_risk),
            ("returnUrl", opts.return_url),
            ("userNonVisibleData", opts.user_non_visible_data),
            ("userVisibleData", user_visible_data),
            ("userVisibleDataFormat", opts.user_visible_data_format),
            ("web", opts.web),
            ("requirement", opts.requirement),
        ],
        required=("endUserIp", "userVisibleData"),
    )


def payment_request(
    end_user_ip: str,
    user_visible_transaction: UserVisibleTransaction,
    opts: PaymentOpts | None = None,
) -> dict[str, Any]:
    """Body of a payment order. Raises ValueError if a mandatory value is empty."""
    _require(end_user_ip, "end_user_ip")
    _require(
        user_visible_transaction.transaction_type,
        "user_visible_transaction.transaction_type",
    )
    _require(
        user_visible_transaction.recipient.name,
        "user_visible_transaction.recipient.name",
    )
    opts = opts or PaymentOpts()
    return _object(
        [
            ("app", opts.app),
            ("endUserIp", end_user_ip),
            ("returnRisk", opts.return_risk),
            ("returnUrl", opts.return_url),
            ("riskFlags", opts.risk_flags),
            ("userNonVisibleData", opts.user_non_visible_data),
            ("userVisibleData", opts.user_visible_data),
            ("userVisibleDataFormat", opts.user_visible_data_format),
            ("userVisibleTransaction", user_visible_transaction),
            ("web", opts.web),
            ("requirement", opts.requirement),
        ],
        required=("endUserIp", "userVisibleTransaction"),
    )


def phone_auth_request(
    call_initiator: CallInitiator | str, opts: PhoneAuthOpts | None = None
) -> dict[str, Any]:
    """Body of a phone identification order. Raises ValueError if the initiator is empty."""
    _require(call_initiator, "call_initiator")
    opts = opts or PhoneAuthOpts()
    return _object(
        [
            ("callInitiator", call_initiator),
            ("personalNumber", opts.personal_number),
            ("userNonVisibleData", opts.user_non_visible_data),
            ("userVisibleData", opts.user_visible_data),
            ("userVisibleDataFormat", opts.user_visible_data_format),
            ("requirement", opts.requirement),
        ],
        required=("callInitiator",),
    )


def phone_sign_request(
    call_initiator: CallInitiator | str,
    user_visible_data: str,
    opts: PhoneSignOpts | None = None,
) -> dict[str, Any]:
    """Body of a phone signing order. Raises ValueError if a mandatory value is empty."""
    _require(call_initiator, "call_initiator")
    _require(user_visible_data, "user_visible_data")
    opts = opts or PhoneSignOpts()
    return _object(
        [
            ("callInitiator", call_initiator),
            ("personalNumber", opts.personal_number),
            ("userNonVisibleData", opts.user_non_visible_data),
            ("userVisibleData", user_visible_data),
            ("userVisibleDataFormat", opts.user_visible_data_format),
            ("requirement", opts.requirement),
        ],
        required=("callInitiator", "userVisibleData"),
    )


def order_ref_request(order_ref: str) -> dict[str, Any]:
    """Body of a collect or cancel request. Raises ValueError if the reference is empty."""
    _require(order_ref, "order_ref")
    return {"orderRef": order_ref}