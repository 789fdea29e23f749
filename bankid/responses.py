"""Errors and parsed response bodies of the BankID relying-party API."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, TypeVar

from bankid.constants import HintCode, Risk, Status

_E = TypeVar("_E", bound=Enum)


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _camel(name: str) -> str:
    """Turn a snake_case field name into the camelCase key used on the wire."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _enum_or_text(kind: type[_E], value: Any) -> _E | str:
    """Known values become members of ``kind``; anything else stays a plain string."""
    text = "" if value is None else str(value)
    try:
        return kind(text)
    except ValueError:
        return text


def _optional_enum(kind: type[_E], value: Any) -> _E | str | None:
    if value is None or value == "":
        return None
    return _enum_or_text(kind, value)


def _nested(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


class BankIDError(Exception):
    """Raised when a BankID request cannot be made or is answered with an error."""


class ApiError(BankIDError):
    """An error reported by the BankID service with HTTP status 400."""

    def __init__(self, error_code: str = "", details: str = "") -> None:
        self.error_code = error_code
        self.details = details
        super().__init__(f"errorCode={error_code}, details={details}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApiError:
        return cls(_text(data, "errorCode"), _text(data, "details"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.error_code, self.details) == (other.error_code, other.details)

    def __hash__(self) -> int:
        return hash((self.error_code, self.details))


@dataclass(frozen=True)
class OrderResponse:
    """Answer to a started identification, signing or payment order."""

    order_ref: str
    auto_start_token: str = ""
    qr_start_token: str = ""
    qr_start_secret: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderResponse:
        return cls(**{field.name: _text(data, _camel(field.name)) for field in fields(cls)})


@dataclass(frozen=True)
class PhoneOrderResponse:
    """Answer to a started phone identification or phone signing order."""

    order_ref: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PhoneOrderResponse:
        return cls(order_ref=_text(data, "orderRef"))


@dataclass(frozen=True)
class User:
    """The user who completed an order."""

    personal_number: str = ""
    name: str = ""
    given_name: str = ""
    surname: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return cls(
            personal_number=_text(data, "personalNumber"),
            name=_text(data, "name"),
            given_name=_text(data, "givenName"),
            surname=_text(data, "surname"),
        )


@dataclass(frozen=True)
class Device:
    """The device an order was completed on."""

    ip_address: str = ""
    uhi: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Device:
        return cls(ip_address=_text(data, "ipAddress"), uhi=_text(data, "uhi"))


@dataclass(frozen=True)
class StepUp:
    """Additional verifications that were part of an order."""

    mrtd: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StepUp:
        return cls(mrtd=bool(data.get("mrtd", False)))


@dataclass(frozen=True)
class CompletionData:
    """User information, signature and OCSP response of a completed order."""

    user: User | None = None
    device: Device | None = None
    step_up: StepUp | None = None
    bank_id_issue_date: str = ""
    signature: str = ""
    ocsp_response: str = ""
    risk: Risk | str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompletionData:
        user = _nested(data, "user")
        device = _nested(data, "device")
        step_up = _nested(data, "stepUp")
        return cls(
            user=User.from_dict(user) if user is not None else None,
            device=Device.from_dict(device) if device is not None else None,
            step_up=StepUp.from_dict(step_up) if step_up is not None else None,
            bank_id_issue_date=_text(data, "bankIdIssueDate"),
            signature=_text(data, "signature"),
            ocsp_response=_text(data, "ocspResponse"),
            risk=_optional_enum(Risk, data.get("risk")),
        )


@dataclass(frozen=True)
class CollectResponse:
    """Status of an order as reported by a collect request."""

    order_ref: str
    status: Status | str
    hint_code: HintCode | str | None = None
    completion_data: CompletionData | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CollectResponse:
        completion = _nested(data, "completionData")
        return cls(
            order_ref=_text(data, "orderRef"),
            status=_enum_or_text(Status, data.get("status")),
            hint_code=_optional_enum(HintCode, data.get("hintCode")),
            completion_data=(
                CompletionData.from_dict(completion) if completion is not None else None
            ),
        )