"""Client for the BankID relying-party API."""

from __future__ import annotations

import ssl
import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any

import httpx

from bankid.constants import PROD_URL, TEST_URL, CallInitiator
from bankid.orders import (
    AuthOpts,
    PaymentOpts,
    PhoneAuthOpts,
    PhoneSignOpts,
    SignOpts,
    UserVisibleTransaction,
    auth_request,
    order_ref_request,
    payment_request,
    phone_auth_request,
    phone_sign_request,
    sign_request,
)
from bankid.responses import (
    BankIDError,
    CollectResponse,
    OrderResponse,
    PhoneOrderResponse,
)
from bankid.transport import parse_response, send_request

SUPPORTED_API_VERSION = "v6.0"


def _as_text(data: bytes | str) -> str:
    return data.decode("ascii") if isinstance(data, bytes) else data


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("ascii") if isinstance(data, str) else data


@dataclass(frozen=True)
class Config:
    """PEM-encoded certificates needed to talk to the BankID service."""

    root_ca: bytes
    client_cert: bytes
    client_key: bytes

    def ssl_context(self) -> ssl.SSLContext:
        """Build a TLS 1.3 context trusting ``root_ca`` and presenting the client certificate.

        Raises BankIDError if a certificate or the key cannot be loaded.
        """
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.minimum_version = ssl.TLSVersion.TLSv1_3
        try:
            context.load_verify_locations(cadata=_as_text(self.root_ca))
        except (ssl.SSLError, ValueError, TypeError, UnicodeDecodeError) as exc:
            raise BankIDError("error parsing CA cert from PEM") from exc

        with tempfile.TemporaryDirectory() as directory:
            cert_path = Path(directory) / "client.crt"
            key_path = Path(directory) / "client.key"
            cert_path.write_bytes(_as_bytes(self.client_cert))
            key_path.write_bytes(_as_bytes(self.client_key))
            try:
                context.load_cert_chain(cert_path, key_path)
            except (ssl.SSLError, OSError, ValueError) as exc:
                raise BankIDError(
                    f"failed to load client certificate/key: {exc}"
                ) from exc
        return context


def _new_client(config: Config, url: str) -> BankIDClient:
    http_client = httpx.Client(verify=config.ssl_context())
    return BankIDClient(http_client, url)


def new_prod(config: Config) -> BankIDClient:
    """Create a client for production BankIDs."""
    return _new_client(config, PROD_URL)


def new_test(config: Config) -> BankIDClient:
    """Create a client for test BankIDs."""
    return _new_client(config, TEST_URL)


def _expect_object(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BankIDError("unmarshalling response body: expected a JSON object")
    return data


class BankIDClient:
    """Starts, follows and cancels BankID orders."""

    def __init__(self, http_client: httpx.Client, url: str) -> None:
        self.http_client = http_client
        self.url = url.rstrip("/")

    def _endpoint(self, path: str) -> str:
        return f"{self.url}/rp/{SUPPORTED_API_VERSION}/{path}"

    def _send(self, path: str, payload: dict[str, Any]) -> Any:
        response = send_request(self.http_client, self._endpoint(path), payload)
        return parse_response(response)

    def auth(self, end_user_ip: str, opts: AuthOpts | None = None) -> OrderResponse:
        """Start an identification order for the user at ``end_user_ip``."""
        payload = auth_request(end_user_ip, opts)
        return OrderResponse.from_dict(_expect_object(self._send("auth", payload)))

    def sign(
        self, end_user_ip: str, user_visible_data: str, opts: SignOpts | None = None
    ) -> OrderResponse:
        """Start a signing order showing the base 64 encoded ``user_visible_data``."""
        payload = sign_request(end_user_ip, user_visible_data, opts)
        return OrderResponse.from_dict(_expect_object(self._send("sign", payload)))

    def payment(
        self,
        end_user_ip: str,
        user_visible_transaction: UserVisibleTransaction,
        opts: PaymentOpts | None = None,
    ) -> OrderResponse:
        """Start a payment order for the given transaction."""
        payload = payment_request(end_user_ip, user_visible_transaction, opts)
        return OrderResponse.from_dict(_expect_object(self._send("payment", payload)))

    def phone_auth(
        self, call_initiator: CallInitiator | str, opts: PhoneAuthOpts | None = None
    ) -> PhoneOrderResponse:
        """Start a phone identification order."""
        payload = phone_auth_request(call_initiator, opts)
        return PhoneOrderResponse.from_dict(
            _expect_object(self._send("phone/auth", payload))
        )

    def phone_sign(
        self,
        call_initiator: CallInitiator | str,
        user_visible_data: str,
        opts: PhoneSignOpts | None = None,
    ) -> PhoneOrderResponse:
        """Start a phone signing order."""
        payload = phone_sign_request(call_initiator, user_visible_data, opts)
        return PhoneOrderResponse.from_dict(
            _expect_object(self._send("phone/sign", payload))
        )

    def collect(self, order_ref: str) -> CollectResponse:
        """Return the current status of the order ``order_ref``.

        Call again about every two seconds while the status is pending.
        """
        payload = order_ref_request(order_ref)
        return CollectResponse.from_dict(_expect_object(self._send("collect", payload)))

    def cancel(self, order_ref: str) -> None:
        """Cancel an ongoing order."""
        payload = order_ref_request(order_ref)
        self._send("cancel", payload)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.http_client.close()

    def __enter__(self) -> BankIDClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()