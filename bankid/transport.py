"""Sending JSON requests to the BankID service and reading its answers."""

from __future__ import annotations

import json
from typing import Any

import httpx

from bankid.responses import ApiError, BankIDError


def send_request(client: httpx.Client, url: str, payload: Any) -> httpx.Response:
    """POST ``payload`` as JSON to ``url``. Raises BankIDError if it cannot be sent."""
    try:
        body = json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise BankIDError(f"marshalling request body: {exc}") from exc

    try:
        return client.post(
            url, content=body, headers={"Content-Type": "application/json"}
        )
    except httpx.HTTPError as exc:
        raise BankIDError(f"sending request: {exc}") from exc


def parse_response(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or None for an empty successful body.

    A 400 answer raises ApiError; any higher status raises BankIDError with the body.
    """
    try:
        response.read()
        raw = response.content
    except httpx.HTTPError as exc:
        raise BankIDError(f"reading response body: {exc}") from exc
    finally:
        response.close()

    if response.status_code == 400:
        data = _decode(raw)
        if not isinstance(data, dict):
            raise BankIDError("unmarshalling response body: expected a JSON object")
        raise ApiError.from_dict(data)
    if response.status_code > 400:
        raise BankIDError(raw.decode("utf-8", errors="replace"))
    if not raw:
        return None
    return _decode(raw)


def _decode(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise BankIDError(f"unmarshalling response body: {exc}") from exc