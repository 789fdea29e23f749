# bankid

A small, synchronous client for the BankID relying-party API (version
6.0, `bankid.client.SUPPORTED_API_VERSION`). It starts identification,
signing, payment and phone orders, collects their status and cancels
them, over a mutually authenticated TLS 1.3 connection built on `httpx`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `bankid.client` – `Config`, `BankIDClient`, `new_prod`, `new_test`.
- `bankid.orders` – option objects and the functions that build request
  bodies (`auth_request`, `sign_request`, `payment_request`,
  `phone_auth_request`, `phone_sign_request`, `order_ref_request`).
- `bankid.responses` – parsed answers (`OrderResponse`,
  `PhoneOrderResponse`, `CollectResponse`, `CompletionData`, `User`,
  `Device`, `StepUp`) and the errors `BankIDError` and `ApiError`.
- `bankid.transport` – `send_request` and `parse_response`, the JSON POST
  and answer handling used by the client.
- `bankid.constants` – `PROD_URL`, `TEST_URL`, the enumerations of the
  API and the recommended user messages.

## Connecting

You need three PEM-encoded values: the root certificate of the BankID
service, your client certificate and its private key. They may be given
as bytes or as ASCII strings.

```python
from pathlib import Path

from bankid.client import Config, new_test

config = Config(
    root_ca=Path("bankid-root.pem").read_bytes(),
    client_cert=Path("client-cert.pem").read_bytes(),
    client_key=Path("client-key.pem").read_bytes(),
)

with new_test(config) as client:
    ...
```

`new_prod(config)` gives a client for production BankIDs and
`new_test(config)` one for test BankIDs. Both build their TLS settings
with `Config.ssl_context()`, which raises `BankIDError` if the root
certificate or the client certificate and key cannot be loaded.

You can also pass your own `httpx.Client` and base URL:
`BankIDClient(http_client, url)`. The client works as a context manager;
call `close()` yourself if you do not use it in a `with` block.

## Identifying a user

```python
import time

from bankid.constants import Status

order = client.auth("192.0.2.10")

while True:
    result = client.collect(order.order_ref)
    if result.status is not Status.PENDING:
        break
    time.sleep(2)

if result.status is Status.COMPLETE:
    user = result.completion_data.user
    print(user.name)
```

Keep calling `collect` about every two seconds while the order is
pending. `HintCode.is_final()` is true for the hint codes of a failed
order, which must not be collected again. Status, hint code and risk
values the client does not know are kept as plain strings.

## Other orders

- `client.sign(end_user_ip, user_visible_data, opts)` – signing; the
  visible text must be UTF-8, base 64 encoded.
- `client.payment(end_user_ip, user_visible_transaction, opts)` – payment,
  described by a `UserVisibleTransaction` with a `TransactionType`, a
  `Recipient` and an optional `Money` amount.
- `client.phone_auth(call_initiator, opts)` and
  `client.phone_sign(call_initiator, user_visible_data, opts)` – orders
  over the phone, with `CallInitiator` saying who made the call. These
  return a `PhoneOrderResponse`; the other orders return an
  `OrderResponse` with the order reference, auto-start token and QR start
  token and secret.
- `client.cancel(order_ref)` – cancels an ongoing order.

Each order takes an optional options object from `bankid.orders`
(`AuthOpts`, `SignOpts`, `PaymentOpts`, `PhoneAuthOpts`, `PhoneSignOpts`)
for app (`App`) or web (`Web`) data, risk flags (`RiskFlag`), return URLs
and requirements (`Requirement`, `PhoneRequirement`). Empty options are
left out of the request body.

## Errors

Missing mandatory arguments raise `ValueError` before anything is sent.
A request that cannot be sent, or an answer that cannot be read, raises
`BankIDError`. A rejected request (HTTP 400) raises `ApiError`, a
subclass of `BankIDError` carrying the service's `error_code` and
`details`; any higher status raises `BankIDError` with the response body
as its message.

## User messages

`bankid.constants.recommended_message(code, language)` returns the
recommended text to show the user for a message code such as `"RFA15A"`,
in Swedish or English (`Language.SWEDISH`, `Language.ENGLISH`; English by
default). `MESSAGE_CODES` lists the known codes; an unknown code or
language raises `ValueError`.

## What this package does not do

It does not draw or compute animated QR codes from the QR start token
and secret, and it does not decode or verify the signature or the OCSP
response in the completion data; these are handed back as the base 64
strings the service sent. There is no asynchronous client and no
command-line tool.