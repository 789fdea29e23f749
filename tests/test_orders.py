import json

import pytest

from bankid.constants import (
    CallInitiator,
    CardReader,
    CertificatePolicy,
    RiskFlag,
    TransactionType,
    UserVisibleDataFormat,
)
from bankid.orders import (
    App,
    AuthOpts,
    Money,
    PaymentOpts,
    PhoneAuthOpts,
    PhoneRequirement,
    PhoneSignOpts,
    Recipient,
    Requirement,
    SignOpts,
    UserVisibleTransaction,
    Web,
    auth_request,
    order_ref_request,
    payment_request,
    phone_auth_request,
    phone_sign_request,
    sign_request,
)

IP = "192.0.2.1"


def _transaction(**kwargs):
    return UserVisibleTransaction(
        transaction_type=TransactionType.CARD, recipient=Recipient("Shop"), **kwargs
    )


def test_auth_request_minimal_has_only_ip():
    assert auth_request(IP) == {"endUserIp": IP}


def test_auth_request_none_opts_same_as_default():
    assert auth_request(IP, None) == auth_request(IP, AuthOpts())


def test_auth_request_empty_ip_raises():
    with pytest.raises(ValueError, match="end_user_ip is empty"):
        auth_request("")


def test_auth_request_full_uses_wire_names():
    opts = AuthOpts(
        return_risk=True,
        return_url="https://example.com/return",
        user_visible_data="dGV4dA==",
        user_visible_data_format=UserVisibleDataFormat.SIMPLE_MARKDOWN_V1,
        web=Web(referring_domain="example.com"),
        requirement=Requirement(pin_code=True),
    )
    body = auth_request(IP, opts)
    assert body["returnRisk"] is True
    assert body["returnUrl"] == "https://example.com/return"
    assert body["userVisibleDataFormat"] == "simpleMarkdownV1"
    assert body["web"] == {"referringDomain": "example.com"}
    assert body["requirement"] == {"pinCode": True}
    assert "app" not in body


def test_auth_request_key_order_follows_format():
    opts = AuthOpts(app=App(app_identifier="com.example"), web=Web(user_agent="ua"))
    assert list(auth_request(IP, opts)) == ["app", "endUserIp", "web"]


def test_empty_app_still_sent():
    assert auth_request(IP, AuthOpts(app=App()))["app"] == {}


def test_app_to_dict_names():
    app = App("com.example", "IOS", "dev-id", "model")
    assert set(app.to_dict()) == {
        "appIdentifier",
        "deviceOS",
        "deviceIdentifier",
        "deviceModelName",
    }


def test_requirement_enums_become_strings_and_json_round_trip():
    req = Requirement(
        card_reader=CardReader.CLASS2,
        certificate_policies=[CertificatePolicy.TEST_BANKID_ON_FILE],
        mrtd=True,
    )
    data = req.to_dict()
    assert data == {
        "cardReader": "class2",
        "certificatePolicies": ["1.2.3.4.5"],
        "mrtd": True,
    }
    assert json.loads(json.dumps(data)) == data


def test_phone_requirement_empty_is_empty_dict():
    assert PhoneRequirement().to_dict() == {}


def test_sign_request_requires_data():
    with pytest.raises(ValueError, match="user_visible_data is empty"):
        sign_request(IP, "")
    with pytest.raises(ValueError, match="end_user_ip is empty"):
        sign_request("", "data")


def test_sign_request_body():
    body = sign_request(IP, "ZGF0YQ==", SignOpts(user_non_visible_data="eA=="))
    assert body == {
        "endUserIp": IP,
        "userNonVisibleData": "eA==",
        "userVisibleData": "ZGF0YQ==",
    }


def test_payment_request_body():
    tx = _transaction(money=Money("100,00", "SEK"))
    opts = PaymentOpts(risk_flags=[RiskFlag.NEW_CARD, RiskFlag.LARGE_AMOUNT])
    body = payment_request(IP, tx, opts)
    assert body["riskFlags"] == ["newCard", "largeAmount"]
    assert body["userVisibleTransaction"] == {
        "transactionType": "card",
        "recipient": {"name": "Shop"},
        "money": {"amount": "100,00", "currency": "SEK"},
    }
    assert list(body) == ["endUserIp", "riskFlags", "userVisibleTransaction"]


def test_payment_request_validation():
    with pytest.raises(ValueError, match="end_user_ip"):
        payment_request("", _transaction())
    with pytest.raises(ValueError, match="transaction_type"):
        payment_request(IP, UserVisibleTransaction("", Recipient("Shop")))
    with pytest.raises(ValueError, match="recipient.name"):
        payment_request(IP, UserVisibleTransaction(TransactionType.NPA, Recipient("")))


def test_transaction_risk_warning_included():
    tx = _transaction(risk_warning="unusual")
    assert tx.to_dict()["riskWarning"] == "unusual"
    assert "money" not in tx.to_dict()


def test_phone_auth_request():
    body = phone_auth_request(
        CallInitiator.RP,
        PhoneAuthOpts(requirement=PhoneRequirement(pin_code=True)),
    )
    assert body == {"callInitiator": "RP", "requirement": {"pinCode": True}}


def test_phone_auth_request_empty_initiator():
    with pytest.raises(ValueError, match="call_initiator is empty"):
        phone_auth_request("")


def test_phone_sign_request():
    body = phone_sign_request(CallInitiator.USER, "ZGF0YQ==", PhoneSignOpts())
    assert body == {"callInitiator": "user", "userVisibleData": "ZGF0YQ=="}
    with pytest.raises(ValueError, match="user_visible_data is empty"):
        phone_sign_request(CallInitiator.USER, "")


def test_order_ref_request():
    assert order_ref_request("ref-1") == {"orderRef": "ref-1"}
    with pytest.raises(ValueError, match="order_ref is empty"):
        order_ref_request("")


def test_bodies_serialise_to_json():
    tx = _transaction(money=Money("1", "SEK"))
    for body in (
        auth_request(IP, AuthOpts(requirement=Requirement(card_reader=CardReader.CLASS1))),
        payment_request(IP, tx),
        phone_auth_request(CallInitiator.USER),
    ):
        assert json.loads(json.dumps(body)) == body