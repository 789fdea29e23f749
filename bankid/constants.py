"""Fixed values of the BankID relying-party API: URLs, enumerations and user messages."""

from __future__ import annotations

from enum import Enum

PROD_URL = "https://appapi2.bankid.com"
TEST_URL = "https://appapi2.test.bankid.com"


class Language(str, Enum):
    """Language of a recommended user message."""

    SWEDISH = "swe"
    ENGLISH = "eng"


class CertificatePolicy(str, Enum):
    """OID restricting the kind of BankID an order can be completed with."""

    PROD_BANKID_ON_FILE = "1.2.752.78.1.1"
    PROD_BANKID_ON_CARD = "1.2.752.78.1.2"
    PROD_MOBILE_BANKID = "1.2.752.78.1.5"
    TEST_BANKID_ON_FILE = "1.2.3.4.5"
    TEST_BANKID_ON_CARD = "1.2.3.4.10"
    TEST_MOBILE_BANKID = "1.2.3.4.25"
    TEST_BANKID_FOR_SOME_BANKID_BANKS = "1.2.752.60.1.6"


class UserVisibleDataFormat(str, Enum):
    """How the user visible data is to be interpreted."""

    PLAINTEXT = "plaintext"
    SIMPLE_MARKDOWN_V1 = "simpleMarkdownV1"


class CardReader(str, Enum):
    """Class of card reader the order must be confirmed with."""

    CLASS1 = "class1"
    CLASS2 = "class2"


class RiskFlag(str, Enum):
    """Signals to the risk assessment that a payment is unusual for the user."""

    NEW_CARD = "newCard"
    NEW_CUSTOMER = "newCustomer"
    NEW_RECIPIENT = "newRecipient"
    HIGH_RISK_RECIPIENT = "highRiskRecipient"
    LARGE_AMOUNT = "largeAmount"
    FOREIGN_CURRENCY = "foreignCurrency"
    CRYPTO_CURRENCY_PURCHASE = "cryptoCurrencyPurchase"
    MONEY_TRANSFER = "moneyTransfer"
    OVERSEAS_TRANSACTION = "overseasTransaction"
    RECURRING_PAYMENT = "recurringPayment"
    SUSPICIOUS_PAYMENT_PATTERN = "suspiciousPaymentPattern"
    OTHER = "other"


class TransactionType(str, Enum):
    """Type of a payment transaction."""

    CARD = "card"
    NPA = "npa"


class CallInitiator(str, Enum):
    """Who started the phone call of a phone order."""

    USER = "user"
    RP = "RP"


class Status(str, Enum):
    """Current status of an order."""

    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class HintCode(str, Enum):
    """Detail on the state of a pending or failed order."""

    OUTSTANDING_TRANSACTION = "outstandingTransaction"
    NO_CLIENT = "noClient"
    STARTED = "started"
    USER_MRTD = "userMrtd"
    USER_CALL_CONFIRM = "userCallConfirm"
    USER_SIGN = "userSign"

    EXPIRED_TRANSACTION = "expiredTransaction"
    CERTIFICATE_ERR = "certificateErr"
    USER_CANCEL = "userCancel"
    CANCELLED = "cancelled"
    START_FAILED = "startFailed"
    USER_DECLINED_CALL = "userDeclinedCall"
    NOT_SUPPORTED_BY_USER_APP = "notSupportedByUserApp"
    TRANSACTION_RISK_BLOCKED = "transactionRiskBlocked"

    def is_final(self) -> bool:
        """True if the code marks a failed order that must not be collected again."""
        return self in _FINAL_HINT_CODES


_FINAL_HINT_CODES = frozenset(
    {
        HintCode.EXPIRED_TRANSACTION,
        HintCode.CERTIFICATE_ERR,
        HintCode.USER_CANCEL,
        HintCode.CANCELLED,
        HintCode.START_FAILED,
        HintCode.USER_DECLINED_CALL,
        HintCode.NOT_SUPPORTED_BY_USER_APP,
        HintCode.TRANSACTION_RISK_BLOCKED,
    }
)


class Risk(str, Enum):
    """Risk level assessed for an order."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


_MESSAGES: dict[str, dict[Language, str]] = {
    "RFA1": {
        Language.SWEDISH: "Starta BankID-appen.",
        Language.ENGLISH: "Start your BankID app. ",
    },
    "RFA2": {
        Language.SWEDISH: "Du verkar inte ha BankID-appen. Installera den och skaffa ett BankID.",
        Language.ENGLISH: "You don't seem to have the BankID app. Install the app and get a BankID.",
    },
    "RFA3": {
        Language.SWEDISH: "Åtgärden avbröts. Försök igen.",
        Language.ENGLISH: "The action was cancelled. Please try again.",
    },
    "RFA4": {
        Language.SWEDISH: "En identifiering eller underskrift pågår redan för ditt personnummer. Försök igen.",
        Language.ENGLISH: "An identification or signature is already in progress for your personal identity number. Please try again.",
    },
    "RFA5": {
        Language.SWEDISH: "Något gick fel. Försök igen.",
        Language.ENGLISH: "Something went wrong. Please try again.",
    },
    "RFA6": {
        Language.SWEDISH: "Åtgärden avbröts.",
        Language.ENGLISH: "The action was cancelled.",
    },
    "RFA8": {
        Language.SWEDISH: "BankID-appen svarar inte. Kontrollera att den är startad och att du har internetanslutning. Försök sedan igen.",
        Language.ENGLISH: "The BankID app is not responding. Please check that it’s started and that you have internet access. Try again.",
    },
    "RFA9": {
        Language.SWEDISH: "Skriv in din säkerhetskod i BankID-appen och välj Identifiera eller Skriv under.",
        Language.ENGLISH: "Enter your security code in the BankID app and select Identify or Sign.",
    },
    "RFA13": {
        Language.SWEDISH: "Försöker starta BankID-appen.",
        Language.ENGLISH: "Trying to start your BankID app.",
    },
    "RFA15A": {
        Language.SWEDISH: "Söker efter BankID. Säkerställ att du har ett giltigt BankID på den här datorn. Om du har ett BankID på kort, sätt in kortet i kortläsaren.",
        Language.ENGLISH: "Searching for BankID. Make sure you have a valid BankID on this computer. If you have a BankID on card, please insert the card into your card reader.",
    },
    "RFA15B": {
        Language.SWEDISH: "Söker efter BankID. Säkerställ att du har ett gitligt BankID på den här enheten.",
        Language.ENGLISH: "Searching for BankID. Make sure you have a valid BankID on this device.",
    },
    "RFA16": {
        Language.SWEDISH: "Ditt BankID är för gammalt eller spärrat. Använd ett annat BankID eller skaffa ett nytt hos din bank.",
        Language.ENGLISH: "Your BankID is blocked or too old. Please use another BankID or get a new one from your bank.",
    },
    "RFA17A": {
        Language.SWEDISH: "Du verkar inte ha BankID-appen/programmet. Installera den och skaffa ett BankID hos din bank.",
        Language.ENGLISH: "You don't seem to have the BankID app/program. Please install it and get a BankID from your bank.",
    },
    "RFA17B": {
        Language.SWEDISH: "Misslyckades att läsa av QR-koden. Starta BankID-appen och läs av QR-koden.",
        Language.ENGLISH: "Failed to scan the QR code. Start the BankID app and scan the QR code.",
    },
    "RFA19": {
        Language.SWEDISH: "Vill du använda BankID på den här datorn eller ett Mobilt BankID?",
        Language.ENGLISH: "Would you like to use BankID on this computer, or a Mobile BankID?",
    },
    "RFA20": {
        Language.SWEDISH: "Vill du använda BankID på den här enheten eller på en annan enhet?",
        Language.ENGLISH: "Do you want to use BankID on this device or another device?",
    },
    "RFA21": {
        Language.SWEDISH: "En identifiering eller underskrift pågår.",
        Language.ENGLISH: "An identification or signing is in progress.",
    },
    "RFA22": {
        Language.SWEDISH: "Något gick fel. Försök igen.",
        Language.ENGLISH: "Something went wrong. Please try again.",
    },
    "RFA23": {
        Language.SWEDISH: "Fotografera och läs av din ID-handling med BankID-appen.",
        Language.ENGLISH: "Take a photo of, and scan, you ID document with the BankID app.",
    },
}

MESSAGE_CODES: tuple[str, ...] = tuple(_MESSAGES)


def recommended_message(code: str, language: Language | str = Language.ENGLISH) -> str:
    """Return the recommended user message for an RFA code such as ``"RFA15A"``.

    Raises ValueError for an unknown code or language.
    """
    lang = Language(language)
    key = code.strip().upper()
    try:
        return _MESSAGES[key][lang]
    except KeyError:
        raise ValueError(f"unknown message code: {code!r}") from None