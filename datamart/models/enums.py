from enum import Enum

from sqlalchemy import Enum as SAEnum


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CreditCard"
    BANK_TRANSFER = "BankTransfer"
    CASH = "Cash"
    VOUCHER = "Voucher"
    PAYPAL = "PayPal"
    APPLE_PAY = "ApplePay"
    GPAY = "GPay"
    CREDIT_CARD_MASTERCARD = "CreditCard_MasterCard"
    CREDIT_CARD_VISA = "CreditCard_Visa"
    CREDIT_CARD_AMEX = "CreditCard_AMEX"
    CREDIT_CARD_FIRSTCARD = "CreditCard_FirstCard"
    CREDIT_CARD_DINERS_CLUB = "CreditCard_DinersClub"
    MAESTRO = "Maestro"
    SOFORT_PAYMENT = "SOFORT_Payment"
    BNPL = "BNPL"
    KLARNA = "Klarna"


class TransactionType(str, Enum):
    PAYMENT = "Payment"
    REFUND = "Refund"


class ReviewerType(str, Enum):
    GUEST = "Guest"
    HOST = "Host"


def enum_column_type(enum_class, name: str) -> SAEnum:
    """Portable enum type storing the literal values behind a CHECK constraint"""
    return SAEnum(
        enum_class,
        name=name,
        native_enum=False,
        create_constraint=True,
        validate_strings=True,
        values_callable=lambda members: [member.value for member in members],
        length=max(len(member.value) for member in enum_class),
    )
