"""Hardcoded sample data for the demo drivers."""

from __future__ import annotations

from .models import (
    ACHData,
    ChargebackTransaction,
    CreditTransaction,
    DebitTransaction,
    Originator,
    Transaction,
)
from .nacha import PPD


def sample_meta() -> ACHData:
    return ACHData(
        destination="123456780",
        destination_name="DEST BANK",
        origin="123456789",
        origin_name="ORIG BANK",
        transactions_date="231229",
        reference_code="1",
        standard_entry_class_code=PPD,
        batch_number=4964830,
    )


def sample_originator() -> Originator:
    return Originator(
        company_name="COMPANYONE",
        company_description="VNDR PAY",
        identification="123456780",
    )


def sample_transactions() -> list[Transaction]:
    """Five credits and two debits against consecutive accounts."""

    return [
        CreditTransaction("1111111111", "CompOne", "8058467", 234430),
        DebitTransaction("1111111112", "CompTwo", "8058468", 100000),
        CreditTransaction("1111111113", "CompThree", "8058469", 200000),
        CreditTransaction("1111111114", "CompFour", "8058470", 500000),
        CreditTransaction("1111111115", "CompFive", "8058471", 800000),
        DebitTransaction("1111111116", "CompSix", "8058472", 107000),
        CreditTransaction("1111111117", "CompSeven", "8058473", 103400),
    ]


def sample_chargebacks() -> list[Transaction]:
    return [
        ChargebackTransaction(
            depository_account_number="1111111117",
            receiving_company="CompEight",
            original_trace_number="8058474",
            amount=103400,
            return_code="R10",
            original_trace="1111111111",
            addenda_information="Authorization Revoked",
            original_depository_institution="123456780",
        ),
    ]


__all__ = [
    "sample_chargebacks",
    "sample_meta",
    "sample_originator",
    "sample_transactions",
]
