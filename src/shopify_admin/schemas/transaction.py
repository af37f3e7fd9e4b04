"""Payments balance transaction schemas."""
from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .common import ListOptions
from .payout import PayoutStatus


class PaymentsTransactionType(str, Enum):
    """Kinds of movement recorded against the payments balance."""

    CHARGE = "charge"
    REFUND = "refund"
    DISPUTE = "dispute"
    RESERVE = "reserve"
    ADJUSTMENT = "adjustment"
    CREDIT = "credit"
    DEBIT = "debit"
    PAYOUT = "payout"
    PAYOUT_FAILURE = "payout_failure"
    PAYOUT_CANCELLATION = "payout_cancellation"


class PaymentsTransaction(BaseModel):
    """A single movement of money into or out of the payments balance.

    Monetary fields are kept as the decimal strings the API sends.
    """

    id: int | None = None
    type: PaymentsTransactionType | None = None
    test: bool | None = None
    payout_id: int | None = None
    payout_status: PayoutStatus | None = None
    currency: str | None = None
    amount: str | None = None
    fee: str | None = None
    net: str | None = None
    source_id: int | None = None
    source_type: str | None = None
    source_order_transaction_id: int | None = None
    source_order_id: int | None = None
    processed_at: date | None = None

    model_config = ConfigDict(extra="allow")


class PaymentsTransactionsListOptions(ListOptions):
    """Filters accepted by `shopify_payments/balance/transactions.json`."""

    last_id: int | None = None
    payout_id: int | None = None
    payout_status: PayoutStatus | None = None
    date_min: date | None = None
    date_max: date | None = None
    processed_at: date | None = None
