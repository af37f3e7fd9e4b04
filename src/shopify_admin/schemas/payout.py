"""Payments payout schemas."""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .common import ListOptions


class PayoutStatus(str, Enum):
    """Lifecycle state of a payout."""

    SCHEDULED = "scheduled"
    IN_TRANSIT = "in_transit"
    PAID = "paid"
    FAILED = "failed"
    CANCELED = "canceled"


class Payout(BaseModel):
    """A transfer of funds from the payments balance to the merchant."""

    id: int | None = None
    date: dt.date | None = None
    currency: str | None = None
    amount: Decimal | None = None
    status: PayoutStatus | None = None

    model_config = ConfigDict(extra="allow")


class PayoutsListOptions(ListOptions):
    """Filters accepted by `shopify_payments/payouts.json`."""

    last_id: int | None = None
    status: PayoutStatus | None = None
    date_min: dt.date | None = None
    date_max: dt.date | None = None
    date: dt.date | None = None
