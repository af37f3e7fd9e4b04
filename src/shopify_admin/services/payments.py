"""Payments payouts and balance transactions.

Both resources are read-only: they can be listed, paginated and fetched by
id, nothing else.
"""

from __future__ import annotations

from shopify_admin.schemas.payout import Payout, PayoutsListOptions
from shopify_admin.schemas.transaction import (
    PaymentsTransaction,
    PaymentsTransactionsListOptions,
)
from shopify_admin.services.base import ReadOnlyResourceService


class PayoutService(ReadOnlyResourceService[Payout, PayoutsListOptions]):
    base_path = "shopify_payments/payouts"
    resource_key = "payout"
    collection_key = "payouts"
    model = Payout


class PaymentsTransactionService(
    ReadOnlyResourceService[PaymentsTransaction, PaymentsTransactionsListOptions]
):
    base_path = "shopify_payments/balance/transactions"
    resource_key = "transaction"
    collection_key = "transactions"
    model = PaymentsTransaction
