"""
Deposit and transfer orchestrators.

Both mutate balances from the client through a BalanceReconciler until the
backend settles deposits and transfers itself.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..clients.accounts import AccountsClient
from ..clients.transactions import TransactionsClient
from ..errors import ApiError, ReconciliationError, UnreadableResponseError
from ..logging_config import get_logger
from ..schemas import Transaction, TransferPayload
from .reconciler import (
    BalanceReconciler,
    ReadModifyWriteReconciler,
    ReconcileResult,
    SettlementStatus,
)

logger = get_logger("homebank.operations")


@dataclass
class TransferResult:
    transaction: Transaction
    settlement: ReconcileResult

    @property
    def settled(self) -> bool:
        return self.settlement.settled


async def deposit_money(
    accounts: AccountsClient,
    amount: float,
    account_id: str,
    token: str,
    *,
    reconciler: Optional[BalanceReconciler] = None,
    strict: bool = False,
) -> ReconcileResult:
    """
    Credit ``amount`` to ``account_id``. No transaction record is created.

    Raises ApiError when the account cannot be fetched.
    """
    reconciler = reconciler or ReadModifyWriteReconciler(accounts)
    logger.info("Deposit account=%s amount=%s", account_id, amount)
    return await reconciler.reconcile(amount, account_id, token, strict=strict)


async def create_transfer_activity(
    transactions: TransactionsClient,
    accounts: AccountsClient,
    user_id: str,
    token: str,
    origin: str,
    destination: str,
    amount: float,
    name: Optional[str] = None,
    *,
    reconciler: Optional[BalanceReconciler] = None,
    strict: bool = False,
    now: Optional[datetime] = None,
) -> TransferResult:
    """
    Record a transfer and debit the sender's balance.

    ``amount`` is the magnitude requested by the caller; the recorded
    transaction carries ``-amount``. The balance update uses the amount echoed
    back by the backend and targets ``user_id``'s account.

    A failed transaction creation raises ApiError and touches no balance.
    Once the transaction is recorded the call returns it even if the balance
    update fails; check ``result.settled``. With ``strict=True`` that failure
    raises ReconciliationError (carrying the transaction) instead.
    """
    reconciler = reconciler or ReadModifyWriteReconciler(accounts)
    payload = TransferPayload(
        amount=amount * -1,
        origin=origin,
        destination=destination,
        name=name,
        dated=now or datetime.now(timezone.utc),
    )

    try:
        transaction = await transactions.create_transfer(payload, token)
    except UnreadableResponseError:
        logger.error(
            "Transfer %s -> %s amount=%s may be recorded but its response could not be read",
            origin, destination, amount,
        )
        raise
    except ApiError as e:
        logger.error("Transfer %s -> %s amount=%s rejected: %s", origin, destination, amount, e.as_dict())
        raise

    try:
        settlement = await reconciler.reconcile(transaction.amount, user_id, token, strict=strict)
    except ReconciliationError as e:
        e.transaction = transaction
        raise
    except ApiError as e:
        logger.error(
            "Transfer %s recorded but account=%s could not be read: %s",
            transaction.id, user_id, e.as_dict(),
        )
        settlement = ReconcileResult(
            status=SettlementStatus.RECORDED_NOT_RECONCILED,
            account_id=user_id,
            amount=transaction.amount,
            error=e,
        )
        if strict:
            raise ReconciliationError(settlement, transaction) from e

    if not settlement.settled:
        logger.warning("Transfer %s recorded without balance update on account=%s", transaction.id, user_id)
    return TransferResult(transaction=transaction, settlement=settlement)
