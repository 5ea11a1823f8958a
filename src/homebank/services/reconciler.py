"""
Balance reconciliation
Merges a signed delta into an account's persisted balance.

ReadModifyWriteReconciler is the client-side stand-in used until the backend
exposes a single idempotent endpoint that applies a signed delta. It reads the
account, adds the delta and patches the new balance back: two independent
round trips with no version check, so concurrent callers can overwrite each
other's update (lost update). Orchestrators only depend on BalanceReconciler,
so a delta-endpoint strategy can replace it without touching their call sites.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from ..clients.accounts import AccountsClient
from ..errors import ApiError, ReconciliationError
from ..logging_config import get_logger
from ..schemas import AccountPatch

logger = get_logger("homebank.reconciler")


class SettlementStatus(str, Enum):
    SETTLED_FULLY = "settled_fully"
    RECORDED_NOT_RECONCILED = "recorded_not_reconciled"


@dataclass
class ReconcileResult:
    status: SettlementStatus
    account_id: str
    amount: float
    previous_balance: Optional[float] = None
    new_balance: Optional[float] = None
    error: Optional[ApiError] = None

    @property
    def settled(self) -> bool:
        return self.status is SettlementStatus.SETTLED_FULLY


class BalanceReconciler(ABC):

    @abstractmethod
    async def reconcile(
        self,
        amount: float,
        account_id: str,
        token: str,
        *,
        strict: bool = False,
    ) -> ReconcileResult:
        """
        Apply ``amount`` (signed: credit positive, debit negative) to the
        balance of ``account_id``.
        """


class ReadModifyWriteReconciler(BalanceReconciler):
    """
    Fetch, add, patch.

    A failed fetch raises ApiError and nothing is patched. A failed patch is
    logged and reported as RECORDED_NOT_RECONCILED; with ``strict=True`` it
    raises ReconciliationError instead.
    """

    def __init__(self, accounts: AccountsClient):
        self.accounts = accounts

    async def reconcile(
        self,
        amount: float,
        account_id: str,
        token: str,
        *,
        strict: bool = False,
    ) -> ReconcileResult:
        account = await self.accounts.get_account(account_id, token)
        new_balance = account.balance + amount
        logger.info(
            "Reconciling account=%s balance=%s amount=%s new_balance=%s",
            account.id, account.balance, amount, new_balance,
        )

        result = ReconcileResult(
            status=SettlementStatus.SETTLED_FULLY,
            account_id=account.id,
            amount=amount,
            previous_balance=account.balance,
            new_balance=new_balance,
        )
        try:
            patch = AccountPatch(balance=new_balance)
            await self.accounts.update_account(account.id, patch, token)
        except ValidationError as e:
            # e.g. the sum overflowed to inf; nothing was sent
            logger.error("Refusing to patch account=%s with new_balance=%s", account.id, new_balance)
            error, cause = ApiError(), e
        except ApiError as e:
            logger.error(
                "Balance patch failed for account=%s new_balance=%s: %s",
                account.id, new_balance, e.as_dict(),
            )
            error, cause = e, e
        else:
            return result

        result.status = SettlementStatus.RECORDED_NOT_RECONCILED
        result.error = error
        if strict:
            raise ReconciliationError(result) from cause
        return result
