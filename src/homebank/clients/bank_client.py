"""
HomeBank API client
Facade over one shared transport: resource accessors plus the deposit and
transfer operations.
"""

from typing import Optional

from ..config import Settings, get_settings
from ..logging_config import get_logger
from ..services.operations import TransferResult, create_transfer_activity, deposit_money
from ..services.reconciler import BalanceReconciler, ReadModifyWriteReconciler, ReconcileResult
from .accounts import AccountsClient
from .auth import AuthClient
from .cards import CardsClient
from .transactions import TransactionsClient
from .transport import BankTransport
from .users import UsersClient

logger = get_logger("homebank.client")


class BankApiClient:
    """
    Exposes:
      - auth, users, accounts, cards, transactions accessors
      - deposit(amount, account_id, token)
      - transfer(user_id, token, origin, destination, amount, name=None)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[BankTransport] = None,
        reconciler: Optional[BalanceReconciler] = None,
    ):
        self.settings = settings or (transport.settings if transport else get_settings())
        self.transport = transport or BankTransport(self.settings)
        self.auth = AuthClient(self.transport)
        self.users = UsersClient(self.transport)
        self.accounts = AccountsClient(self.transport)
        self.cards = CardsClient(self.transport)
        self.transactions = TransactionsClient(self.transport)
        self.reconciler = reconciler or ReadModifyWriteReconciler(self.accounts)
        logger.debug("BankApiClient ready for %s", self.transport.base_url)

    async def deposit(self, amount: float, account_id: str, token: str) -> ReconcileResult:
        return await deposit_money(
            self.accounts,
            amount,
            account_id,
            token,
            reconciler=self.reconciler,
            strict=self.settings.strict_reconcile,
        )

    async def transfer(
        self,
        user_id: str,
        token: str,
        origin: str,
        destination: str,
        amount: float,
        name: Optional[str] = None,
    ) -> TransferResult:
        return await create_transfer_activity(
            self.transactions,
            self.accounts,
            user_id,
            token,
            origin,
            destination,
            amount,
            name,
            reconciler=self.reconciler,
            strict=self.settings.strict_reconcile,
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "BankApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
