from typing import Any, Dict, List, Optional, Union

from ..schemas import DepositPayload, Transaction, TransferPayload
from .base import ResourceClient, segment


class TransactionsClient(ResourceClient):
    """
    Accessors for /transactions.
    """

    async def list_activities(self, account_id: str, token: str, limit: Optional[int] = None) -> List[Transaction]:
        """
        Latest activity of an account. The backend route has no limit
        parameter, so ``limit`` trims the returned list.
        """
        data = await self.transport.request("GET", f"/transactions/account/{segment(account_id)}/last", token)
        activities = self._parse_list(Transaction, data)
        if limit is not None:
            activities = activities[: max(limit, 0)]
        return activities

    async def get_activity(self, account_id: str, activity_id: str, token: str) -> Transaction:
        # account_id is not part of the route; activities are addressed globally.
        data = await self.transport.request("GET", f"/transactions/{segment(activity_id)}", token)
        return self._parse(Transaction, data)

    async def create_deposit_activity(
        self,
        account_id: int,
        payload: Union[DepositPayload, Dict[str, Any]],
        token: str,
    ) -> Transaction:
        body = payload if isinstance(payload, DepositPayload) else DepositPayload.model_validate(payload)
        data = await self.transport.request(
            "POST", f"/transactions/accounts/{segment(account_id)}/transferences", token, body
        )
        return self._parse(Transaction, data)

    async def create_transfer(self, payload: TransferPayload, token: str) -> Transaction:
        data = await self.transport.request("POST", "/transactions/transfer", token, payload)
        return self._parse(Transaction, data)
