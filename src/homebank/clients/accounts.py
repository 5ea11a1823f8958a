from typing import Any, Dict, List, Union

from ..schemas import Account, AccountPatch
from .base import ResourceClient, segment


class AccountsClient(ResourceClient):
    """
    Accessors for /accounts.
    """

    async def get_account(self, account_id: str, token: str) -> Account:
        data = await self.transport.request("GET", f"/accounts/{segment(account_id)}", token)
        return self._parse(Account, data)

    async def list_accounts(self) -> List[Account]:
        data = await self.transport.request("GET", "/accounts")
        return self._parse_list(Account, data)

    async def update_account(
        self,
        account_id: str,
        patch: Union[AccountPatch, Dict[str, Any]],
        token: str,
    ) -> Any:
        """
        Partially update an account. The patch is validated before anything
        is sent; the raw backend response is returned.
        """
        payload = patch if isinstance(patch, AccountPatch) else AccountPatch.model_validate(patch)
        return await self.transport.request("PATCH", f"/accounts/{segment(account_id)}", token, payload)
