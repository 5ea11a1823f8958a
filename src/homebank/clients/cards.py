from typing import Any, Dict, List, Union

from ..schemas import Card, CardCreate
from .base import ResourceClient, segment


class CardsClient(ResourceClient):
    """
    Accessors for the cards attached to an account.
    """

    def _path(self, account_id: str) -> str:
        return f"/accounts/{segment(account_id)}/cards"

    async def list_cards(self, account_id: str, token: str) -> List[Card]:
        data = await self.transport.request("GET", self._path(account_id), token)
        return self._parse_list(Card, data)

    async def get_card(self, account_id: str, card_id: str) -> Card:
        data = await self.transport.request("GET", f"{self._path(account_id)}/{segment(card_id)}")
        return self._parse(Card, data)

    async def delete_card(self, account_id: str, card_id: str, token: str) -> Any:
        return await self.transport.request("DELETE", f"{self._path(account_id)}/{segment(card_id)}", token)

    async def create_card(self, account_id: str, card: Union[CardCreate, Dict[str, Any]], token: str) -> Card:
        payload = card if isinstance(card, CardCreate) else CardCreate.model_validate(card)
        data = await self.transport.request("POST", self._path(account_id), token, payload)
        return self._parse(Card, data)
