from typing import Any, Dict, Union

from ..schemas import User, UserPatch
from .base import ResourceClient, segment


class UsersClient(ResourceClient):

    async def get_user_by_email(self, email: str, token: str) -> User:
        data = await self.transport.request("GET", f"/users/email/{segment(email)}", token)
        return self._parse(User, data)

    async def get_user(self, user_id: str, token: str) -> User:
        # The backend resolves users by email on this route as well.
        data = await self.transport.request("GET", f"/users/email/{segment(user_id)}", token)
        return self._parse(User, data)

    async def update_user(self, user_id: str, patch: Union[UserPatch, Dict[str, Any]], token: str) -> User:
        payload = patch if isinstance(patch, UserPatch) else UserPatch.model_validate(patch)
        data = await self.transport.request("PATCH", f"/users/id/{segment(user_id)}", token, payload)
        return self._parse(User, data)
