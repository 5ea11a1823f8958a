"""
Auth endpoints (login / register). These calls never send a bearer token.
"""

from typing import Any, Dict, Union

from ..schemas import AuthToken, LoginRequest, User, UserCreate
from .base import ResourceClient


class AuthClient(ResourceClient):

    async def login(self, email: str, password: str) -> AuthToken:
        data = await self.transport.request(
            "POST", "/auth/login", body=LoginRequest(email=email, password=password)
        )
        return self._parse(AuthToken, data)

    async def register(self, user: Union[UserCreate, Dict[str, Any]]) -> User:
        payload = user if isinstance(user, UserCreate) else UserCreate.model_validate(user)
        data = await self.transport.request("POST", "/auth/register", body=payload)
        return self._parse(User, data)
