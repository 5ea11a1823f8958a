"""
Transport primitive
Builds outbound request descriptors and classifies backend responses.

Every call either returns the decoded JSON body of a 2xx response or raises
ApiError with the normalized {status, statusText, err} shape.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from ..config import Settings, get_settings
from ..errors import ApiError, UnreadableResponseError
from ..logging_config import get_logger

logger = get_logger("homebank.transport")


@dataclass
class RequestOptions:
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None


def _serialize_body(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        data = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        data = to_jsonable_python(body)
    return json.dumps(data).encode("utf-8")


def build_request(method: str = "GET", token: Optional[str] = None, body: Any = None) -> RequestOptions:
    """
    Build the request descriptor for one backend call.

    The Authorization header is always present: ``Bearer <token>`` when a
    token is given, otherwise an empty string.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}" if token else "",
    }
    content = _serialize_body(body) if body is not None else None
    return RequestOptions(method=method.upper(), headers=headers, content=content)


class BankTransport:
    """
    Async HTTP transport bound to the configured backend base URL.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.settings.request_timeout)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        body: Any = None,
    ) -> Any:
        options = build_request(method, token, body)
        url = self.url(path)
        try:
            resp = await self._client.request(
                options.method, url, headers=options.headers, content=options.content
            )
        except httpx.RequestError as e:
            logger.error("HomeBank %s %s unreachable: %s", options.method, url, e)
            raise ApiError() from e

        logger.info("HomeBank %s %s -> %s", options.method, url, resp.status_code)
        if not resp.is_success:
            logger.warning("HomeBank %s %s failed: %s %s", options.method, url, resp.status_code, resp.text)
            raise ApiError.from_response(resp)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.error("HomeBank %s %s returned a non-JSON body", options.method, url)
            raise UnreadableResponseError() from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "BankTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
