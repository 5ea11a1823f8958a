import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from homebank.clients import BankApiClient, BankTransport
from homebank.config import Settings

BASE_URL = "http://bank.test/api"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response], Exception]


class FakeBank:
    """
    Minimal in-process backend: routes keyed by (method, path), every
    request recorded in order.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, route: Route) -> None:
        self.routes[(method.upper(), path)] = route

    def json(self, method: str, path: str, payload: Any, status: int = 200) -> None:
        self.add(method, path, httpx.Response(status, json=payload))

    def fail(self, method: str, path: str, status: int) -> None:
        self.add(method, path, httpx.Response(status, text="error"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/api"):]
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404)
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route

    def calls(self, method: str = None, path: str = None) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == f"/api{path}")
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None


@pytest.fixture
def settings():
    return Settings(base_url=BASE_URL)


@pytest.fixture
def bank():
    return FakeBank()


@pytest_asyncio.fixture
async def transport(settings, bank):
    client = httpx.AsyncClient(transport=httpx.MockTransport(bank.handler))
    yield BankTransport(settings, client=client)
    await client.aclose()


@pytest.fixture
def api(settings, transport):
    return BankApiClient(settings, transport=transport)
