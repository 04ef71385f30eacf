"""
Offline fixtures for harness unit tests
An in-process stand-in for the posts API served through httpx.MockTransport
"""

import json
from typing import Any, AsyncGenerator, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from api_smoke.rest_client import RestClient
from api_smoke.settings import SmokeConfig

BASE_URL = "https://posts.test"

POST_1 = {
    "userId": 1,
    "id": 1,
    "title": "sunt aut facere repellat provident occaecati excepturi optio reprehenderit",
    "body": "quia et suscipit\nsuscipit recusandae consequuntur expedita et cum",
}


def pretty(data: Any) -> str:
    """Render JSON the way the live API does (two-space indent)"""
    return json.dumps(data, indent=2)


class FakePostsApi:
    """Serves /posts and /posts/1 and records every request it receives"""

    def __init__(self):
        self.calls: List[httpx.Request] = []
        self._overrides: Dict[Tuple[str, str], httpx.Response] = {}

    def respond_with(self, method: str, path: str, status_code: int, text: str = ""):
        """Replace the canned response for one method and path"""
        self._overrides[(method, path)] = httpx.Response(status_code, text=text)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        key = (request.method, request.url.path)

        if key in self._overrides:
            return self._overrides[key]

        if key == ("GET", "/posts/1"):
            return httpx.Response(200, text=pretty(POST_1))
        if key == ("POST", "/posts"):
            created = {**json.loads(request.content), "id": 101}
            return httpx.Response(201, text=pretty(created))
        if key == ("PUT", "/posts/1"):
            return httpx.Response(200, text=pretty(json.loads(request.content)))
        if key == ("DELETE", "/posts/1"):
            return httpx.Response(200, text="{}")
        return httpx.Response(404, text="{}")


@pytest.fixture
def smoke_config() -> SmokeConfig:
    return SmokeConfig(api_base_url=BASE_URL, http_timeout=None, log_level="INFO")


@pytest.fixture
def fake_api() -> FakePostsApi:
    return FakePostsApi()


@pytest_asyncio.fixture
async def rest_client(reporter, smoke_config, fake_api) -> AsyncGenerator[RestClient, None]:
    """REST client wired to the fake API instead of the network"""
    async with RestClient(reporter, smoke_config, transport=httpx.MockTransport(fake_api)) as client:
        yield client


@pytest.fixture
def failing_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a transport whose every request fails with a connection error"""
    def build(error: Optional[Exception] = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error or httpx.ConnectError("Connection refused", request=request)

        return httpx.MockTransport(handler)

    return build


@pytest.fixture
def smoke_results():
    """Unit runs stay out of the live session summary"""
    return []
