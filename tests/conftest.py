import asyncio
import json

import httpx
import pytest

from gym_admin.backend import BackendClient

NULL = "\x00"
CONNECTED_FRAME = "CONNECTED\nversion:1.2\nheart-beat:0,0\n\n" + NULL
_CLOSE = object()


@pytest.fixture
def anyio_backend():
    return "asyncio"


def message_frame(body: str, message_id: int = 1) -> str:
    return (
        "MESSAGE\n"
        "destination:/topic/access-logs\n"
        "subscription:sub-1\n"
        f"message-id:{message_id}\n"
        "content-type:application/json\n"
        "\n"
        f"{body}{NULL}"
    )


def event_frame(user_name: str, event_type: str, message_id: int = 1) -> str:
    return message_frame(json.dumps({"userName": user_name, "type": event_type}), message_id)


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection."""

    def __init__(self, handshake: str = CONNECTED_FRAME):
        self.sent = []
        self.inbox: asyncio.Queue = asyncio.Queue()
        self.closed = False
        if handshake is not None:
            self.inbox.put_nowait(handshake)

    # context manager
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True
        return False

    # transport
    async def send(self, data):
        self.sent.append(data)

    async def recv(self):
        item = await self.inbox.get()
        if item is _CLOSE:
            raise ConnectionError("connection closed")
        if isinstance(item, BaseException):
            raise item
        return item

    def __aiter__(self):
        return self

    async def __anext__(self):
        item = await self.inbox.get()
        if item is _CLOSE:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item

    # test helpers
    def push(self, raw) -> None:
        self.inbox.put_nowait(raw)

    def push_event(self, user_name: str, event_type: str) -> None:
        self.push(event_frame(user_name, event_type))

    def drop(self) -> None:
        """Simulate the peer closing the connection."""
        self.inbox.put_nowait(_CLOSE)

    def fail(self, error: BaseException) -> None:
        self.inbox.put_nowait(error)

    def sent_commands(self):
        return [frame.split("\n", 1)[0] for frame in self.sent]


class FakeConnector:
    """
    Connect factory for EventStreamClient. Planned items are used in order:
    an exception is raised as a connect failure, a FakeWebSocket is returned.
    Once the plan runs out every attempt gets a fresh, healthy socket.
    """

    def __init__(self, *planned):
        self.planned = list(planned)
        self.sockets = []
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        item = self.planned.pop(0) if self.planned else FakeWebSocket()
        if isinstance(item, BaseException):
            raise item
        self.sockets.append(item)
        return item

    @property
    def attempts(self) -> int:
        return len(self.urls)

    @property
    def latest(self) -> FakeWebSocket:
        return self.sockets[-1]


async def wait_until(predicate, timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.005)


class FakeBackend:
    """Routes (method, path) to canned JSON responses and records requests."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method: str, path: str, status_code: int = 200, body=None) -> None:
        self.routes[(method, path)] = (status_code, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, payload))

        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not found"})

        status_code, body = self.routes[key]
        if isinstance(body, BaseException):
            raise body
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def calls(self, method: str, path: str):
        return [payload for m, p, payload in self.requests if m == method and p == path]

    def client(self) -> BackendClient:
        return BackendClient(
            base_url="http://backend.test", timeout=1, transport=httpx.MockTransport(self)
        )


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


SUMMARY = {
    "entriesToday": 4,
    "paymentsTodayAmount": 1200,
    "newClientsToday": 2,
    "activeClients": 85,
    "expiringMembershipsNext7Days": 7,
    "paymentsThisMonthAmount": 23500,
}

PLAN = {"id": 3, "name": "Monthly", "durationDays": 30, "price": 450.0, "description": "Full access"}


def subscription_payload(status: str = "ACTIVE", sub_id: int = 11) -> dict:
    return {
        "id": sub_id,
        "user": {"id": 7, "name": "Ana Torres", "email": "ana@example.com"},
        "membership": PLAN,
        "startDate": "2026-10-01",
        "endDate": "2026-10-31",
        "autoRenew": False,
        "status": status,
    }
