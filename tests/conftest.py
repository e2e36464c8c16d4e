"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from openfoodfacts_client.builder import v0, v2
from openfoodfacts_client.client import OffClientV0, OffClientV2


@dataclass
class RecordingTransport:
    """Mock transport that records requests and answers with a fixed status."""

    status_code: int = 200
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"status": 1})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def v0_client(recorder: RecordingTransport) -> Iterator[OffClientV0]:
    with v0().build(transport=recorder.transport()) as client:
        yield client


@pytest.fixture
def v2_client(recorder: RecordingTransport) -> Iterator[OffClientV2]:
    with v2().build(transport=recorder.transport()) as client:
        yield client
