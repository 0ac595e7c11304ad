from __future__ import annotations

import json
import typing
from unittest.mock import patch

import httpx
import pytest

import xhttp


class Recorder:
    """Collects the requests a mock transport receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> typing.Any:
        return json.loads(self.last.content)


Handler = typing.Callable[[httpx.Request], httpx.Response]


def ok_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        content=b"Hello, world!",
        headers={"server": "mock", "content-type": "text/plain"},
    )


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(recorder: Recorder):
    """Return a factory building real clients backed by ``httpx.MockTransport``."""

    def factory(
        handler: Handler = ok_handler,
        config: xhttp.ClientConfig | None = None,
    ) -> httpx.Client:
        def record(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            return handler(request)

        return xhttp.build_client(
            config or xhttp.ClientConfig(), transport=httpx.MockTransport(record)
        )

    return factory


@pytest.fixture
def serve(make_client):
    """Route the CLI's client through a mock transport answering with ``handler``."""

    def install(handler: Handler = ok_handler):
        return patch(
            "xhttp.cli.build_client",
            side_effect=lambda config: make_client(handler, config),
        )

    return install
