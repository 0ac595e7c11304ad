from __future__ import annotations

import dataclasses
import typing

import httpx

from .__version__ import __version__

USER_AGENT = f"xhttp/{__version__}"
POWERED_BY = "Python"


def _default_headers() -> dict[str, str]:
    return {"User-Agent": USER_AGENT, "X-Powered-By": POWERED_BY}


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Settings applied to every request the client sends."""

    headers: typing.Mapping[str, str] = dataclasses.field(
        default_factory=_default_headers
    )
    follow_redirects: bool = False


def build_client(
    config: ClientConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    return httpx.Client(
        headers=dict(config.headers),
        follow_redirects=config.follow_redirects,
        transport=transport,
    )
