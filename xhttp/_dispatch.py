from __future__ import annotations

import json
import logging

import httpx

from ._exceptions import RequestFailed
from ._models import Command, Get, Patch, Post, Put, body_mapping

logger = logging.getLogger("xhttp.dispatch")


def send(client: httpx.Client, command: Command) -> httpx.Response:
    """
    Issue the single request described by ``command``.

    ``Get`` is sent without a body. The write methods send their pairs as a
    JSON object. Transport failures are raised as ``RequestFailed``.
    """
    try:
        if isinstance(command, Get):
            logger.info("%s %s", command.method, command.url)
            response = client.request(command.method, command.url)
        elif isinstance(command, (Post, Put, Patch)):
            body = body_mapping(command.body)
            logger.info("%s %s", command.method, command.url)
            logger.debug("JSON body: %s", json.dumps(body, ensure_ascii=False))
            response = client.request(command.method, command.url, json=body)
        else:
            raise TypeError(f"Unsupported command: {command!r}")
    except httpx.HTTPError as exc:
        raise RequestFailed(f"{type(exc).__name__}: {exc}") from exc
    logger.info(
        "%s %s -> %s %s",
        command.method,
        command.url,
        response.status_code,
        response.reason_phrase,
    )
    return response
