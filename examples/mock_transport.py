"""
Offline Requests & Rendering
============================

Sends commands through an ``httpx.MockTransport`` so the dispatcher and both
renderers can be tried without a network.
"""

import httpx
from rich.console import Console

import xhttp


def echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        content=request.content or b'{"hello": "world"}',
        headers={"Content-Type": "application/json", "X-Method": request.method},
    )


def main() -> None:
    transport = httpx.MockTransport(echo)

    with xhttp.build_client(xhttp.ClientConfig(), transport=transport) as client:
        # ── GET, plain rendering ─────────────────────────────────────────
        print("── GET (plain) ─────────────────────────────────────────────────")
        response = xhttp.send(client, xhttp.Get("https://example.com/"))
        print(xhttp.format_response_plain(response))
        print()

        # ── POST, rich rendering ─────────────────────────────────────────
        print("── POST (rich) ─────────────────────────────────────────────────")
        pairs = tuple(xhttp.parse_kv_pair(t) for t in ("name=xhttp", "name=again"))
        response = xhttp.send(client, xhttp.Post("https://example.com/", pairs))
        xhttp.print_response_rich(Console(force_terminal=True), response)


if __name__ == "__main__":
    main()
