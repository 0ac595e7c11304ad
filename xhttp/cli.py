from __future__ import annotations

import dataclasses
import logging
import sys

import click

from .__version__ import __version__
from ._config import ClientConfig, build_client
from ._dispatch import send
from ._exceptions import XhttpError
from ._models import Command, Get, KvPair, Patch, Post, Put
from ._render import render, render_error
from ._validators import KV_PAIR, URL

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclasses.dataclass(frozen=True)
class Options:
    use_rich: bool
    config: ClientConfig = dataclasses.field(default_factory=ClientConfig)


def log_level(verbose: int) -> int:
    if verbose <= 0:
        return logging.WARNING
    elif verbose == 1:
        return logging.INFO
    else:
        return logging.DEBUG


def configure_logging(verbose: int) -> None:
    """Send log records to stderr at a level picked by the ``-v`` count."""
    level = log_level(verbose)
    logging.basicConfig(level=level, stream=sys.stderr, format=LOG_FORMAT)
    logging.getLogger("xhttp").setLevel(level)
    # httpx logs every request at INFO; show those from -vv on.
    logging.getLogger("httpx").setLevel(log_level(verbose - 1))


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def run(command: Command, options: Options) -> None:
    """Send ``command``, render the response, exit 1 on failure."""
    try:
        with build_client(options.config) as client:
            response = send(client, command)
        render(response, options.use_rich)
    except XhttpError as exc:
        render_error(exc, options.use_rich)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


@click.group(help="A small httpie-style HTTP client.")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log more detail to stderr. Repeat for debug output.",
)
@click.option(
    "--no-color", is_flag=True, default=False, help="Disable colored output."
)
@click.version_option(__version__, prog_name="xhttp")
@click.pass_context
def main(ctx: click.Context, verbose: int, no_color: bool) -> None:
    configure_logging(verbose)
    ctx.obj = Options(use_rich=not no_color and stdout_is_terminal())


@main.command(help="Send a GET request.")
@click.argument("url", type=URL)
@click.pass_obj
def get(options: Options, url: str) -> None:
    run(Get(url=url), options)


@main.command(help="Send a POST request with key=value pairs as a JSON body.")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
@click.pass_obj
def post(options: Options, url: str, body: tuple[KvPair, ...]) -> None:
    run(Post(url=url, body=body), options)


@main.command(help="Send a PUT request with key=value pairs as a JSON body.")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
@click.pass_obj
def put(options: Options, url: str, body: tuple[KvPair, ...]) -> None:
    run(Put(url=url, body=body), options)


@main.command(help="Send a PATCH request with key=value pairs as a JSON body.")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
@click.pass_obj
def patch(options: Options, url: str, body: tuple[KvPair, ...]) -> None:
    run(Patch(url=url, body=body), options)
