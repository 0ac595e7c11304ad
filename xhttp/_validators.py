from __future__ import annotations

import typing

import click
import httpx

from ._exceptions import ArgumentError, InvalidPair, InvalidUrl
from ._models import KvPair

__all__ = ["KV_PAIR", "URL", "parse_kv_pair", "parse_url"]


def parse_url(url: str) -> str:
    """Check that ``url`` is absolute and return it unchanged."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidUrl(f"Invalid URL '{url}': {exc}") from exc
    if not parsed.scheme or not parsed.host:
        raise InvalidUrl(
            f"Invalid URL '{url}'. Expected an absolute URL such as "
            "'https://example.org/path'."
        )
    return url


def parse_kv_pair(token: str) -> KvPair:
    """
    Split ``token`` on its first ``=``.

    Everything after the first ``=`` is the value, so ``a=b=c`` gives the
    value ``b=c``. The key must not be empty; the value may be.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise InvalidPair(f"Failed to parse '{token}'. Expected 'key=value'.")
    if not key:
        raise InvalidPair(f"Failed to parse '{token}'. The key is empty.")
    return KvPair(key=key, value=value)


class _ValidatedParamType(click.ParamType):
    parser: typing.Callable[[str], typing.Any]

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> typing.Any:
        if not isinstance(value, str):
            return value
        try:
            return self.parser(value)
        except ArgumentError as exc:
            self.fail(str(exc), param, ctx)


class UrlParamType(_ValidatedParamType):
    name = "url"
    parser = staticmethod(parse_url)


class KvPairParamType(_ValidatedParamType):
    name = "key=value"
    parser = staticmethod(parse_kv_pair)


URL = UrlParamType()
KV_PAIR = KvPairParamType()
