from __future__ import annotations

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class KvPair:
    """One ``key=value`` body field given on the command line."""

    key: str
    value: str


@dataclasses.dataclass(frozen=True)
class Get:
    url: str

    method: typing.ClassVar[str] = "GET"


@dataclasses.dataclass(frozen=True)
class Post:
    url: str
    body: typing.Tuple[KvPair, ...] = ()

    method: typing.ClassVar[str] = "POST"


@dataclasses.dataclass(frozen=True)
class Put:
    url: str
    body: typing.Tuple[KvPair, ...] = ()

    method: typing.ClassVar[str] = "PUT"


@dataclasses.dataclass(frozen=True)
class Patch:
    url: str
    body: typing.Tuple[KvPair, ...] = ()

    method: typing.ClassVar[str] = "PATCH"


Command = typing.Union[Get, Post, Put, Patch]
WriteCommand = typing.Union[Post, Put, Patch]


def body_mapping(pairs: typing.Iterable[KvPair]) -> dict[str, str]:
    """Collapse pairs into a mapping; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
