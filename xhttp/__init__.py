from .__version__ import __description__, __title__, __version__
from ._config import ClientConfig, build_client
from ._dispatch import send
from ._exceptions import (
    ArgumentError,
    InvalidPair,
    InvalidUrl,
    RenderError,
    RequestFailed,
    XhttpError,
)
from ._models import Command, Get, KvPair, Patch, Post, Put, body_mapping
from ._render import format_response_plain, lexer_name_for, print_response_rich
from ._validators import parse_kv_pair, parse_url
from .cli import main

_EXCLUDED_FROM_ALL = {"cli"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
