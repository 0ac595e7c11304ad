from __future__ import annotations

__all__ = [
    "ArgumentError",
    "InvalidPair",
    "InvalidUrl",
    "RenderError",
    "RequestFailed",
    "XhttpError",
]


class XhttpError(Exception):
    """Base class for failures after the command line has been accepted."""


class RequestFailed(XhttpError):
    """The request could not be completed (network, DNS, TLS, timeout)."""


class RenderError(XhttpError):
    """The response body could not be decoded or highlighted."""


class ArgumentError(ValueError):
    """Base class for invalid command-line values."""


class InvalidUrl(ArgumentError):
    pass


class InvalidPair(ArgumentError):
    pass
