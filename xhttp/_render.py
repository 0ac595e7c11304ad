from __future__ import annotations

import click
import httpx
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from rich.console import Console
from rich.segment import Segments
from rich.syntax import Syntax
from rich.text import Text

from ._exceptions import RenderError

__all__ = [
    "debug_value",
    "decode_body",
    "format_response_plain",
    "lexer_name_for",
    "normalize_content_type",
    "print_response_rich",
    "render",
    "render_error",
]

# Exact content types (after normalisation) that get highlighted.
LEXERS: dict[str, str] = {
    "application/json": "json",
    "text/html": "html",
    "text/html; charset=utf-8": "html",
    "text/css": "css",
    "text/css; charset=utf-8": "css",
    "application/javascript": "javascript",
}

THEME = "monokai"

HEADING_STYLE = "bold #a46fa4"
VERSION_STYLE = "#435fa4"
HEADER_NAME_STYLE = "#9dadd4"


def _status_color(status_code: int) -> str:
    """Return a rich color name based on HTTP status category."""
    if status_code < 200:
        return "cyan"
    elif status_code < 300:
        return "green"
    elif status_code < 400:
        return "yellow"
    elif status_code < 500:
        return "red"
    else:
        return "bold red"


def normalize_content_type(content_type: str) -> str:
    """Lower-case a content type and tidy the whitespace around ``;``."""
    parts = [part.strip().lower() for part in content_type.split(";")]
    return "; ".join(part for part in parts if part)


def lexer_name_for(content_type: str | None) -> str | None:
    """Return the highlighter for ``content_type``, or None for raw output."""
    if content_type is None:
        return None
    return LEXERS.get(normalize_content_type(content_type))


def debug_value(value: str) -> str:
    """Quote a header value, escaping quotes and non-printable characters."""
    out = ['"']
    for char in value:
        if char == '"':
            out.append('\\"')
        elif char == "\t" or " " <= char <= "~":
            out.append(char)
        else:
            out.extend(f"\\x{byte:x}" for byte in char.encode("utf-8"))
    out.append('"')
    return "".join(out)


def decode_body(response: httpx.Response) -> str:
    """Decode the whole body strictly, using the declared charset or UTF-8."""
    encoding = response.charset_encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise RenderError(
            f"Cannot decode response body as {encoding}: {exc}"
        ) from exc


def _load_lexer(name: str) -> Lexer:
    try:
        return get_lexer_by_name(name, stripnl=False, ensurenl=True)
    except ClassNotFound as exc:
        raise RenderError(f"No highlighter available for '{name}'.") from exc


def _print_verbatim(console: Console, text: Text, end: str = "") -> None:
    """Write ``text`` without wrapping, cropping or expanding tabs."""
    console.print(Segments(text.render(console, end=end)), soft_wrap=True, end="")


def _status_parts(response: httpx.Response) -> tuple[str, str]:
    status = f"{response.status_code} {response.reason_phrase}".rstrip()
    return response.http_version, status


# ---------------------------------------------------------------------------
# Plain-text formatter (used with --no-color or when stdout is not a terminal)
# ---------------------------------------------------------------------------


def format_response_plain(response: httpx.Response) -> str:
    http_version, status = _status_parts(response)
    lines: list[str] = ["[status]", f"{http_version} {status}", "[headers]"]

    for key, value in response.headers.multi_items():
        lines.append(f"{key}: {debug_value(value)}")

    lines.append("[body]")
    lines.append(decode_body(response))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Rich formatter
# ---------------------------------------------------------------------------


def print_response_rich(console: Console, response: httpx.Response) -> None:
    """Pretty-print a response using rich."""
    http_version, status = _status_parts(response)
    body = decode_body(response)
    lexer_name = lexer_name_for(response.headers.get("content-type"))

    # Status line
    console.print(Text("[status]", style=HEADING_STYLE))
    status_line = Text()
    status_line.append(http_version, style=VERSION_STYLE)
    status_line.append(" ")
    status_line.append(status, style=_status_color(response.status_code))
    console.print(status_line)

    # Headers
    console.print(Text("[headers]", style=HEADING_STYLE))
    for key, value in response.headers.multi_items():
        header_text = Text()
        header_text.append(key, style=HEADER_NAME_STYLE)
        header_text.append(": ")
        header_text.append(debug_value(value))
        console.print(header_text)

    # Body
    console.print(Text("[body]", style=HEADING_STYLE))
    if lexer_name is None:
        _print_verbatim(console, Text(body), end="\n")
        return
    syntax = Syntax(
        body,
        _load_lexer(lexer_name),
        theme=THEME,
        background_color="default",
    )
    # The lexer ends the text with a newline.
    _print_verbatim(console, syntax.highlight(body))


def render(
    response: httpx.Response,
    use_rich: bool,
    console: Console | None = None,
) -> None:
    if use_rich:
        print_response_rich(console or Console(force_terminal=True), response)
    else:
        click.echo(format_response_plain(response))


def render_error(
    exc: Exception,
    use_rich: bool,
    console: Console | None = None,
) -> None:
    if use_rich:
        console = console or Console(stderr=True)
        console.print(f"[bold red]{type(exc).__name__}[/bold red]: ", end="")
        console.out(str(exc), highlight=False)
    else:
        click.echo(f"{type(exc).__name__}: {exc}", err=True)

