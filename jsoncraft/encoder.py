"""Encode engine: serialize values to JSON bytes."""

from __future__ import annotations

from typing import Any

import msgspec

from . import errors, logs, utils
from .decoder import Number
from .options import Options

log = logs.get(__name__)

# characters that are only ever found inside JSON strings, so they can be
# replaced in the encoded output without tracking string state
_HTML_CHARS = '<>&'
_LINE_SEPARATORS = chr(0x2028) + chr(0x2029)


def _escape_table(chars: str) -> list[tuple[bytes, bytes]]:
    return [(ch.encode(), b'\\' + f'u{ord(ch):04x}'.encode()) for ch in chars]


_HTML_ESCAPES = _escape_table(_HTML_CHARS)
_LINE_ESCAPES = _escape_table(_LINE_SEPARATORS)


def encode(obj: Any, options: Options | None = None) -> bytes:
    """Encode `obj` to JSON.

    Without `options`, the output is compact, HTML-escaped and has no trailing
    newline. With `options`, `escape_html` and the indent settings are applied
    and a trailing newline is appended.
    """
    data = _encode(obj)
    if options is None:
        return escape(data)

    escape_html = options.escape_html is not False
    log.debug(
        'encode: escape_html=%s, indent=%r',
        escape_html,
        (options.indent_prefix, options.indent),
    )
    data = escape(data, html=escape_html)

    prefix = options.indent_prefix if isinstance(options.indent_prefix, str) else ''
    indent_str = options.indent if isinstance(options.indent, str) else ''
    if prefix or indent_str:
        data = indent(data, prefix, indent_str)
    return data + b'\n'


def _encode(obj: Any) -> bytes:
    encoder = msgspec.json.Encoder(enc_hook=enc_hook, order='deterministic')
    try:
        return encoder.encode(obj)
    except Exception as exc:
        raise errors.EncodeError(f'{exc}: obj={utils.format.elide(repr(obj))}') from exc


def enc_hook(obj: Any) -> Any:
    """Write `Number` values as their literal text."""
    if isinstance(obj, Number):
        return msgspec.Raw(str(obj).encode())
    raise NotImplementedError(f'Encoding objects of type {type(obj).__name__} is unsupported')


def escape(data: bytes, html: bool = True) -> bytes:
    """Escape line separators, and `<`, `>`, `&` unless `html` is false."""
    for char, escaped in _LINE_ESCAPES + (_HTML_ESCAPES if html else []):
        data = data.replace(char, escaped)
    return data


def indent(data: bytes, prefix: str, indent: str) -> bytes:
    """Reformat compact JSON so each element starts on a new line.

    Each new line begins with `prefix` followed by one copy of `indent` per
    nesting level. The first line is not prefixed and empty arrays and objects
    stay on one line.
    """
    out: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    need_indent = False

    def newline() -> None:
        out.append('\n' + prefix + indent * depth)

    for char in utils.encoding.to_str(data):
        if in_string:
            out.append(char)
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char in ' \t\r\n':
            continue

        if need_indent and char not in ']}':
            need_indent = False
            depth += 1
            newline()

        if char == '"':
            in_string = True
            out.append(char)
        elif char in '[{':
            need_indent = True
            out.append(char)
        elif char == ',':
            out.append(char)
            newline()
        elif char == ':':
            out.append(': ')
        elif char in ']}':
            if need_indent:
                need_indent = False
            else:
                depth -= 1
                newline()
            out.append(char)
        else:
            out.append(char)

    return utils.encoding.to_bytes(''.join(out))
