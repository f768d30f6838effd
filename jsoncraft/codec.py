"""Typed JSON codec.

Inputs may be `bytes`, `bytearray`, `memoryview` or `str`. Outputs are `bytes`
from the plain functions and `str` from their `_text` variants.

Example::

    class User(msgspec.Struct):
        name: str
        age: int

    user = unmarshal('{"name":"John","age":30}', type=User)
    marshal_text(user)  # '{"name":"John","age":30}'
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from . import decoder, encoder, errors, logs, utils
from .options import DecodeOption, EncodeOption, compile
from .utils.encoding import Buffer

log = logs.get(__name__)

T = TypeVar('T')


@overload
def unmarshal(data: Buffer, *opts: DecodeOption) -> Any: ...


@overload
def unmarshal(data: Buffer, *opts: DecodeOption, type: type[T]) -> T: ...


def unmarshal(data: Buffer, *opts: DecodeOption, type: Any = Any) -> Any:
    """Parse JSON `data` into an instance of `type`.

    Without options the default decoder is used: numbers in untyped positions
    become `float` and unknown object keys are ignored.

    Raises `DecodeError` if `data` is not valid JSON or does not match `type`.
    """
    buf = utils.encoding.to_bytes(data)
    if not opts:
        return decoder.decode(buf, type)
    return decoder.decode(buf, type, compile(opts))


def marshal(v: Any, *opts: EncodeOption) -> bytes:
    """Return the JSON encoding of `v`.

    Without options the output is compact with `<`, `>` and `&` escaped. With
    options, the output ends with a newline.

    Raises `EncodeError` if `v` cannot be represented as JSON.
    """
    if not opts:
        return encoder.encode(v)
    return encoder.encode(v, compile(opts))


def marshal_text(v: Any, *opts: EncodeOption) -> str:
    """Like `marshal` but returns `str`."""
    return utils.encoding.to_str(marshal(v, *opts))


def marshal_indent(v: Any, prefix: str, indent: str) -> bytes:
    """Like `marshal` but places each element on its own line.

    Each line after the first begins with `prefix` followed by one copy of
    `indent` per nesting level::

        marshal_indent_text({'name': 'John', 'age': 30}, '', '  ')
        # {
        #   "age": 30,
        #   "name": "John"
        # }
    """
    return encoder.indent(encoder.encode(v), prefix, indent)


def marshal_indent_text(v: Any, prefix: str, indent: str) -> str:
    """Like `marshal_indent` but returns `str`."""
    return utils.encoding.to_str(marshal_indent(v, prefix, indent))


def dumps(v: Any) -> str:
    """Return the JSON text of `v`, or `''` if it cannot be encoded.

    Meant for logging and debugging. The empty string is not a JSON document,
    so use `marshal` wherever encoding failures matter.
    """
    try:
        return marshal_text(v)
    except errors.EncodeError as exc:
        log.debug('dumps failed: %s', utils.format.format_exc(exc))
        return ''


@overload
def cast(obj: Any) -> Any: ...


@overload
def cast(obj: Any, type: type[T]) -> T: ...


def cast(obj: Any, type: Any = Any) -> Any:
    """Convert `obj` to `type` by encoding it to JSON and decoding it back.

    Useful for converting between structurally compatible types, e.g. two
    structs sharing field names, or a dict and a struct.

    The encode step goes through `dumps`, so an unencodable `obj` surfaces as a
    `DecodeError` for empty input rather than an `EncodeError`.
    """
    return unmarshal(dumps(obj), type=type)
