"""Extract single values from JSON documents by path."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from . import errors, logs, query, utils
from .codec import unmarshal
from .utils.encoding import Buffer

log = logs.get(__name__)

T = TypeVar('T')


@overload
def unmarshal_from_path(data: Buffer, path: str) -> Any: ...


@overload
def unmarshal_from_path(data: Buffer, path: str, type: type[T]) -> T: ...


def unmarshal_from_path(data: Buffer, path: str, type: Any = Any) -> Any:
    """Extract the value at `path` in `data` and decode it into `type`.

    Paths use JSONPath syntax as implemented by jsonpath-ng, e.g.::

        name = unmarshal_from_path(data, 'user.name', str)
        emails = unmarshal_from_path(data, 'user.emails', list[str])
        first = unmarshal_from_path(data, 'users[0].name', str)

    Raises `PathNotFoundError` if `path` matches nothing, `InvalidPathError` if
    it cannot be parsed, and `DecodeError` if the matched value does not
    decode into `type`.
    """
    match = query.get(utils.encoding.to_bytes(data), path)
    if not match.exists:
        raise errors.PathNotFoundError(path)
    return unmarshal(match.raw, type=type)


def unmarshal_from_path_with_default(data: Buffer, path: str, default: T, type: Any = Any) -> T:
    """Like `unmarshal_from_path` but returns `default` on any failure.

    Missing paths and undecodable values both return `default`. Call
    `unmarshal_from_path` to tell them apart.
    """
    try:
        return unmarshal_from_path(data, path, type)
    except errors.JsonCraftError as exc:
        log.debug('using default for %r: %s', path, utils.format.format_exc(exc))
        return default
