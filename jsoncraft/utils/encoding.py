"""Helpers for converting JSON documents between str and bytes."""

from __future__ import annotations

from typing import Union

DEFAULT_ENCODING = 'utf8'

Buffer = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: Buffer, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Return `data` as bytes, encoding text input."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f'expected bytes or str, got {type(data).__name__}')


def to_str(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode encoder output to text."""
    return data.decode(encoding)
