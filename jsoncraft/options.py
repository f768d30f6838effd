"""Composable decode and encode options.

Options are small pure functions over an `Options` record. They are folded
left to right for a single call, so later options override earlier ones::

    unmarshal(data, with_use_number(), with_disallow_unknown_fields())
    marshal(value, with_escape_html(False), with_indent('', '  '))
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union

import msgspec
from msgspec import UNSET, UnsetType
from msgspec.structs import replace


class Options(msgspec.Struct, frozen=True, kw_only=True):
    """Per-call codec configuration.

    Every field is `UNSET` until an option sets it, which means "use the
    codec default" and is distinct from an explicit `False`.
    """

    # decode options
    use_number: Union[bool, UnsetType] = UNSET
    disallow_unknown_fields: Union[bool, UnsetType] = UNSET
    # encode options
    escape_html: Union[bool, UnsetType] = UNSET
    indent_prefix: Union[str, UnsetType] = UNSET
    indent: Union[str, UnsetType] = UNSET


@dataclass(frozen=True, slots=True)
class DecodeOption:
    """Configures decoding behavior. Use the `with_*` decode constructors."""

    apply: Callable[[Options], Options]

    def __call__(self, opts: Options) -> Options:
        return self.apply(opts)


@dataclass(frozen=True, slots=True)
class EncodeOption:
    """Configures encoding behavior. Use the `with_*` encode constructors."""

    apply: Callable[[Options], Options]

    def __call__(self, opts: Options) -> Options:
        return self.apply(opts)


def compile(opts: Iterable[DecodeOption] | Iterable[EncodeOption]) -> Options:
    """Fold `opts` over an empty record in call order."""
    return functools.reduce(lambda acc, opt: opt(acc), opts, Options())


def with_use_number() -> DecodeOption:
    """Decode numbers in untyped positions as `Number` instead of `float`.

    This keeps the exact literal text, so large integers such as
    `9007199254740993` survive decoding into `dict[str, Any]`.
    """
    return DecodeOption(lambda opts: replace(opts, use_number=True))


def with_disallow_unknown_fields() -> DecodeOption:
    """Fail when an object has keys with no matching field in the target type.

    Applies to `msgspec.Struct`, dataclass and `TypedDict` targets. Plain
    `dict` targets accept any key.
    """
    return DecodeOption(lambda opts: replace(opts, disallow_unknown_fields=True))


def with_escape_html(escape: bool) -> EncodeOption:
    """Force escaping of `<`, `>` and `&` in strings on or off.

    Escaping is on by default so the output is safe to embed in HTML.
    """
    return EncodeOption(lambda opts: replace(opts, escape_html=escape))


def with_indent(prefix: str, indent: str) -> EncodeOption:
    """Output one element per line, each starting with `prefix` followed by
    one copy of `indent` per nesting level."""
    return EncodeOption(lambda opts: replace(opts, indent_prefix=prefix, indent=indent))
