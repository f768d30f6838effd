"""Path queries over JSON documents, backed by jsonpath-ng."""

from __future__ import annotations

from typing import Any

import msgspec
from jsonpath_ng import jsonpath as jp
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.ext import parse
from jsonpath_ng.ext.filter import Filter

from . import errors, logs, utils
from .decoder import Number
from .encoder import enc_hook

log = logs.get(__name__)

# steps that select any number of values
_MULTI_STEPS = (jp.Slice, jp.Descendants, jp.Union, jp.Intersect, jp.Where, Filter)


class Match(msgspec.Struct, frozen=True):
    """Result of a path query: whether it matched, and the raw JSON matched.

    `raw` keeps the literal text of matched numbers, so `1e2` stays `1e2`.
    """

    exists: bool
    raw: bytes = b''


def get(data: bytes, path: str) -> Match:
    """Find `path` in the JSON document `data`.

    A path that can only select one value yields the raw JSON of that value.
    A path with a wildcard, slice, filter, union or descent always yields a
    JSON array of the matched values in document order. The array is empty
    when the values it iterates over exist but none of them match.
    """
    try:
        expr = parse(path)
    except (JsonPathLexerError, JsonPathParserError) as exc:
        raise errors.InvalidPathError(path, f'invalid path: {exc}') from exc

    try:
        doc = msgspec.json.decode(data)
        exact = msgspec.json.Decoder(float_hook=Number).decode(data)
    except msgspec.DecodeError as exc:
        raise errors.DecodeError(f'{exc}: data={utils.format.elide(repr(data))}') from exc

    # filters compare plain values, the result is read back from the exact copy
    values = [_exact_value(datum, exact) for datum in expr.find(doc)]
    multi = _is_multi(expr)
    log.debug('query %r: %d match(es), multi=%s', path, len(values), multi)

    if multi:
        if not values and not _container(expr).find(doc):
            return Match(False)
        return Match(True, _encode(values))
    if not values:
        return Match(False)
    return Match(True, _encode(values[0]))


def _encode(value: Any) -> bytes:
    return msgspec.json.encode(value, enc_hook=enc_hook)


def _exact_value(datum: jp.DatumInContext, exact: Any) -> Any:
    try:
        found = datum.full_path.find(exact)
    except TypeError:
        # a slice over a scalar indexes a list that is not in the document
        return datum.value
    # computed values (lengths, keys, sorted copies) have no exact counterpart
    if len(found) != 1:
        return datum.value
    return found[0].value


def _is_multi(node: jp.JSONPath) -> bool:
    if isinstance(node, _MULTI_STEPS):
        return True
    if isinstance(node, jp.Child):
        return _is_multi(node.left) or _is_multi(node.right)
    if isinstance(node, jp.Fields):
        return len(node.fields) > 1 or '*' in node.fields
    if isinstance(node, jp.Index):
        return len(getattr(node, 'indices', None) or (node.index,)) > 1
    return False


def _container(node: jp.JSONPath) -> jp.JSONPath:
    """Return the single-valued prefix that a multi-valued path iterates over."""
    if isinstance(node, (jp.Child, jp.Descendants, jp.Where)):
        if _is_multi(node.left):
            return _container(node.left)
        return node.left
    return jp.Root()
