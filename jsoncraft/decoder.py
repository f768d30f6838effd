"""Decode engine: parse JSON bytes and convert them to a target type."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import msgspec
from msgspec import inspect as mi

from . import errors, logs, utils
from .options import Options

log = logs.get(__name__)

_OBJECT_TYPES = (mi.StructType, mi.DataclassType, mi.TypedDictType)


class Number:
    """A JSON number kept as its exact literal text."""

    __slots__ = ('_text',)

    def __init__(self, text: str) -> None:
        self._text = text

    def to_int(self) -> int:
        """Return the value as an int, raising `ValueError` if it has a fraction."""
        value = Decimal(self._text)
        if value != value.to_integral_value():
            raise ValueError(f'number {self._text!r} is not an integer')
        return int(value)

    def to_float(self) -> float:
        return float(self._text)

    def to_decimal(self) -> Decimal:
        return Decimal(self._text)

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return float(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._text!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)


def decode(data: bytes, type: Any = Any, options: Options | None = None) -> Any:
    """Decode `data` into an instance of `type`.

    Without `options`, numbers in untyped positions become `float` and
    unknown object keys are ignored.
    """
    if options is None:
        return _decode(data, type, _Coercer())

    use_number = options.use_number is True
    forbid_unknown = options.disallow_unknown_fields is True
    log.debug('decode: use_number=%s, forbid_unknown=%s', use_number, forbid_unknown)
    decoder = msgspec.json.Decoder(float_hook=Number if use_number else None)
    return _decode(data, type, _Coercer(use_number, forbid_unknown), decoder)


def _decode(
    data: bytes,
    type: Any,
    coercer: _Coercer,
    decoder: msgspec.json.Decoder[Any] | None = None,
) -> Any:
    info = mi.type_info(type)
    try:
        obj = decoder.decode(data) if decoder else msgspec.json.decode(data)
        return msgspec.convert(coercer.walk(obj, info), type=type, str_keys=True)
    except msgspec.DecodeError as exc:
        raise errors.DecodeError(f'{exc}: data={utils.format.elide(repr(data))}') from exc


class _Coercer:
    """Walk a parsed document alongside the target type.

    Numbers in untyped positions follow the number policy, `Number` values in
    typed positions are converted to what the type expects, and object keys
    are checked against the target fields when unknown fields are forbidden.
    """

    def __init__(self, use_number: bool = False, forbid_unknown: bool = False) -> None:
        self.use_number = use_number
        self.forbid_unknown = forbid_unknown

    def walk(self, obj: Any, t: mi.Type, path: str = '$') -> Any:
        if isinstance(t, mi.AnyType):
            return self.untyped(obj, path)
        if isinstance(t, mi.Metadata):
            return self.walk(obj, t.type, path)
        if isinstance(t, mi.UnionType):
            member = _select(t, obj)
            if member is None:
                return self.number(obj, t)
            return self.walk(obj, member, path)

        if isinstance(obj, dict):
            if isinstance(t, mi.DictType):
                return {
                    key: self.walk(value, t.value_type, f'{path}.{key}')
                    for key, value in obj.items()
                }
            if isinstance(t, _OBJECT_TYPES) and not getattr(t, 'array_like', False):
                return self.object(obj, t, path)
        elif isinstance(obj, list):
            if isinstance(t, mi.CollectionType):
                return [
                    self.walk(value, t.item_type, f'{path}[{i}]') for i, value in enumerate(obj)
                ]
            if isinstance(t, mi.TupleType):
                return self.array(obj, t.item_types, path)
            if isinstance(t, mi.NamedTupleType):
                return self.array(obj, [field.type for field in t.fields], path)
            if isinstance(t, mi.StructType) and t.array_like:
                types = [field.type for field in t.fields]
                if t.tag_field is None or not obj:
                    return self.array(obj, types, path)
                # the first element of a tagged array-like struct is its tag
                return [obj[0], *self.array(obj[1:], types, path, start=1)]
            return obj

        return self.number(obj, t)

    def array(
        self, obj: list[Any], types: Sequence[mi.Type], path: str, start: int = 0
    ) -> list[Any]:
        items = [
            self.walk(value, t, f'{path}[{i}]')
            for i, (value, t) in enumerate(zip(obj, types), start)
        ]
        return items + obj[len(types) :]

    def object(self, obj: dict[str, Any], t: Any, path: str) -> dict[str, Any]:
        fields = {field.encode_name: field for field in t.fields}
        tag_field = getattr(t, 'tag_field', None)
        result = {}
        for key, value in obj.items():
            field = fields.get(key)
            if field is None:
                if self.forbid_unknown and key != tag_field:
                    raise errors.UnknownFieldError(key, path)
                result[key] = value
                continue
            result[key] = self.walk(value, field.type, f'{path}.{key}')
        return result

    def number(self, obj: Any, t: mi.Type) -> Any:
        if not isinstance(obj, Number):
            return obj
        if _accepts_decimal(t):
            return obj.to_decimal()
        return obj.to_float()

    def untyped(self, obj: Any, path: str = '$') -> Any:
        if isinstance(obj, bool):
            return obj
        if isinstance(obj, int):
            if self.use_number:
                return Number(str(obj))
            try:
                return float(obj)
            except OverflowError as exc:
                raise errors.DecodeError(
                    f'number {utils.format.elide(str(obj))} is out of range for float - at `{path}`'
                ) from exc
        if isinstance(obj, dict):
            return {key: self.untyped(value, f'{path}.{key}') for key, value in obj.items()}
        if isinstance(obj, list):
            return [self.untyped(value, f'{path}[{i}]') for i, value in enumerate(obj)]
        return obj


def _accepts_decimal(t: mi.Type) -> bool:
    if isinstance(t, mi.Metadata):
        return _accepts_decimal(t.type)
    if isinstance(t, mi.UnionType):
        return any(isinstance(member, mi.DecimalType) for member in t.types)
    return isinstance(t, mi.DecimalType)


def _select(t: mi.UnionType, obj: Any) -> mi.Type | None:
    """Pick the union member that a parsed value will be converted to."""
    for member in t.types:
        inner = member.type if isinstance(member, mi.Metadata) else member
        if isinstance(obj, dict):
            if isinstance(inner, mi.DictType):
                return member
            if isinstance(inner, _OBJECT_TYPES) and not getattr(inner, 'array_like', False):
                tag_field = getattr(inner, 'tag_field', None)
                if tag_field is None or obj.get(tag_field) == inner.tag:
                    return member
        elif isinstance(obj, list):
            if isinstance(inner, (mi.CollectionType, mi.TupleType, mi.NamedTupleType)):
                return member
            if isinstance(inner, mi.StructType) and inner.array_like:
                if inner.tag_field is None or (obj and obj[0] == inner.tag):
                    return member
    for member in t.types:
        if isinstance(member, mi.AnyType):
            return member
    return None
