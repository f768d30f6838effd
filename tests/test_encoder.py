from dataclasses import dataclass

import msgspec
import pytest

from jsoncraft import (
    EncodeError,
    Number,
    marshal,
    marshal_indent,
    marshal_indent_text,
    marshal_text,
    with_escape_html,
    with_indent,
)
from jsoncraft.encoder import escape, indent

AMP = '\\u0026'


class User(msgspec.Struct):
    name: str
    age: int


@dataclass
class Point:
    y: int
    x: int


def test_marshal_default():
    v = {'html': '&', 'field': 'test'}
    assert marshal_text(v) == '{"field":"test","html":"' + AMP + '"}'


def test_marshal_with_options():
    v = {'html': '&', 'field': 'test'}
    res = marshal_text(v, with_escape_html(False), with_indent('-', '  '))
    assert res == '{\n-  "field": "test",\n-  "html": "&"\n-}\n'


def test_marshal_escape_html():
    v = {'html': '<div>test</div>'}
    assert marshal_text(v) == '{"html":"\\u003cdiv\\u003etest\\u003c/div\\u003e"}'
    assert marshal_text(v, with_escape_html(False)) == '{"html":"<div>test</div>"}\n'
    assert marshal_text(v, with_escape_html(True)) == marshal_text(v) + '\n'


def test_marshal_indent_option_only_escapes_html():
    res = marshal_text({'a': '&'}, with_indent('', '  '))
    assert res == '{\n  "a": "' + AMP + '"\n}\n'


def test_marshal_empty_indent_is_compact():
    assert marshal_text({'a': [1, 2]}, with_indent('', '')) == '{"a":[1,2]}\n'


def test_marshal_returns_bytes():
    assert marshal([1, 'a']) == b'[1,"a"]'
    assert marshal([1, 'a'], with_escape_html(False)) == b'[1,"a"]\n'


def test_marshal_field_order():
    assert marshal_text(User('John', 30)) == '{"name":"John","age":30}'
    assert marshal_text(Point(y=2, x=1)) == '{"y":2,"x":1}'
    assert marshal_text({'b': 1, 'a': {'d': 1, 'c': 2}}) == '{"a":{"c":2,"d":1},"b":1}'


def test_marshal_number():
    assert marshal_text({'id': Number('9007199254740993')}) == '{"id":9007199254740993}'
    assert marshal_text([Number('0.10')]) == '[0.10]'


def test_marshal_line_separators():
    assert marshal_text(chr(0x2028) + chr(0x2029)) == '"\\u2028\\u2029"'
    assert marshal_text(chr(0x2028), with_escape_html(False)) == '"\\u2028"\n'


def test_marshal_indent():
    res = marshal_indent_text({'name': 'John', 'age': 30}, '', '  ')
    assert res == '{\n  "age": 30,\n  "name": "John"\n}'
    assert marshal_indent({'a': 1}, '', '\t') == b'{\n\t"a": 1\n}'


def test_marshal_indent_escapes_html():
    assert marshal_indent_text(['<'], '', ' ') == '[\n "\\u003c"\n]'


def test_marshal_indent_nested():
    v = {'a': [], 'b': {}, 'c': [1, {'d': None}]}
    res = marshal_indent_text(v, '>', '  ')
    assert res == (
        '{\n'
        '>  "a": [],\n'
        '>  "b": {},\n'
        '>  "c": [\n'
        '>    1,\n'
        '>    {\n'
        '>      "d": null\n'
        '>    }\n'
        '>  ]\n'
        '>}'
    )


def test_indent_ignores_structure_inside_strings():
    data = marshal({'a': 'x:, {y} [z] \\"q'})
    assert indent(data, '', ' ') == b'{\n "a": "x:, {y} [z] \\\\\\"q"\n}'


def test_indent_scalars():
    assert indent(b'"text"', '-', ' ') == b'"text"'
    assert indent(b'42', '-', ' ') == b'42'


def test_escape():
    assert escape(b'"<&>"') == b'"\\u003c\\u0026\\u003e"'
    assert escape(b'"<&>"', html=False) == b'"<&>"'


@pytest.mark.parametrize(
    'value',
    [
        {'f': lambda: None},
        object(),
        {1j},
    ],
)
def test_marshal_errors(value):
    with pytest.raises(EncodeError):
        marshal(value)
    with pytest.raises(EncodeError):
        marshal(value, with_indent('', ' '))
    with pytest.raises(EncodeError):
        marshal_indent(value, '', ' ')


def test_marshal_cyclic():
    value: dict = {}
    value['self'] = value
    with pytest.raises(EncodeError):
        marshal(value)
