from msgspec import UNSET

from jsoncraft import options
from jsoncraft.options import (
    DecodeOption,
    EncodeOption,
    Options,
    with_disallow_unknown_fields,
    with_escape_html,
    with_indent,
    with_use_number,
)


def test_compile_empty():
    opts = options.compile([])
    assert opts == Options()
    assert opts.use_number is UNSET
    assert opts.disallow_unknown_fields is UNSET
    assert opts.escape_html is UNSET
    assert opts.indent_prefix is UNSET
    assert opts.indent is UNSET


def test_decode_options():
    opts = options.compile([with_use_number(), with_disallow_unknown_fields()])
    assert opts.use_number is True
    assert opts.disallow_unknown_fields is True
    assert opts.escape_html is UNSET
    assert opts.indent is UNSET


def test_encode_options():
    opts = options.compile([with_escape_html(False), with_indent('-', '  ')])
    assert opts.escape_html is False
    assert opts.indent_prefix == '-'
    assert opts.indent == '  '
    assert opts.use_number is UNSET


def test_explicit_false_is_not_unset():
    opts = options.compile([with_escape_html(False)])
    assert opts.escape_html is not UNSET
    assert opts != Options()


def test_last_option_wins():
    opts = options.compile([with_escape_html(True), with_escape_html(False)])
    assert opts.escape_html is False

    opts = options.compile([with_indent('', '\t'), with_indent('>', '  ')])
    assert (opts.indent_prefix, opts.indent) == ('>', '  ')


def test_option_is_pure():
    start = Options()
    updated = with_use_number()(start)
    assert start.use_number is UNSET
    assert updated.use_number is True
    assert updated is not start


def test_option_families():
    assert isinstance(with_use_number(), DecodeOption)
    assert isinstance(with_disallow_unknown_fields(), DecodeOption)
    assert isinstance(with_escape_html(True), EncodeOption)
    assert isinstance(with_indent('', ' '), EncodeOption)
    assert not isinstance(with_use_number(), EncodeOption)
    assert not isinstance(with_indent('', ' '), DecodeOption)
