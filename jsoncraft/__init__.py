from .codec import (
    cast,
    dumps,
    marshal,
    marshal_indent,
    marshal_indent_text,
    marshal_text,
    unmarshal,
)
from .decoder import Number
from .errors import (
    DecodeError,
    EncodeError,
    InvalidPathError,
    JsonCraftError,
    PathError,
    PathNotFoundError,
    UnknownFieldError,
)
from .extract import unmarshal_from_path, unmarshal_from_path_with_default
from .options import (
    DecodeOption,
    EncodeOption,
    Options,
    with_disallow_unknown_fields,
    with_escape_html,
    with_indent,
    with_use_number,
)

__all__ = [
    'DecodeError',
    'DecodeOption',
    'EncodeError',
    'EncodeOption',
    'InvalidPathError',
    'JsonCraftError',
    'Number',
    'Options',
    'PathError',
    'PathNotFoundError',
    'UnknownFieldError',
    'cast',
    'dumps',
    'marshal',
    'marshal_indent',
    'marshal_indent_text',
    'marshal_text',
    'unmarshal',
    'unmarshal_from_path',
    'unmarshal_from_path_with_default',
    'with_disallow_unknown_fields',
    'with_escape_html',
    'with_indent',
    'with_use_number',
]
