from __future__ import annotations


class JsonCraftError(Exception):
    """Base class for all jsoncraft exceptions."""


class DecodeError(JsonCraftError):
    """Raised when input is not valid JSON or does not match the target type."""


class UnknownFieldError(DecodeError):
    """Raised for object keys that have no matching field in the target type."""

    def __init__(self, field: str, path: str = '$') -> None:
        super().__init__(f'unknown field {field!r} - at `{path}`')
        self.field = field
        self.path = path


class EncodeError(JsonCraftError):
    """Raised when a value cannot be represented as JSON."""


class PathError(JsonCraftError):
    """Base class for path extraction errors."""

    def __init__(self, path: str, msg: str) -> None:
        super().__init__(f'`{path}` {msg}')
        self.path = path


class PathNotFoundError(PathError):
    """Raised when a path expression matches nothing in the document."""

    def __init__(self, path: str) -> None:
        super().__init__(path, 'path not found')


class InvalidPathError(PathError):
    """Raised when a path expression cannot be parsed."""
