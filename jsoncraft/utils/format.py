from __future__ import annotations

import traceback

ELIDE_WIDTH = 100


def format_exc(exc: BaseException) -> str:
    return traceback.format_exception_only(exc.__class__, exc)[0].strip()


def elide(value: str, width: int = ELIDE_WIDTH) -> str:
    return value if len(value) <= width else f'{value[: width - 3]}...'
