"""Helpers for configuring and using project logging."""

from __future__ import annotations

from logging import DEBUG, INFO, Formatter, StreamHandler, getLogger

get = getLogger
log = get(__name__)

FORMAT = '%(levelname).1s %(asctime)s . %(message)s'


def init(debug_level: int = 0) -> None:
    """Initializes simple logging defaults.

    `debug_level` 1 enables DEBUG for the application, 2 also enables the
    per-call records of the codec engines.
    """
    root_log = get()

    if root_log.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter(FORMAT))

    root_log.addHandler(handler)
    root_log.setLevel(DEBUG if debug_level > 0 else INFO)

    for name in ('jsoncraft.decoder', 'jsoncraft.encoder'):
        get(name).setLevel(DEBUG if debug_level > 1 else INFO)
