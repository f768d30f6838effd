from __future__ import annotations

# Imports for convenience
from . import encoding, format

__all__ = [
    'encoding',
    'format',
]
