from __future__ import annotations
from typing import Optional


class EmptyValueAccess(LookupError):
    """Raised when the payload of an absent optional is requested.

    Reaching this is a bug at the call site: check ``has_value()`` first, or use
    ``get_or_else`` / ``match``.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "get_or_fail() called on an absent optional")
