"""Helpers for safe debug logging.

Greetings are arbitrary caller-supplied text and owner identities are
account addresses.  This module shortens both before they reach DEBUG logs.
"""

from __future__ import annotations

from typing import Any


def truncate_for_log(value: Any, *, max_string: int = 64) -> Any:
    """Return *value* shortened for log output.

    Strings longer than *max_string* are cut and suffixed; other values
    are returned unchanged.
    """
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated:{len(value)}>"
    return value


def mask_identity(identity: Any, *, keep: int = 6) -> str:
    """Mask the middle of an identity, keeping *keep* characters at each end.

    ``0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed`` becomes
    ``0x5aAe…1BeAed``.  Short identities are returned as-is.
    """
    if identity is None:
        return "<none>"
    text = str(identity)
    if len(text) <= keep * 2 + 1:
        return text
    return f"{text[:keep]}…{text[-keep:]}"
