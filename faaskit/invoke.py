"""Signing of function invocation requests."""

from __future__ import annotations

import hashlib
import hmac


def generate_signed_header(message: bytes | str, key: str, header_name: str) -> str:
    """Return a ``Header=sha1=<hex digest>`` value signing ``message`` with ``key``.

    Raises ``ValueError`` when ``header_name`` is empty.
    """
    if not header_name:
        raise ValueError("signed header must have a non-zero length")
    if isinstance(message, str):
        message = message.encode("utf-8")
    signature = hmac.new(key.encode("utf-8"), message, hashlib.sha1).hexdigest()
    return f"{header_name}=sha1={signature}"


def missing_sign_flag(header: str, key: str) -> bool:
    """Tell whether only one of the signing header and key was given."""
    return bool(header) != bool(key)