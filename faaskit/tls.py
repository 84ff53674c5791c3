"""Warnings about insecure gateway connections."""

from __future__ import annotations

NO_TLS_WARN = (
    "WARNING! Communication is not secure, please consider using HTTPS. "
    "Letsencrypt.org offers free SSL/TLS certificates."
)


def check_tls_insecure(gateway: str, tls_insecure: bool) -> str:
    """Return a warning when ``gateway`` is not HTTPS, unless checks are disabled."""
    if not tls_insecure and not gateway.startswith("https"):
        return NO_TLS_WARN
    return ""