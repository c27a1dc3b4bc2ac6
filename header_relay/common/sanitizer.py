"""
Data Sanitization Module

Masks credential-bearing header values so diagnostics never log them in plain text.
"""

from collections.abc import Mapping
from typing import Any, Optional

from header_relay.common.header_names import normalize_header_name

# Fields to mask (lowercase)
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "x-api-key",
        "api-key",
        "cookie",
    }
)


def mask_credential(value: str) -> str:
    """
    Mask a credential value

    Keeps the scheme prefix and a few characters for identification.

    Examples:
        >>> mask_credential("Bearer sk-1234567890abcdef")
        'Bearer sk-1***...***ef'
        >>> mask_credential("short")
        '***'
    """
    if not value:
        return value

    prefix = ""
    token = value
    if value.lower().startswith("bearer "):
        prefix = "Bearer "
        token = value[7:]

    # If token is too short, mask directly
    if len(token) <= 8:
        return f"{prefix}***"

    return f"{prefix}{token[:4]}***...***{token[-2:]}"


def sanitize_headers(headers: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Sanitize headers for logging

    Returns a new dictionary; the original mapping is not modified.
    Non-string values of sensitive headers are passed through untouched.
    """
    if not headers:
        return {}

    sanitized = {}
    for key, value in headers.items():
        if normalize_header_name(key) in SENSITIVE_HEADERS and isinstance(value, str):
            sanitized[key] = mask_credential(value)
        else:
            sanitized[key] = value
    return sanitized
