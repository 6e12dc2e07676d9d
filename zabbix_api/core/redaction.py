"""Secrets redaction for communication logging.

When communication printing is enabled, full request and response payloads
are written to the log. Credentials and auth tokens must not end up there,
so payloads pass through this module first.

Two layers:
- key-based: JSON-RPC fields known to hold secrets (``password``, ``auth``)
- pattern-based: secrets embedded in free text (raw HTTP bodies, URLs)
"""

import re
from typing import Any

# Redaction placeholder - clearly marks redacted content
REDACTED = "[REDACTED]"

# Keys whose values are always secret, compared case-insensitively
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "auth",
    "password",
    "passwd",
    "sessionid",
    "token",
    "http_password",
})

# Methods whose result is itself a credential
SENSITIVE_RESULT_METHODS: frozenset[str] = frozenset({"user.login"})

# Secret patterns: name -> (regex_pattern, replacement)
SECRET_PATTERNS: dict[str, tuple[re.Pattern[str], str]] = {
    # "password": "...", "auth": "..." inside serialized JSON
    "json_secret_field": (
        re.compile(
            r'("(?:password|passwd|auth|sessionid|token)"\s*:\s*")([^"]*)(")',
            re.IGNORECASE,
        ),
        f"\\1{REDACTED}\\3",
    ),
    # Basic auth credentials embedded in URLs: user:password@host
    "password_in_url": (
        re.compile(r"(://[^:/@\s]+:)([^@\s]+)(@)"),
        f"\\1{REDACTED}\\3",
    ),
    # Authorization headers
    "authorization_header": (
        re.compile(r"(Authorization:\s*(?:Basic|Bearer)\s+)(\S+)", re.IGNORECASE),
        f"\\1{REDACTED}",
    ),
}


def redact_secrets(text: str) -> str:
    """Redact secrets from a text string.

    Example:
        >>> redact_secrets('{"password": "hunter2"}')
        '{"password": "[REDACTED]"}'
    """
    result = text
    for pattern, replacement in SECRET_PATTERNS.values():
        result = pattern.sub(replacement, result)
    return result


def redact_payload(data: Any) -> Any:
    """Recursively redact secret-bearing keys from a JSON-like value.

    Returns a new structure; the original is not modified. A ``None`` value
    under a sensitive key (e.g. ``"auth": null`` before login) is kept as is
    since it carries no secret.
    """
    if isinstance(data, dict):
        return {
            key: (
                REDACTED
                if isinstance(key, str) and key.lower() in SENSITIVE_KEYS and value is not None
                else redact_payload(value)
            )
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact_payload(item) for item in data]
    if isinstance(data, str):
        return redact_secrets(data)
    return data


def redact_response(method: str, data: Any) -> Any:
    """Redact a decoded response envelope for ``method``.

    The ``result`` of a login call is the session token, so it is masked
    entirely on top of the key-based redaction.
    """
    redacted = redact_payload(data)
    if (
        method in SENSITIVE_RESULT_METHODS
        and isinstance(redacted, dict)
        and redacted.get("result") is not None
    ):
        redacted["result"] = REDACTED
    return redacted
