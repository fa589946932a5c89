"""Utility for logging NS API requests when NSTIMES_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "ocp-apim-subscription-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via NSTIMES_LOG_REQUESTS."""
    return os.getenv("NSTIMES_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace values of credential headers."""
    return {
        key: "***REDACTED***" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request, with credentials redacted, if enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")

    logger.info("NS API Request:\n" + "\n".join(log_parts))
