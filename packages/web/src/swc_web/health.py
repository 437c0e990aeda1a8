"""
health.py — API health-check client used by the front page.

Usage:
    from swc_web.health import fetch_api_status
    status = await fetch_api_status()        # "ok", or "Error" on any failure
"""

from __future__ import annotations

import httpx
import structlog

from swc_shared.config import settings

log = structlog.get_logger(__name__)

ERROR_STATUS = "Error"


async def fetch_api_status(
    api_url: str | None = None,
    *,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    GET {api_url}/health and return its "status" field.

    Transport errors, non-2xx responses and bodies without a status all
    collapse to "Error"; the page never fails because the API is down.
    """
    url = f"{(api_url or settings.api_url).rstrip('/')}/health"
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout or settings.health_timeout) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
        status = response.json().get("status")
    except (httpx.HTTPError, ValueError, AttributeError) as exc:
        log.warning("api_health_check_failed", url=url, error=str(exc))
        return ERROR_STATUS

    if not isinstance(status, str) or not status:
        log.warning("api_health_check_unreadable", url=url)
        return ERROR_STATUS
    return status
