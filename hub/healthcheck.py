"""
Health-check probe used by the /api/healthcheck proxy.

Performs one timeout-bounded GET on behalf of the dashboard browser client and
reports three-state health: healthy, unhealthy (status mismatch) or error
(the request never completed). No retries, no caching.
"""

import logging
import warnings
from typing import Any, Dict, Optional

import requests
import urllib3

from hub.config import HEALTHCHECK_TIMEOUT_SECONDS, HEALTHCHECK_VERIFY_TLS

logger = logging.getLogger(__name__)

USER_AGENT = "HostedHub-HealthCheck/1.0"

STATE_HEALTHY = "healthy"
STATE_UNHEALTHY = "unhealthy"
STATE_ERROR = "error"


def is_expected_status(status: int, expected_status: Optional[int] = None) -> bool:
    """Exact match when an expected status is configured, else any 2xx/3xx."""
    if expected_status:
        return status == expected_status
    return 200 <= status < 400


def probe(
    url: str,
    expected_status: Optional[int] = None,
    timeout: float = HEALTHCHECK_TIMEOUT_SECONDS,
    verify: bool = HEALTHCHECK_VERIFY_TLS,
) -> Dict[str, Any]:
    expected_status = expected_status or None

    try:
        status = _fetch_status(url, timeout, verify)
    except requests.exceptions.Timeout:
        logger.debug(f"Health check timed out after {timeout}s: {url}")
        return _error_result(url, expected_status, "Timeout")
    except requests.exceptions.RequestException as exc:
        logger.debug(f"Health check failed for {url}: {exc}")
        return _error_result(url, expected_status, str(exc))

    healthy = is_expected_status(status, expected_status)
    return {
        "healthy": healthy,
        "state": STATE_HEALTHY if healthy else STATE_UNHEALTHY,
        "status": status,
        "expected_status": expected_status,
        "url": url,
    }


def _fetch_status(url: str, timeout: float, verify: bool) -> int:
    """
    Status code of a GET, read as soon as the headers arrive.

    The body is never read, so a service that streams forever still returns
    within the timeout.
    """
    with warnings.catch_warnings():
        if not verify:
            # Internal services commonly use self-signed certificates
            warnings.simplefilter("ignore", urllib3.exceptions.InsecureRequestWarning)
        with requests.get(
            url,
            timeout=timeout,
            verify=verify,
            stream=True,
            headers={"User-Agent": USER_AGENT},
        ) as response:
            return response.status_code


def _error_result(url: str, expected_status: Optional[int], error: str) -> Dict[str, Any]:
    return {
        "healthy": False,
        "state": STATE_ERROR,
        "status": None,
        "expected_status": expected_status,
        "error": error,
        "url": url,
    }
