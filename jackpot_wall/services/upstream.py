"""Read-only clients for the third-party APIs the dashboard needs.

Both clients open a short-lived ``httpx.AsyncClient`` per call with a bounded
timeout. Anything other than the expected answer is raised as
``UpstreamError`` and left to the endpoint to translate.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

NO_REPUTATION: Dict[str, Any] = {"score": 0, "passport_id": None}


class UpstreamError(Exception):
    """Third-party API unreachable, timed out or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


async def _get(url: str, headers: Dict[str, str], timeout: float) -> httpx.Response:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise UpstreamError(f"request to {url} failed: {e!r}") from e


def _decode(resp: httpx.Response, url: str) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError(f"{url} returned invalid JSON", resp.status_code) from e


async def fetch_stacks(host: str, path: str, api_key: Optional[str], timeout: float) -> Any:
    """GET ``https://<host><path>`` on the Hiro Stacks API and return its JSON."""
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["x-api-key"] = api_key

    url = f"https://{host}{path}"
    resp = await _get(url, headers, timeout)
    if not resp.is_success:
        raise UpstreamError(f"Hiro API responded with {resp.status_code}", resp.status_code)
    return _decode(resp, url)


async def fetch_reputation(base_url: str, address: str, api_key: str, timeout: float) -> Dict[str, Any]:
    """Look up the Talent Protocol passport of ``address``.

    A missing passport (404) is a normal state and maps to ``NO_REPUTATION``.
    """
    headers = {
        "X-API-KEY": api_key,
        "Content-Type": "application/json",
    }
    url = f"{base_url.rstrip('/')}/passports/{quote(address, safe='')}"
    resp = await _get(url, headers, timeout)

    if resp.status_code == 404:
        return dict(NO_REPUTATION)
    if not resp.is_success:
        raise UpstreamError(f"Talent Protocol API responded with {resp.status_code}", resp.status_code)

    data = _decode(resp, url)
    if not isinstance(data, dict):
        raise UpstreamError(f"{url} returned an unexpected body", resp.status_code)
    passport = data.get("passport")
    if passport is None:
        passport = {}
    elif not isinstance(passport, dict):
        raise UpstreamError(f"{url} returned an unexpected passport", resp.status_code)
    return {
        "score": passport.get("score") or 0,
        "passport_id": passport.get("id") or None,
        "profile_picture": passport.get("profile_picture_url") or None,
    }
