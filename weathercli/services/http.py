import logging
from typing import Any, Dict, Optional

import httpx

from weathercli.errors import DecodeError, HTTPStatusError, NetworkError

logger = logging.getLogger(__name__)


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    stage: str,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET ``url`` and decode the JSON body, translating failures into WeatherError kinds.

    ``stage`` names the lookup step ("geocoding", "forecast", ...) and prefixes
    every error message so the user can tell which request failed.
    """
    logger.debug("%s: GET %s params=%s", stage, url, params)
    try:
        r = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        raise NetworkError(f"{stage}: request failed: {exc}") from exc

    if r.status_code != 200:
        raise HTTPStatusError(r.status_code, f"{stage}: upstream returned status {r.status_code}")

    try:
        return r.json()
    except ValueError as exc:
        raise DecodeError(f"{stage}: response is not valid JSON: {exc}") from exc
