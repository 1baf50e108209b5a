import logging
import re
from typing import Annotated, Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from weathercli.errors import DecodeError, EmptyLocationError, NoDataError
from weathercli.models import CurrentWeather
from weathercli.services.http import get_json

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any) -> int:
    """Best-effort integer parse: take the leading integer, or 0 if there is none.

    wttr.in sends every number as a string; a garbled field must not abort
    the whole lookup, but the fallback is logged so it is not silent.
    """
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value)) if value is not None else None
    if match is None:
        logger.warning("wttr: could not parse %r as an integer, using 0", value)
        return 0
    return int(match.group(1))


LenientInt = Annotated[int, BeforeValidator(parse_int)]


class _Value(BaseModel):
    value: str = ""


class _CurrentCondition(BaseModel):
    temp_c: LenientInt = Field(0, alias="temp_C")
    temp_f: LenientInt = Field(0, alias="temp_F")
    humidity: LenientInt = 0
    windspeed_kmph: LenientInt = Field(0, alias="windspeedKmph")
    windspeed_miles: LenientInt = Field(0, alias="windspeedMiles")
    winddir_16point: str = Field("", alias="winddir16Point")
    weather_desc: List[_Value] = Field(default_factory=list, alias="weatherDesc")


class _NearestArea(BaseModel):
    area_name: List[_Value] = Field(default_factory=list, alias="areaName")


class _WttrResponse(BaseModel):
    current_condition: List[_CurrentCondition] = []
    nearest_area: List[_NearestArea] = []


class WttrClient:
    """Current conditions from wttr.in; the location goes straight into the URL path."""

    def __init__(
        self,
        base_url: str = "https://wttr.in",
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_seconds
        self.transport = transport

    async def fetch(self, location: str) -> CurrentWeather:
        if location == "":
            raise EmptyLocationError("wttr: location cannot be empty")

        url = f"{self.base_url}/{quote(location.encode('utf-8', 'surrogateescape'), safe='')}"
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        ) as client:
            data = await get_json(client, url, params={"format": "j1"}, stage="wttr")

        try:
            parsed = _WttrResponse.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"wttr: unexpected response shape: {exc}") from exc

        return _to_current_weather(parsed, location)


def _to_current_weather(resp: _WttrResponse, fallback_location: str) -> CurrentWeather:
    if not resp.current_condition:
        raise NoDataError("wttr: no current conditions in response")

    cc = resp.current_condition[0]

    location = fallback_location
    if resp.nearest_area and resp.nearest_area[0].area_name:
        location = resp.nearest_area[0].area_name[0].value

    conditions = cc.weather_desc[0].value if cc.weather_desc else ""

    return CurrentWeather(
        location=location,
        temp_c=cc.temp_c,
        temp_f=cc.temp_f,
        conditions=conditions,
        humidity=cc.humidity,
        wind_kmph=cc.windspeed_kmph,
        wind_mph=cc.windspeed_miles,
        wind_dir=cc.winddir_16point,
    )
