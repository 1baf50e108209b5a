import logging
from itertools import islice
from typing import Annotated, Any, List, Optional
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, BeforeValidator, ValidationError

from weathercli.conditions import describe_code
from weathercli.errors import DecodeError, NotFoundError
from weathercli.models import QUERY_UNITS, Coordinates, DayForecast, Units, WeatherResult
from weathercli.services.http import get_json

logger = logging.getLogger(__name__)

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weather_code"


class _GeoResult(BaseModel):
    name: str
    latitude: float
    longitude: float


class _GeoResponse(BaseModel):
    results: List[_GeoResult] = []


def _null_as(zero: Any):
    # Open-Meteo sends null where a model has no value for a field or day
    return BeforeValidator(lambda value: zero if value is None else value)


_Float = Annotated[float, _null_as(0.0)]
_Int = Annotated[int, _null_as(0)]
_Str = Annotated[str, _null_as("")]


class _Current(BaseModel):
    temperature_2m: _Float
    relative_humidity_2m: _Int
    wind_speed_10m: _Float
    weather_code: _Int


class _Daily(BaseModel):
    time: Annotated[List[_Str], _null_as([])] = []
    temperature_2m_max: Annotated[List[_Float], _null_as([])] = []
    temperature_2m_min: Annotated[List[_Float], _null_as([])] = []
    weather_code: Annotated[List[_Int], _null_as([])] = []


class _ForecastResponse(BaseModel):
    current: _Current
    daily: _Daily = _Daily()


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1",
        geo_url: str = "https://geocoding-api.open-meteo.com/v1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.geo_url = geo_url.rstrip("/")
        self.transport = transport

    async def geocode(self, location: str) -> Coordinates:
        """Resolve a place name to coordinates via the Geocoding API."""
        # encoded by hand so undecodable argv bytes (surrogates) go out as-is
        query = urlencode({"name": location.encode("utf-8", "surrogateescape"), "count": 1})
        url = f"{self.geo_url}/search?{query}"
        async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
            data = await get_json(client, url, stage="geocoding")

        try:
            parsed = _GeoResponse.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"geocoding: unexpected response shape: {exc}") from exc

        if not parsed.results:
            raise NotFoundError(f"location not found: {location!r}")

        top = parsed.results[0]
        logger.debug("geocoding: %r -> %s (%s, %s)", location, top.name, top.latitude, top.longitude)
        return Coordinates(latitude=top.latitude, longitude=top.longitude, name=top.name)

    async def get_forecast(
        self,
        lat: float,
        lon: float,
        units: Units,
        days: int,
        *,
        name: str = "",
    ) -> WeatherResult:
        temperature_unit, wind_speed_unit = QUERY_UNITS[units]
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": CURRENT_FIELDS,
            "daily": DAILY_FIELDS,
            "temperature_unit": temperature_unit,
            "wind_speed_unit": wind_speed_unit,
            "forecast_days": days,
        }
        async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
            data = await get_json(client, url, params=params, stage="forecast")

        try:
            parsed = _ForecastResponse.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"forecast: unexpected response shape: {exc}") from exc

        daily = parsed.daily
        rows = zip(daily.time, daily.temperature_2m_max, daily.temperature_2m_min, daily.weather_code)
        forecasts = tuple(
            DayForecast(date=date, temp_max=t_max, temp_min=t_min, condition=describe_code(code))
            for date, t_max, t_min, code in islice(rows, days)
        )

        current = parsed.current
        return WeatherResult(
            location=name,
            units=units,
            temperature=current.temperature_2m,
            condition=describe_code(current.weather_code),
            humidity=current.relative_humidity_2m,
            wind_speed=current.wind_speed_10m,
            forecasts=forecasts,
        )
