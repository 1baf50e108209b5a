from typing import Dict, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field


Units = Literal["metric", "imperial"]

# (temperature_unit, wind_speed_unit) query tokens understood by Open-Meteo
QUERY_UNITS: Dict[str, Tuple[str, str]] = {
    "metric": ("celsius", "kmh"),
    "imperial": ("fahrenheit", "mph"),
}

# (temperature symbol, wind label) used when printing
DISPLAY_UNITS: Dict[str, Tuple[str, str]] = {
    "metric": ("C", "km/h"),
    "imperial": ("F", "mph"),
}


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    name: str


class DayForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    temp_max: float
    temp_min: float
    condition: str


class WeatherResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    units: Units = "metric"
    temperature: float
    condition: str
    humidity: int
    wind_speed: float
    forecasts: Tuple[DayForecast, ...] = Field(default_factory=tuple)


class CurrentWeather(BaseModel):
    """Current conditions as reported by wttr.in, in both unit systems."""

    model_config = ConfigDict(frozen=True)

    location: str
    temp_c: int = 0
    temp_f: int = 0
    conditions: str = ""
    humidity: int = 0
    wind_kmph: int = 0
    wind_mph: int = 0
    wind_dir: str = ""

    def to_result(self, units: Units = "metric") -> WeatherResult:
        """Project onto a WeatherResult for the given unit system; no forecast is available."""
        imperial = units == "imperial"
        return WeatherResult(
            location=self.location,
            units=units,
            temperature=self.temp_f if imperial else self.temp_c,
            condition=self.conditions,
            humidity=self.humidity,
            wind_speed=self.wind_mph if imperial else self.wind_kmph,
        )
