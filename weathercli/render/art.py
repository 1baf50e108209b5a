"""
Colorized ASCII-art rendering.

Each ``Condition`` owns exactly one ``ConditionStyle``; the art block, ANSI
color, label and icon always travel together.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from weathercli.conditions import Condition, condition_from_text
from weathercli.models import DISPLAY_UNITS, Units, WeatherResult

RESET = "\033[0m"
BOLD = "\033[1m"
WHITE = "\033[97m"

RULE = "-" * 30


@dataclass(frozen=True)
class ConditionStyle:
    art: Tuple[str, ...]
    color: str
    label: str
    icon: str


STYLES: Dict[Condition, ConditionStyle] = {
    Condition.SUNNY: ConditionStyle(
        art=(
            "       \\   |   /       ",
            "         .-'-.         ",
            "    --- (     ) ---    ",
            "         `-.-'         ",
            "       /   |   \\       ",
        ),
        color="\033[33m",
        label="Sunny",
        icon="☀",
    ),
    Condition.RAINY: ConditionStyle(
        art=(
            "       .-~~~-.         ",
            "      (       )        ",
            "    (          )       ",
            "     `-.___.-'         ",
            "      ' ' ' ' '        ",
            "     ' ' ' ' '         ",
        ),
        color="\033[34m",
        label="Rainy",
        icon="🌧",
    ),
    Condition.CLOUDY: ConditionStyle(
        art=(
            "                       ",
            "       .-~~~-.         ",
            "      (       )        ",
            "    (          )       ",
            "     `-.___.-'         ",
            "                       ",
        ),
        color="\033[90m",
        label="Cloudy",
        icon="☁",
    ),
    Condition.SNOWY: ConditionStyle(
        art=(
            "       .-~~~-.         ",
            "      (       )        ",
            "    (          )       ",
            "     `-.___.-'         ",
            "      *  *  *  *       ",
            "     *  *  *  *        ",
        ),
        color="\033[36m",
        label="Snowy",
        icon="❄",
    ),
}


def style_for(condition: Condition) -> ConditionStyle:
    return STYLES.get(condition, STYLES[Condition.CLOUDY])


class ArtWeather(BaseModel):
    model_config = ConfigDict(frozen=True)

    condition: Condition
    temperature: float
    humidity: int
    wind_speed: float
    location: str = ""
    units: Units = "metric"

    @field_validator("condition", mode="before")
    @classmethod
    def _coerce_condition(cls, value):
        if isinstance(value, Condition):
            return value
        return Condition.parse(str(value))

    @classmethod
    def from_result(cls, result: WeatherResult) -> "ArtWeather":
        return cls(
            condition=condition_from_text(result.condition),
            temperature=result.temperature,
            humidity=result.humidity,
            wind_speed=result.wind_speed,
            location=result.location,
            units=result.units,
        )


def render(weather: ArtWeather) -> str:
    style = style_for(weather.condition)
    temp_symbol, wind_unit = DISPLAY_UNITS[weather.units]

    header = f"  Weather for {weather.location}" if weather.location else "  Current Weather"

    lines = ["", f"{BOLD}{WHITE}{header}{RESET}", RULE]
    lines.extend(f"{style.color}{row}{RESET}" for row in style.art)
    lines.extend([
        RULE,
        f"  {BOLD}Condition:{RESET}  {style.label}",
        f"  {BOLD}Temp:{RESET}       {weather.temperature:.1f}°{temp_symbol}",
        f"  {BOLD}Humidity:{RESET}   {weather.humidity}%",
        f"  {BOLD}Wind:{RESET}       {weather.wind_speed:.1f} {wind_unit}",
        "",
    ])
    return "\n".join(lines) + "\n"


def render_compact(weather: ArtWeather) -> str:
    """One line: icon, temperature and location. No forecast."""
    style = style_for(weather.condition)
    temp_symbol, _ = DISPLAY_UNITS[weather.units]
    return f"{style.color}{style.icon}{RESET} {weather.temperature:.1f}°{temp_symbol} | {weather.location}\n"
