from weathercli.models import DISPLAY_UNITS, WeatherResult


def render(weather: WeatherResult) -> str:
    """Format a weather result as a plain-text report."""
    temp_symbol, wind_unit = DISPLAY_UNITS[weather.units]

    # underline spans "Weather for " plus the name
    lines = [
        "",
        f"Weather for {weather.location}",
        "-" * (len(weather.location) + 12),
        "",
        "Current Conditions:",
        f"  Temperature: {weather.temperature:.1f}°{temp_symbol}",
        f"  Condition:   {weather.condition}",
        f"  Humidity:    {weather.humidity}%",
        f"  Wind:        {weather.wind_speed:.1f} {wind_unit}",
    ]

    if weather.forecasts:
        lines.append("")
        lines.append("Forecast:")
        for day in weather.forecasts:
            lines.append(
                f"  {day.date}: {day.temp_max:.1f}°{temp_symbol} / "
                f"{day.temp_min:.1f}°{temp_symbol} - {day.condition}"
            )

    lines.append("")
    return "\n".join(lines) + "\n"
