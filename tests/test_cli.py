"""
Tests for the command-line entry point. The provider clients are fully mocked,
so these tests check argument validation, sequencing, rendering choice and
exit codes without touching the network.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

import pytest

from weathercli.cli import main
from weathercli.errors import (
    DecodeError,
    EmptyLocationError,
    HTTPStatusError,
    NetworkError,
    NoDataError,
    NotFoundError,
)
from weathercli.models import Coordinates, CurrentWeather, DayForecast, WeatherResult
from weathercli.services import OpenMeteoClient, WttrClient


PARIS = Coordinates(latitude=48.85341, longitude=2.3488, name="Paris")

PARIS_WEATHER = WeatherResult(
    location="Paris",
    units="metric",
    temperature=18.2,
    condition="Rain",
    humidity=62,
    wind_speed=11.5,
    forecasts=(DayForecast(date="2024-05-01", temp_max=20.1, temp_min=10.0, condition="Clear sky"),),
)

SOHO = CurrentWeather(
    location="Soho", temp_c=16, temp_f=61, conditions="Sunny", humidity=71,
    wind_kmph=19, wind_mph=12, wind_dir="WSW",
)


def _open_meteo_mock():
    mock = MagicMock()
    mock.geocode = AsyncMock(return_value=PARIS)
    mock.get_forecast = AsyncMock(return_value=PARIS_WEATHER)
    return mock


@pytest.fixture()
def om():
    client = _open_meteo_mock()
    with patch("weathercli.cli.OpenMeteoClient", return_value=client):
        yield client


@pytest.fixture()
def wttr():
    client = MagicMock()
    client.fetch = AsyncMock(return_value=SOHO)
    with patch("weathercli.cli.WttrClient", return_value=client):
        yield client


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

def test_default_lookup(om, capsys):
    assert main(["--location", "paris"]) == 0

    om.geocode.assert_awaited_once_with("paris")
    om.get_forecast.assert_awaited_once_with(48.85341, 2.3488, "metric", 1, name="Paris")

    out, err = capsys.readouterr()
    assert "Weather for Paris" in out
    assert "Forecast:" in out
    assert err == ""


def test_short_flags(om, capsys):
    assert main(["-l", "paris", "-d", "3", "-u", "imperial"]) == 0
    om.get_forecast.assert_awaited_once_with(48.85341, 2.3488, "imperial", 3, name="Paris")


def test_art_style(om, capsys):
    assert main(["-l", "paris", "--style", "art"]) == 0
    out, _ = capsys.readouterr()
    assert "Weather for Paris" in out
    assert "Condition:" in out
    assert "Rainy" in out


def test_compact_style(om, capsys):
    assert main(["-l", "paris", "-s", "compact"]) == 0
    out, _ = capsys.readouterr()
    assert out.rstrip("\n").endswith("18.2°C | Paris")
    assert out.count("\n") == 1


def test_wttr_provider(wttr, om, capsys):
    assert main(["-l", "London", "--provider", "wttr", "-u", "imperial"]) == 0

    wttr.fetch.assert_awaited_once_with("London")
    om.geocode.assert_not_awaited()

    out, _ = capsys.readouterr()
    assert "Weather for Soho" in out
    assert "Temperature: 61.0°F" in out
    assert "Forecast:" not in out


# ---------------------------------------------------------------------------
# Validation happens before any network call
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("days", ["0", "4", "-1", "10"])
def test_days_out_of_range(om, capsys, days):
    assert main(["-l", "paris", "-d", days]) == 1
    om.geocode.assert_not_awaited()
    _, err = capsys.readouterr()
    assert "days must be between 1 and 3" in err


@pytest.mark.parametrize("units", ["kelvin", "Metric", ""])
def test_bad_units(om, capsys, units):
    assert main(["-l", "paris", "-u", units]) == 1
    om.geocode.assert_not_awaited()
    assert "units must be" in capsys.readouterr().err


def test_missing_location(om, capsys):
    assert main([]) == 1
    om.geocode.assert_not_awaited()
    assert "--location" in capsys.readouterr().err


def test_non_integer_days(om, capsys):
    assert main(["-l", "paris", "-d", "two"]) == 1
    om.geocode.assert_not_awaited()


def test_bad_provider_and_style(om, capsys):
    assert main(["-l", "paris", "-p", "metoffice"]) == 1
    assert main(["-l", "paris", "-s", "html"]) == 1
    om.geocode.assert_not_awaited()


# ---------------------------------------------------------------------------
# Lookup failures map to exit status 1 with no stdout
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "error",
    [
        NotFoundError("location not found: 'Atlantis'"),
        NetworkError("geocoding: request failed"),
        HTTPStatusError(500, "geocoding: upstream returned status 500"),
        DecodeError("geocoding: response is not valid JSON"),
    ],
)
def test_geocoding_failure(capsys, error):
    client = _open_meteo_mock()
    client.geocode = AsyncMock(side_effect=error)

    with patch("weathercli.cli.OpenMeteoClient", return_value=client):
        assert main(["-l", "Atlantis"]) == 1

    client.get_forecast.assert_not_awaited()
    out, err = capsys.readouterr()
    assert out == ""
    assert "failed to get weather" in err
    assert str(error) in err


def test_forecast_failure(capsys):
    client = _open_meteo_mock()
    client.get_forecast = AsyncMock(side_effect=HTTPStatusError(429, "forecast: upstream returned status 429"))

    with patch("weathercli.cli.OpenMeteoClient", return_value=client):
        assert main(["-l", "paris"]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert "429" in err


@pytest.mark.parametrize("error", [EmptyLocationError("wttr: location cannot be empty"), NoDataError("wttr: no data")])
def test_wttr_failure(capsys, error):
    client = MagicMock()
    client.fetch = AsyncMock(side_effect=error)

    with patch("weathercli.cli.WttrClient", return_value=client):
        assert main(["-l", "", "-p", "wttr"]) == 1

    assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# Locations that are not valid UTF-8 on the command line
# ---------------------------------------------------------------------------

def test_undecodable_location_wttr(json_transport, capsys):
    payload = {
        "current_condition": [{"temp_C": "21", "humidity": "40", "weatherDesc": [{"value": "Sunny"}]}],
        "nearest_area": [{"areaName": [{"value": "Cafe"}]}],
    }
    transport = json_transport(payload)
    client = WttrClient("https://wttr.test", transport=transport)

    with patch("weathercli.cli.WttrClient", return_value=client):
        assert main(["-l", "caf\udce9", "-p", "wttr"]) == 0

    assert transport.requests[0].url.raw_path.split(b"?")[0] == b"/caf%E9"
    assert "Weather for Cafe" in capsys.readouterr().out


def test_undecodable_location_open_meteo(transport_for, capsys):
    def handler(request):
        if request.url.host == "geo.test":
            return httpx.Response(200, json={"results": [{"name": "Cafe", "latitude": 1.0, "longitude": 2.0}]})
        return httpx.Response(200, json={
            "current": {"temperature_2m": 20.0, "relative_humidity_2m": 50, "wind_speed_10m": 3.0, "weather_code": 0},
        })

    transport = transport_for(handler)
    client = OpenMeteoClient("https://api.test/v1", "https://geo.test/v1", transport=transport)

    with patch("weathercli.cli.OpenMeteoClient", return_value=client):
        assert main(["-l", "caf\udce9"]) == 0

    assert transport.requests[0].url.query == b"name=caf%E9&count=1"
    assert "Weather for Cafe" in capsys.readouterr().out
