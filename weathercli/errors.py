class WeatherError(Exception):
    """Base class for every failure the CLI reports to the user."""


class ValidationError(WeatherError):
    """Bad command-line arguments, detected before any network call."""


class NotFoundError(WeatherError):
    pass


class NetworkError(WeatherError):
    pass


class HTTPStatusError(WeatherError):
    """Upstream answered with something other than 200."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"upstream returned status {status_code}")


class DecodeError(WeatherError):
    pass


class EmptyLocationError(WeatherError):
    pass


class NoDataError(WeatherError):
    pass
