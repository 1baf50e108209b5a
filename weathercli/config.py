from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="WEATHER_", extra="ignore")

    log_level: str = "WARNING"

    # Open-Meteo
    geocoding_base_url: str = "https://geocoding-api.open-meteo.com/v1"
    forecast_base_url: str = "https://api.open-meteo.com/v1"

    # wttr.in
    wttr_base_url: str = "https://wttr.in"
    wttr_timeout_seconds: float = 10.0


settings = Settings()
