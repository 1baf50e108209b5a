from weathercli.services.openmeteo import OpenMeteoClient
from weathercli.services.wttr import WttrClient

__all__ = ["OpenMeteoClient", "WttrClient"]
