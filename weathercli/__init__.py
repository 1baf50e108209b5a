"""Command-line weather lookup backed by Open-Meteo and wttr.in."""

__version__ = "0.1.0"
