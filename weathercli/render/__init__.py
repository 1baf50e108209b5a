from weathercli.render import art, text

__all__ = ["art", "text"]
