"""Personal dashboard of upcoming and available Radarr movies."""

__version__ = "0.1.0"
