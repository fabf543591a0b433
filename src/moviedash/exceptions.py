"""Exception hierarchy for the dashboard."""


class MoviedashError(Exception):
    """Base class for all errors raised while serving the dashboard."""


class ConfigError(MoviedashError):
    """Required configuration is missing or invalid. Fatal at startup."""


class UpstreamError(MoviedashError):
    """The Radarr API could not be reached or answered with an error status."""


class DecodeError(MoviedashError):
    """The Radarr response body is not the expected JSON array of movies."""


class RenderError(MoviedashError):
    """The page template failed to execute."""


class CacheTypeError(MoviedashError):
    """The cache returned something other than the raw response bytes."""
