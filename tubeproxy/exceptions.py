class TubeproxyError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500


class ValidationError(TubeproxyError):
    """Raised when request input is missing or malformed."""

    status_code = 400


class NotFoundError(TubeproxyError):
    """Raised when the requested resource does not exist upstream."""

    status_code = 404


class UpstreamError(TubeproxyError):
    """Raised when a YouTube API call fails."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class UnknownError(TubeproxyError):
    """Wraps any other exception that escapes a route."""
