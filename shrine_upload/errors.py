class UploadHttpError(Exception):
    """Base class for every failure surfaced by an upload request."""


class BadUrl(UploadHttpError):
    """Raised when the request URL cannot be built or parsed."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Malformed URL: {url!r}")
        self.url = url


class Timeout(UploadHttpError):
    """Raised when the request did not complete in time."""


class BadStatus(UploadHttpError):
    """Raised when the server answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Unexpected HTTP status {status_code}")
        self.status_code = status_code
        self.body = body


class NetworkError(UploadHttpError):
    """Raised when no response was received."""


class BadBody(UploadHttpError):
    """Raised when a 2xx response body does not decode to the expected shape."""

    def __init__(self, body: str, reason: str = "") -> None:
        message = "Response body could not be decoded"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.body = body
