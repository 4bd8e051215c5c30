"""Infrastructure-level errors."""


class HTTPClientError(Exception):
    """Transport failure: the request never produced an HTTP response."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
