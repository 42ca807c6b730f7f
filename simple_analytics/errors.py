from typing import Optional


class InvalidPropertiesError(ValueError):
    """Raised when a report query is missing one of the required properties."""


class NotSuccessfulResponseError(RuntimeError):
    """Raised when the reporting endpoint answers with anything but 200.

    The raw response body is kept on ``body`` so callers can inspect the
    error payload returned by the API.
    """

    def __init__(self, body: str, status_code: Optional[int] = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code
