"""Exceptions raised by the TfL client. Transport failures surface as httpx.TransportError unchanged."""
from tfl_client.api.models import ApiError


class TflError(Exception):
    """Base class for errors reported by the TfL client."""


class TflApiError(TflError):
    """
    Non-200 response with a parseable ApiError body.
    str(exc) is exactly the upstream message; the full error body is kept on .error.
    """

    def __init__(self, error: ApiError, status_code: int):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @property
    def message(self) -> str:
        return self.error.message


class TflDecodeError(TflError):
    """Response body (success or error) could not be parsed into the expected shape."""
