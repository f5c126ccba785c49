from tfl_client.api.client import ClientConfig, TflClient
from tfl_client.api.errors import TflApiError, TflDecodeError, TflError
from tfl_client.api.urls import build_url

__all__ = [
    "ClientConfig",
    "TflApiError",
    "TflClient",
    "TflDecodeError",
    "TflError",
    "build_url",
]
