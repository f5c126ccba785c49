"""Typed client for the Transport for London unified API."""
from tfl_client.api import ClientConfig, TflApiError, TflClient, TflDecodeError, TflError, build_url
from tfl_client.api.models import (
    ApiError,
    FaresSection,
    ItineraryResult,
    JourneyQuery,
    MatchedStop,
    SingleFareQuery,
    StopPoint,
)

__all__ = [
    "ApiError",
    "ClientConfig",
    "FaresSection",
    "ItineraryResult",
    "JourneyQuery",
    "MatchedStop",
    "SingleFareQuery",
    "StopPoint",
    "TflApiError",
    "TflClient",
    "TflDecodeError",
    "TflError",
    "build_url",
]
