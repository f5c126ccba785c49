"""
TfL unified API client: stop points, journey planner, fares.
One blocking GET per call; responses decoded into pydantic models. No retries, no caching.
"""
import logging
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from tfl_client.api.errors import TflApiError, TflDecodeError
from tfl_client.api.models import (
    ApiError,
    FaresSection,
    ItineraryResult,
    JourneyQuery,
    MatchedStop,
    SearchResponse,
    SingleFareQuery,
    StopPoint,
)
from tfl_client.api.urls import build_url, join_modes
from tfl_client.middleware.request_logging import make_event_hooks
from tfl_client.settings import DEFAULT_BASE_URL, Settings

REQUEST_TIMEOUT_SECONDS = 30.0

STOP_POINT_PATH = "StopPoint"
SEARCH_PATH = "Search"
JOURNEY_RESULTS_PATH = ("Journey", "JourneyResults")
TO_PATH = "to"
FARE_TO_PATH = "FareTo"

T = TypeVar("T")


class ClientConfig(BaseModel):
    """Immutable client configuration: base origin and static credentials."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    app_id: str = ""
    app_key: str = ""
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"base_url must be an absolute URL, got {v!r}")
        _ = parts.port  # raises ValueError on a malformed port
        return v


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode(body: bytes, shape: type[T]) -> T:
    """Decode a JSON body into shape (a model class or e.g. list[Model]); TflDecodeError on failure."""
    try:
        return _adapter(shape).validate_json(body)
    except ValidationError as e:
        raise TflDecodeError(str(e)) from e


class TflClient:
    """Client for the TfL unified API. Safe to share across threads; configuration is read-only."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        app_id: str = "",
        app_key: str = "",
        *,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = ClientConfig(base_url=base_url, app_id=app_id, app_key=app_key)
        self._logger = logger or logging.getLogger(__name__)
        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                timeout=self.config.timeout_seconds,
                event_hooks=make_event_hooks(self._logger),
            )
        self._http = http_client

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "TflClient":
        return cls(
            base_url=settings.base_url,
            app_id=settings.app_id,
            app_key=settings.app_key,
            **kwargs,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TflClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def build_url(
        self,
        path_segments: Sequence[str],
        query_params: Mapping[str, str] | None = None,
    ) -> str:
        return build_url(
            self.config.base_url,
            path_segments,
            query_params,
            app_id=self.config.app_id,
            app_key=self.config.app_key,
        )

    def get_json(self, url: str, shape: type[T]) -> T:
        """
        GET url and decode the body into shape.
        Non-200 responses are decoded as ApiError and raised as TflApiError (str == upstream message).
        httpx.TransportError (connect errors, timeouts) propagates unchanged.
        """
        self._logger.info("GET - %s", url)
        resp = self._http.get(url)
        body = resp.read()

        if resp.status_code != httpx.codes.OK:
            error = decode(body, ApiError)
            self._logger.warning(
                "telemetry tfl_api_error status=%s exception_type=%s message=%s",
                resp.status_code,
                error.exception_type,
                error.message,
            )
            raise TflApiError(error, resp.status_code)

        return decode(body, shape)

    # --- Stop points ---

    def get_stop_point(self, stop_id: str) -> StopPoint:
        """StopPoint for a naptan/hub id. Endpoint: /StopPoint/{id}"""
        url = self.build_url([STOP_POINT_PATH, stop_id])
        return self.get_json(url, StopPoint)

    def search_stop_points(self, search_term: str) -> list[MatchedStop]:
        """Stops matching search_term. Endpoint: /StopPoint/Search/{searchTerm}"""
        return self.search_stop_points_with_modes(search_term, [])

    def search_stop_points_with_modes(self, search_term: str, modes: Sequence[str]) -> list[MatchedStop]:
        """
        Stops matching search_term, filtered by mode (e.g. ["national-rail", "tube"]).
        The modes param is omitted when modes is empty.
        Endpoint: /StopPoint/Search/{searchTerm}?modes=...
        """
        params: dict[str, str] = {}
        joined = join_modes(modes)
        if joined:
            params["modes"] = joined
        url = self.build_url([STOP_POINT_PATH, SEARCH_PATH, search_term], params)
        return self.get_json(url, SearchResponse).matches

    # --- Journey planner ---

    def get_journey_itinerary(self, query: JourneyQuery) -> ItineraryResult:
        """Endpoint: /Journey/JourneyResults/{from}/to/{to}?date=...&time=...&mode=..."""
        params = {"date": query.date, "time": query.time}
        joined = join_modes(query.modes)
        if joined:
            params["mode"] = joined
        url = self.build_url([*JOURNEY_RESULTS_PATH, query.from_id, TO_PATH, query.to_id], params)
        return self.get_json(url, ItineraryResult)

    # --- Fares ---

    def single_fare_finder(self, query: SingleFareQuery) -> list[FaresSection]:
        """Single fare between two stations. Endpoint: /StopPoint/{from}/FareTo/{to}"""
        url = self.build_url([STOP_POINT_PATH, query.from_id, FARE_TO_PATH, query.to_id])
        return self.get_json(url, list[FaresSection])
