"""Pydantic models for TfL unified API responses and queries."""
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class TflModel(BaseModel):
    """
    Base for response shapes: camelCase aliases, unknown fields ignored.
    Missing or null fields fall back to the field default (empty string, 0, False, []).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# --- Errors ---


class ApiError(TflModel):
    """Tfl.Api.Presentation.Entities.ApiError"""

    # upstream sends "timestampUtc"
    timestamp_utc: str = Field(
        default="",
        validation_alias=AliasChoices("timestampUTC", "timestampUtc", "timestamp_utc"),
        serialization_alias="timestampUTC",
    )
    exception_type: str = ""
    http_status_code: int = 0
    http_status: str = ""
    relative_uri: str = ""
    message: str = ""


# --- Stop points ---


class AdditionalProperty(TflModel):
    resp_type: str = Field(default="", alias="$type")
    category: str = ""
    key: str = ""
    source_system_key: str = ""
    value: str = ""


class LineIdentifier(TflModel):
    resp_type: str = Field(default="", alias="$type")
    id: str = ""
    name: str = ""
    uri: str = ""
    type: str = ""
    crowding: dict[str, Any] = Field(default_factory=dict)
    route_type: str = ""
    status: str = ""


class StopPoint(TflModel):
    """Tfl.Api.Presentation.Entities.StopPoint; children nest recursively (e.g. station -> platforms)."""

    naptan_id: str = ""
    modes: list[str] = Field(default_factory=list)
    ics_code: str = ""
    stop_type: str = ""
    status: bool = False
    id: str = ""
    common_name: str = ""
    place_type: str = ""
    lat: float = 0.0
    lon: float = 0.0
    lines: list[LineIdentifier] = Field(default_factory=list)
    additional_properties: list[AdditionalProperty] = Field(default_factory=list)
    children: list["StopPoint"] = Field(default_factory=list)


class MatchedStop(TflModel):
    modes: list[str] = Field(default_factory=list)
    ics_code: str = Field(default="", alias="icsId")
    name: str = ""
    zone: str = ""
    id: str = ""


class SearchResponse(TflModel):
    matches: list[MatchedStop] = Field(default_factory=list)


# --- Journey planner ---


class Instruction(TflModel):
    summary: str = ""
    detailed: str = ""


class Leg(TflModel):
    duration: int = 0
    instruction: Instruction = Field(default_factory=Instruction)
    departure_time: str = ""
    arrival_time: str = ""
    departure_point: StopPoint = Field(default_factory=StopPoint)
    arrival_point: StopPoint = Field(default_factory=StopPoint)


class FareTapDetails(TflModel):
    mode_type: str = ""
    tap_timestamp: str = ""


class FareTap(TflModel):
    atco_code: str = ""
    tap_details: FareTapDetails = Field(default_factory=FareTapDetails)


class Fare(TflModel):
    low_zone: int = 0
    high_zone: int = 0
    cost: int = 0
    charge_profile_name: str = ""
    is_hopper_fare: bool = False
    peak_cost: int = Field(default=0, alias="peak")
    off_peak_cost: int = Field(default=0, alias="offPeak")
    taps: list[FareTap] = Field(default_factory=list)


class JourneyFare(TflModel):
    total_cost: int = 0
    fares: list[Fare] = Field(default_factory=list)


class Journey(TflModel):
    start_date_time: str = ""
    arrival_date_time: str = ""
    duration: int = 0
    legs: list[Leg] = Field(default_factory=list)
    fare: JourneyFare = Field(default_factory=JourneyFare)


class ItineraryResult(TflModel):
    """Tfl.Api.Presentation.Entities.JourneyPlanner.ItineraryResult"""

    journeys: list[Journey] = Field(default_factory=list)


# --- Fares ---


class FareStation(TflModel):
    atco_code: str = ""
    common_name: str = ""
    fare_category: str = ""


class FareJourney(TflModel):
    from_station: FareStation = Field(default_factory=FareStation)
    to_station: FareStation = Field(default_factory=FareStation)


class FareMessage(TflModel):
    bullet_order: int = 0
    header: bool = False
    message_text: str = ""
    link_text: str = ""
    url: str = ""


class TicketType(TflModel):
    type: str = ""
    description: str = ""


class Ticket(TflModel):
    passenger_type: str = ""
    ticket_type: TicketType = Field(default_factory=TicketType)
    ticket_time: TicketType = Field(default_factory=TicketType)
    cost: str = ""
    description: str = ""
    mode: str = ""
    display_order: int = 0


class FareRow(TflModel):
    # "from" is a keyword
    from_: str = Field(default="", alias="from")
    to: str = ""
    route_code: str = ""
    route_description: str = ""
    display_name: str = ""
    passenger_type: str = ""
    contactless_payg_only_fare: bool = Field(default=False, alias="contactlessPAYGOnlyFare")
    tickets_available: list[Ticket] = Field(default_factory=list)
    messages: list[FareMessage] = Field(default_factory=list)


class FaresSection(TflModel):
    header: str = ""
    index: int = 0
    journey: FareJourney = Field(default_factory=FareJourney)
    rows: list[FareRow] = Field(default_factory=list)
    messages: list[FareMessage] = Field(default_factory=list)


# --- Queries ---


class JourneyQuery(BaseModel):
    """Input for the journey planner: stop point ids, date as yyyyMMdd, time as HHmm."""

    from_id: str
    to_id: str
    date: str
    time: str
    modes: list[str] = Field(default_factory=list)


class SingleFareQuery(BaseModel):
    from_id: str
    to_id: str
