"""FastAPI stand-in for the TfL unified API, serving JSON fixtures from tests/testdata."""
import json
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

TESTDATA = Path(__file__).resolve().parent / "testdata"
APP_ID = "APP_ID"
APP_KEY = "APP_KEY"


def load_fixture(name: str):
    return json.loads((TESTDATA / name).read_text(encoding="utf-8"))


def _api_error(request: Request, status_code: int, status: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "$type": "Tfl.Api.Presentation.Entities.ApiError, Tfl.Api.Presentation.Entities",
            "timestampUtc": "2019-03-31T18:40:05.2843216Z",
            "exceptionType": "EntityNotFoundException" if status_code == 404 else "ApiArgumentException",
            "httpStatusCode": status_code,
            "httpStatus": status,
            "relativeUri": f"{request.url.path}?{request.url.query}",
            "message": message,
        },
    )


def create_stub_app() -> FastAPI:
    """Build a stub app; every request is recorded on app.state.requests as (decoded path, raw query)."""
    app = FastAPI()
    app.state.requests = []

    @app.middleware("http")
    async def record_and_check_credentials(request: Request, call_next):
        app.state.requests.append((request.scope["path"], request.url.query))
        params = request.query_params
        if params.get("app_id") != APP_ID or params.get("app_key") != APP_KEY:
            return _api_error(request, 403, "Forbidden", "Invalid app_key provided.")
        return await call_next(request)

    @app.get("/StopPoint/Search/{term}")
    def search(term: str, request: Request):
        modes = request.query_params.get("modes")
        if term == "London Bridge" and modes is None:
            return load_fixture("search_london_bridge.json")
        if term == "London Bridge" and modes == "national-rail,tube":
            return load_fixture("search_london_bridge_filtered.json")
        return load_fixture("search_nope.json")

    @app.get("/StopPoint/{from_id}/FareTo/{to_id}")
    def fare(from_id: str, to_id: str, request: Request):
        if (from_id, to_id) == ("940GZZLUASL", "940GZZLUBNK"):
            return load_fixture("fare_940GZZLUASL_940GZZLUBNK.json")
        return _api_error(request, 404, "NotFound", f"The following stop point is not recognised: {from_id}")

    @app.get("/StopPoint/{stop_id}")
    def stop_point(stop_id: str, request: Request):
        if stop_id == "9100ECROYDN":
            return load_fixture("stop_point_9100ECROYDN.json")
        if stop_id == "BROKEN":
            return Response(status_code=500, content="<html><body>Service Unavailable</body></html>", media_type="text/html")
        return _api_error(request, 404, "NotFound", f"The following stop point is not recognised: {stop_id}")

    @app.get("/Journey/JourneyResults/{from_id}/to/{to_id}")
    def journey(from_id: str, to_id: str, request: Request):
        params = request.query_params
        if (
            (from_id, to_id) == ("1001089", "1000173")
            and params.get("date") == "20190401"
            and params.get("time") == "0715"
            and params.get("mode") == "national-rail,tube"
        ):
            return load_fixture("journey_1001089_1000173.json")
        return _api_error(request, 400, "BadRequest", "No journey found for your inputs.")

    return app
