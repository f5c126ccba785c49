"""Tests for the tfl-client command line."""
import json

import pytest

from tfl_client.cli import _split_modes, build_parser, main


def test_split_modes():
    assert _split_modes(None) == []
    assert _split_modes("") == []
    assert _split_modes("national-rail, tube,") == ["national-rail", "tube"]


def test_journey_requires_date_and_time():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["journey", "1001089", "1000173"])


def test_stop_prints_json(client, capsys):
    assert main(["stop", "9100ECROYDN"], client=client) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["naptanId"] == "9100ECROYDN"
    assert out["children"][1]["commonName"] == "East Croydon Tram Stop"


def test_search_with_modes(client, stub_app, capsys):
    assert main(["search", "London Bridge", "--modes", "national-rail,tube"], client=client) == 0
    out = json.loads(capsys.readouterr().out)
    assert [m["id"] for m in out] == ["HUBLBG"]
    assert out[0]["icsId"] == "1000139"
    assert stub_app.state.requests[-1][1].endswith("modes=national-rail%2Ctube")


def test_journey(client, capsys):
    argv = ["journey", "1001089", "1000173", "--date", "20190401", "--time", "0715", "--modes", "national-rail,tube"]
    assert main(argv, client=client) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["journeys"][0]["fare"]["totalCost"] == 470


def test_fare(client, capsys):
    assert main(["fare", "940GZZLUASL", "940GZZLUBNK"], client=client) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0]["rows"][0]["from"] == "Arsenal"


def test_api_error_exits_nonzero(client, capsys):
    assert main(["stop", "INVALID"], client=client) == 1
    err = capsys.readouterr().err
    assert "The following stop point is not recognised: INVALID" in err
