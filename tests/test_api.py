from unittest.mock import patch

import pytest
from flask import abort

from main import create_app
from thrift_finder.core.categories import CATEGORY_LABELS

from fakes import SF_GEOCODE, ZERO_RESULTS_GEOCODE, json_response, place, places_by_query

GEOCODE = "thrift_finder.services.geocoding_service._session.get"
PLACES = "thrift_finder.services.places_service._session.post"


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "message": "Backend running"}


def test_client_config(client, configured, monkeypatch):
    monkeypatch.setattr(configured, "MAPS_BROWSER_KEY", "browser-key")
    monkeypatch.setattr(configured, "API_BASE_URL", "https://api.example.org")

    resp = client.get("/api/config")

    assert resp.get_json() == {"apiBase": "https://api.example.org", "mapsBrowserKey": "browser-key"}


@patch(PLACES)
@patch(GEOCODE)
def test_search_94103(mock_get, mock_post, client):
    mock_get.return_value = json_response(SF_GEOCODE)
    mock_post.side_effect = places_by_query({
        "thrift store": [
            place("t1", "Thrift Town", rating=4.3, userRatingCount=900, websiteUri="https://thrifttown.com"),
            place("t2", "Community Thrift"),
        ],
        "donation center": [place("t2"), place("d1", "Goodwill Donation Center")],
        "clothing swap": [place("s1", "Swap Party"), {"id": "bad", "location": {}}],
    })

    resp = client.get("/api/search?q=94103&radius=7000")

    assert resp.status_code == 200
    body = resp.get_json()
    assert abs(body["center"]["lat"] - 37.77) < 0.1
    assert abs(body["center"]["lng"] + 122.41) < 0.1

    places = body["places"]
    assert [p["id"] for p in places] == ["t1", "t2", "d1", "s1"]
    assert all(p["category"] in CATEGORY_LABELS for p in places)
    assert all(isinstance(p["lat"], float) and isinstance(p["lng"], float) for p in places)

    first = places[0]
    assert first["name"] == "Thrift Town"
    assert first["ratingCount"] == 900
    assert first["website"] == "https://thrifttown.com"
    assert first["mapsUrl"] is None
    assert "distanceMeters" in first


@patch(PLACES)
@patch(GEOCODE)
def test_search_filter_and_sort(mock_get, mock_post, client):
    mock_get.return_value = json_response(SF_GEOCODE)
    mock_post.side_effect = places_by_query({
        "thrift store": [place("t1", rating=3.9), place("t2", rating=4.7)],
        "donation center": [place("d1", rating=5.0)],
    })

    resp = client.get("/api/search?q=94103&category=Thrift%20Store&sort=rating")

    assert [p["id"] for p in resp.get_json()["places"]] == ["t2", "t1"]


@patch(PLACES)
@patch(GEOCODE)
def test_search_missing_q(mock_get, mock_post, client):
    for url in ("/api/search", "/api/search?q=", "/api/search?q=%20%20"):
        resp = client.get(url)
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Missing q"}

    mock_get.assert_not_called()
    mock_post.assert_not_called()


@patch(PLACES)
@patch(GEOCODE)
def test_search_bad_radius(mock_get, mock_post, client):
    resp = client.get("/api/search?q=94103&radius=far")

    assert resp.status_code == 400
    mock_get.assert_not_called()


@patch(PLACES)
@patch(GEOCODE)
def test_search_without_maps_key(mock_get, mock_post, client, configured, monkeypatch):
    monkeypatch.setattr(configured, "GOOGLE_MAPS_API_KEY", None)

    resp = client.get("/api/search?q=94103")

    assert resp.status_code == 500
    assert "GOOGLE_MAPS_API_KEY" in resp.get_json()["error"]
    mock_get.assert_not_called()
    mock_post.assert_not_called()


@patch(PLACES)
@patch(GEOCODE)
def test_search_location_not_found(mock_get, mock_post, client):
    mock_get.return_value = json_response(ZERO_RESULTS_GEOCODE)

    resp = client.get("/api/search?q=qqqqqqqq")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Location not found", "status": "ZERO_RESULTS", "message": None}
    mock_post.assert_not_called()


@patch(PLACES)
@patch(GEOCODE)
def test_search_unexpected_error_is_json(mock_get, mock_post, client):
    mock_get.return_value = json_response({"status": "OK", "results": [{"geometry": {}}]})

    resp = client.get("/api/search?q=94103")

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Server error"


def test_unknown_route_is_json(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


@pytest.mark.parametrize("code, name", [(400, "Bad Request"), (413, "Request Entity Too Large"), (415, "Unsupported Media Type")])
def test_http_errors_keep_their_status(configured, code, name):
    app = create_app()
    app.config["TESTING"] = True

    @app.route("/api/raise-http")
    def raise_http():
        abort(code)

    resp = app.test_client().get("/api/raise-http")

    assert resp.status_code == code
    assert resp.get_json() == {"error": name}


def test_cors_header(client):
    resp = client.get("/api/health", headers={"Origin": "http://localhost:5173"})
    assert resp.headers.get("Access-Control-Allow-Origin") == "*"
