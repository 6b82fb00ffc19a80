"""
Integration tests for the HTTP API.

Tests:
- GET  /api/search-facilities
- GET  /api/search-history
- POST /api/search-history
- GET  /health

Usage:
    pytest tests/test_api.py -v
"""

from unittest.mock import Mock, patch

from fastapi.testclient import TestClient

from healthfinder.errors import GENERIC_SEARCH_ERROR
from healthfinder.main import create_app
from healthfinder.tools.google_places import GooglePlacesTool


class TestSearchFacilitiesEndpoint:
    def test_missing_query_is_400(self, api):
        res = api.get("/api/search-facilities")

        assert res.status_code == 400
        assert res.json() == {"error": "Search query is required"}

    def test_blank_query_is_400(self, api):
        res = api.get("/api/search-facilities", params={"query": "  "})

        assert res.status_code == 400
        assert "error" in res.json()

    def test_cvs_search(self, api):
        res = api.get("/api/search-facilities", params={"query": "CVS"})

        assert res.status_code == 200
        facilities = res.json()["facilities"]
        assert len(facilities) == 1
        cvs = facilities[0]
        assert cvs["name"] == "CVS Pharmacy"
        assert cvs["type"] == "pharmacy"
        assert cvs["placeId"] == "mock_cvs_1"
        assert "Health Ave" in cvs["address"]
        assert cvs["id"]
        assert cvs["createdAt"]

    def test_type_filter(self, api):
        res = api.get("/api/search-facilities", params={"query": "health", "type": "clinic"})

        assert res.status_code == 200
        names = [f["name"] for f in res.json()["facilities"]]
        assert names == ["Wellness Medical Clinic", "Family Health Clinic"]

    def test_unknown_type_is_400(self, api):
        res = api.get("/api/search-facilities", params={"query": "health", "type": "veterinary"})

        assert res.status_code == 400
        assert "hospital, pharmacy, clinic" in res.json()["error"]

    def test_repeat_search_keeps_ids(self, api, store):
        first = api.get("/api/search-facilities", params={"query": "pharmacy"}).json()["facilities"]
        second = api.get("/api/search-facilities", params={"query": "pharmacy"}).json()["facilities"]

        assert [f["id"] for f in first] == [f["id"] for f in second]
        assert store.facility_count() == len(first)

    def test_missing_api_key_is_configuration_error(self, store):
        """Without a provider key every search fails; there is no silent catalog fallback."""
        api = TestClient(create_app(store=store, lookup_tool=GooglePlacesTool(api_key="")))

        res = api.get("/api/search-facilities", params={"query": "CVS"})

        assert res.status_code == 500
        assert "GOOGLE_PLACES_API_KEY" in res.json()["error"]
        assert store.facility_count() == 0

    def test_provider_failure_is_generic_500(self, store):
        """Provider diagnostics are logged, not returned."""
        api = TestClient(create_app(store=store, lookup_tool=GooglePlacesTool(api_key="bad-key")))
        denied = Mock()
        denied.json.return_value = {"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."}

        with patch("healthfinder.tools.google_places.requests.get", return_value=denied):
            res = api.get("/api/search-facilities", params={"query": "CVS"})

        assert res.status_code == 500
        assert res.json() == {"error": GENERIC_SEARCH_ERROR}
        assert "API key" not in res.text


class TestSearchHistoryEndpoints:
    def test_empty_history(self, api):
        res = api.get("/api/search-history")

        assert res.status_code == 200
        assert res.json() == {"history": []}

    def test_post_then_get_joins_facility(self, api):
        facility = api.get("/api/search-facilities", params={"query": "Apollo"}).json()["facilities"][0]

        res = api.post("/api/search-history", json={"facilityId": facility["id"], "searchQuery": "apo"})

        assert res.status_code == 200
        search = res.json()["search"]
        assert search["searchQuery"] == "apo"
        assert search["facilityId"] == facility["id"]
        assert search["userId"] is None
        assert search["id"]

        history = api.get("/api/search-history").json()["history"]
        assert len(history) == 1
        assert history[0]["id"] == search["id"]
        assert history[0]["facility"]["name"] == "Apollo Hospital"

    def test_dangling_facility_is_null(self, api):
        api.post("/api/search-history", json={"facilityId": "missing", "searchQuery": "x"})

        [entry] = api.get("/api/search-history").json()["history"]

        assert entry["facilityId"] == "missing"
        assert entry["facility"] is None

    def test_missing_search_query_is_500(self, api):
        res = api.post("/api/search-history", json={"facilityId": "abc"})

        assert res.status_code == 500
        assert res.json() == {"error": "Failed to save search history"}

    def test_malformed_body_is_500(self, api):
        res = api.post("/api/search-history", content=b"not json", headers={"Content-Type": "application/json"})

        assert res.status_code == 500
        assert "error" in res.json()

    def test_order_and_cap(self, api):
        for i in range(15):
            api.post("/api/search-history", json={"searchQuery": f"q{i}"})

        history = api.get("/api/search-history").json()["history"]

        assert len(history) == 10
        assert [h["searchQuery"] for h in history] == [f"q{i}" for i in range(14, 4, -1)]

    def test_filter_by_user(self, api):
        api.post("/api/search-history", json={"searchQuery": "a", "userId": "u1"})
        api.post("/api/search-history", json={"searchQuery": "b", "userId": "u2"})

        history = api.get("/api/search-history", params={"userId": "u1"}).json()["history"]

        assert [h["searchQuery"] for h in history] == ["a"]


def test_health(api):
    res = api.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["facilitySource"] == "catalog"
