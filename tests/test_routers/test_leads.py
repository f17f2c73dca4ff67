import httpx
import pytest
import respx
from httpx import ASGITransport, Response

GOOGLE_PLACES_URL = "https://places.googleapis.com/v1/places:searchText"
SCHOOL = "1 School Rd, Springfield, IL"


def _mock_geocode(status="OK"):
    results = []
    if status == "OK":
        results = [
            {
                "formatted_address": "1 School Rd, Springfield, IL 62701, USA",
                "geometry": {"location": {"lat": 39.80, "lng": -89.64}},
            }
        ]
    respx.get(host="maps.googleapis.com", path="/maps/api/geocode/json").mock(
        return_value=Response(200, json={"status": status, "results": results})
    )


def _place(place_id, name, lat, website=None):
    place = {
        "id": place_id,
        "displayName": {"text": name},
        "formattedAddress": "123 Main St, Springfield, IL 62701, USA",
        "location": {"latitude": lat, "longitude": -89.64},
    }
    if website:
        place["websiteUri"] = website
    return place


def _mock_search(*responses):
    respx.post(GOOGLE_PLACES_URL).mock(side_effect=list(responses))


@respx.mock
async def test_generate_dedupes_and_sorts(client):
    _mock_geocode()
    p1 = _place("p1", "Heartland Catering", 39.81)
    p2 = _place("p2", "Prairie Kitchen", 39.83)
    _mock_search(
        Response(200, json={"places": [p2, p1]}),
        Response(200, json={"places": [p1]}),
        Response(200, json={"places": []}),
        Response(200, json={"places": []}),
    )

    resp = await client.post(
        "/leads/generate",
        json={"school_address": SCHOOL, "radius_miles": 10, "search_type": "catering"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["total_count"] == 2
    assert [lead["source_place_id"] for lead in data["leads"]] == ["p1", "p2"]
    assert data["leads"][0]["distance_display"] == "0.7 miles"
    assert data["search_terms_used"] == [
        "catering", "catering company", "food catering", "meal prep catering",
    ]
    assert data["school_location"]["location"] == {"latitude": 39.80, "longitude": -89.64}
    assert data["enriched"] is False


@respx.mock
async def test_generate_search_failure_is_absorbed(client):
    _mock_geocode()
    _mock_search(
        Response(500, text="boom"),
        Response(200, json={"places": [_place("p1", "Heartland Catering", 39.81)]}),
        Response(200, json={"places": []}),
    )

    resp = await client.post(
        "/leads/generate",
        json={"school_address": SCHOOL, "search_type": "pizza_diner"},
    )

    assert resp.status_code == 200
    assert resp.json()["total_count"] == 1


@respx.mock
async def test_generate_unresolvable_address(client):
    _mock_geocode(status="ZERO_RESULTS")

    resp = await client.post("/leads/generate", json={"school_address": "nowhere"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "address not resolvable"


async def test_generate_validation_error(client):
    resp = await client.post("/leads/generate", json={"school_address": "", "radius_miles": 80})
    assert resp.status_code == 422


@pytest.fixture
async def unconfigured_client(mock_env, monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


async def test_generate_without_api_key(unconfigured_client):
    resp = await unconfigured_client.post("/leads/generate", json={"school_address": SCHOOL})

    assert resp.status_code == 503


@respx.mock
async def test_generate_with_enrichment(client):
    _mock_geocode()
    _mock_search(
        Response(
            200,
            json={"places": [_place("p1", "Heartland Catering", 39.81, website="heartland.com")]},
        )
    )
    respx.head("https://heartland.com").mock(return_value=Response(200))
    respx.get("https://heartland.com").mock(
        return_value=Response(
            200,
            html="<html><body>info@example.com sales@heartland.com (217) 555-0100</body></html>",
        )
    )

    resp = await client.post(
        "/leads/generate",
        json={
            "school_address": SCHOOL,
            "search_type": "custom",
            "custom_search_terms": ["catering"],
            "enrich_leads": True,
        },
    )

    assert resp.status_code == 200
    lead = resp.json()["leads"][0]
    assert lead["url_valid"] is True
    assert lead["contact_email"] == "sales@heartland.com"
    assert lead["contact_phone"] == "(217) 555-0100"
    assert resp.json()["enriched"] is True
