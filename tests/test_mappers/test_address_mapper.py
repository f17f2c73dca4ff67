from app.mappers.address_mapper import (
    parse_address,
    parse_address_components,
    parse_formatted_address,
)
from app.schemas.enrichment import ParsedAddress
from app.schemas.google_places import AddressComponent


def _comp(long: str, short: str, types: list[str]) -> AddressComponent:
    return AddressComponent(longText=long, shortText=short, types=types)


FULL_COMPONENTS = [
    _comp("123", "123", ["street_number"]),
    _comp("Main Street", "Main St", ["route"]),
    _comp("Suite 4", "Suite 4", ["subpremise"]),
    _comp("Springfield", "Springfield", ["locality", "political"]),
    _comp("Illinois", "IL", ["administrative_area_level_1", "political"]),
    _comp("62704", "62704", ["postal_code"]),
    _comp("United States", "US", ["country", "political"]),
]


def test_parse_full_address():
    parsed = parse_address_components(FULL_COMPONENTS)

    assert parsed.address == "123 Main Street"
    assert parsed.address_line2 == "Suite 4"
    assert parsed.city == "Springfield"
    assert parsed.state == "IL"
    assert parsed.zipcode == "62704"
    assert parsed.country == "US"


def test_parse_missing_street_number():
    components = [
        _comp("Route 66", "Route 66", ["route"]),
        _comp("Springfield", "Springfield", ["locality"]),
    ]
    parsed = parse_address_components(components)

    assert parsed.address == "Route 66"
    assert parsed.state == ""
    assert parsed.country == "USA"


def test_parse_none_components():
    parsed = parse_address_components(None)

    assert parsed == ParsedAddress()
    assert parsed.country == "USA"


def test_formatted_address_fallback():
    parsed = parse_address(None, "123 Main St, Springfield, IL 62701, USA")

    assert parsed.address == "123 Main St"
    assert parsed.city == "Springfield"
    assert parsed.state == "IL"
    assert parsed.zipcode == "62701"
    assert parsed.country == "USA"


def test_fallback_without_zip():
    parsed = parse_address(None, "9 Elm Rd, Chatham, IL")

    assert parsed.state == "IL"
    assert parsed.zipcode == ""


def test_fallback_needs_three_segments():
    parsed = parse_formatted_address("Springfield, IL", ParsedAddress())

    assert parsed == ParsedAddress()


def test_fallback_used_when_components_have_no_city():
    components = [
        _comp("Suite 4", "Suite 4", ["subpremise"]),
        _comp("United States", "US", ["country"]),
    ]
    parsed = parse_address(components, "123 Main St, Springfield, IL 62701, USA")

    assert parsed.city == "Springfield"
    assert parsed.address_line2 == "Suite 4"
    assert parsed.country == "US"


def test_structured_components_win_over_formatted_address():
    parsed = parse_address(FULL_COMPONENTS, "1 Other Rd, Elsewhere, WI 53001, USA")

    assert parsed.address == "123 Main Street"
    assert parsed.city == "Springfield"
