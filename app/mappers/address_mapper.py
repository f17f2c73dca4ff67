from app.schemas.enrichment import ParsedAddress
from app.schemas.google_places import AddressComponent


def _find_component(
    components: list[AddressComponent], *types: str
) -> str | None:
    for t in types:
        for comp in components:
            if t in comp.types:
                return comp.longText
    return None


def _find_short(
    components: list[AddressComponent], *types: str
) -> str | None:
    for t in types:
        for comp in components:
            if t in comp.types:
                return comp.shortText
    return None


def parse_address_components(
    components: list[AddressComponent] | None,
) -> ParsedAddress:
    if not components:
        return ParsedAddress()

    street_number = _find_component(components, "street_number") or ""
    route = _find_component(components, "route") or ""
    address_parts = [p for p in (street_number, route) if p]

    return ParsedAddress(
        address=" ".join(address_parts),
        address_line2=_find_component(components, "subpremise") or "",
        city=_find_component(components, "locality") or "",
        state=_find_short(components, "administrative_area_level_1") or "",
        zipcode=_find_component(components, "postal_code") or "",
        country=_find_short(components, "country") or "USA",
    )


def parse_formatted_address(formatted: str, parsed: ParsedAddress) -> ParsedAddress:
    """Fill street/city/state/zip from a "street, city, ST 12345, country" string.

    Needs at least three comma-separated segments; otherwise ``parsed`` is
    returned unchanged.
    """
    parts = [p.strip() for p in formatted.split(",")]
    if len(parts) < 3:
        return parsed

    state_zip = parts[2].split()
    return parsed.model_copy(
        update={
            "address": parts[0],
            "city": parts[1],
            "state": state_zip[0] if state_zip else "",
            "zipcode": state_zip[1] if len(state_zip) > 1 else "",
        }
    )


def parse_address(
    components: list[AddressComponent] | None,
    formatted_address: str | None,
) -> ParsedAddress:
    """Structured components first, free-text fallback when no city comes out."""
    parsed = parse_address_components(components)
    if not parsed.city and formatted_address:
        parsed = parse_formatted_address(formatted_address, parsed)
    return parsed
