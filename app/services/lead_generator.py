import logging

from app.exceptions.custom import ConfigurationError
from app.mappers.address_mapper import parse_address
from app.mappers.chain_detector import build_flag_reason, detect_chain, has_franchise_indicators
from app.mappers.distance import calculate_distance_miles, format_distance, round_miles_within
from app.schemas.google_places import GooglePlace, LatLng
from app.schemas.leads import LEAD_SOURCE, DiscoveryResult, Lead, SearchType
from app.services.google_places import MISSING_KEY_MESSAGE, GooglePlacesService, build_search_query

logger = logging.getLogger(__name__)

SEARCH_TERMS: dict[SearchType, list[str]] = {
    SearchType.catering: ["catering", "catering company", "food catering", "meal prep catering"],
    SearchType.pizza_diner: ["pizza restaurant", "diner", "local pizza"],
    SearchType.meal_prep: ["meal prep", "meal delivery", "prepared meals"],
}
DEFAULT_TERMS = ["catering"]


def get_search_terms(
    search_type: SearchType, custom_terms: list[str] | None = None
) -> list[str]:
    if search_type == SearchType.custom:
        terms = [t.strip() for t in custom_terms or [] if t.strip()]
        return terms or list(DEFAULT_TERMS)
    return list(SEARCH_TERMS.get(search_type, DEFAULT_TERMS))


def build_lead(place: GooglePlace, distance_miles: float) -> Lead:
    """Assemble a lead from a place already known to be inside the radius.

    ``distance_miles`` is expected to be rounded to one decimal already.
    """
    classification = detect_chain(place.name)
    franchise = has_franchise_indicators(place.name, place.websiteUri)
    chain_flagged = classification.is_chain or franchise

    parsed = parse_address(place.addressComponents, place.formattedAddress)

    return Lead(
        company=place.name,
        url=place.websiteUri or None,
        contact_phone=place.nationalPhoneNumber or None,
        address=parsed.address or None,
        address_line2=parsed.address_line2 or None,
        city=parsed.city or None,
        state=parsed.state or None,
        zipcode=parsed.zipcode or None,
        country=parsed.country or "USA",
        distance_miles=distance_miles,
        distance_display=format_distance(distance_miles),
        source=LEAD_SOURCE,
        source_place_id=place.id,
        rating=place.rating,
        review_count=place.userRatingCount,
        is_chain=chain_flagged,
        chain_flagged=chain_flagged,
        cuisine_flagged=classification.is_cuisine_limited,
        flag_reason=build_flag_reason(classification, franchise),
    )


def _distance_key(lead: Lead) -> tuple[bool, float]:
    return (lead.distance_miles is None, lead.distance_miles or 0.0)


class LeadGeneratorService:
    """Geocode the school, search each term, dedupe, filter by radius and classify."""

    def __init__(self, google_places: GooglePlacesService):
        self._google = google_places

    async def generate(
        self,
        school_address: str,
        radius_miles: float,
        search_type: SearchType = SearchType.catering,
        custom_terms: list[str] | None = None,
    ) -> DiscoveryResult:
        if not self._google.is_configured:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        school = await self._google.geocode(school_address)
        logger.info(
            "Resolved %r to %s (%.5f, %.5f)",
            school_address, school.formatted_address,
            school.location.latitude, school.location.longitude,
        )

        terms = get_search_terms(search_type, custom_terms)
        places = await self._collect_places(terms, school_address, school.location, radius_miles)

        leads: list[Lead] = []
        for place in places.values():
            distance = calculate_distance_miles(school.location, place.location)
            if distance > radius_miles:
                continue
            leads.append(build_lead(place, round_miles_within(distance, radius_miles)))

        leads.sort(key=_distance_key)
        logger.info(
            "Discovery for %r: %d unique places, %d leads within %s miles",
            school_address, len(places), len(leads), radius_miles,
        )

        return DiscoveryResult(
            leads=leads,
            school_location=school,
            search_terms_used=terms,
        )

    async def _collect_places(
        self,
        terms: list[str],
        school_address: str,
        center: LatLng,
        radius_miles: float,
    ) -> dict[str, GooglePlace]:
        """One search per term, sequentially; the first occurrence of a place id wins."""
        places: dict[str, GooglePlace] = {}
        for term in terms:
            query = build_search_query(term, school_address)
            result = await self._google.search_places(query, center, radius_miles)
            if result.error:
                logger.warning("Search term %r contributed no results: %s", term, result.error)
                continue

            for place in result.places:
                if not place.id or place.location is None:
                    continue
                places.setdefault(place.id, place)
        return places
