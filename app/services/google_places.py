import logging

import httpx

from app.exceptions.custom import ConfigurationError, GooglePlacesError, ResolutionError
from app.mappers.distance import miles_to_meters
from app.schemas.google_places import (
    GeocodeResponse,
    LatLng,
    ResolvedLocation,
    SearchPlacesResult,
    TextSearchResponse,
)

logger = logging.getLogger(__name__)

SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

MAX_RESULT_COUNT = 20

FIELD_MASK = (
    "places.id,"
    "places.displayName,"
    "places.formattedAddress,"
    "places.addressComponents,"
    "places.location,"
    "places.rating,"
    "places.userRatingCount,"
    "places.websiteUri,"
    "places.nationalPhoneNumber,"
    "places.internationalPhoneNumber,"
    "places.googleMapsUri,"
    "places.businessStatus,"
    "places.types"
)

MISSING_KEY_MESSAGE = "GOOGLE_MAPS_API_KEY not configured"
UNRESOLVABLE_MESSAGE = "address not resolvable"


def build_search_query(term: str, near: str | None = None) -> str:
    return f"{term} near {near}" if near else term


class GooglePlacesService:
    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str) -> ResolvedLocation:
        """Resolve a free-text address. Raises ResolutionError, never retries."""
        if not self.is_configured:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        try:
            resp = await self._client.get(
                GEOCODE_URL, params={"address": address, "key": self._api_key}
            )
            resp.raise_for_status()
            data = GeocodeResponse.model_validate(resp.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Geocoding request failed for %r: %s", address, exc)
            raise ResolutionError(UNRESOLVABLE_MESSAGE, address) from exc

        if data.status != "OK" or not data.results:
            logger.warning(
                "Geocoding failed for %r: status=%s %s",
                address, data.status, data.error_message or "",
            )
            raise ResolutionError(UNRESOLVABLE_MESSAGE, address)

        result = data.results[0]
        return ResolvedLocation(
            location=LatLng(
                latitude=result.geometry.location.lat,
                longitude=result.geometry.location.lng,
            ),
            formatted_address=result.formatted_address,
        )

    async def search_places(
        self, query: str, center: LatLng, radius_miles: float
    ) -> SearchPlacesResult:
        """Location-biased text search. Failures come back as ``error``, not raised."""
        if not self.is_configured:
            return SearchPlacesResult(error=MISSING_KEY_MESSAGE)

        try:
            data = await self._text_search(query, center, radius_miles)
        except GooglePlacesError as exc:
            logger.warning(
                "Google Places search failed for %r (status=%s): %s",
                query, exc.status_code, exc.message,
            )
            return SearchPlacesResult(error=f"API error: {exc.status_code}")
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Google Places search failed for %r: %s", query, exc)
            return SearchPlacesResult(error=str(exc))

        if not data.places:
            logger.info("No results for query: %s", query)
        return SearchPlacesResult(places=data.places)

    async def _text_search(
        self, query: str, center: LatLng, radius_miles: float
    ) -> TextSearchResponse:
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._api_key,
            "X-Goog-FieldMask": FIELD_MASK,
        }
        payload = {
            "textQuery": query,
            "locationBias": {
                "circle": {
                    "center": {
                        "latitude": center.latitude,
                        "longitude": center.longitude,
                    },
                    "radius": miles_to_meters(radius_miles),
                },
            },
            "maxResultCount": MAX_RESULT_COUNT,
            "languageCode": "en",
        }

        resp = await self._client.post(SEARCH_URL, json=payload, headers=headers)

        if resp.status_code >= 400:
            raise GooglePlacesError(resp.text, status_code=resp.status_code)

        return TextSearchResponse.model_validate(resp.json())
