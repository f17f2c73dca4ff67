from enum import StrEnum

from pydantic import BaseModel

from app.schemas.google_places import ResolvedLocation

LEAD_SOURCE = "google_places"


class SearchType(StrEnum):
    catering = "catering"
    pizza_diner = "pizza_diner"
    meal_prep = "meal_prep"
    custom = "custom"


class ClassificationResult(BaseModel):
    is_chain: bool = False
    is_cuisine_limited: bool = False
    matched_chain: str | None = None
    matched_cuisine: str | None = None


class Lead(BaseModel):
    # Company
    company: str
    url: str | None = None
    url_valid: bool | None = None  # None until enrichment checks the site
    company_description: str | None = None

    # Contact
    contact_first_name: str | None = None
    contact_last_name: str | None = None
    contact_title: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None

    # Address
    address: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    zipcode: str | None = None
    country: str = "USA"

    # Distance from the school
    distance_miles: float | None = None
    distance_display: str | None = None

    # Social
    facebook_link: str | None = None
    instagram_link: str | None = None

    # Provenance / classification
    source: str = LEAD_SOURCE
    source_place_id: str | None = None
    rating: float | None = None
    review_count: int | None = None
    is_chain: bool = False
    chain_flagged: bool = False
    cuisine_flagged: bool = False
    flag_reason: str | None = None


class DiscoveryResult(BaseModel):
    leads: list[Lead]
    school_location: ResolvedLocation
    search_terms_used: list[str]
