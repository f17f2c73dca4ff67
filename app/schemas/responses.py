from pydantic import BaseModel, Field

from app.schemas.google_places import ResolvedLocation
from app.schemas.leads import Lead, SearchType


class GenerateLeadsRequest(BaseModel):
    school_address: str = Field(min_length=1)
    school_name: str | None = None
    radius_miles: float = Field(default=15, ge=1, le=50)
    search_type: SearchType = SearchType.catering
    custom_search_terms: list[str] | None = None
    enrich_leads: bool = False


class GenerateLeadsResponse(BaseModel):
    success: bool
    leads: list[Lead]
    total_count: int
    school_location: ResolvedLocation
    search_terms_used: list[str]
    enriched: bool
