import asyncio
import logging

from fastapi import APIRouter

from app.dependencies import LeadEnrichmentDep, LeadGeneratorDep, SettingsDep
from app.schemas.responses import GenerateLeadsRequest, GenerateLeadsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/leads/generate", response_model=GenerateLeadsResponse)
async def generate_leads(
    request: GenerateLeadsRequest,
    generator: LeadGeneratorDep,
    enrichment: LeadEnrichmentDep,
    settings: SettingsDep,
) -> GenerateLeadsResponse:
    result = await generator.generate(
        request.school_address,
        request.radius_miles,
        request.search_type,
        custom_terms=request.custom_search_terms,
    )

    leads = result.leads
    if request.enrich_leads and leads:
        # Only the closest leads are enriched; the sequencer itself is uncapped
        to_enrich = leads[: settings.max_enrich_leads]
        try:
            async with asyncio.timeout(settings.enrichment_timeout):
                await enrichment.enrich_batch(to_enrich)
        except TimeoutError:
            logger.warning(
                "Enrichment stopped after %.0fs; returning partially enriched leads",
                settings.enrichment_timeout,
            )

    return GenerateLeadsResponse(
        success=True,
        leads=leads,
        total_count=len(leads),
        school_location=result.school_location,
        search_terms_used=result.search_terms_used,
        enriched=request.enrich_leads,
    )
