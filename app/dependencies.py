from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.lead_enrichment import LeadEnrichmentService
from app.services.lead_generator import LeadGeneratorService


def get_lead_generator_service(request: Request) -> LeadGeneratorService:
    return request.app.state.lead_generator_service


def get_lead_enrichment_service(request: Request) -> LeadEnrichmentService:
    return request.app.state.lead_enrichment_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


LeadGeneratorDep = Annotated[LeadGeneratorService, Depends(get_lead_generator_service)]
LeadEnrichmentDep = Annotated[LeadEnrichmentService, Depends(get_lead_enrichment_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
