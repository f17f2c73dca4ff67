import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import ConfigurationError, ResolutionError
from app.exceptions.handlers import configuration_error_handler, resolution_error_handler
from app.routers.leads import router as leads_router
from app.services.google_places import GooglePlacesService
from app.services.lead_enrichment import LeadEnrichmentService, SequentialSchedule
from app.services.lead_generator import LeadGeneratorService
from app.services.website_scraper import WebsiteScraperService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not settings.google_maps_api_key:
        logging.getLogger(__name__).warning(
            "GOOGLE_MAPS_API_KEY is not set; lead generation will fail"
        )

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        google_places = GooglePlacesService(client, settings.google_maps_api_key)
        website_scraper = WebsiteScraperService(client)

        app.state.settings = settings
        app.state.lead_generator_service = LeadGeneratorService(google_places)
        app.state.lead_enrichment_service = LeadEnrichmentService(
            website_scraper,
            schedule=SequentialSchedule(delay=settings.enrichment_delay),
        )

        yield


app = FastAPI(title="Catering Lead Finder", lifespan=lifespan)

app.add_exception_handler(ConfigurationError, configuration_error_handler)
app.add_exception_handler(ResolutionError, resolution_error_handler)

app.include_router(leads_router)
