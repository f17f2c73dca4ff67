import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from app.mappers.lead_merger import merge_website_data
from app.schemas.leads import Lead
from app.services.website_scraper import WebsiteScraperService

logger = logging.getLogger(__name__)

ENRICHMENT_DELAY = 0.5  # seconds between leads

T = TypeVar("T")
ProgressCallback = Callable[[int, int], None]


class SequentialSchedule:
    """Single worker: run tasks one at a time with a fixed pause between them."""

    def __init__(
        self,
        delay: float = ENRICHMENT_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._delay = delay
        self._sleep = sleep

    async def run(
        self,
        items: Sequence[T],
        task: Callable[[T], Awaitable[object]],
        on_progress: ProgressCallback | None = None,
    ) -> None:
        total = len(items)
        for i, item in enumerate(items):
            if on_progress:
                on_progress(i + 1, total)
            await task(item)
            if i < total - 1:
                await self._sleep(self._delay)


class LeadEnrichmentService:
    def __init__(
        self,
        website_scraper: WebsiteScraperService,
        schedule: SequentialSchedule | None = None,
    ):
        self._scraper = website_scraper
        self._schedule = schedule or SequentialSchedule()

    async def enrich_lead(self, lead: Lead) -> Lead:
        """Validate the lead's website and fill contact gaps from it."""
        if not lead.url:
            return lead

        lead.url_valid = await self._scraper.validate_url(lead.url)
        if not lead.url_valid:
            logger.info("Website unreachable for %s: %s", lead.company, lead.url)
            return lead

        data = await self._scraper.scrape(lead.url)
        if not data.is_valid:
            logger.info("Could not extract contacts for %s from %s", lead.company, lead.url)
            return lead

        changed = merge_website_data(lead, data)
        if changed:
            logger.info("Enriched %s: %s", lead.company, ", ".join(changed))
        return lead

    async def enrich_batch(
        self,
        leads: list[Lead],
        on_progress: ProgressCallback | None = None,
    ) -> list[Lead]:
        """Enrich leads in place, in order.

        Cancelling the caller (e.g. with ``asyncio.timeout``) stops the batch
        between network calls; leads handled so far keep their merged data.
        """
        await self._schedule.run(leads, self.enrich_lead, on_progress)
        return leads
