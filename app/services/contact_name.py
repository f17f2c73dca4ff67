"""Lookup of a named contact person for a business website.

No provider is wired in yet; ``NoopContactNameResolver`` is the default and
``WebsiteScraperService`` accepts any object implementing the protocol.
"""

from typing import Protocol

from app.schemas.website import ContactName


class ContactNameResolver(Protocol):
    async def resolve(self, url: str) -> ContactName | None: ...


class NoopContactNameResolver:
    async def resolve(self, url: str) -> ContactName | None:
        return None
