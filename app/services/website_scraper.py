import logging
import re

import httpx
from bs4 import BeautifulSoup

from app.schemas.website import WebsiteData
from app.services.contact_name import ContactNameResolver, NoopContactNameResolver

logger = logging.getLogger(__name__)

_VALIDATE_TIMEOUT = 5.0
_FETCH_TIMEOUT = 10.0
_CONTACT_PAGE_TIMEOUT = 3.0
_USER_AGENT = "Mozilla/5.0 (compatible; CateringLeadFinder/1.0; +https://github.com/catering-lead-finder)"

_MAX_EMAILS = 5
_MAX_PHONES = 3
_MAX_DESCRIPTION = 500

# Substrings that mark placeholder or asset-name "emails"
_BLOCKED_EMAIL_SUBSTRINGS = ("example", "domain", "email@", "@sentry", ".png", ".jpg")

# Optional pages probed by find_contact_page, in order
_CONTACT_PATHS = ("/contact", "/contact-us", "/about", "/about-us", "/team")

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

# US numbers: optional +1, optional parentheses around the area code
_PHONE_RE = re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")

_FACEBOOK_RE = re.compile(
    r"(?:https?://)?(?:www\.)?facebook\.com/[a-zA-Z0-9._\-]+/?", re.IGNORECASE
)
_INSTAGRAM_RE = re.compile(
    r"(?:https?://)?(?:www\.)?instagram\.com/[a-zA-Z0-9._\-]+/?", re.IGNORECASE
)
_LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/(?:company|in)/[a-zA-Z0-9._\-]+/?",
    re.IGNORECASE,
)

# InvalidURL is raised for malformed URLs and is not an HTTPError
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def ensure_scheme(url: str) -> str:
    return url if url.startswith(("http://", "https://")) else f"https://{url}"


def _http_fallback(url: str) -> str:
    if url.startswith("https://"):
        return "http://" + url[len("https://"):]
    return f"http://{url}"


def _is_blocked_email(email: str) -> bool:
    return any(s in email for s in _BLOCKED_EMAIL_SUBSTRINGS)


def _format_phone(digits: str) -> str:
    if len(digits) == 11:
        digits = digits[1:]
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def extract_emails(html: str) -> list[str]:
    unique = dict.fromkeys(_EMAIL_RE.findall(html))
    return [e for e in unique if not _is_blocked_email(e)][:_MAX_EMAILS]


def extract_phones(html: str) -> list[str]:
    formatted: list[str] = []
    for match in dict.fromkeys(_PHONE_RE.findall(html)):
        digits = "".join(c for c in match if c.isdigit())
        if 10 <= len(digits) <= 11:
            formatted.append(_format_phone(digits))
    return list(dict.fromkeys(formatted))[:_MAX_PHONES]


def extract_social_link(html: str, pattern: re.Pattern) -> str | None:
    m = pattern.search(html)
    if not m:
        return None
    return ensure_scheme(m.group(0))


def extract_description(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    meta = soup.find("meta", attrs={"name": re.compile(r"^description$", re.IGNORECASE)})
    if meta is None:
        return None
    content = (meta.get("content") or "").strip()
    return content[:_MAX_DESCRIPTION] or None


class WebsiteScraperService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        contact_resolver: ContactNameResolver | None = None,
    ):
        self._client = client
        self._contact_resolver = contact_resolver or NoopContactNameResolver()

    async def validate_url(self, url: str) -> bool:
        """HEAD the site over https, then once over http. Never raises."""
        try:
            return await self._head_ok(ensure_scheme(url), _VALIDATE_TIMEOUT)
        except _REQUEST_ERRORS as exc:
            logger.debug("HEAD %s failed: %s", url, exc)

        if url.startswith("http://"):
            return False

        try:
            return await self._head_ok(_http_fallback(url), _VALIDATE_TIMEOUT)
        except _REQUEST_ERRORS as exc:
            logger.debug("HEAD %s over http failed: %s", url, exc)
            return False

    async def scrape(self, url: str) -> WebsiteData:
        """Fetch a business website and pull contact signals. Best-effort, never raises."""
        try:
            return await self._do_scrape(url)
        except Exception:
            logger.exception("Website scrape failed for %s", url)
            return WebsiteData(source_url=url)

    async def find_contact_page(self, base_url: str) -> str | None:
        base = ensure_scheme(base_url).rstrip("/")
        for path in _CONTACT_PATHS:
            candidate = f"{base}{path}"
            try:
                if await self._head_ok(candidate, _CONTACT_PAGE_TIMEOUT):
                    return candidate
            except _REQUEST_ERRORS:
                continue
        return None

    async def _head_ok(self, url: str, timeout: float) -> bool:
        resp = await self._client.head(url, follow_redirects=True, timeout=timeout)
        return resp.is_success

    async def _do_scrape(self, url: str) -> WebsiteData:
        resp = await self._client.get(
            ensure_scheme(url),
            follow_redirects=True,
            timeout=_FETCH_TIMEOUT,
            headers={"User-Agent": _USER_AGENT},
        )
        if not resp.is_success:
            logger.debug("Fetch %s returned %d", url, resp.status_code)
            return WebsiteData(source_url=url)

        html = resp.text
        data = WebsiteData(
            is_valid=True,
            emails=extract_emails(html),
            phones=extract_phones(html),
            facebook_url=extract_social_link(html, _FACEBOOK_RE),
            instagram_url=extract_social_link(html, _INSTAGRAM_RE),
            linkedin_url=extract_social_link(html, _LINKEDIN_RE),
            description=extract_description(html),
            source_url=url,
        )

        try:
            contact = await self._contact_resolver.resolve(url)
        except Exception:
            logger.warning("Contact name lookup failed for %s", url, exc_info=True)
            contact = None
        if contact:
            data.contact_name = contact.name
            data.contact_title = contact.title

        return data
