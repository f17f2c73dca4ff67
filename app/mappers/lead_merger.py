from app.schemas.leads import Lead
from app.schemas.website import WebsiteData


def _is_empty(value: str | None) -> bool:
    return value is None or value.strip() == ""


def _split_name(full_name: str) -> tuple[str | None, str | None]:
    parts = full_name.split()
    if not parts:
        return None, None
    return parts[0], " ".join(parts[1:]) or None


def merge_website_data(lead: Lead, data: WebsiteData) -> list[str]:
    """Fill the lead's empty contact fields from scraped website data.

    Only gaps are filled; a value already on the lead is never replaced.
    Returns the names of the fields that were set.
    """
    first_name, last_name = _split_name(data.contact_name or "")

    candidates: dict[str, str | None] = {
        "contact_email": data.emails[0] if data.emails else None,
        "contact_phone": data.phones[0] if data.phones else None,
        "contact_first_name": first_name,
        "contact_last_name": last_name if first_name else None,
        "contact_title": data.contact_title if first_name else None,
        "facebook_link": data.facebook_url,
        "instagram_link": data.instagram_url,
        "company_description": data.description,
    }

    changed: list[str] = []
    for field, new in candidates.items():
        if new is None or _is_empty(new):
            continue
        if not _is_empty(getattr(lead, field)):
            continue
        setattr(lead, field, new)
        changed.append(field)

    return changed
