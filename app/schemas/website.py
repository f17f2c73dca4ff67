from pydantic import BaseModel


class ContactName(BaseModel):
    name: str
    title: str | None = None


class WebsiteData(BaseModel):
    is_valid: bool = False  # page fetched with a 2xx status
    emails: list[str] = []  # first-seen order, at most 5
    phones: list[str] = []  # "(XXX) XXX-XXXX", at most 3
    contact_name: str | None = None
    contact_title: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None
    description: str | None = None  # meta description, at most 500 chars
    source_url: str | None = None
