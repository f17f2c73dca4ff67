from app.mappers.lead_merger import merge_website_data
from app.schemas.leads import Lead
from app.schemas.website import WebsiteData


def _data(**kwargs) -> WebsiteData:
    return WebsiteData(is_valid=True, **kwargs)


def test_fills_empty_fields():
    lead = Lead(company="Heartland Catering")
    data = _data(
        emails=["sales@heartland.com", "info@heartland.com"],
        phones=["(217) 555-0100"],
        facebook_url="https://facebook.com/heartland",
        instagram_url="https://instagram.com/heartland",
        description="Family catering since 1990",
    )

    changed = merge_website_data(lead, data)

    assert lead.contact_email == "sales@heartland.com"
    assert lead.contact_phone == "(217) 555-0100"
    assert lead.facebook_link == "https://facebook.com/heartland"
    assert lead.instagram_link == "https://instagram.com/heartland"
    assert lead.company_description == "Family catering since 1990"
    assert len(changed) == 5


def test_keeps_existing_phone():
    lead = Lead(company="Heartland Catering", contact_phone="(555) 111-2222")

    changed = merge_website_data(lead, _data(phones=["(555) 111-9999"]))

    assert lead.contact_phone == "(555) 111-2222"
    assert "contact_phone" not in changed


def test_contact_name_split():
    lead = Lead(company="Heartland Catering")

    merge_website_data(
        lead, _data(contact_name="Mary Ann Smith", contact_title="Owner")
    )

    assert lead.contact_first_name == "Mary"
    assert lead.contact_last_name == "Ann Smith"
    assert lead.contact_title == "Owner"


def test_single_word_contact_name():
    lead = Lead(company="Heartland Catering")

    merge_website_data(lead, _data(contact_name="Mary"))

    assert lead.contact_first_name == "Mary"
    assert lead.contact_last_name is None


def test_nothing_to_merge():
    lead = Lead(company="Heartland Catering")

    assert merge_website_data(lead, _data()) == []
    assert lead.contact_email is None
