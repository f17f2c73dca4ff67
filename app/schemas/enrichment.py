from pydantic import BaseModel


class ParsedAddress(BaseModel):
    address: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""
    country: str = "USA"
