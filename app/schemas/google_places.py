from pydantic import BaseModel


class AddressComponent(BaseModel):
    longText: str | None = None
    shortText: str | None = None
    types: list[str] = []


class LatLng(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0


class DisplayName(BaseModel):
    text: str | None = None


class GooglePlace(BaseModel):
    id: str | None = None
    displayName: DisplayName | None = None
    formattedAddress: str | None = None
    nationalPhoneNumber: str | None = None
    internationalPhoneNumber: str | None = None
    websiteUri: str | None = None
    addressComponents: list[AddressComponent] | None = None
    location: LatLng | None = None
    rating: float | None = None
    userRatingCount: int | None = None
    googleMapsUri: str | None = None
    businessStatus: str | None = None
    types: list[str] = []

    @property
    def name(self) -> str:
        return (self.displayName.text if self.displayName else None) or ""


class TextSearchResponse(BaseModel):
    places: list[GooglePlace] = []


class SearchPlacesResult(BaseModel):
    places: list[GooglePlace] = []
    error: str | None = None


# --- Geocoding API (legacy JSON shape) ---


class GeocodeLatLng(BaseModel):
    lat: float
    lng: float


class GeocodeGeometry(BaseModel):
    location: GeocodeLatLng


class GeocodeResult(BaseModel):
    formatted_address: str = ""
    geometry: GeocodeGeometry


class GeocodeResponse(BaseModel):
    status: str = ""
    results: list[GeocodeResult] = []
    error_message: str | None = None


class ResolvedLocation(BaseModel):
    location: LatLng
    formatted_address: str
