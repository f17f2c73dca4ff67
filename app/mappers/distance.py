import math

from app.schemas.google_places import LatLng

EARTH_RADIUS_MILES = 3959.0
METERS_PER_MILE = 1609.34


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE


def calculate_distance_miles(origin: LatLng, destination: LatLng) -> float:
    """Great-circle (haversine) distance in miles."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    d_lat = math.radians(destination.latitude - origin.latitude)
    d_lng = math.radians(destination.longitude - origin.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def round_miles(miles: float) -> float:
    """Round to one decimal, halves rounded up."""
    return math.floor(miles * 10 + 0.5) / 10


def format_distance(miles: float) -> str:
    return f"{miles:g} miles"


def round_miles_within(miles: float, limit: float) -> float:
    """Like round_miles, but rounds down instead of past ``limit``."""
    rounded = round_miles(miles)
    if rounded > limit >= miles:
        return math.floor(miles * 10) / 10
    return rounded
