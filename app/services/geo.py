import math
from typing import List, Optional

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_to(business, user_lat: float, user_lng: float) -> Optional[float]:
    if business.latitude is None or business.longitude is None:
        return None
    return haversine_km(user_lat, user_lng, business.latitude, business.longitude)


def annotate_distance(businesses: List, user_lat: float, user_lng: float, sort: bool = False) -> List:
    """
    Return copies of `businesses` with `distance` set.

    Items are pydantic models; businesses without coordinates get
    distance=None and, when sorting, are placed after all located ones.
    """
    annotated = [
        b.model_copy(update={"distance": distance_to(b, user_lat, user_lng)})
        for b in businesses
    ]
    if sort:
        annotated.sort(key=lambda b: (b.distance is None, b.distance or 0.0))
    return annotated
