# src/services/geo_distance.py

"""Great-circle distance between catalog coordinates."""

import math

from src.config.settings import Settings
from src.models.listing import Coordinate


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometres on a spherical Earth.

    Inputs are not validated; out-of-range degrees still yield a number.
    """
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dlambda = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Clamp float noise so asin never sees a value above 1
    return 2 * Settings.EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))

