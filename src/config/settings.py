# src/config/settings.py

"""Central configuration for the DESCU catalog core."""

import os
from pathlib import Path

from dotenv import load_dotenv

from src.models.listing import Coordinate

load_dotenv()

_SUPPORTED_LOCALES = ["es", "en", "zh"]


def _env_locale(name: str, default: str = "es") -> str:
    """Read a locale from the environment, ignoring unsupported values."""
    value = os.getenv(name, default).strip().lower()
    return value if value in _SUPPORTED_LOCALES else default


class Settings:
    """Central configuration for the DESCU catalog core."""

    # --- Ranking ---
    PROXIMITY_THRESHOLD_KM: float = float(
        os.getenv("DESCU_PROXIMITY_KM", "5.0")
    )
    EARTH_RADIUS_KM: float = 6371.0

    # --- Location ---
    # Mexico City centre, used when the viewer location is unavailable
    FALLBACK_COORDINATE: Coordinate = Coordinate(
        latitude=19.4326, longitude=-99.1332
    )
    LOCATION_TIMEOUT: float = float(
        os.getenv("DESCU_LOCATION_TIMEOUT", "10.0")
    )

    # --- Localisation ---
    SUPPORTED_LOCALES: list[str] = list(_SUPPORTED_LOCALES)
    DEFAULT_LOCALE: str = _env_locale("DESCU_DEFAULT_LOCALE")

    # --- Synthetic catalog ---
    SYNTHETIC_CATALOG_SIZE: int = int(
        os.getenv("DESCU_CATALOG_SIZE", "400")
    )
    SELLER_POOL_SIZE: int = 50
    PROMOTED_PROBABILITY: float = 0.08
    VERIFIED_PROBABILITY: float = 0.20
    PRICE_JITTER_MIN: float = 0.8
    PRICE_JITTER_MAX: float = 1.2
    MAX_LISTING_AGE_DAYS: int = 30

    # (name, cumulative draw upper bound, window width in degrees)
    DISTANCE_BANDS: list[tuple[str, float, float]] = [
        ("near", 0.4, 0.036),
        ("mid", 0.8, 0.14),
        ("far", 1.0, 0.4),
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    RESULTS_DIR: Path = BASE_DIR / "results"
    LOGS_DIR: Path = BASE_DIR / "logs"
