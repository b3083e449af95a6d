# src/services/location.py

"""One-shot viewer location acquisition with a fixed fallback."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from src.config.settings import Settings
from src.models.listing import Coordinate

logger = logging.getLogger("descu.location")


class LocationUnavailableError(Exception):
    """The location provider denied or could not serve the request."""


class LocationStatus(str, Enum):
    """Outcome of a location request, shown as a passive indicator."""

    PENDING = "pending"
    ACQUIRED = "acquired"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"


class LocationProvider(Protocol):
    """Anything that can report the viewer's current coordinate."""

    async def get_viewer_coordinate(self) -> Coordinate: ...


@dataclass(frozen=True)
class LocationResult:
    """Coordinate to rank against, plus how it was obtained."""

    coordinate: Coordinate
    status: LocationStatus

    @property
    def is_fallback(self) -> bool:
        return self.status is not LocationStatus.ACQUIRED


def fallback_result(status: LocationStatus) -> LocationResult:
    """Build a result pointing at the configured fallback coordinate."""
    return LocationResult(
        coordinate=Settings.FALLBACK_COORDINATE, status=status
    )


async def acquire_viewer_location(
    provider: LocationProvider | None,
    timeout: float | None = None,
) -> LocationResult:
    """Ask *provider* once for the viewer coordinate.

    Never raises and never retries: a missing provider, a denial, a
    timeout or any provider error all resolve to the fallback
    coordinate so ranking can proceed.
    """
    if provider is None:
        logger.warning("No location provider, using fallback coordinate")
        return fallback_result(LocationStatus.UNAVAILABLE)

    limit = Settings.LOCATION_TIMEOUT if timeout is None else timeout
    try:
        coordinate = await asyncio.wait_for(
            provider.get_viewer_coordinate(), timeout=limit
        )
    except LocationUnavailableError as exc:
        logger.warning("Location denied: %s", exc)
        return fallback_result(LocationStatus.DENIED)
    except asyncio.TimeoutError:
        logger.warning("Location request timed out after %.1fs", limit)
        return fallback_result(LocationStatus.UNAVAILABLE)
    except Exception:
        logger.error("Location provider failed", exc_info=True)
        return fallback_result(LocationStatus.UNAVAILABLE)

    logger.info(
        "Viewer located at (%.4f, %.4f)",
        coordinate.latitude,
        coordinate.longitude,
    )
    return LocationResult(
        coordinate=coordinate, status=LocationStatus.ACQUIRED
    )
