# src/services/ranking.py

"""Distance annotation and ordering of filtered listings."""

import logging
from collections.abc import Iterable

from src.config.i18n import label_function
from src.config.settings import Settings
from src.filters.query_filter import QueryFilter
from src.models.listing import Category, Coordinate, Listing, RankedListing
from src.services.geo_distance import haversine_km

logger = logging.getLogger("descu.ranking")


def ranking_key(
    ranked: RankedListing, proximity_km: float
) -> tuple[bool, bool, float]:
    """Sort key: promoted first, then inside the proximity radius, then nearest.

    Uses the unrounded distance so display rounding never changes order.
    """
    distance = ranked.distance_km or 0.0
    return (
        not ranked.listing.is_promoted,
        distance > proximity_km,
        distance,
    )


def rank_listings(
    listings: Iterable[Listing],
    viewer: Coordinate | None,
    proximity_km: float | None = None,
) -> list[RankedListing]:
    """Annotate listings with their distance to *viewer* and order them.

    Without a viewer coordinate the input order is returned untouched
    and every ``distance_km`` is ``None``.  ``sorted`` is stable, so
    listings tied on every tier keep their input order.
    """
    if viewer is None:
        logger.debug("No viewer coordinate, ranking skipped")
        return [RankedListing(listing=item) for item in listings]

    threshold = (
        Settings.PROXIMITY_THRESHOLD_KM
        if proximity_km is None
        else proximity_km
    )
    annotated = [
        RankedListing(
            listing=item,
            distance_km=haversine_km(viewer, item.location),
        )
        for item in listings
    ]
    return sorted(
        annotated, key=lambda ranked: ranking_key(ranked, threshold)
    )


def rank(
    catalog: Iterable[Listing],
    query: str | None,
    category: Category | str | None,
    viewer: Coordinate | None,
    locale: str | None,
    proximity_km: float | None = None,
) -> list[RankedListing]:
    """Filter *catalog* by query and category, then rank for *viewer*.

    Pure function of its inputs; callers re-run it whenever any of
    them changes.
    """
    filtered = QueryFilter.apply(
        catalog, query, category, label_function(locale)
    )
    ranked = rank_listings(filtered, viewer, proximity_km)
    logger.debug(
        "Ranked %d listings (locale=%s, viewer=%s)",
        len(ranked),
        locale,
        viewer,
    )
    return ranked
