# src/services/submission.py

"""Turning user drafts into catalog listings."""

import itertools
import logging
import time
from typing import Protocol

from src.models.listing import Coordinate, Listing, Provenance, Seller
from src.models.suggestion import ListingDraft, ListingSuggestion

logger = logging.getLogger("descu.submission")

_sequence = itertools.count(1)


class SuggestionProvider(Protocol):
    """External image-analysis service that proposes listing metadata."""

    async def suggest(
        self, image: bytes, locale: str
    ) -> ListingSuggestion: ...


async def request_suggestion(
    provider: SuggestionProvider | None,
    image: bytes,
    locale: str,
) -> ListingSuggestion | None:
    """Ask *provider* for pre-fill metadata.

    Returns ``None`` when no provider is configured or the call fails;
    the seller then fills the form by hand.
    """
    if provider is None:
        return None
    try:
        suggestion = await provider.suggest(image, locale)
    except Exception as exc:
        logger.warning(
            "Listing suggestion unavailable: %s", exc, exc_info=True
        )
        return None
    logger.info(
        "Suggestion received (category=%s)", suggestion.category.value
    )
    return suggestion


def new_listing_id(now_ms: int) -> str:
    """Generate a listing id unique within this process."""
    return f"new-{now_ms}-{next(_sequence)}"


def build_user_listing(
    draft: ListingDraft,
    seller: Seller,
    location: Coordinate,
    *,
    currency: str = "MXN",
    location_name: str = "",
    now_ms: int | None = None,
) -> Listing:
    """Create a user-provenance listing from a submitted draft.

    New listings always start unpromoted; the price is clamped to be
    non-negative.
    """
    created_at = int(time.time() * 1000) if now_ms is None else now_ms
    listing = Listing(
        id=new_listing_id(created_at),
        seller=seller,
        title=draft.title.strip(),
        description=draft.description.strip(),
        price=max(0, int(draft.price)),
        currency=currency,
        images=draft.images,
        category=draft.category,
        delivery_mode=draft.delivery_mode,
        location=location,
        location_name=location_name,
        created_at=created_at,
        is_promoted=False,
        provenance=Provenance.USER,
    )
    logger.debug("Built user listing '%s'", listing.id)
    return listing
