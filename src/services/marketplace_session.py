# src/services/marketplace_session.py

"""Explicit per-viewer session state wired around the ranking core."""

import itertools
import logging

from src.config.i18n import resolve_locale, text
from src.config.settings import Settings
from src.filters.query_filter import ALL_CATEGORIES
from src.models.listing import Category, Coordinate, Listing, RankedListing, Seller
from src.models.suggestion import ListingDraft
from src.services.catalog_generator import CatalogGenerator
from src.services.location import (
    LocationProvider,
    LocationResult,
    LocationStatus,
    acquire_viewer_location,
)
from src.services.ranking import rank
from src.services.submission import build_user_listing
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("descu.session")

_STATUS_TEXT_KEYS: dict[LocationStatus, str] = {
    LocationStatus.PENDING: "list.loading_loc",
    LocationStatus.ACQUIRED: "list.loc_success",
    LocationStatus.DENIED: "list.loc_denied",
    LocationStatus.UNAVAILABLE: "list.loc_denied",
}


class MarketplaceSession:
    """Holds the inputs of one viewer's catalog view.

    Every input (viewer coordinate, locale, query, category, catalog)
    is an explicit attribute; :meth:`ranked` re-runs the full filter
    and sort from them on each call.  The viewer's cart lives here too.
    """

    def __init__(
        self,
        store: CatalogStore | None = None,
        generator: CatalogGenerator | None = None,
        locale: str | None = None,
        catalog_size: int | None = None,
        proximity_km: float | None = None,
    ) -> None:
        self.store = store or CatalogStore()
        self.generator = generator or CatalogGenerator()
        self.locale = resolve_locale(locale)
        self.catalog_size = catalog_size
        self.proximity_km = proximity_km
        self.query = ""
        self.category: Category | str = ALL_CATEGORIES
        self.viewer: Coordinate | None = None
        self.location_status = LocationStatus.PENDING
        self.cart: list[Listing] = []
        self._request_ids = itertools.count(1)
        self._latest_request = 0

    # ── Location ─────────────────────────────────────────

    def begin_location_request(self) -> int:
        """Register a new location request; older ones become stale."""
        self._latest_request = next(self._request_ids)
        self.location_status = LocationStatus.PENDING
        return self._latest_request

    def apply_location(
        self, request_id: int, result: LocationResult
    ) -> bool:
        """Adopt *result* unless a newer request has been issued since.

        Adopting a location reseeds the synthetic catalog around it.
        Returns whether the result was applied.
        """
        if request_id != self._latest_request:
            logger.info(
                "Discarding stale location result (request %d, latest %d)",
                request_id,
                self._latest_request,
            )
            return False
        self.viewer = result.coordinate
        self.location_status = result.status
        self.reseed()
        return True

    async def refresh_location(
        self,
        provider: LocationProvider | None,
        timeout: float | None = None,
    ) -> bool:
        """Fetch the viewer coordinate once and reseed the catalog."""
        request_id = self.begin_location_request()
        result = await acquire_viewer_location(provider, timeout)
        return self.apply_location(request_id, result)

    async def change_locale(
        self,
        locale: str,
        provider: LocationProvider | None = None,
        timeout: float | None = None,
    ) -> bool:
        """Switch locale, then re-fetch location and regenerate listings."""
        self.locale = resolve_locale(locale)
        logger.info("Locale changed to '%s'", self.locale)
        return await self.refresh_location(provider, timeout)

    def status_text(self) -> str:
        """Localised label for the location status indicator."""
        return text(_STATUS_TEXT_KEYS[self.location_status], self.locale)

    # ── Catalog ──────────────────────────────────────────

    def reseed(self) -> int:
        """Replace all synthetic listings with a fresh batch.

        Generates around the viewer, or the fallback coordinate if the
        viewer is not known yet.  User listings are untouched.
        """
        center = self.viewer or Settings.FALLBACK_COORDINATE
        listings = self.generator.generate(
            center, self.locale, self.catalog_size
        )
        return self.store.replace_synthetic(listings)

    def submit_listing(
        self, draft: ListingDraft, seller: Seller
    ) -> Listing:
        """Publish a draft as a new user listing at the viewer's position."""
        location = self.viewer or Settings.FALLBACK_COORDINATE
        listing = build_user_listing(
            draft,
            seller,
            location,
            currency="CNY" if self.locale == "zh" else "MXN",
            location_name="CDMX" if self.locale == "es" else "Nearby",
        )
        self.store.add_user_listing(listing)
        return listing

    def boost(self, listing_id: str) -> bool:
        return self.store.boost(listing_id)

    def my_listings(self, seller_id: str) -> list[Listing]:
        return self.store.by_seller(seller_id)

    # ── Cart ─────────────────────────────────────────────

    def add_to_cart(self, listing: Listing) -> bool:
        """Append *listing* unless one with the same id is already there."""
        if self.in_cart(listing.id):
            return False
        self.cart.append(listing)
        logger.debug("Added %s to cart (%d items)", listing.id, len(self.cart))
        return True

    def remove_from_cart(self, listing_id: str) -> bool:
        before = len(self.cart)
        self.cart = [item for item in self.cart if item.id != listing_id]
        return len(self.cart) != before

    def clear_cart(self) -> None:
        self.cart = []

    def in_cart(self, listing_id: str) -> bool:
        return any(item.id == listing_id for item in self.cart)

    # ── View ─────────────────────────────────────────────

    def set_query(self, query: str) -> None:
        self.query = query

    def set_category(self, category: Category | str) -> None:
        self.category = category

    def ranked(self) -> list[RankedListing]:
        """Filter and rank the current catalog for this viewer."""
        return rank(
            self.store.all(),
            self.query,
            self.category,
            self.viewer,
            self.locale,
            self.proximity_km,
        )
