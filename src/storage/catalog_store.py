# src/storage/catalog_store.py

"""In-memory catalog partitioned by listing provenance."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from src.models.listing import Listing, Provenance

logger = logging.getLogger("descu.store")


class ListingIdCollisionError(ValueError):
    """Raised when a user listing reuses an identity already in the store."""


class CatalogStore:
    """Holds the current catalog: user listings plus a synthetic batch.

    User listings are kept newest first and survive every
    :meth:`replace_synthetic` call.  Synthetic listings keep the order
    they were generated in.  All mutations run under one lock, so a
    reader never sees a half-replaced synthetic set.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._user: dict[str, Listing] = {}
        self._user_order: list[str] = []
        self._synthetic: dict[str, Listing] = {}
        self._snapshot: tuple[Listing, ...] | None = None

    # ── Mutations ────────────────────────────────────────

    def replace_synthetic(self, listings: Iterable[Listing]) -> int:
        """Swap the whole synthetic batch for *listings*.

        Returns the number of synthetic listings now in the store.
        Raises ``ValueError`` if a listing is not synthetic or its id
        is taken by a user listing.
        """
        incoming: dict[str, Listing] = {}
        for listing in listings:
            if listing.provenance is not Provenance.SYNTHETIC:
                msg = (
                    f"replace_synthetic got {listing.provenance.value} "
                    f"listing '{listing.id}'"
                )
                raise ValueError(msg)
            incoming[listing.id] = listing

        with self._lock:
            clashes = incoming.keys() & self._user.keys()
            if clashes:
                msg = (
                    "Synthetic ids collide with user listings: "
                    f"{', '.join(sorted(clashes))}"
                )
                raise ValueError(msg)
            previous = len(self._synthetic)
            self._synthetic = incoming
            self._snapshot = None

        logger.info(
            "Replaced %d synthetic listings with %d",
            previous,
            len(incoming),
        )
        return len(incoming)

    def add_user_listing(self, listing: Listing) -> None:
        """Prepend a user-submitted listing.

        Raises :class:`ListingIdCollisionError` if the id is already
        present, ``ValueError`` if the listing is not user-provenance.
        """
        if listing.provenance is not Provenance.USER:
            msg = f"Listing '{listing.id}' is not a user listing"
            raise ValueError(msg)

        with self._lock:
            if listing.id in self._user or listing.id in self._synthetic:
                msg = f"Listing id '{listing.id}' already exists"
                raise ListingIdCollisionError(msg)
            self._user[listing.id] = listing
            self._user_order.insert(0, listing.id)
            self._snapshot = None

        logger.info(
            "Added user listing '%s' (seller=%s)",
            listing.id,
            listing.seller.id,
        )

    def boost(self, listing_id: str) -> bool:
        """Mark a listing as promoted.

        Returns ``True`` only when the flag actually changed; unknown
        ids and already-promoted listings are a no-op.
        """
        with self._lock:
            for partition in (self._user, self._synthetic):
                current = partition.get(listing_id)
                if current is None:
                    continue
                if current.is_promoted:
                    return False
                partition[listing_id] = replace(
                    current, is_promoted=True
                )
                self._snapshot = None
                logger.info("Boosted listing '%s'", listing_id)
                return True

        logger.debug("Boost ignored, unknown listing '%s'", listing_id)
        return False

    # ── Reads ────────────────────────────────────────────

    def all(self) -> tuple[Listing, ...]:
        """Return every listing: user listings first, then synthetic.

        The tuple is cached and only rebuilt after a mutation.
        """
        with self._lock:
            if self._snapshot is None:
                user = [self._user[i] for i in self._user_order]
                self._snapshot = tuple(user) + tuple(
                    self._synthetic.values()
                )
                logger.debug(
                    "Rebuilt catalog snapshot (%d listings)",
                    len(self._snapshot),
                )
            return self._snapshot

    def get(self, listing_id: str) -> Listing | None:
        """Look up one listing by id."""
        with self._lock:
            return self._user.get(listing_id) or self._synthetic.get(
                listing_id
            )

    def by_seller(self, seller_id: str) -> list[Listing]:
        """Return the listings offered by one seller, in catalog order."""
        return [
            listing
            for listing in self.all()
            if listing.seller.id == seller_id
        ]

    def user_listings(self) -> list[Listing]:
        """Return user-submitted listings, newest first."""
        return [
            listing
            for listing in self.all()
            if listing.provenance is Provenance.USER
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._user) + len(self._synthetic)

    def __contains__(self, listing_id: object) -> bool:
        with self._lock:
            return listing_id in self._user or listing_id in self._synthetic
