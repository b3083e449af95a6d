# src/models/listing.py

"""Listing data model for the catalog and ranking pipeline."""

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Fixed set of catalog categories, stored as invariant keys."""

    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    CLOTHING = "clothing"
    BOOKS = "books"
    SPORTS = "sports"
    VEHICLES = "vehicles"
    REAL_ESTATE = "real_estate"
    SERVICES = "services"
    OTHER = "other"


class DeliveryMode(str, Enum):
    """How a buyer receives a listing."""

    MEETUP = "meetup"
    SHIPPING = "shipping"
    BOTH = "both"


class Provenance(str, Enum):
    """Where a listing came from."""

    SYNTHETIC = "synthetic"
    USER = "user"


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees (WGS-84)."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Seller:
    """Seller details, denormalised into every listing."""

    id: str
    name: str
    email: str = ""
    avatar: str = ""
    is_verified: bool = False


@dataclass(frozen=True)
class Listing:
    """A single catalog entry offered by a seller.

    Listings are immutable; the store flips ``is_promoted`` by
    replacing the instance.
    """

    id: str
    seller: Seller
    title: str
    description: str
    price: int
    category: Category
    delivery_mode: DeliveryMode
    location: Coordinate
    created_at: int
    currency: str = "MXN"
    images: tuple[str, ...] = field(default_factory=tuple)
    location_name: str = ""
    is_promoted: bool = False
    provenance: Provenance = Provenance.SYNTHETIC


@dataclass(frozen=True)
class RankedListing:
    """A listing paired with its distance from one specific viewer.

    ``distance_km`` is ``None`` when no viewer coordinate was known.
    """

    listing: Listing
    distance_km: float | None = None

    @property
    def display_distance(self) -> float | None:
        """Distance rounded to one decimal for presentation."""
        if self.distance_km is None:
            return None
        return round(self.distance_km, 1)
