# tests/test_listing_model.py

"""Tests for the listing dataclasses and enums."""

import dataclasses
import unittest

from src.models.listing import (
    Category,
    Coordinate,
    DeliveryMode,
    Listing,
    Provenance,
    RankedListing,
    Seller,
)


def _listing(**overrides: object) -> Listing:
    """Create a Listing with sensible defaults."""
    fields: dict[str, object] = {
        "id": "mock-0-1",
        "seller": Seller(id="user-1", name="Usuario 2"),
        "title": "Yoga Mat",
        "description": "Like new",
        "price": 400,
        "category": Category.SPORTS,
        "delivery_mode": DeliveryMode.BOTH,
        "location": Coordinate(19.4, -99.1),
        "created_at": 1_700_000_000_000,
    }
    fields.update(overrides)
    return Listing(**fields)  # type: ignore[arg-type]


class TestListingModel(unittest.TestCase):
    """Listing dataclass unit tests."""

    def test_defaults(self) -> None:
        """Optional fields default to an unpromoted synthetic listing."""
        listing = _listing()
        self.assertFalse(listing.is_promoted)
        self.assertIs(listing.provenance, Provenance.SYNTHETIC)
        self.assertEqual(listing.currency, "MXN")
        self.assertEqual(listing.images, ())
        self.assertEqual(listing.location_name, "")

    def test_frozen(self) -> None:
        """Listings cannot be mutated in place."""
        listing = _listing()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            listing.is_promoted = True  # type: ignore[misc]

    def test_no_distance_field(self) -> None:
        """Distance lives on RankedListing, never on Listing."""
        names = {f.name for f in dataclasses.fields(Listing)}
        self.assertNotIn("distance", names)
        self.assertNotIn("distance_km", names)

    def test_hashable(self) -> None:
        """Frozen listings can be used in sets."""
        self.assertEqual(len({_listing(), _listing()}), 1)

    def test_enums_are_string_keys(self) -> None:
        """Enum members compare equal to their raw keys."""
        self.assertEqual(Category.REAL_ESTATE, "real_estate")
        self.assertEqual(DeliveryMode.MEETUP.value, "meetup")
        self.assertEqual(Provenance("user"), Provenance.USER)
        self.assertEqual(len(Category), 9)


class TestRankedListing(unittest.TestCase):
    """RankedListing display helpers."""

    def test_display_distance_rounds(self) -> None:
        """Display distance has one decimal place."""
        ranked = RankedListing(_listing(), 2.3456)
        self.assertEqual(ranked.display_distance, 2.3)
        self.assertEqual(ranked.distance_km, 2.3456)

    def test_display_distance_none(self) -> None:
        """No viewer means no distance."""
        self.assertIsNone(RankedListing(_listing()).display_distance)


if __name__ == "__main__":
    unittest.main()
