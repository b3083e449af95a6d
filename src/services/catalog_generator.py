# src/services/catalog_generator.py

"""Synthetic catalog generation around a viewer coordinate.

Listings are scattered in three square windows centred on the viewer
("near", "mid", "far").  A single uniform draw picks the window; the
latitude and longitude offsets are then drawn independently from
``[-window/2, +window/2]``.  The square shape is intentional: band
range checks in the tests rely on it.
"""

import logging
import math
import random
import time
from collections.abc import Callable

from src.config.catalog_templates import (
    DESCRIPTIONS,
    LISTING_TEMPLATES,
    LOCAL_ONLY_CATEGORIES,
    SHIPPABLE_CATEGORIES,
)
from src.config.i18n import resolve_locale
from src.config.settings import Settings
from src.models.listing import (
    Category,
    Coordinate,
    DeliveryMode,
    Listing,
    Provenance,
    Seller,
)

logger = logging.getLogger("descu.generator")

_DAY_MS = 24 * 60 * 60 * 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


def band_for_draw(draw: float) -> tuple[str, float]:
    """Map a uniform draw in ``[0, 1)`` to ``(band name, window degrees)``."""
    for name, upper, window in Settings.DISTANCE_BANDS:
        if draw < upper:
            return name, window
    name, _upper, window = Settings.DISTANCE_BANDS[-1]
    return name, window


def delivery_mode_for(
    category: Category, rng: random.Random
) -> DeliveryMode:
    """Pick a delivery mode the way sellers of *category* usually offer it."""
    if category in LOCAL_ONLY_CATEGORIES:
        return DeliveryMode.MEETUP
    if category in SHIPPABLE_CATEGORIES:
        return (
            DeliveryMode.SHIPPING
            if rng.random() < 0.5
            else DeliveryMode.BOTH
        )
    return DeliveryMode.BOTH


def make_seller(index: int, is_verified: bool) -> Seller:
    """Build the pooled seller with the given index."""
    return Seller(
        id=f"user-{index}",
        name=f"Usuario {index + 1}",
        email=f"usuario{index}@gmail.com",
        avatar=(
            "https://api.dicebear.com/7.x/avataaars/svg"
            f"?seed={index + 100}"
        ),
        is_verified=is_verified,
    )


class CatalogGenerator:
    """Produce synthetic listings for seeding and stress-testing.

    Pass a seeded :class:`random.Random` and a fixed *clock* to get
    identical output on every run.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock or _now_ms
        self._batch = 0
        self._categories = list(LISTING_TEMPLATES)

    def generate_banded(
        self,
        center: Coordinate,
        locale: str | None = None,
        count: int | None = None,
    ) -> list[tuple[str, Listing]]:
        """Generate listings, each tagged with the band it was placed in."""
        total = Settings.SYNTHETIC_CATALOG_SIZE if count is None else count
        lang = resolve_locale(locale)
        now = self._clock()
        batch = self._batch
        self._batch += 1

        items = [
            self._make_listing(f"mock-{batch}-{i}", center, lang, now)
            for i in range(total)
        ]
        logger.info(
            "Generated %d synthetic listings around (%.4f, %.4f) "
            "for locale '%s'",
            total,
            center.latitude,
            center.longitude,
            lang,
        )
        return items

    def generate(
        self,
        center: Coordinate,
        locale: str | None = None,
        count: int | None = None,
    ) -> list[Listing]:
        """Generate *count* synthetic listings around *center*."""
        return [
            listing
            for _band, listing in self.generate_banded(
                center, locale, count
            )
        ]

    def _make_listing(
        self,
        listing_id: str,
        center: Coordinate,
        lang: str,
        now: int,
    ) -> tuple[str, Listing]:
        rng = self._rng

        category = rng.choice(self._categories)
        template = rng.choice(LISTING_TEMPLATES[category])

        band, window = band_for_draw(rng.random())
        lat_offset = (rng.random() - 0.5) * window
        lon_offset = (rng.random() - 0.5) * window

        jitter = rng.uniform(
            Settings.PRICE_JITTER_MIN, Settings.PRICE_JITTER_MAX
        )
        price = math.floor(template.base_price * jitter / 10) * 10

        description = rng.choice(DESCRIPTIONS[lang])
        seller_index = rng.randrange(Settings.SELLER_POOL_SIZE)
        is_promoted = rng.random() < Settings.PROMOTED_PROBABILITY
        is_verified = rng.random() < Settings.VERIFIED_PROBABILITY
        delivery = delivery_mode_for(category, rng)
        age_ms = rng.randrange(Settings.MAX_LISTING_AGE_DAYS * _DAY_MS)

        listing = Listing(
            id=listing_id,
            seller=make_seller(seller_index, is_verified),
            title=template.titles.get(lang, template.titles["es"]),
            description=description,
            price=price,
            currency="CNY" if lang == "zh" else "MXN",
            images=(template.image,),
            category=category,
            delivery_mode=delivery,
            location=Coordinate(
                latitude=center.latitude + lat_offset,
                longitude=center.longitude + lon_offset,
            ),
            location_name="CDMX" if lang == "es" else "Nearby",
            created_at=now - age_ms,
            is_promoted=is_promoted,
            provenance=Provenance.SYNTHETIC,
        )
        return band, listing
