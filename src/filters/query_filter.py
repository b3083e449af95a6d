# src/filters/query_filter.py

"""Free-text and category filtering of catalog listings."""

import logging
from collections.abc import Callable, Iterable

from src.models.listing import Category, Listing

logger = logging.getLogger("descu.filters")

ALL_CATEGORIES = "all"


class QueryFilter:
    """Narrow a listing sequence by search text and category facet."""

    @staticmethod
    def categories_matching_label(
        query: str,
        label: Callable[[Category], str],
    ) -> frozenset[Category]:
        """Return categories whose localised label contains *query*.

        *query* must already be lowercased.
        """
        return frozenset(
            category
            for category in Category
            if query in label(category).lower()
        )

    @staticmethod
    def matches_text(
        listing: Listing,
        query: str,
        label_hits: frozenset[Category],
    ) -> bool:
        """Check one listing against a lowercased, non-empty query."""
        return (
            query in listing.title.lower()
            or query in listing.description.lower()
            or query in listing.category.value.lower()
            or listing.category in label_hits
        )

    @staticmethod
    def apply(
        listings: Iterable[Listing],
        query: str | None,
        category: Category | str | None,
        label: Callable[[Category], str],
    ) -> list[Listing]:
        """Keep listings passing both the text and category predicates.

        An empty or whitespace-only *query* disables the text check;
        a *category* of ``"all"`` or ``None`` disables the facet.
        Input order is preserved.
        """
        kept = list(listings)
        before = len(kept)

        needle = (query or "").strip().lower()
        if needle:
            label_hits = QueryFilter.categories_matching_label(
                needle, label
            )
            if label_hits:
                logger.debug(
                    "Query '%s' matches category labels: %s",
                    needle,
                    ", ".join(sorted(c.value for c in label_hits)),
                )
            kept = [
                listing
                for listing in kept
                if QueryFilter.matches_text(listing, needle, label_hits)
            ]

        if category is not None and category != ALL_CATEGORIES:
            facet = Category(category)
            kept = [
                listing for listing in kept if listing.category is facet
            ]

        if len(kept) != before:
            logger.info(
                "Query filter kept %d of %d listings "
                "(query='%s', category=%s)",
                len(kept),
                before,
                needle,
                getattr(category, "value", category),
            )
        return kept
