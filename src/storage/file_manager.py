# src/storage/file_manager.py

"""Writes ranked catalog views to disk."""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.models.listing import RankedListing

logger = logging.getLogger("descu.storage")

_CSV_HEADER = [
    "Rank",
    "Title",
    "Price",
    "Currency",
    "Category",
    "Delivery",
    "Distance (km)",
    "Promoted",
    "Seller",
    "ID",
]


def ranked_to_dicts(
    ranked: list[RankedListing],
) -> list[dict[str, object]]:
    """Serialise ranked listings to plain dicts, preserving order."""
    return [
        {
            "id": r.listing.id,
            "title": r.listing.title,
            "price": r.listing.price,
            "currency": r.listing.currency,
            "category": r.listing.category.value,
            "delivery_mode": r.listing.delivery_mode.value,
            "distance_km": r.display_distance,
            "is_promoted": r.listing.is_promoted,
            "seller": r.listing.seller.name,
            "seller_verified": r.listing.seller.is_verified,
            "provenance": r.listing.provenance.value,
            "latitude": r.listing.location.latitude,
            "longitude": r.listing.location.longitude,
            "created_at": r.listing.created_at,
        }
        for r in ranked
    ]


def _slug(query: str) -> str:
    cleaned = "_".join(query.split())
    return cleaned or "all"


class FileManager:
    """Saves ranked results as JSON or CSV files."""

    def __init__(self, results_dir: Path | None = None) -> None:
        self.results_dir: Path = results_dir or Settings.RESULTS_DIR
        self.results_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager ready, results_dir=%s", self.results_dir)

    def save_results(
        self, query: str, ranked: list[RankedListing]
    ) -> Path:
        """Save ranked listings to a timestamped JSON file."""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.results_dir / f"ranked_{_slug(query)}_{stamp}.json"

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(
                ranked_to_dicts(ranked), f, ensure_ascii=False, indent=2
            )

        logger.info(
            "Saved %d ranked listings for '%s' to %s",
            len(ranked),
            query,
            filepath,
        )
        return filepath

    def export_csv(
        self, query: str, ranked: list[RankedListing]
    ) -> Path:
        """Export ranked listings to CSV, keeping rank order."""
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.results_dir / f"export_{_slug(query)}_{stamp}.csv"

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(_CSV_HEADER)
            for idx, row in enumerate(self._rows(ranked), 1):
                writer.writerow([idx, *row])

        logger.info(
            "Exported %d ranked listings for '%s' to %s",
            len(ranked),
            query,
            filepath,
        )
        return filepath

    @staticmethod
    def format_tsv(ranked: list[RankedListing]) -> str:
        """Format ranked listings as tab-separated text."""
        lines = ["\t".join(_CSV_HEADER)]
        for idx, row in enumerate(FileManager._rows(ranked), 1):
            lines.append("\t".join(str(v) for v in [idx, *row]))
        return "\n".join(lines)

    @staticmethod
    def _rows(ranked: list[RankedListing]) -> list[list[object]]:
        return [
            [
                r.listing.title,
                r.listing.price,
                r.listing.currency,
                r.listing.category.value,
                r.listing.delivery_mode.value,
                "" if r.display_distance is None else r.display_distance,
                "yes" if r.listing.is_promoted else "no",
                r.listing.seller.name,
                r.listing.id,
            ]
            for r in ranked
        ]
