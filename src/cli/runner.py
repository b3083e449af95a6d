# src/cli/runner.py

"""Headless catalog browser: seed, filter, rank, print."""

import json
import logging
import random
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.i18n import label, text
from src.config.settings import Settings
from src.filters.query_filter import ALL_CATEGORIES
from src.models.listing import Category, Coordinate, RankedListing
from src.services.catalog_generator import CatalogGenerator
from src.services.location import LocationStatus
from src.services.marketplace_session import MarketplaceSession
from src.storage.file_manager import FileManager, ranked_to_dicts

logger = logging.getLogger("descu.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


class StaticLocationProvider:
    """Location provider that reports a coordinate given on the command line."""

    def __init__(self, coordinate: Coordinate) -> None:
        self.coordinate = coordinate

    async def get_viewer_coordinate(self) -> Coordinate:
        return self.coordinate


def resolve_category(raw: str | None) -> Category | str:
    """Validate a category argument; ``None`` means all categories.

    Raises ``SystemExit`` on unknown keys.
    """
    if raw is None or raw == ALL_CATEGORIES:
        return ALL_CATEGORIES
    try:
        return Category(raw)
    except ValueError:
        valid = ", ".join(c.value for c in Category)
        _err.print(f"[red]Unknown category: {raw}[/red]")
        _err.print(f"[dim]Available: all, {valid}[/dim]")
        raise SystemExit(1) from None


def _print_table(ranked: list[RankedListing], locale: str) -> None:
    """Render a Rich table of ranked listings to stdout."""
    table = Table(
        title=text("list.header", locale),
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=50)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Category", style="magenta")
    table.add_column("Distance", justify="right")
    table.add_column("Seller")

    for idx, r in enumerate(ranked, 1):
        item = r.listing
        title = f"★ {item.title}" if item.is_promoted else item.title
        distance = (
            "—"
            if r.display_distance is None
            else f"{r.display_distance} km"
        )
        seller = (
            f"{item.seller.name} ✓"
            if item.seller.is_verified
            else item.seller.name
        )
        table.add_row(
            str(idx),
            title[:50],
            f"{item.currency} {item.price:,}",
            label(item.category, locale),
            distance,
            seller,
        )

    Console().print(table)


async def cli_browse(
    query: str | None,
    category_raw: str | None,
    locale: str | None,
    latitude: float | None,
    longitude: float | None,
    count: int | None,
    seed: int | None,
    output_format: str,
    output_dir: str | None,
    save: bool = False,
    save_format: str = "json",
) -> int:
    """Seed a synthetic catalog, rank it and print it (0=ok, 1=empty)."""
    category = resolve_category(category_raw)

    provider = None
    if latitude is not None and longitude is not None:
        provider = StaticLocationProvider(
            Coordinate(latitude=latitude, longitude=longitude)
        )

    generator = CatalogGenerator(rng=random.Random(seed))
    session = MarketplaceSession(
        generator=generator,
        locale=locale,
        catalog_size=count,
    )
    await session.refresh_location(provider)
    session.set_query(query or "")
    session.set_category(category)

    viewer = session.viewer or Settings.FALLBACK_COORDINATE
    category_name = getattr(category, "value", category)
    _err.print(
        f"[bold]Browsing:[/bold] {query or '*'}  "
        f"[dim]category={category_name} locale={session.locale} "
        f"viewer=({viewer.latitude:.4f}, {viewer.longitude:.4f})[/dim]"
    )
    if session.location_status is not LocationStatus.ACQUIRED:
        _err.print(f"[yellow]{session.status_text()}[/yellow]")

    ranked = session.ranked()
    if not ranked:
        no_results = text("list.no_results", session.locale)
        _err.print(f"[yellow]{no_results}[/yellow]")
        return 1

    count_text = text("list.items_count", session.locale).replace(
        "{0}", str(len(ranked))
    )
    _err.print(
        f"[green]✓ {count_text} of {len(session.store)}[/green]"
    )

    if save:
        try:
            manager = FileManager(
                Path(output_dir) if output_dir else None
            )
            if save_format == "csv":
                path = manager.export_csv(query or "", ranked)
            else:
                path = manager.save_results(query or "", ranked)
            _err.print(f"[dim]Saved → {path}[/dim]")
        except OSError as exc:
            logger.error("Save failed: %s", exc, exc_info=True)
            _err.print(f"[red]Save failed: {exc}[/red]")

    if output_format == "table":
        _print_table(ranked, session.locale)
    elif output_format == "tsv":
        sys.stdout.write(FileManager.format_tsv(ranked) + "\n")
    else:
        json.dump(
            ranked_to_dicts(ranked),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
