# tests/test_cli_runner.py

"""Tests for the headless catalog browser."""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.cli.runner import cli_browse, resolve_category
from src.models.listing import Category


async def _browse(**overrides: object) -> tuple[int, str]:
    """Run cli_browse with defaults and capture stdout."""
    kwargs: dict[str, object] = {
        "query": None,
        "category_raw": None,
        "locale": "es",
        "latitude": 19.4326,
        "longitude": -99.1332,
        "count": 40,
        "seed": 3,
        "output_format": "json",
        "output_dir": None,
    }
    kwargs.update(overrides)
    with patch("sys.stdout", new_callable=io.StringIO) as out:
        code = await cli_browse(**kwargs)  # type: ignore[arg-type]
    return code, out.getvalue()


class TestResolveCategory(unittest.TestCase):
    """resolve_category argument handling."""

    def test_none_is_all(self) -> None:
        """No category means all."""
        self.assertEqual(resolve_category(None), "all")
        self.assertEqual(resolve_category("all"), "all")

    def test_known_key(self) -> None:
        """Known keys map to Category members."""
        self.assertIs(resolve_category("books"), Category.BOOKS)

    def test_unknown_key_exits(self) -> None:
        """Unknown keys abort with exit code 1."""
        with self.assertRaises(SystemExit) as ctx:
            resolve_category("boats")
        self.assertEqual(ctx.exception.code, 1)


class TestCliBrowse(unittest.IsolatedAsyncioTestCase):
    """cli_browse end to end."""

    async def test_json_output_is_ranked(self) -> None:
        """JSON output lists promoted first, then by nearby and distance."""
        code, out = await _browse()
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(len(data), 40)
        keys = [
            (not d["is_promoted"], d["distance_km"] > 5.0, d["distance_km"])
            for d in data
        ]
        # Rounded distances can only tie, never invert
        self.assertEqual(keys, sorted(keys))

    async def test_same_seed_same_output(self) -> None:
        """A fixed seed reproduces the same ranked ids."""
        _code, first = await _browse(seed=9)
        _code, second = await _browse(seed=9)
        self.assertEqual(
            [d["id"] for d in json.loads(first)],
            [d["id"] for d in json.loads(second)],
        )

    async def test_category_filter(self) -> None:
        """Only the chosen category is printed."""
        code, out = await _browse(category_raw="vehicles", count=200)
        self.assertEqual(code, 0)
        categories = {d["category"] for d in json.loads(out)}
        self.assertEqual(categories, {"vehicles"})

    async def test_no_results_exit_code(self) -> None:
        """An unmatched query exits with 1 and prints nothing."""
        code, out = await _browse(query="zzzz-nothing")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    async def test_without_coordinates_uses_fallback(self) -> None:
        """Missing --lat/--lon still ranks around the fallback."""
        code, out = await _browse(latitude=None, longitude=None)
        self.assertEqual(code, 0)
        self.assertTrue(
            all(d["distance_km"] is not None for d in json.loads(out))
        )

    async def test_table_output(self) -> None:
        """Table format renders a Rich table to stdout."""
        code, out = await _browse(output_format="table", count=5)
        self.assertEqual(code, 0)
        self.assertIn("Cerca de ti", out)

    async def test_save_writes_json(self) -> None:
        """--save writes the ranked list to the output directory."""
        tmp_dir = tempfile.mkdtemp()
        code, _out = await _browse(save=True, output_dir=tmp_dir)
        self.assertEqual(code, 0)
        files = list(Path(tmp_dir).glob("ranked_*.json"))
        self.assertEqual(len(files), 1)

    async def test_tsv_output(self) -> None:
        """TSV format prints a header and one row per listing."""
        code, out = await _browse(output_format="tsv", count=5)
        self.assertEqual(code, 0)
        lines = out.strip().split("\n")
        self.assertTrue(lines[0].startswith("Rank\t"))
        self.assertEqual(len(lines), 6)

    async def test_save_csv(self) -> None:
        """--save-format csv writes a CSV export instead of JSON."""
        tmp_dir = tempfile.mkdtemp()
        code, _out = await _browse(
            save=True, save_format="csv", output_dir=tmp_dir
        )
        self.assertEqual(code, 0)
        self.assertEqual(len(list(Path(tmp_dir).glob("export_*.csv"))), 1)
        self.assertEqual(list(Path(tmp_dir).glob("ranked_*.json")), [])


if __name__ == "__main__":
    unittest.main()
