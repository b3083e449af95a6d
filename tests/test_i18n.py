# tests/test_i18n.py

"""Tests for category labels and UI strings."""

import unittest
from unittest.mock import patch

from src.config.i18n import (
    CATEGORY_LABELS,
    TEXTS,
    label,
    label_function,
    resolve_locale,
    text,
)
from src.config.settings import Settings
from src.models.listing import Category, Coordinate
from src.services.catalog_generator import CatalogGenerator
from src.services.ranking import rank


class TestLabels(unittest.TestCase):
    """Category label lookup."""

    def test_every_locale_labels_every_category(self) -> None:
        """No category is missing a label in any locale."""
        for locale, labels in CATEGORY_LABELS.items():
            with self.subTest(locale=locale):
                self.assertEqual(set(labels), set(Category))

    def test_label_per_locale(self) -> None:
        """Labels follow the requested locale."""
        self.assertEqual(label(Category.VEHICLES, "es"), "Autos")
        self.assertEqual(label(Category.VEHICLES, "en"), "Vehicles")
        self.assertEqual(label("vehicles", "zh"), "汽车")

    def test_unknown_locale_uses_default(self) -> None:
        """Unsupported locales resolve to the default."""
        self.assertEqual(resolve_locale("fr"), Settings.DEFAULT_LOCALE)
        self.assertEqual(resolve_locale(None), Settings.DEFAULT_LOCALE)
        self.assertEqual(
            label(Category.BOOKS, "fr"),
            label(Category.BOOKS, Settings.DEFAULT_LOCALE),
        )

    def test_label_function_binds_locale(self) -> None:
        """label_function returns a one-argument lookup."""
        en = label_function("en")
        self.assertEqual(en(Category.REAL_ESTATE), "Real Estate")


class TestTexts(unittest.TestCase):
    """UI string lookup."""

    def test_same_keys_in_every_locale(self) -> None:
        """Translations cover the same keys."""
        keys = set(TEXTS["es"])
        for locale, table in TEXTS.items():
            with self.subTest(locale=locale):
                self.assertEqual(set(table), keys)

    def test_text_lookup(self) -> None:
        """text() returns the localised string."""
        self.assertEqual(text("cat.all", "en"), "All")
        self.assertEqual(text("cat.all", "zh"), "全部")

    def test_missing_key_returns_key(self) -> None:
        """Unknown keys come back unchanged."""
        self.assertEqual(text("nope.missing", "en"), "nope.missing")


class TestUnsupportedDefaultLocale(unittest.TestCase):
    """A misconfigured default locale still resolves to es."""

    def setUp(self) -> None:
        patcher = patch.object(Settings, "DEFAULT_LOCALE", "fr")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_resolves_to_es(self) -> None:
        """Unknown locales land on es when the default has no pool."""
        with self.assertLogs("descu.i18n", level="WARNING"):
            self.assertEqual(resolve_locale("fr"), "es")

    def test_lookups_do_not_fail(self) -> None:
        """Labels and texts come from the es tables."""
        self.assertEqual(label(Category.VEHICLES, "fr"), "Autos")
        self.assertEqual(text("list.header", None), "Cerca de ti")
        self.assertEqual(label_function("fr")(Category.BOOKS), "Libros")

    def test_generate_and_rank(self) -> None:
        """A catalog generated for an unknown locale ranks normally."""
        center = Coordinate(latitude=19.4326, longitude=-99.1332)
        listings = CatalogGenerator().generate(center, "fr", 5)
        ranked = rank(listings, "x", "all", center, "fr")
        self.assertIsInstance(ranked, list)
        self.assertTrue(all(item.currency == "MXN" for item in listings))


if __name__ == "__main__":
    unittest.main()
