# src/config/i18n.py

"""Localised category labels and status strings."""

import logging
from collections.abc import Callable

from src.config.settings import Settings
from src.models.listing import Category

logger = logging.getLogger("descu.i18n")

CATEGORY_LABELS: dict[str, dict[Category, str]] = {
    "es": {
        Category.ELECTRONICS: "Electrónica",
        Category.FURNITURE: "Muebles",
        Category.CLOTHING: "Ropa",
        Category.BOOKS: "Libros",
        Category.SPORTS: "Deportes",
        Category.VEHICLES: "Autos",
        Category.REAL_ESTATE: "Inmuebles",
        Category.SERVICES: "Servicios",
        Category.OTHER: "Otros",
    },
    "en": {
        Category.ELECTRONICS: "Electronics",
        Category.FURNITURE: "Furniture",
        Category.CLOTHING: "Clothing",
        Category.BOOKS: "Books",
        Category.SPORTS: "Sports",
        Category.VEHICLES: "Vehicles",
        Category.REAL_ESTATE: "Real Estate",
        Category.SERVICES: "Services",
        Category.OTHER: "Other",
    },
    "zh": {
        Category.ELECTRONICS: "电子产品",
        Category.FURNITURE: "家具",
        Category.CLOTHING: "服饰",
        Category.BOOKS: "图书",
        Category.SPORTS: "运动",
        Category.VEHICLES: "汽车",
        Category.REAL_ESTATE: "房产",
        Category.SERVICES: "服务",
        Category.OTHER: "其他",
    },
}

TEXTS: dict[str, dict[str, str]] = {
    "es": {
        "cat.all": "Todo",
        "list.header": "Cerca de ti",
        "list.loading_loc": "Obteniendo ubicación...",
        "list.loc_denied": "Ubicación no disponible, mostrando CDMX",
        "list.loc_success": "Ubicación actualizada",
        "list.no_results": "Sin resultados",
        "list.empty": "Aún no hay artículos",
        "list.items_count": "{0} artículos",
        "card.nearby": "Cerca",
    },
    "en": {
        "cat.all": "All",
        "list.header": "Near you",
        "list.loading_loc": "Locating...",
        "list.loc_denied": "Location unavailable, showing Mexico City",
        "list.loc_success": "Location updated",
        "list.no_results": "No results",
        "list.empty": "No items yet",
        "list.items_count": "{0} items",
        "card.nearby": "Nearby",
    },
    "zh": {
        "cat.all": "全部",
        "list.header": "附近好物",
        "list.loading_loc": "正在定位...",
        "list.loc_denied": "无法定位，显示墨西哥城",
        "list.loc_success": "定位成功",
        "list.no_results": "没有找到结果",
        "list.empty": "暂无商品",
        "list.items_count": "共 {0} 件商品",
        "card.nearby": "附近",
    },
}


def _default_locale() -> str:
    if Settings.DEFAULT_LOCALE in CATEGORY_LABELS:
        return Settings.DEFAULT_LOCALE
    logger.warning(
        "Default locale '%s' has no translations, using 'es'",
        Settings.DEFAULT_LOCALE,
    )
    return "es"


def resolve_locale(locale: str | None) -> str:
    """Map *locale* to a supported one, falling back to the default."""
    if locale in CATEGORY_LABELS:
        return locale
    return _default_locale()


def label(category: Category | str, locale: str | None) -> str:
    """Return the display label of *category* in *locale*."""
    key = Category(category)
    return CATEGORY_LABELS[resolve_locale(locale)][key]


def text(key: str, locale: str | None) -> str:
    """Return a UI string, falling back to the default locale then the key."""
    table = TEXTS[resolve_locale(locale)]
    if key in table:
        return table[key]
    fallback = TEXTS[_default_locale()].get(key)
    if fallback is None:
        logger.debug("Missing translation for '%s'", key)
        return key
    return fallback


def label_function(locale: str | None) -> Callable[[Category], str]:
    """Bind :func:`label` to one locale for use by the query filter."""
    resolved = resolve_locale(locale)

    def _label(category: Category) -> str:
        return CATEGORY_LABELS[resolved][category]

    return _label
