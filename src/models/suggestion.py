# src/models/suggestion.py

"""Pre-fill data for new listing submissions."""

from dataclasses import dataclass, replace

from src.models.listing import Category, DeliveryMode


@dataclass(frozen=True)
class ListingSuggestion:
    """Metadata suggested by an external image-analysis service."""

    title: str
    description: str
    category: Category
    suggested_price: int | None = None
    suggested_delivery_mode: DeliveryMode | None = None


@dataclass(frozen=True)
class ListingDraft:
    """User-entered fields for a listing that has not been created yet."""

    title: str = ""
    description: str = ""
    price: int = 0
    category: Category = Category.OTHER
    delivery_mode: DeliveryMode = DeliveryMode.MEETUP
    images: tuple[str, ...] = ()

    def apply_suggestion(
        self, suggestion: ListingSuggestion
    ) -> "ListingDraft":
        """Return a copy pre-filled from *suggestion*.

        Optional suggestion fields left as ``None`` keep the draft's
        current value.
        """
        price = (
            self.price
            if suggestion.suggested_price is None
            else max(0, int(suggestion.suggested_price))
        )
        delivery = (
            suggestion.suggested_delivery_mode
            or self.delivery_mode
        )
        return replace(
            self,
            title=suggestion.title,
            description=suggestion.description,
            category=suggestion.category,
            price=price,
            delivery_mode=delivery,
        )
