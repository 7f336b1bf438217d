from __future__ import annotations

from typing import Iterable, Sequence

from .models import Accommodation, SearchFilters

# Extra keywords for facility slugs whose labels use different wording.
FACILITY_KEYWORDS = {
    "pool": ("pool",),
    "parking": ("parking",),
    "free-breakfast": ("breakfast",),
    "gym": ("gym", "fitness"),
    "all-inclusive": ("all-inclusive", "all inclusive"),
    "family-friendly": ("family",),
    "wifi": ("wifi", "wi-fi"),
    "spa": ("spa",),
    "restaurant": ("restaurant",),
    "airport-shuttle": ("airport shuttle", "airport"),
    "pet-friendly": ("pets", "pet-friendly", "pet friendly"),
    "beach-access": ("beach",),
    "kitchen": ("kitchen",),
}


def _keywords(facility: str) -> tuple[str, ...]:
    requested = facility.strip().lower()
    return (requested, *FACILITY_KEYWORDS.get(requested, ()))


def has_facilities(labels: Sequence[str], requested: Iterable[str]) -> bool:
    """True when every requested facility matches at least one label."""

    lowered = [label.lower() for label in labels]
    for facility in requested:
        keywords = _keywords(facility)
        if not any(keyword in label for label in lowered for keyword in keywords):
            return False
    return True


def apply_filters(accommodations: Iterable[Accommodation], filters: SearchFilters) -> list[Accommodation]:
    filtered = list(accommodations)

    if filters.accommodation_type is not None:
        filtered = [acc for acc in filtered if acc.type == filters.accommodation_type]
    if filters.min_price is not None:
        filtered = [acc for acc in filtered if acc.price_per_night >= filters.min_price]
    if filters.max_price is not None:
        filtered = [acc for acc in filtered if acc.price_per_night <= filters.max_price]
    if filters.rating is not None:
        filtered = [acc for acc in filtered if acc.rating >= filters.rating]
    if filters.facilities:
        filtered = [acc for acc in filtered if has_facilities(acc.facilities, filters.facilities)]

    return filtered
