"""Helpers that translate Booking.com payload fields into our vocabulary."""

from __future__ import annotations

from typing import Any

from .models import ACCOMMODATION_TYPES

ACCOMMODATION_TYPE_MAPPING = {
    "guest house": "guest-house",
    "vacation home": "vacation-home",
    "bed and breakfast": "bed-and-breakfast",
}

REVIEW_SCORE_LABELS = (
    (9.5, "Exceptional"),
    (9.0, "Superb"),
    (8.5, "Wonderful"),
    (8.0, "Very Good"),
    (7.5, "Good"),
)

# Booking.com v1 facility ids
FACILITY_LABELS = {
    "2": "Parking",
    "3": "Restaurant",
    "4": "24-hour front desk",
    "6": "Non-smoking rooms",
    "7": "Facilities for disabled guests",
    "8": "Family rooms",
    "11": "Airport shuttle",
    "14": "Spa and wellness centre",
    "16": "Bar",
    "17": "Breakfast",
    "20": "Free toiletries",
    "22": "Hairdryer",
    "28": "Car rental",
    "47": "Safety deposit box",
    "48": "Heating",
    "51": "Soundproof rooms",
    "53": "Express check-in/check-out",
    "54": "Packed lunches",
    "75": "Designated smoking area",
    "81": "Sun terrace",
    "91": "VIP room facilities",
    "96": "Bridal suite",
    "107": "Private check-in/check-out",
    "108": "Swimming pool",
    "109": "Terrace",
    "111": "Ironing facilities",
    "121": "Hot tub",
    "124": "Fitness centre",
    "158": "Gift shop",
    "160": "Ticket service",
    "163": "Business centre",
    "177": "Air conditioning",
    "181": "Electric kettle",
    "184": "WiFi",
    "421": "Mini golf",
    "436": "BBQ facilities",
    "439": "Meeting/banquet facilities",
    "449": "Bicycle rental",
    "455": "Massage",
    "459": "Concierge service",
    "466": "Lift",
    "490": "Room service",
    "491": "Currency exchange",
    "495": "Laundry",
    "517": "Shops on site",
}

MAX_FACILITIES = 6
MISSING_FACILITIES = ["Wifi", "Parking"]
UNMATCHED_FACILITIES = ["WiFi", "Parking", "24-hour front desk"]


def determine_accommodation_type(raw: str | None) -> str:
    normalized = " ".join((raw or "").lower().split())
    if normalized in ACCOMMODATION_TYPES:
        return normalized
    return ACCOMMODATION_TYPE_MAPPING.get(normalized, "hotel")


def review_score_label(score: float) -> str:
    for threshold, label in REVIEW_SCORE_LABELS:
        if score >= threshold:
            return label
    return "Pleasant"


def extract_facilities_from_ids(facility_ids: str | None) -> list[str]:
    """Map a comma separated id list to at most six readable labels."""

    if not facility_ids:
        return list(MISSING_FACILITIES)

    facilities: list[str] = []
    for facility_id in facility_ids.split(","):
        label = FACILITY_LABELS.get(facility_id.strip())
        if label:
            facilities.append(label)
            if len(facilities) >= MAX_FACILITIES:
                break

    return facilities or list(UNMATCHED_FACILITIES)


def extract_facilities(facilities: Any) -> list[str]:
    if not isinstance(facilities, list):
        return ["wifi", "parking"]
    labels = []
    for item in facilities:
        label = item.get("name") if isinstance(item, dict) else item
        if label:
            labels.append(str(label))
    return labels
