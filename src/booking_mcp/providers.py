from __future__ import annotations

import os
from datetime import date, datetime, timedelta, timezone
from typing import Any

import httpx

from .filters import apply_filters
from .mapping import (
    determine_accommodation_type,
    extract_facilities,
    extract_facilities_from_ids,
    review_score_label,
)
from .models import Accommodation, AccommodationSearchRequest
from .tools import get_logger, log_operation

logger = get_logger(__name__)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/800x600"
DEFAULT_RATING = 8.0
MAX_RESULTS = 10
LEAD_DAYS = 7
DEFAULT_NIGHTS = 3

SEARCH_DEFAULTS = {
    "units": "metric",
    "locale": "en-gb",
    "order_by": "popularity",
    "filter_by_currency": "USD",
    "page_number": "0",
    "include_adjacency": "true",
    "children_ages": "5,0",
    "categories_filter_ids": "class::2,class::4,free_cancellation::1",
}


class BookingProvider:
    """Booking.com search through RapidAPI, reshaped into Accommodation records.

    Every failure is logged and reported as ``None`` so callers can fall back
    to sample data.
    """

    def __init__(self, api_key: str | None = None, host: str | None = None, base_url: str | None = None):
        self.api_key = api_key if api_key is not None else os.getenv("RAPIDAPI_KEY", "")
        self.host = host or os.getenv("RAPIDAPI_HOST", "booking-com.p.rapidapi.com")
        self.base_url = base_url or os.getenv("BOOKING_API_BASE_URL", f"https://{self.host}")
        logger.debug("Initialized BookingProvider", path=self.base_url)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def _get_json(self, path: str, params: dict[str, str]) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"x-rapidapi-key": self.api_key, "x-rapidapi-host": self.host}

        async with httpx.AsyncClient(timeout=30) as client:
            logger.debug("Calling Booking API", path=path)
            response = await client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()

    async def search_destination(self, destination: str) -> dict[str, Any] | None:
        data = await self._get_json("/v1/hotels/locations", {"name": destination, "locale": "en-gb"})
        if not isinstance(data, list) or not data:
            logger.warning("No location found", destination=destination)
            return None
        return data[0]

    async def search_hotels(self, location: dict[str, Any], request: AccommodationSearchRequest) -> list[dict]:
        check_in, check_out = default_dates(request)
        params = {
            **SEARCH_DEFAULTS,
            "checkin_date": check_in,
            "checkout_date": check_out,
            "dest_id": str(location.get("dest_id")),
            "dest_type": location.get("dest_type") or "city",
            "adults_number": str(request.adults or 2),
            "room_number": str(request.rooms or 1),
            "children_number": str(request.children or 0),
        }
        data = await self._get_json("/v1/hotels/search", params)
        return data.get("result") or []

    @log_operation("booking_search")
    async def search_accommodations(self, request: AccommodationSearchRequest) -> list[Accommodation] | None:
        if not self.configured:
            logger.warning("RAPIDAPI_KEY not set, using mock data", destination=request.destination)
            return None

        try:
            location = await self.search_destination(request.destination)
            if location is None:
                return None
            hotels = await self.search_hotels(location, request)
            hotels = hotels[:MAX_RESULTS]
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Booking API returned an error status",
                destination=request.destination,
                status_code=exc.response.status_code,
                error_details=exc.response.reason_phrase,
            )
            return None
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning(
                "Booking API search failed",
                destination=request.destination,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return None

        accommodations = []
        for hotel in hotels:
            try:
                accommodations.append(to_accommodation(hotel, request))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning(
                    "Skipping malformed hotel record",
                    destination=request.destination,
                    error_type=type(exc).__name__,
                    error_details=str(exc),
                )

        filtered = apply_filters(accommodations, request.filters())
        logger.info("Booking API search complete", destination=request.destination, result_count=len(filtered))
        return filtered


def default_dates(request: AccommodationSearchRequest, today: date | None = None) -> tuple[str, str]:
    """Fill in missing stay dates: one week out, for the requested nights."""

    today = today or datetime.now(timezone.utc).date()
    nights = request.nights or DEFAULT_NIGHTS
    check_in = request.check_in or (today + timedelta(days=LEAD_DAYS)).isoformat()
    check_out = request.check_out or (today + timedelta(days=LEAD_DAYS + nights)).isoformat()
    return check_in, check_out


def to_accommodation(hotel: dict[str, Any], request: AccommodationSearchRequest) -> Accommodation:
    nights = request.nights or 1
    total = hotel.get("min_total_price") or 0
    rating = hotel.get("review_score") or DEFAULT_RATING
    photo = hotel.get("max_1440_photo_url") or hotel.get("max_photo_url")
    raw_facilities = hotel.get("hotel_facilities")
    if isinstance(raw_facilities, list):
        facilities = extract_facilities(raw_facilities)
    else:
        facilities = extract_facilities_from_ids(raw_facilities)

    return Accommodation(
        id=hotel["hotel_id"],
        name=hotel.get("hotel_name") or hotel.get("hotel_name_trans") or "Unnamed property",
        type=determine_accommodation_type(hotel.get("accommodation_type_name") or "hotel"),
        destination=request.destination,
        price_per_night=round(total / nights),
        total_price=round(total),
        currency=hotel.get("currency_code") or "USD",
        images=[photo],
        main_image=photo or PLACEHOLDER_IMAGE,
        rating=rating,
        review_score=hotel.get("review_score_word") or review_score_label(rating),
        review_count=hotel.get("review_nr") or 0,
        location={
            "address": hotel.get("address") or hotel.get("address_trans") or "N/A",
            "city": hotel.get("city") or request.destination,
            "distance": hotel.get("distance_to_cc_formatted") or f"{hotel.get('distance') or 0} km from city center",
            "landmark": hotel.get("district") or "City center",
            "coordinates": {
                "latitude": hotel.get("latitude") or 0,
                "longitude": hotel.get("longitude") or 0,
            },
        },
        facilities=facilities,
        cancellation="Free cancellation" if hotel.get("is_free_cancellable") else "Non-refundable",
        breakfast=hotel.get("ribbon_text") or "Breakfast options available",
        sustainability={"certified": False, "level": 0},
    )
