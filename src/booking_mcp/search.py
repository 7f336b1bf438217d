from __future__ import annotations

from .filters import apply_filters
from .mock_data import DEFAULT_NIGHTS, mock_accommodations
from .models import AccommodationSearchRequest, AccommodationSearchResult
from .providers import BookingProvider
from .tools import get_logger

logger = get_logger(__name__)

MISSING_KEY_NOTE = " (Using mock data - set RAPIDAPI_KEY for real results)"
FALLBACK_NOTE = " (Live results unavailable - showing sample listings)"


class AccommodationSearchService:
    """Runs the live search and substitutes sample listings when it comes back empty."""

    def __init__(self, provider: BookingProvider | None = None):
        self.provider = provider or BookingProvider()

    async def search(self, request: AccommodationSearchRequest) -> AccommodationSearchResult:
        accommodations = await self.provider.search_accommodations(request)
        using_mock_data = not accommodations

        if using_mock_data:
            logger.warning("Using mock accommodation data", destination=request.destination)
            accommodations = apply_filters(mock_accommodations(request), request.filters())

        return AccommodationSearchResult(
            destination=request.destination,
            check_in=request.check_in,
            check_out=request.check_out,
            nights=request.nights or DEFAULT_NIGHTS,
            adults=request.adults or 2,
            children=request.children or 0,
            rooms=request.rooms or 1,
            accommodations=accommodations,
            total_results=len(accommodations),
            filters=request.filters(),
            using_mock_data=using_mock_data,
        )

    def summary_text(self, result: AccommodationSearchResult) -> str:
        text = f"Found {result.total_results} accommodation options in {result.destination}"
        if result.check_in:
            text += f" from {result.check_in}"
        if result.check_out:
            text += f" to {result.check_out}"
        text += "."
        if not self.provider.configured:
            text += MISSING_KEY_NOTE
        elif result.using_mock_data:
            text += FALLBACK_NOTE
        return text
