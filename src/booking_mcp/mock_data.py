"""Sample listings returned when the live Booking.com search is unavailable."""

from __future__ import annotations

from typing import Any

from .models import Accommodation, AccommodationSearchRequest

DEFAULT_NIGHTS = 3

_BSTATIC = "https://cf.bstatic.com/xdata/images/hotel"

SAMPLE_LISTINGS: list[dict[str, Any]] = [
    {
        "id": "7696424",
        "name": "STAGES HOTEL Prague, a Tribute Portfolio Hotel",
        "type": "hotel",
        "pricePerNight": 220,
        "images": [
            f"{_BSTATIC}/max1280x900/430825435.jpg?k=3e8a521794862527b7c7ab2316a108088ddb3c23e39d861aa63322e7d0534c7d&o=",
            f"{_BSTATIC}/1440x1440/430825435.jpg?k=3e8a521794862527b7c7ab2316a108088ddb3c23e39d861aa63322e7d0534c7d&o=",
        ],
        "rating": 9.4,
        "reviewScore": "Superb",
        "reviewCount": 15982,
        "address": "Ceskomoravska 19a",
        "distance": "5.6 km from city center",
        "landmark": "Prague 9",
        "coordinates": {"latitude": 50.104384958882, "longitude": 14.4953591788171},
        "facilities": [
            "WiFi",
            "Parking",
            "Restaurant",
            "24-hour front desk",
            "Fitness centre",
            "Bar",
            "Spa and wellness centre",
            "Room service",
        ],
        "cancellation": "Free cancellation",
        "breakfast": "Breakfast included",
        "sustainability": {"certified": False, "level": 0},
    },
    {
        "id": "77320",
        "name": "Hotel Duo & Wellness",
        "type": "hotel",
        "pricePerNight": 165,
        "images": [
            f"{_BSTATIC}/max1280x900/493721137.jpg?k=058b6988395d2c397c8da154e92d9ab4022b0f3c4a6e59703e69c242fb2e9fdd&o=",
        ],
        "rating": 8.7,
        "reviewScore": "Excellent",
        "reviewCount": 11781,
        "address": "Teplická 492",
        "distance": "6.8 km from city center",
        "landmark": "Prague 9",
        "coordinates": {"latitude": 50.1203, "longitude": 14.5156},
        "facilities": [
            "WiFi",
            "Swimming pool",
            "Spa and wellness centre",
            "Parking",
            "Restaurant",
            "Bar",
            "Fitness centre",
            "Room service",
        ],
        "cancellation": "Free cancellation",
        "breakfast": "Breakfast available",
        "sustainability": {"certified": False, "level": 0},
    },
    {
        "id": "mock_resort",
        "name": "Luxury Beach Resort & Spa",
        "type": "resort",
        "pricePerNight": 389,
        "images": [f"{_BSTATIC}/max1280x900/400000000.jpg"],
        "rating": 9.5,
        "reviewScore": "Exceptional",
        "reviewCount": 1523,
        "address": "789 Beachfront Drive",
        "distance": "3.2 km from city center",
        "landmark": "Beach",
        "coordinates": {"latitude": 40.7128, "longitude": -74.006},
        "facilities": [
            "WiFi",
            "Swimming pool",
            "Spa and wellness centre",
            "Restaurant",
            "Beach access",
            "Bar",
            "Fitness centre",
            "Airport shuttle",
        ],
        "cancellation": "Non-refundable",
        "breakfast": "All-inclusive (all meals included)",
        "sustainability": {"certified": True, "level": 3},
    },
    {
        "id": "mock_apartment",
        "name": "Modern City Center Apartment",
        "type": "apartment",
        "pricePerNight": 145,
        "images": [f"{_BSTATIC}/max1280x900/300000000.jpg"],
        "rating": 9.1,
        "reviewScore": "Superb",
        "reviewCount": 456,
        "address": "45 Park Avenue",
        "distance": "0.2 km from city center",
        "landmark": "Main Square",
        "coordinates": {"latitude": 40.7128, "longitude": -74.006},
        "facilities": [
            "WiFi",
            "Kitchen",
            "Parking",
            "Family rooms",
            "Laundry",
            "Heating",
            "Air conditioning",
        ],
        "cancellation": "Free cancellation until 3 days before check-in",
        "breakfast": "Self-catering",
        "sustainability": {"certified": False, "level": 0},
    },
    {
        "id": "mock_villa",
        "name": "Secluded Mountain Villa",
        "type": "villa",
        "pricePerNight": 475,
        "images": [f"{_BSTATIC}/max1280x900/500000000.jpg"],
        "rating": 9.8,
        "reviewScore": "Exceptional",
        "reviewCount": 287,
        "address": "Mountain Ridge Road 15",
        "distance": "12 km from city center",
        "landmark": "Mountain View",
        "coordinates": {"latitude": 40.7128, "longitude": -74.006},
        "facilities": [
            "WiFi",
            "Swimming pool",
            "Kitchen",
            "Parking",
            "Terrace",
            "BBQ facilities",
            "Heating",
            "Family rooms",
        ],
        "cancellation": "Free cancellation until 7 days before check-in",
        "breakfast": "Self-catering",
        "sustainability": {"certified": True, "level": 2},
    },
]


def mock_accommodations(request: AccommodationSearchRequest) -> list[Accommodation]:
    """Bind the sample listings to the requested destination and stay length."""

    nights = request.nights or DEFAULT_NIGHTS
    accommodations = []
    for listing in SAMPLE_LISTINGS:
        accommodations.append(
            Accommodation(
                id=listing["id"],
                name=listing["name"],
                type=listing["type"],
                destination=request.destination,
                price_per_night=listing["pricePerNight"],
                total_price=nights * listing["pricePerNight"],
                currency="USD",
                images=listing["images"],
                main_image=listing["images"][0],
                rating=listing["rating"],
                review_score=listing["reviewScore"],
                review_count=listing["reviewCount"],
                location={
                    "address": listing["address"],
                    "city": request.destination,
                    "distance": listing["distance"],
                    "landmark": request.landmark or listing["landmark"],
                    "coordinates": listing["coordinates"],
                },
                facilities=list(listing["facilities"]),
                cancellation=listing["cancellation"],
                breakfast=listing["breakfast"],
                sustainability=listing["sustainability"],
            )
        )
    return accommodations
