import pytest
from pydantic import ValidationError

from booking_mcp.mock_data import mock_accommodations
from booking_mcp.models import AccommodationSearchRequest


def test_request_reads_camel_case_arguments():
    request = AccommodationSearchRequest.model_validate(
        {
            "destination": " Prague ",
            "checkIn": "2026-05-01",
            "checkOut": "2026-05-04",
            "accommodationType": "guest-house",
            "minPrice": 50,
            "maxPrice": 150,
            "coordinates": {"latitude": 50.08, "longitude": 14.43},
        }
    )
    assert request.destination == "Prague"
    assert request.check_in == "2026-05-01"
    assert request.accommodation_type == "guest-house"
    assert request.filters().max_price == 150
    assert request.coordinates.latitude == 50.08


@pytest.mark.parametrize(
    "arguments",
    [
        {},
        {"destination": "   "},
        {"destination": "Prague", "nights": 0},
        {"destination": "Prague", "adults": 0},
        {"destination": "Prague", "children": -1},
        {"destination": "Prague", "rating": 11},
        {"destination": "Prague", "accommodationType": "castle"},
        {"destination": "Prague", "budget": 100},
    ],
)
def test_request_rejects_invalid_arguments(arguments):
    with pytest.raises(ValidationError):
        AccommodationSearchRequest.model_validate(arguments)


def test_mock_accommodations_bind_request_details():
    request = AccommodationSearchRequest(destination="Vienna", nights=2, landmark="Stephansplatz")
    accommodations = mock_accommodations(request)

    assert len(accommodations) == 5
    assert {acc.type for acc in accommodations} == {"hotel", "resort", "apartment", "villa"}
    assert all(acc.destination == "Vienna" for acc in accommodations)
    assert all(acc.location.city == "Vienna" for acc in accommodations)
    assert all(acc.location.landmark == "Stephansplatz" for acc in accommodations)
    assert all(acc.total_price == acc.price_per_night * 2 for acc in accommodations)


def test_mock_accommodations_default_to_three_nights():
    stages = mock_accommodations(AccommodationSearchRequest(destination="Prague"))[0]
    assert stages.total_price == 660
    assert stages.location.landmark == "Prague 9"


def test_accommodation_serializes_camel_case():
    wire = mock_accommodations(AccommodationSearchRequest(destination="Prague"))[2].to_wire()
    assert wire["pricePerNight"] == 389
    assert wire["reviewScore"] == "Exceptional"
    assert wire["mainImage"].endswith("400000000.jpg")
    assert wire["sustainability"] == {"certified": True, "level": 3}
