from booking_mcp.filters import apply_filters, has_facilities
from booking_mcp.models import Accommodation, SearchFilters


def _accommodation(acc_id, acc_type="hotel", price=100, rating=8.0, facilities=()):
    return Accommodation(
        id=acc_id,
        name=f"Stay {acc_id}",
        type=acc_type,
        destination="Lisbon",
        price_per_night=price,
        total_price=price * 3,
        rating=rating,
        review_score="Very Good",
        location={"city": "Lisbon", "distance": "1 km from city center"},
        facilities=list(facilities),
        cancellation="Free cancellation",
    )


STAYS = [
    _accommodation("a", "hotel", 120, 8.2, ["WiFi", "Fitness centre", "Breakfast"]),
    _accommodation("b", "apartment", 90, 9.1, ["Wifi", "Kitchen", "Parking"]),
    _accommodation("c", "hotel", 300, 9.6, ["WiFi", "Swimming pool", "Spa and wellness centre"]),
]


def _ids(accommodations):
    return [acc.id for acc in accommodations]


def test_no_filters_keeps_everything_in_order():
    assert _ids(apply_filters(STAYS, SearchFilters())) == ["a", "b", "c"]


def test_filters_are_conjunctive():
    filters = SearchFilters(accommodation_type="hotel", min_price=100, max_price=200, rating=8)
    assert _ids(apply_filters(STAYS, filters)) == ["a"]


def test_price_bounds_are_inclusive():
    assert _ids(apply_filters(STAYS, SearchFilters(min_price=90, max_price=120))) == ["a", "b"]


def test_zero_max_price_is_applied():
    assert apply_filters(STAYS, SearchFilters(max_price=0)) == []


def test_rating_is_a_minimum():
    assert _ids(apply_filters(STAYS, SearchFilters(rating=9.1))) == ["b", "c"]


def test_facility_slugs_match_label_wording():
    assert _ids(apply_filters(STAYS, SearchFilters(facilities=["gym"]))) == ["a"]
    assert _ids(apply_filters(STAYS, SearchFilters(facilities=["free-breakfast"]))) == ["a"]
    assert _ids(apply_filters(STAYS, SearchFilters(facilities=["pool", "spa"]))) == ["c"]


def test_every_requested_facility_must_match():
    assert _ids(apply_filters(STAYS, SearchFilters(facilities=["WIFI", "parking"]))) == ["b"]
    assert apply_filters(STAYS, SearchFilters(facilities=["kitchen", "pool"])) == []


def test_has_facilities_free_form_substring():
    assert has_facilities(["24-hour front desk"], ["front desk"])
    assert not has_facilities(["Bar"], ["sauna"])


def test_pet_friendly_needs_a_pets_label():
    assert has_facilities(["Pets allowed"], ["pet-friendly"])
    assert has_facilities(["Pet friendly rooms"], ["pet-friendly"])
    assert not has_facilities(["Carpeted floors", "Competition pool"], ["pet-friendly"])
