from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

AccommodationType = Literal[
    "hotel",
    "apartment",
    "hostel",
    "guest-house",
    "vacation-home",
    "resort",
    "villa",
    "chalet",
    "bed-and-breakfast",
    "lodge",
]

FacilityFilter = Literal[
    "pool",
    "parking",
    "free-breakfast",
    "gym",
    "all-inclusive",
    "family-friendly",
    "wifi",
    "spa",
    "restaurant",
    "airport-shuttle",
    "pet-friendly",
    "beach-access",
    "kitchen",
]

ACCOMMODATION_TYPES: tuple[str, ...] = get_args(AccommodationType)
FACILITY_FILTERS: tuple[str, ...] = get_args(FacilityFilter)


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Coordinates(CamelModel):
    latitude: float = Field(0.0)
    longitude: float = Field(0.0)


class Location(CamelModel):
    address: str = Field("N/A")
    city: str
    distance: str
    landmark: str = Field("City center")
    coordinates: Coordinates = Field(default_factory=Coordinates)


class Sustainability(CamelModel):
    certified: bool = Field(False)
    level: int = Field(0, ge=0)


class Accommodation(CamelModel):
    id: str
    name: str
    type: AccommodationType = Field("hotel")
    destination: str
    price_per_night: int = Field(..., ge=0)
    total_price: int = Field(..., ge=0)
    currency: str = Field("USD")
    images: list[str] = Field(default_factory=list)
    main_image: str | None = Field(None)
    rating: float = Field(..., ge=0, le=10)
    review_score: str
    review_count: int = Field(0, ge=0)
    location: Location
    facilities: list[str] = Field(default_factory=list)
    cancellation: str
    breakfast: str | None = Field(None)
    sustainability: Sustainability = Field(default_factory=Sustainability)

    @field_validator("id", mode="before")
    def coerce_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("images", mode="before")
    def drop_empty_images(cls, value: Any) -> list[str]:
        if not value:
            return []
        return [image for image in value if image]


class AccommodationSearchRequest(CamelModel):
    """Arguments accepted by the accommodations_search tool."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    destination: str = Field(..., min_length=1)
    coordinates: Coordinates | None = Field(None)
    check_in: str | None = Field(None)
    check_out: str | None = Field(None)
    nights: int | None = Field(None, ge=1)
    adults: int | None = Field(None, ge=1)
    children: int | None = Field(None, ge=0)
    rooms: int | None = Field(None, ge=1)
    min_price: float | None = Field(None)
    max_price: float | None = Field(None)
    accommodation_type: AccommodationType | None = Field(None)
    facilities: list[str] | None = Field(None)
    landmark: str | None = Field(None)
    rating: float | None = Field(None, ge=0, le=10)

    @field_validator("destination", mode="before")
    def strip_destination(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    def filters(self) -> SearchFilters:
        return SearchFilters(
            accommodation_type=self.accommodation_type,
            facilities=self.facilities,
            min_price=self.min_price,
            max_price=self.max_price,
            rating=self.rating,
        )


class SearchFilters(CamelModel):
    accommodation_type: AccommodationType | None = Field(None)
    facilities: list[str] | None = Field(None)
    min_price: float | None = Field(None)
    max_price: float | None = Field(None)
    rating: float | None = Field(None)


class AccommodationSearchResult(CamelModel):
    destination: str
    check_in: str | None = Field(None)
    check_out: str | None = Field(None)
    nights: int = Field(3)
    adults: int = Field(2)
    children: int = Field(0)
    rooms: int = Field(1)
    accommodations: list[Accommodation] = Field(default_factory=list)
    total_results: int = Field(0)
    filters: SearchFilters = Field(default_factory=SearchFilters)
    using_mock_data: bool = Field(False)
