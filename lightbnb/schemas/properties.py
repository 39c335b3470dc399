from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class PropertyDetails(BaseModel):
    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str
    cover_photo_url: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: str
    street: str
    city: str
    province: str
    post_code: str


class NewProperty(PropertyDetails):
    cost_per_night: Decimal = Field(ge=0)  # major units, e.g. dollars


class Property(PropertyDetails):
    id: int
    cost_per_night: int  # minor units, e.g. cents
    active: bool = True


class PropertyWithRating(Property):
    average_rating: float | None = None


class PropertyFilters(BaseModel):
    model_config = {"extra": "forbid"}

    city: str | None = None
    owner_id: int | None = None
    minimum_price_per_night: Decimal | None = Field(default=None, ge=0)
    maximum_price_per_night: Decimal | None = Field(default=None, ge=0)
    minimum_rating: Decimal | None = Field(default=None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_missing(cls, value):
        # Search forms submit untouched inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value
