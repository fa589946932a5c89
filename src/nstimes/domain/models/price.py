"""Price domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Price(BaseModel):
    """One price option for a journey, as returned by the NS price API."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    total_price_in_cents: int = Field(alias="totalPriceInCents")
    price_per_adult_in_cents: int = Field(alias="pricePerAdultInCents")
    discount_in_cents: int | None = Field(default=None, alias="discountInCents")
    operator_name: str | None = Field(default=None, alias="operatorName")
    discount_type: str = Field(alias="discountType")
    travel_class: str = Field(alias="travelClass")
    display_name: str = Field(alias="displayName")
    is_best_option: bool = Field(default=False, alias="isBestOption")
