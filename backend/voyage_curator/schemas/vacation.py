from typing import Annotated, Literal

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

TravelCompanionType = Literal["solo", "couple", "family", "friends", "group"]
BudgetLevel = Literal["budget", "midrange", "luxury"]
ClimatePreference = Literal["tropical", "temperate", "cold", "arid", "mountainous", "coastal"]
PacePreference = Literal["relaxed", "balanced", "fast-paced"]
BookingType = Literal["hotel", "tour", "experience", "transport"]

_camel_config = {"alias_generator": to_camel, "populate_by_name": True}


class PersonalProfile(BaseModel):
    full_name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(default="", max_length=20)   # omitted stays ""; a sent value needs 7+ chars
    home_airport: str = Field(min_length=3)
    travel_companions: TravelCompanionType
    start_date: str
    end_date: str
    notes: str = ""

    model_config = {**_camel_config, "frozen": True}

    @field_validator("notes", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("phone")
    @classmethod
    def _phone_digits(cls, value: str) -> str:
        if len(value) < 7:
            raise ValueError("Please provide a contact number with at least 7 digits.")
        return value


class PreferenceProfile(BaseModel):
    budget: BudgetLevel
    climate: list[ClimatePreference] = Field(min_length=1)
    interests: list[Annotated[str, Field(min_length=2)]] = Field(min_length=1)
    accommodation: str = Field(min_length=3)
    cuisine_focus: list[Annotated[str, Field(min_length=2)]] = Field(default_factory=list)
    pace: PacePreference
    mobility_considerations: str = ""
    special_occasion: str = ""

    model_config = {**_camel_config, "frozen": True}

    @field_validator("mobility_considerations", "special_occasion", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class VacationRequest(BaseModel):
    personal: PersonalProfile
    preferences: PreferenceProfile

    model_config = {**_camel_config, "frozen": True}


class BookingOption(BaseModel):
    type: BookingType
    name: str
    description: str
    price_estimate: str = ""
    booking_url: str

    model_config = _camel_config


class DailyPlan(BaseModel):
    day: int
    title: str
    description: str

    model_config = _camel_config


class DestinationPlan(BaseModel):
    destination: str
    country: str
    summary: str
    highlights: list[str]
    ideal_for: list[TravelCompanionType]
    climates: list[ClimatePreference]
    budget: BudgetLevel
    activities: list[str]
    tags: list[str]
    booking_options: list[BookingOption]
    sample_itinerary: list[DailyPlan]
    travel_tips: list[str]
    recommended_season: str
    local_cuisine: list[str]
    price_estimate: str = ""   # trip range, set only on ranked picks

    model_config = _camel_config


class VacationPlan(BaseModel):
    request: VacationRequest
    generated_at: str
    currency: Literal["USD"] = "USD"
    destinations: list[DestinationPlan]

    model_config = _camel_config
