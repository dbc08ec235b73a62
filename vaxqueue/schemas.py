"""Pydantic schemas for the city map JSON document."""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class InhabitantIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phn: str
    full_name: str = Field(alias="fullName")
    is_vaccinated: bool = Field(alias="isVaccinated")
    age: int = Field(ge=0)


class HouseholdIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    block_num: int = Field(alias="blockNum", ge=0)
    inhabitants: List[InhabitantIn] = []

    @field_validator("inhabitants", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v


class ClinicIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    block_num: int = Field(alias="blockNum", ge=0)
    staff: int = Field(default=0, ge=0)


class CityIn(BaseModel):
    households: List[HouseholdIn] = []
    clinics: List[ClinicIn] = []

    # Missing or null collections are empty, not errors
    @field_validator("households", "clinics", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v


class CityMapIn(RootModel[Dict[str, CityIn]]):
    """Top level: {city name: city}."""
    root: Dict[str, CityIn]

    def city_names(self) -> List[str]:
        return list(self.root.keys())

    def get(self, name: str) -> Optional[CityIn]:
        return self.root.get(name)
