from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

class AgingRecord(BaseModel):
    """One aging curve, keyed by (species, breed)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    species: str = Field(min_length=1)
    breed: str = Field(min_length=1)
    first_phase_years: float = Field(alias="firstPhaseYears", strict=True, allow_inf_nan=False)
    first_phase_value: float = Field(alias="firstPhaseValue", strict=True, allow_inf_nan=False)
    later_per_year: float = Field(alias="laterPerYear", strict=True, allow_inf_nan=False)

class AgeQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    species: str = Field(min_length=1)
    breed: str = Field(min_length=1)
    pet_age: float = Field(gt=0, alias="petAge", allow_inf_nan=False)

class AgeResponse(BaseModel):
    success: bool
    species: str = ""
    breed: str = ""
    pet_age: float = 0
    human_age: Optional[float] = None
    human_age_display: str = ""
    message: str = ""

class SpeciesResponse(BaseModel):
    species: List[str] = []

class BreedsResponse(BaseModel):
    species: str
    breeds: List[str] = []
