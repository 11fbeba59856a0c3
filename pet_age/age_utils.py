# pet_age/age_utils.py
"""Age conversion and lookups over the aging reference data"""

from typing import Iterable, List, Optional
from pet_age.models import AgingRecord

def convert_age(species: str, breed: str, pet_age: float, dataset: Iterable[AgingRecord]) -> Optional[float]:
    """
    Convert a pet's age in years to human-equivalent years.

    Uses the first record matching (species, breed) exactly. Returns None when
    no record matches. Ages up to first_phase_years accrue first_phase_value
    per year; every year after that accrues later_per_year.
    """
    record = next(
        (item for item in dataset if item.species == species and item.breed == breed),
        None
    )
    if record is None:
        return None

    if pet_age <= record.first_phase_years:
        return pet_age * record.first_phase_value

    first_phase_total = record.first_phase_years * record.first_phase_value
    return first_phase_total + (pet_age - record.first_phase_years) * record.later_per_year

def list_species(dataset: Iterable[AgingRecord]) -> List[str]:
    """Distinct species in first-occurrence order"""
    return list(dict.fromkeys(item.species for item in dataset))

def list_breeds(species: str, dataset: Iterable[AgingRecord]) -> List[str]:
    """Breeds recorded for a species, in dataset order"""
    # Duplicates are kept as-is
    return [item.breed for item in dataset if item.species == species]
