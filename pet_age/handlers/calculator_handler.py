# pet_age/handlers/calculator_handler.py
"""Turn calculator results into API responses"""

import math
from typing import Sequence
from pet_age.models import AgeQuery, AgeResponse, AgingRecord, BreedsResponse, SpeciesResponse
from pet_age import age_utils
import structlog

logger = structlog.get_logger()

def handle_species(dataset: Sequence[AgingRecord]) -> SpeciesResponse:
    return SpeciesResponse(species=age_utils.list_species(dataset))

def handle_breeds(species: str, dataset: Sequence[AgingRecord]) -> BreedsResponse:
    return BreedsResponse(species=species, breeds=age_utils.list_breeds(species, dataset))

def handle_age(query: AgeQuery, dataset: Sequence[AgingRecord]) -> AgeResponse:
    """Compute the human age for a query"""
    human_age = age_utils.convert_age(query.species, query.breed, query.pet_age, dataset)

    if human_age is None:
        return handle_not_found(query)

    if not math.isfinite(human_age):
        return handle_out_of_range(query)

    human_age_display = f"{human_age:.1f}"
    logger.info("Calculated human age", species=query.species, breed=query.breed,
                pet_age=query.pet_age, human_age=human_age)

    return AgeResponse(
        success=True,
        species=query.species,
        breed=query.breed,
        pet_age=query.pet_age,
        human_age=human_age,
        human_age_display=human_age_display,
        message=f"Your {query.species} ({query.breed}) is {human_age_display} human years old"
    )

def handle_not_found(query: AgeQuery) -> AgeResponse:
    logger.info("No aging data for pet", species=query.species, breed=query.breed)

    return AgeResponse(
        success=False,
        species=query.species,
        breed=query.breed,
        pet_age=query.pet_age,
        message=f"No aging data for {query.species} ({query.breed}). Please select a species and one of its breeds."
    )

def handle_out_of_range(query: AgeQuery) -> AgeResponse:
    logger.warning("Human age out of range", species=query.species, breed=query.breed, pet_age=query.pet_age)

    return AgeResponse(
        success=False,
        species=query.species,
        breed=query.breed,
        pet_age=query.pet_age,
        message=f"An age of {query.pet_age:g} years is too large to convert. Please enter a realistic age."
    )
