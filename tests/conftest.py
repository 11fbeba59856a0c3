"""Shared fixtures for the pet age tests.

Puts the project root on ``sys.path`` so ``import pet_age`` and the
``check_aging_data`` script import when tests run from any directory.
"""

import json
import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from pet_age import dataset as dataset_module  # noqa: E402
from pet_age.models import AgingRecord  # noqa: E402


SAMPLE_ROWS = [
    {"species": "Dog", "breed": "Labrador", "firstPhaseYears": 2, "firstPhaseValue": 10.5, "laterPerYear": 4},
    {"species": "Cat", "breed": "Siamese", "firstPhaseYears": 2, "firstPhaseValue": 12, "laterPerYear": 4},
    {"species": "Dog", "breed": "Beagle", "firstPhaseYears": 2, "firstPhaseValue": 12, "laterPerYear": 4.5},
    {"species": "Rabbit", "breed": "Holland Lop", "firstPhaseYears": 1, "firstPhaseValue": 21, "laterPerYear": 6},
]


@pytest.fixture
def labrador_data():
    return (
        AgingRecord(species="Dog", breed="Labrador", first_phase_years=2, first_phase_value=10.5, later_per_year=4),
    )


@pytest.fixture
def sample_data():
    return dataset_module.parse_records(SAMPLE_ROWS)


@pytest.fixture
def sample_data_file(tmp_path):
    path = tmp_path / "pet_aging_data.json"
    path.write_text(json.dumps(SAMPLE_ROWS), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_loaded_dataset():
    dataset_module.reset_dataset()
    yield
    dataset_module.reset_dataset()
