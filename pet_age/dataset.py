# pet_age/dataset.py
"""Reference aging data: load once, read many"""

import json
import threading
from collections import Counter
from typing import Any, List, Optional, Tuple
from pydantic import TypeAdapter, ValidationError
from pet_age.config import settings
from pet_age.models import AgingRecord
import structlog

logger = structlog.get_logger()

_records_adapter = TypeAdapter(List[AgingRecord])

class DatasetError(Exception):
    """Raised when the aging data file is missing or malformed"""

class AgingData:
    records: Optional[Tuple[AgingRecord, ...]] = None
    source = None
    loaded = False

aging_data = AgingData()
_load_lock = threading.Lock()

def parse_records(raw: Any) -> Tuple[AgingRecord, ...]:
    """Validate raw JSON rows into an immutable tuple of records"""
    try:
        records = tuple(_records_adapter.validate_python(raw))
    except ValidationError as e:
        raise DatasetError(f"Invalid aging data: {e.error_count()} error(s)\n{e}") from e

    for record in records:
        if min(record.first_phase_years, record.first_phase_value, record.later_per_year) <= 0:
            logger.warning("Non-positive aging values", species=record.species, breed=record.breed)

    key_counts = Counter((record.species, record.breed) for record in records)
    for (species, breed), count in key_counts.items():
        if count > 1:
            logger.warning("Duplicate aging record, first one wins", species=species, breed=breed, count=count)

    return records

def read_records(path: str) -> Tuple[AgingRecord, ...]:
    """Read and validate an aging data JSON file"""
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise DatasetError(f"Cannot read aging data from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Aging data at {path} is not valid JSON: {e}") from e
    return parse_records(raw)

def load_aging_data(path: Optional[str] = None) -> Tuple[AgingRecord, ...]:
    """Load the aging data once; later calls return the loaded records"""
    if aging_data.loaded:
        return aging_data.records

    with _load_lock:
        if not aging_data.loaded:
            source = path or settings.aging_data_path
            aging_data.records = read_records(source)
            aging_data.source = source
            aging_data.loaded = True
            logger.info("Loaded aging data", records=len(aging_data.records), path=source)

    return aging_data.records

def get_dataset() -> Tuple[AgingRecord, ...]:
    """Get the aging data, loading it on first use"""
    return load_aging_data()

def is_ready() -> bool:
    return aging_data.loaded

def reset_dataset():
    """Forget the loaded records so the next call reloads them"""
    with _load_lock:
        aging_data.records = None
        aging_data.source = None
        aging_data.loaded = False
