"""Check the pet aging reference data file - Standalone Script"""

import sys
from collections import Counter
from dotenv import load_dotenv

from pet_age.dataset import DatasetError, read_records

# Load environment variables
load_dotenv()

def check_aging_data(path: str) -> bool:
    """Validate aging data and print a per-species summary"""
    try:
        records = read_records(path)
    except DatasetError as e:
        print(f"Error: {e}")
        return False

    print(f"Loaded {len(records)} aging records from {path}")

    species_counts = Counter(record.species for record in records)
    for species, count in species_counts.items():
        print(f"  {species}: {count} breeds")

    print(f"Total species: {len(species_counts)}")
    return True

if __name__ == "__main__":
    from pet_age.config import settings

    data_path = sys.argv[1] if len(sys.argv) > 1 else settings.aging_data_path
    sys.exit(0 if check_aging_data(data_path) else 1)
