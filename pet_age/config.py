from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_AGING_DATA_PATH = PACKAGE_DIR / "data" / "pet_aging_data.json"

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra='allow')
    environment: str = "development"
    app_title: str = "Pet Age Calculator"
    app_version: str = "1.0.0"

    # Reference data
    aging_data_path: str = str(DEFAULT_AGING_DATA_PATH)

settings = Settings()
API_PREFIX = "/api/v1"
