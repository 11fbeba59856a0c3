# pet_age/main.py
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from pet_age.config import settings, API_PREFIX
from pet_age import dataset
from pet_age.dataset import DatasetError
from pet_age.models import AgeQuery, AgeResponse, BreedsResponse, SpeciesResponse
from pet_age.handlers import calculator_handler
import structlog

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        dataset.load_aging_data()
    except DatasetError as e:
        logger.warning("Aging data unavailable, continuing without it", error=str(e))
    yield

app = FastAPI(title=settings.app_title, version=settings.app_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def require_dataset():
    try:
        return dataset.get_dataset()
    except DatasetError as e:
        logger.error("Aging data could not be loaded", error=str(e))
        raise HTTPException(status_code=503, detail="Aging data unavailable")

@app.get(f"{API_PREFIX}/species", response_model=SpeciesResponse)
async def species():
    return calculator_handler.handle_species(require_dataset())

@app.get(f"{API_PREFIX}/breeds", response_model=BreedsResponse)
async def breeds(species: str):
    return calculator_handler.handle_breeds(species, require_dataset())

@app.post(f"{API_PREFIX}/age", response_model=AgeResponse)
async def calculate_age(query: AgeQuery):
    try:
        return calculator_handler.handle_age(query, require_dataset())
    except HTTPException:
        raise
    except Exception:
        logger.exception("Age calculation failed", species=query.species, breed=query.breed)
        raise HTTPException(status_code=500, detail="Internal server error")

@app.get("/")
async def root():
    return {"message": settings.app_title, "status": "active"}

@app.get("/health")
async def health():
    ready = dataset.is_ready()
    return {
        "status": "healthy" if ready else "degraded",
        "services": {
            "aging_data": "ready" if ready else "unavailable"
        },
        "records": len(dataset.aging_data.records) if ready else 0
    }
