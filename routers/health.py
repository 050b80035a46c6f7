from fastapi import APIRouter
from config import get_settings

router = APIRouter()

@router.get("/health")
def health_basic():
    return {"status": "ok"}

@router.get("/health/deep")
def health_deep():
    # No Cosmos ping here: credentials only ever arrive with a lookup request.
    settings = get_settings()
    return {
        "status": "ok",
        "checks": {"env": "ok"},
        "env": settings.env,
        "validation_mode": settings.validation_mode,
        "not_found_status": settings.not_found_status,
    }
