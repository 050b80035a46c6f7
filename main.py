import logging

from fastapi import FastAPI
from config import get_settings
from routers.health import router as health_router
from routers.documents import router as documents_router

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# the Cosmos SDK logs full HTTP exchanges at INFO
logging.getLogger("azure").setLevel(logging.WARNING)

app = FastAPI(title="cosmos-doc-lookup")

# Routers
app.include_router(health_router)
app.include_router(documents_router)
