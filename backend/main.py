"""
Pessoas API — FastAPI application entrypoint.

Start the server:
    python main.py                  (port from $PORT, default 9999)
    uvicorn main:app --port 9999

API Overview:
    GET    /pessoas            — Search placeholder
    GET    /pessoas/{id}       — Get a specific person
    POST   /pessoas            — Create a person
    GET    /contagem-pessoas   — Count stored people
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.person_routes import person_router
from api.person_store import PersonStore
from config import HOST, LOG_LEVEL, get_port
from logging_config import setup_logging
from services.person_service import seed_person_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build and seed the store before serving."""
    setup_logging(LOG_LEVEL)
    logger.info("Pessoas API starting up...")
    app.state.person_store = PersonStore()
    app.state.seed_person = await seed_person_store(app.state.person_store)
    yield
    logger.info("Pessoas API shutting down...")


app = FastAPI(
    title="Pessoas API",
    description="In-memory person registry: create, fetch by id and count.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(person_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=get_port())
