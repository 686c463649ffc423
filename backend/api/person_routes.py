"""
REST API routes for person records.

Endpoints:
    GET  /pessoas            — Search placeholder (no filtering)
    GET  /pessoas/{id}       — Get a specific person
    POST /pessoas            — Create a person
    GET  /contagem-pessoas   — Number of stored people
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from api.person_store import PersonStore
from models.person import NewPerson, Person
from services.person_service import create_person

logger = logging.getLogger(__name__)

person_router = APIRouter()


def get_person_store(request: Request) -> PersonStore:
    """Dependency that returns the store created in the app lifespan."""
    return request.app.state.person_store


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@person_router.get("/pessoas", response_class=PlainTextResponse)
async def search_people(store: PersonStore = Depends(get_person_store)):
    """Search stub. Always answers with the same acknowledgement."""
    return store.search()


@person_router.get("/pessoas/{person_id}", response_model=Person)
async def get_single_person(
    person_id: uuid.UUID,
    store: PersonStore = Depends(get_person_store),
):
    """Retrieve a person by id. Malformed ids are rejected with 422."""
    person = await store.get(person_id)
    if person is None:
        logger.debug("Person %s not found", person_id)
        raise HTTPException(status_code=404, detail=f"Person '{person_id}' not found.")
    return person


# Answers 200 rather than 201 on purpose.
@person_router.post("/pessoas", response_model=Person, status_code=200)
async def create_new_person(
    request: NewPerson,
    store: PersonStore = Depends(get_person_store),
):
    """Create a person. Over-long fields are rejected with 422 before any write."""
    return await create_person(store, request)


@person_router.get("/contagem-pessoas", response_model=int)
async def count_people(store: PersonStore = Depends(get_person_store)):
    """Number of stored people, seed record included."""
    return await store.count()
