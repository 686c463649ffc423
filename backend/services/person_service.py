"""
Person Service — creation and startup seeding on top of the PersonStore.

Request validation has already happened by the time these functions run
(see ``models.person.NewPerson``), so they cannot fail.
"""

import logging

import uuid6

from api.person_store import PersonStore
from models.person import NewPerson, Person

logger = logging.getLogger(__name__)

SEED_PERSON = NewPerson(
    nome="Lucas Duarte",
    apelido="Lucas_Duarte_dev",
    nascimento="2000-08-31",
    stack=["NodeJs"],
)


def generate_person_id():
    """Return a fresh time-ordered UUID (version 7)."""
    return uuid6.uuid7()


async def create_person(store: PersonStore, new_person: NewPerson) -> Person:
    """Assign an id to a validated payload and store it."""
    person = Person.from_new(generate_person_id(), new_person)
    await store.insert(person)
    logger.debug("Created person %s (%s)", person.id, person.nickname)
    return person


async def seed_person_store(store: PersonStore) -> Person:
    """Insert the fixed startup record. Called once before serving traffic."""
    person = await create_person(store, SEED_PERSON)
    logger.info("Seed person id: %s", person.id)
    return person
