"""
In-memory person store.

Holds every Person the process knows about, keyed by id. Reads (get, count)
share the lock; inserts take it exclusively. The lock only covers the dict
operation itself, never response serialization. Nothing is persisted.
"""

import uuid
from typing import Dict, Optional

from api.rwlock import AsyncRWLock
from models.person import Person

SEARCH_ACKNOWLEDGEMENT = "Busca Pessoa por ID"


class PersonStore:
    """Concurrency-safe in-memory mapping of person id to Person."""

    def __init__(self) -> None:
        self._store: Dict[uuid.UUID, Person] = {}
        self._lock = AsyncRWLock()

    async def get(self, person_id: uuid.UUID) -> Optional[Person]:
        async with self._lock.read_lock():
            return self._store.get(person_id)

    async def insert(self, person: Person) -> None:
        async with self._lock.write_lock():
            self._store[person.id] = person

    async def count(self) -> int:
        async with self._lock.read_lock():
            return len(self._store)

    def search(self, criteria: Optional[str] = None) -> str:
        """Placeholder: no filtering happens, ``criteria`` is ignored."""
        return SEARCH_ACKNOWLEDGEMENT
