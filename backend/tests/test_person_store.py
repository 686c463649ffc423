"""Tests for the in-memory PersonStore."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio
import uuid
from datetime import date

import pytest

from api.person_store import SEARCH_ACKNOWLEDGEMENT, PersonStore
from models.person import Person


def make_person(nickname="ana123", person_id=None):
    return Person(
        id=person_id or uuid.uuid4(),
        name="Ana",
        nickname=nickname,
        birth_date=date(1990, 1, 1),
        stack=["Go"],
    )


class TestPersonStore:
    @pytest.mark.asyncio
    async def test_insert_and_get(self):
        store = PersonStore()
        person = make_person()
        await store.insert(person)

        stored = await store.get(person.id)
        assert stored == person

    @pytest.mark.asyncio
    async def test_get_nonexistent_returns_none(self):
        store = PersonStore()
        assert await store.get(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_count_starts_empty(self):
        assert await PersonStore().count() == 0

    @pytest.mark.asyncio
    async def test_insert_same_id_overwrites(self):
        store = PersonStore()
        person_id = uuid.uuid4()
        await store.insert(make_person("first", person_id))
        await store.insert(make_person("second", person_id))

        assert await store.count() == 1
        assert (await store.get(person_id)).nickname == "second"

    @pytest.mark.asyncio
    async def test_duplicate_nicknames_allowed(self):
        store = PersonStore()
        await store.insert(make_person("same"))
        await store.insert(make_person("same"))
        assert await store.count() == 2

    @pytest.mark.asyncio
    async def test_concurrent_inserts_are_all_kept(self):
        store = PersonStore()
        people = [make_person(f"user{i}") for i in range(200)]

        await asyncio.gather(*(store.insert(p) for p in people))

        assert await store.count() == 200
        for person in people:
            assert await store.get(person.id) == person

    @pytest.mark.asyncio
    async def test_concurrent_reads_and_writes(self):
        store = PersonStore()
        people = [make_person(f"user{i}") for i in range(50)]

        results = await asyncio.gather(
            *(store.insert(p) for p in people),
            *(store.count() for _ in range(50)),
        )

        counts = results[50:]
        assert all(0 <= c <= 50 for c in counts)
        assert await store.count() == 50

    def test_search_returns_acknowledgement(self):
        store = PersonStore()
        assert store.search() == SEARCH_ACKNOWLEDGEMENT
        assert store.search("python") == "Busca Pessoa por ID"
