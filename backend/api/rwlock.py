"""
Async reader/writer lock for the person store.

Any number of readers may hold the lock at once; a writer holds it alone.
Once a writer is waiting, new readers queue behind it so a steady stream of
lookups cannot starve inserts. The lock is not re-entrant.

Usage:
    lock = AsyncRWLock()

    async with lock.read_lock():
        person = people.get(person_id)

    async with lock.write_lock():
        people[person.id] = person
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class AsyncRWLock:
    """Multiple concurrent readers or one exclusive writer, never both."""

    def __init__(self) -> None:
        self._readers = 0
        self._writers_waiting = 0
        self._writer_active = False
        self._cond = asyncio.Condition()

    @asynccontextmanager
    async def read_lock(self) -> AsyncIterator[None]:
        """Acquire shared access. Waits while a writer is active or waiting."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write_lock(self) -> AsyncIterator[None]:
        """Acquire exclusive access. Waits for all readers and writers to leave."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            except BaseException:
                # Readers parked behind this writer must re-check.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer_active = False
                self._cond.notify_all()

    @property
    def reader_count(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer_active
