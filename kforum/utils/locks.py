# kforum/utils/locks.py
import asyncio
from contextlib import asynccontextmanager
from typing import Dict, Hashable


class KeyedLocks:
    """
    One asyncio.Lock per key, dropped once nobody holds or waits on it.
    Serializes read-modify-write per (user, day) inside this process; the Mongo
    filters in the controller cover multiple workers.
    """

    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._users: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                self._locks.pop(key, None)

    def __len__(self) -> int:
        return len(self._locks)
