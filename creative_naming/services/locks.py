"""In-process FIFO locks that serialize ID allocation per sheet.

Only one "read last ID -> append row" sequence may run at a time for a
given sheet. Locks live in a LockRegistry owned by the caller; they give
no guarantee across processes or service instances.
"""

import asyncio
from collections import deque
from contextlib import asynccontextmanager
from typing import Callable


class RowLock:
    """Cooperative async lock with FIFO hand-off.

    On release, ownership passes directly to the oldest waiter, so the lock
    never reads as free while anyone is queued.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._held = False
        self._waiters: deque[asyncio.Future] = deque()

    @property
    def locked(self) -> bool:
        return self._held

    @property
    def waiting(self) -> int:
        return sum(1 for w in self._waiters if not w.done())

    async def acquire(self) -> None:
        """Return once the caller is the sole holder."""
        if not self._held:
            self._held = True
            return

        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                # Never got ownership
                if waiter in self._waiters:
                    self._waiters.remove(waiter)
            else:
                # Ownership was handed over before the cancel landed: pass it on
                self.release()
            raise

    def release(self) -> None:
        """Wake the next waiter, or mark the lock free."""
        if not self._held:
            raise RuntimeError(f"Lock {self.name!r} released while not held")
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)
                return
        self._held = False

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.release()


class LockRegistry:
    """Maps resource keys (one per sheet) to independent locks.

    lock_factory can be swapped for a lock backed by shared storage; callers
    only rely on acquire/release and async context management.
    """

    def __init__(self, lock_factory: Callable[[str], RowLock] = RowLock):
        self._lock_factory = lock_factory
        self._locks: dict[str, RowLock] = {}

    def get(self, resource: str) -> RowLock:
        if resource not in self._locks:
            self._locks[resource] = self._lock_factory(resource)
        return self._locks[resource]

    @asynccontextmanager
    async def hold(self, resource: str):
        """Hold the resource's lock for the duration of the block."""
        lock = self.get(resource)
        await lock.acquire()
        try:
            yield lock
        finally:
            lock.release()
