"""Key/value storage adapters used to persist the theme preference."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class StorageUnavailableError(OSError):
    """Raised when client-side storage refuses a read or write."""


class PreferenceStorage(Protocol):
    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


@dataclass(frozen=True)
class PersistResult:
    """Outcome of a single storage write."""

    ok: bool
    error: Optional[BaseException] = None

    @classmethod
    def success(cls) -> "PersistResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: BaseException) -> "PersistResult":
        return cls(ok=False, error=error)


def persist(storage: PreferenceStorage, key: str, value: str) -> PersistResult:
    """Write *value* under *key*, reporting storage failures as a result."""

    try:
        storage.write(key, value)
    except OSError as exc:
        return PersistResult.failure(exc)
    return PersistResult.success()


class InMemoryStorage:
    """Dictionary backed storage.

    ``fail_reads`` and ``fail_writes`` make the storage behave like a browser
    with local storage disabled (private browsing, exhausted quota).
    """

    def __init__(
        self,
        initial: Optional[Dict[str, str]] = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = 0

    def read(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageUnavailableError("storage is not readable")
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageUnavailableError("storage quota exceeded")
        self._data[key] = value
        self.writes += 1

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class StateFieldStorage:
    """Expose one attribute of a state object as a single-key storage.

    The Reflex state keeps the local-storage value in a synced field; the
    browser performs the physical write once the state delta reaches it.
    """

    def __init__(self, owner: Any, field: str, key: str) -> None:
        self._owner = owner
        self._field = field
        self._key = key

    def _check_key(self, key: str) -> None:
        if key != self._key:
            raise KeyError(f"{key!r} is not bound to field {self._field!r}")

    def read(self, key: str) -> Optional[str]:
        self._check_key(key)
        value = getattr(self._owner, self._field, None)
        return value or None

    def write(self, key: str, value: str) -> None:
        self._check_key(key)
        setattr(self._owner, self._field, value)
        logger.debug("Queued %s=%s for client storage", key, value)


__all__ = [
    "InMemoryStorage",
    "PersistResult",
    "PreferenceStorage",
    "StateFieldStorage",
    "StorageUnavailableError",
    "persist",
]
