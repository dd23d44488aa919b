"""
In‑memory storage for every entity managed by the services.

Each entity type lives in a ``Collection``: an ordered list of
pydantic records that supports appending, filtered listing, "latest
match" lookup and keyed in‑place replacement.  A ``Store`` groups one
collection per entity type and owns the single lock that serialises
access to all of them.  Request handlers run on the event loop, but a
store may also be used from other threads (sync code, tests, scripts
seeding data), and the lock keeps a scan from interleaving with a
mutation there.

There is no persistence: a store lives as long as the application that
owns it.  Applications keep their store on ``app.state.store`` and
routes receive it through the ``get_store`` dependency.
"""

from __future__ import annotations

import threading
from typing import Any, Generic, List, Optional, TypeVar

from fastapi import Request
from pydantic import BaseModel

from .errors import DuplicateRecordError, RecordNotFoundError
from ..schemas.asset import Asset
from ..schemas.contribution import Contribution
from ..schemas.goal import Goal
from ..schemas.question import AssetQuestionAnswer, Question

T = TypeVar("T", bound=BaseModel)

# Demo holdings loaded into a fresh store unless seeding is disabled.
SEED_ASSETS = [
    Asset(id=1, type="Fundos Imobiliários", ticker="XPML11", price=100.95, percentage=3.97, score=6, quantity=50),
    Asset(id=2, type="Fundos Imobiliários", ticker="HFOF11", price=54.50, percentage=2.67, score=4, quantity=30),
    Asset(id=3, type="Ações Nacionais", ticker="ITUB4", price=31.64, percentage=1.83, score=13, quantity=200),
]


class Collection(Generic[T]):
    """Ordered collection of records of one entity type.

    ``unique_key`` names a field whose non‑empty values must be
    unique across the collection; appending a second record with the
    same value raises :class:`DuplicateRecordError`.
    """

    def __init__(self, name: str, lock: threading.RLock, unique_key: Optional[str] = None) -> None:
        self.name = name
        self.unique_key = unique_key
        self._lock = lock
        self._records: List[T] = []

    def append(self, record: T) -> T:
        with self._lock:
            if self.unique_key is not None:
                value = getattr(record, self.unique_key)
                if value not in (None, "") and self._index_of(self.unique_key, value) is not None:
                    raise DuplicateRecordError(
                        f"{self.name} with {self.unique_key} {value!r} already exists"
                    )
            self._records.append(record)
            return record

    def list_all(self, **filters: Any) -> List[T]:
        """Return records whose fields equal every non‑``None`` filter.

        Insertion order is preserved.  With no filters (or only
        ``None`` filters) every record is returned.
        """
        active = {field: value for field, value in filters.items() if value is not None}
        with self._lock:
            return [
                record
                for record in self._records
                if all(getattr(record, field) == value for field, value in active.items())
            ]

    def find_latest(self, field: str, value: Any) -> Optional[T]:
        """Return the last record appended whose ``field`` equals ``value``."""
        with self._lock:
            latest = None
            for record in self._records:
                if getattr(record, field) == value:
                    latest = record
            return latest

    def replace(self, field: str, value: Any, record: T) -> T:
        """Replace the first record whose ``field`` equals ``value``.

        The stored replacement carries ``value`` in ``field`` regardless
        of what the incoming record contained.  Raises
        :class:`RecordNotFoundError` and leaves the collection untouched
        when nothing matches.
        """
        with self._lock:
            index = self._index_of(field, value)
            if index is None:
                raise RecordNotFoundError(f"{self.name} with {field} {value!r} not found")
            stored = record.model_copy(update={field: value})
            self._records[index] = stored
            return stored

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _index_of(self, field: str, value: Any) -> Optional[int]:
        for index, record in enumerate(self._records):
            if getattr(record, field) == value:
                return index
        return None


class Store:
    """All collections of one service instance.

    ``asset_key`` is the field that identifies an asset for replacement
    and uniqueness: ``"id"`` for the planner service and ``"ticker"``
    for the portfolio service.
    """

    def __init__(self, asset_key: str = "id", seed: bool = False) -> None:
        self.asset_key = asset_key
        self.lock = threading.RLock()
        self.assets: Collection[Asset] = Collection("Asset", self.lock, unique_key=asset_key)
        self.contributions: Collection[Contribution] = Collection("Contribution", self.lock)
        self.goals: Collection[Goal] = Collection("Goal", self.lock)
        self.questions: Collection[Question] = Collection("Question", self.lock)
        self.answers: Collection[AssetQuestionAnswer] = Collection("AssetQuestionAnswer", self.lock)
        if seed:
            for asset in SEED_ASSETS:
                self.assets.append(asset.model_copy())


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store of the running application."""
    return request.app.state.store
