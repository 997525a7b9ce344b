"""
Fake Entry Collection

In-memory stand-in for the subset of the pymongo Collection API the entry
repository uses: update_one (upsert with $setOnInsert/$currentDate), find
with sort, find_one, delete_one and create_index.
"""
import copy
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from pymongo.errors import ServerSelectionTimeoutError


class StepClock:
    """Server clock that advances a fixed step on every reading."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        value = self._next
        self._next = value + self._step
        return value

    def set(self, value: datetime) -> None:
        self._next = value


class _FakeCursor:
    def __init__(self, docs: List[Dict[str, Any]]):
        self._docs = docs

    def sort(self, keys: Sequence[Tuple[str, int]]) -> "_FakeCursor":
        # Stable sorts applied from the least significant key
        for field, direction in reversed(list(keys)):
            self._docs.sort(key=lambda doc: doc[field], reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(copy.deepcopy(self._docs))


class FakeEntryCollection:
    """
    In-memory entries collection.

    Operations named in `failing` raise a PyMongoError, emulating an
    unreachable server.
    """

    def __init__(self, clock: Optional[StepClock] = None):
        self.docs: Dict[Any, Dict[str, Any]] = {}
        self.indexes: List[Tuple[list, dict]] = []
        self.failing: Set[str] = set()
        self._clock = clock or StepClock(datetime(2024, 1, 1))

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise ServerSelectionTimeoutError(f"{operation}: no servers available")

    @staticmethod
    def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(doc.get(key) == value for key, value in query.items())

    def insert_raw(self, doc: Dict[str, Any]) -> None:
        """Seed a document directly, bypassing the repository."""
        self.docs[doc["_id"]] = copy.deepcopy(doc)

    def update_one(self, query: Dict[str, Any], update: Dict[str, Any], upsert: bool = False):
        self._maybe_fail("update_one")
        existing = next((doc for doc in self.docs.values() if self._matches(doc, query)), None)
        if existing is not None:
            raise AssertionError("entries are never updated in place")
        if not upsert:
            return None

        doc = dict(query)
        doc.update(update.get("$setOnInsert", {}))
        for field in update.get("$currentDate", {}):
            doc[field] = self._clock()
        self.docs[doc["_id"]] = doc
        return None

    def find(self, query: Dict[str, Any]) -> _FakeCursor:
        self._maybe_fail("find")
        return _FakeCursor([doc for doc in self.docs.values() if self._matches(doc, query)])

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._maybe_fail("find_one")
        for doc in self.docs.values():
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def delete_one(self, query: Dict[str, Any]):
        self._maybe_fail("delete_one")
        for key, doc in list(self.docs.items()):
            if self._matches(doc, query):
                del self.docs[key]
                break
        return None

    def create_index(self, keys: list, **kwargs) -> str:
        self._maybe_fail("create_index")
        self.indexes.append((keys, kwargs))
        return kwargs.get("name", "index")
