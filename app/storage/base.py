"""Record store contract shared by the remote and local backends.

Records cross this boundary as plain dicts in wire shape (camelCase keys,
string ``id``, integer millisecond timestamps). Both backends must accept
and return the same shape.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple

Record = Dict[str, Any]

# (field, direction) pairs; 1 is ascending, -1 descending
SortSpec = Sequence[Tuple[str, int]]

ASCENDING = 1
DESCENDING = -1


class RecordStore(Protocol):
    """Capability offered by a storage backend over named collections."""

    name: str

    async def insert(self, collection: str, record: Record) -> Record:
        """Persist a new record and return it as stored."""
        ...

    async def find(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Return records whose fields equal every filter value."""
        ...

    async def get(self, collection: str, record_id: str) -> Optional[Record]:
        """Return the record with the given id, or None."""
        ...

    async def update(
        self, collection: str, record_id: str, fields: Dict[str, Any]
    ) -> bool:
        """Merge fields into a record. Returns False if nothing matched."""
        ...

    async def delete(self, collection: str, record_id: str) -> bool:
        """Remove a record. Returns False if nothing matched."""
        ...

    async def count(self, collection: str) -> int:
        """Return number of records in a collection."""
        ...


def sort_records(records: List[Record], sort: Optional[SortSpec]) -> List[Record]:
    """Sort records in memory by a multi-key sort specification.

    Missing or null values sort after present ones in ascending order. When
    a field holds values of incomparable types, that field compares by text.
    """
    result = list(records)
    if not sort:
        return result
    # Stable sorts applied from least to most significant key
    for field, direction in reversed(list(sort)):
        reverse = direction == DESCENDING
        try:
            result = sorted(result, key=_sort_key(field), reverse=reverse)
        except TypeError:
            result = sorted(result, key=_sort_key(field, str), reverse=reverse)
    return result


def _sort_key(field: str, convert: Callable[[Any], Any] = lambda value: value):
    def key(record: Record) -> Tuple[bool, Any]:
        value = record.get(field)
        return (value is None, None if value is None else convert(value))

    return key


def matches(record: Record, filters: Optional[Dict[str, Any]]) -> bool:
    """Check whether a record equals every filter value."""
    if not filters:
        return True
    return all(record.get(key) == value for key, value in filters.items())
