"""Record store protocol (port).

Generic CRUD over named collections of JSON-like records. The store is an
external collaborator; every failure comes back as a StoreError value.

Implementations:
    - SupabaseRecordStore: PostgREST over httpx
    - InMemoryRecordStore: process-local dictionaries
"""

from typing import Any, Protocol, Self

from taskhub.core.result import Result
from taskhub.domain.enums import Collection
from taskhub.domain.errors import StoreError
from taskhub.domain.value_objects import RecordQuery

type Record = dict[str, Any]


class RecordStoreProtocol(Protocol):
    """CRUD operations on store collections.

    Records are plain dicts keyed by column name. Dates and timestamps travel
    as ISO 8601 strings; mapping to entities belongs to the repositories.
    """

    async def select(
        self, collection: Collection, query: RecordQuery | None = None
    ) -> Result[list[Record], StoreError]:
        """Return the records matching ``query`` (all records when None)."""
        ...

    async def insert(self, collection: Collection, record: Record) -> Result[Record, StoreError]:
        """Insert one record and return it as stored (with generated fields)."""
        ...

    async def update(
        self, collection: Collection, record_id: str, patch: Record
    ) -> Result[Record, StoreError]:
        """Apply ``patch`` to the record with ``record_id``.

        Returns:
            The updated record, or StoreError with code RECORD_NOT_FOUND when
            no record has that id.
        """
        ...

    async def delete(self, collection: Collection, record_id: str) -> Result[None, StoreError]:
        """Delete the record with ``record_id``. Deleting a missing id succeeds."""
        ...

    def bind_token(self, access_token: str | None) -> Self:
        """Return a store that acts on behalf of ``access_token``.

        Remote stores forward the token so their own row-level rules apply.
        Stores without such rules may return themselves.
        """
        ...
