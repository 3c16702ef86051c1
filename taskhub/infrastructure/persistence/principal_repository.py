"""PrincipalRepository: `users` profiles over a record store.

Implements the PrincipalRepository protocol structurally.
"""

from collections.abc import Iterable
from typing import Any

from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Principal
from taskhub.domain.enums import Collection, UserRole
from taskhub.domain.errors import StoreError
from taskhub.domain.protocols import RecordStoreProtocol
from taskhub.domain.value_objects import RecordQuery
from taskhub.infrastructure.persistence.mappers import (
    map_record,
    map_records,
    principal_from_record,
    principal_to_record,
    to_store_patch,
)

COLLECTION = Collection.USERS


class PrincipalRepository:
    """Principal profiles stored in the `users` collection.

    Attributes:
        _store: Record store the profiles live in.
    """

    def __init__(self, store: RecordStoreProtocol) -> None:
        self._store = store

    async def find_by_id(self, principal_id: str) -> Result[Principal | None, StoreError]:
        query = RecordQuery().where_eq("id", principal_id).limited(1)
        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=[]):
                return Success(value=None)
            case Success(value=[record, *_]):
                return map_record(record, principal_from_record, COLLECTION)

    async def list_by_roles(
        self, roles: Iterable[UserRole], *, active_only: bool = False
    ) -> Result[list[Principal], StoreError]:
        query = RecordQuery().where_in("role", [role.value for role in roles])
        if active_only:
            query = query.where_eq("is_active", True)
        query = query.order_by("full_name")

        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=records):
                return map_records(records, principal_from_record, COLLECTION)

    async def count_by_role(self, role: UserRole) -> Result[int, StoreError]:
        query = RecordQuery().where_eq("role", role.value).selecting("id")
        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=records):
                return Success(value=len(records))

    async def add(self, principal: Principal) -> Result[Principal, StoreError]:
        match await self._store.insert(COLLECTION, principal_to_record(principal)):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                return map_record(record, principal_from_record, COLLECTION)

    async def update(
        self, principal_id: str, changes: dict[str, Any]
    ) -> Result[Principal, StoreError]:
        match await self._store.update(COLLECTION, principal_id, to_store_patch(changes)):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                return map_record(record, principal_from_record, COLLECTION)
