"""
Base repository class with common CRUD operations against the hosted record store.
Provides generic select/insert/update/delete calls that can be extended by specific repositories.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel, ValidationError
from supabase import PostgrestAPIError

from rentease.utils.exceptions import RemoteCallError

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)


class BaseRepository(Generic[RecordType]):
    """
    Base repository class providing common CRUD operations.
    Every remote failure is logged and re-raised as RemoteCallError.
    """

    def __init__(self, table_name: str, record_type: Type[RecordType], client: Any):
        """
        Initialize repository with collection name, record type and backend client.

        Args:
            table_name: Name of the collection in the record store
            record_type: Pydantic record class rows are parsed into
            client: Async Supabase client (anonymous or session-bound)
        """
        self.table_name = table_name
        self.record_type = record_type
        self.client = client

    def _table(self):
        return self.client.table(self.table_name)

    async def _execute(self, query: Any, action: str) -> List[Dict[str, Any]]:
        """Run a prepared query, translating backend failures."""
        try:
            response = await query.execute()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"Failed to {action} {self.table_name}: {e}")
            raise RemoteCallError(self.table_name, action, str(e)) from e

        data = getattr(response, "data", None) or []
        if isinstance(data, dict):
            data = [data]
        return data

    def _parse(self, rows: List[Dict[str, Any]]) -> List[RecordType]:
        """Parse rows into records, skipping rows that do not fit the record type."""
        records = []
        for row in rows:
            try:
                records.append(self.record_type.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed {self.table_name} row {row.get('id')}: {e.error_count()} error(s)"
                )
        return records

    def _first(self, rows: List[Dict[str, Any]]) -> Optional[RecordType]:
        records = self._parse(rows)
        return records[0] if records else None

    async def get_multi(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        columns: str = "*"
    ) -> List[RecordType]:
        """
        Get multiple records with optional equality filters and ordering.

        Args:
            filters: Dictionary of column equality filters
            order_by: Column to order by (prefix with '-' for descending)
            columns: Select expression, may embed related collections

        Returns:
            List of records
        """
        query = self._table().select(columns)

        for field, value in (filters or {}).items():
            query = query.eq(field, value)

        if order_by:
            query = query.order(order_by.lstrip("-"), desc=order_by.startswith("-"))

        rows = await self._execute(query, "select")
        logger.debug(f"Retrieved {len(rows)} rows from {self.table_name}")
        return self._parse(rows)

    async def get_by_id(self, id: str, columns: str = "*") -> Optional[RecordType]:
        """
        Get a record by its ID.

        Returns:
            Record if found, None otherwise
        """
        query = self._table().select(columns).eq("id", id).limit(1)
        rows = await self._execute(query, "select")

        if not rows:
            logger.debug(f"{self.table_name} row with id {id} not found")
            return None
        return self._first(rows)

    async def create(self, obj_in: Dict[str, Any]) -> Optional[RecordType]:
        """
        Insert a new record.

        Returns:
            Created record as returned by the store, if any
        """
        rows = await self._execute(self._table().insert(obj_in), "insert")
        logger.debug(f"Inserted row into {self.table_name}")
        return self._first(rows)

    async def update(
        self,
        id: str,
        obj_in: Dict[str, Any],
        scope: Optional[Dict[str, Any]] = None
    ) -> Optional[RecordType]:
        """
        Update a record by ID, optionally narrowed by extra equality filters.

        Returns:
            Updated record, or None if no row matched
        """
        query = self._table().update(obj_in).eq("id", id)
        for field, value in (scope or {}).items():
            query = query.eq(field, value)

        rows = await self._execute(query, "update")
        return self._first(rows)

    async def delete(self, id: str, scope: Optional[Dict[str, Any]] = None) -> bool:
        """
        Delete a record by ID, optionally narrowed by extra equality filters.

        Returns:
            True if a row was deleted
        """
        query = self._table().delete().eq("id", id)
        for field, value in (scope or {}).items():
            query = query.eq(field, value)

        rows = await self._execute(query, "delete")
        if rows:
            logger.debug(f"Deleted {self.table_name} row with id: {id}")
        return bool(rows)
