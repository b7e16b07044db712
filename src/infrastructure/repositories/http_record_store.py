"""
HTTP Record Store

RecordStore backed by the hosted record API. Every response uses the same
envelope::

    {"success": bool, "message": str, "data": ..., "results": [
        {"success": bool, "data": {...}, "message": str,
         "errors": [{"fieldLabel": str, "message": str}]}
    ]}

Transport failures and ``success: false`` envelopes become PersistenceError;
field spellings are normalized by ``record_mapping``.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from src.domain.repositories.record_store import Collection, Record, RecordStore, SortSpec
from src.infrastructure.repositories.record_mapping import (
    snake_to_camel,
    to_backend,
    to_canonical,
)
from src.infrastructure.utilities.constants import RecordStoreSettings
from src.infrastructure.utilities.exceptions import NotFoundError, PersistenceError

# Backend table names that differ from the collection name
BACKEND_TABLES = {Collection.CUSTOMER: "app_Customer"}


class HttpRecordStore(RecordStore):
    """httpx implementation of RecordStore"""

    def __init__(
        self,
        base_url: str,
        project_id: str = "",
        public_key: str = "",
        timeout: float = RecordStoreSettings.DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={
                "X-Project-Id": project_id,
                "X-Public-Key": public_key,
                "Accept": "application/json",
            },
        )
        self._logger = logging.getLogger(self.__class__.__name__)

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _table(collection: Collection) -> str:
        collection = Collection(collection)
        return BACKEND_TABLES.get(collection, collection.value)

    async def _send(self, method: str, url: str, operation: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self._logger.error("💥 RECORD API UNREACHABLE during %s: %s", operation, e)
            raise PersistenceError(f"Record API request failed during {operation}: {e}", operation) from e

    def _envelope(self, response: httpx.Response, operation: str) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise PersistenceError(
                f"Record API returned a non-JSON response ({response.status_code}) during {operation}",
                operation,
            ) from e

        if response.is_error or not body.get("success", False):
            message = body.get("message") or f"HTTP {response.status_code}"
            self._logger.error("💥 RECORD API ERROR during %s: %s", operation, message)
            raise PersistenceError(message, operation)
        return body

    def _first_result(self, body: Dict[str, Any], operation: str) -> Record:
        """Single-record write: surface the first failed result's errors"""
        results = body.get("results") or []
        failed = [result for result in results if not result.get("success")]
        if failed:
            result = failed[0]
            errors = result.get("errors") or []
            if errors:
                message = "; ".join(
                    f"{error.get('fieldLabel')}: {error.get('message')}" for error in errors
                )
            else:
                message = result.get("message") or "Record rejected"
            self._logger.error("💥 RECORD REJECTED during %s: %s", operation, message)
            raise PersistenceError(message, operation)

        succeeded = [result for result in results if result.get("success")]
        if not succeeded or not succeeded[0].get("data"):
            raise PersistenceError(f"Record API returned no record during {operation}", operation)
        return to_canonical(succeeded[0]["data"])

    async def list(
        self,
        collection: Collection,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[Record]:
        operation = f"list {Collection(collection).value}"
        params: Dict[str, Any] = {}
        if filters:
            params["where"] = [
                {"FieldName": snake_to_camel(key), "Operator": "EqualTo", "Values": [value]}
                for key, value in filters.items()
            ]
        if sort:
            params["orderBy"] = [
                {"fieldName": snake_to_camel(spec.field), "sorttype": "DESC" if spec.descending else "ASC"}
                for spec in sort
            ]

        response = await self._send("POST", f"/{self._table(collection)}/fetch", operation, json=params)
        body = self._envelope(response, operation)
        return [to_canonical(record) for record in body.get("data") or []]

    async def get_by_id(self, collection: Collection, record_id: int) -> Optional[Record]:
        operation = f"get {Collection(collection).value}"
        response = await self._send("GET", f"/{self._table(collection)}/{int(record_id)}", operation)
        if response.status_code == 404:
            return None
        body = self._envelope(response, operation)
        data = body.get("data")
        return to_canonical(data) if data else None

    async def create(self, collection: Collection, fields: Record) -> Record:
        operation = f"create {Collection(collection).value}"
        payload = to_backend(collection, {k: v for k, v in fields.items() if k != "id"})
        response = await self._send(
            "POST", f"/{self._table(collection)}", operation, json={"records": [payload]}
        )
        record = self._first_result(self._envelope(response, operation), operation)
        self._logger.info("🆕 RECORD CREATED: %s #%s", Collection(collection).value, record.get("id"))
        return record

    async def update(self, collection: Collection, record_id: int, fields: Record) -> Record:
        operation = f"update {Collection(collection).value}"
        payload = to_backend(collection, {k: v for k, v in fields.items() if k != "id"})
        payload["Id"] = int(record_id)
        response = await self._send(
            "PUT", f"/{self._table(collection)}", operation, json={"records": [payload]}
        )
        if response.status_code == 404:
            raise NotFoundError(f"{Collection(collection).value} {record_id} not found")
        return self._first_result(self._envelope(response, operation), operation)

    async def delete(self, collection: Collection, record_id: int) -> bool:
        operation = f"delete {Collection(collection).value}"
        response = await self._send(
            "DELETE",
            f"/{self._table(collection)}",
            operation,
            json={"RecordIds": [int(record_id)]},
        )
        if response.status_code == 404:
            raise NotFoundError(f"{Collection(collection).value} {record_id} not found")
        body = self._envelope(response, operation)

        failed = [result for result in body.get("results") or [] if not result.get("success")]
        if failed:
            message = failed[0].get("message") or "Delete rejected"
            raise PersistenceError(message, operation)
        return True
