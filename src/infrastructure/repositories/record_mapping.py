"""
Field normalization between the hosted record API and canonical records

The hosted API spells identifiers as ``Id``/``Name``, uses camelCase for the
remaining fields and returns lookup fields as ``{"Id": 3, "Name": "Mains"}``.
Everything past this module sees snake_case and plain ids only.
"""

import re
from typing import Any, Dict

from src.domain.repositories.record_store import Collection, Record

_BACKEND_ALIASES = {"Id": "id", "Name": "name"}
_CANONICAL_ALIASES = {value: key for key, value in _BACKEND_ALIASES.items()}

# Fields the backend stores as lookups to another collection
LOOKUP_FIELDS = {"category_id", "customer_id"}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _lookup_id(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("Id", value.get("id"))
    return value


def _canonical_value(value: Any) -> Any:
    if isinstance(value, dict):
        return to_canonical(value)
    if isinstance(value, list):
        return [_canonical_value(item) for item in value]
    return value


def _backend_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {snake_to_camel(key): _backend_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_backend_value(item) for item in value]
    return value


def to_canonical(record: Dict[str, Any]) -> Record:
    """Backend record -> canonical record"""
    canonical: Record = {}
    for key, value in record.items():
        name = _BACKEND_ALIASES.get(key) or camel_to_snake(key)
        if name in LOOKUP_FIELDS:
            canonical[name] = _lookup_id(value)
        else:
            canonical[name] = _canonical_value(value)
    return canonical


def to_backend(collection: Collection, fields: Record) -> Dict[str, Any]:
    """Canonical record -> backend record"""
    payload: Dict[str, Any] = {}
    for key, value in fields.items():
        name = _CANONICAL_ALIASES.get(key) or snake_to_camel(key)
        payload[name] = _backend_value(value)

    # Orders carry a display Name on the backend
    if Collection(collection) is Collection.ORDER and "customer_name" in fields:
        payload.setdefault("Name", fields["customer_name"])
    return payload
