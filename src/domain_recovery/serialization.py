"""
Conversion of engine output records to plain JSON-compatible data.

Dataclasses become dicts, tuples become lists, enums become their values
and datetimes become ISO-8601 strings.
"""

import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> Any:
    """
    Recursively convert a record into plain nested dicts and lists.

    Args:
        obj: Dataclass instance, container, enum, date or scalar

    Returns:
        JSON-compatible structure
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {str(key): to_dict(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    return obj


def to_json(obj: Any, indent: int = 2) -> str:
    """Serialize a record to a JSON string."""
    return json.dumps(to_dict(obj), indent=indent, ensure_ascii=False)
