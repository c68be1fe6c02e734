from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import BaseModel

from .errors import HarvestEncodeOptionsError
from .models.base import QueryParam
from .values import format_timestamp


def _query_param(field_info: Any) -> Optional[QueryParam]:
    for item in field_info.metadata:
        if isinstance(item, QueryParam):
            return item
    return None


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _encode_scalar(key: str, value: Any, values: List[Tuple[str, str]]) -> None:
    hook = getattr(value, "encode_values", None)
    if callable(hook):
        hook(key, values)
    elif value is None:
        values.append((key, ""))
    elif isinstance(value, Enum):
        _encode_scalar(key, value.value, values)
    elif isinstance(value, bool):
        values.append((key, "true" if value else "false"))
    elif isinstance(value, _dt.datetime):
        values.append((key, format_timestamp(value)))
    elif isinstance(value, _dt.date):
        values.append((key, value.isoformat()))
    elif isinstance(value, (str, int, float)):
        values.append((key, str(value)))
    else:
        raise HarvestEncodeOptionsError(
            f"cannot encode {type(value).__name__} as query parameter {key!r}"
        )


def encode_options(opts: BaseModel) -> List[Tuple[str, str]]:
    """Flatten an options model into sorted (name, value) query pairs."""
    if not isinstance(opts, BaseModel):
        raise HarvestEncodeOptionsError(
            f"options must be a model instance, got {type(opts).__name__}"
        )

    values: List[Tuple[str, str]] = []
    for name, field_info in type(opts).model_fields.items():
        param = _query_param(field_info)
        if param is None:
            continue
        value = getattr(opts, name)
        if param.omitempty and _is_empty(value):
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            for item in value:
                _encode_scalar(param.name, item, values)
        else:
            _encode_scalar(param.name, value, values)

    return sorted(values, key=lambda pair: pair[0])


def add_options(path: str, opts: Optional[BaseModel]) -> str:
    """
    Append the query string built from opts to path.
    Returns path unchanged when opts is None; an existing query on path is replaced.
    """
    if opts is None:
        return path

    pairs = encode_options(opts)
    base = path.split("?", 1)[0]
    if not pairs:
        return base
    return f"{base}?{httpx.QueryParams(pairs)}"


__all__ = ["add_options", "encode_options"]
