from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import Any, List

from pydantic import BaseModel

from .values import Date, Time, format_timestamp


def stringify(value: Any) -> str:
    """
    Deterministic debug rendering of models and values.
    - None renders as <nil>; None fields of a model are skipped
    - Models render as ClassName{field:value, ...} in declaration order
    - Dates, times and timestamps render inside braces in their wire form
    """
    parts: List[str] = []
    _write(parts, value)
    return "".join(parts)


def _write(out: List[str], value: Any) -> None:
    if value is None:
        out.append("<nil>")
    elif isinstance(value, Enum):
        _write(out, value.value)
    elif isinstance(value, str):
        out.append(f'"{value}"')
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, _dt.datetime):
        out.append("{" + format_timestamp(value) + "}")
    elif isinstance(value, (Date, Time)):
        out.append("{" + str(value) + "}")
    elif isinstance(value, _dt.date):
        out.append("{" + value.isoformat() + "}")
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, item in enumerate(value):
            if i:
                out.append(" ")
            _write(out, item)
        out.append("]")
    elif isinstance(value, BaseModel):
        _write_model(out, value)
    else:
        out.append(str(value))


def _write_model(out: List[str], model: BaseModel) -> None:
    out.append(type(model).__name__ + "{")
    sep = False
    for name in type(model).model_fields:
        field_value = getattr(model, name)
        if field_value is None:
            continue
        if sep:
            out.append(", ")
        sep = True
        out.append(name + ":")
        _write(out, field_value)
    out.append("}")


__all__ = ["stringify"]
