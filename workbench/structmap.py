"""Copy public fields between objects and plain dictionaries."""

from __future__ import annotations

import dataclasses
from typing import Any


def _field_names(obj: Any) -> list[str]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [item.name for item in dataclasses.fields(obj)]
    try:
        return list(vars(obj))
    except TypeError:
        raise TypeError(f"{type(obj).__name__} object has no fields") from None


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def struct_to_map(obj: Any) -> dict[str, Any]:
    """Return the public fields of ``obj`` as a dictionary."""
    return {
        name: getattr(obj, name)
        for name in _field_names(obj)
        if not name.startswith("_")
    }


def map_to_struct(mapping: dict[str, Any], obj: Any) -> Any:
    """Set the public fields of ``obj`` from ``mapping`` and return ``obj``.

    Raises ``AttributeError`` for an unknown or private field and
    ``TypeError`` when a value's type differs from the field's current value.
    """
    names = set(_field_names(obj))
    for name, value in mapping.items():
        if name not in names or name.startswith("_"):
            raise AttributeError(f"{type(obj).__name__} has no settable field {name!r}")
        current = getattr(obj, name)
        if current is not None and type(value) is not type(current):
            raise TypeError(
                f"cannot assign {type(value).__name__} to field {name!r} "
                f"of type {type(current).__name__}"
            )
        setattr(obj, name, value)
    return obj


def describe_fields(obj: Any) -> list[str]:
    """Describe the type name, field count and each field's value of ``obj``.

    Raises ``AttributeError`` when ``obj`` has a private field.
    """
    names = _field_names(obj)
    lines = [f"val name: {type(obj).__name__}", f"Num of Field: {len(names)}"]
    for name in names:
        if name.startswith("_"):
            raise AttributeError(f"cannot read private field {name!r}")
        lines.append(f"name-value: {name} - {_format(getattr(obj, name))}")
    return lines