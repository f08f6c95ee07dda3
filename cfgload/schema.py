"""
Record schemas for cfgload.

Provides the ConfigRecord base model and record_model(), which compiles a
dict-like schema into a ConfigRecord subclass.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, create_model


class ConfigRecord(BaseModel):
    """
    Base class for decoded configuration records.

    Records are strict (no silent type coercion), reject unknown fields, and
    are immutable once decoded.
    """

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


def record_model(name: str, schema: dict[str, Any]) -> type[ConfigRecord]:
    """
    Compile a dict-like schema to a ConfigRecord subclass.

    Args:
        name: Name of the generated model class
        schema: Mapping of field name to field spec

    Field specs:
        str                 -> required str
        (int, 8080)         -> int, defaults to 8080
        [str]               -> required list[str]
        {"host": str, ...}  -> required nested record

    Usage:
        Guideline = record_model("Guideline", {"field": str})
        Service = record_model("Service", {
            "name": str,
            "port": (int, 8080),
            "tags": ([str], []),
            "owner": {"team": str},
        })
    """
    if not isinstance(schema, dict):
        raise TypeError("Schema must be a dict")

    fields: dict[str, Any] = {}
    for key, spec in schema.items():
        # pydantic treats underscore names as private attributes, not fields
        if key.startswith("_"):
            raise ValueError(f"Field {key!r}: names must not start with '_'")
        if isinstance(spec, tuple):
            if len(spec) != 2:
                raise ValueError(f"Field {key!r}: expected (type, default) tuple")
            inner, default = spec
            fields[key] = (_field_type(f"{name}_{key}", inner), default)
        else:
            fields[key] = (_field_type(f"{name}_{key}", spec), ...)

    return create_model(name, __base__=ConfigRecord, **fields)


def _field_type(name: str, spec: Any) -> Any:
    """Resolve a single field spec to a Python/pydantic type."""
    if isinstance(spec, dict):
        return record_model(name, spec)

    if isinstance(spec, list):
        if len(spec) != 1:
            raise ValueError("List field spec must have exactly one item type")
        item_type = _field_type(name, spec[0])
        return list[item_type]  # type: ignore[valid-type]

    if isinstance(spec, type) or spec is Any:
        return spec

    raise TypeError(f"Cannot convert {type(spec).__name__} to a field type")
