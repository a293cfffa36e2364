"""Serialization of type descriptors to builtins, JSON and GraphQL notation."""

from __future__ import annotations

import json
from typing import Any

from gqltyped.descriptors import TypeDescriptor


def to_dict(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Serialize a descriptor to its mapping form.

    ``nullable`` is always written, so the output never depends on the
    default for a missing key.
    """
    inner = descriptor.type
    return {
        "nullable": descriptor.nullable,
        "type": inner if isinstance(inner, str) else to_dict(inner),
    }


def from_dict(data: dict[str, Any]) -> TypeDescriptor:
    """Deserialize a descriptor from its mapping form.

    A missing or null ``nullable`` means nullable.

    Raises:
        KeyError: If a level is missing the 'type' key
        TypeError: If a value has the wrong type

    """
    if not isinstance(data, dict):
        msg = f"Expected a descriptor mapping, got {type(data).__name__}"
        raise TypeError(msg)
    if "type" not in data:
        msg = f"Missing required 'type' field in descriptor data {data!r}"
        raise KeyError(msg)

    inner = data["type"]
    if isinstance(inner, dict):
        inner = from_dict(inner)
    nullable = data.get("nullable")
    return TypeDescriptor(inner, nullable=True if nullable is None else nullable)


def to_json(descriptor: TypeDescriptor, *, indent: int | None = None) -> str:
    """Serialize a descriptor to a JSON string (compact unless ``indent``)."""
    return json.dumps(to_dict(descriptor), indent=indent)


def from_json(s: str) -> TypeDescriptor:
    """Deserialize a descriptor from a JSON string."""
    return from_dict(json.loads(s))


def describe(descriptor: TypeDescriptor) -> str:
    """Render a descriptor in GraphQL notation, e.g. ``[String!]!``."""
    inner = descriptor.type
    rendered = inner if isinstance(inner, str) else f"[{describe(inner)}]"
    return rendered if descriptor.nullable else f"{rendered}!"
