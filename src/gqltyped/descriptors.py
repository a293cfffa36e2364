"""Type descriptors: nullability and list wrapping around a type name."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TypeDescriptor:
    """Reference to a type from a field, argument or resolver result.

    A string ``type`` names a scalar or registered type. A nested descriptor
    denotes a list whose elements are described by it:

        TypeDescriptor("String")                          → String
        TypeDescriptor("String", nullable=False)          → String!
        TypeDescriptor(TypeDescriptor("Int", False))      → [Int!]
    """

    type: str | TypeDescriptor
    nullable: bool = True

    def __post_init__(self) -> None:
        """Validate the descriptor shape."""
        if not isinstance(self.type, str | TypeDescriptor):
            msg = (
                "Descriptor type must be a type name or a nested descriptor, "
                f"got {type(self.type).__name__}"
            )
            raise TypeError(msg)
        if isinstance(self.type, str) and not self.type:
            msg = "Descriptor type name must not be empty"
            raise ValueError(msg)
        if not isinstance(self.nullable, bool):
            msg = f"Descriptor nullable must be a bool, got {self.nullable!r}"
            raise TypeError(msg)

    @property
    def is_list(self) -> bool:
        """Whether this descriptor wraps a list element descriptor."""
        return isinstance(self.type, TypeDescriptor)

    @property
    def named_type(self) -> str:
        """Innermost type name, with all list wrapping removed."""
        inner = self.type
        while isinstance(inner, TypeDescriptor):
            inner = inner.type
        return inner


def named(name: str, *, nullable: bool = True) -> TypeDescriptor:
    """Describe a named type."""
    return TypeDescriptor(name, nullable=nullable)


def list_of(
    element: TypeDescriptor | str,
    *,
    nullable: bool = True,
) -> TypeDescriptor:
    """Describe a list of ``element``; a bare name is a nullable element."""
    if isinstance(element, str):
        element = TypeDescriptor(element)
    return TypeDescriptor(element, nullable=nullable)


def non_null(descriptor: TypeDescriptor | str) -> TypeDescriptor:
    """Return ``descriptor`` with the outermost level made non-null."""
    if isinstance(descriptor, str):
        return TypeDescriptor(descriptor, nullable=False)
    return TypeDescriptor(descriptor.type, nullable=False)


def coerce_descriptor(
    value: TypeDescriptor | Mapping[str, Any] | str,
) -> TypeDescriptor:
    """Accept a descriptor, a bare type name, or the mapping form.

    The mapping form is ``{"nullable": ..., "type": ...}``. A missing or
    ``None`` ``nullable`` means nullable, as does a bare name. Nested ``type``
    mappings are coerced recursively.

    Raises:
        KeyError: If a mapping has no ``type`` key
        TypeError: If the value is not a descriptor, name or mapping

    """
    if isinstance(value, TypeDescriptor):
        return value
    if isinstance(value, str):
        return TypeDescriptor(value)
    if not isinstance(value, Mapping):
        msg = (
            "Expected a TypeDescriptor or a mapping with a 'type' key, "
            f"got {type(value).__name__}"
        )
        raise TypeError(msg)
    if "type" not in value:
        msg = f"Missing required 'type' key in type descriptor {dict(value)!r}"
        raise KeyError(msg)

    inner = value["type"]
    if isinstance(inner, Mapping | TypeDescriptor):
        inner = coerce_descriptor(inner)
    nullable = value.get("nullable")
    return TypeDescriptor(inner, nullable=True if nullable is None else nullable)
