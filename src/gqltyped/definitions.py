"""Declarative type definitions registered with a schema builder.

Definitions are plain immutable data. They name other types only through
type descriptors and type names, so they can be declared in any order and
refer to each other freely; linking happens when a schema is built.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, TypeAlias, TypeVar, dataclass_transform

from graphql import GraphQLError, Undefined, assert_enum_value_name, assert_name

from gqltyped.descriptors import TypeDescriptor, coerce_descriptor
from gqltyped.errors import InvalidNameError


def _check_name(
    name: object,
    owner: str,
    check: Callable[[str], str] = assert_name,
) -> None:
    """Reject names that are not valid GraphQL names.

    Raises:
        InvalidNameError: If ``name`` is empty, not a string, or not a name

    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError(name, owner, "must be a non-empty string")
    try:
        check(name)
    except GraphQLError as error:
        raise InvalidNameError(name, owner, error.message) from error


V = TypeVar("V")


def _freeze_mapping(
    owner: object,
    attr: str,
    coerce: Callable[[Any], V],
    check: Callable[[str], str] = assert_name,
) -> None:
    """Replace a mapping attribute with a read-only copy of coerced values."""
    value = getattr(owner, attr)
    label = f"{getattr(owner, 'name', type(owner).__name__)}.{attr}"
    if not isinstance(value, Mapping):
        msg = f"{label} must be a mapping, got {value!r}"
        raise TypeError(msg)
    for key in value:
        _check_name(key, label, check)
    frozen = MappingProxyType({key: coerce(item) for key, item in value.items()})
    object.__setattr__(owner, attr, frozen)


def _freeze_names(owner: object, attr: str) -> None:
    value = getattr(owner, attr)
    if isinstance(value, str):
        msg = (
            f"{type(owner).__name__}.{attr} must be a sequence of names, "
            f"got {value!r}"
        )
        raise TypeError(msg)
    object.__setattr__(owner, attr, tuple(value))


@dataclass(frozen=True)
class Field:
    """Plain output field of an object or interface type."""

    type: TypeDescriptor
    description: str | None = None
    deprecation_reason: str | None = None

    def __post_init__(self) -> None:
        """Coerce mapping-form descriptors."""
        object.__setattr__(self, "type", coerce_descriptor(self.type))

    @classmethod
    def coerce(cls, value: Field | Mapping[str, Any]) -> Field:
        """Accept a Field or its keyword mapping."""
        return value if isinstance(value, cls) else cls(**value)


@dataclass(frozen=True)
class InputValue:
    """Argument of a resolver field, or field of an input type."""

    type: TypeDescriptor
    description: str | None = None
    deprecation_reason: str | None = None
    default_value: Any = Undefined

    def __post_init__(self) -> None:
        """Coerce mapping-form descriptors."""
        object.__setattr__(self, "type", coerce_descriptor(self.type))

    @classmethod
    def coerce(cls, value: InputValue | Mapping[str, Any]) -> InputValue:
        """Accept an InputValue or its keyword mapping."""
        return value if isinstance(value, cls) else cls(**value)


Argument = InputValue
InputField = InputValue


@dataclass(frozen=True)
class Resolver:
    """Output field backed by a resolve function.

    ``resolve`` is handed to the GraphQL runtime untouched; it is never
    called while building a schema.
    """

    type: TypeDescriptor
    resolve: Callable[..., Any] | None = None
    args: Mapping[str, InputValue] = field(default_factory=dict)
    description: str | None = None
    deprecation_reason: str | None = None

    def __post_init__(self) -> None:
        """Coerce descriptors and freeze the argument mapping."""
        object.__setattr__(self, "type", coerce_descriptor(self.type))
        _freeze_mapping(self, "args", InputValue.coerce)


@dataclass(frozen=True)
class EnumValue:
    """One enum value; its runtime value defaults to its name."""

    description: str | None = None
    deprecation_reason: str | None = None
    value: Any = Undefined

    @classmethod
    def coerce(cls, value: EnumValue | Mapping[str, Any]) -> EnumValue:
        """Accept an EnumValue or its keyword mapping."""
        return value if isinstance(value, cls) else cls(**value)


@dataclass(frozen=True, kw_only=True, eq=False)
@dataclass_transform(frozen_default=True, kw_only_default=True, eq_default=False)
class TypeDefinition:
    """Base for named type definitions, keyed by ``name`` in a registry.

    Definitions compare and hash by identity: two separately declared
    definitions are different types even when their fields agree.
    """

    kind: ClassVar[str]
    registry: ClassVar[dict[str, type[TypeDefinition]]] = {}

    name: str
    description: str | None = None

    def __init_subclass__(cls, kind: str | None = None) -> None:
        """Register definition subclass with automatic kind derivation."""
        dataclass(frozen=True, kw_only=True, eq=False)(cls)
        cls.kind = kind if kind is not None else cls.__name__.lower()

        if (existing := TypeDefinition.registry.get(cls.kind)) and existing is not cls:
            msg = (
                f"Kind '{cls.kind}' already registered to {existing.__name__}. "
                "Choose a different kind."
            )
            raise ValueError(msg)

        TypeDefinition.registry[cls.kind] = cls

    def __post_init__(self) -> None:
        """Validate the name."""
        _check_name(self.name, type(self).__name__)


class ObjectType(TypeDefinition, kind="object"):
    """Object type: plain fields plus resolver-backed fields.

    A resolver and a plain field with the same name resolve to the resolver.
    """

    interfaces: tuple[str, ...] = ()
    fields: Mapping[str, Field] = field(default_factory=dict)
    resolvers: Mapping[str, Resolver] = field(default_factory=dict)
    is_type_of: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        """Normalize collections."""
        super().__post_init__()
        _freeze_names(self, "interfaces")
        _freeze_mapping(self, "fields", Field.coerce)
        _freeze_mapping(self, "resolvers", _as_resolver)


class InterfaceType(TypeDefinition, kind="interface"):
    """Interface type; may itself implement other interfaces."""

    interfaces: tuple[str, ...] = ()
    fields: Mapping[str, Field] = field(default_factory=dict)
    resolve_type: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        """Normalize collections."""
        super().__post_init__()
        _freeze_names(self, "interfaces")
        _freeze_mapping(self, "fields", Field.coerce)


class ScalarType(TypeDefinition, kind="scalar"):
    """Custom scalar; the coercion functions are passed through as-is."""

    serialize: Callable[[Any], Any] | None = None
    parse_value: Callable[[Any], Any] | None = None
    parse_literal: Callable[..., Any] | None = None
    specified_by_url: str | None = None


class EnumType(TypeDefinition, kind="enum"):
    """Enum type."""

    values: Mapping[str, EnumValue]

    def __post_init__(self) -> None:
        """Normalize values."""
        super().__post_init__()
        _freeze_mapping(self, "values", EnumValue.coerce, assert_enum_value_name)


class InputType(TypeDefinition, kind="input"):
    """Input object type."""

    fields: Mapping[str, InputValue]

    def __post_init__(self) -> None:
        """Normalize fields."""
        super().__post_init__()
        _freeze_mapping(self, "fields", InputValue.coerce)


class UnionType(TypeDefinition, kind="union"):
    """Union of object types, listed by name."""

    types: tuple[str, ...] = ()
    resolve_type: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        """Normalize member names."""
        super().__post_init__()
        _freeze_names(self, "types")


AnyTypeDefinition: TypeAlias = (
    ObjectType | InterfaceType | ScalarType | EnumType | InputType | UnionType
)


def _as_resolver(value: Resolver | Mapping[str, Any]) -> Resolver:
    return value if isinstance(value, Resolver) else Resolver(**value)
