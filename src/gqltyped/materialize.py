"""Translate type definitions into graphql-core type nodes.

Object, interface, input and union nodes receive their bodies as deferred
thunks from the resolving ``IncompleteSchema``; scalar and enum nodes refer
to no other type and are built complete.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
    Undefined,
)

from gqltyped.definitions import (
    EnumType,
    InputType,
    InterfaceType,
    ObjectType,
    ScalarType,
    UnionType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from graphql import GraphQLNamedType

    from gqltyped.definitions import AnyTypeDefinition, Field, InputValue, Resolver
    from gqltyped.resolution import IncompleteSchema

logger = logging.getLogger(__name__)

_NODE_KINDS: tuple[tuple[type[GraphQLNamedType], str], ...] = (
    (GraphQLObjectType, ObjectType.kind),
    (GraphQLInterfaceType, InterfaceType.kind),
    (GraphQLScalarType, ScalarType.kind),
    (GraphQLEnumType, EnumType.kind),
    (GraphQLInputObjectType, InputType.kind),
    (GraphQLUnionType, UnionType.kind),
)

MATERIALIZED_KINDS: frozenset[str] = frozenset(kind for _, kind in _NODE_KINDS)


def kind_of(node: GraphQLNamedType) -> str:
    """Definition kind corresponding to a graphql-core named type."""
    for node_type, kind in _NODE_KINDS:
        if isinstance(node, node_type):
            return kind
    msg = f"Not a named GraphQL type: {node!r}"
    raise TypeError(msg)


def materialize(
    definition: AnyTypeDefinition,
    incomplete: IncompleteSchema,
) -> GraphQLNamedType:
    """Create the node for ``definition``; nested types resolve lazily."""
    match definition:
        case ObjectType():
            return _object_type(definition, incomplete)
        case InterfaceType():
            return _interface_type(definition, incomplete)
        case UnionType():
            return _union_type(definition, incomplete)
        case InputType():
            return _input_type(definition, incomplete)
        case EnumType():
            return _enum_type(definition)
        case ScalarType():
            return _scalar_type(definition)
    msg = f"Cannot materialize {type(definition).__name__}"
    raise TypeError(msg)


def _object_type(
    definition: ObjectType,
    incomplete: IncompleteSchema,
) -> GraphQLObjectType:
    name = definition.name

    def fields() -> dict[str, GraphQLField]:
        resolved = _output_fields(name, definition.fields, incomplete)
        for key, resolver in definition.resolvers.items():
            if key in resolved:
                logger.debug("Resolver replaces plain field %s.%s", name, key)
            resolved[key] = _resolver_field(name, key, resolver, incomplete)
        return resolved

    return GraphQLObjectType(
        name,
        fields=incomplete.defer(fields),
        interfaces=incomplete.defer(
            lambda: _interfaces(name, definition.interfaces, incomplete),
        ),
        is_type_of=definition.is_type_of,
        description=definition.description,
    )


def _interface_type(
    definition: InterfaceType,
    incomplete: IncompleteSchema,
) -> GraphQLInterfaceType:
    name = definition.name
    return GraphQLInterfaceType(
        name,
        fields=incomplete.defer(
            lambda: _output_fields(name, definition.fields, incomplete),
        ),
        interfaces=incomplete.defer(
            lambda: _interfaces(name, definition.interfaces, incomplete),
        ),
        resolve_type=definition.resolve_type,
        description=definition.description,
    )


def _union_type(
    definition: UnionType,
    incomplete: IncompleteSchema,
) -> GraphQLUnionType:
    name = definition.name

    def types() -> list[GraphQLObjectType]:
        return [incomplete.get_object(member, name) for member in definition.types]

    return GraphQLUnionType(
        name,
        types=incomplete.defer(types),
        resolve_type=definition.resolve_type,
        description=definition.description,
    )


def _input_type(
    definition: InputType,
    incomplete: IncompleteSchema,
) -> GraphQLInputObjectType:
    name = definition.name

    def fields() -> dict[str, GraphQLInputField]:
        return {
            key: GraphQLInputField(
                incomplete.get_input_type(field.type, f"{name}.{key}"),
                default_value=field.default_value,
                description=field.description,
                deprecation_reason=field.deprecation_reason,
            )
            for key, field in definition.fields.items()
        }

    return GraphQLInputObjectType(
        name,
        fields=incomplete.defer(fields),
        description=definition.description,
    )


def _enum_type(definition: EnumType) -> GraphQLEnumType:
    values = {
        key: GraphQLEnumValue(
            key if value.value is Undefined else value.value,
            description=value.description,
            deprecation_reason=value.deprecation_reason,
        )
        for key, value in definition.values.items()
    }
    return GraphQLEnumType(
        definition.name,
        values,
        description=definition.description,
    )


def _scalar_type(definition: ScalarType) -> GraphQLScalarType:
    return GraphQLScalarType(
        definition.name,
        serialize=definition.serialize,
        parse_value=definition.parse_value,
        parse_literal=definition.parse_literal,
        description=definition.description,
        specified_by_url=definition.specified_by_url,
    )


def _interfaces(
    owner: str,
    names: tuple[str, ...],
    incomplete: IncompleteSchema,
) -> list[GraphQLInterfaceType]:
    return [incomplete.get_interface(name, owner) for name in names]


def _output_fields(
    owner: str,
    fields: Mapping[str, Field],
    incomplete: IncompleteSchema,
) -> dict[str, GraphQLField]:
    return {
        key: GraphQLField(
            incomplete.get_output_type(field.type, f"{owner}.{key}"),
            description=field.description,
            deprecation_reason=field.deprecation_reason,
        )
        for key, field in fields.items()
    }


def _resolver_field(
    owner: str,
    key: str,
    resolver: Resolver,
    incomplete: IncompleteSchema,
) -> GraphQLField:
    location = f"{owner}.{key}"
    return GraphQLField(
        incomplete.get_output_type(resolver.type, location),
        args=_arguments(location, resolver.args, incomplete),
        resolve=resolver.resolve,
        description=resolver.description,
        deprecation_reason=resolver.deprecation_reason,
    )


def _arguments(
    location: str,
    args: Mapping[str, InputValue],
    incomplete: IncompleteSchema,
) -> dict[str, GraphQLArgument]:
    return {
        key: GraphQLArgument(
            incomplete.get_input_type(arg.type, f"{location}({key})"),
            default_value=arg.default_value,
            description=arg.description,
            deprecation_reason=arg.deprecation_reason,
        )
        for key, arg in args.items()
    }
