"""The built schema: every resolved node plus the Query and Mutation roots."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from graphql import GraphQLSchema, print_schema, validate_schema

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from graphql import GraphQLError, GraphQLNamedType, GraphQLObjectType


class Schema:
    """Immutable result of a successful build.

    Wraps a ``graphql.GraphQLSchema`` made from the two roots and every
    registered type, including types no root field reaches.
    """

    __slots__ = ("_graphql_schema", "_mutation", "_query", "_type_map")

    def __init__(
        self,
        type_map: Mapping[str, GraphQLNamedType],
        *,
        query: GraphQLObjectType,
        mutation: GraphQLObjectType,
    ) -> None:
        self._type_map = MappingProxyType(dict(type_map))
        self._query = query
        self._mutation = mutation
        self._graphql_schema = GraphQLSchema(
            query=query,
            mutation=mutation,
            types=list(self._type_map.values()),
        )

    @property
    def type_map(self) -> Mapping[str, GraphQLNamedType]:
        """Registered types by name; built-in scalars are not included."""
        return self._type_map

    @property
    def query(self) -> GraphQLObjectType:
        return self._query

    @property
    def mutation(self) -> GraphQLObjectType:
        return self._mutation

    @property
    def graphql_schema(self) -> GraphQLSchema:
        """Schema for graphql-core execution, validation and printing."""
        return self._graphql_schema

    def __getitem__(self, name: str) -> GraphQLNamedType:
        return self._type_map[name]

    def __contains__(self, name: object) -> bool:
        return name in self._type_map

    def __iter__(self) -> Iterator[str]:
        return iter(self._type_map)

    def __len__(self) -> int:
        return len(self._type_map)

    def __repr__(self) -> str:
        return f"Schema(types={list(self._type_map)})"

    def print(self) -> str:
        """Render the schema in GraphQL SDL."""
        return print_schema(self._graphql_schema)

    def validate(self) -> list[GraphQLError]:
        """Run GraphQL type system validation; returns the errors found."""
        return list(validate_schema(self._graphql_schema))
