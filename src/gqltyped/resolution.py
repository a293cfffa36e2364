"""Lazy type graph resolution.

``IncompleteSchema`` turns type descriptors into linked GraphQL types for one
build. Each named type is materialized at most once: its node is created
with deferred bodies (fields, interfaces, union members) and cached before
any of those bodies run, so a body that refers back to a type under
construction finds the cached node instead of recursing.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
    is_input_type,
    is_output_type,
)

from gqltyped.descriptors import TypeDescriptor
from gqltyped.errors import KindMismatchError, MissingRootTypeError, UnknownTypeError
from gqltyped.materialize import kind_of, materialize
from gqltyped.schema import Schema

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from graphql import GraphQLNamedType, GraphQLType

    from gqltyped.definitions import AnyTypeDefinition

logger = logging.getLogger(__name__)

BUILTIN_TYPES: Final[Mapping[str, GraphQLNamedType]] = {
    "String": GraphQLString,
    "ID": GraphQLID,
    "Boolean": GraphQLBoolean,
    "Int": GraphQLInt,
    "Float": GraphQLFloat,
}
BUILTIN_SCALARS: Final = frozenset(BUILTIN_TYPES)

QUERY: Final = "Query"
MUTATION: Final = "Mutation"


T = TypeVar("T")


class Lazy(Generic[T]):
    """Memoized thunk: the body is computed on the first call only.

    Handed to graphql-core wherever it accepts a thunk, so the node that owns
    it can exist before its body is known.
    """

    __slots__ = ("_compute", "_value")

    def __init__(self, compute: Callable[[], T]) -> None:
        self._compute: Callable[[], T] | None = compute
        self._value: T | None = None

    def __call__(self) -> T:
        if self._compute is not None:
            self._value = self._compute()
            self._compute = None
        return self._value  # type: ignore[return-value]

    @property
    def evaluated(self) -> bool:
        """Whether the body has been computed."""
        return self._compute is None


class IncompleteSchema:
    """Per-build resolution state: the definitions and the nodes made so far.

    Not shared between builds; every build gets a fresh instance and
    therefore fresh nodes.
    """

    def __init__(self, definitions: Mapping[str, AnyTypeDefinition]) -> None:
        self.definitions = definitions
        self.type_map: dict[str, GraphQLNamedType] = {}
        self._pending: deque[Lazy[Any]] = deque()

    def defer(self, compute: Callable[[], T]) -> Lazy[T]:
        """Create a lazy body that ``complete`` will force if nothing else does."""
        lazy = Lazy(compute)
        self._pending.append(lazy)
        return lazy

    def get_type(
        self,
        descriptor: TypeDescriptor,
        referenced_by: str | None = None,
    ) -> GraphQLType:
        """Resolve a descriptor, wrapping in non-null and list as declared."""
        if not descriptor.nullable:
            return GraphQLNonNull(
                self.get_type(TypeDescriptor(descriptor.type), referenced_by),
            )
        if isinstance(descriptor.type, TypeDescriptor):
            return GraphQLList(self.get_type(descriptor.type, referenced_by))
        return self.get_named_type(descriptor.type, referenced_by)

    def get_named_type(
        self,
        name: str,
        referenced_by: str | None = None,
    ) -> GraphQLNamedType:
        """Return the single node for ``name``, materializing it on first use.

        Raises:
            UnknownTypeError: If ``name`` is neither built in nor registered

        """
        if (builtin := BUILTIN_TYPES.get(name)) is not None:
            return builtin
        if (existing := self.type_map.get(name)) is not None:
            return existing

        definition = self.definitions.get(name)
        if definition is None:
            raise UnknownTypeError(name, referenced_by, available=self.definitions)

        logger.debug("Materializing %s type %s", definition.kind, name)
        # Node bodies are deferred, so nothing below recurses before the
        # node is cached.
        node = materialize(definition, self)
        self.type_map[name] = node
        return node

    def get_output_type(
        self,
        descriptor: TypeDescriptor,
        referenced_by: str | None = None,
    ) -> GraphQLType:
        """Resolve a descriptor used as a field or resolver result type."""
        resolved = self.get_type(descriptor, referenced_by)
        if not is_output_type(resolved):
            self._mismatch(descriptor.named_type, "output", referenced_by)
        return resolved

    def get_input_type(
        self,
        descriptor: TypeDescriptor,
        referenced_by: str | None = None,
    ) -> GraphQLType:
        """Resolve a descriptor used as an argument or input field type."""
        resolved = self.get_type(descriptor, referenced_by)
        if not is_input_type(resolved):
            self._mismatch(descriptor.named_type, "input", referenced_by)
        return resolved

    def get_interface(
        self,
        name: str,
        referenced_by: str | None = None,
    ) -> GraphQLInterfaceType:
        """Resolve a name that must denote an interface type."""
        node = self.get_named_type(name, referenced_by)
        if not isinstance(node, GraphQLInterfaceType):
            self._mismatch(name, "interface", referenced_by)
        return node

    def get_object(
        self,
        name: str,
        referenced_by: str | None = None,
    ) -> GraphQLObjectType:
        """Resolve a name that must denote an object type."""
        node = self.get_named_type(name, referenced_by)
        if not isinstance(node, GraphQLObjectType):
            self._mismatch(name, "object", referenced_by)
        return node

    def complete(self) -> None:
        """Force every deferred body, surfacing resolution errors directly.

        graphql-core would otherwise evaluate the bodies itself and re-raise
        any failure as a generic ``TypeError``.
        """
        while self._pending:
            self._pending.popleft()()

    def assume_complete(self) -> Schema:
        """Check the root types and freeze the resolved nodes into a Schema.

        Raises:
            MissingRootTypeError: If Query or Mutation is absent or not an object

        """
        self.complete()
        roots = []
        for which in (QUERY, MUTATION):
            node = self.type_map.get(which)
            if not isinstance(node, GraphQLObjectType):
                actual = None if node is None else kind_of(node)
                raise MissingRootTypeError(which, actual)
            roots.append(node)

        query, mutation = roots
        return Schema(self.type_map, query=query, mutation=mutation)

    def _mismatch(
        self,
        name: str,
        expected: str,
        referenced_by: str | None,
    ) -> NoReturn:
        node = self.get_named_type(name, referenced_by)
        raise KindMismatchError(name, expected, kind_of(node), referenced_by)
