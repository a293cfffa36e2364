"""Schema builder: accumulate definitions, then resolve them all at once."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from gqltyped.definitions import TypeDefinition
from gqltyped.errors import (
    DuplicateNameError,
    SchemaValidationError,
    UnsupportedKindError,
)
from gqltyped.materialize import MATERIALIZED_KINDS
from gqltyped.resolution import BUILTIN_SCALARS, IncompleteSchema

if TYPE_CHECKING:
    from gqltyped.definitions import AnyTypeDefinition
    from gqltyped.schema import Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaBuilder:
    """Immutable registry of type definitions keyed by name.

    ``register`` returns a new builder, so a builder can be shared and
    extended along different paths without affecting the others:

        base = SchemaBuilder.create().register(user, query)
        with_admin = base.register(admin_query)  # base is unchanged
    """

    definitions: Mapping[str, AnyTypeDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Keep the registry read-only."""
        object.__setattr__(
            self,
            "definitions",
            MappingProxyType(dict(self.definitions)),
        )

    @classmethod
    def create(cls) -> SchemaBuilder:
        """Start with an empty registry."""
        return cls()

    @property
    def names(self) -> tuple[str, ...]:
        """Registered type names, in registration order."""
        return tuple(self.definitions)

    def __contains__(self, name: object) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)

    def register(self, *definitions: AnyTypeDefinition) -> SchemaBuilder:
        """Return a builder with ``definitions`` added, replacing same-named ones.

        Nothing is resolved here, so definitions may reference types that
        are registered later.

        Raises:
            DuplicateNameError: If two different definitions in this call
                share a name
            TypeError: If an argument is not a type definition
            UnsupportedKindError: If a definition has a kind that cannot be
                built into a GraphQL type

        """
        batch: dict[str, AnyTypeDefinition] = {}
        for definition in definitions:
            if not isinstance(definition, TypeDefinition):
                msg = (
                    "register() expects type definitions, "
                    f"got {type(definition).__name__}"
                )
                raise TypeError(msg)
            if definition.kind not in MATERIALIZED_KINDS:
                raise UnsupportedKindError(
                    definition.name,
                    definition.kind,
                    MATERIALIZED_KINDS,
                )
            existing = batch.get(definition.name)
            if existing is not None and existing is not definition:
                raise DuplicateNameError(
                    definition.name,
                    (existing.kind, definition.kind),
                )
            batch[definition.name] = definition

        if replaced := sorted(batch.keys() & self.definitions.keys()):
            logger.debug("Replacing registered types: %s", ", ".join(replaced))
        logger.debug("Registered %d type definitions", len(batch))
        return SchemaBuilder({**self.definitions, **batch})

    def build(self, *, validate: bool = False) -> Schema:
        """Resolve every registered type and assemble the schema.

        All registered types are resolved, whether or not a root reaches
        them. Each build creates new type nodes.

        Args:
            validate: Also run GraphQL type system validation on the result

        Raises:
            UnknownTypeError: If a reference names an unregistered type
            KindMismatchError: If a reference names a type of the wrong kind
            MissingRootTypeError: If Query or Mutation is missing or not an
                object type; checked after every other type has resolved
            SchemaValidationError: If ``validate`` is set and validation fails

        """
        incomplete = IncompleteSchema(self.definitions)
        for name in self.definitions:
            if name in BUILTIN_SCALARS:
                logger.warning(
                    "Registered type %s is shadowed by the built-in scalar",
                    name,
                )
                continue
            incomplete.get_named_type(name)

        schema = incomplete.assume_complete()
        if validate and (errors := schema.validate()):
            raise SchemaValidationError(errors)

        logger.info("Built schema with %d types", len(schema))
        return schema


create = SchemaBuilder.create
