"""Errors raised while registering definitions and building a schema.

Every error is fatal to the registration or build that raised it: a build
either produces a fully linked schema or raises. Each error keeps the
offending type name and, where one exists, the location that referenced it
(``"User.friends"``, ``"Query.userById(id)"``) so the faulty definition can be
found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from graphql import GraphQLError


def _location(referenced_by: str | None) -> str:
    return f" (referenced by {referenced_by})" if referenced_by else ""


class SchemaError(ValueError):
    """Base class for schema registration and build errors."""


class UnknownTypeError(SchemaError):
    """A reference names a type that is neither built in nor registered."""

    def __init__(
        self,
        name: str,
        referenced_by: str | None = None,
        available: Iterable[str] = (),
    ) -> None:
        self.name = name
        self.referenced_by = referenced_by
        msg = f"Unknown type '{name}'{_location(referenced_by)}"
        if names := sorted(available):
            msg += f". Registered types: {names}"
        super().__init__(msg)


class KindMismatchError(SchemaError):
    """A reference expects one kind of type but the name resolves to another."""

    def __init__(
        self,
        name: str,
        expected: str,
        actual: str,
        referenced_by: str | None = None,
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        self.referenced_by = referenced_by
        msg = (
            f"Type '{name}' is {_article(actual)} {actual} type, "
            f"expected {_article(expected)} {expected} type{_location(referenced_by)}"
        )
        super().__init__(msg)


class MissingRootTypeError(SchemaError):
    """A required root type is absent or is not an object type."""

    def __init__(self, which: str, actual: str | None = None) -> None:
        self.which = which
        self.actual = actual
        if actual is None:
            msg = f"Root type '{which}' is not registered"
        else:
            msg = f"Root type '{which}' must be an object type, got {actual}"
        super().__init__(msg)


class DuplicateNameError(SchemaError):
    """Two different definitions share a name within one registration."""

    def __init__(self, name: str, kinds: Sequence[str]) -> None:
        self.name = name
        self.kinds = tuple(kinds)
        msg = (
            f"Type name '{name}' is defined more than once in one registration "
            f"(kinds: {', '.join(self.kinds)})"
        )
        super().__init__(msg)


class InvalidNameError(SchemaError):
    """A type, field, argument or enum value name is not a GraphQL name."""

    def __init__(self, name: object, owner: str, reason: str) -> None:
        self.name = name
        self.owner = owner
        msg = f"Invalid name {name!r} for {owner}: {reason}"
        super().__init__(msg)


class UnsupportedKindError(SchemaError):
    """A definition's kind has no GraphQL type to build it into."""

    def __init__(self, name: str, kind: str, supported: Iterable[str]) -> None:
        self.name = name
        self.kind = kind
        msg = (
            f"Type '{name}' has kind '{kind}', which cannot be built into a "
            f"schema. Supported kinds: {', '.join(sorted(supported))}"
        )
        super().__init__(msg)


class SchemaValidationError(SchemaError):
    """The assembled schema failed GraphQL type system validation."""

    def __init__(self, errors: Sequence[GraphQLError]) -> None:
        self.errors = tuple(errors)
        details = "\n".join(f"  - {error.message}" for error in self.errors)
        msg = f"Schema is invalid:\n{details}"
        super().__init__(msg)


_VOWEL_KINDS = frozenset({"enum", "input", "interface", "object", "output"})


def _article(kind: str) -> str:
    return "an" if kind in _VOWEL_KINDS else "a"
