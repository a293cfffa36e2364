"""gql-typed - declarative GraphQL types assembled into a linked schema."""

from gqltyped.builder import (
    SchemaBuilder,
    create,
)
from gqltyped.definitions import (
    Argument,
    EnumType,
    EnumValue,
    Field,
    InputField,
    InputType,
    InputValue,
    InterfaceType,
    ObjectType,
    Resolver,
    ScalarType,
    TypeDefinition,
    UnionType,
)
from gqltyped.descriptors import (
    TypeDescriptor,
    coerce_descriptor,
    list_of,
    named,
    non_null,
)
from gqltyped.errors import (
    DuplicateNameError,
    InvalidNameError,
    KindMismatchError,
    MissingRootTypeError,
    SchemaError,
    SchemaValidationError,
    UnknownTypeError,
    UnsupportedKindError,
)
from gqltyped.resolution import (
    BUILTIN_SCALARS,
    IncompleteSchema,
    Lazy,
)
from gqltyped.schema import Schema
from gqltyped.serialization import (
    describe,
    from_dict,
    from_json,
    to_dict,
    to_json,
)

__all__ = [
    "BUILTIN_SCALARS",
    # Definitions
    "Argument",
    "DuplicateNameError",
    "EnumType",
    "EnumValue",
    "Field",
    # Resolution
    "IncompleteSchema",
    "InputField",
    "InputType",
    "InputValue",
    "InterfaceType",
    "InvalidNameError",
    "KindMismatchError",
    "Lazy",
    "MissingRootTypeError",
    "ObjectType",
    "Resolver",
    "ScalarType",
    "Schema",
    # Building
    "SchemaBuilder",
    # Errors
    "SchemaError",
    "SchemaValidationError",
    # Descriptors
    "TypeDescriptor",
    "TypeDefinition",
    "UnionType",
    "UnknownTypeError",
    "UnsupportedKindError",
    "coerce_descriptor",
    "create",
    # Serialization
    "describe",
    "from_dict",
    "from_json",
    "list_of",
    "named",
    "non_null",
    "to_dict",
    "to_json",
]
