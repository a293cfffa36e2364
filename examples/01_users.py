"""
User Lookup Example
===================

Declaring a small GraphQL schema across several modules' worth of
definitions:
- Object types with plain fields and resolver-backed fields
- A resolver with arguments and a deprecation
- An enum registered in a separate call
- Building, printing and executing the schema
"""

from typing import Any

from graphql import graphql_sync

from gqltyped import Argument, EnumType, EnumValue, Field, ObjectType, Resolver, create

# ============================================================================
# Data
# ============================================================================

USERS = {
    "1": {"id": "1", "name": "ada", "email": "ada@example.com"},
}


# ============================================================================
# Definitions
# ============================================================================

def resolve_email(user: dict[str, str], info: Any) -> str | None:
    # email is only visible to authorized callers
    return user["email"] if info.context.get("authorized") else None


User = ObjectType(
    name="User",
    fields={
        "id": Field({"nullable": False, "type": "ID"}),
        "name": Field({"type": "String"}, description="login name"),
    },
    resolvers={
        "email": Resolver(type={"type": "String"}, resolve=resolve_email),
    },
)

Query = ObjectType(
    name="Query",
    resolvers={
        "userById": Resolver(
            type={"type": "User"},
            args={
                "id": Argument(
                    {"nullable": False, "type": "ID"},
                    description="user id",
                ),
            },
            resolve=lambda _parent, _info, **args: USERS.get(args["id"]),
            deprecation_reason="use user instead",
        ),
    },
)

Mutation = ObjectType(
    name="Mutation",
    resolvers={
        "rename": Resolver(
            type={"type": "User"},
            args={
                "id": Argument({"nullable": False, "type": "ID"}),
                "name": Argument({"nullable": False, "type": "String"}),
            },
            resolve=lambda _parent, _info, **args: {
                **USERS[args["id"]],
                "name": args["name"],
            },
        ),
    },
)

Role = EnumType(
    name="Role",
    values={"ADMIN": EnumValue(), "GUEST": EnumValue(deprecation_reason="unused")},
    description="access level",
)


# ============================================================================
# Build and run
# ============================================================================

if __name__ == "__main__":
    builder = create().register(Query, User, Mutation).register(Role)
    schema = builder.build(validate=True)

    print(schema.print())

    result = graphql_sync(
        schema.graphql_schema,
        '{ userById(id: "1") { id name email } }',
        context_value={"authorized": True},
    )
    print(result.data)
