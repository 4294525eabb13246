"""Intermediate Representation (IR) for GraphQL operations.

This module defines dataclasses that describe parsed query, mutation and
subscription definitions in a language-agnostic way, suitable for code
generation. The generator only reads these objects; it never mutates them.
"""

from dataclasses import dataclass, field
from enum import Enum

from graphql import OperationDefinitionNode


class OperationType(str, Enum):
    """Kind of a GraphQL operation, spelled the way generated names use it."""
    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"

    @classmethod
    def from_keyword(cls, keyword: str) -> "OperationType":
        """Map a GraphQL keyword ('query', 'mutation', 'subscription') to a kind."""
        return cls(keyword.capitalize())


@dataclass
class IRVariable:
    """Represents a variable declared by an operation."""
    name: str
    type_name: str
    is_optional: bool = True  # True if nullable (no ! in GraphQL)
    default_value: str | None = None  # Printed GraphQL literal, if any

    @property
    def has_default(self) -> bool:
        return self.default_value is not None


@dataclass
class IROperation:
    """Represents a single operation definition.

    The document variable, result type and variables type are already resolved
    identifiers (e.g. ``GetUserDocument``, ``GetUserQuery`` and
    ``GetUserQueryVariables``); the generator only references them.
    """
    name: str
    operation_type: OperationType
    variables: list[IRVariable] = field(default_factory=list)
    document_variable_name: str = ""
    result_type: str = ""
    variables_type: str = ""
    # Printed document text, including referenced fragments
    source: str | None = None
    # graphql-core node the operation was parsed from
    definition: OperationDefinitionNode | None = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        # Accept plain strings such as "Query"
        self.operation_type = OperationType(self.operation_type)
