"""Shared rules for variable requiredness and generic type arguments.

Every renderer goes through these functions so that a component, a hook and
a loader generated for the same operation agree on parameter optionality and
on the order of generic arguments.
"""

from collections.abc import Iterable
from enum import Enum

from .ir import IRVariable, OperationType


class RequirednessPolicy(Enum):
    """How to decide whether a generated variables/options parameter is mandatory."""
    # Components and hooks: any non-nullable variable makes it mandatory
    STRICT = "strict"
    # Loaders and actions: only non-nullable variables without a default count
    LENIENT = "lenient"


def is_variables_required(
    variables: Iterable[IRVariable],
    policy: RequirednessPolicy = RequirednessPolicy.STRICT,
) -> bool:
    """Return True if callers must supply the variables/options parameter.

    Args:
        variables: The operation's declared variables
        policy: STRICT for components and hooks, LENIENT for loaders

    Returns:
        True if at least one variable counts as required under ``policy``
    """
    if policy is RequirednessPolicy.LENIENT:
        return any(not v.is_optional and not v.has_default for v in variables)
    return any(not v.is_optional for v in variables)


def optional_marker(required: bool) -> str:
    """Return the TypeScript optional-parameter marker for a parameter."""
    return "" if required else "?"


def compose_generics(
    operation_type: OperationType,
    result_type: str,
    variables_type: str,
    data_type: str | None = None,
) -> list[str]:
    """Build the ordered generic arguments for an urql component or hook.

    Queries and mutations take ``[result, variables]``. Subscriptions take
    ``[result, data, variables]`` where ``data`` is the accumulated shape the
    subscription handler produces; it defaults to the result type, and
    ``data_type`` lets callers put a type parameter such as ``TData`` there.
    """
    generics = [result_type, variables_type]
    if OperationType(operation_type) is OperationType.SUBSCRIPTION:
        generics.insert(1, data_type or result_type)
    return generics
