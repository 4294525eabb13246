"""Identifier naming for generated declarations."""

import re
from typing import Protocol, runtime_checkable

from .config import UrqlPluginConfig
from .ir import OperationType

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z]|[0-9]|\b|$)|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def pascal_case(name: str) -> str:
    """Convert camelCase, PascalCase or SCREAMING words to PascalCase.

    Underscore-separated segments are converted independently and the
    underscores are kept, so ``get_user`` becomes ``Get_User``.
    """
    segments = []
    for segment in name.split("_"):
        words = _WORD_RE.findall(segment)
        segments.append("".join(word[0].upper() + word[1:].lower() for word in words))
    return "_".join(segments)


@runtime_checkable
class NamingConvention(Protocol):
    """Protocol for turning raw operation names into identifiers."""

    def convert_name(self, raw: str, suffix: str = "", use_types_prefix: bool = True) -> str:
        """Return a valid identifier for ``raw`` with ``suffix`` appended."""
        ...

    def get_operation_suffix(self, name: str, operation_type: OperationType) -> str:
        """Return the suffix naming an operation of the given kind."""
        ...


class DefaultNamingConvention:
    """PascalCase naming driven by the run configuration.

    Example:
        naming = DefaultNamingConvention(UrqlPluginConfig())
        naming.convert_name("getUser", suffix="Query")  # 'GetUserQuery'
    """

    def __init__(self, config: UrqlPluginConfig | None = None):
        self.config = config or UrqlPluginConfig()

    def convert_name(self, raw: str, suffix: str = "", use_types_prefix: bool = True) -> str:
        prefix = self.config.types_prefix if use_types_prefix else ""
        return f"{prefix}{pascal_case(raw)}{suffix}"

    def get_operation_suffix(self, name: str, operation_type: OperationType) -> str:
        suffix = OperationType(operation_type).value
        if self.config.omit_operation_suffix:
            return ""
        if self.config.dedupe_operation_suffix and name.lower().endswith(suffix.lower()):
            return ""
        return suffix
